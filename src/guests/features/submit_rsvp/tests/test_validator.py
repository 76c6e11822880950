import pytest

from src.guests.dtos import (
    MissingPlusOneNameError,
    PlusOneWithoutPrincipalError,
    RsvpSubmissionDTO,
)
from src.guests.features.submit_rsvp.validator import validate_submission


def test_valid_submission_passes():
    submission = RsvpSubmissionDTO(
        guest_ids=["g1", "g2"],
        attending_ids=["g1"],
        plus_one_attending_ids=["g1"],
        plus_one_name="Sam",
    )

    assert validate_submission(submission) is None


def test_nobody_attending_passes():
    assert validate_submission(RsvpSubmissionDTO(guest_ids=["g1", "g2"])) is None


def test_plus_one_without_principal():
    submission = RsvpSubmissionDTO(
        guest_ids=["g1", "g2"],
        attending_ids=["g1"],
        plus_one_attending_ids=["g2"],
        plus_one_name="Sam",
    )

    with pytest.raises(PlusOneWithoutPrincipalError):
        validate_submission(submission)


@pytest.mark.parametrize("plus_one_name", ["", "   "])
def test_missing_plus_one_name(plus_one_name):
    submission = RsvpSubmissionDTO(
        guest_ids=["g1"],
        attending_ids=["g1"],
        plus_one_attending_ids=["g1"],
        plus_one_name=plus_one_name,
    )

    with pytest.raises(MissingPlusOneNameError):
        validate_submission(submission)


def test_principal_rule_is_checked_first():
    submission = RsvpSubmissionDTO(
        guest_ids=["g1"],
        plus_one_attending_ids=["g1"],
        plus_one_name="",
    )

    with pytest.raises(PlusOneWithoutPrincipalError):
        validate_submission(submission)


def test_plus_one_name_without_plus_one_is_fine():
    submission = RsvpSubmissionDTO(guest_ids=["g1"], attending_ids=["g1"], plus_one_name="Sam")

    assert validate_submission(submission) is None
