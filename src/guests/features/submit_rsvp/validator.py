from src.guests.dtos import (
    MissingPlusOneNameError,
    PlusOneWithoutPrincipalError,
    RsvpSubmissionDTO,
)


def validate_submission(submission: RsvpSubmissionDTO) -> None:
    """
    Check business rules before anything is written.
    Rules are checked in order and the first violation is raised.

    Raises:
        PlusOneWithoutPrincipalError: a plus one is attending without their guest.
        MissingPlusOneNameError: a plus one is attending but has no name.
    """
    attending_ids = set(submission.attending_ids)
    if any(guest_id not in attending_ids for guest_id in submission.plus_one_attending_ids):
        raise PlusOneWithoutPrincipalError()

    if submission.plus_one_attending_ids and not submission.plus_one_name.strip():
        raise MissingPlusOneNameError()
