import logging

from src.guests.dtos import (
    AttendanceUpdateDTO,
    ConfirmationDTO,
    RsvpSubmissionDTO,
    SubmissionRejectedError,
)
from src.guests.features.submit_rsvp.validator import validate_submission
from src.guests.repository.write_models import AttendanceWriteModel

logger = logging.getLogger(__name__)


def build_updates(submission: RsvpSubmissionDTO) -> list[AttendanceUpdateDTO]:
    """Turn a submission into one update per guest in the party."""
    attending_ids = set(submission.attending_ids)
    plus_one_ids = set(submission.plus_one_attending_ids)

    updates = []
    for guest_id in submission.guest_ids:
        attending = guest_id in attending_ids
        updates.append(
            AttendanceUpdateDTO(
                guest_id=guest_id,
                attending=attending,
                plus_one_attending=attending and guest_id in plus_one_ids,
                plus_one_name=submission.plus_one_name,
                song_requests=submission.song_requests,
                notes=submission.notes,
            )
        )
    return updates


class AttendanceCommitter:
    def __init__(self, write_model: AttendanceWriteModel) -> None:
        self._write_model = write_model

    async def commit(self, submission: RsvpSubmissionDTO) -> ConfirmationDTO:
        """Write every guest of the party in one transaction."""
        guests = await self._write_model.apply_attendance(build_updates(submission))
        return ConfirmationDTO(
            guest_attending=any(guest.attending for guest in guests),
            plus_one_attending=any(guest.plus_one_attending for guest in guests),
            updated_guest_ids=[guest.id for guest in guests],
        )

    async def submit(self, submission: RsvpSubmissionDTO) -> ConfirmationDTO:
        """
        Validate, then commit.
        A rejected submission never reaches the store.
        """
        try:
            validate_submission(submission)
        except SubmissionRejectedError as e:
            logger.info(f"RSVP rejected for {submission.guest_ids}: {type(e).__name__}")
            raise

        confirmation = await self.commit(submission)
        logger.info(
            f"RSVP committed for {len(confirmation.updated_guest_ids)} guests "
            f"(attending={confirmation.guest_attending}, plus_one={confirmation.plus_one_attending})"
        )
        return confirmation
