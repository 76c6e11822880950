import logging

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import Response

from src.guests.dtos import (
    GuestNotFoundError,
    GuestStoreError,
    RsvpSubmissionDTO,
    SubmissionRejectedError,
)
from src.guests.features.submit_rsvp.committer import AttendanceCommitter
from src.guests.repository.write_models import AttendanceWriteModel, SqlAttendanceWriteModel
from src.guests.urls import SUBMIT_RSVP_URL
from src.views.renderer import ViewRenderer, get_view_renderer, render_error

logger = logging.getLogger(__name__)

router = APIRouter()


def get_attendance_write_model() -> AttendanceWriteModel:
    """Dependency to get attendance write model instance."""
    return SqlAttendanceWriteModel()


def get_attendance_committer(
    write_model: AttendanceWriteModel = Depends(get_attendance_write_model),
) -> AttendanceCommitter:
    return AttendanceCommitter(write_model)


@router.post(SUBMIT_RSVP_URL)
async def submit_rsvp(
    request: Request,
    guest_ids: list[str] = Form(default=[], alias="guestIds"),
    guests_attending: list[str] = Form(default=[], alias="guestsAttending"),
    plus_ones_attending: list[str] = Form(default=[], alias="plusOnesAttending"),
    plus_one_name: str = Form(default="", alias="plusOneName"),
    song_requests: str = Form(default="", alias="songRequests"),
    notes: str = Form(default=""),
    committer: AttendanceCommitter = Depends(get_attendance_committer),
    render: ViewRenderer = Depends(get_view_renderer),
) -> Response:
    """
    Submit RSVP answers for a whole party.
    Every guest in ``guestIds`` not listed in ``guestsAttending`` is recorded as not attending.
    """
    submission = RsvpSubmissionDTO(
        guest_ids=guest_ids,
        attending_ids=guests_attending,
        plus_one_attending_ids=plus_ones_attending,
        plus_one_name=plus_one_name,
        song_requests=song_requests,
        notes=notes,
    )

    try:
        confirmation = await committer.submit(submission)
    except SubmissionRejectedError as e:
        return render_error(render, request, status_code=400, message=e.user_message)
    except (GuestNotFoundError, GuestStoreError):
        logger.exception(f"Could not save RSVP for guests {guest_ids}")
        return render_error(render, request, status_code=500)

    return render(
        request,
        "thankyou.html",
        {
            "guest": confirmation.guest_attending,
            "plus_one": confirmation.plus_one_attending,
        },
    )
