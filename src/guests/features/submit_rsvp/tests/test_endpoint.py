"""Tests for the RSVP submission endpoint."""

import pytest

from src.guests.dtos import MissingPlusOneNameError, PlusOneWithoutPrincipalError
from src.guests.features.submit_rsvp.router import get_attendance_write_model
from src.guests.tests.inmemory_models import (
    FailingAttendanceWriteModel,
    GuestStorage,
    InMemoryAttendanceWriteModel,
    RecordingViewRenderer,
    create_test_guest,
)
from src.guests.urls import SUBMIT_RSVP_URL
from src.views.renderer import GENERIC_ERROR_MESSAGE, get_view_renderer


@pytest.fixture
def storage():
    return GuestStorage(
        [
            create_test_guest("Jane", "Smith", "inv-1", guest_id="g1", plus_one_allowed=True),
            create_test_guest("Mark", "Lee", "inv-1", guest_id="g2"),
        ]
    )


@pytest.fixture
def renderer():
    return RecordingViewRenderer()


@pytest.fixture
def overrides(storage, renderer):
    write_model = InMemoryAttendanceWriteModel(storage)
    return {
        get_attendance_write_model: lambda: write_model,
        get_view_renderer: lambda: renderer,
    }


@pytest.mark.asyncio
async def test_submit_one_guest_attending(client_factory, overrides, storage, renderer):
    form = {
        "guestIds": ["g1", "g2"],
        "guestsAttending": ["g1"],
        "songRequests": "Mr. Brightside",
        "notes": "See you soon",
    }

    async with client_factory(overrides) as client:
        response = await client.post(SUBMIT_RSVP_URL, data=form)

    assert response.status_code == 200
    assert renderer.last.view == "thankyou.html"
    assert renderer.last.context == {"guest": True, "plus_one": False}

    jane = storage.get("g1")
    assert (jane.has_rsvpd, jane.attending, jane.plus_one_attending) == (True, True, False)
    assert jane.song_requests == "Mr. Brightside"
    mark = storage.get("g2")
    assert (mark.has_rsvpd, mark.attending, mark.plus_one_attending) == (True, False, False)
    assert mark.notes == "See you soon"


@pytest.mark.asyncio
async def test_submit_with_plus_one(client_factory, overrides, storage, renderer):
    form = {
        "guestIds": ["g1", "g2"],
        "guestsAttending": ["g1", "g2"],
        "plusOnesAttending": ["g1"],
        "plusOneName": "Sam Taylor",
    }

    async with client_factory(overrides) as client:
        response = await client.post(SUBMIT_RSVP_URL, data=form)

    assert response.status_code == 200
    assert renderer.last.context == {"guest": True, "plus_one": True}
    assert storage.get("g1").plus_one_attending is True
    assert storage.get("g1").plus_one_name == "Sam Taylor"


@pytest.mark.asyncio
async def test_submit_nobody_attending(client_factory, overrides, storage, renderer):
    async with client_factory(overrides) as client:
        response = await client.post(SUBMIT_RSVP_URL, data={"guestIds": ["g1", "g2"]})

    assert response.status_code == 200
    assert renderer.last.context == {"guest": False, "plus_one": False}
    assert all(row.has_rsvpd and row.attending is False for row in storage.rows)


@pytest.mark.asyncio
async def test_submit_plus_one_without_guest_is_rejected(client_factory, overrides, storage, renderer):
    form = {
        "guestIds": ["g1", "g2"],
        "guestsAttending": ["g2"],
        "plusOnesAttending": ["g1"],
        "plusOneName": "Sam",
    }

    async with client_factory(overrides) as client:
        response = await client.post(SUBMIT_RSVP_URL, data=form)

    assert response.status_code == 400
    assert renderer.last.view == "error.html"
    assert renderer.last.context == {"message": PlusOneWithoutPrincipalError.user_message}
    assert storage.writes == 0


@pytest.mark.asyncio
async def test_submit_plus_one_without_name_is_rejected(client_factory, overrides, storage, renderer):
    form = {
        "guestIds": ["g1", "g2"],
        "guestsAttending": ["g1"],
        "plusOnesAttending": ["g1"],
        "plusOneName": "",
    }

    async with client_factory(overrides) as client:
        response = await client.post(SUBMIT_RSVP_URL, data=form)

    assert response.status_code == 400
    assert renderer.last.context == {"message": MissingPlusOneNameError.user_message}
    assert storage.writes == 0
    assert not any(row.has_rsvpd for row in storage.rows)


@pytest.mark.asyncio
async def test_submit_store_failure_renders_generic_error(client_factory, renderer):
    write_model = FailingAttendanceWriteModel()
    overrides = {
        get_attendance_write_model: lambda: write_model,
        get_view_renderer: lambda: renderer,
    }

    async with client_factory(overrides) as client:
        response = await client.post(
            SUBMIT_RSVP_URL, data={"guestIds": ["g1"], "guestsAttending": ["g1"]}
        )

    assert response.status_code == 500
    assert write_model.calls == 1
    assert renderer.last.context == {"message": GENERIC_ERROR_MESSAGE}


@pytest.mark.asyncio
async def test_submit_unknown_guest_renders_generic_error(client_factory, overrides, storage, renderer):
    async with client_factory(overrides) as client:
        response = await client.post(
            SUBMIT_RSVP_URL, data={"guestIds": ["g1", "ghost"], "guestsAttending": ["g1"]}
        )

    assert response.status_code == 500
    assert renderer.last.context == {"message": GENERIC_ERROR_MESSAGE}
    assert storage.get("g1").has_rsvpd is False


@pytest.mark.asyncio
async def test_submit_renders_thank_you_page(client_factory, storage):
    write_model = InMemoryAttendanceWriteModel(storage)
    overrides = {get_attendance_write_model: lambda: write_model}

    async with client_factory(overrides) as client:
        response = await client.post(
            SUBMIT_RSVP_URL,
            data={
                "guestIds": ["g1"],
                "guestsAttending": ["g1"],
                "plusOnesAttending": ["g1"],
                "plusOneName": "Sam",
            },
        )

    assert response.status_code == 200
    assert "and your plus one" in response.text
