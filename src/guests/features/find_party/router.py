import logging

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import Response

from src.guests.dtos import (
    DuplicateGuestIdError,
    GuestNotFoundError,
    GuestStoreError,
    LookupOutcome,
)
from src.guests.features.find_party.resolver import PartyResolver
from src.guests.repository.read_models import GuestReadModel, SqlGuestReadModel
from src.guests.urls import FIND_BY_ID_URL, FIND_BY_LAST_NAME_URL
from src.views.renderer import ViewRenderer, get_view_renderer, render_error

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND_MESSAGE = "Sorry, we didn't send an invitation to anyone by that name."


def get_guest_read_model() -> GuestReadModel:
    """Dependency to get guest read model instance."""
    return SqlGuestReadModel()


def get_party_resolver(
    read_model: GuestReadModel = Depends(get_guest_read_model),
) -> PartyResolver:
    return PartyResolver(read_model)


@router.post(FIND_BY_ID_URL)
async def find_by_id(
    request: Request,
    guest_id: str = Form(default="", alias="guestId"),
    resolver: PartyResolver = Depends(get_party_resolver),
    render: ViewRenderer = Depends(get_view_renderer),
) -> Response:
    """
    Show the party of one guest.
    Called from the disambiguation list when a last name matches several invitations.
    """
    try:
        party = await resolver.resolve_by_id(guest_id)
    except GuestNotFoundError as e:
        logger.info(str(e))
        return render_error(render, request, status_code=404)
    except (DuplicateGuestIdError, GuestStoreError):
        logger.exception(f"Could not resolve party for guest '{guest_id}'")
        return render_error(render, request, status_code=500)

    return render(request, "submit.html", {"party": party})


@router.post(FIND_BY_LAST_NAME_URL)
async def find_by_last_name(
    request: Request,
    last_name: str = Form(default="", alias="lastName"),
    resolver: PartyResolver = Depends(get_party_resolver),
    render: ViewRenderer = Depends(get_view_renderer),
) -> Response:
    """
    Look up an invitation by last name.
    Renders the party, a disambiguation list, or a not-found message.
    """
    try:
        lookup = await resolver.resolve_by_last_name(last_name)
    except GuestStoreError:
        logger.exception("Could not look up guests by last name")
        return render_error(render, request, status_code=500)

    if lookup.outcome == LookupOutcome.EMPTY:
        # Nothing to look up, tell htmx to leave the page alone
        return Response(status_code=204, headers={"HX-Reswap": "none"})

    if lookup.outcome == LookupOutcome.AMBIGUOUS:
        return render(
            request,
            "multiple-invitations.html",
            {"guests": lookup.matches},
            status_code=300,
        )

    if lookup.outcome == LookupOutcome.UNIQUE:
        return render(request, "submit.html", {"party": lookup.party})

    return render_error(render, request, status_code=404, message=NOT_FOUND_MESSAGE)
