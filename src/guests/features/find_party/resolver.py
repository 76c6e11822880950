"""Resolve a lookup request into an invitation party.

Last names are not unique across invitations, so resolution always goes in
two steps: find the candidate invitation id(s) by name, then expand to the
whole party by invitation id. The second step picks up party members whose
last name differs from the query.
"""

import logging

from src.guests.dtos import (
    DuplicateGuestIdError,
    GuestNotFoundError,
    LastNameLookupDTO,
    LookupOutcome,
    PartyDTO,
)
from src.guests.repository.read_models import GuestReadModel

logger = logging.getLogger(__name__)


def normalize_last_name(name: str | None) -> str:
    return (name or "").strip().lower()


class PartyResolver:
    def __init__(self, read_model: GuestReadModel) -> None:
        self._read_model = read_model

    async def _expand(self, invitation_id: str) -> PartyDTO:
        guests = await self._read_model.get_party(invitation_id)
        return PartyDTO(invitation_id=invitation_id, guests=guests)

    async def resolve_by_id(self, guest_id: str) -> PartyDTO:
        """Get the party of the guest with ``guest_id``.

        Raises:
            GuestNotFoundError: no guest has that id.
            DuplicateGuestIdError: more than one guest has that id.
        """
        guest_id = (guest_id or "").strip()
        if not guest_id:
            raise GuestNotFoundError(guest_id)

        guests = await self._read_model.get_guests_by_id(guest_id)
        if not guests:
            raise GuestNotFoundError(guest_id)
        if len(guests) > 1:
            raise DuplicateGuestIdError(guest_id, len(guests))

        return await self._expand(guests[0].invitation_id)

    async def resolve_by_last_name(self, name: str | None) -> LastNameLookupDTO:
        last_name = normalize_last_name(name)
        if not last_name:
            return LastNameLookupDTO(outcome=LookupOutcome.EMPTY)

        matches = await self._read_model.get_guests_by_last_name(last_name)

        invitation_ids = {guest.invitation_id for guest in matches}
        if not invitation_ids:
            logger.info(f"No invitation found for last name '{last_name}'")
            return LastNameLookupDTO(outcome=LookupOutcome.NOT_FOUND)

        if len(invitation_ids) > 1:
            logger.info(f"Last name '{last_name}' matches {len(invitation_ids)} invitations")
            return LastNameLookupDTO(outcome=LookupOutcome.AMBIGUOUS, matches=matches)

        party = await self._expand(invitation_ids.pop())
        return LastNameLookupDTO(outcome=LookupOutcome.UNIQUE, party=party)
