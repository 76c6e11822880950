from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.guests.repository.orm_models import Guest


class GuestNotFoundError(Exception):
    """Raised when no guest matches the given identifier."""

    def __init__(self, guest_id: str) -> None:
        self.guest_id = guest_id
        super().__init__(f"No guest with id '{guest_id}'")


class DuplicateGuestIdError(Exception):
    """Raised when more than one guest row shares an identifier."""

    def __init__(self, guest_id: str, count: int) -> None:
        self.guest_id = guest_id
        self.count = count
        super().__init__(f"{count} guests share id '{guest_id}'")


class GuestStoreError(Exception):
    """Raised when the guest store cannot be queried or updated."""


class SubmissionRejectedError(Exception):
    """Base class for RSVP submissions that break a business rule."""

    user_message: str = ""

    def __init__(self) -> None:
        super().__init__(self.user_message)


class PlusOneWithoutPrincipalError(SubmissionRejectedError):
    user_message = "We're sure your plus one is great and all, but they can't come without you."


class MissingPlusOneNameError(SubmissionRejectedError):
    user_message = "Please let us know the name of your plus one."


class LookupOutcome(str, Enum):
    EMPTY = "empty"
    UNIQUE = "unique"
    AMBIGUOUS = "ambiguous"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class GuestDTO:
    """DTO for a single guest row."""

    id: str
    invitation_id: str
    first_name: str
    last_name: str
    attending: bool | None = None
    plus_one_allowed: bool = False
    plus_one_attending: bool = False
    plus_one_name: str | None = None
    song_requests: str | None = None
    notes: str | None = None
    has_rsvpd: bool = False

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @classmethod
    def from_guest(cls, guest: "Guest") -> "GuestDTO":
        """Create GuestDTO from Guest ORM model."""
        return cls(
            id=guest.id,
            invitation_id=guest.invitation_id,
            first_name=guest.first_name,
            last_name=guest.last_name,
            attending=guest.attending,
            plus_one_allowed=bool(guest.plus_one_allowed),
            plus_one_attending=bool(guest.plus_one_attending),
            plus_one_name=guest.plus_one_name,
            song_requests=guest.song_requests,
            notes=guest.notes,
            has_rsvpd=bool(guest.has_rsvpd),
        )


@dataclass(frozen=True)
class PartyDTO:
    """Every guest sharing one invitation."""

    invitation_id: str
    guests: list[GuestDTO] = field(default_factory=list)

    @property
    def guest_ids(self) -> list[str]:
        return [guest.id for guest in self.guests]

    @property
    def plus_one_allowed(self) -> bool:
        return any(guest.plus_one_allowed for guest in self.guests)


@dataclass(frozen=True)
class LastNameLookupDTO:
    """Result of a last name lookup.

    ``party`` is set for UNIQUE, ``matches`` holds the raw last name matches
    for AMBIGUOUS.
    """

    outcome: LookupOutcome
    party: PartyDTO | None = None
    matches: list[GuestDTO] = field(default_factory=list)


@dataclass(frozen=True)
class RsvpSubmissionDTO:
    """Attendance decisions submitted for one party."""

    guest_ids: list[str]
    attending_ids: list[str] = field(default_factory=list)
    plus_one_attending_ids: list[str] = field(default_factory=list)
    plus_one_name: str = ""
    song_requests: str = ""
    notes: str = ""


@dataclass(frozen=True)
class AttendanceUpdateDTO:
    """Values written to one guest row."""

    guest_id: str
    attending: bool
    plus_one_attending: bool
    plus_one_name: str
    song_requests: str
    notes: str


@dataclass(frozen=True)
class ConfirmationDTO:
    """Summary used to pick the thank-you message."""

    guest_attending: bool
    plus_one_attending: bool
    updated_guest_ids: list[str] = field(default_factory=list)
