"""Attendance write model. Returns DTOs, never ORM models."""

from abc import ABC, abstractmethod

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.config.database import async_session_manager
from src.guests.dtos import (
    AttendanceUpdateDTO,
    GuestDTO,
    GuestNotFoundError,
    GuestStoreError,
)
from src.guests.repository.orm_models import Guest


class AttendanceWriteModel(ABC):
    @abstractmethod
    async def apply_attendance(self, updates: list[AttendanceUpdateDTO]) -> list[GuestDTO]:
        """
        Apply attendance updates for one party as a single unit of work.
        Either every row is updated or none is.
        Raises GuestNotFoundError for an unknown guest id.
        """
        raise NotImplementedError


class SqlAttendanceWriteModel(AttendanceWriteModel):
    """Write operations for RSVP attendance."""

    def __init__(
        self,
        session_overwrite: AsyncSession | None = None,
        session_maker: async_sessionmaker[AsyncSession] | None = None,
    ) -> None:
        self._session_overwrite = session_overwrite
        self._session_maker = session_maker

    async def _get_guest(self, session, guest_id: str) -> Guest | None:
        result = await session.execute(select(Guest).where(Guest.id == guest_id))
        return result.scalar_one_or_none()

    def _apply(self, guest: Guest, update: AttendanceUpdateDTO) -> None:
        guest.has_rsvpd = True
        guest.attending = update.attending
        # Only guests invited with a plus one can bring one
        guest.plus_one_attending = (
            update.attending and update.plus_one_attending and guest.plus_one_allowed
        )
        guest.plus_one_name = update.plus_one_name
        guest.song_requests = update.song_requests
        guest.notes = update.notes

    async def apply_attendance(self, updates: list[AttendanceUpdateDTO]) -> list[GuestDTO]:
        try:
            async with async_session_manager(
                session_overwrite=self._session_overwrite,
                session_maker=self._session_maker,
            ) as session:
                updated: list[Guest] = []
                for update in updates:
                    guest = await self._get_guest(session, update.guest_id)
                    if guest is None:
                        raise GuestNotFoundError(update.guest_id)
                    self._apply(guest, update)
                    await session.flush()
                    updated.append(guest)
                return [GuestDTO.from_guest(guest) for guest in updated]
        except SQLAlchemyError as e:
            raise GuestStoreError("Could not update attendance") from e
