import abc

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.config.database import async_session_manager
from src.guests.dtos import GuestDTO, GuestStoreError
from src.guests.repository.orm_models import Guest


class GuestReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_guests_by_id(self, guest_id: str) -> list[GuestDTO]:
        """
        Get every guest row with the given id.
        More than one row means the table is corrupt; the caller decides.
        """
        raise NotImplementedError

    @abc.abstractmethod
    async def get_guests_by_last_name(self, last_name: str) -> list[GuestDTO]:
        """
        Get guests whose lower-cased last name equals ``last_name``,
        ordered by first name.
        """
        raise NotImplementedError

    @abc.abstractmethod
    async def get_party(self, invitation_id: str) -> list[GuestDTO]:
        """Get every guest on an invitation, ordered by first name."""
        raise NotImplementedError


class SqlGuestReadModel(GuestReadModel):
    """SQL implementation of guest read model."""

    def __init__(
        self,
        session_overwrite: AsyncSession | None = None,
        session_maker: async_sessionmaker[AsyncSession] | None = None,
    ) -> None:
        self._session_overwrite = session_overwrite
        self._session_maker = session_maker

    async def _fetch(self, stmt) -> list[GuestDTO]:
        try:
            async with async_session_manager(
                auto_commit=False,
                session_overwrite=self._session_overwrite,
                session_maker=self._session_maker,
            ) as session:
                result = await session.execute(stmt)
                return [GuestDTO.from_guest(guest) for guest in result.scalars().all()]
        except SQLAlchemyError as e:
            raise GuestStoreError("Could not read guests") from e

    async def get_guests_by_id(self, guest_id: str) -> list[GuestDTO]:
        return await self._fetch(select(Guest).where(Guest.id == guest_id))

    async def get_guests_by_last_name(self, last_name: str) -> list[GuestDTO]:
        stmt = (
            select(Guest)
            .where(func.lower(Guest.last_name) == last_name)
            .order_by(Guest.first_name.asc())
        )
        return await self._fetch(stmt)

    async def get_party(self, invitation_id: str) -> list[GuestDTO]:
        stmt = (
            select(Guest)
            .where(Guest.invitation_id == invitation_id)
            .order_by(Guest.first_name.asc())
        )
        return await self._fetch(stmt)
