from uuid import uuid4

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.models.base import TimeStamp


class Guest(TimeStamp):
    __tablename__ = TableNames.GUESTS.value

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=lambda: str(uuid4()))
    # Guests invited together share an invitation_id
    invitation_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    # None until the party has answered
    attending: Mapped[bool | None] = mapped_column(Boolean, nullable=True, default=None)

    # Plus one
    plus_one_allowed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    plus_one_attending: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    plus_one_name: Mapped[str | None] = mapped_column(Text, nullable=True)

    song_requests: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    has_rsvpd: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<Guest {self.first_name} {self.last_name} ({self.invitation_id})>"
