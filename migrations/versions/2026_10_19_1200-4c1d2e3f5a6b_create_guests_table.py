"""Create guests table.

Revision ID: 4c1d2e3f5a6b
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4c1d2e3f5a6b"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "guests",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("invitation_id", sa.String(64), nullable=False),
        sa.Column("first_name", sa.String(255), nullable=False),
        sa.Column("last_name", sa.String(255), nullable=False),
        sa.Column("attending", sa.Boolean, nullable=True),
        sa.Column("plus_one_allowed", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("plus_one_attending", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("plus_one_name", sa.Text, nullable=True),
        sa.Column("song_requests", sa.Text, nullable=True),
        sa.Column("notes", sa.Text, nullable=True),
        sa.Column("has_rsvpd", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.current_timestamp(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.current_timestamp(),
            nullable=False,
        ),
    )
    op.create_index("ix_guests_invitation_id", "guests", ["invitation_id"])
    op.create_index("ix_guests_last_name", "guests", ["last_name"])
    # Lookups compare lower(last_name)
    op.create_index("ix_guests_lower_last_name", "guests", [sa.text("lower(last_name)")])


def downgrade() -> None:
    op.drop_index("ix_guests_lower_last_name", table_name="guests")
    op.drop_index("ix_guests_last_name", table_name="guests")
    op.drop_index("ix_guests_invitation_id", table_name="guests")
    op.drop_table("guests")
