"""CLI commands for wedding RSVP management."""

import asyncio
import csv
from collections import defaultdict
from pathlib import Path

import typer
import uvicorn
from sqlalchemy import select

from src.config.database import async_session_manager
from src.config.settings import settings
from src.guests.repository.orm_models import Guest

app = typer.Typer(help="CLI commands for wedding RSVP management")

REQUIRED_COLUMNS = ["id", "invitation_id", "first_name", "last_name"]
TRUE_VALUES = {"1", "true", "yes", "y"}


def read_guest_rows(path: Path) -> list[dict[str, str]]:
    """Read and check a guest list CSV. Raises ValueError on a bad file."""
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        missing = [column for column in REQUIRED_COLUMNS if column not in (reader.fieldnames or [])]
        if missing:
            raise ValueError(f"Missing columns: {', '.join(missing)}")

        rows = []
        seen_ids = set()
        for line_no, row in enumerate(reader, start=2):
            row = {key: (value or "").strip() for key, value in row.items() if key}
            empty = [column for column in REQUIRED_COLUMNS if not row[column]]
            if empty:
                raise ValueError(f"Line {line_no}: empty {', '.join(empty)}")
            if row["id"] in seen_ids:
                raise ValueError(f"Line {line_no}: duplicate guest id {row['id']}")
            seen_ids.add(row["id"])
            rows.append(row)
    return rows


def apply_guest_row(guest: Guest, row: dict[str, str]) -> None:
    """Copy the guest list fields onto a row. Answers already given are kept."""
    guest.invitation_id = row["invitation_id"]
    guest.first_name = row["first_name"]
    guest.last_name = row["last_name"]
    guest.plus_one_allowed = row.get("plus_one_allowed", "").lower() in TRUE_VALUES
    # A plus one can only attend when one is allowed
    if not guest.plus_one_allowed:
        guest.plus_one_attending = False


async def _load_guests(rows: list[dict[str, str]]) -> tuple[int, int]:
    created = updated = 0
    async with async_session_manager() as session:
        for row in rows:
            result = await session.execute(select(Guest).where(Guest.id == row["id"]))
            guest = result.scalar_one_or_none()
            if guest is None:
                guest = Guest(id=row["id"])
                session.add(guest)
                created += 1
            else:
                updated += 1
            apply_guest_row(guest, row)
    return created, updated


@app.command()
def load_guests(
    csv_path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="CSV with id, invitation_id, first_name, last_name and optional plus_one_allowed",
    ),
):
    """Create or update guest rows from a CSV guest list."""
    try:
        rows = read_guest_rows(csv_path)
    except ValueError as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)

    created, updated = asyncio.run(_load_guests(rows))

    typer.secho("Guest list loaded!", fg=typer.colors.GREEN)
    typer.secho(f"  Created: {created}", fg=typer.colors.BLUE)
    typer.secho(f"  Updated: {updated}", fg=typer.colors.BLUE)


async def _get_all_guests() -> list[Guest]:
    async with async_session_manager(auto_commit=False) as session:
        result = await session.execute(
            select(Guest).order_by(Guest.invitation_id, Guest.first_name)
        )
        return list(result.scalars().all())


def _answer(guest: Guest) -> str:
    if not guest.has_rsvpd:
        return "no answer"
    if not guest.attending:
        return "not attending"
    if guest.plus_one_attending:
        return f"attending + {guest.plus_one_name or 'plus one'}"
    return "attending"


@app.command()
def responses():
    """Show every party's answers and the totals."""
    guests = asyncio.run(_get_all_guests())

    parties: dict[str, list[Guest]] = defaultdict(list)
    for guest in guests:
        parties[guest.invitation_id].append(guest)

    for invitation_id, members in parties.items():
        typer.secho(f"Invitation {invitation_id}", fg=typer.colors.CYAN)
        for guest in members:
            color = typer.colors.GREEN if guest.attending else typer.colors.YELLOW
            typer.secho(f"  {guest.first_name} {guest.last_name}: {_answer(guest)}", fg=color)
        notes = members[0].notes
        if notes:
            typer.secho(f"  Notes: {notes}", fg=typer.colors.BLUE)

    attending = sum(1 for guest in guests if guest.attending)
    plus_ones = sum(1 for guest in guests if guest.attending and guest.plus_one_attending)
    pending = sum(1 for guest in guests if not guest.has_rsvpd)

    typer.echo()
    typer.secho(f"Attending: {attending} guests + {plus_ones} plus ones", fg=typer.colors.GREEN)
    typer.secho(f"Waiting on: {pending} of {len(guests)} guests", fg=typer.colors.YELLOW)


@app.command()
def serve(
    host: str = typer.Option(None, help="Defaults to APP_HOST"),
    port: int = typer.Option(None, help="Defaults to APP_PORT"),
):
    """Run the web app with uvicorn."""
    uvicorn.run(
        "src.main:app",
        host=host or settings.app_host,
        port=port or settings.app_port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    app()
