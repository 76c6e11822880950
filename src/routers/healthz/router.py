import logging
from collections.abc import Awaitable, Callable

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.config.database import async_session_manager

logger = logging.getLogger(__name__)

router = APIRouter()

DatabaseCheck = Callable[[], Awaitable[bool]]


class HealthCheckResponse(BaseModel):
    status: str
    database: bool
    version: str = "0.1.0"


async def ping_database() -> bool:
    try:
        async with async_session_manager(auto_commit=False) as session:
            await session.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError):
        logger.warning("Health check could not reach the guest database")
        return False
    return True


def get_database_check() -> DatabaseCheck:
    """Dependency to get the database check."""
    return ping_database


@router.get("/", response_model=HealthCheckResponse)
async def health_check(
    database_check: DatabaseCheck = Depends(get_database_check),
) -> HealthCheckResponse:
    """
    Health check endpoint to verify the API is running and the guest store is reachable.
    """
    database = await database_check()
    return HealthCheckResponse(status="healthy" if database else "degraded", database=database)
