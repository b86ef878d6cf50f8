"""
Health service.
Reports uptime and database reachability.
"""

import time
from typing import Dict

from app.core.config import settings
from app.core.logging import get_logger
from app.services.base_service import BaseService
from app.schemas.health import HealthResponse

logger = get_logger(__name__)


def iso_duration(seconds: int) -> str:
    """Whole seconds as an ISO 8601 duration, e.g. PT1H2M3S."""
    hours, remainder = divmod(max(seconds, 0), 3600)
    minutes, secs = divmod(remainder, 60)
    parts = "".join(
        f"{value}{unit}" for value, unit in ((hours, "H"), (minutes, "M")) if value
    )
    return f"PT{parts}{secs}S" if secs or not parts else f"PT{parts}"


class HealthService(BaseService):
    """Service for health check operations."""

    def __init__(self):
        self.start_time = time.monotonic()

    async def check_database(self) -> str:
        from app.db import session as db_session
        from app.db.repositories.health_repository import HealthRepository

        if db_session.async_session_maker is None:
            db_session.create_sessionmaker()
        async with db_session.async_session_maker() as session:
            ok = await HealthRepository(session=session).check_database()
        return "ok" if ok else "error"

    async def get_health(self) -> HealthResponse:
        """
        Get system health status.

        Returns:
            HealthResponse with status (ok or degraded), uptime and checks
        """
        checks: Dict[str, str] = {"database": await self.check_database()}
        status = "ok" if all(check == "ok" for check in checks.values()) else "degraded"
        if status != "ok":
            logger.warning("Health check degraded", extra={"checks": checks})

        return HealthResponse(
            status=status,
            uptime=iso_duration(int(time.monotonic() - self.start_time)),
            checks=checks,
            version=settings.VERSION,
        )
