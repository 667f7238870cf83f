"""Run the API with uvicorn: ``python -m devconnector``."""

import asyncio
import sys

import structlog
import uvicorn

from devconnector.config import settings
from devconnector.database import Database
from devconnector.logging import setup_logging

logger = structlog.get_logger(__name__)


async def check_database(url: str) -> None:
    """Raise if the database at ``url`` cannot be reached."""
    database = Database(url)
    try:
        await database.ping()
    finally:
        await database.dispose()


def main() -> int:
    setup_logging()

    # Fail fast before binding the port if the database is unreachable
    try:
        asyncio.run(check_database(settings.database_url))
    except Exception as exc:
        logger.error("database_connection_failed", error=str(exc))
        return 1

    logger.info("database_connected")
    uvicorn.run(
        "devconnector.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
