"""Reusable migration runner for both production and tests."""

import asyncio
from concurrent.futures import ThreadPoolExecutor

from alembic import command
from alembic.config import Config

from src.pantheon.core.logging import get_logger

logger = get_logger(__name__)


def _alembic_config(database_url: str | None) -> Config:
    alembic_cfg = Config("alembic.ini")
    if database_url:
        # Read by src/alembic/env.py in place of DATABASE_URL
        alembic_cfg.set_main_option("sqlalchemy.url", database_url)
    return alembic_cfg


def run_migrations_sync(revision: str = "head", database_url: str | None = None) -> None:
    """Upgrade the schema to `revision`.

    Args:
        revision: Target revision, defaults to the latest.
        database_url: Database to migrate instead of the configured one.
    """
    command.upgrade(_alembic_config(database_url), revision)
    logger.info("Migrations applied", revision=revision)


async def run_migrations_async(revision: str = "head", database_url: str | None = None) -> None:
    """Run Alembic migrations from async context.

    Uses ThreadPoolExecutor to avoid event loop conflicts with Alembic.
    """
    loop = asyncio.get_running_loop()
    with ThreadPoolExecutor() as pool:
        await loop.run_in_executor(pool, run_migrations_sync, revision, database_url)
