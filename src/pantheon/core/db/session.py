"""Database session management and the unit-of-work boundary."""

import contextlib
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.exc import DBAPIError, InterfaceError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from src.pantheon.core.db.engine import get_engine
from src.pantheon.core.exceptions import Unavailable
from src.pantheon.core.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def get_session(engine: AsyncEngine | None = None) -> AsyncGenerator[AsyncSession]:
    """Create a database session.

    Args:
        engine: Optional engine override for testing.

    Yields:
        AsyncSession bound to the engine. Callers own commit/rollback,
        normally through `transaction()`.
    """
    if engine is None:
        engine = get_engine()

    session_factory = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with session_factory() as session:
        yield session


def _is_unavailable(exc: BaseException) -> bool:
    if isinstance(exc, (OperationalError, InterfaceError, PoolTimeoutError, TimeoutError)):
        return True
    return isinstance(exc, DBAPIError) and exc.connection_invalidated


@asynccontextmanager
async def transaction(session: AsyncSession, operation: str) -> AsyncGenerator[AsyncSession]:
    """Run one atomic unit of work.

    Commits when the block exits cleanly. Any failure rolls back everything
    the block wrote; connectivity failures and timeouts surface as
    `Unavailable`, all other failures propagate unchanged.

    Args:
        session: Session to run the unit of work on
        operation: Name of the logical operation, used in logs and errors
    """
    try:
        yield session
        await session.commit()
    except Exception as e:
        with contextlib.suppress(Exception):
            await session.rollback()
        if _is_unavailable(e):
            logger.error("Storage unavailable", operation=operation, error=str(e))
            raise Unavailable(operation, type(e).__name__) from e
        raise


@asynccontextmanager
async def reading(session: AsyncSession, operation: str) -> AsyncGenerator[AsyncSession]:
    """Run read-only queries, surfacing connectivity failures as `Unavailable`.

    Nothing is committed. Other failures propagate unchanged and leave the
    session as it was.

    Args:
        session: Session to query on
        operation: Name of the logical operation, used in logs and errors
    """
    try:
        yield session
    except Exception as e:
        if not _is_unavailable(e):
            raise
        with contextlib.suppress(Exception):
            await session.rollback()
        logger.error("Storage unavailable", operation=operation, error=str(e))
        raise Unavailable(operation, type(e).__name__) from e
