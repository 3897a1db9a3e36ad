"""Database utilities - engine, session, migrations."""

from src.pantheon.core.db.engine import build_engine, dispose_engine, get_engine
from src.pantheon.core.db.migrations import run_migrations_async, run_migrations_sync
from src.pantheon.core.db.session import get_session, reading, transaction

__all__ = [
    # Engine
    "build_engine",
    "dispose_engine",
    "get_engine",
    # Session
    "get_session",
    "reading",
    "transaction",
    # Migrations
    "run_migrations_async",
    "run_migrations_sync",
]
