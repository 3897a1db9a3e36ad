"""Tests for engine construction."""

import pytest
from sqlalchemy.pool import StaticPool

from src.pantheon.core.config import Settings
from src.pantheon.core.db import build_engine, dispose_engine, get_engine
from src.pantheon.core.db.engine import _get_connect_args

pytestmark = pytest.mark.unit


def _settings(**overrides) -> Settings:
    return Settings(database_url="postgresql+asyncpg://localhost/pantheon", **overrides)


async def test_engine_singleton():
    engine = get_engine()

    assert get_engine() is engine
    await dispose_engine()
    assert get_engine() is not engine
    await dispose_engine()


async def test_in_memory_sqlite_shares_one_connection():
    engine = build_engine(url="sqlite+aiosqlite:///:memory:")

    assert isinstance(engine.pool, StaticPool)
    await engine.dispose()


def test_ssl_disabled():
    args = _get_connect_args(_settings(database_ssl_mode="disable", database_command_timeout=5))

    assert args == {"command_timeout": 5}


@pytest.mark.parametrize(
    ("mode", "check_hostname"),
    [("require", False), ("verify-ca", False), ("verify-full", True)],
)
def test_ssl_modes(mode, check_hostname):
    args = _get_connect_args(_settings(database_ssl_mode=mode))

    assert args["ssl"].check_hostname is check_hostname


def test_unknown_ssl_mode():
    with pytest.raises(ValueError):
        _settings(database_ssl_mode="sometimes")
