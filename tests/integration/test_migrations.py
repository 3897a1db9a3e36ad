"""The Alembic history builds the same schema the models declare."""

from pathlib import Path

import pytest
from sqlalchemy import create_engine, inspect, select, text
from sqlmodel import SQLModel

import src.pantheon.models  # noqa: F401
from src.pantheon.core.db import run_migrations_async, run_migrations_sync
from src.pantheon.models import DEFAULT_TEAM_ROLES

pytestmark = pytest.mark.integration

PROJECT_ROOT = Path(__file__).resolve().parents[2]


@pytest.fixture
def migrated_db(tmp_path, monkeypatch):
    monkeypatch.chdir(PROJECT_ROOT)
    db_file = tmp_path / "migrated.db"
    run_migrations_sync(database_url=f"sqlite+aiosqlite:///{db_file}")
    engine = create_engine(f"sqlite:///{db_file}")
    yield engine
    engine.dispose()


def test_every_table_is_created(migrated_db):
    tables = set(inspect(migrated_db).get_table_names())

    assert set(SQLModel.metadata.tables) <= tables


def test_unique_constraints_match_models(migrated_db):
    inspector = inspect(migrated_db)

    for name, table in SQLModel.metadata.tables.items():
        declared = {c.name for c in table.constraints if c.name and c.name.startswith("uq_")}
        migrated = {c["name"] for c in inspector.get_unique_constraints(name)}
        assert declared <= migrated, name


def test_team_role_catalog_is_seeded(migrated_db):
    with migrated_db.connect() as conn:
        names = conn.execute(select(text("name")).select_from(text("team_roles"))).scalars()

        assert sorted(names) == sorted(DEFAULT_TEAM_ROLES)


async def test_async_runner(tmp_path, monkeypatch):
    monkeypatch.chdir(PROJECT_ROOT)
    db_file = tmp_path / "migrated.db"

    await run_migrations_async(database_url=f"sqlite+aiosqlite:///{db_file}")

    engine = create_engine(f"sqlite:///{db_file}")
    try:
        assert "volunteers_exported_to_workspace" in inspect(engine).get_table_names()
    finally:
        engine.dispose()
