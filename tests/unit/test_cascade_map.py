"""Tests for the delete cascade map."""

import pytest
from sqlmodel import SQLModel

import src.pantheon.models  # noqa: F401
from src.pantheon.repositories import DEPENDENTS

pytestmark = pytest.mark.unit


def test_every_entry_follows_a_real_foreign_key():
    for model, dependents in DEPENDENTS.items():
        for dependent, column in dependents:
            fks = dependent.__table__.c[column].foreign_keys
            assert [fk.column.table for fk in fks] == [model.__table__], (dependent, column)


def test_every_foreign_key_has_an_entry():
    covered = {
        (dependent.__tablename__, column)
        for dependents in DEPENDENTS.values()
        for dependent, column in dependents
    }
    for table in SQLModel.metadata.tables.values():
        for fk in table.foreign_keys:
            assert (table.name, fk.parent.name) in covered
