"""Tests for naming the constraint behind a driver IntegrityError."""

import pytest
from sqlalchemy.exc import IntegrityError

from src.pantheon.core.db.errors import (
    is_foreign_key_violation,
    is_unique_violation,
    violated_unique_constraint,
)
from src.pantheon.models import ClientVolunteer, NonprofitClient, Volunteer

pytestmark = pytest.mark.unit


class PgError(Exception):
    def __init__(self, message: str, sqlstate: str):
        super().__init__(message)
        self.sqlstate = sqlstate


def integrity_error(orig: Exception) -> IntegrityError:
    return IntegrityError("INSERT", {}, orig)


def test_sqlite_unique_message_names_constraint_by_columns():
    exc = integrity_error(Exception("UNIQUE constraint failed: volunteers.email"))

    assert is_unique_violation(exc)
    assert violated_unique_constraint(exc, Volunteer.__table__) == "uq_volunteers_email"


def test_sqlite_composite_unique_message():
    exc = integrity_error(
        Exception(
            "UNIQUE constraint failed: nonprofit_clients.email, "
            "nonprofit_clients.project_cycle_id, nonprofit_clients.org_name, "
            "nonprofit_clients.project_name"
        )
    )

    assert (
        violated_unique_constraint(exc, NonprofitClient.__table__)
        == "uq_nonprofit_clients_email_cycle_org_project"
    )


def test_sqlite_composite_primary_key_message():
    exc = integrity_error(
        Exception(
            "UNIQUE constraint failed: client_volunteers.volunteer_id, "
            "client_volunteers.client_id, client_volunteers.project_cycle_id"
        )
    )

    assert violated_unique_constraint(exc, ClientVolunteer.__table__) == "client_volunteers_pkey"


def test_postgres_message_names_constraint_directly():
    exc = integrity_error(
        PgError(
            'duplicate key value violates unique constraint "uq_volunteers_email"', "23505"
        )
    )

    assert is_unique_violation(exc)
    assert not is_foreign_key_violation(exc)
    assert violated_unique_constraint(exc, Volunteer.__table__) == "uq_volunteers_email"


def test_foreign_key_violation_detected():
    sqlite_exc = integrity_error(Exception("FOREIGN KEY constraint failed"))
    pg_exc = integrity_error(PgError("insert violates foreign key", "23503"))

    assert is_foreign_key_violation(sqlite_exc)
    assert is_foreign_key_violation(pg_exc)
    assert not is_unique_violation(sqlite_exc)


def test_unrelated_table_yields_none():
    exc = integrity_error(Exception("UNIQUE constraint failed: mentors.email"))

    assert violated_unique_constraint(exc, Volunteer.__table__) is None
