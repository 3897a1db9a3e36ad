"""Translate driver IntegrityErrors into the constraint they violated.

PostgreSQL reports SQLSTATE and the constraint name; SQLite only reports the
column list. Both are matched against the table's declared constraints.
"""

from sqlalchemy import PrimaryKeyConstraint, Table, UniqueConstraint
from sqlalchemy.exc import IntegrityError

UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


def _sqlstate(exc: IntegrityError) -> str | None:
    orig = exc.orig
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def is_unique_violation(exc: IntegrityError) -> bool:
    if _sqlstate(exc) == UNIQUE_VIOLATION:
        return True
    message = str(exc.orig)
    return "UNIQUE constraint failed" in message or "duplicate key value" in message


def is_foreign_key_violation(exc: IntegrityError) -> bool:
    if _sqlstate(exc) == FOREIGN_KEY_VIOLATION:
        return True
    message = str(exc.orig)
    return "FOREIGN KEY constraint failed" in message or "violates foreign key" in message


def violated_unique_constraint(exc: IntegrityError, table: Table) -> str | None:
    """Name the unique/primary-key constraint of `table` named in the error, if any."""
    message = str(exc.orig)
    for constraint in table.constraints:
        if not isinstance(constraint, (UniqueConstraint, PrimaryKeyConstraint)):
            continue
        name = constraint.name or f"{table.name}_pkey"
        if name in message:
            return name
        columns = ", ".join(f"{table.name}.{column.name}" for column in constraint.columns)
        if columns and columns in message:
            return name
    return None
