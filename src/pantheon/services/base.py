"""Helpers shared by the entity services: validation, patching, flush translation."""

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from sqlalchemy import Table
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from src.pantheon.core.db.errors import (
    is_foreign_key_violation,
    is_unique_violation,
    violated_unique_constraint,
)
from src.pantheon.core.exceptions import (
    ConstraintError,
    DomainViolation,
    DuplicateKey,
    NotFound,
    PantheonError,
)
from src.pantheon.core.logging import get_logger
from src.pantheon.core.validators import validate_entity_fields
from src.pantheon.models import ProjectCycle
from src.pantheon.models.base import utc_now

logger = get_logger(__name__)


def fk_name(table: str, column: str) -> str:
    """Foreign-key constraint name, following PostgreSQL's default naming."""
    return f"{table}_{column}_fkey"


def validated(entity: str, values: Mapping[str, Any]) -> dict[str, Any]:
    """Run store-boundary domain validation, logging rejections."""
    try:
        return validate_entity_fields(entity, values)
    except DomainViolation as e:
        logger.warning("Domain violation", entity=entity, field=e.field, value=repr(e.value))
        raise


def _same(current: Any, new: Any) -> bool:
    # Multi-valued fields have set semantics
    if isinstance(current, list) and isinstance(new, list):
        return len(current) == len(new) and set(current) == set(new)
    return current == new


def apply_patch(entity: SQLModel, values: Mapping[str, Any]) -> list[str]:
    """Write changed fields onto `entity`.

    `updated_at` is stamped only when at least one field actually changed.

    Returns:
        Names of the fields that changed
    """
    changed = []
    for field, value in values.items():
        if _same(getattr(entity, field), value):
            continue
        setattr(entity, field, value)
        changed.append(field)
    if changed:
        entity.updated_at = utc_now()  # type: ignore[attr-defined]
    return changed


def translate_integrity_error(
    exc: IntegrityError, entity: str, model: type[SQLModel]
) -> PantheonError:
    """Map a driver IntegrityError onto the typed failure it represents."""
    table: Table = model.__table__  # type: ignore[attr-defined]
    if is_unique_violation(exc):
        constraint = violated_unique_constraint(exc, table) or f"{table.name}_unique"
        logger.warning("Duplicate key", entity=entity, constraint=constraint)
        return DuplicateKey(constraint, entity)
    if is_foreign_key_violation(exc):
        logger.warning("Foreign key violation", entity=entity, table=table.name)
        return ConstraintError(f"{table.name}_fkey", str(exc.orig))
    logger.warning("Integrity violation", entity=entity, table=table.name)
    return ConstraintError(table.name, str(exc.orig))


async def flush(session: AsyncSession, entity: str, model: type[SQLModel]) -> None:
    """Flush pending writes, translating constraint failures."""
    try:
        await session.flush()
    except IntegrityError as e:
        raise translate_integrity_error(e, entity, model) from e


async def require_cycle(session: AsyncSession, cycle_id: UUID, table: str) -> ProjectCycle:
    """Load the owning cycle of a new row, failing on a dangling reference."""
    cycle = await session.get(ProjectCycle, cycle_id, populate_existing=True)
    if cycle is None:
        logger.warning("Unknown project cycle", table=table, project_cycle_id=str(cycle_id))
        raise ConstraintError(
            fk_name(table, "project_cycle_id"), f"project cycle {cycle_id} does not exist"
        )
    return cycle


def require_found[T](entity: T | None, name: str, entity_id: Any) -> T:
    if entity is None:
        raise NotFound(name, entity_id)
    return entity
