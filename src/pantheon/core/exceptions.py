"""Typed failures raised by the storage core.

Every failure carries enough identification (field, constraint or entity id)
to build an actionable message without re-querying the store.
"""

from typing import Any
from uuid import UUID


class PantheonError(Exception):
    """Base class for all storage-core failures."""


class DomainViolation(PantheonError):
    """A value outside its enumerated domain."""

    def __init__(self, field: str, value: Any, domain: str):
        self.field = field
        self.value = value
        self.domain = domain
        super().__init__(f"Invalid value {value!r} for field '{field}' (domain: {domain})")


class UniquenessViolation(PantheonError):
    """Base class for uniqueness breaches."""


class DuplicateKey(UniquenessViolation):
    """An entity would violate a declared uniqueness constraint."""

    def __init__(self, constraint: str, entity: str):
        self.constraint = constraint
        self.entity = entity
        super().__init__(f"Duplicate {entity} violates unique constraint '{constraint}'")


class DuplicateRelation(UniquenessViolation):
    """A join row with the same key already exists."""

    def __init__(self, relation: str, keys: dict[str, UUID]):
        self.relation = relation
        self.keys = keys
        rendered = ", ".join(f"{k}={v}" for k, v in keys.items())
        super().__init__(f"Relation '{relation}' already exists for ({rendered})")


class DuplicateExport(UniquenessViolation):
    """A receipt for this (volunteer, job) pair is already recorded."""

    def __init__(self, volunteer_id: UUID, job_id: UUID):
        self.volunteer_id = volunteer_id
        self.job_id = job_id
        super().__init__(f"Volunteer {volunteer_id} already exported by job {job_id}")


class NotFound(PantheonError):
    def __init__(self, entity: str, entity_id: Any):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


class ConstraintError(PantheonError):
    """A foreign-key or check violation not covered by a narrower failure."""

    def __init__(self, constraint: str, detail: str):
        self.constraint = constraint
        self.detail = detail
        super().__init__(f"Constraint '{constraint}' violated: {detail}")


class InvalidStatusTransition(ConstraintError):
    """A job in a terminal state cannot change status."""

    def __init__(self, job_id: UUID, current: str, requested: str):
        self.job_id = job_id
        self.current = current
        self.requested = requested
        super().__init__(
            "job_status_transition",
            f"job {job_id} cannot move from '{current}' to '{requested}'",
        )


class CycleArchived(ConstraintError):
    """The project cycle is archived; cycle-scoped export actions are blocked."""

    def __init__(self, cycle_id: UUID):
        self.cycle_id = cycle_id
        super().__init__("project_cycle_archived", f"project cycle {cycle_id} is archived")


class Unavailable(PantheonError):
    """Storage is unreachable or a statement timed out."""

    def __init__(self, operation: str, reason: str | None = None):
        self.operation = operation
        self.reason = reason
        message = f"Storage unavailable during {operation}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InternalConsistencyFault(PantheonError):
    """An invariant the store should guarantee was found broken.

    Never repaired silently.
    """

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)
