"""Ownership-qualified cascade deletion.

Foreign keys are declared ON DELETE CASCADE as well, but deletion does not
rely on it: dependents are removed explicitly, children before parents,
inside the caller's transaction.
"""

from collections import Counter
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from src.pantheon.models import (
    ClientMentor,
    ClientVolunteer,
    Job,
    Mentor,
    NonprofitClient,
    ProjectCycle,
    TeamRole,
    Volunteer,
    VolunteerExport,
    VolunteerMentor,
    VolunteerTeamRole,
)

# owner -> [(dependent table, column referencing owner.id)]
DEPENDENTS: dict[type[SQLModel], list[tuple[type[SQLModel], str]]] = {
    ProjectCycle: [
        (VolunteerTeamRole, "project_cycle_id"),
        (ClientVolunteer, "project_cycle_id"),
        (ClientMentor, "project_cycle_id"),
        (VolunteerMentor, "project_cycle_id"),
        (Job, "project_cycle_id"),
        (Volunteer, "project_cycle_id"),
        (Mentor, "project_cycle_id"),
        (NonprofitClient, "project_cycle_id"),
    ],
    Volunteer: [
        (VolunteerTeamRole, "volunteer_id"),
        (ClientVolunteer, "volunteer_id"),
        (VolunteerMentor, "volunteer_id"),
        (VolunteerExport, "volunteer_id"),
    ],
    Mentor: [
        (ClientMentor, "mentor_id"),
        (VolunteerMentor, "mentor_id"),
    ],
    NonprofitClient: [
        (ClientVolunteer, "client_id"),
        (ClientMentor, "client_id"),
    ],
    TeamRole: [(VolunteerTeamRole, "role_id")],
    Job: [(VolunteerExport, "job_id")],
}


async def _delete_where(
    session: AsyncSession, model: type[SQLModel], condition: Any, counts: Counter[str]
) -> None:
    for dependent, column in DEPENDENTS.get(model, []):
        owner_ids = select(model.id).where(condition)  # type: ignore[attr-defined]
        await _delete_where(
            session, dependent, getattr(dependent, column).in_(owner_ids), counts
        )
    result = await session.execute(
        delete(model).where(condition).execution_options(synchronize_session=False)
    )
    counts[model.__tablename__] += result.rowcount  # type: ignore[arg-type]


async def cascade_delete(session: AsyncSession, model: type[SQLModel], id: Any) -> Counter[str]:
    """Delete one row and everything it owns, transitively.

    Does not commit. Returns rows removed per table; the owner's own table
    count is 0 when the row did not exist.
    """
    counts: Counter[str] = Counter()
    await _delete_where(session, model, model.id == id, counts)  # type: ignore[attr-defined]
    return counts
