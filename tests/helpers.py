"""Test helper functions for common data creation patterns."""

from dataclasses import dataclass, field
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from src.pantheon.models import DEFAULT_TEAM_ROLES
from src.pantheon.services import (
    JobService,
    MentorService,
    NonprofitClientService,
    RelationKind,
    RelationService,
    TeamRoleService,
    VolunteerService,
)
from tests.factories import (
    JobCreateFactory,
    MentorCreateFactory,
    NonprofitClientCreateFactory,
    VolunteerCreateFactory,
)


async def seed_team_roles(session: AsyncSession) -> dict[str, UUID]:
    """Create the default role catalog (the migration seeds it in real databases).

    Returns:
        Mapping of role name to id
    """
    service = TeamRoleService(session)
    roles = {}
    for name, description in DEFAULT_TEAM_ROLES.items():
        role = await service.create_role(name, description)
        roles[name] = role.id
    return roles


async def count_rows(session: AsyncSession, model: type[SQLModel], **filters) -> int:
    """Count rows of `model` matching column == value filters."""
    query = select(func.count()).select_from(model)
    for column, value in filters.items():
        query = query.where(getattr(model, column) == value)
    result = await session.execute(query)
    return result.scalar_one()


@dataclass
class CycleGraph:
    """Ids of a fully linked cycle, as built by `seed_cycle_graph`."""

    cycle_id: UUID
    volunteer_ids: list[UUID] = field(default_factory=list)
    mentor_ids: list[UUID] = field(default_factory=list)
    client_ids: list[UUID] = field(default_factory=list)
    role_id: UUID | None = None
    job_id: UUID | None = None
    export_ids: list[UUID] = field(default_factory=list)


async def seed_cycle_graph(
    session: AsyncSession,
    cycle_id: UUID,
    role_id: UUID,
    volunteers: int = 2,
    mentors: int = 2,
) -> CycleGraph:
    """Populate a cycle with people, one client, every kind of link and an export.

    Every volunteer is linked to the client, to every mentor and to `role_id`;
    every mentor is linked to the client. One export job records a receipt
    for each volunteer.
    """
    graph = CycleGraph(cycle_id=cycle_id, role_id=role_id)

    volunteer_emails = await VolunteerService(session).batch_create_volunteers(
        cycle_id, VolunteerCreateFactory.batch(volunteers)
    )
    graph.volunteer_ids = list(volunteer_emails.values())
    mentor_emails = await MentorService(session).batch_create_mentors(
        cycle_id, MentorCreateFactory.batch(mentors)
    )
    graph.mentor_ids = list(mentor_emails.values())
    graph.client_ids = await NonprofitClientService(session).batch_create_clients(
        cycle_id, [NonprofitClientCreateFactory.build()]
    )
    client_id = graph.client_ids[0]

    relations = RelationService(session)
    await relations.batch_link(
        RelationKind.CLIENT_VOLUNTEER,
        cycle_id,
        [{"volunteer_id": v, "client_id": client_id} for v in graph.volunteer_ids],
    )
    await relations.batch_link(
        RelationKind.VOLUNTEER_TEAM_ROLE,
        cycle_id,
        [{"volunteer_id": v, "role_id": role_id} for v in graph.volunteer_ids],
    )
    await relations.batch_link(
        RelationKind.CLIENT_MENTOR,
        cycle_id,
        [{"mentor_id": m, "client_id": client_id} for m in graph.mentor_ids],
    )
    await relations.batch_link(
        RelationKind.VOLUNTEER_MENTOR,
        cycle_id,
        [
            {"mentor_id": m, "volunteer_id": v}
            for m in graph.mentor_ids
            for v in graph.volunteer_ids
        ],
    )

    jobs = JobService(session)
    job = await jobs.create_job(JobCreateFactory.build(), cycle_id=cycle_id)
    graph.job_id = job.id
    for i, volunteer_id in enumerate(graph.volunteer_ids):
        export_id = await jobs.record_export(
            volunteer_id, job.id, f"volunteer{i}@workspace.example.org"
        )
        graph.export_ids.append(export_id)

    return graph
