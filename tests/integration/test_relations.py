"""Linking and unlinking volunteers, mentors, clients and roles."""

from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from src.pantheon.core.exceptions import ConstraintError, DuplicateRelation, NotFound
from src.pantheon.models import ClientVolunteer, VolunteerMentor
from src.pantheon.services import RelationKind, RelationService
from tests.factories import (
    MentorCreateFactory,
    NonprofitClientCreateFactory,
    ProjectCycleCreateFactory,
    VolunteerCreateFactory,
)
from tests.helpers import count_rows

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


@pytest.fixture
async def volunteer_id(volunteer_service, cycle_id):
    return await volunteer_service.create_volunteer(cycle_id, VolunteerCreateFactory.build())


@pytest.fixture
async def client_id(client_service, cycle_id):
    return await client_service.create_client(cycle_id, NonprofitClientCreateFactory.build())


async def test_duplicate_client_volunteer_pairing(
    relation_service: RelationService, db_session: AsyncSession, cycle_id, volunteer_id, client_id
):
    await relation_service.link(
        RelationKind.CLIENT_VOLUNTEER, cycle_id, volunteer_id=volunteer_id, client_id=client_id
    )

    with pytest.raises(DuplicateRelation) as exc_info:
        await relation_service.link(
            RelationKind.CLIENT_VOLUNTEER, cycle_id, volunteer_id=volunteer_id, client_id=client_id
        )

    assert exc_info.value.relation == "client_volunteer"
    assert exc_info.value.keys["volunteer_id"] == volunteer_id
    assert await count_rows(db_session, ClientVolunteer, volunteer_id=volunteer_id) == 1


async def test_three_mentors_appear_once_each(
    relation_service: RelationService, mentor_service, volunteer_service, cycle_id, volunteer_id
):
    mentor_ids = list(
        (
            await mentor_service.batch_create_mentors(cycle_id, MentorCreateFactory.batch(3))
        ).values()
    )
    # Link in reverse order to show collection order does not depend on it
    await relation_service.batch_link(
        RelationKind.VOLUNTEER_MENTOR,
        cycle_id,
        [{"mentor_id": m, "volunteer_id": volunteer_id} for m in reversed(mentor_ids)],
    )

    details = await volunteer_service.get_volunteer_details(volunteer_id)

    embedded = [m.mentor_id for m in details.mentors]
    assert len(embedded) == 3
    assert set(embedded) == set(mentor_ids)
    assert all(m.email for m in details.mentors)


async def test_volunteer_roles(
    relation_service: RelationService, volunteer_service, team_roles, cycle_id, volunteer_id
):
    for name in ("engineer", "product_manager"):
        await relation_service.link(
            RelationKind.VOLUNTEER_TEAM_ROLE,
            cycle_id,
            volunteer_id=volunteer_id,
            role_id=team_roles[name],
        )

    details = await volunteer_service.get_volunteer_details(volunteer_id)

    assert [r.name for r in details.roles] == ["engineer", "product_manager"]


async def test_same_role_twice_is_duplicate(
    relation_service: RelationService, team_roles, cycle_id, volunteer_id
):
    keys = {"volunteer_id": volunteer_id, "role_id": team_roles["designer"]}
    await relation_service.link(RelationKind.VOLUNTEER_TEAM_ROLE, cycle_id, **keys)

    with pytest.raises(DuplicateRelation):
        await relation_service.link(RelationKind.VOLUNTEER_TEAM_ROLE, cycle_id, **keys)


async def test_link_to_missing_row(relation_service: RelationService, cycle_id, volunteer_id):
    with pytest.raises(ConstraintError) as exc_info:
        await relation_service.link(
            RelationKind.CLIENT_VOLUNTEER, cycle_id, volunteer_id=volunteer_id, client_id=uuid4()
        )

    assert exc_info.value.constraint == "client_volunteers_client_id_fkey"


async def test_link_across_cycles(
    relation_service: RelationService, cycle_service, client_service, cycle_id, volunteer_id
):
    other = await cycle_service.create_cycle(ProjectCycleCreateFactory.build())
    foreign_client = await client_service.create_client(
        other.id, NonprofitClientCreateFactory.build()
    )

    with pytest.raises(ConstraintError) as exc_info:
        await relation_service.link(
            RelationKind.CLIENT_VOLUNTEER,
            cycle_id,
            volunteer_id=volunteer_id,
            client_id=foreign_client,
        )

    assert exc_info.value.constraint == "cycle_mismatch"


async def test_wrong_keys_for_kind(relation_service: RelationService, cycle_id, volunteer_id):
    with pytest.raises(ValueError):
        await relation_service.link(
            RelationKind.CLIENT_MENTOR, cycle_id, volunteer_id=volunteer_id, client_id=uuid4()
        )


async def test_batch_link_is_atomic(
    relation_service: RelationService,
    mentor_service,
    db_session: AsyncSession,
    cycle_id,
    volunteer_id,
):
    mentor_id = await mentor_service.create_mentor(cycle_id, MentorCreateFactory.build())
    pairs = [
        {"mentor_id": mentor_id, "volunteer_id": volunteer_id},
        {"mentor_id": uuid4(), "volunteer_id": volunteer_id},
    ]

    with pytest.raises(ConstraintError):
        await relation_service.batch_link(RelationKind.VOLUNTEER_MENTOR, cycle_id, pairs)

    assert await count_rows(db_session, VolunteerMentor, volunteer_id=volunteer_id) == 0


async def test_unlink(
    relation_service: RelationService, volunteer_service, cycle_id, volunteer_id, client_id
):
    keys = {"volunteer_id": volunteer_id, "client_id": client_id}
    await relation_service.link(RelationKind.CLIENT_VOLUNTEER, cycle_id, **keys)

    await relation_service.unlink(RelationKind.CLIENT_VOLUNTEER, cycle_id, **keys)
    # Unlinking again is a no-op
    await relation_service.unlink(RelationKind.CLIENT_VOLUNTEER, cycle_id, **keys)

    details = await volunteer_service.get_volunteer_details(volunteer_id)
    assert details.clients == []


async def test_team_switch_marks_assignment_historical(
    relation_service: RelationService, volunteer_service, cycle_id, volunteer_id, client_id
):
    await relation_service.link(
        RelationKind.CLIENT_VOLUNTEER, cycle_id, volunteer_id=volunteer_id, client_id=client_id
    )

    link = await relation_service.set_client_volunteer_active(
        cycle_id, volunteer_id, client_id, active=False
    )

    assert link.currently_active is False
    assert link.updated_at is not None
    details = await volunteer_service.get_volunteer_details(volunteer_id)
    assert details.clients[0].currently_active is False


async def test_team_switch_on_missing_pairing(
    relation_service: RelationService, cycle_id, volunteer_id, client_id
):
    with pytest.raises(NotFound):
        await relation_service.set_client_volunteer_active(
            cycle_id, volunteer_id, client_id, active=False
        )
