"""Nonprofit client store operations and the client details view."""

from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from src.pantheon.core.exceptions import DomainViolation, DuplicateKey, NotFound
from src.pantheon.models import NonprofitClient
from src.pantheon.schemas import NonprofitClientUpdate
from src.pantheon.services import NonprofitClientService, RelationKind
from tests.factories import (
    MentorCreateFactory,
    NonprofitClientCreateFactory,
    ProjectCycleCreateFactory,
    VolunteerCreateFactory,
)
from tests.helpers import count_rows

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


async def test_new_client_details(client_service: NonprofitClientService, cycle_id):
    data = NonprofitClientCreateFactory.build()

    client_id = await client_service.create_client(cycle_id, data)
    details = await client_service.get_client_details(client_id)

    assert details.client_id == client_id
    assert details.org_name == data.org_name
    assert details.size == data.size
    assert details.volunteers == []
    assert details.mentors == []


async def test_uniqueness_is_the_four_field_composite(
    client_service: NonprofitClientService, cycle_service, cycle_id
):
    data = NonprofitClientCreateFactory.build()
    await client_service.create_client(cycle_id, data)

    # Same representative, different project: allowed
    await client_service.create_client(
        cycle_id, NonprofitClientCreateFactory.build(email=data.email, project_name="Other")
    )
    # Same everything in another cycle: allowed
    other = await cycle_service.create_cycle(ProjectCycleCreateFactory.build())
    await client_service.create_client(other.id, data)

    with pytest.raises(DuplicateKey) as exc_info:
        await client_service.create_client(cycle_id, data)

    assert exc_info.value.constraint == "uq_nonprofit_clients_email_cycle_org_project"


async def test_duplicate_within_batch(
    client_service: NonprofitClientService, db_session: AsyncSession, cycle_id
):
    data = NonprofitClientCreateFactory.build()

    with pytest.raises(DuplicateKey):
        await client_service.batch_create_clients(cycle_id, [data, data])

    assert await count_rows(db_session, NonprofitClient, project_cycle_id=cycle_id) == 0


async def test_invalid_impact_cause(client_service: NonprofitClientService, cycle_id):
    with pytest.raises(DomainViolation) as exc_info:
        await client_service.create_client(
            cycle_id, NonprofitClientCreateFactory.build(impact_causes=["education", "space"])
        )

    assert exc_info.value.field == "impact_causes"


async def test_client_details_embed_volunteers_and_mentors(
    client_service: NonprofitClientService,
    volunteer_service,
    mentor_service,
    relation_service,
    cycle_id,
):
    client_id = await client_service.create_client(cycle_id, NonprofitClientCreateFactory.build())
    volunteer = VolunteerCreateFactory.build(volunteer_ethnicity=["asian"])
    volunteer_id = await volunteer_service.create_volunteer(cycle_id, volunteer)
    mentor_id = await mentor_service.create_mentor(cycle_id, MentorCreateFactory.build())
    await relation_service.link(
        RelationKind.CLIENT_VOLUNTEER, cycle_id, volunteer_id=volunteer_id, client_id=client_id
    )
    await relation_service.link(
        RelationKind.CLIENT_MENTOR, cycle_id, mentor_id=mentor_id, client_id=client_id
    )

    details = await client_service.get_client_details(client_id)

    assert [v.volunteer_id for v in details.volunteers] == [volunteer_id]
    assert details.volunteers[0].volunteer_ethnicity == ["asian"]
    assert details.volunteers[0].currently_active is True
    assert [m.mentor_id for m in details.mentors] == [mentor_id]


async def test_details_by_org_name_spans_projects(
    client_service: NonprofitClientService, cycle_id
):
    await client_service.batch_create_clients(
        cycle_id,
        [
            NonprofitClientCreateFactory.build(org_name="Food Bank", project_name="Website"),
            NonprofitClientCreateFactory.build(org_name="Food Bank", project_name="Donor CRM"),
            NonprofitClientCreateFactory.build(org_name="Animal Shelter"),
        ],
    )

    details = await client_service.get_client_details_by_org_name("Food Bank")

    assert {d.project_name for d in details} == {"Website", "Donor CRM"}


async def test_update_client(client_service: NonprofitClientService, cycle_id):
    client_id = await client_service.create_client(cycle_id, NonprofitClientCreateFactory.build())

    client = await client_service.update_client(client_id, NonprofitClientUpdate(size="21-50"))

    assert client.size == "21-50"


async def test_missing_client(client_service: NonprofitClientService):
    with pytest.raises(NotFound):
        await client_service.get_client_details(uuid4())
