"""Aggregation engine: denormalized, nested read views of an entity.

Every details view is the same composition: load the base rows (with their
cycle's name), then for each relation descriptor run one left-join query
from the base table through the link table to the related table, group the
rows by base id and de-duplicate the related items. A base row with no
related rows gets an empty list, never a placeholder entry.
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from src.pantheon.core.exceptions import InternalConsistencyFault
from src.pantheon.core.logging import get_logger
from src.pantheon.models import (
    ClientMentor,
    ClientVolunteer,
    Mentor,
    NonprofitClient,
    ProjectCycle,
    TeamRole,
    Volunteer,
    VolunteerExport,
    VolunteerMentor,
    VolunteerTeamRole,
)
from src.pantheon.schemas.details import (
    MentorDetails,
    NonprofitClientDetails,
    VolunteerDetails,
)

logger = get_logger(__name__)

# Reserved labels carried alongside each projected row
BASE_ID = "_base_id"
LINK_REF = "_link_ref"
TARGET_ID = "_target_id"


@dataclass(frozen=True)
class RelationDescriptor:
    """How one embedded collection is joined and projected.

    Attributes:
        collection: Output attribute name (e.g. "mentors")
        target: Related table
        target_key: Identity column of the related row, used for de-duplication
        base_key: Column (on `link`, or on `target` when there is no link)
            that references the base row
        projection: Output name -> column of the embedded item
        link: Join table between base and target, if any
        link_target_key: Column on `link` that references the target row
        order_by: Ordering of the embedded items
    """

    collection: str
    target: type[SQLModel]
    target_key: Any
    base_key: Any
    projection: Mapping[str, Any]
    link: type[SQLModel] | None = None
    link_target_key: Any = None
    order_by: Sequence[Any] = field(default_factory=tuple)

    @property
    def link_ref(self) -> Any:
        """Column whose non-null value means a relation row exists."""
        return self.link_target_key if self.link is not None else self.target_key


def group_relation_rows(
    descriptor: RelationDescriptor,
    base_ids: Iterable[UUID],
    rows: Iterable[Mapping[str, Any]],
) -> dict[UUID, list[dict[str, Any]]]:
    """Collapse left-join rows into one de-duplicated item list per base id.

    Items keep the order in which they are first seen.

    Raises:
        InternalConsistencyFault: A link row points at a missing related row
    """
    grouped: dict[UUID, list[dict[str, Any]]] = {base_id: [] for base_id in base_ids}
    seen: dict[UUID, set[Any]] = {base_id: set() for base_id in grouped}
    for row in rows:
        base_id = row[BASE_ID]
        if row[LINK_REF] is None:
            continue
        target_id = row[TARGET_ID]
        if target_id is None:
            logger.error(
                "Dangling relation row",
                collection=descriptor.collection,
                base_id=str(base_id),
                target_ref=str(row[LINK_REF]),
            )
            raise InternalConsistencyFault(
                f"{descriptor.collection}: relation row for {base_id} references "
                f"missing {descriptor.target.__tablename__} row {row[LINK_REF]}"
            )
        if target_id in seen.setdefault(base_id, set()):
            continue
        seen[base_id].add(target_id)
        grouped.setdefault(base_id, []).append(
            {name: row[name] for name in descriptor.projection}
        )
    return grouped


async def _load_relation(
    session: AsyncSession,
    base: type[SQLModel],
    base_ids: list[UUID],
    descriptor: RelationDescriptor,
) -> dict[UUID, list[dict[str, Any]]]:
    base_pk = base.id  # type: ignore[attr-defined]
    query = select(
        base_pk.label(BASE_ID),
        descriptor.link_ref.label(LINK_REF),
        descriptor.target_key.label(TARGET_ID),
        *(column.label(name) for name, column in descriptor.projection.items()),
    ).select_from(base)
    if descriptor.link is not None:
        query = query.outerjoin(descriptor.link, descriptor.base_key == base_pk).outerjoin(
            descriptor.target, descriptor.target_key == descriptor.link_target_key
        )
    else:
        query = query.outerjoin(descriptor.target, descriptor.base_key == base_pk)
    query = query.where(base_pk.in_(base_ids)).order_by(base_pk, *descriptor.order_by)

    result = await session.execute(query)
    return group_relation_rows(descriptor, base_ids, result.mappings().all())


async def aggregate[ModelType: SQLModel](
    session: AsyncSession,
    base: type[ModelType],
    base_ids: list[UUID],
    relations: Sequence[RelationDescriptor],
) -> list[tuple[ModelType, str, dict[str, list[dict[str, Any]]]]]:
    """Load base rows with their cycle name and every embedded collection.

    Missing base ids are simply absent from the result; the result follows
    the order of `base_ids`.

    Returns:
        List of (base row, cycle name, collection name -> items)
    """
    if not base_ids:
        return []

    result = await session.execute(
        select(base, ProjectCycle.name)
        .join(ProjectCycle, ProjectCycle.id == base.project_cycle_id)  # type: ignore[attr-defined]
        .where(base.id.in_(base_ids))  # type: ignore[attr-defined]
    )
    rows = {entity.id: (entity, cycle_name) for entity, cycle_name in result.all()}
    found = [base_id for base_id in base_ids if base_id in rows]
    if not found:
        return []

    collections: dict[str, dict[UUID, list[dict[str, Any]]]] = {}
    for descriptor in relations:
        collections[descriptor.collection] = await _load_relation(
            session, base, found, descriptor
        )

    return [
        (
            rows[base_id][0],
            rows[base_id][1],
            {name: grouped[base_id] for name, grouped in collections.items()},
        )
        for base_id in found
    ]


# --- Relation descriptors ---

MENTOR_ITEM = {
    "mentor_id": Mentor.id,
    "first_name": Mentor.first_name,
    "last_name": Mentor.last_name,
    "email": Mentor.email,
    "phone": Mentor.phone,
    "company": Mentor.company,
    "job_title": Mentor.job_title,
}

VOLUNTEER_RELATIONS = (
    RelationDescriptor(
        collection="clients",
        target=NonprofitClient,
        target_key=NonprofitClient.id,
        link=ClientVolunteer,
        base_key=ClientVolunteer.volunteer_id,
        link_target_key=ClientVolunteer.client_id,
        projection={
            "client_id": NonprofitClient.id,
            "org_name": NonprofitClient.org_name,
            "project_name": NonprofitClient.project_name,
            "currently_active": ClientVolunteer.currently_active,
        },
        order_by=(ClientVolunteer.created_at,),
    ),
    RelationDescriptor(
        collection="mentors",
        target=Mentor,
        target_key=Mentor.id,
        link=VolunteerMentor,
        base_key=VolunteerMentor.volunteer_id,
        link_target_key=VolunteerMentor.mentor_id,
        projection=MENTOR_ITEM,
        order_by=(Mentor.last_name, Mentor.first_name),
    ),
    RelationDescriptor(
        collection="roles",
        target=TeamRole,
        target_key=TeamRole.id,
        link=VolunteerTeamRole,
        base_key=VolunteerTeamRole.volunteer_id,
        link_target_key=VolunteerTeamRole.role_id,
        projection={
            "role_id": TeamRole.id,
            "name": TeamRole.name,
            "description": TeamRole.description,
        },
        order_by=(TeamRole.name,),
    ),
    RelationDescriptor(
        collection="exports",
        target=VolunteerExport,
        target_key=VolunteerExport.id,
        base_key=VolunteerExport.volunteer_id,
        projection={
            "export_id": VolunteerExport.id,
            "job_id": VolunteerExport.job_id,
            "workspace_email": VolunteerExport.workspace_email,
            "org_unit": VolunteerExport.org_unit,
        },
        order_by=(VolunteerExport.created_at,),
    ),
)

MENTOR_RELATIONS = (
    RelationDescriptor(
        collection="volunteers",
        target=Volunteer,
        target_key=Volunteer.id,
        link=VolunteerMentor,
        base_key=VolunteerMentor.mentor_id,
        link_target_key=VolunteerMentor.volunteer_id,
        projection={
            "volunteer_id": Volunteer.id,
            "email": Volunteer.email,
            "name": Volunteer.first_name + " " + Volunteer.last_name,
        },
        order_by=(Volunteer.last_name, Volunteer.first_name),
    ),
    RelationDescriptor(
        collection="clients",
        target=NonprofitClient,
        target_key=NonprofitClient.id,
        link=ClientMentor,
        base_key=ClientMentor.mentor_id,
        link_target_key=ClientMentor.client_id,
        projection={
            "client_id": NonprofitClient.id,
            "org_name": NonprofitClient.org_name,
            "project_name": NonprofitClient.project_name,
        },
        order_by=(ClientMentor.created_at,),
    ),
)

CLIENT_RELATIONS = (
    RelationDescriptor(
        collection="volunteers",
        target=Volunteer,
        target_key=Volunteer.id,
        link=ClientVolunteer,
        base_key=ClientVolunteer.client_id,
        link_target_key=ClientVolunteer.volunteer_id,
        projection={
            "volunteer_id": Volunteer.id,
            "first_name": Volunteer.first_name,
            "last_name": Volunteer.last_name,
            "email": Volunteer.email,
            "phone": Volunteer.phone,
            "volunteer_gender": Volunteer.volunteer_gender,
            "volunteer_ethnicity": Volunteer.volunteer_ethnicity,
            "volunteer_age_range": Volunteer.volunteer_age_range,
            "currently_active": ClientVolunteer.currently_active,
        },
        order_by=(Volunteer.last_name, Volunteer.first_name),
    ),
    RelationDescriptor(
        collection="mentors",
        target=Mentor,
        target_key=Mentor.id,
        link=ClientMentor,
        base_key=ClientMentor.client_id,
        link_target_key=ClientMentor.mentor_id,
        projection=MENTOR_ITEM,
        order_by=(Mentor.last_name, Mentor.first_name),
    ),
)


# --- Typed views ---


async def volunteer_details(session: AsyncSession, ids: list[UUID]) -> list[VolunteerDetails]:
    return [
        VolunteerDetails(
            **volunteer.model_dump(),
            volunteer_id=volunteer.id,
            project_cycle_name=cycle_name,
            **collections,
        )
        for volunteer, cycle_name, collections in await aggregate(
            session, Volunteer, ids, VOLUNTEER_RELATIONS
        )
    ]


async def mentor_details(session: AsyncSession, ids: list[UUID]) -> list[MentorDetails]:
    return [
        MentorDetails(
            **mentor.model_dump(),
            mentor_id=mentor.id,
            project_cycle_name=cycle_name,
            **collections,
        )
        for mentor, cycle_name, collections in await aggregate(
            session, Mentor, ids, MENTOR_RELATIONS
        )
    ]


async def client_details(
    session: AsyncSession, ids: list[UUID]
) -> list[NonprofitClientDetails]:
    return [
        NonprofitClientDetails(
            **client.model_dump(),
            client_id=client.id,
            project_cycle_name=cycle_name,
            **collections,
        )
        for client, cycle_name, collections in await aggregate(
            session, NonprofitClient, ids, CLIENT_RELATIONS
        )
    ]
