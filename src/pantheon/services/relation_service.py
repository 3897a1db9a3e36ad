"""Links between volunteers, mentors, clients and team roles within a cycle."""

from dataclasses import dataclass
from enum import Enum
from typing import Any
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from src.pantheon.core.db import transaction
from src.pantheon.core.db.errors import is_unique_violation
from src.pantheon.core.exceptions import ConstraintError, DuplicateRelation, NotFound
from src.pantheon.core.logging import get_logger
from src.pantheon.models import (
    ClientMentor,
    ClientVolunteer,
    Mentor,
    NonprofitClient,
    TeamRole,
    Volunteer,
    VolunteerMentor,
    VolunteerTeamRole,
)
from src.pantheon.repositories import LinkRepository
from src.pantheon.services.base import (
    apply_patch,
    fk_name,
    require_cycle,
    translate_integrity_error,
)

logger = get_logger(__name__)


class RelationKind(str, Enum):
    VOLUNTEER_TEAM_ROLE = "volunteer_team_role"
    CLIENT_VOLUNTEER = "client_volunteer"
    CLIENT_MENTOR = "client_mentor"
    VOLUNTEER_MENTOR = "volunteer_mentor"


@dataclass(frozen=True)
class LinkShape:
    model: type[SQLModel]
    # link column -> referenced table
    participants: dict[str, type[SQLModel]]


LINKS: dict[RelationKind, LinkShape] = {
    RelationKind.VOLUNTEER_TEAM_ROLE: LinkShape(
        VolunteerTeamRole, {"volunteer_id": Volunteer, "role_id": TeamRole}
    ),
    RelationKind.CLIENT_VOLUNTEER: LinkShape(
        ClientVolunteer, {"volunteer_id": Volunteer, "client_id": NonprofitClient}
    ),
    RelationKind.CLIENT_MENTOR: LinkShape(
        ClientMentor, {"mentor_id": Mentor, "client_id": NonprofitClient}
    ),
    RelationKind.VOLUNTEER_MENTOR: LinkShape(
        VolunteerMentor, {"mentor_id": Mentor, "volunteer_id": Volunteer}
    ),
}


def _link_keys(kind: RelationKind, cycle_id: UUID, keys: dict[str, UUID]) -> dict[str, Any]:
    expected = set(LINKS[kind].participants)
    if set(keys) != expected:
        raise ValueError(f"{kind.value} links require keys {sorted(expected)}, got {sorted(keys)}")
    return {**keys, "project_cycle_id": cycle_id}


class RelationService:
    """Create and remove link rows.

    Every participant must exist and, when it is cycle-scoped, belong to
    the cycle the link is recorded under.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.link_repo = LinkRepository(session)

    async def _check_participants(self, kind: RelationKind, keys: dict[str, Any]) -> None:
        shape = LINKS[kind]
        table = shape.model.__tablename__
        cycle_id = keys["project_cycle_id"]
        for column, target in shape.participants.items():
            row = await self.session.get(target, keys[column], populate_existing=True)
            if row is None:
                logger.warning("Link to missing row", relation=kind.value, column=column)
                raise ConstraintError(
                    fk_name(table, column),
                    f"{target.__tablename__} {keys[column]} does not exist",
                )
            row_cycle = getattr(row, "project_cycle_id", cycle_id)
            if row_cycle != cycle_id:
                logger.warning(
                    "Link across cycles",
                    relation=kind.value,
                    column=column,
                    project_cycle_id=str(cycle_id),
                )
                raise ConstraintError(
                    "cycle_mismatch",
                    f"{target.__tablename__} {keys[column]} is not in project cycle {cycle_id}",
                )

    async def _add_link(self, kind: RelationKind, keys: dict[str, Any]) -> None:
        shape = LINKS[kind]
        await self._check_participants(kind, keys)
        if await self.link_repo.get(shape.model, keys):
            logger.warning("Duplicate relation", relation=kind.value)
            raise DuplicateRelation(kind.value, keys)
        self.link_repo.add(shape.model(**keys))
        try:
            await self.session.flush()
        except IntegrityError as e:
            if is_unique_violation(e):
                raise DuplicateRelation(kind.value, keys) from e
            raise translate_integrity_error(e, kind.value, shape.model) from e

    async def link(self, kind: RelationKind, cycle_id: UUID, **keys: UUID) -> None:
        """Record a pairing, e.g. `link(CLIENT_VOLUNTEER, cycle, volunteer_id=v, client_id=c)`.

        Raises:
            DuplicateRelation: The pairing already exists
            ConstraintError: A participant is missing or in another cycle
        """
        await self.batch_link(kind, cycle_id, [keys])

    async def batch_link(
        self, kind: RelationKind, cycle_id: UUID, pairs: list[dict[str, UUID]]
    ) -> None:
        """Record many pairings of one kind atomically: all or none."""
        link_keys = [_link_keys(kind, cycle_id, pair) for pair in pairs]
        async with transaction(self.session, f"link_{kind.value}"):
            await require_cycle(self.session, cycle_id, LINKS[kind].model.__tablename__)
            for keys in link_keys:
                await self._add_link(kind, keys)

        logger.info(
            "Relations linked",
            relation=kind.value,
            project_cycle_id=str(cycle_id),
            count=len(link_keys),
        )

    async def unlink(self, kind: RelationKind, cycle_id: UUID, **keys: UUID) -> None:
        """Remove a pairing. Removing an absent pairing is a no-op."""
        link_keys = _link_keys(kind, cycle_id, keys)
        async with transaction(self.session, f"unlink_{kind.value}"):
            removed = await self.link_repo.delete(LINKS[kind].model, link_keys)

        if removed:
            logger.info("Relation unlinked", relation=kind.value, project_cycle_id=str(cycle_id))
        else:
            logger.info("Relation already absent", relation=kind.value)

    async def set_client_volunteer_active(
        self, cycle_id: UUID, volunteer_id: UUID, client_id: UUID, active: bool
    ) -> ClientVolunteer:
        """Mark a team assignment live or historical (team switch).

        Raises:
            NotFound: The pairing does not exist
        """
        keys = _link_keys(
            RelationKind.CLIENT_VOLUNTEER,
            cycle_id,
            {"volunteer_id": volunteer_id, "client_id": client_id},
        )
        async with transaction(self.session, "set_client_volunteer_active"):
            link = await self.link_repo.get(ClientVolunteer, keys)
            if link is None:
                raise NotFound(RelationKind.CLIENT_VOLUNTEER.value, keys)
            changed = apply_patch(link, {"currently_active": active})

        if changed:
            logger.info(
                "Team assignment updated",
                volunteer_id=str(volunteer_id),
                client_id=str(client_id),
                currently_active=active,
            )
        return link  # type: ignore[return-value]
