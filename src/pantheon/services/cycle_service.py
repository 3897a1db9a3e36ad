"""Project cycle service."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.pantheon.core.db import reading, transaction
from src.pantheon.core.exceptions import DuplicateKey
from src.pantheon.core.logging import get_logger
from src.pantheon.models import ProjectCycle
from src.pantheon.repositories import ProjectCycleRepository, cascade_delete
from src.pantheon.schemas import (
    BasicStats,
    PaginatedResponse,
    ProjectCycleCreate,
    ProjectCycleRead,
    ProjectCycleUpdate,
)
from src.pantheon.services.base import apply_patch, flush, require_found

logger = get_logger(__name__)

NAME_CONSTRAINT = "uq_project_cycles_name"


class ProjectCycleService:
    """Create, read, archive and delete project cycles."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.cycle_repo = ProjectCycleRepository(session)

    async def create_cycle(self, data: ProjectCycleCreate) -> ProjectCycle:
        """Create a project cycle.

        Raises:
            DuplicateKey: If a cycle with the same name exists
        """
        async with transaction(self.session, "create_cycle"):
            if await self.cycle_repo.get_by_name(data.name):
                logger.warning("Duplicate cycle name", name=data.name)
                raise DuplicateKey(NAME_CONSTRAINT, "project_cycle")
            cycle = ProjectCycle(**data.model_dump())
            self.cycle_repo.add(cycle)
            await flush(self.session, "project_cycle", ProjectCycle)

        logger.info("Project cycle created", project_cycle_id=str(cycle.id), name=cycle.name)
        return cycle

    async def get_cycle(self, cycle_id: UUID) -> ProjectCycle | None:
        async with reading(self.session, "get_cycle"):
            return await self.cycle_repo.get_by_id(cycle_id)

    async def list_cycles(
        self, cursor: str | None = None, limit: int = 100, include_archived: bool = True
    ) -> PaginatedResponse[ProjectCycleRead]:
        """List cycles, newest first."""
        async with reading(self.session, "list_cycles"):
            items, next_cursor, has_more = await self.cycle_repo.list_all(
                cursor, limit, include_archived
            )
        return PaginatedResponse[ProjectCycleRead](
            items=[ProjectCycleRead.model_validate(c) for c in items],
            next_cursor=next_cursor,
            has_more=has_more,
        )

    async def update_cycle(self, cycle_id: UUID, data: ProjectCycleUpdate) -> ProjectCycle:
        """Apply a partial update.

        Raises:
            NotFound: If the cycle does not exist
            DuplicateKey: If renaming onto an existing cycle name
        """
        async with transaction(self.session, "update_cycle"):
            cycle = require_found(
                await self.cycle_repo.get_by_id(cycle_id), "project_cycle", cycle_id
            )
            changed = apply_patch(cycle, data.model_dump(exclude_unset=True))
            await flush(self.session, "project_cycle", ProjectCycle)

        if changed:
            logger.info("Project cycle updated", project_cycle_id=str(cycle_id), fields=changed)
        return cycle

    async def archive_cycle(self, cycle_id: UUID, archived: bool = True) -> ProjectCycle:
        """Archive (or unarchive) a cycle. Archived cycles block export actions."""
        return await self.update_cycle(cycle_id, ProjectCycleUpdate(archived=archived))

    async def delete_cycle(self, cycle_id: UUID) -> None:
        """Delete a cycle and everything it owns in one transaction."""
        async with transaction(self.session, "delete_cycle"):
            counts = await cascade_delete(self.session, ProjectCycle, cycle_id)

        if not counts[ProjectCycle.__tablename__]:
            logger.info("Project cycle already absent", project_cycle_id=str(cycle_id))
            return
        logger.info(
            "Cascade delete completed",
            entity="project_cycle",
            entity_id=str(cycle_id),
            rows=dict(counts),
        )

    async def get_basic_stats(self, cycle_id: UUID) -> BasicStats:
        """Headcounts of volunteers, mentors and nonprofit clients in a cycle."""
        async with reading(self.session, "get_basic_stats"):
            counts = await self.cycle_repo.count_members(cycle_id)
        num_volunteers, num_mentors, num_clients = counts
        return BasicStats(
            num_volunteers=num_volunteers,
            num_mentors=num_mentors,
            num_nonprofits=num_clients,
        )
