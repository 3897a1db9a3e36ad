"""Repository for ProjectCycle entity."""

from uuid import UUID

from sqlalchemy import func
from sqlmodel import select

from src.pantheon.models import Mentor, NonprofitClient, ProjectCycle, Volunteer
from src.pantheon.repositories.base import BaseRepository


class ProjectCycleRepository(BaseRepository[ProjectCycle]):
    model = ProjectCycle

    async def get_by_name(self, name: str) -> ProjectCycle | None:
        result = await self.session.execute(select(ProjectCycle).where(ProjectCycle.name == name))
        return result.scalar_one_or_none()

    async def list_all(
        self,
        cursor: str | None = None,
        limit: int = 100,
        include_archived: bool = True,
    ) -> tuple[list[ProjectCycle], str | None, bool]:
        """List cycles newest first with cursor-based pagination."""
        query = select(ProjectCycle)
        if not include_archived:
            query = query.where(ProjectCycle.archived.is_(False))  # type: ignore[attr-defined]
        return await self.paginate(query, cursor, limit, ProjectCycle.created_at)

    async def count_members(self, cycle_id: UUID) -> tuple[int, int, int]:
        """Count volunteers, mentors and nonprofit clients in a cycle."""
        volunteers = select(func.count()).where(Volunteer.project_cycle_id == cycle_id)
        mentors = select(func.count()).where(Mentor.project_cycle_id == cycle_id)
        clients = select(func.count()).where(NonprofitClient.project_cycle_id == cycle_id)
        result = await self.session.execute(
            select(
                volunteers.scalar_subquery(),
                mentors.scalar_subquery(),
                clients.scalar_subquery(),
            )
        )
        num_volunteers, num_mentors, num_clients = result.one()
        return num_volunteers, num_mentors, num_clients
