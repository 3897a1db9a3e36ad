"""Repository for Job entity."""

from uuid import UUID

from sqlmodel import select

from src.pantheon.models import Job
from src.pantheon.repositories.base import BaseRepository


class JobRepository(BaseRepository[Job]):
    model = Job

    async def list_all(
        self,
        cursor: str | None = None,
        limit: int = 50,
        status: str | None = None,
        cycle_id: UUID | None = None,
    ) -> tuple[list[Job], str | None, bool]:
        """List jobs newest first, optionally filtered by status and cycle."""
        query = select(Job)
        if status is not None:
            query = query.where(Job.status == status)
        if cycle_id is not None:
            query = query.where(Job.project_cycle_id == cycle_id)
        return await self.paginate(query, cursor, limit, Job.created_at)
