"""Repository for volunteer export receipts."""

from typing import Any
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select

from src.pantheon.models import Job, VolunteerExport
from src.pantheon.repositories.base import BaseRepository


class ExportRepository(BaseRepository[VolunteerExport]):
    model = VolunteerExport

    async def get_by_volunteer_and_job(
        self, volunteer_id: UUID, job_id: UUID
    ) -> VolunteerExport | None:
        result = await self.session.execute(
            select(VolunteerExport).where(
                VolunteerExport.volunteer_id == volunteer_id,
                VolunteerExport.job_id == job_id,
            )
        )
        return result.scalar_one_or_none()

    async def delete_by_ids(self, export_ids: list[UUID]) -> int:
        if not export_ids:
            return 0
        result = await self.session.execute(
            delete(VolunteerExport)
            .where(VolunteerExport.id.in_(export_ids))  # type: ignore[attr-defined]
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    async def list_by_cycle(self, cycle_id: UUID) -> list[Any]:
        """Receipts whose owning job belongs to `cycle_id`, with that job's status.

        Returns rows of (VolunteerExport, project_cycle_id, status), oldest first.
        """
        result = await self.session.execute(
            select(VolunteerExport, Job.project_cycle_id, Job.status)
            .join(Job, Job.id == VolunteerExport.job_id)
            .where(Job.project_cycle_id == cycle_id)
            .order_by(VolunteerExport.created_at, VolunteerExport.id)
        )
        return list(result.all())
