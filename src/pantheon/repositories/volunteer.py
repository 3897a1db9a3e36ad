"""Repository for Volunteer entity."""

from uuid import UUID

from sqlmodel import select

from src.pantheon.models import Job, JobStatus, Volunteer, VolunteerExport
from src.pantheon.repositories.base import BaseRepository


class VolunteerRepository(BaseRepository[Volunteer]):
    model = Volunteer

    async def get_by_email(self, email: str) -> Volunteer | None:
        result = await self.session.execute(select(Volunteer).where(Volunteer.email == email))
        return result.scalar_one_or_none()

    async def existing_emails(self, emails: list[str]) -> set[str]:
        """Return which of `emails` are already taken."""
        if not emails:
            return set()
        result = await self.session.execute(
            select(Volunteer.email).where(Volunteer.email.in_(emails))  # type: ignore[attr-defined]
        )
        return set(result.scalars().all())

    async def list_ids_by_cycle(self, cycle_id: UUID) -> list[UUID]:
        result = await self.session.execute(
            select(Volunteer.id)
            .where(Volunteer.project_cycle_id == cycle_id)
            .order_by(Volunteer.last_name, Volunteer.first_name)
        )
        return list(result.scalars().all())

    async def list_unexported(self, cycle_id: UUID) -> list[Volunteer]:
        """Volunteers in a cycle with no receipt from a completed export job."""
        exported = (
            select(VolunteerExport.volunteer_id)
            .join(Job, Job.id == VolunteerExport.job_id)
            .where(Job.status == JobStatus.COMPLETE.value)
        )
        result = await self.session.execute(
            select(Volunteer)
            .where(
                Volunteer.project_cycle_id == cycle_id,
                Volunteer.id.not_in(exported),  # type: ignore[attr-defined]
            )
            .order_by(Volunteer.last_name, Volunteer.first_name)
        )
        return list(result.scalars().all())
