"""Repository for Mentor entity."""

from uuid import UUID

from sqlmodel import select

from src.pantheon.models import Mentor
from src.pantheon.repositories.base import BaseRepository


class MentorRepository(BaseRepository[Mentor]):
    model = Mentor

    async def get_by_email(self, email: str) -> Mentor | None:
        result = await self.session.execute(select(Mentor).where(Mentor.email == email))
        return result.scalar_one_or_none()

    async def existing_emails(self, emails: list[str]) -> set[str]:
        if not emails:
            return set()
        result = await self.session.execute(
            select(Mentor.email).where(Mentor.email.in_(emails))  # type: ignore[attr-defined]
        )
        return set(result.scalars().all())

    async def list_ids_by_cycle(self, cycle_id: UUID) -> list[UUID]:
        result = await self.session.execute(
            select(Mentor.id)
            .where(Mentor.project_cycle_id == cycle_id)
            .order_by(Mentor.last_name, Mentor.first_name)
        )
        return list(result.scalars().all())
