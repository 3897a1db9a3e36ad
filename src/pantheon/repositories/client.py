"""Repository for NonprofitClient entity."""

from uuid import UUID

from sqlmodel import select

from src.pantheon.models import NonprofitClient
from src.pantheon.repositories.base import BaseRepository


class NonprofitClientRepository(BaseRepository[NonprofitClient]):
    model = NonprofitClient

    async def get_by_natural_key(
        self, email: str, cycle_id: UUID, org_name: str, project_name: str
    ) -> NonprofitClient | None:
        """Look up a client by its four-field unique key."""
        result = await self.session.execute(
            select(NonprofitClient).where(
                NonprofitClient.email == email,
                NonprofitClient.project_cycle_id == cycle_id,
                NonprofitClient.org_name == org_name,
                NonprofitClient.project_name == project_name,
            )
        )
        return result.scalar_one_or_none()

    async def list_ids_by_org_name(self, org_name: str) -> list[UUID]:
        result = await self.session.execute(
            select(NonprofitClient.id)
            .where(NonprofitClient.org_name == org_name)
            .order_by(NonprofitClient.created_at)
        )
        return list(result.scalars().all())

    async def list_ids_by_cycle(self, cycle_id: UUID) -> list[UUID]:
        result = await self.session.execute(
            select(NonprofitClient.id)
            .where(NonprofitClient.project_cycle_id == cycle_id)
            .order_by(NonprofitClient.org_name, NonprofitClient.project_name)
        )
        return list(result.scalars().all())
