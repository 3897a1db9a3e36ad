"""Repository for TeamRole catalog."""

from sqlmodel import select

from src.pantheon.models import TeamRole
from src.pantheon.repositories.base import BaseRepository


class TeamRoleRepository(BaseRepository[TeamRole]):
    model = TeamRole

    async def get_by_name(self, name: str) -> TeamRole | None:
        result = await self.session.execute(select(TeamRole).where(TeamRole.name == name))
        return result.scalar_one_or_none()

    async def list_all(self) -> list[TeamRole]:
        result = await self.session.execute(select(TeamRole).order_by(TeamRole.name))
        return list(result.scalars().all())
