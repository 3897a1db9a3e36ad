"""Team role catalog service."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.pantheon.core.db import reading, transaction
from src.pantheon.core.exceptions import DuplicateKey
from src.pantheon.core.logging import get_logger
from src.pantheon.models import TeamRole
from src.pantheon.repositories import TeamRoleRepository, cascade_delete
from src.pantheon.services.base import flush

logger = get_logger(__name__)

NAME_CONSTRAINT = "uq_team_roles_name"


class TeamRoleService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.role_repo = TeamRoleRepository(session)

    async def list_roles(self) -> list[TeamRole]:
        async with reading(self.session, "list_roles"):
            return await self.role_repo.list_all()

    async def get_role_by_name(self, name: str) -> TeamRole | None:
        async with reading(self.session, "get_role_by_name"):
            return await self.role_repo.get_by_name(name)

    async def create_role(self, name: str, description: str) -> TeamRole:
        """Add a role to the catalog.

        Raises:
            DuplicateKey: A role with that name exists
        """
        async with transaction(self.session, "create_role"):
            if await self.role_repo.get_by_name(name):
                logger.warning("Duplicate team role", name=name)
                raise DuplicateKey(NAME_CONSTRAINT, "team_role")
            role = TeamRole(name=name, description=description)
            self.role_repo.add(role)
            await flush(self.session, "team_role", TeamRole)

        logger.info("Team role created", role_id=str(role.id), name=name)
        return role

    async def delete_role(self, role_id: UUID) -> None:
        """Remove a role and every volunteer assignment to it."""
        async with transaction(self.session, "delete_role"):
            counts = await cascade_delete(self.session, TeamRole, role_id)

        if counts[TeamRole.__tablename__]:
            logger.info(
                "Cascade delete completed",
                entity="team_role",
                entity_id=str(role_id),
                rows=dict(counts),
            )
