"""Team role catalog operations."""

import pytest

from src.pantheon.core.exceptions import DuplicateKey
from src.pantheon.models import DEFAULT_TEAM_ROLES
from src.pantheon.services import TeamRoleService

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


async def test_default_catalog(role_service: TeamRoleService, team_roles):
    roles = await role_service.list_roles()

    assert [r.name for r in roles] == sorted(DEFAULT_TEAM_ROLES)


async def test_get_role_by_name(role_service: TeamRoleService, team_roles):
    role = await role_service.get_role_by_name("designer")

    assert role is not None
    assert role.id == team_roles["designer"]
    assert role.description == DEFAULT_TEAM_ROLES["designer"]
    assert await role_service.get_role_by_name("astronaut") is None


async def test_duplicate_role_name(role_service: TeamRoleService, team_roles):
    with pytest.raises(DuplicateKey) as exc_info:
        await role_service.create_role("engineer", "Another engineer")

    assert exc_info.value.constraint == "uq_team_roles_name"


async def test_delete_missing_role_is_noop(role_service: TeamRoleService, team_roles):
    role = await role_service.create_role("data_analyst", "Works on reporting projects")
    role_id = role.id

    await role_service.delete_role(role_id)
    await role_service.delete_role(role_id)

    assert await role_service.get_role_by_name("data_analyst") is None
