"""Repository for the join tables pairing volunteers, mentors, clients and roles."""

from typing import Any

from sqlalchemy import and_, delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

type LinkModel = type[SQLModel]


def _key_clause(model: LinkModel, keys: dict[str, Any]) -> Any:
    return and_(*(getattr(model, column) == value for column, value in keys.items()))


class LinkRepository:
    """Data access for composite-keyed link rows.

    Keys are plain column -> value dicts covering the whole primary key.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, model: LinkModel, keys: dict[str, Any]) -> SQLModel | None:
        result = await self.session.execute(select(model).where(_key_clause(model, keys)))
        return result.scalar_one_or_none()

    def add(self, link: SQLModel) -> None:
        self.session.add(link)

    async def delete(self, model: LinkModel, keys: dict[str, Any]) -> int:
        """Delete one link row. Returns the number of rows removed (0 or 1)."""
        result = await self.session.execute(
            delete(model)
            .where(_key_clause(model, keys))
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

