"""Base repository with common data-access operations."""

from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

from src.pantheon.schemas.pagination import decode_cursor, encode_cursor


class BaseRepository[ModelType: SQLModel]:
    """Base repository providing common database operations.

    Repositories handle data access only. Transaction control (commit)
    is done in the service layer.
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, id: UUID, for_update: bool = False) -> ModelType | None:
        """Get a record by its primary key.

        Args:
            id: Primary key
            for_update: Lock the row until the surrounding transaction ends
                and reload it even if the session already holds a copy.
        """
        query = select(self.model).where(self.model.id == id)  # type: ignore[attr-defined]
        if for_update:
            query = query.with_for_update().execution_options(populate_existing=True)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    def add(self, entity: ModelType) -> None:
        """Add entity to session (no flush/commit)."""
        self.session.add(entity)

    def add_all(self, entities: list[ModelType]) -> None:
        self.session.add_all(entities)

    async def paginate(
        self,
        query: Any,  # SelectOfScalar or Select - SQLModel/SQLAlchemy query
        cursor: str | None,
        limit: int,
        cursor_field: Any,
    ) -> tuple[list[ModelType], str | None, bool]:
        """Execute cursor-based pagination on a query, newest first.

        Args:
            query: The base query to paginate
            cursor: Optional cursor from the previous page
            limit: Maximum number of items to return
            cursor_field: Column the cursor is taken from (e.g. created_at)

        Returns:
            Tuple of (items, next_cursor, has_more)
        """
        if cursor:
            try:
                query = query.where(cursor_field < decode_cursor(cursor))
            except ValueError:
                # Invalid cursor - ignore and start from beginning
                pass

        query = query.order_by(cursor_field.desc()).limit(limit + 1)

        result = await self.session.execute(query)
        items = list(result.scalars().all())

        has_more = len(items) > limit
        if has_more:
            items = items[:limit]

        next_cursor = None
        if has_more and items:
            value = getattr(items[-1], cursor_field.key)
            if value is not None:
                next_cursor = encode_cursor(value)

        return items, next_cursor, has_more
