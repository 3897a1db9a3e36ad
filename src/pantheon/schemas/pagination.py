"""Cursor-based pagination for list reads (cycles, jobs)."""

import base64
import binascii
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

type CursorValue = datetime | UUID | str


class PaginatedResponse[T](BaseModel):
    """One page of results, newest first.

    The cursor is opaque to callers; pass it back unchanged to get the next page.
    """

    items: list[T]
    next_cursor: str | None = Field(
        default=None,
        description="Opaque cursor for fetching the next page. None if no more pages.",
    )
    has_more: bool = Field(
        default=False,
        description="Whether there are more items after this page.",
    )


def encode_cursor(value: CursorValue) -> str:
    """Encode the sort-key value of the last item on a page."""
    raw = value.isoformat() if isinstance(value, datetime) else str(value)
    return base64.urlsafe_b64encode(raw.encode()).decode()


def decode_cursor(cursor: str) -> CursorValue:
    """Decode a cursor back into the typed sort-key value.

    Raises:
        ValueError: If cursor is not valid base64 text
    """
    try:
        raw = base64.urlsafe_b64decode(cursor.encode()).decode()
    except (binascii.Error, UnicodeDecodeError) as e:
        raise ValueError("Invalid cursor") from e
    try:
        return datetime.fromisoformat(raw)
    except ValueError:
        pass
    try:
        return UUID(raw)
    except ValueError:
        return raw
