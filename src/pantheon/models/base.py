from datetime import UTC, datetime

from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests).
JSONType = JSON().with_variant(JSONB(), "postgresql")


def utc_now() -> datetime:
    """Return current UTC time as naive datetime (for PostgreSQL TIMESTAMP).

    Timestamp fields declare `sa_type=DateTime`, i.e. TIMESTAMP WITHOUT TIME
    ZONE, so SQLModel stores naive values as-is. All times are UTC by convention.
    """
    return datetime.now(UTC).replace(tzinfo=None)
