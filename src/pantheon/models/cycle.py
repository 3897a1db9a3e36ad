"""Project cycle model - the temporal partition every other row hangs off."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime, UniqueConstraint
from sqlmodel import Field, SQLModel

from src.pantheon.models.base import utc_now


class ProjectCycle(SQLModel, table=True):
    """A named, time-boxed cohort (e.g. "Summer 2024").

    Archiving blocks cycle-scoped export actions; it never deletes data.
    """

    __tablename__ = "project_cycles"
    __table_args__ = (UniqueConstraint("name", name="uq_project_cycles_name"),)

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=200)
    description: str | None = Field(default=None)
    archived: bool = Field(default=False)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)
    updated_at: datetime | None = Field(default=None, sa_type=DateTime)
