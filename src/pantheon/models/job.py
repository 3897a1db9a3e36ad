"""Integration job and export receipt models."""

from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import Column, DateTime, UniqueConstraint
from sqlmodel import Field, SQLModel

from src.pantheon.models.base import JSONType, utc_now
from src.pantheon.models.enums import JobStatus


class Job(SQLModel, table=True):
    """Long-running import/export task tracked through its lifecycle.

    `details` is an open key-value payload. Its `error` key is owned by
    JobService.set_status and must never be written anywhere else.
    """

    __tablename__ = "jobs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    project_cycle_id: UUID | None = Field(
        default=None, foreign_key="project_cycles.id", ondelete="CASCADE", index=True
    )
    status: str = Field(default=JobStatus.PENDING.value, max_length=20, index=True)
    label: str = Field(max_length=200)
    description: str | None = Field(default=None, max_length=1000)
    details: dict[str, Any] = Field(
        default_factory=dict, sa_column=Column(JSONType, nullable=False)
    )
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)
    updated_at: datetime | None = Field(default=None, sa_type=DateTime)

    @property
    def status_enum(self) -> JobStatus:
        """Get status as JobStatus enum."""
        return JobStatus(self.status)


class VolunteerExport(SQLModel, table=True):
    """Receipt proving a volunteer was exported to the workspace by a job."""

    __tablename__ = "volunteers_exported_to_workspace"
    __table_args__ = (
        UniqueConstraint(
            "volunteer_id",
            "job_id",
            name="uq_volunteers_exported_to_workspace_volunteer_job",
        ),
    )

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    volunteer_id: UUID = Field(foreign_key="volunteers.id", ondelete="CASCADE", index=True)
    job_id: UUID = Field(foreign_key="jobs.id", ondelete="CASCADE", index=True)
    workspace_email: str = Field(max_length=255)
    org_unit: str = Field(max_length=255)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)
    updated_at: datetime | None = Field(default=None, sa_type=DateTime)
