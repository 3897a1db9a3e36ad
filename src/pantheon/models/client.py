"""Nonprofit client model."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import Column, DateTime, UniqueConstraint
from sqlmodel import Field, SQLModel

from src.pantheon.models.base import JSONType, utc_now


class NonprofitClient(SQLModel, table=True):
    """A nonprofit project, represented by one contact person.

    Uniqueness is the four-field composite (email, cycle, org name, project name).
    """

    __tablename__ = "nonprofit_clients"
    __table_args__ = (
        UniqueConstraint(
            "email",
            "project_cycle_id",
            "org_name",
            "project_name",
            name="uq_nonprofit_clients_email_cycle_org_project",
        ),
    )

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    project_cycle_id: UUID = Field(
        foreign_key="project_cycles.id", ondelete="CASCADE", index=True
    )
    representative_first_name: str = Field(max_length=100)
    representative_last_name: str = Field(max_length=100)
    representative_job_title: str | None = Field(default=None, max_length=200)
    email: str = Field(max_length=255)
    email_cc: str | None = Field(default=None, max_length=255)
    phone: str = Field(max_length=50)
    org_name: str = Field(max_length=200, index=True)
    project_name: str = Field(max_length=200)
    org_website: str | None = Field(default=None, max_length=500)
    country_hq: str | None = Field(default=None, max_length=100)
    us_state_hq: str | None = Field(default=None, max_length=100)
    address: str = Field(max_length=500)
    size: str = Field(max_length=20)
    impact_causes: list[str] = Field(
        default_factory=list, sa_column=Column(JSONType, nullable=False)
    )
    hear_about: list[str] = Field(default_factory=list, sa_column=Column(JSONType, nullable=False))
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)
    updated_at: datetime | None = Field(default=None, sa_type=DateTime)
