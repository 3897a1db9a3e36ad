"""Industry mentor model."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import Column, DateTime, UniqueConstraint
from sqlmodel import Field, SQLModel

from src.pantheon.models.base import JSONType, utc_now


class Mentor(SQLModel, table=True):
    """An industry mentor enrolled in one project cycle."""

    __tablename__ = "mentors"
    __table_args__ = (UniqueConstraint("email", name="uq_mentors_email"),)

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    project_cycle_id: UUID = Field(
        foreign_key="project_cycles.id", ondelete="CASCADE", index=True
    )
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    email: str = Field(max_length=255)
    phone: str | None = Field(default=None, max_length=50)
    company: str = Field(max_length=200)
    job_title: str = Field(max_length=200)
    country: str = Field(max_length=100)
    us_state: str | None = Field(default=None, max_length=100)
    years_experience: str = Field(max_length=20)
    experience_level: str = Field(max_length=50)
    prior_mentor: bool = Field(default=False)
    prior_mentee: bool = Field(default=False)
    prior_student: bool = Field(default=False)
    university: list[str] = Field(default_factory=list, sa_column=Column(JSONType, nullable=False))
    hear_about: list[str] = Field(default_factory=list, sa_column=Column(JSONType, nullable=False))
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)
    updated_at: datetime | None = Field(default=None, sa_type=DateTime)
