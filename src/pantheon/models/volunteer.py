"""Volunteer model."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import Column, DateTime, UniqueConstraint
from sqlmodel import Field, SQLModel

from src.pantheon.models.base import JSONType, utc_now
from src.pantheon.models.enums import (
    AgeRange,
    FliStatus,
    Gender,
    LgbtStatus,
    StudentStage,
)


class Volunteer(SQLModel, table=True):
    """A student volunteer enrolled in one project cycle.

    Multi-valued attributes are stored as JSON arrays of enum values or free text.
    """

    __tablename__ = "volunteers"
    __table_args__ = (UniqueConstraint("email", name="uq_volunteers_email"),)

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    project_cycle_id: UUID = Field(
        foreign_key="project_cycles.id", ondelete="CASCADE", index=True
    )
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    email: str = Field(max_length=255)  # personal email, not the workspace one
    phone: str | None = Field(default=None, max_length=50)
    volunteer_gender: str = Field(default=Gender.PREFER_NOT_TO_SAY.value, max_length=50)
    volunteer_ethnicity: list[str] = Field(
        default_factory=list, sa_column=Column(JSONType, nullable=False)
    )
    volunteer_age_range: str = Field(default=AgeRange.PREFER_NOT_TO_SAY.value, max_length=50)
    university: list[str] = Field(default_factory=list, sa_column=Column(JSONType, nullable=False))
    lgbt: str = Field(default=LgbtStatus.PREFER_NOT_TO_SAY.value, max_length=50)
    country: str = Field(max_length=100)
    us_state: str | None = Field(default=None, max_length=100)
    fli: list[str] = Field(
        default_factory=lambda: [FliStatus.PREFER_NOT_TO_SAY.value],
        sa_column=Column(JSONType, nullable=False),
    )
    student_stage: str = Field(default=StudentStage.RECENT_GRADUATE.value, max_length=50)
    majors: list[str] = Field(default_factory=list, sa_column=Column(JSONType, nullable=False))
    minors: list[str] = Field(default_factory=list, sa_column=Column(JSONType, nullable=False))
    hear_about: list[str] = Field(default_factory=list, sa_column=Column(JSONType, nullable=False))
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)
    updated_at: datetime | None = Field(default=None, sa_type=DateTime)
