"""Volunteer schemas.

Enumerated fields are plain strings here; they are checked against their
value sets by the store (src.pantheon.core.validators), not by pydantic.
"""

from pydantic import BaseModel, Field

from src.pantheon.models.enums import (
    AgeRange,
    Ethnicity,
    FliStatus,
    Gender,
    LgbtStatus,
    StudentStage,
)


class VolunteerCreate(BaseModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=3, max_length=255)
    phone: str | None = Field(default=None, max_length=50)
    volunteer_gender: str = Gender.PREFER_NOT_TO_SAY.value
    volunteer_ethnicity: list[str] = Field(
        default_factory=lambda: [Ethnicity.PREFER_NOT_TO_SAY.value]
    )
    volunteer_age_range: str = AgeRange.PREFER_NOT_TO_SAY.value
    university: list[str] = Field(default_factory=list)
    lgbt: str = LgbtStatus.PREFER_NOT_TO_SAY.value
    country: str = Field(min_length=1, max_length=100)
    us_state: str | None = Field(default=None, max_length=100)
    fli: list[str] = Field(default_factory=lambda: [FliStatus.PREFER_NOT_TO_SAY.value])
    student_stage: str = StudentStage.RECENT_GRADUATE.value
    majors: list[str] = Field(default_factory=list)
    minors: list[str] = Field(default_factory=list)
    hear_about: list[str] = Field(default_factory=list)


class VolunteerUpdate(BaseModel):
    """Partial update. Only fields explicitly set are applied."""

    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)
    email: str | None = Field(default=None, min_length=3, max_length=255)
    phone: str | None = Field(default=None, max_length=50)
    volunteer_gender: str | None = None
    volunteer_ethnicity: list[str] | None = None
    volunteer_age_range: str | None = None
    university: list[str] | None = None
    lgbt: str | None = None
    country: str | None = Field(default=None, min_length=1, max_length=100)
    us_state: str | None = Field(default=None, max_length=100)
    fli: list[str] | None = None
    student_stage: str | None = None
    majors: list[str] | None = None
    minors: list[str] | None = None
    hear_about: list[str] | None = None
