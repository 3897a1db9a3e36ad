"""Mentor schemas."""

from pydantic import BaseModel, Field


class MentorCreate(BaseModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=3, max_length=255)
    phone: str | None = Field(default=None, max_length=50)
    company: str = Field(min_length=1, max_length=200)
    job_title: str = Field(min_length=1, max_length=200)
    country: str = Field(min_length=1, max_length=100)
    us_state: str | None = Field(default=None, max_length=100)
    years_experience: str
    experience_level: str
    prior_mentor: bool = False
    prior_mentee: bool = False
    prior_student: bool = False
    university: list[str] = Field(default_factory=list)
    hear_about: list[str] = Field(default_factory=list)


class MentorUpdate(BaseModel):
    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)
    email: str | None = Field(default=None, min_length=3, max_length=255)
    phone: str | None = Field(default=None, max_length=50)
    company: str | None = Field(default=None, min_length=1, max_length=200)
    job_title: str | None = Field(default=None, min_length=1, max_length=200)
    country: str | None = Field(default=None, min_length=1, max_length=100)
    us_state: str | None = Field(default=None, max_length=100)
    years_experience: str | None = None
    experience_level: str | None = None
    prior_mentor: bool | None = None
    prior_mentee: bool | None = None
    prior_student: bool | None = None
    university: list[str] | None = None
    hear_about: list[str] | None = None
