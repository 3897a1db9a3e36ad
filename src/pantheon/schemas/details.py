"""Denormalized read projections produced by the aggregation engine.

Each embedded item is a fixed subset of the related row, not the full row.
Empty relations are always `[]`.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


# --- Embedded items ---


class VolunteerClientItem(BaseModel):
    client_id: UUID
    org_name: str
    project_name: str
    currently_active: bool


class MentorItem(BaseModel):
    mentor_id: UUID
    first_name: str
    last_name: str
    email: str
    phone: str | None
    company: str
    job_title: str


class RoleItem(BaseModel):
    role_id: UUID
    name: str
    description: str


class ExportItem(BaseModel):
    export_id: UUID
    job_id: UUID
    workspace_email: str
    org_unit: str


class MentorVolunteerItem(BaseModel):
    volunteer_id: UUID
    email: str
    name: str


class MentorClientItem(BaseModel):
    client_id: UUID
    org_name: str
    project_name: str


class ClientVolunteerItem(BaseModel):
    volunteer_id: UUID
    first_name: str
    last_name: str
    email: str
    phone: str | None
    volunteer_gender: str
    volunteer_ethnicity: list[str]
    volunteer_age_range: str
    currently_active: bool


# --- Details ---


class VolunteerDetails(BaseModel):
    volunteer_id: UUID
    created_at: datetime
    updated_at: datetime | None
    project_cycle_id: UUID
    project_cycle_name: str
    first_name: str
    last_name: str
    email: str
    phone: str | None
    volunteer_gender: str
    volunteer_ethnicity: list[str]
    volunteer_age_range: str
    university: list[str]
    lgbt: str
    country: str
    us_state: str | None
    fli: list[str]
    student_stage: str
    majors: list[str]
    minors: list[str]
    hear_about: list[str]
    clients: list[VolunteerClientItem] = Field(default_factory=list)
    mentors: list[MentorItem] = Field(default_factory=list)
    roles: list[RoleItem] = Field(default_factory=list)
    exports: list[ExportItem] = Field(default_factory=list)

    @property
    def workspace_email(self) -> str | None:
        """Most recently issued workspace email, if the volunteer was exported."""
        return self.exports[-1].workspace_email if self.exports else None


class MentorDetails(BaseModel):
    mentor_id: UUID
    created_at: datetime
    updated_at: datetime | None
    project_cycle_id: UUID
    project_cycle_name: str
    first_name: str
    last_name: str
    email: str
    phone: str | None
    company: str
    job_title: str
    country: str
    us_state: str | None
    years_experience: str
    experience_level: str
    prior_mentor: bool
    prior_mentee: bool
    prior_student: bool
    university: list[str]
    hear_about: list[str]
    volunteers: list[MentorVolunteerItem] = Field(default_factory=list)
    clients: list[MentorClientItem] = Field(default_factory=list)


class NonprofitClientDetails(BaseModel):
    client_id: UUID
    created_at: datetime
    updated_at: datetime | None
    project_cycle_id: UUID
    project_cycle_name: str
    representative_first_name: str
    representative_last_name: str
    representative_job_title: str | None
    email: str
    email_cc: str | None
    phone: str
    org_name: str
    project_name: str
    org_website: str | None
    country_hq: str | None
    us_state_hq: str | None
    address: str
    size: str
    impact_causes: list[str]
    hear_about: list[str]
    volunteers: list[ClientVolunteerItem] = Field(default_factory=list)
    mentors: list[MentorItem] = Field(default_factory=list)


class ExportedVolunteerDetail(BaseModel):
    """Export receipt joined with its owning job's id, cycle and status."""

    id: UUID
    created_at: datetime
    updated_at: datetime | None
    volunteer_id: UUID
    workspace_email: str
    org_unit: str
    job_id: UUID
    project_cycle_id: UUID | None
    status: str
