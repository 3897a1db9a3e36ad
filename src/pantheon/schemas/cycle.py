"""Project cycle schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator


class ProjectCycleCreate(BaseModel):
    """Schema for creating a project cycle."""

    name: str = Field(min_length=1, max_length=200)
    description: str | None = Field(default=None)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Cycle name cannot be empty or whitespace only")
        return v


class ProjectCycleUpdate(BaseModel):
    """Schema for updating a project cycle. Unset fields are left untouched."""

    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    archived: bool | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        if v is not None:
            v = v.strip()
            if not v:
                raise ValueError("Cycle name cannot be empty or whitespace only")
        return v


class ProjectCycleRead(BaseModel):
    id: UUID
    name: str
    description: str | None
    archived: bool
    created_at: datetime
    updated_at: datetime | None

    model_config = {"from_attributes": True}


class BasicStats(BaseModel):
    """Headcounts for one project cycle."""

    num_volunteers: int
    num_mentors: int
    num_nonprofits: int
