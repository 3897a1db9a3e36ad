"""Job and export receipt schemas."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

ERROR_KEY = "error"
JOB_TYPE_KEY = "jobType"


class JobCreate(BaseModel):
    """Schema for creating a job.

    `details` carries caller-supplied, job-type-specific keys. The `error`
    key is reserved for status reporting and rejected here.
    """

    label: str = Field(min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=1000)
    details: dict[str, Any] = Field(default_factory=dict)

    @field_validator("label")
    @classmethod
    def validate_label(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Job label cannot be empty or whitespace only")
        return v


class JobUpdate(BaseModel):
    label: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=1000)


class JobRead(BaseModel):
    id: UUID
    project_cycle_id: UUID | None
    status: str
    label: str
    description: str | None
    details: dict[str, Any]
    created_at: datetime
    updated_at: datetime | None

    model_config = {"from_attributes": True}


class ExportReceiptCreate(BaseModel):
    """One exported volunteer, as reported by the export integration."""

    volunteer_id: UUID
    workspace_email: str = Field(min_length=3, max_length=255)
    org_unit: str | None = Field(default=None, max_length=255)
