"""Nonprofit client schemas."""

from pydantic import BaseModel, Field


class NonprofitClientCreate(BaseModel):
    representative_first_name: str = Field(min_length=1, max_length=100)
    representative_last_name: str = Field(min_length=1, max_length=100)
    representative_job_title: str | None = Field(default=None, max_length=200)
    email: str = Field(min_length=3, max_length=255)
    email_cc: str | None = Field(default=None, max_length=255)
    phone: str = Field(min_length=1, max_length=50)
    org_name: str = Field(min_length=1, max_length=200)
    project_name: str = Field(min_length=1, max_length=200)
    org_website: str | None = Field(default=None, max_length=500)
    country_hq: str | None = Field(default=None, max_length=100)
    us_state_hq: str | None = Field(default=None, max_length=100)
    address: str = Field(min_length=1, max_length=500)
    size: str
    impact_causes: list[str] = Field(default_factory=list)
    hear_about: list[str] = Field(default_factory=list)


class NonprofitClientUpdate(BaseModel):
    representative_first_name: str | None = Field(default=None, min_length=1, max_length=100)
    representative_last_name: str | None = Field(default=None, min_length=1, max_length=100)
    representative_job_title: str | None = Field(default=None, max_length=200)
    email: str | None = Field(default=None, min_length=3, max_length=255)
    email_cc: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, min_length=1, max_length=50)
    org_name: str | None = Field(default=None, min_length=1, max_length=200)
    project_name: str | None = Field(default=None, min_length=1, max_length=200)
    org_website: str | None = Field(default=None, max_length=500)
    country_hq: str | None = Field(default=None, max_length=100)
    us_state_hq: str | None = Field(default=None, max_length=100)
    address: str | None = Field(default=None, min_length=1, max_length=500)
    size: str | None = None
    impact_causes: list[str] | None = None
    hear_about: list[str] | None = None
