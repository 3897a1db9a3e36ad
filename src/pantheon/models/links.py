"""Join tables recording many-to-many pairings within a cycle.

Every table is keyed on the participating ids plus the cycle id.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from src.pantheon.models.base import utc_now


class VolunteerTeamRole(SQLModel, table=True):
    __tablename__ = "volunteer_team_roles"

    project_cycle_id: UUID = Field(
        foreign_key="project_cycles.id", ondelete="CASCADE", primary_key=True
    )
    volunteer_id: UUID = Field(foreign_key="volunteers.id", ondelete="CASCADE", primary_key=True)
    role_id: UUID = Field(foreign_key="team_roles.id", ondelete="CASCADE", primary_key=True)


class ClientVolunteer(SQLModel, table=True):
    """Team assignment. `currently_active` separates live from historical pairings."""

    __tablename__ = "client_volunteers"

    volunteer_id: UUID = Field(foreign_key="volunteers.id", ondelete="CASCADE", primary_key=True)
    client_id: UUID = Field(
        foreign_key="nonprofit_clients.id", ondelete="CASCADE", primary_key=True
    )
    project_cycle_id: UUID = Field(
        foreign_key="project_cycles.id", ondelete="CASCADE", primary_key=True
    )
    currently_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)
    updated_at: datetime | None = Field(default=None, sa_type=DateTime)


class ClientMentor(SQLModel, table=True):
    __tablename__ = "client_mentors"

    mentor_id: UUID = Field(foreign_key="mentors.id", ondelete="CASCADE", primary_key=True)
    client_id: UUID = Field(
        foreign_key="nonprofit_clients.id", ondelete="CASCADE", primary_key=True
    )
    project_cycle_id: UUID = Field(
        foreign_key="project_cycles.id", ondelete="CASCADE", primary_key=True
    )
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)


class VolunteerMentor(SQLModel, table=True):
    __tablename__ = "volunteer_mentors"

    mentor_id: UUID = Field(foreign_key="mentors.id", ondelete="CASCADE", primary_key=True)
    volunteer_id: UUID = Field(foreign_key="volunteers.id", ondelete="CASCADE", primary_key=True)
    project_cycle_id: UUID = Field(
        foreign_key="project_cycles.id", ondelete="CASCADE", primary_key=True
    )
