"""Team role catalog model."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime, UniqueConstraint
from sqlmodel import Field, SQLModel

from src.pantheon.models.base import utc_now

# Seeded by the initial migration.
DEFAULT_TEAM_ROLES: dict[str, str] = {
    "product_lead": (
        "A product lead is a senior volunteer with either experience at Develop for Good "
        "or is an exceptional candidate. They supervise 2-5 teams."
    ),
    "product_manager": (
        "A product manager is a student-manager level volunteer with exceptional "
        "leadership skills."
    ),
    "engineering_manager": (
        "An engineering manager is a student-manager level volunteer with exceptional "
        "engineering skills, assigned to engineering projects."
    ),
    "design_manager": (
        "A design manager is a student-manager level volunteer with exceptional design "
        "skills, assigned to design projects"
    ),
    "engineer": "An engineer volunteer is usually assigned to engineering projects",
    "designer": "A designer volunteer is usually assigned to design projects",
}


class TeamRole(SQLModel, table=True):
    """An assignable volunteer role. Not scoped to a cycle."""

    __tablename__ = "team_roles"
    __table_args__ = (UniqueConstraint("name", name="uq_team_roles_name"),)

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100)
    description: str = Field(max_length=1000)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)
    updated_at: datetime | None = Field(default=None, sa_type=DateTime)
