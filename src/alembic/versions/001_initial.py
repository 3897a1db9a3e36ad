"""Initial schema: cycles, people, clients, links, jobs, export receipts

Revision ID: 001
Revises:
Create Date: 2024-01-01 00:00:00.000000

"""

from collections.abc import Sequence
from uuid import uuid4

import sqlalchemy as sa
import sqlmodel
from sqlalchemy.dialects import postgresql

from alembic import op
from src.pantheon.models.base import utc_now
from src.pantheon.models.team_role import DEFAULT_TEAM_ROLES

revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

JSON = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")


def _string(length: int) -> sqlmodel.sql.sqltypes.AutoString:
    return sqlmodel.sql.sqltypes.AutoString(length=length)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
    ]


def _cycle_fk(primary_key: bool = False, nullable: bool = False) -> sa.Column:
    return sa.Column(
        "project_cycle_id",
        sa.Uuid(),
        sa.ForeignKey("project_cycles.id", ondelete="CASCADE"),
        primary_key=primary_key,
        nullable=nullable,
    )


def _fk(name: str, target: str) -> sa.Column:
    return sa.Column(
        name,
        sa.Uuid(),
        sa.ForeignKey(f"{target}.id", ondelete="CASCADE"),
        primary_key=True,
        nullable=False,
    )


def upgrade() -> None:
    # 1. Project cycles
    op.create_table(
        "project_cycles",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", _string(200), nullable=False),
        sa.Column("description", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("archived", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="uq_project_cycles_name"),
    )

    # 2. Volunteers
    op.create_table(
        "volunteers",
        sa.Column("id", sa.Uuid(), nullable=False),
        _cycle_fk(),
        sa.Column("first_name", _string(100), nullable=False),
        sa.Column("last_name", _string(100), nullable=False),
        sa.Column("email", _string(255), nullable=False),
        sa.Column("phone", _string(50), nullable=True),
        sa.Column("volunteer_gender", _string(50), nullable=False),
        sa.Column("volunteer_ethnicity", JSON, nullable=False),
        sa.Column("volunteer_age_range", _string(50), nullable=False),
        sa.Column("university", JSON, nullable=False),
        sa.Column("lgbt", _string(50), nullable=False),
        sa.Column("country", _string(100), nullable=False),
        sa.Column("us_state", _string(100), nullable=True),
        sa.Column("fli", JSON, nullable=False),
        sa.Column("student_stage", _string(50), nullable=False),
        sa.Column("majors", JSON, nullable=False),
        sa.Column("minors", JSON, nullable=False),
        sa.Column("hear_about", JSON, nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_volunteers_email"),
    )
    op.create_index("ix_volunteers_project_cycle_id", "volunteers", ["project_cycle_id"])

    # 3. Mentors
    op.create_table(
        "mentors",
        sa.Column("id", sa.Uuid(), nullable=False),
        _cycle_fk(),
        sa.Column("first_name", _string(100), nullable=False),
        sa.Column("last_name", _string(100), nullable=False),
        sa.Column("email", _string(255), nullable=False),
        sa.Column("phone", _string(50), nullable=True),
        sa.Column("company", _string(200), nullable=False),
        sa.Column("job_title", _string(200), nullable=False),
        sa.Column("country", _string(100), nullable=False),
        sa.Column("us_state", _string(100), nullable=True),
        sa.Column("years_experience", _string(20), nullable=False),
        sa.Column("experience_level", _string(50), nullable=False),
        sa.Column("prior_mentor", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("prior_mentee", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("prior_student", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("university", JSON, nullable=False),
        sa.Column("hear_about", JSON, nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_mentors_email"),
    )
    op.create_index("ix_mentors_project_cycle_id", "mentors", ["project_cycle_id"])

    # 4. Nonprofit clients
    op.create_table(
        "nonprofit_clients",
        sa.Column("id", sa.Uuid(), nullable=False),
        _cycle_fk(),
        sa.Column("representative_first_name", _string(100), nullable=False),
        sa.Column("representative_last_name", _string(100), nullable=False),
        sa.Column("representative_job_title", _string(200), nullable=True),
        sa.Column("email", _string(255), nullable=False),
        sa.Column("email_cc", _string(255), nullable=True),
        sa.Column("phone", _string(50), nullable=False),
        sa.Column("org_name", _string(200), nullable=False),
        sa.Column("project_name", _string(200), nullable=False),
        sa.Column("org_website", _string(500), nullable=True),
        sa.Column("country_hq", _string(100), nullable=True),
        sa.Column("us_state_hq", _string(100), nullable=True),
        sa.Column("address", _string(500), nullable=False),
        sa.Column("size", _string(20), nullable=False),
        sa.Column("impact_causes", JSON, nullable=False),
        sa.Column("hear_about", JSON, nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "email",
            "project_cycle_id",
            "org_name",
            "project_name",
            name="uq_nonprofit_clients_email_cycle_org_project",
        ),
    )
    op.create_index(
        "ix_nonprofit_clients_project_cycle_id", "nonprofit_clients", ["project_cycle_id"]
    )
    op.create_index("ix_nonprofit_clients_org_name", "nonprofit_clients", ["org_name"])

    # 5. Team role catalog
    team_roles = op.create_table(
        "team_roles",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", _string(100), nullable=False),
        sa.Column("description", _string(1000), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="uq_team_roles_name"),
    )

    # 6. Join tables
    op.create_table(
        "volunteer_team_roles",
        _cycle_fk(primary_key=True),
        _fk("volunteer_id", "volunteers"),
        _fk("role_id", "team_roles"),
    )
    op.create_table(
        "client_volunteers",
        _fk("volunteer_id", "volunteers"),
        _fk("client_id", "nonprofit_clients"),
        _cycle_fk(primary_key=True),
        sa.Column("currently_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )
    op.create_table(
        "client_mentors",
        _fk("mentor_id", "mentors"),
        _fk("client_id", "nonprofit_clients"),
        _cycle_fk(primary_key=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_table(
        "volunteer_mentors",
        _fk("mentor_id", "mentors"),
        _fk("volunteer_id", "volunteers"),
        _cycle_fk(primary_key=True),
    )

    # 7. Jobs
    op.create_table(
        "jobs",
        sa.Column("id", sa.Uuid(), nullable=False),
        _cycle_fk(nullable=True),
        sa.Column("status", _string(20), nullable=False, server_default="pending"),
        sa.Column("label", _string(200), nullable=False),
        sa.Column("description", _string(1000), nullable=True),
        sa.Column("details", JSON, nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_jobs_project_cycle_id", "jobs", ["project_cycle_id"])
    op.create_index("ix_jobs_status", "jobs", ["status"])

    # 8. Export receipts
    op.create_table(
        "volunteers_exported_to_workspace",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "volunteer_id",
            sa.Uuid(),
            sa.ForeignKey("volunteers.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "job_id", sa.Uuid(), sa.ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False
        ),
        sa.Column("workspace_email", _string(255), nullable=False),
        sa.Column("org_unit", _string(255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "volunteer_id",
            "job_id",
            name="uq_volunteers_exported_to_workspace_volunteer_job",
        ),
    )
    op.create_index(
        "ix_volunteers_exported_to_workspace_volunteer_id",
        "volunteers_exported_to_workspace",
        ["volunteer_id"],
    )
    op.create_index(
        "ix_volunteers_exported_to_workspace_job_id",
        "volunteers_exported_to_workspace",
        ["job_id"],
    )

    now = utc_now()
    op.bulk_insert(
        team_roles,
        [
            {"id": uuid4(), "name": name, "description": description, "created_at": now}
            for name, description in DEFAULT_TEAM_ROLES.items()
        ],
    )


def downgrade() -> None:
    op.drop_table("volunteers_exported_to_workspace")
    op.drop_table("jobs")
    op.drop_table("volunteer_mentors")
    op.drop_table("client_mentors")
    op.drop_table("client_volunteers")
    op.drop_table("volunteer_team_roles")
    op.drop_table("team_roles")
    op.drop_table("nonprofit_clients")
    op.drop_table("mentors")
    op.drop_table("volunteers")
    op.drop_table("project_cycles")
