"""Model exports.

Import from here: `from src.pantheon.models import Volunteer, Job`
"""

# Enums
from src.pantheon.models.enums import (
    AgeRange,
    ClientSize,
    Ethnicity,
    ExportDestination,
    FliStatus,
    Gender,
    ImpactCause,
    JobStatus,
    JobType,
    LgbtStatus,
    MentorExperienceLevel,
    MentorYearsExperience,
    NonprofitHearAbout,
    StudentStage,
    VolunteerHearAbout,
)

# Entities
from src.pantheon.models.client import NonprofitClient
from src.pantheon.models.cycle import ProjectCycle
from src.pantheon.models.job import Job, VolunteerExport
from src.pantheon.models.links import (
    ClientMentor,
    ClientVolunteer,
    VolunteerMentor,
    VolunteerTeamRole,
)
from src.pantheon.models.mentor import Mentor
from src.pantheon.models.team_role import DEFAULT_TEAM_ROLES, TeamRole
from src.pantheon.models.volunteer import Volunteer

__all__ = [
    # Enums
    "AgeRange",
    "ClientSize",
    "Ethnicity",
    "ExportDestination",
    "FliStatus",
    "Gender",
    "ImpactCause",
    "JobStatus",
    "JobType",
    "LgbtStatus",
    "MentorExperienceLevel",
    "MentorYearsExperience",
    "NonprofitHearAbout",
    "StudentStage",
    "VolunteerHearAbout",
    # Entities
    "Job",
    "Mentor",
    "NonprofitClient",
    "ProjectCycle",
    "TeamRole",
    "Volunteer",
    "VolunteerExport",
    # Join tables
    "ClientMentor",
    "ClientVolunteer",
    "VolunteerMentor",
    "VolunteerTeamRole",
    # Seed data
    "DEFAULT_TEAM_ROLES",
]
