"""Schema exports."""

from src.pantheon.schemas.client import NonprofitClientCreate, NonprofitClientUpdate
from src.pantheon.schemas.cycle import (
    BasicStats,
    ProjectCycleCreate,
    ProjectCycleRead,
    ProjectCycleUpdate,
)
from src.pantheon.schemas.details import (
    ClientVolunteerItem,
    ExportedVolunteerDetail,
    ExportItem,
    MentorClientItem,
    MentorDetails,
    MentorItem,
    MentorVolunteerItem,
    NonprofitClientDetails,
    RoleItem,
    VolunteerClientItem,
    VolunteerDetails,
)
from src.pantheon.schemas.job import (
    ExportReceiptCreate,
    JobCreate,
    JobRead,
    JobUpdate,
)
from src.pantheon.schemas.mentor import MentorCreate, MentorUpdate
from src.pantheon.schemas.pagination import PaginatedResponse
from src.pantheon.schemas.volunteer import VolunteerCreate, VolunteerUpdate

__all__ = [
    # Cycles
    "BasicStats",
    "ProjectCycleCreate",
    "ProjectCycleRead",
    "ProjectCycleUpdate",
    # People and clients
    "MentorCreate",
    "MentorUpdate",
    "NonprofitClientCreate",
    "NonprofitClientUpdate",
    "VolunteerCreate",
    "VolunteerUpdate",
    # Details
    "ClientVolunteerItem",
    "ExportItem",
    "ExportedVolunteerDetail",
    "MentorClientItem",
    "MentorDetails",
    "MentorItem",
    "MentorVolunteerItem",
    "NonprofitClientDetails",
    "RoleItem",
    "VolunteerClientItem",
    "VolunteerDetails",
    # Jobs
    "ExportReceiptCreate",
    "JobCreate",
    "JobRead",
    "JobUpdate",
    # Pagination
    "PaginatedResponse",
]
