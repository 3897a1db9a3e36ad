"""Service layer - business logic and transaction boundaries."""

from src.pantheon.services.client_service import NonprofitClientService
from src.pantheon.services.cycle_service import ProjectCycleService
from src.pantheon.services.job_service import JobService, merge_error_detail
from src.pantheon.services.mentor_service import MentorService
from src.pantheon.services.relation_service import RelationKind, RelationService
from src.pantheon.services.team_role_service import TeamRoleService
from src.pantheon.services.volunteer_service import VolunteerService

__all__ = [
    "JobService",
    "MentorService",
    "NonprofitClientService",
    "ProjectCycleService",
    "RelationKind",
    "RelationService",
    "TeamRoleService",
    "VolunteerService",
    "merge_error_detail",
]
