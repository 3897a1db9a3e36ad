"""Repository layer - data access abstraction."""

from src.pantheon.repositories.base import BaseRepository
from src.pantheon.repositories.cascade import DEPENDENTS, cascade_delete
from src.pantheon.repositories.client import NonprofitClientRepository
from src.pantheon.repositories.cycle import ProjectCycleRepository
from src.pantheon.repositories.export import ExportRepository
from src.pantheon.repositories.job import JobRepository
from src.pantheon.repositories.links import LinkRepository
from src.pantheon.repositories.mentor import MentorRepository
from src.pantheon.repositories.team_role import TeamRoleRepository
from src.pantheon.repositories.volunteer import VolunteerRepository

__all__ = [
    # Base
    "BaseRepository",
    # Entities
    "ExportRepository",
    "JobRepository",
    "MentorRepository",
    "NonprofitClientRepository",
    "ProjectCycleRepository",
    "TeamRoleRepository",
    "VolunteerRepository",
    # Join tables
    "LinkRepository",
    # Cascade
    "DEPENDENTS",
    "cascade_delete",
]
