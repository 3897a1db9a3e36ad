"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import VolunteerCreateFactory, ...
"""

from tests.factories.base import BaseFactory, pick, pick_many, unique_email
from tests.factories.cycle import JobCreateFactory, ProjectCycleCreateFactory
from tests.factories.people import (
    MentorCreateFactory,
    NonprofitClientCreateFactory,
    VolunteerCreateFactory,
)

__all__ = [
    # Base
    "BaseFactory",
    "pick",
    "pick_many",
    "unique_email",
    # Cycles and jobs
    "JobCreateFactory",
    "ProjectCycleCreateFactory",
    # People and clients
    "MentorCreateFactory",
    "NonprofitClientCreateFactory",
    "VolunteerCreateFactory",
]
