"""Factories for project cycle and job payloads."""

from uuid import uuid4

from polyfactory import Use

from src.pantheon.models import ExportDestination, JobType
from src.pantheon.schemas import JobCreate, ProjectCycleCreate
from src.pantheon.schemas.job import JOB_TYPE_KEY
from tests.factories.base import BaseFactory


class ProjectCycleCreateFactory(BaseFactory):
    __model__ = ProjectCycleCreate

    name = Use(lambda: f"Cycle {uuid4().hex[:8]}")
    description = "Test cohort"


class JobCreateFactory(BaseFactory):
    __model__ = JobCreate

    label = "Export volunteers"
    description = None
    details = Use(
        lambda: {
            JOB_TYPE_KEY: JobType.EXPORT_USERS.value,
            "export_destination": ExportDestination.GOOGLE_WORKSPACE.value,
        }
    )
