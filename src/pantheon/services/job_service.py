"""Integration job lifecycle and volunteer export receipts.

Jobs are created pending and end complete, cancelled or error. Integration
workers report status through `set_status`, which always applies the latest
report (a recovered worker may report `complete` after `error`). Callers may
only cancel a job that is still pending. The `error` key of a job's details is
written only by status reports, together with the status, in one locked
transaction.
"""

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.pantheon.core.config import get_settings
from src.pantheon.core.db import reading, transaction
from src.pantheon.core.db.errors import is_unique_violation
from src.pantheon.core.exceptions import (
    ConstraintError,
    CycleArchived,
    DuplicateExport,
    InvalidStatusTransition,
    NotFound,
)
from src.pantheon.core.logging import get_logger
from src.pantheon.core.validators import validate_domain
from src.pantheon.models import (
    ExportDestination,
    Job,
    JobStatus,
    JobType,
    ProjectCycle,
    Volunteer,
    VolunteerExport,
)
from src.pantheon.repositories import ExportRepository, JobRepository
from src.pantheon.schemas import (
    ExportedVolunteerDetail,
    ExportReceiptCreate,
    JobCreate,
    JobRead,
    JobUpdate,
    PaginatedResponse,
)
from src.pantheon.schemas.job import ERROR_KEY, JOB_TYPE_KEY
from src.pantheon.services.base import (
    apply_patch,
    flush,
    require_cycle,
    require_found,
    translate_integrity_error,
)

logger = get_logger(__name__)

DESTINATION_LABELS = {
    ExportDestination.GOOGLE_WORKSPACE: "Google Workspace",
    ExportDestination.OKTA: "Okta",
}


def merge_error_detail(details: Mapping[str, Any], error_message: str | None) -> dict[str, Any]:
    """Return `details` with its `error` key set from, or cleared by, a status report.

    A non-empty message sets or overwrites `error`; no message removes it.
    Every other key is carried over untouched.
    """
    merged = dict(details)
    if error_message:
        merged[ERROR_KEY] = error_message
    else:
        merged.pop(ERROR_KEY, None)
    return merged


def check_transition(job_id: UUID, current: JobStatus, requested: JobStatus) -> None:
    """A caller-issued change such as a cancel applies only to a pending job."""
    if current.is_terminal:
        raise InvalidStatusTransition(job_id, current.value, requested.value)


class JobService:
    """Creates, transitions and annotates integration jobs."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.job_repo = JobRepository(session)
        self.export_repo = ExportRepository(session)

    # --- Jobs ---

    async def create_job(self, data: JobCreate, cycle_id: UUID | None = None) -> Job:
        """Create a pending job.

        Raises:
            ConstraintError: `details` carries an `error` key, or the cycle
                does not exist
        """
        if ERROR_KEY in data.details:
            logger.warning("Job created with error detail", label=data.label)
            raise ConstraintError(
                "job_details_error_key", f"'{ERROR_KEY}' is reserved for status reports"
            )

        async with transaction(self.session, "create_job"):
            if cycle_id is not None:
                await require_cycle(self.session, cycle_id, Job.__tablename__)
            job = Job(
                project_cycle_id=cycle_id,
                label=data.label,
                description=data.description,
                details=dict(data.details),
            )
            self.job_repo.add(job)
            await flush(self.session, "job", Job)

        logger.info(
            "Job created",
            job_id=str(job.id),
            job_type=job.details.get(JOB_TYPE_KEY),
            project_cycle_id=str(cycle_id) if cycle_id else None,
        )
        return job

    async def create_import_job(self, base_id: str) -> Job:
        """Job for importing one roster base. Its cycle is attached once created."""
        return await self.create_job(
            JobCreate(
                label="Import Airtable base",
                description=f"Import volunteers, mentors and clients from base {base_id}",
                details={JOB_TYPE_KEY: JobType.AIRTABLE_IMPORT_BASE.value, "base_id": base_id},
            )
        )

    async def create_export_job(
        self, cycle_id: UUID, destination: ExportDestination | str
    ) -> Job:
        """Job for exporting a cycle's volunteers to a workspace directory.

        Raises:
            DomainViolation: Unknown destination
            CycleArchived: The cycle is archived
        """
        dest = validate_domain("export_destination", destination, ExportDestination)
        async with reading(self.session, "create_export_job"):
            cycle = await self.session.get(ProjectCycle, cycle_id, populate_existing=True)
        if cycle is not None and cycle.archived:
            logger.warning("Export requested for archived cycle", project_cycle_id=str(cycle_id))
            raise CycleArchived(cycle_id)
        return await self.create_job(
            JobCreate(
                label=f"Export volunteers to {DESTINATION_LABELS[dest]}",
                details={
                    JOB_TYPE_KEY: JobType.EXPORT_USERS.value,
                    "export_destination": dest.value,
                },
            ),
            cycle_id=cycle_id,
        )

    async def get_job(self, job_id: UUID) -> Job | None:
        async with reading(self.session, "get_job"):
            return await self.job_repo.get_by_id(job_id)

    async def list_jobs(
        self,
        cursor: str | None = None,
        limit: int = 50,
        status: JobStatus | str | None = None,
        cycle_id: UUID | None = None,
    ) -> PaginatedResponse[JobRead]:
        """List jobs newest first, optionally by status and cycle."""
        status_value = validate_domain("status", status, JobStatus).value if status else None
        async with reading(self.session, "list_jobs"):
            items, next_cursor, has_more = await self.job_repo.list_all(
                cursor, limit, status_value, cycle_id
            )
        return PaginatedResponse[JobRead](
            items=[JobRead.model_validate(j) for j in items],
            next_cursor=next_cursor,
            has_more=has_more,
        )

    async def _write_status(
        self,
        job_id: UUID,
        requested: JobStatus,
        error_message: str | None,
        operation: str,
        guarded: bool,
    ) -> Job:
        async with transaction(self.session, operation):
            job = require_found(
                await self.job_repo.get_by_id(job_id, for_update=True), "job", job_id
            )
            if guarded:
                try:
                    check_transition(job_id, job.status_enum, requested)
                except InvalidStatusTransition:
                    logger.warning(
                        "Invalid job status transition",
                        job_id=str(job_id),
                        current=job.status,
                        requested=requested.value,
                    )
                    raise
            changed = apply_patch(
                job,
                {
                    "status": requested.value,
                    "details": merge_error_detail(job.details, error_message),
                },
            )

        if changed:
            logger.info(
                "Job status updated",
                job_id=str(job_id),
                job_type=job.details.get(JOB_TYPE_KEY),
                status=requested.value,
                has_error=ERROR_KEY in job.details,
            )
        return job

    async def set_status(
        self, job_id: UUID, status: JobStatus | str, error_message: str | None = None
    ) -> Job:
        """Record an integration's status report, merging or clearing `error` atomically.

        Reports are always applied, including after a terminal report: a
        worker that recovers reports `complete` and the stale `error` is
        removed. The job row is locked for the read-modify-write so
        concurrent reports cannot drop each other's `error` changes.

        Raises:
            NotFound: The job does not exist
            DomainViolation: `status` is not a job status
        """
        requested = validate_domain("status", status, JobStatus)
        return await self._write_status(
            job_id, requested, error_message, "set_job_status", guarded=False
        )

    async def cancel_job(self, job_id: UUID) -> Job:
        """Cancel a pending job.

        Raises:
            NotFound: The job does not exist
            InvalidStatusTransition: The job already finished
        """
        return await self._write_status(
            job_id, JobStatus.CANCELLED, None, "cancel_job", guarded=True
        )

    async def edit_job(self, job_id: UUID, data: JobUpdate) -> Job:
        """Change a job's label or description."""
        async with transaction(self.session, "edit_job"):
            job = require_found(await self.job_repo.get_by_id(job_id), "job", job_id)
            changed = apply_patch(job, data.model_dump(exclude_unset=True))

        if changed:
            logger.info("Job edited", job_id=str(job_id), fields=changed)
        return job

    async def set_job_cycle(self, job_id: UUID, cycle_id: UUID) -> Job:
        """Attach a job to a cycle, e.g. the cycle an import job created."""
        async with transaction(self.session, "set_job_cycle"):
            job = require_found(await self.job_repo.get_by_id(job_id), "job", job_id)
            await require_cycle(self.session, cycle_id, Job.__tablename__)
            changed = apply_patch(job, {"project_cycle_id": cycle_id})

        if changed:
            logger.info("Job attached to cycle", job_id=str(job_id), project_cycle_id=str(cycle_id))
        return job

    # --- Export receipts ---

    async def _add_receipt(self, job: Job, receipt: ExportReceiptCreate) -> VolunteerExport:
        volunteer = require_found(
            await self.session.get(Volunteer, receipt.volunteer_id, populate_existing=True),
            "volunteer",
            receipt.volunteer_id,
        )
        if job.project_cycle_id is not None and volunteer.project_cycle_id != job.project_cycle_id:
            logger.warning(
                "Export across cycles",
                job_id=str(job.id),
                volunteer_id=str(volunteer.id),
            )
            raise ConstraintError(
                "cycle_mismatch",
                f"volunteer {volunteer.id} is not in project cycle {job.project_cycle_id}",
            )
        if await self.export_repo.get_by_volunteer_and_job(volunteer.id, job.id):
            logger.warning("Duplicate export", job_id=str(job.id), volunteer_id=str(volunteer.id))
            raise DuplicateExport(volunteer.id, job.id)

        export = VolunteerExport(
            volunteer_id=volunteer.id,
            job_id=job.id,
            workspace_email=receipt.workspace_email,
            org_unit=receipt.org_unit or get_settings().workspace_org_unit,
        )
        self.export_repo.add(export)
        try:
            await self.session.flush()
        except IntegrityError as e:
            if is_unique_violation(e):
                raise DuplicateExport(volunteer.id, job.id) from e
            raise translate_integrity_error(e, "volunteer_export", VolunteerExport) from e
        return export

    async def _require_open_cycle(self, job: Job) -> None:
        if job.project_cycle_id is None:
            return
        cycle = await self.session.get(
            ProjectCycle, job.project_cycle_id, populate_existing=True
        )
        if cycle is not None and cycle.archived:
            logger.warning("Export recorded for archived cycle", job_id=str(job.id))
            raise CycleArchived(cycle.id)

    async def record_export(
        self,
        volunteer_id: UUID,
        job_id: UUID,
        workspace_email: str,
        org_unit: str | None = None,
    ) -> UUID:
        """Record that `job_id` exported `volunteer_id`. Returns the receipt id.

        Raises:
            NotFound: The job or volunteer does not exist
            DuplicateExport: A receipt for this (volunteer, job) already exists
            CycleArchived: The job's cycle is archived
            ConstraintError: The volunteer is outside the job's cycle
        """
        ids = await self.batch_record_exports(
            job_id,
            [
                ExportReceiptCreate(
                    volunteer_id=volunteer_id,
                    workspace_email=workspace_email,
                    org_unit=org_unit,
                )
            ],
        )
        return ids[0]

    async def batch_record_exports(
        self, job_id: UUID, receipts: list[ExportReceiptCreate]
    ) -> list[UUID]:
        """Record many receipts for one job atomically; any duplicate fails the batch."""
        async with transaction(self.session, "record_exports"):
            job = require_found(await self.job_repo.get_by_id(job_id), "job", job_id)
            await self._require_open_cycle(job)
            exports = [await self._add_receipt(job, receipt) for receipt in receipts]

        logger.info("Export receipts recorded", job_id=str(job_id), count=len(exports))
        return [e.id for e in exports]

    async def remove_exports(self, export_ids: list[UUID]) -> int:
        """Delete receipts (undo of a workspace export). Returns rows removed."""
        async with transaction(self.session, "remove_exports"):
            removed = await self.export_repo.delete_by_ids(export_ids)

        logger.info("Export receipts removed", requested=len(export_ids), removed=removed)
        return removed

    async def get_exported_details(self, cycle_id: UUID) -> list[ExportedVolunteerDetail]:
        """Receipts recorded by the cycle's jobs, with each job's status."""
        async with reading(self.session, "get_exported_details"):
            rows = await self.export_repo.list_by_cycle(cycle_id)
        return [
            ExportedVolunteerDetail(
                **export.model_dump(),
                project_cycle_id=project_cycle_id,
                status=status,
            )
            for export, project_cycle_id, status in rows
        ]
