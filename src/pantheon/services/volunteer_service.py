"""Volunteer service."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.pantheon.core.db import reading, transaction
from src.pantheon.core.exceptions import DuplicateKey, NotFound
from src.pantheon.core.logging import get_logger, loggable_email
from src.pantheon.models import Volunteer
from src.pantheon.repositories import VolunteerRepository, cascade_delete
from src.pantheon.schemas import VolunteerCreate, VolunteerDetails, VolunteerUpdate
from src.pantheon.services import aggregation
from src.pantheon.services.base import (
    apply_patch,
    flush,
    require_cycle,
    require_found,
    validated,
)

logger = get_logger(__name__)

EMAIL_CONSTRAINT = "uq_volunteers_email"


class VolunteerService:
    """Volunteer records and their denormalized details view."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.volunteer_repo = VolunteerRepository(session)

    async def create_volunteer(self, cycle_id: UUID, data: VolunteerCreate) -> UUID:
        """Create a volunteer in a cycle.

        Raises:
            DomainViolation: An enumerated field is out of its value set
            DuplicateKey: The email is already registered
            ConstraintError: The cycle does not exist
        """
        ids = await self.batch_create_volunteers(cycle_id, [data])
        return ids[data.email]

    async def batch_create_volunteers(
        self, cycle_id: UUID, items: list[VolunteerCreate]
    ) -> dict[str, UUID]:
        """Create many volunteers atomically: all are stored or none.

        Returns:
            Mapping of email to new volunteer id
        """
        values = [validated("volunteer", item.model_dump()) for item in items]
        emails = [v["email"] for v in values]

        async with transaction(self.session, "create_volunteers"):
            await require_cycle(self.session, cycle_id, Volunteer.__tablename__)
            taken = await self.volunteer_repo.existing_emails(emails)
            if taken or len(set(emails)) != len(emails):
                logger.warning(
                    "Duplicate volunteer email",
                    emails=[loggable_email(e) for e in (taken or emails)],
                )
                raise DuplicateKey(EMAIL_CONSTRAINT, "volunteer")
            volunteers = [Volunteer(project_cycle_id=cycle_id, **v) for v in values]
            self.volunteer_repo.add_all(volunteers)
            await flush(self.session, "volunteer", Volunteer)

        logger.info("Volunteers created", project_cycle_id=str(cycle_id), count=len(volunteers))
        return {v.email: v.id for v in volunteers}

    async def update_volunteer(self, volunteer_id: UUID, data: VolunteerUpdate) -> Volunteer:
        """Apply a partial update. `updated_at` moves only if a field changed.

        Raises:
            NotFound: The volunteer does not exist
            DomainViolation: An enumerated field is out of its value set
            DuplicateKey: The new email is already registered
        """
        values = validated("volunteer", data.model_dump(exclude_unset=True))
        async with transaction(self.session, "update_volunteer"):
            volunteer = require_found(
                await self.volunteer_repo.get_by_id(volunteer_id), "volunteer", volunteer_id
            )
            changed = apply_patch(volunteer, values)
            await flush(self.session, "volunteer", Volunteer)

        if changed:
            logger.info("Volunteer updated", volunteer_id=str(volunteer_id), fields=changed)
        return volunteer

    async def delete_volunteer(self, volunteer_id: UUID) -> None:
        """Delete a volunteer with its relations and export receipts."""
        async with transaction(self.session, "delete_volunteer"):
            counts = await cascade_delete(self.session, Volunteer, volunteer_id)

        if not counts[Volunteer.__tablename__]:
            logger.info("Volunteer already absent", volunteer_id=str(volunteer_id))
            return
        logger.info(
            "Cascade delete completed",
            entity="volunteer",
            entity_id=str(volunteer_id),
            rows=dict(counts),
        )

    async def get_volunteer_details(self, volunteer_id: UUID) -> VolunteerDetails:
        """Volunteer with embedded clients, mentors, roles and exports.

        Raises:
            NotFound: The volunteer does not exist
        """
        async with reading(self.session, "get_volunteer_details"):
            details = await aggregation.volunteer_details(self.session, [volunteer_id])
        if not details:
            raise NotFound("volunteer", volunteer_id)
        return details[0]

    async def get_volunteer_details_by_email(self, email: str) -> VolunteerDetails:
        async with reading(self.session, "get_volunteer_details_by_email"):
            volunteer = await self.volunteer_repo.get_by_email(email)
        volunteer = require_found(volunteer, "volunteer", loggable_email(email))
        return await self.get_volunteer_details(volunteer.id)

    async def list_volunteer_details(self, cycle_id: UUID) -> list[VolunteerDetails]:
        """Details of every volunteer in a cycle, by last name."""
        async with reading(self.session, "list_volunteer_details"):
            ids = await self.volunteer_repo.list_ids_by_cycle(cycle_id)
            return await aggregation.volunteer_details(self.session, ids)

    async def list_export_candidates(self, cycle_id: UUID) -> list[Volunteer]:
        """Volunteers in a cycle not yet exported by a completed export job."""
        async with reading(self.session, "list_export_candidates"):
            return await self.volunteer_repo.list_unexported(cycle_id)
