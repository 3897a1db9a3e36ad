"""Mentor service."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.pantheon.core.db import reading, transaction
from src.pantheon.core.exceptions import DuplicateKey, NotFound
from src.pantheon.core.logging import get_logger, loggable_email
from src.pantheon.models import Mentor
from src.pantheon.repositories import MentorRepository, cascade_delete
from src.pantheon.schemas import MentorCreate, MentorDetails, MentorUpdate
from src.pantheon.services import aggregation
from src.pantheon.services.base import (
    apply_patch,
    flush,
    require_cycle,
    require_found,
    validated,
)

logger = get_logger(__name__)

EMAIL_CONSTRAINT = "uq_mentors_email"


class MentorService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.mentor_repo = MentorRepository(session)

    async def create_mentor(self, cycle_id: UUID, data: MentorCreate) -> UUID:
        ids = await self.batch_create_mentors(cycle_id, [data])
        return ids[data.email]

    async def batch_create_mentors(
        self, cycle_id: UUID, items: list[MentorCreate]
    ) -> dict[str, UUID]:
        """Create many mentors atomically. Returns email -> new mentor id."""
        values = [validated("mentor", item.model_dump()) for item in items]
        emails = [v["email"] for v in values]

        async with transaction(self.session, "create_mentors"):
            await require_cycle(self.session, cycle_id, Mentor.__tablename__)
            taken = await self.mentor_repo.existing_emails(emails)
            if taken or len(set(emails)) != len(emails):
                logger.warning(
                    "Duplicate mentor email",
                    emails=[loggable_email(e) for e in (taken or emails)],
                )
                raise DuplicateKey(EMAIL_CONSTRAINT, "mentor")
            mentors = [Mentor(project_cycle_id=cycle_id, **v) for v in values]
            self.mentor_repo.add_all(mentors)
            await flush(self.session, "mentor", Mentor)

        logger.info("Mentors created", project_cycle_id=str(cycle_id), count=len(mentors))
        return {m.email: m.id for m in mentors}

    async def update_mentor(self, mentor_id: UUID, data: MentorUpdate) -> Mentor:
        values = validated("mentor", data.model_dump(exclude_unset=True))
        async with transaction(self.session, "update_mentor"):
            mentor = require_found(
                await self.mentor_repo.get_by_id(mentor_id), "mentor", mentor_id
            )
            changed = apply_patch(mentor, values)
            await flush(self.session, "mentor", Mentor)

        if changed:
            logger.info("Mentor updated", mentor_id=str(mentor_id), fields=changed)
        return mentor

    async def delete_mentor(self, mentor_id: UUID) -> None:
        async with transaction(self.session, "delete_mentor"):
            counts = await cascade_delete(self.session, Mentor, mentor_id)

        if not counts[Mentor.__tablename__]:
            logger.info("Mentor already absent", mentor_id=str(mentor_id))
            return
        logger.info(
            "Cascade delete completed",
            entity="mentor",
            entity_id=str(mentor_id),
            rows=dict(counts),
        )

    async def get_mentor_details(self, mentor_id: UUID) -> MentorDetails:
        """Mentor with embedded volunteers and clients.

        Raises:
            NotFound: The mentor does not exist
        """
        async with reading(self.session, "get_mentor_details"):
            details = await aggregation.mentor_details(self.session, [mentor_id])
        if not details:
            raise NotFound("mentor", mentor_id)
        return details[0]

    async def list_mentor_details(self, cycle_id: UUID) -> list[MentorDetails]:
        async with reading(self.session, "list_mentor_details"):
            ids = await self.mentor_repo.list_ids_by_cycle(cycle_id)
            return await aggregation.mentor_details(self.session, ids)
