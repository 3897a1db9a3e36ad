"""Nonprofit client service."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.pantheon.core.db import reading, transaction
from src.pantheon.core.exceptions import DuplicateKey, NotFound
from src.pantheon.core.logging import get_logger
from src.pantheon.models import NonprofitClient
from src.pantheon.repositories import NonprofitClientRepository, cascade_delete
from src.pantheon.schemas import (
    NonprofitClientCreate,
    NonprofitClientDetails,
    NonprofitClientUpdate,
)
from src.pantheon.services import aggregation
from src.pantheon.services.base import (
    apply_patch,
    flush,
    require_cycle,
    require_found,
    validated,
)

logger = get_logger(__name__)

NATURAL_KEY_CONSTRAINT = "uq_nonprofit_clients_email_cycle_org_project"


class NonprofitClientService:
    """Nonprofit client records.

    A client is unique on (email, cycle, org name, project name), so one
    representative may front several projects.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.client_repo = NonprofitClientRepository(session)

    async def create_client(self, cycle_id: UUID, data: NonprofitClientCreate) -> UUID:
        ids = await self.batch_create_clients(cycle_id, [data])
        return ids[0]

    async def batch_create_clients(
        self, cycle_id: UUID, items: list[NonprofitClientCreate]
    ) -> list[UUID]:
        """Create many clients atomically. Returns new ids in input order."""
        values = [validated("nonprofit_client", item.model_dump()) for item in items]
        keys = [(v["email"], v["org_name"], v["project_name"]) for v in values]

        async with transaction(self.session, "create_clients"):
            await require_cycle(self.session, cycle_id, NonprofitClient.__tablename__)
            if len(set(keys)) != len(keys):
                logger.warning("Duplicate client in batch", project_cycle_id=str(cycle_id))
                raise DuplicateKey(NATURAL_KEY_CONSTRAINT, "nonprofit_client")
            for email, org_name, project_name in keys:
                if await self.client_repo.get_by_natural_key(
                    email, cycle_id, org_name, project_name
                ):
                    logger.warning(
                        "Duplicate nonprofit client",
                        org_name=org_name,
                        project_name=project_name,
                    )
                    raise DuplicateKey(NATURAL_KEY_CONSTRAINT, "nonprofit_client")
            clients = [NonprofitClient(project_cycle_id=cycle_id, **v) for v in values]
            self.client_repo.add_all(clients)
            await flush(self.session, "nonprofit_client", NonprofitClient)

        logger.info("Nonprofit clients created", project_cycle_id=str(cycle_id), count=len(clients))
        return [c.id for c in clients]

    async def update_client(
        self, client_id: UUID, data: NonprofitClientUpdate
    ) -> NonprofitClient:
        values = validated("nonprofit_client", data.model_dump(exclude_unset=True))
        async with transaction(self.session, "update_client"):
            client = require_found(
                await self.client_repo.get_by_id(client_id), "nonprofit_client", client_id
            )
            changed = apply_patch(client, values)
            await flush(self.session, "nonprofit_client", NonprofitClient)

        if changed:
            logger.info("Nonprofit client updated", client_id=str(client_id), fields=changed)
        return client

    async def delete_client(self, client_id: UUID) -> None:
        async with transaction(self.session, "delete_client"):
            counts = await cascade_delete(self.session, NonprofitClient, client_id)

        if not counts[NonprofitClient.__tablename__]:
            logger.info("Nonprofit client already absent", client_id=str(client_id))
            return
        logger.info(
            "Cascade delete completed",
            entity="nonprofit_client",
            entity_id=str(client_id),
            rows=dict(counts),
        )

    async def get_client_details(self, client_id: UUID) -> NonprofitClientDetails:
        """Client with embedded volunteers and mentors.

        Raises:
            NotFound: The client does not exist
        """
        async with reading(self.session, "get_client_details"):
            details = await aggregation.client_details(self.session, [client_id])
        if not details:
            raise NotFound("nonprofit_client", client_id)
        return details[0]

    async def get_client_details_by_org_name(self, org_name: str) -> list[NonprofitClientDetails]:
        """Every project (across cycles) registered under an organization name."""
        async with reading(self.session, "get_client_details_by_org_name"):
            ids = await self.client_repo.list_ids_by_org_name(org_name)
            return await aggregation.client_details(self.session, ids)

    async def list_client_details(self, cycle_id: UUID) -> list[NonprofitClientDetails]:
        async with reading(self.session, "list_client_details"):
            ids = await self.client_repo.list_ids_by_cycle(cycle_id)
            return await aggregation.client_details(self.session, ids)
