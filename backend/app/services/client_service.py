"""
Client service with business logic.
"""

from typing import List, Optional, Tuple
from uuid import UUID

from app.core.logging import get_logger
from app.services.base_service import OwnedService
from app.db.repositories.client_repository import ClientRepository
from app.db.repositories.job_repository import JobRepository
from app.db.repositories.quote_repository import QuoteRepository
from app.schemas.client import (
    ClientCreate,
    ClientUpdate,
    ClientResponse,
    ClientOverviewResponse,
)
from app.schemas.job import JobSummary
from app.schemas.quote import QuoteSummary

logger = get_logger(__name__)


class ClientService(OwnedService):
    """Service for client operations."""

    def __init__(self, session, user_id: UUID):
        super().__init__(session, user_id)
        self.client_repo = ClientRepository(session)
        self.quote_repo = QuoteRepository(session)
        self.job_repo = JobRepository(session)

    async def create_client(self, client_data: ClientCreate) -> ClientResponse:
        """Create a new client."""
        client = await self.client_repo.create(
            user_id=self.user_id,
            **client_data.model_dump(),
        )
        await self.session.commit()
        return ClientResponse.model_validate(client)

    async def get_client(self, client_id: UUID) -> Optional[ClientResponse]:
        """Get client by ID."""
        client = await self.client_repo.get_for_user(client_id, self.user_id)
        if not client:
            return None
        return ClientResponse.model_validate(client)

    async def get_overview(self, client_id: UUID) -> Optional[ClientOverviewResponse]:
        """Client with its quotes and jobs, newest first."""
        client = await self.client_repo.get_for_user(client_id, self.user_id)
        if not client:
            return None
        quotes = await self.quote_repo.list_filtered(self.user_id, limit=1000, client_id=client_id)
        jobs = await self.job_repo.list_for_user(self.user_id, limit=1000, client_id=client_id)
        return ClientOverviewResponse(
            client=ClientResponse.model_validate(client),
            quotes=[QuoteSummary.model_validate(q) for q in quotes],
            jobs=[JobSummary.model_validate(j) for j in jobs],
        )

    async def list_clients(
        self,
        skip: int = 0,
        limit: int = 100,
    ) -> Tuple[List[ClientResponse], int]:
        """List the user's clients, newest first."""
        clients = await self.client_repo.list_for_user(self.user_id, skip=skip, limit=limit)
        total = await self.client_repo.count_for_user(self.user_id)
        return [ClientResponse.model_validate(client) for client in clients], total

    async def update_client(
        self,
        client_id: UUID,
        client_data: ClientUpdate,
    ) -> Optional[ClientResponse]:
        """Update a client."""
        client = await self.client_repo.get_for_user(client_id, self.user_id)
        if not client:
            return None

        update_dict = client_data.model_dump(exclude_unset=True)
        if "name" in update_dict and not update_dict["name"]:
            raise ValueError("Client name is required")
        await self.client_repo.update_instance(client, **update_dict)
        await self.session.commit()
        return ClientResponse.model_validate(client)

    async def delete_client(self, client_id: UUID) -> bool:
        """
        Delete a client.

        Raises:
            ValueError: If quotes, jobs or invoices still reference the client
        """
        client = await self.client_repo.get_for_user(client_id, self.user_id)
        if not client:
            return False

        references = await self.client_repo.count_references(client_id)
        in_use = [f"{count} {name}" for name, count in references.items() if count]
        if in_use:
            raise ValueError(
                "Client cannot be deleted while it has " + ", ".join(in_use)
            )

        await self.client_repo.delete_instance(client)
        await self.session.commit()
        logger.info("Client deleted", extra={"client_id": str(client_id)})
        return True
