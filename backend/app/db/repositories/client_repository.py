"""
Client repository for database operations.
"""

from typing import Dict
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func

from app.db.repositories.base_repository import OwnedRepository
from app.models.client import Client
from app.models.quote import Quote
from app.models.job import Job
from app.models.invoice import Invoice


class ClientRepository(OwnedRepository[Client]):
    """Repository for client operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Client, session)

    async def count_references(self, client_id: UUID) -> Dict[str, int]:
        """Count quotes, jobs and invoices that point at a client."""
        counts = {}
        for name, model in (("quotes", Quote), ("jobs", Job), ("invoices", Invoice)):
            result = await self.session.execute(
                select(func.count()).select_from(model).where(model.client_id == client_id)
            )
            counts[name] = result.scalar_one()
        return counts
