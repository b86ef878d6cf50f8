"""
Invoice repository for database operations.
"""

from typing import Optional, List
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from sqlalchemy.orm import selectinload

from app.db.repositories.base_repository import OwnedRepository
from app.models.invoice import Invoice, InvoiceLineItem, InvoiceStatus


class InvoiceRepository(OwnedRepository[Invoice]):
    """Repository for invoice operations."""

    load_options = (selectinload(Invoice.client), selectinload(Invoice.line_items))

    def __init__(self, session: AsyncSession):
        super().__init__(Invoice, session)

    async def list_by_statuses(
        self,
        user_id: UUID,
        statuses: Optional[List[InvoiceStatus]] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Invoice]:
        """List a user's invoices, latest issue date first."""
        query = select(Invoice).options(*self.load_options).where(Invoice.user_id == user_id)
        if statuses is not None:
            query = query.where(Invoice.status.in_(statuses))
        query = (
            query.order_by(Invoice.issue_date.desc(), Invoice.created_at.desc())
            .offset(skip)
            .limit(limit)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count_by_statuses(
        self,
        user_id: UUID,
        statuses: Optional[List[InvoiceStatus]] = None,
    ) -> int:
        query = select(func.count()).select_from(Invoice).where(Invoice.user_id == user_id)
        if statuses is not None:
            query = query.where(Invoice.status.in_(statuses))
        result = await self.session.execute(query)
        return result.scalar_one()

    async def replace_line_items(self, invoice: Invoice, items: List[dict]) -> None:
        """Swap the invoice's line items for a new set."""
        invoice.line_items = [InvoiceLineItem(**item) for item in items]
        await self.session.flush()
