"""
Quote repository for database operations.
"""

from typing import Optional, List
from datetime import datetime
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from sqlalchemy.orm import selectinload

from app.db.repositories.base_repository import OwnedRepository
from app.models.quote import Quote, QuoteLineItem, QuoteStatus


class QuoteRepository(OwnedRepository[Quote]):
    """Repository for quote operations."""

    load_options = (selectinload(Quote.client), selectinload(Quote.line_items))

    def __init__(self, session: AsyncSession):
        super().__init__(Quote, session)

    def _filtered(
        self,
        query,
        user_id: UUID,
        statuses: Optional[List[QuoteStatus]] = None,
        created_before: Optional[datetime] = None,
        client_id: Optional[UUID] = None,
    ):
        query = query.where(Quote.user_id == user_id)
        if statuses is not None:
            query = query.where(Quote.status.in_(statuses))
        if created_before is not None:
            query = query.where(Quote.created_at < created_before)
        if client_id is not None:
            query = query.where(Quote.client_id == client_id)
        return query

    async def list_filtered(
        self,
        user_id: UUID,
        skip: int = 0,
        limit: int = 100,
        statuses: Optional[List[QuoteStatus]] = None,
        created_before: Optional[datetime] = None,
        client_id: Optional[UUID] = None,
    ) -> List[Quote]:
        """
        List a user's quotes, newest first.

        Args:
            statuses: Keep only these statuses (an empty list matches nothing)
            created_before: Keep only quotes created before this instant
            client_id: Keep only this client's quotes
        """
        query = self._filtered(
            select(Quote).options(*self.load_options),
            user_id, statuses, created_before, client_id,
        )
        query = query.order_by(Quote.created_at.desc()).offset(skip).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count_filtered(
        self,
        user_id: UUID,
        statuses: Optional[List[QuoteStatus]] = None,
        created_before: Optional[datetime] = None,
        client_id: Optional[UUID] = None,
    ) -> int:
        query = self._filtered(
            select(func.count()).select_from(Quote),
            user_id, statuses, created_before, client_id,
        )
        result = await self.session.execute(query)
        return result.scalar_one()

    async def add_line_item(self, quote: Quote, **kwargs) -> QuoteLineItem:
        item = QuoteLineItem(quote_id=quote.id, **kwargs)
        self.session.add(item)
        await self.session.flush()
        return item

    async def replace_line_items(self, quote: Quote, items: List[dict]) -> None:
        """Swap the quote's line items for a new set."""
        quote.line_items = [QuoteLineItem(**item) for item in items]
        await self.session.flush()
