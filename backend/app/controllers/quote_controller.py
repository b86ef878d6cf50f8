"""
Quote controller.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.controllers.base_controller import BaseController
from app.services.quote_service import QuoteService
from app.schemas.invoice import InvoiceResponse
from app.schemas.quote import (
    QuoteCreate,
    QuoteListResponse,
    QuoteResponse,
    QuoteScanRequest,
    QuoteStatusChangeResponse,
    QuoteStatusUpdate,
    QuoteUpdate,
)


class QuoteController(BaseController):
    """Controller for quote operations."""

    def __init__(self, session: AsyncSession, user_id: UUID):
        self.quote_service = QuoteService(session, user_id)

    async def create_quote(self, quote_data: QuoteCreate) -> QuoteResponse:
        return await self.quote_service.create_quote(quote_data)

    async def get_quote(self, quote_id: UUID) -> Optional[QuoteResponse]:
        return await self.quote_service.get_quote(quote_id)

    async def list_quotes(
        self,
        skip: int = 0,
        limit: int = 100,
        status: Optional[str] = None,
        owing: bool = False,
        overdue: bool = False,
        client_id: Optional[UUID] = None,
    ) -> QuoteListResponse:
        """List quotes with optional filters."""
        quotes, total = await self.quote_service.list_quotes(
            skip=skip,
            limit=limit,
            status=status,
            owing=owing,
            overdue=overdue,
            client_id=client_id,
        )
        return QuoteListResponse(items=quotes, total=total)

    async def update_quote(self, quote_id: UUID, quote_data: QuoteUpdate) -> Optional[QuoteResponse]:
        return await self.quote_service.update_quote(quote_id, quote_data)

    async def delete_quote(self, quote_id: UUID) -> bool:
        return await self.quote_service.delete_quote(quote_id)

    async def update_status(
        self,
        quote_id: UUID,
        status_data: QuoteStatusUpdate,
    ) -> Optional[QuoteStatusChangeResponse]:
        return await self.quote_service.update_status(quote_id, status_data.status)

    async def scan_barcode(self, quote_id: UUID, scan_data: QuoteScanRequest) -> Optional[QuoteResponse]:
        return await self.quote_service.scan_barcode(quote_id, scan_data.barcode)

    async def create_invoice(self, quote_id: UUID) -> Optional[InvoiceResponse]:
        return await self.quote_service.create_invoice(quote_id)
