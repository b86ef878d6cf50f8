"""
Invoice controller.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.controllers.base_controller import BaseController
from app.services.invoice_service import InvoiceService
from app.schemas.invoice import (
    InvoiceCreate,
    InvoiceListResponse,
    InvoiceResponse,
    InvoiceStatusUpdate,
    InvoiceUpdate,
    PaymentCreate,
)


class InvoiceController(BaseController):
    """Controller for invoice operations."""

    def __init__(self, session: AsyncSession, user_id: UUID):
        self.invoice_service = InvoiceService(session, user_id)

    async def create_invoice(self, invoice_data: InvoiceCreate) -> InvoiceResponse:
        return await self.invoice_service.create_invoice(invoice_data)

    async def get_invoice(self, invoice_id: UUID) -> Optional[InvoiceResponse]:
        return await self.invoice_service.get_invoice(invoice_id)

    async def list_invoices(
        self,
        skip: int = 0,
        limit: int = 100,
        status: Optional[str] = None,
    ) -> InvoiceListResponse:
        invoices, total = await self.invoice_service.list_invoices(skip=skip, limit=limit, status=status)
        return InvoiceListResponse(items=invoices, total=total)

    async def update_invoice(
        self,
        invoice_id: UUID,
        invoice_data: InvoiceUpdate,
    ) -> Optional[InvoiceResponse]:
        return await self.invoice_service.update_invoice(invoice_id, invoice_data)

    async def delete_invoice(self, invoice_id: UUID) -> bool:
        return await self.invoice_service.delete_invoice(invoice_id)

    async def update_status(
        self,
        invoice_id: UUID,
        status_data: InvoiceStatusUpdate,
    ) -> Optional[InvoiceResponse]:
        return await self.invoice_service.update_status(invoice_id, status_data.status)

    async def record_payment(
        self,
        invoice_id: UUID,
        payment_data: PaymentCreate,
    ) -> Optional[InvoiceResponse]:
        return await self.invoice_service.record_payment(invoice_id, payment_data)
