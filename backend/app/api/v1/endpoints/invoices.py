"""
Invoice API endpoints.
"""

from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from uuid import UUID

from app.api.v1.middleware import require_authentication
from app.db.session import get_db
from app.controllers.invoice_controller import InvoiceController
from app.models.user import User
from app.schemas.invoice import (
    InvoiceCreate,
    InvoiceListResponse,
    InvoiceResponse,
    InvoiceStatusUpdate,
    InvoiceUpdate,
    PaymentCreate,
)

router = APIRouter()


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Invoice not found",
    )


def _bad_request(e: ValueError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=str(e),
    )


@router.post("", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED)
async def create_invoice(
    invoice_data: InvoiceCreate,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> InvoiceResponse:
    """Create an invoice; totals are computed from the line items."""
    controller = InvoiceController(db, current_user.id)
    try:
        return await controller.create_invoice(invoice_data)
    except ValueError as e:
        raise _bad_request(e)


@router.get("", response_model=InvoiceListResponse)
async def list_invoices(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    status_filter: Optional[str] = Query(None, alias="status", description="Comma separated statuses"),
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> InvoiceListResponse:
    """List invoices, latest issue date first."""
    controller = InvoiceController(db, current_user.id)
    return await controller.list_invoices(skip=skip, limit=limit, status=status_filter)


@router.get("/{invoice_id}", response_model=InvoiceResponse)
async def get_invoice(
    invoice_id: UUID,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> InvoiceResponse:
    """Get invoice with client and line items."""
    controller = InvoiceController(db, current_user.id)
    invoice = await controller.get_invoice(invoice_id)
    if not invoice:
        raise _not_found()
    return invoice


@router.put("/{invoice_id}", response_model=InvoiceResponse)
async def update_invoice(
    invoice_id: UUID,
    invoice_data: InvoiceUpdate,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> InvoiceResponse:
    """Update an invoice."""
    controller = InvoiceController(db, current_user.id)
    try:
        invoice = await controller.update_invoice(invoice_id, invoice_data)
    except ValueError as e:
        raise _bad_request(e)
    if not invoice:
        raise _not_found()
    return invoice


@router.delete("/{invoice_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_invoice(
    invoice_id: UUID,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
):
    """Delete an invoice."""
    controller = InvoiceController(db, current_user.id)
    if not await controller.delete_invoice(invoice_id):
        raise _not_found()


@router.patch("/{invoice_id}/status", response_model=InvoiceResponse)
async def update_invoice_status(
    invoice_id: UUID,
    status_data: InvoiceStatusUpdate,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> InvoiceResponse:
    """Change invoice status. Paid also marks the source quote paid."""
    controller = InvoiceController(db, current_user.id)
    invoice = await controller.update_status(invoice_id, status_data)
    if not invoice:
        raise _not_found()
    return invoice


@router.post("/{invoice_id}/payments", response_model=InvoiceResponse)
async def record_payment(
    invoice_id: UUID,
    payment_data: PaymentCreate,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> InvoiceResponse:
    """Record money received against an invoice."""
    controller = InvoiceController(db, current_user.id)
    try:
        invoice = await controller.record_payment(invoice_id, payment_data)
    except ValueError as e:
        raise _bad_request(e)
    if not invoice:
        raise _not_found()
    return invoice
