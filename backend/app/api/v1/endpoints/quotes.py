"""
Quote API endpoints.
"""

from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from uuid import UUID

from app.api.v1.middleware import require_authentication
from app.db.session import get_db
from app.controllers.quote_controller import QuoteController
from app.models.user import User
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

router = APIRouter()


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Quote not found",
    )


def _bad_request(e: ValueError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=str(e),
    )


@router.post("", response_model=QuoteResponse, status_code=status.HTTP_201_CREATED)
async def create_quote(
    quote_data: QuoteCreate,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> QuoteResponse:
    """Create a draft quote; totals are computed from the line items."""
    controller = QuoteController(db, current_user.id)
    try:
        return await controller.create_quote(quote_data)
    except ValueError as e:
        raise _bad_request(e)


@router.get("", response_model=QuoteListResponse)
async def list_quotes(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    status_filter: Optional[str] = Query(None, alias="status", description="Comma separated statuses"),
    owing: bool = Query(False, description="Only sent or accepted quotes"),
    overdue: bool = Query(False, description="Only accepted quotes past the overdue window"),
    client_id: Optional[UUID] = Query(None),
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> QuoteListResponse:
    """List quotes with optional filters."""
    controller = QuoteController(db, current_user.id)
    return await controller.list_quotes(
        skip=skip,
        limit=limit,
        status=status_filter,
        owing=owing,
        overdue=overdue,
        client_id=client_id,
    )


@router.get("/{quote_id}", response_model=QuoteResponse)
async def get_quote(
    quote_id: UUID,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> QuoteResponse:
    """Get quote with client and line items."""
    controller = QuoteController(db, current_user.id)
    quote = await controller.get_quote(quote_id)
    if not quote:
        raise _not_found()
    return quote


@router.put("/{quote_id}", response_model=QuoteResponse)
async def update_quote(
    quote_id: UUID,
    quote_data: QuoteUpdate,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> QuoteResponse:
    """Update a quote."""
    controller = QuoteController(db, current_user.id)
    try:
        quote = await controller.update_quote(quote_id, quote_data)
    except ValueError as e:
        raise _bad_request(e)
    if not quote:
        raise _not_found()
    return quote


@router.delete("/{quote_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_quote(
    quote_id: UUID,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
):
    """Delete a quote."""
    controller = QuoteController(db, current_user.id)
    if not await controller.delete_quote(quote_id):
        raise _not_found()


@router.patch("/{quote_id}/status", response_model=QuoteStatusChangeResponse)
async def update_quote_status(
    quote_id: UUID,
    status_data: QuoteStatusUpdate,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> QuoteStatusChangeResponse:
    """Change quote status. Accepting a quote raises a pending job once."""
    controller = QuoteController(db, current_user.id)
    result = await controller.update_status(quote_id, status_data)
    if not result:
        raise _not_found()
    return result


@router.post("/{quote_id}/scan", response_model=QuoteResponse)
async def scan_barcode(
    quote_id: UUID,
    scan_data: QuoteScanRequest,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> QuoteResponse:
    """Add a scanned product to the quote as a line item."""
    controller = QuoteController(db, current_user.id)
    quote = await controller.scan_barcode(quote_id, scan_data)
    if not quote:
        raise _not_found()
    return quote


@router.post("/{quote_id}/invoice", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED)
async def create_invoice_from_quote(
    quote_id: UUID,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> InvoiceResponse:
    """Raise a sent invoice from the quote."""
    controller = QuoteController(db, current_user.id)
    try:
        invoice = await controller.create_invoice(quote_id)
    except ValueError as e:
        raise _bad_request(e)
    if not invoice:
        raise _not_found()
    return invoice
