"""
Invoice Pydantic schemas for request/response validation.
"""

from pydantic import BaseModel, Field, field_validator, computed_field
from typing import Optional, List
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from app.models.invoice import InvoiceStatus
from app.schemas.line_item import LineItemCreate, LineItemResponse
from app.utils.dates import today
from app.utils.status import normalize_status
from app.utils.totals import balance_due as compute_balance_due


class InvoiceCreate(BaseModel):
    """Schema for creating an invoice. Dates default to today and today + due days."""
    client_id: UUID
    quote_id: Optional[UUID] = None
    title: Optional[str] = Field(None, max_length=255)
    issue_date: Optional[date] = None
    due_date: Optional[date] = None
    status: InvoiceStatus = InvoiceStatus.DRAFT
    apply_gst: bool = True
    notes: Optional[str] = None
    line_items: List[LineItemCreate] = []

    @field_validator("status", mode="before")
    @classmethod
    def lower_status(cls, value):
        return normalize_status(value)


class InvoiceUpdate(BaseModel):
    """Schema for updating an invoice (all fields optional).

    Supplying line_items replaces the whole set.
    """
    client_id: Optional[UUID] = None
    title: Optional[str] = Field(None, max_length=255)
    issue_date: Optional[date] = None
    due_date: Optional[date] = None
    status: Optional[InvoiceStatus] = None
    apply_gst: Optional[bool] = None
    notes: Optional[str] = None
    amount_paid: Optional[Decimal] = Field(None, ge=0)
    line_items: Optional[List[LineItemCreate]] = None

    @field_validator("status", mode="before")
    @classmethod
    def lower_status(cls, value):
        return normalize_status(value)


class InvoiceStatusUpdate(BaseModel):
    """Schema for changing invoice status."""
    status: InvoiceStatus

    @field_validator("status", mode="before")
    @classmethod
    def lower_status(cls, value):
        return normalize_status(value)


class PaymentCreate(BaseModel):
    """Money received against an invoice."""
    amount: Decimal = Field(..., gt=0)


class InvoiceClientInfo(BaseModel):
    id: UUID
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None

    class Config:
        from_attributes = True


class InvoiceResponse(BaseModel):
    """Schema for invoice response."""
    id: UUID
    client_id: UUID
    quote_id: Optional[UUID] = None
    title: Optional[str] = None
    status: InvoiceStatus
    issue_date: Optional[date] = None
    due_date: Optional[date] = None
    apply_gst: bool
    notes: Optional[str] = None
    subtotal: Decimal
    gst: Decimal
    total: Decimal
    amount_paid: Decimal
    created_at: datetime
    client: Optional[InvoiceClientInfo] = None
    line_items: List[LineItemResponse] = []

    class Config:
        from_attributes = True

    @computed_field
    @property
    def balance_due(self) -> Decimal:
        return compute_balance_due(self.total, self.amount_paid)

    @computed_field
    @property
    def is_overdue(self) -> bool:
        if self.status not in (InvoiceStatus.SENT, InvoiceStatus.OVERDUE):
            return False
        if self.due_date is None or self.balance_due <= 0:
            return False
        return self.due_date < today()


class InvoiceListResponse(BaseModel):
    """Schema for invoice list response."""
    items: List[InvoiceResponse]
    total: int
