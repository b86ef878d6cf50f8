"""
Quote Pydantic schemas for request/response validation.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from app.models.quote import QuoteStatus
from app.schemas.line_item import LineItemCreate, LineItemResponse
from app.utils.status import normalize_status


class QuoteCreate(BaseModel):
    """Schema for creating a quote. Totals are computed from line items."""
    client_id: UUID
    title: Optional[str] = Field(None, max_length=255)
    notes: Optional[str] = None
    apply_gst: bool = True
    line_items: List[LineItemCreate] = []


class QuoteUpdate(BaseModel):
    """Schema for updating a quote (all fields optional).

    Supplying line_items replaces the whole set.
    """
    client_id: Optional[UUID] = None
    title: Optional[str] = Field(None, max_length=255)
    notes: Optional[str] = None
    apply_gst: Optional[bool] = None
    status: Optional[QuoteStatus] = None
    line_items: Optional[List[LineItemCreate]] = None

    @field_validator("status", mode="before")
    @classmethod
    def lower_status(cls, value):
        return normalize_status(value)


class QuoteStatusUpdate(BaseModel):
    """Schema for changing quote status."""
    status: QuoteStatus

    @field_validator("status", mode="before")
    @classmethod
    def lower_status(cls, value):
        return normalize_status(value)


class QuoteScanRequest(BaseModel):
    """Barcode read by the scanner, to be appended as a line item."""
    barcode: str = Field(..., min_length=1, max_length=100)


class QuoteClientInfo(BaseModel):
    id: UUID
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None

    class Config:
        from_attributes = True


class QuoteResponse(BaseModel):
    """Schema for quote response."""
    id: UUID
    client_id: UUID
    title: Optional[str] = None
    status: QuoteStatus
    apply_gst: bool
    notes: Optional[str] = None
    subtotal: Decimal
    gst: Decimal
    total: Decimal
    created_at: datetime
    updated_at: datetime
    client: Optional[QuoteClientInfo] = None
    line_items: List[LineItemResponse] = []

    class Config:
        from_attributes = True


class QuoteSummary(BaseModel):
    """Compact quote for lists on client and job pages."""
    id: UUID
    title: Optional[str] = None
    status: QuoteStatus
    total: Decimal
    created_at: datetime

    class Config:
        from_attributes = True


class QuoteListResponse(BaseModel):
    """Schema for quote list response."""
    items: List[QuoteResponse]
    total: int


class QuoteStatusChangeResponse(BaseModel):
    """Quote after a status change, plus the job raised on acceptance."""
    quote: QuoteResponse
    job_id: Optional[UUID] = None
    job_created: bool = False
