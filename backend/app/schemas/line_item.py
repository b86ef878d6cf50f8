"""
Line item schemas shared by quotes and invoices.
"""

from pydantic import BaseModel, Field
from decimal import Decimal
from uuid import UUID


class LineItemCreate(BaseModel):
    """Line item as entered; line_total is always derived."""
    description: str = Field(default="", max_length=500)
    quantity: Decimal = Field(default=Decimal("1"), ge=0)
    unit_price: Decimal = Field(default=Decimal("0"), ge=0)


class LineItemResponse(BaseModel):
    """Stored line item."""
    id: UUID
    description: str
    quantity: Decimal
    unit_price: Decimal
    line_total: Decimal
    row_order: int

    class Config:
        from_attributes = True
