"""
Product catalog schemas.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from decimal import Decimal
from uuid import UUID


class ProductCreate(BaseModel):
    """Product added from the products page or after a failed scan."""
    barcode: str = Field(..., min_length=1, max_length=100)
    name: str = Field(..., min_length=1, max_length=255)
    unit: Optional[str] = Field(None, max_length=50)
    rate: Decimal = Field(..., gt=0)

    @field_validator("barcode", "name", mode="before")
    @classmethod
    def strip_required(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("unit", mode="before")
    @classmethod
    def blank_unit(cls, value):
        if isinstance(value, str):
            return value.strip() or None
        return value


class ProductResponse(BaseModel):
    """A user's product with its effective rate."""
    id: UUID
    catalog_id: UUID
    barcode: str
    name: str
    unit: Optional[str] = None
    rate: Decimal


class ProductListResponse(BaseModel):
    items: List[ProductResponse]
    total: int


class ProductLookupResponse(BaseModel):
    """Catalog hit for a scanned barcode, priced for the current user."""
    catalog_id: UUID
    barcode: str
    name: str
    unit: Optional[str] = None
    rate: Decimal
