"""
Company profile schemas.
"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from uuid import UUID


class CompanyProfileUpdate(BaseModel):
    """Partial update of the business details."""
    business_name: Optional[str] = Field(None, max_length=255)
    abn: Optional[str] = Field(None, max_length=20)
    address: Optional[str] = Field(None, max_length=500)
    email: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    logo_url: Optional[str] = Field(None, max_length=2000)


class CompanyProfileResponse(BaseModel):
    id: UUID
    business_name: Optional[str] = None
    abn: Optional[str] = None
    address: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    logo_url: Optional[str] = None
    updated_at: datetime

    class Config:
        from_attributes = True
