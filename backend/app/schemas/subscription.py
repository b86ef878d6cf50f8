"""
Subscription schema.
"""

from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from app.models.subscription import PlanTier


class SubscriptionResponse(BaseModel):
    id: UUID
    email: Optional[str] = None
    status: str
    plan_tier: Optional[PlanTier] = None
    plan_amount: Optional[Decimal] = None
    started_at: Optional[datetime] = None

    class Config:
        from_attributes = True
