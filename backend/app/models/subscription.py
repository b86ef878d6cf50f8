"""
Subscription record kept in sync by the billing provider.
"""

from sqlalchemy import Column, String, DateTime, ForeignKey, Numeric, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import UUID
import uuid
import enum

from app.db.base import Base


class PlanTier(str, enum.Enum):
    """Subscription plan tier."""
    STARTER = "starter"
    PRO = "pro"


class Subscription(Base):
    """A user's plan, as last reported by billing."""

    __tablename__ = "subscriptions"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    user_id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=True)
    status = Column(String(50), nullable=False, default="active")
    plan_tier = Column(SQLEnum(PlanTier, values_callable=lambda e: [m.value for m in e]), nullable=True)
    plan_amount = Column(Numeric(12, 2), nullable=True)
    started_at = Column(DateTime, nullable=True)
