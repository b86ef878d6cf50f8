"""
Quote model: a priced estimate sent to a client.
"""

from sqlalchemy import Column, String, Text, Boolean, DateTime, ForeignKey, Numeric, Integer, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
import uuid
import enum

from app.db.base import Base
from app.utils.dates import utcnow


class QuoteStatus(str, enum.Enum):
    """Quote status enumeration."""
    DRAFT = "draft"
    SENT = "sent"
    ACCEPTED = "accepted"
    DECLINED = "declined"
    PAID = "paid"


class Quote(Base):
    """Quote with line items and GST-inclusive totals."""

    __tablename__ = "quotes"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    user_id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    client_id = Column(UUID(as_uuid=True), ForeignKey("clients.id", ondelete="RESTRICT"), nullable=False, index=True)
    title = Column(String(255), nullable=True)
    status = Column(
        SQLEnum(QuoteStatus, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=QuoteStatus.DRAFT,
        index=True,
    )
    apply_gst = Column(Boolean, nullable=False, default=True)
    notes = Column(Text, nullable=True)
    subtotal = Column(Numeric(12, 2), nullable=False, default=0)
    gst = Column(Numeric(12, 2), nullable=False, default=0)
    total = Column(Numeric(12, 2), nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, default=utcnow, index=True)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    client = relationship("Client", back_populates="quotes")
    line_items = relationship(
        "QuoteLineItem",
        back_populates="quote",
        cascade="all, delete-orphan",
        order_by="QuoteLineItem.row_order",
    )
    jobs = relationship("Job", back_populates="quote")
    invoices = relationship("Invoice", back_populates="quote")


class QuoteLineItem(Base):
    """One priced row on a quote."""

    __tablename__ = "quote_line_items"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    quote_id = Column(UUID(as_uuid=True), ForeignKey("quotes.id", ondelete="CASCADE"), nullable=False, index=True)
    description = Column(String(500), nullable=False, default="")
    quantity = Column(Numeric(10, 2), nullable=False, default=1)
    unit_price = Column(Numeric(12, 2), nullable=False, default=0)
    line_total = Column(Numeric(12, 2), nullable=False, default=0)
    row_order = Column(Integer, nullable=False, default=0)

    # Relationships
    quote = relationship("Quote", back_populates="line_items")
