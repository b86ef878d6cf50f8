"""
Product catalog shared by barcode, with per-user rate overrides.
"""

from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, Numeric, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
import uuid

from app.db.base import Base
from app.utils.dates import utcnow


class ProductCatalog(Base):
    """Catalog entry keyed by barcode."""

    __tablename__ = "product_catalog"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    barcode = Column(String(100), nullable=False, unique=True, index=True)
    name = Column(String(255), nullable=False)
    unit = Column(String(50), nullable=True)
    default_rate = Column(Numeric(12, 2), nullable=False, default=0)
    created_by_user_id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    user_products = relationship("UserProduct", back_populates="catalog")


class UserProduct(Base):
    """A user's link to a catalog product and their own rate for it."""

    __tablename__ = "user_products"
    __table_args__ = (
        UniqueConstraint("user_id", "catalog_id", name="uq_user_products_user_catalog"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    user_id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    catalog_id = Column(UUID(as_uuid=True), ForeignKey("product_catalog.id", ondelete="CASCADE"), nullable=False, index=True)
    custom_rate = Column(Numeric(12, 2), nullable=True)
    active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    catalog = relationship("ProductCatalog", back_populates="user_products")
