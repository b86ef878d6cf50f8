"""
Product catalog and per-user product repositories.
"""

from typing import Optional, List
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from app.db.repositories.base_repository import BaseRepository
from app.models.product import ProductCatalog, UserProduct


class ProductCatalogRepository(BaseRepository[ProductCatalog]):
    """Shared barcode catalog."""

    def __init__(self, session: AsyncSession):
        super().__init__(ProductCatalog, session)

    async def get_by_barcode(self, barcode: str) -> Optional[ProductCatalog]:
        result = await self.session.execute(
            select(ProductCatalog).where(ProductCatalog.barcode == barcode.strip())
        )
        return result.scalar_one_or_none()


class UserProductRepository(BaseRepository[UserProduct]):
    """A user's saved products and rate overrides."""

    def __init__(self, session: AsyncSession):
        super().__init__(UserProduct, session)

    async def get_for_catalog(self, user_id: UUID, catalog_id: UUID) -> Optional[UserProduct]:
        result = await self.session.execute(
            select(UserProduct)
            .options(selectinload(UserProduct.catalog))
            .where(UserProduct.user_id == user_id, UserProduct.catalog_id == catalog_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_for_user(self, id: UUID, user_id: UUID) -> Optional[UserProduct]:
        result = await self.session.execute(
            select(UserProduct)
            .options(selectinload(UserProduct.catalog))
            .where(UserProduct.id == id, UserProduct.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def list_active(self, user_id: UUID) -> List[UserProduct]:
        """Active products with their catalog rows, alphabetical by name."""
        result = await self.session.execute(
            select(UserProduct)
            .join(UserProduct.catalog)
            .options(selectinload(UserProduct.catalog))
            .where(UserProduct.user_id == user_id, UserProduct.active.is_(True))
            .order_by(ProductCatalog.name)
        )
        return list(result.scalars().all())
