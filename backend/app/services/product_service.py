"""
Product service.
Barcode catalog shared by all users, priced per user.
"""

from decimal import Decimal
from typing import List, Optional, Tuple
from uuid import UUID

from app.core.exceptions import NotFoundError
from app.core.logging import get_logger
from app.db.repositories.product_repository import (
    ProductCatalogRepository,
    UserProductRepository,
)
from app.models.product import ProductCatalog, UserProduct
from app.services.base_service import OwnedService
from app.schemas.product import ProductCreate, ProductLookupResponse, ProductResponse
from app.utils.totals import to_cents

logger = get_logger(__name__)


def effective_rate(catalog: ProductCatalog, user_product: Optional[UserProduct]) -> Decimal:
    """The user's custom rate when set on an active product, else the catalog default."""
    if user_product is not None and user_product.active and user_product.custom_rate is not None:
        return to_cents(user_product.custom_rate)
    return to_cents(catalog.default_rate)


def barcode_not_found(barcode: str) -> NotFoundError:
    return NotFoundError(
        f"No product found for barcode {barcode}. Add it under Products, then scan again.",
        details={"barcode": barcode},
    )


class ProductService(OwnedService):
    """Service for the user's products."""

    def __init__(self, session, user_id: UUID):
        super().__init__(session, user_id)
        self.catalog_repo = ProductCatalogRepository(session)
        self.user_product_repo = UserProductRepository(session)

    async def list_products(self) -> Tuple[List[ProductResponse], int]:
        rows = await self.user_product_repo.list_active(self.user_id)
        items = [self._to_response(row) for row in rows]
        return items, len(items)

    async def add_product(self, product_data: ProductCreate) -> ProductResponse:
        """
        Save a product for the user.

        The catalog row is created or refreshed by barcode, and the user's
        own rate is stored as an override.
        """
        rate = to_cents(product_data.rate)
        catalog = await self.catalog_repo.get_by_barcode(product_data.barcode)
        if catalog is None:
            catalog = await self.catalog_repo.create(
                barcode=product_data.barcode,
                name=product_data.name,
                unit=product_data.unit,
                default_rate=rate,
                created_by_user_id=self.user_id,
            )
        else:
            await self.catalog_repo.update_instance(
                catalog,
                name=product_data.name,
                unit=product_data.unit or catalog.unit,
            )

        user_product = await self.user_product_repo.get_for_catalog(self.user_id, catalog.id)
        if user_product is None:
            await self.user_product_repo.create(
                user_id=self.user_id,
                catalog_id=catalog.id,
                custom_rate=rate,
                active=True,
            )
        else:
            await self.user_product_repo.update_instance(user_product, custom_rate=rate, active=True)
        await self.session.commit()

        user_product = await self.user_product_repo.get_for_catalog(self.user_id, catalog.id)
        logger.info(
            "Product saved",
            extra={"barcode": catalog.barcode, "user_id": str(self.user_id)},
        )
        return self._to_response(user_product)

    async def lookup(self, barcode: str) -> ProductLookupResponse:
        """
        Price a scanned barcode for the user.

        Raises:
            NotFoundError: When the barcode is not in the catalog
        """
        barcode = barcode.strip()
        catalog = await self.catalog_repo.get_by_barcode(barcode)
        if catalog is None:
            raise barcode_not_found(barcode)
        user_product = await self.user_product_repo.get_for_catalog(self.user_id, catalog.id)
        return ProductLookupResponse(
            catalog_id=catalog.id,
            barcode=catalog.barcode,
            name=catalog.name,
            unit=catalog.unit,
            rate=effective_rate(catalog, user_product),
        )

    async def remove_product(self, product_id: UUID) -> bool:
        """Hide a product from the user's list; the catalog entry stays."""
        user_product = await self.user_product_repo.get_for_user(product_id, self.user_id)
        if not user_product or not user_product.active:
            return False
        await self.user_product_repo.update_instance(user_product, active=False)
        await self.session.commit()
        return True

    @staticmethod
    def _to_response(user_product: UserProduct) -> ProductResponse:
        catalog = user_product.catalog
        return ProductResponse(
            id=user_product.id,
            catalog_id=catalog.id,
            barcode=catalog.barcode,
            name=catalog.name,
            unit=catalog.unit,
            rate=effective_rate(catalog, user_product),
        )
