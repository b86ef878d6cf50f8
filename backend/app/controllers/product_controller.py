"""
Product controller.
"""

from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.controllers.base_controller import BaseController
from app.services.product_service import ProductService
from app.schemas.product import (
    ProductCreate,
    ProductListResponse,
    ProductLookupResponse,
    ProductResponse,
)


class ProductController(BaseController):
    def __init__(self, session: AsyncSession, user_id: UUID):
        self.product_service = ProductService(session, user_id)

    async def list_products(self) -> ProductListResponse:
        items, total = await self.product_service.list_products()
        return ProductListResponse(items=items, total=total)

    async def add_product(self, product_data: ProductCreate) -> ProductResponse:
        return await self.product_service.add_product(product_data)

    async def lookup(self, barcode: str) -> ProductLookupResponse:
        return await self.product_service.lookup(barcode)

    async def remove_product(self, product_id: UUID) -> bool:
        return await self.product_service.remove_product(product_id)
