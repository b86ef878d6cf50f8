"""
Product API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from app.api.v1.middleware import require_authentication
from app.db.session import get_db
from app.controllers.product_controller import ProductController
from app.models.user import User
from app.schemas.product import (
    ProductCreate,
    ProductListResponse,
    ProductLookupResponse,
    ProductResponse,
)

router = APIRouter()


@router.get("", response_model=ProductListResponse)
async def list_products(
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> ProductListResponse:
    """The user's active products at their effective rates."""
    controller = ProductController(db, current_user.id)
    return await controller.list_products()


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def add_product(
    product_data: ProductCreate,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> ProductResponse:
    """Save a product by barcode with the user's rate."""
    controller = ProductController(db, current_user.id)
    return await controller.add_product(product_data)


@router.get("/lookup/{barcode}", response_model=ProductLookupResponse)
async def lookup_product(
    barcode: str,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> ProductLookupResponse:
    """Price a scanned barcode. Unknown barcodes are 404."""
    controller = ProductController(db, current_user.id)
    return await controller.lookup(barcode)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_product(
    product_id: UUID,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
):
    """Remove a product from the user's list."""
    controller = ProductController(db, current_user.id)
    if not await controller.remove_product(product_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found",
        )
