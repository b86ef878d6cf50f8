"""
Company profile (settings) API endpoints.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.middleware import require_authentication
from app.db.session import get_db
from app.controllers.company_profile_controller import CompanyProfileController
from app.models.user import User
from app.schemas.company_profile import CompanyProfileResponse, CompanyProfileUpdate

router = APIRouter()


@router.get("", response_model=CompanyProfileResponse)
async def get_company_profile(
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> CompanyProfileResponse:
    controller = CompanyProfileController(db, current_user.id)
    return await controller.get_profile()


@router.put("", response_model=CompanyProfileResponse)
async def update_company_profile(
    profile_data: CompanyProfileUpdate,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> CompanyProfileResponse:
    controller = CompanyProfileController(db, current_user.id)
    return await controller.update_profile(profile_data)
