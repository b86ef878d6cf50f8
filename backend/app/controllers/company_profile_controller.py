"""
Company profile controller.
"""

from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.controllers.base_controller import BaseController
from app.services.company_profile_service import CompanyProfileService
from app.schemas.company_profile import CompanyProfileResponse, CompanyProfileUpdate


class CompanyProfileController(BaseController):
    def __init__(self, session: AsyncSession, user_id: UUID):
        self.profile_service = CompanyProfileService(session, user_id)

    async def get_profile(self) -> CompanyProfileResponse:
        return await self.profile_service.get_profile()

    async def update_profile(self, profile_data: CompanyProfileUpdate) -> CompanyProfileResponse:
        return await self.profile_service.update_profile(profile_data)
