"""
Company profile service.
"""

from uuid import UUID

from app.services.base_service import OwnedService
from app.db.repositories.company_profile_repository import CompanyProfileRepository
from app.models.company_profile import CompanyProfile
from app.schemas.company_profile import CompanyProfileResponse, CompanyProfileUpdate


class CompanyProfileService(OwnedService):
    """Business details printed on quotes and invoices."""

    def __init__(self, session, user_id: UUID):
        super().__init__(session, user_id)
        self.profile_repo = CompanyProfileRepository(session)

    async def _get_or_create(self) -> CompanyProfile:
        profile = await self.profile_repo.get_by_user(self.user_id)
        if profile is None:
            profile = await self.profile_repo.create(user_id=self.user_id)
        return profile

    async def get_profile(self) -> CompanyProfileResponse:
        """The user's profile, created empty on first read."""
        profile = await self._get_or_create()
        await self.session.commit()
        return CompanyProfileResponse.model_validate(profile)

    async def update_profile(self, profile_data: CompanyProfileUpdate) -> CompanyProfileResponse:
        profile = await self._get_or_create()
        update_dict = {
            key: value.strip() if isinstance(value, str) else value
            for key, value in profile_data.model_dump(exclude_unset=True).items()
        }
        await self.profile_repo.update_instance(profile, **update_dict)
        await self.session.commit()
        return CompanyProfileResponse.model_validate(profile)
