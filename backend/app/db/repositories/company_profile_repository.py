"""
Company profile repository.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.db.repositories.base_repository import BaseRepository
from app.models.company_profile import CompanyProfile


class CompanyProfileRepository(BaseRepository[CompanyProfile]):
    def __init__(self, session: AsyncSession):
        super().__init__(CompanyProfile, session)

    async def get_by_user(self, user_id: UUID) -> Optional[CompanyProfile]:
        result = await self.session.execute(
            select(CompanyProfile).where(CompanyProfile.user_id == user_id)
        )
        return result.scalar_one_or_none()
