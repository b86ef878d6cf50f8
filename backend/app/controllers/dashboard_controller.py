"""
Dashboard controller.
"""

from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.controllers.base_controller import BaseController
from app.services.dashboard_service import DashboardService
from app.schemas.dashboard import DashboardResponse


class DashboardController(BaseController):
    def __init__(self, session: AsyncSession, user_id: UUID):
        self.dashboard_service = DashboardService(session, user_id)

    async def get_summary(self) -> DashboardResponse:
        return await self.dashboard_service.get_summary()
