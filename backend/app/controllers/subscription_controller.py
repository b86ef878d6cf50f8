"""
Subscription controller.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.controllers.base_controller import BaseController
from app.services.subscription_service import SubscriptionService
from app.schemas.subscription import SubscriptionResponse


class SubscriptionController(BaseController):
    def __init__(self, session: AsyncSession, user_id: UUID):
        self.subscription_service = SubscriptionService(session, user_id)

    async def get_current(self) -> Optional[SubscriptionResponse]:
        return await self.subscription_service.get_current()
