"""
Subscription service. Read-only view of the user's plan.
"""

from typing import Optional
from uuid import UUID

from app.services.base_service import OwnedService
from app.db.repositories.subscription_repository import SubscriptionRepository
from app.schemas.subscription import SubscriptionResponse


class SubscriptionService(OwnedService):
    def __init__(self, session, user_id: UUID):
        super().__init__(session, user_id)
        self.subscription_repo = SubscriptionRepository(session)

    async def get_current(self) -> Optional[SubscriptionResponse]:
        subscription = await self.subscription_repo.get_by_user(self.user_id)
        if not subscription:
            return None
        return SubscriptionResponse.model_validate(subscription)
