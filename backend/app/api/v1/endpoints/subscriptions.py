"""
Subscription API endpoint.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.middleware import require_authentication
from app.db.session import get_db
from app.controllers.subscription_controller import SubscriptionController
from app.models.user import User
from app.schemas.subscription import SubscriptionResponse

router = APIRouter()


@router.get("/me", response_model=SubscriptionResponse)
async def get_my_subscription(
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> SubscriptionResponse:
    """The signed-in user's plan."""
    controller = SubscriptionController(db, current_user.id)
    subscription = await controller.get_current()
    if not subscription:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Subscription not found",
        )
    return subscription
