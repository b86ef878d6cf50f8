"""
Dashboard API endpoint.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.middleware import require_authentication
from app.db.session import get_db
from app.controllers.dashboard_controller import DashboardController
from app.models.user import User
from app.schemas.dashboard import DashboardResponse

router = APIRouter()


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> DashboardResponse:
    """Money owing, money received and job pipeline counts."""
    controller = DashboardController(db, current_user.id)
    return await controller.get_summary()
