"""
Dashboard summary schema.
"""

from pydantic import BaseModel
from typing import Dict
from decimal import Decimal


class DashboardResponse(BaseModel):
    """Money and pipeline figures for the signed-in user."""
    total_paid: Decimal
    money_owing: Decimal
    money_overdue: Decimal
    jobs_pending: int
    jobs_active: int
    jobs_completed: int
    total_jobs: int
    quotes_by_status: Dict[str, int] = {}
    invoices_by_status: Dict[str, int] = {}
    currency: str
