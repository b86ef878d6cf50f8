"""
Dashboard service.
Money and job pipeline figures for the signed-in user.
"""

from sqlalchemy import select

from app.core.config import settings
from app.services.base_service import OwnedService
from app.models.invoice import Invoice
from app.models.job import Job
from app.models.quote import Quote
from app.schemas.dashboard import DashboardResponse
from app.utils.metrics import count_by_status, invoice_money, job_pipeline


class DashboardService(OwnedService):
    """Service for the dashboard summary."""

    async def _rows(self, *columns):
        model = columns[0].class_
        result = await self.session.execute(
            select(*columns).where(model.user_id == self.user_id)
        )
        return result.all()

    async def get_summary(self) -> DashboardResponse:
        invoices = await self._rows(Invoice.status, Invoice.total, Invoice.amount_paid)
        jobs = await self._rows(Job.status)
        quotes = await self._rows(Quote.status)

        return DashboardResponse(
            **invoice_money(invoices),
            **job_pipeline(jobs),
            quotes_by_status=count_by_status(quotes),
            invoices_by_status=count_by_status(invoices),
            currency=settings.CURRENCY,
        )
