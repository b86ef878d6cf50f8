"""
Quote service with business logic for line items, totals and the
quote -> job -> invoice pipeline.
"""

import logging
from datetime import timedelta
from typing import List, Optional, Tuple
from uuid import UUID

from app.core.config import settings
from app.services.base_service import OwnedService
from app.services.line_items import build_line_items, totals_for
from app.services.product_service import ProductService
from app.db.repositories.client_repository import ClientRepository
from app.db.repositories.invoice_repository import InvoiceRepository
from app.db.repositories.job_repository import JobRepository
from app.db.repositories.quote_repository import QuoteRepository
from app.models.invoice import InvoiceStatus
from app.models.job import Job, JobStatus
from app.models.quote import Quote, QuoteStatus
from app.schemas.invoice import InvoiceResponse
from app.schemas.line_item import LineItemCreate
from app.schemas.quote import (
    QuoteCreate,
    QuoteResponse,
    QuoteStatusChangeResponse,
    QuoteUpdate,
)
from app.utils.dates import days_from_today, today, utcnow
from app.utils.status import parse_status_list, status_value
from app.utils.totals import to_cents

logger = logging.getLogger(__name__)

OWING_STATUSES = (QuoteStatus.SENT, QuoteStatus.ACCEPTED)


def default_job_title(quote: Quote) -> str:
    """Quote title, else the client's name, else a short quote reference."""
    if quote.title and quote.title.strip():
        return quote.title.strip()
    client = quote.client
    if client is not None and client.name and client.name.strip():
        return f"Job for {client.name.strip()}"
    return f"Job for quote #{str(quote.id)[:8]}"


def _intersect(current: Optional[List[QuoteStatus]], allowed) -> List[QuoteStatus]:
    if current is None:
        return list(allowed)
    return [status for status in current if status in allowed]


class QuoteService(OwnedService):
    """Service for quote operations."""

    def __init__(self, session, user_id: UUID):
        super().__init__(session, user_id)
        self.quote_repo = QuoteRepository(session)
        self.client_repo = ClientRepository(session)
        self.job_repo = JobRepository(session)
        self.invoice_repo = InvoiceRepository(session)

    async def _require_client(self, client_id: UUID) -> None:
        client = await self.client_repo.get_for_user(client_id, self.user_id)
        if not client:
            raise ValueError("Client not found")

    async def create_quote(self, quote_data: QuoteCreate) -> QuoteResponse:
        """
        Create a draft quote.

        Raises:
            ValueError: If the client does not belong to the user
        """
        await self._require_client(quote_data.client_id)

        rows = build_line_items(quote_data.line_items)
        quote = await self.quote_repo.create(
            user_id=self.user_id,
            client_id=quote_data.client_id,
            title=quote_data.title,
            notes=quote_data.notes,
            apply_gst=quote_data.apply_gst,
            status=QuoteStatus.DRAFT,
            **totals_for(rows, quote_data.apply_gst),
        )
        for row in rows:
            await self.quote_repo.add_line_item(quote, **row)
        await self.session.commit()

        logger.info(f"Created quote {quote.id} with {len(rows)} line item(s)")
        return await self.get_quote(quote.id)

    async def get_quote(self, quote_id: UUID) -> Optional[QuoteResponse]:
        quote = await self.quote_repo.get_for_user(quote_id, self.user_id)
        if not quote:
            return None
        return QuoteResponse.model_validate(quote)

    async def list_quotes(
        self,
        skip: int = 0,
        limit: int = 100,
        status: Optional[str] = None,
        owing: bool = False,
        overdue: bool = False,
        client_id: Optional[UUID] = None,
    ) -> Tuple[List[QuoteResponse], int]:
        """
        List quotes, newest first.

        Args:
            status: Comma separated statuses, any casing
            owing: Only quotes still waiting on money (sent or accepted)
            overdue: Only accepted quotes older than OVERDUE_QUOTE_DAYS
            client_id: Only this client's quotes
        """
        statuses = parse_status_list(QuoteStatus, status)
        created_before = None
        if owing:
            statuses = _intersect(statuses, OWING_STATUSES)
        if overdue:
            statuses = _intersect(statuses, (QuoteStatus.ACCEPTED,))
            created_before = utcnow() - timedelta(days=settings.OVERDUE_QUOTE_DAYS)

        quotes = await self.quote_repo.list_filtered(
            self.user_id,
            skip=skip,
            limit=limit,
            statuses=statuses,
            created_before=created_before,
            client_id=client_id,
        )
        total = await self.quote_repo.count_filtered(
            self.user_id,
            statuses=statuses,
            created_before=created_before,
            client_id=client_id,
        )
        return [QuoteResponse.model_validate(q) for q in quotes], total

    async def update_quote(
        self,
        quote_id: UUID,
        quote_data: QuoteUpdate,
    ) -> Optional[QuoteResponse]:
        """
        Update a quote. New line items replace the old set and totals are
        recomputed; a change to accepted raises the job.
        """
        quote = await self.quote_repo.get_for_user(quote_id, self.user_id)
        if not quote:
            return None

        update_dict = quote_data.model_dump(exclude_unset=True, exclude={"line_items", "status"})
        if "client_id" in update_dict:
            if update_dict["client_id"] is None:
                raise ValueError("Quote must have a client")
            await self._require_client(update_dict["client_id"])
        if update_dict.get("apply_gst") is None:
            update_dict.pop("apply_gst", None)

        if quote_data.line_items is not None:
            rows = build_line_items(quote_data.line_items)
            await self.quote_repo.replace_line_items(quote, rows)
        else:
            rows = build_line_items(quote.line_items)
        apply_gst = update_dict.get("apply_gst", quote.apply_gst)
        update_dict.update(totals_for(rows, apply_gst))

        await self.quote_repo.update_instance(quote, **update_dict)
        if quote_data.status is not None:
            await self._apply_status(quote, quote_data.status)
        await self.session.commit()
        return await self.get_quote(quote_id)

    async def delete_quote(self, quote_id: UUID) -> bool:
        """Delete a quote; jobs and invoices made from it are kept and unlinked."""
        quote = await self.quote_repo.get_for_user(quote_id, self.user_id)
        if not quote:
            return False
        await self.quote_repo.delete_instance(quote)
        await self.session.commit()
        return True

    async def update_status(
        self,
        quote_id: UUID,
        new_status: QuoteStatus,
    ) -> Optional[QuoteStatusChangeResponse]:
        """
        Move a quote to a new status.

        Accepting a quote creates a pending job for it unless one already
        exists. Both writes commit together.
        """
        quote = await self.quote_repo.get_for_user(quote_id, self.user_id)
        if not quote:
            return None

        job, created = await self._apply_status(quote, new_status)
        await self.session.commit()

        return QuoteStatusChangeResponse(
            quote=await self.get_quote(quote_id),
            job_id=job.id if job else None,
            job_created=created,
        )

    async def _apply_status(self, quote: Quote, new_status: QuoteStatus) -> Tuple[Optional[Job], bool]:
        previous = quote.status
        await self.quote_repo.update_instance(quote, status=new_status)
        logger.info(f"Quote {quote.id} status {status_value(previous)} -> {new_status.value}")

        if new_status != QuoteStatus.ACCEPTED:
            return None, False

        existing = await self.job_repo.get_by_quote(quote.id)
        if existing:
            return existing, False

        # Reload so the title sees the current client
        quote = await self.quote_repo.get_for_user(quote.id, self.user_id)

        job = await self.job_repo.create(
            user_id=self.user_id,
            client_id=quote.client_id,
            quote_id=quote.id,
            title=default_job_title(quote),
            status=JobStatus.PENDING,
        )
        logger.info(f"Created job {job.id} for accepted quote {quote.id}")
        return job, True

    async def scan_barcode(self, quote_id: UUID, barcode: str) -> Optional[QuoteResponse]:
        """
        Append a scanned product to the quote at the user's rate.

        Raises:
            NotFoundError: When the barcode is not in the catalog
        """
        quote = await self.quote_repo.get_for_user(quote_id, self.user_id)
        if not quote:
            return None

        product = await ProductService(self.session, self.user_id).lookup(barcode)
        existing = list(quote.line_items)
        items = existing + [
            LineItemCreate(description=product.name, quantity=1, unit_price=product.rate)
        ]
        rows = build_line_items(items)
        await self.quote_repo.replace_line_items(quote, rows)
        await self.quote_repo.update_instance(quote, **totals_for(rows, quote.apply_gst))
        await self.session.commit()

        logger.info(f"Added barcode {product.barcode} to quote {quote_id}")
        return await self.get_quote(quote_id)

    async def create_invoice(self, quote_id: UUID) -> Optional[InvoiceResponse]:
        """
        Raise a sent invoice from a quote, copying its line items and totals.

        Raises:
            ValueError: If the quote has no client
        """
        quote = await self.quote_repo.get_for_user(quote_id, self.user_id)
        if not quote:
            return None
        if quote.client_id is None:
            raise ValueError("Quote has no client to invoice")

        rows = build_line_items(quote.line_items)
        invoice = await self.invoice_repo.create(
            user_id=self.user_id,
            client_id=quote.client_id,
            quote_id=quote.id,
            title=quote.title,
            status=InvoiceStatus.SENT,
            issue_date=today(),
            due_date=days_from_today(settings.DEFAULT_INVOICE_DUE_DAYS),
            apply_gst=quote.apply_gst,
            notes=quote.notes,
            subtotal=to_cents(quote.subtotal),
            gst=to_cents(quote.gst),
            total=to_cents(quote.total),
            amount_paid=to_cents(0),
        )
        invoice = await self.invoice_repo.get_for_user(invoice.id, self.user_id)
        await self.invoice_repo.replace_line_items(invoice, rows)
        await self.session.commit()

        logger.info(f"Created invoice {invoice.id} from quote {quote_id}")
        invoice = await self.invoice_repo.get_for_user(invoice.id, self.user_id)
        return InvoiceResponse.model_validate(invoice)
