"""
Invoice service with business logic for totals and payments.
"""

import logging
from typing import List, Optional, Tuple
from uuid import UUID

from app.core.config import settings
from app.services.base_service import OwnedService
from app.services.line_items import build_line_items, totals_for
from app.db.repositories.client_repository import ClientRepository
from app.db.repositories.invoice_repository import InvoiceRepository
from app.db.repositories.quote_repository import QuoteRepository
from app.models.invoice import Invoice, InvoiceStatus
from app.models.quote import QuoteStatus
from app.schemas.invoice import (
    InvoiceCreate,
    InvoiceResponse,
    InvoiceUpdate,
    PaymentCreate,
)
from app.utils.dates import days_from_today, today
from app.utils.status import parse_status_list, status_value
from app.utils.totals import to_cents

logger = logging.getLogger(__name__)


class InvoiceService(OwnedService):
    """Service for invoice operations."""

    def __init__(self, session, user_id: UUID):
        super().__init__(session, user_id)
        self.invoice_repo = InvoiceRepository(session)
        self.client_repo = ClientRepository(session)
        self.quote_repo = QuoteRepository(session)

    async def _require_client(self, client_id: UUID) -> None:
        client = await self.client_repo.get_for_user(client_id, self.user_id)
        if not client:
            raise ValueError("Client not found")

    async def _require_quote(self, quote_id: Optional[UUID]) -> None:
        if quote_id is None:
            return
        quote = await self.quote_repo.get_for_user(quote_id, self.user_id)
        if not quote:
            raise ValueError("Quote not found")

    async def create_invoice(self, invoice_data: InvoiceCreate) -> InvoiceResponse:
        """
        Create an invoice.

        Raises:
            ValueError: If the client or quote does not belong to the user
        """
        await self._require_client(invoice_data.client_id)
        await self._require_quote(invoice_data.quote_id)

        rows = build_line_items(invoice_data.line_items)
        invoice = await self.invoice_repo.create(
            user_id=self.user_id,
            client_id=invoice_data.client_id,
            quote_id=invoice_data.quote_id,
            title=invoice_data.title,
            status=invoice_data.status,
            issue_date=invoice_data.issue_date or today(),
            due_date=invoice_data.due_date or days_from_today(settings.DEFAULT_INVOICE_DUE_DAYS),
            apply_gst=invoice_data.apply_gst,
            notes=invoice_data.notes,
            amount_paid=to_cents(0),
            **totals_for(rows, invoice_data.apply_gst),
        )
        invoice = await self.invoice_repo.get_for_user(invoice.id, self.user_id)
        await self.invoice_repo.replace_line_items(invoice, rows)
        if invoice_data.status == InvoiceStatus.PAID:
            await self._settle(invoice)
        await self.session.commit()

        logger.info(f"Created invoice {invoice.id} with {len(rows)} line item(s)")
        return await self.get_invoice(invoice.id)

    async def get_invoice(self, invoice_id: UUID) -> Optional[InvoiceResponse]:
        invoice = await self.invoice_repo.get_for_user(invoice_id, self.user_id)
        if not invoice:
            return None
        return InvoiceResponse.model_validate(invoice)

    async def list_invoices(
        self,
        skip: int = 0,
        limit: int = 100,
        status: Optional[str] = None,
    ) -> Tuple[List[InvoiceResponse], int]:
        """List invoices by issue date, latest first."""
        statuses = parse_status_list(InvoiceStatus, status)
        invoices = await self.invoice_repo.list_by_statuses(
            self.user_id, statuses, skip=skip, limit=limit
        )
        total = await self.invoice_repo.count_by_statuses(self.user_id, statuses)
        return [InvoiceResponse.model_validate(invoice) for invoice in invoices], total

    async def update_invoice(
        self,
        invoice_id: UUID,
        invoice_data: InvoiceUpdate,
    ) -> Optional[InvoiceResponse]:
        """
        Update an invoice. New line items replace the old set and totals are
        recomputed; a change to paid settles the invoice.
        """
        invoice = await self.invoice_repo.get_for_user(invoice_id, self.user_id)
        if not invoice:
            return None

        update_dict = invoice_data.model_dump(exclude_unset=True, exclude={"line_items", "status"})
        if "client_id" in update_dict:
            if update_dict["client_id"] is None:
                raise ValueError("Invoice must have a client")
            await self._require_client(update_dict["client_id"])
        for key in ("apply_gst", "amount_paid"):
            if key in update_dict and update_dict[key] is None:
                update_dict.pop(key)

        if invoice_data.line_items is not None:
            rows = build_line_items(invoice_data.line_items)
            await self.invoice_repo.replace_line_items(invoice, rows)
        else:
            rows = build_line_items(invoice.line_items)
        apply_gst = update_dict.get("apply_gst", invoice.apply_gst)
        update_dict.update(totals_for(rows, apply_gst))
        if "amount_paid" in update_dict:
            update_dict["amount_paid"] = to_cents(update_dict["amount_paid"])

        await self.invoice_repo.update_instance(invoice, **update_dict)
        if invoice_data.status is not None:
            await self._apply_status(invoice, invoice_data.status)
        elif (
            "amount_paid" in update_dict
            and update_dict["amount_paid"] >= to_cents(invoice.total)
            and invoice.status not in (InvoiceStatus.PAID, InvoiceStatus.CANCELLED)
        ):
            await self._apply_status(invoice, InvoiceStatus.PAID)
        await self.session.commit()
        return await self.get_invoice(invoice_id)

    async def delete_invoice(self, invoice_id: UUID) -> bool:
        invoice = await self.invoice_repo.get_for_user(invoice_id, self.user_id)
        if not invoice:
            return False
        await self.invoice_repo.delete_instance(invoice)
        await self.session.commit()
        return True

    async def update_status(
        self,
        invoice_id: UUID,
        new_status: InvoiceStatus,
    ) -> Optional[InvoiceResponse]:
        """
        Move an invoice to a new status.

        Marking it paid records the full amount and marks the linked quote
        paid in the same commit.
        """
        invoice = await self.invoice_repo.get_for_user(invoice_id, self.user_id)
        if not invoice:
            return None
        await self._apply_status(invoice, new_status)
        await self.session.commit()
        return await self.get_invoice(invoice_id)

    async def record_payment(
        self,
        invoice_id: UUID,
        payment_data: PaymentCreate,
    ) -> Optional[InvoiceResponse]:
        """
        Add a payment to the invoice. Paying the full total marks it paid.

        Raises:
            ValueError: If the invoice is cancelled
        """
        invoice = await self.invoice_repo.get_for_user(invoice_id, self.user_id)
        if not invoice:
            return None
        if invoice.status == InvoiceStatus.CANCELLED:
            raise ValueError("Cannot record a payment on a cancelled invoice")

        amount_paid = to_cents(invoice.amount_paid) + to_cents(payment_data.amount)
        await self.invoice_repo.update_instance(invoice, amount_paid=amount_paid)
        logger.info(f"Recorded payment of {to_cents(payment_data.amount)} on invoice {invoice_id}")

        if amount_paid >= to_cents(invoice.total) and invoice.status != InvoiceStatus.PAID:
            await self._apply_status(invoice, InvoiceStatus.PAID)
        await self.session.commit()
        return await self.get_invoice(invoice_id)

    async def _apply_status(self, invoice: Invoice, new_status: InvoiceStatus) -> None:
        previous = status_value(invoice.status)
        await self.invoice_repo.update_instance(invoice, status=new_status)
        logger.info(f"Invoice {invoice.id} status {previous} -> {new_status.value}")
        if new_status == InvoiceStatus.PAID:
            await self._settle(invoice)

    async def _settle(self, invoice: Invoice) -> None:
        """Bring amount_paid up to the total and mark the source quote paid."""
        total = to_cents(invoice.total)
        if to_cents(invoice.amount_paid) < total:
            await self.invoice_repo.update_instance(invoice, amount_paid=total)

        if invoice.quote_id is None:
            return
        quote = await self.quote_repo.get_for_user(invoice.quote_id, self.user_id)
        if quote and quote.status != QuoteStatus.PAID:
            await self.quote_repo.update_instance(quote, status=QuoteStatus.PAID)
            logger.info(f"Quote {quote.id} marked paid by invoice {invoice.id}")
