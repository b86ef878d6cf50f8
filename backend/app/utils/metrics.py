"""
Dashboard aggregations over invoice, job and quote rows.
"""

from collections import Counter
from decimal import Decimal
from typing import Any, Dict, Iterable

from app.utils.status import status_value
from app.utils.totals import ZERO, to_cents


def invoice_money(invoices: Iterable[Any]) -> Dict[str, Decimal]:
    """
    Money received and owed.

    Paid invoices count amount_paid when recorded, else their total. Sent and
    overdue invoices owe total minus amount_paid.
    """
    total_paid = ZERO
    owing_sent = ZERO
    owing_overdue = ZERO

    for invoice in invoices:
        status = status_value(invoice.status)
        total = to_cents(invoice.total)
        paid = to_cents(invoice.amount_paid)
        if status == "paid":
            total_paid += paid if paid > 0 else total
        elif status == "sent":
            owing_sent += total - paid
        elif status == "overdue":
            owing_overdue += total - paid

    return {
        "total_paid": total_paid,
        "money_owing": owing_sent + owing_overdue,
        "money_overdue": owing_overdue,
    }


def count_by_status(rows: Iterable[Any]) -> Dict[str, int]:
    return dict(Counter(status_value(row.status) for row in rows))


def job_pipeline(jobs: Iterable[Any]) -> Dict[str, int]:
    counts = count_by_status(jobs)
    return {
        "jobs_pending": counts.get("pending", 0),
        "jobs_active": counts.get("active", 0),
        "jobs_completed": counts.get("completed", 0),
        "total_jobs": sum(counts.values()),
    }
