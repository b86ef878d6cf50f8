"""
Dashboard aggregation and status parsing tests.
"""

from decimal import Decimal
from types import SimpleNamespace

from app.models.quote import QuoteStatus
from app.models.job import JobStatus
from app.utils.metrics import count_by_status, invoice_money, job_pipeline
from app.utils.status import normalize_status, parse_status_list, status_value


def _invoice(status, total, amount_paid=0):
    return SimpleNamespace(status=status, total=Decimal(total), amount_paid=Decimal(amount_paid))


def test_invoice_money():
    invoices = [
        _invoice("paid", "110.00"),              # nothing recorded, counts the total
        _invoice("paid", "200.00", "150.00"),    # recorded amount wins
        _invoice("sent", "55.00", "5.00"),
        _invoice("overdue", "30.00"),
        _invoice("draft", "999.00"),
        _invoice("cancelled", "999.00"),
    ]

    money = invoice_money(invoices)

    assert money["total_paid"] == Decimal("260.00")
    assert money["money_owing"] == Decimal("80.00")
    assert money["money_overdue"] == Decimal("30.00")


def test_invoice_money_status_is_case_insensitive():
    money = invoice_money([_invoice("PAID", "10"), _invoice(" Sent ", "20")])

    assert money["total_paid"] == Decimal("10.00")
    assert money["money_owing"] == Decimal("20.00")


def test_job_pipeline_counts():
    jobs = [
        SimpleNamespace(status=JobStatus.PENDING),
        SimpleNamespace(status="Pending"),
        SimpleNamespace(status=JobStatus.ACTIVE),
        SimpleNamespace(status=JobStatus.COMPLETED),
        SimpleNamespace(status=JobStatus.CANCELLED),
    ]

    assert job_pipeline(jobs) == {
        "jobs_pending": 2,
        "jobs_active": 1,
        "jobs_completed": 1,
        "total_jobs": 5,
    }


def test_count_by_status():
    rows = [SimpleNamespace(status=QuoteStatus.DRAFT), SimpleNamespace(status=QuoteStatus.DRAFT),
            SimpleNamespace(status=QuoteStatus.SENT)]

    assert count_by_status(rows) == {"draft": 2, "sent": 1}


def test_status_helpers():
    assert normalize_status("  ACCEPTED ") == "accepted"
    assert normalize_status(QuoteStatus.SENT) is QuoteStatus.SENT
    assert status_value(None) == ""
    assert status_value(QuoteStatus.PAID) == "paid"


def test_parse_status_list():
    assert parse_status_list(QuoteStatus, None) is None
    assert parse_status_list(QuoteStatus, " ") is None
    assert parse_status_list(QuoteStatus, "Sent, accepted") == [QuoteStatus.SENT, QuoteStatus.ACCEPTED]
    assert parse_status_list(QuoteStatus, "bogus") == []
