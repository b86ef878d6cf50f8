"""
Money arithmetic tests.
"""

from decimal import Decimal
from types import SimpleNamespace

from app.utils.totals import balance_due, compute_totals, line_total, to_cents


def test_compute_totals_applies_gst():
    totals = compute_totals(
        [
            {"quantity": 2, "unit_price": 10},
            {"quantity": 1, "unit_price": 5},
        ]
    )

    assert totals.subtotal == Decimal("25.00")
    assert totals.gst == Decimal("2.50")
    assert totals.total == Decimal("27.50")


def test_compute_totals_without_gst():
    totals = compute_totals([{"quantity": 3, "unit_price": "19.99"}], apply_gst=False)

    assert totals.subtotal == Decimal("59.97")
    assert totals.gst == Decimal("0.00")
    assert totals.total == Decimal("59.97")


def test_compute_totals_empty():
    totals = compute_totals([])

    assert totals.subtotal == Decimal("0.00")
    assert totals.total == Decimal("0.00")


def test_missing_and_garbage_values_count_as_zero():
    totals = compute_totals(
        [
            {"quantity": None, "unit_price": 10},
            {"quantity": "abc", "unit_price": 10},
            {"quantity": 2, "unit_price": ""},
            {"description": "no numbers at all"},
            {"qty": 1, "rate": 4},
        ]
    )

    assert totals.subtotal == Decimal("4.00")


def test_accepts_objects_with_attributes():
    items = [SimpleNamespace(quantity=Decimal("1.5"), unit_price=Decimal("80"))]

    assert compute_totals(items).total == Decimal("132.00")


def test_gst_rounds_half_up():
    # 0.05 * 0.10 = 0.005 -> 0.01
    totals = compute_totals([{"quantity": 1, "unit_price": "0.05"}])

    assert totals.gst == Decimal("0.01")
    assert totals.total == Decimal("0.06")


def test_custom_gst_rate():
    totals = compute_totals([{"quantity": 1, "unit_price": 100}], gst_rate=Decimal("0.15"))

    assert totals.gst == Decimal("15.00")


def test_line_total_and_cents():
    assert line_total("2.5", "3.333") == Decimal("8.33")
    assert to_cents("1.005") == Decimal("1.01")


def test_balance_due_never_negative():
    assert balance_due(Decimal("100"), Decimal("40")) == Decimal("60.00")
    assert balance_due(Decimal("100"), Decimal("150")) == Decimal("0.00")
    assert balance_due(Decimal("100"), None) == Decimal("100.00")
