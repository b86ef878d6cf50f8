"""
Money arithmetic for quotes and invoices.

All amounts are Decimal, rounded half-up to cents. Line items may be ORM rows,
pydantic models or plain dicts; quantity and price fall back to zero when
missing or unparseable.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Iterable, Optional

from app.core.config import settings

CENT = Decimal("0.01")
ZERO = Decimal("0.00")

_QUANTITY_KEYS = ("quantity", "qty")
_PRICE_KEYS = ("unit_price", "rate", "unitPrice")


@dataclass(frozen=True)
class Totals:
    subtotal: Decimal
    gst: Decimal
    total: Decimal


def to_decimal(value: Any) -> Decimal:
    """Coerce a number-ish value to Decimal, treating blanks and garbage as zero."""
    if value is None or value == "":
        return Decimal(0)
    if isinstance(value, Decimal):
        return value if value.is_finite() else Decimal(0)
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return Decimal(0)
    return result if result.is_finite() else Decimal(0)


def to_cents(value: Any) -> Decimal:
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def _field(item: Any, keys: tuple) -> Any:
    for key in keys:
        if isinstance(item, dict):
            if item.get(key) is not None:
                return item[key]
        elif getattr(item, key, None) is not None:
            return getattr(item, key)
    return None


def line_total(quantity: Any, unit_price: Any) -> Decimal:
    return to_cents(to_decimal(quantity) * to_decimal(unit_price))


def compute_totals(
    items: Iterable[Any],
    apply_gst: bool = True,
    gst_rate: Optional[Decimal] = None,
) -> Totals:
    """
    Sum line items and add GST.

    Args:
        items: Line items exposing quantity/qty and unit_price/rate
        apply_gst: When False, GST is zero
        gst_rate: Override for settings.GST_RATE

    Returns:
        Totals(subtotal, gst, total)
    """
    rate = settings.GST_RATE if gst_rate is None else to_decimal(gst_rate)
    subtotal = sum(
        (line_total(_field(item, _QUANTITY_KEYS), _field(item, _PRICE_KEYS)) for item in items),
        ZERO,
    )
    gst = to_cents(subtotal * rate) if apply_gst else ZERO
    return Totals(subtotal=to_cents(subtotal), gst=gst, total=to_cents(subtotal + gst))


def balance_due(total: Any, amount_paid: Any) -> Decimal:
    """Outstanding amount, never negative."""
    remaining = to_cents(total) - to_cents(amount_paid)
    return remaining if remaining > 0 else ZERO
