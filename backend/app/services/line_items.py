"""
Line item preparation shared by quotes and invoices.
"""

from typing import Any, Dict, Iterable, List

from app.utils.totals import Totals, compute_totals, line_total, to_cents


def build_line_items(items: Iterable[Any]) -> List[Dict[str, Any]]:
    """
    Turn submitted or copied line items into row dicts.

    line_total is always recomputed; row_order follows input order.
    """
    rows = []
    for index, item in enumerate(items):
        quantity = to_cents(getattr(item, "quantity", None))
        unit_price = to_cents(getattr(item, "unit_price", None))
        rows.append(
            {
                "description": (getattr(item, "description", None) or "").strip(),
                "quantity": quantity,
                "unit_price": unit_price,
                "line_total": line_total(quantity, unit_price),
                "row_order": index,
            }
        )
    return rows


def totals_for(rows: Iterable[Dict[str, Any]], apply_gst: bool) -> Dict[str, Any]:
    """Subtotal, GST and total columns for a set of line item rows."""
    totals: Totals = compute_totals(rows, apply_gst=apply_gst)
    return {"subtotal": totals.subtotal, "gst": totals.gst, "total": totals.total}
