"""
Invoice endpoint tests: totals, payments and the paid side effect.
"""

from datetime import timedelta
from decimal import Decimal

import pytest

from app.utils.dates import days_from_today, today


@pytest.fixture
async def invoice_record(test_client, auth_headers, client_record):
    response = await test_client.post(
        "/api/v1/invoices",
        json={
            "client_id": client_record["id"],
            "title": "Bathroom reno",
            "line_items": [{"description": "Tiling", "quantity": 10, "unit_price": 10}],
        },
        headers=auth_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_create_invoice_defaults(invoice_record):
    assert invoice_record["status"] == "draft"
    assert invoice_record["issue_date"] == today().isoformat()
    assert invoice_record["due_date"] == days_from_today(7).isoformat()
    assert Decimal(invoice_record["subtotal"]) == Decimal("100.00")
    assert Decimal(invoice_record["gst"]) == Decimal("10.00")
    assert Decimal(invoice_record["total"]) == Decimal("110.00")
    assert Decimal(invoice_record["amount_paid"]) == Decimal("0")
    assert Decimal(invoice_record["balance_due"]) == Decimal("110.00")
    assert invoice_record["is_overdue"] is False


@pytest.mark.asyncio
async def test_create_invoice_requires_client(test_client, auth_headers):
    response = await test_client.post("/api/v1/invoices", json={"title": "No client"}, headers=auth_headers)

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_update_invoice_line_items(test_client, auth_headers, invoice_record):
    response = await test_client.put(
        f"/api/v1/invoices/{invoice_record['id']}",
        json={"line_items": [{"description": "Tiling", "quantity": 5, "unit_price": 10}]},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert Decimal(response.json()["total"]) == Decimal("55.00")


@pytest.mark.asyncio
async def test_partial_then_full_payment(test_client, auth_headers, invoice_record):
    url = f"/api/v1/invoices/{invoice_record['id']}/payments"

    partial = await test_client.post(url, json={"amount": "60.00"}, headers=auth_headers)
    assert partial.status_code == 200
    assert partial.json()["status"] == "draft"
    assert Decimal(partial.json()["balance_due"]) == Decimal("50.00")

    rest = await test_client.post(url, json={"amount": "50.00"}, headers=auth_headers)
    assert rest.json()["status"] == "paid"
    assert Decimal(rest.json()["amount_paid"]) == Decimal("110.00")
    assert Decimal(rest.json()["balance_due"]) == Decimal("0")


@pytest.mark.asyncio
async def test_payment_must_be_positive(test_client, auth_headers, invoice_record):
    response = await test_client.post(
        f"/api/v1/invoices/{invoice_record['id']}/payments", json={"amount": 0}, headers=auth_headers
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_editing_amount_paid_to_total_settles_invoice(test_client, auth_headers, quote_record):
    invoice = await test_client.post(f"/api/v1/quotes/{quote_record['id']}/invoice", headers=auth_headers)
    invoice_id = invoice.json()["id"]
    assert invoice.json()["status"] == "sent"

    response = await test_client.put(
        f"/api/v1/invoices/{invoice_id}", json={"amount_paid": "27.50"}, headers=auth_headers
    )

    assert response.status_code == 200
    assert response.json()["status"] == "paid"
    assert Decimal(response.json()["balance_due"]) == Decimal("0")

    quote = await test_client.get(f"/api/v1/quotes/{quote_record['id']}", headers=auth_headers)
    assert quote.json()["status"] == "paid"


@pytest.mark.asyncio
async def test_editing_partial_amount_paid_keeps_status(test_client, auth_headers, invoice_record):
    response = await test_client.put(
        f"/api/v1/invoices/{invoice_record['id']}", json={"amount_paid": "10.00"}, headers=auth_headers
    )

    assert response.status_code == 200
    assert response.json()["status"] == "draft"
    assert Decimal(response.json()["balance_due"]) == Decimal("100.00")


@pytest.mark.asyncio
async def test_marking_paid_fills_amount_and_pays_quote(test_client, auth_headers, quote_record):
    invoice = await test_client.post(f"/api/v1/quotes/{quote_record['id']}/invoice", headers=auth_headers)
    invoice_id = invoice.json()["id"]

    response = await test_client.patch(
        f"/api/v1/invoices/{invoice_id}/status", json={"status": "PAID"}, headers=auth_headers
    )

    assert response.status_code == 200
    assert response.json()["status"] == "paid"
    assert Decimal(response.json()["amount_paid"]) == Decimal("27.50")

    quote = await test_client.get(f"/api/v1/quotes/{quote_record['id']}", headers=auth_headers)
    assert quote.json()["status"] == "paid"


@pytest.mark.asyncio
async def test_is_overdue(test_client, auth_headers, client_record):
    response = await test_client.post(
        "/api/v1/invoices",
        json={
            "client_id": client_record["id"],
            "status": "sent",
            "issue_date": (today() - timedelta(days=30)).isoformat(),
            "due_date": (today() - timedelta(days=1)).isoformat(),
            "line_items": [{"description": "Work", "quantity": 1, "unit_price": 100}],
        },
        headers=auth_headers,
    )

    assert response.status_code == 201
    assert response.json()["is_overdue"] is True


@pytest.mark.asyncio
async def test_list_invoices_by_status_and_order(test_client, auth_headers, client_record, invoice_record):
    older = await test_client.post(
        "/api/v1/invoices",
        json={
            "client_id": client_record["id"],
            "status": "sent",
            "issue_date": (today() - timedelta(days=10)).isoformat(),
        },
        headers=auth_headers,
    )

    everything = await test_client.get("/api/v1/invoices", headers=auth_headers)
    assert [i["id"] for i in everything.json()["items"]] == [invoice_record["id"], older.json()["id"]]

    sent = await test_client.get("/api/v1/invoices", params={"status": "sent"}, headers=auth_headers)
    assert sent.json()["total"] == 1
    assert sent.json()["items"][0]["id"] == older.json()["id"]


@pytest.mark.asyncio
async def test_delete_invoice(test_client, auth_headers, invoice_record):
    response = await test_client.delete(f"/api/v1/invoices/{invoice_record['id']}", headers=auth_headers)
    assert response.status_code == 204

    response = await test_client.get(f"/api/v1/invoices/{invoice_record['id']}", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Invoice not found"
