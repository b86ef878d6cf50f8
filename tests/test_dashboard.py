"""
Dashboard endpoint tests.
"""

from decimal import Decimal

import pytest


@pytest.mark.asyncio
async def test_empty_dashboard(test_client, auth_headers):
    response = await test_client.get("/api/v1/dashboard", headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert Decimal(body["total_paid"]) == Decimal("0")
    assert Decimal(body["money_owing"]) == Decimal("0")
    assert body["total_jobs"] == 0
    assert body["currency"] == "AUD"


@pytest.mark.asyncio
async def test_dashboard_summary(test_client, auth_headers, other_headers, client_record, quote_record):
    # Accepted quote -> one pending job
    await test_client.patch(
        f"/api/v1/quotes/{quote_record['id']}/status", json={"status": "accepted"}, headers=auth_headers
    )
    await test_client.post("/api/v1/jobs", json={"title": "Wiring", "status": "active"}, headers=auth_headers)

    # Sent invoice from the quote: 27.50 owing
    await test_client.post(f"/api/v1/quotes/{quote_record['id']}/invoice", headers=auth_headers)

    # Paid invoice: 110.00 received
    paid = await test_client.post(
        "/api/v1/invoices",
        json={
            "client_id": client_record["id"],
            "line_items": [{"description": "Work", "quantity": 1, "unit_price": 100}],
        },
        headers=auth_headers,
    )
    await test_client.patch(
        f"/api/v1/invoices/{paid.json()['id']}/status", json={"status": "paid"}, headers=auth_headers
    )

    # Overdue invoice: 11.00 owing and overdue
    await test_client.post(
        "/api/v1/invoices",
        json={
            "client_id": client_record["id"],
            "status": "overdue",
            "line_items": [{"description": "Callout", "quantity": 1, "unit_price": 10}],
        },
        headers=auth_headers,
    )

    response = await test_client.get("/api/v1/dashboard", headers=auth_headers)
    body = response.json()

    assert Decimal(body["total_paid"]) == Decimal("110.00")
    assert Decimal(body["money_owing"]) == Decimal("38.50")
    assert Decimal(body["money_overdue"]) == Decimal("11.00")
    assert body["jobs_pending"] == 1
    assert body["jobs_active"] == 1
    assert body["jobs_completed"] == 0
    assert body["total_jobs"] == 2
    assert body["quotes_by_status"] == {"accepted": 1}
    assert body["invoices_by_status"] == {"sent": 1, "paid": 1, "overdue": 1}

    theirs = await test_client.get("/api/v1/dashboard", headers=other_headers)
    assert theirs.json()["total_jobs"] == 0
