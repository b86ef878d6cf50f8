"""
Quote endpoint tests, including the quote -> job -> invoice pipeline.
"""

import uuid
from datetime import timedelta
from decimal import Decimal

import pytest
from sqlalchemy import update

from app.models.quote import Quote
from app.utils.dates import days_from_today, today, utcnow


@pytest.mark.asyncio
async def test_create_quote_computes_totals(quote_record):
    assert quote_record["status"] == "draft"
    assert Decimal(quote_record["subtotal"]) == Decimal("25.00")
    assert Decimal(quote_record["gst"]) == Decimal("2.50")
    assert Decimal(quote_record["total"]) == Decimal("27.50")
    assert [item["description"] for item in quote_record["line_items"]] == ["Labour", "Fittings"]
    assert [item["row_order"] for item in quote_record["line_items"]] == [0, 1]
    assert quote_record["client"]["name"] == "Jane Homeowner"


@pytest.mark.asyncio
async def test_create_quote_without_gst(test_client, auth_headers, client_record):
    response = await test_client.post(
        "/api/v1/quotes",
        json={
            "client_id": client_record["id"],
            "apply_gst": False,
            "line_items": [{"description": "Callout", "quantity": 1, "unit_price": "99.00"}],
        },
        headers=auth_headers,
    )

    assert response.status_code == 201
    assert Decimal(response.json()["gst"]) == Decimal("0")
    assert Decimal(response.json()["total"]) == Decimal("99.00")


@pytest.mark.asyncio
async def test_create_quote_for_foreign_client_is_refused(test_client, other_headers, client_record):
    response = await test_client.post(
        "/api/v1/quotes",
        json={"client_id": client_record["id"], "title": "Sneaky"},
        headers=other_headers,
    )

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Client not found"


@pytest.mark.asyncio
async def test_negative_quantity_is_rejected(test_client, auth_headers, client_record):
    response = await test_client.post(
        "/api/v1/quotes",
        json={
            "client_id": client_record["id"],
            "line_items": [{"description": "Labour", "quantity": -1, "unit_price": 10}],
        },
        headers=auth_headers,
    )

    assert response.status_code == 422
    assert response.json()["error"]["details"][0]["ctx"]["ge"] == 0


@pytest.mark.asyncio
async def test_update_replaces_line_items_and_recomputes(test_client, auth_headers, quote_record):
    response = await test_client.put(
        f"/api/v1/quotes/{quote_record['id']}",
        json={
            "title": "Revised",
            "line_items": [{"description": "Labour", "quantity": 4, "unit_price": 10}],
        },
        headers=auth_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Revised"
    assert len(body["line_items"]) == 1
    assert Decimal(body["subtotal"]) == Decimal("40.00")
    assert Decimal(body["total"]) == Decimal("44.00")


@pytest.mark.asyncio
async def test_toggling_gst_recomputes_totals(test_client, auth_headers, quote_record):
    response = await test_client.put(
        f"/api/v1/quotes/{quote_record['id']}",
        json={"apply_gst": False},
        headers=auth_headers,
    )

    assert Decimal(response.json()["total"]) == Decimal("25.00")


@pytest.mark.asyncio
async def test_accepting_quote_creates_one_job(test_client, auth_headers, quote_record):
    url = f"/api/v1/quotes/{quote_record['id']}/status"

    first = await test_client.patch(url, json={"status": "Accepted"}, headers=auth_headers)
    assert first.status_code == 200
    assert first.json()["quote"]["status"] == "accepted"
    assert first.json()["job_created"] is True
    job_id = first.json()["job_id"]

    second = await test_client.patch(url, json={"status": "accepted"}, headers=auth_headers)
    assert second.json()["job_created"] is False
    assert second.json()["job_id"] == job_id

    jobs = await test_client.get("/api/v1/jobs", headers=auth_headers)
    assert jobs.json()["total"] == 1
    job = jobs.json()["items"][0]
    assert job["status"] == "pending"
    assert job["quote_id"] == quote_record["id"]
    assert job["client_id"] == quote_record["client_id"]
    assert job["title"] == "Replace hot water system"


@pytest.mark.asyncio
async def test_accepted_job_title_falls_back_to_client_name(test_client, auth_headers, client_record):
    created = await test_client.post(
        "/api/v1/quotes",
        json={"client_id": client_record["id"]},
        headers=auth_headers,
    )
    quote_id = created.json()["id"]

    await test_client.patch(
        f"/api/v1/quotes/{quote_id}/status", json={"status": "accepted"}, headers=auth_headers
    )

    jobs = await test_client.get("/api/v1/jobs", headers=auth_headers)
    assert jobs.json()["items"][0]["title"] == "Job for Jane Homeowner"


@pytest.mark.asyncio
async def test_accepting_via_update_also_creates_job(test_client, auth_headers, quote_record):
    response = await test_client.put(
        f"/api/v1/quotes/{quote_record['id']}",
        json={"status": "accepted"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    jobs = await test_client.get("/api/v1/jobs", headers=auth_headers)
    assert jobs.json()["total"] == 1


@pytest.mark.asyncio
async def test_other_statuses_do_not_create_jobs(test_client, auth_headers, quote_record):
    for status in ("sent", "declined"):
        response = await test_client.patch(
            f"/api/v1/quotes/{quote_record['id']}/status", json={"status": status}, headers=auth_headers
        )
        assert response.json()["job_created"] is False

    jobs = await test_client.get("/api/v1/jobs", headers=auth_headers)
    assert jobs.json()["total"] == 0


@pytest.mark.asyncio
async def test_invalid_status_is_rejected(test_client, auth_headers, quote_record):
    response = await test_client.patch(
        f"/api/v1/quotes/{quote_record['id']}/status", json={"status": "approved"}, headers=auth_headers
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_filters(test_client, auth_headers, client_record, quote_record, session_maker):
    async def make(title, status):
        created = await test_client.post(
            "/api/v1/quotes", json={"client_id": client_record["id"], "title": title}, headers=auth_headers
        )
        quote_id = created.json()["id"]
        await test_client.patch(
            f"/api/v1/quotes/{quote_id}/status", json={"status": status}, headers=auth_headers
        )
        return quote_id

    sent_id = await make("Sent one", "sent")
    accepted_id = await make("Accepted one", "accepted")
    old_accepted_id = await make("Old accepted", "accepted")

    async with session_maker() as session:
        await session.execute(
            update(Quote)
            .where(Quote.id == uuid.UUID(old_accepted_id))
            .values(created_at=utcnow() - timedelta(days=45))
        )
        await session.commit()

    async def ids(params):
        response = await test_client.get("/api/v1/quotes", params=params, headers=auth_headers)
        assert response.status_code == 200
        return {item["id"] for item in response.json()["items"]}

    assert await ids({}) == {quote_record["id"], sent_id, accepted_id, old_accepted_id}
    assert await ids({"status": "DRAFT"}) == {quote_record["id"]}
    assert await ids({"status": "sent,accepted"}) == {sent_id, accepted_id, old_accepted_id}
    assert await ids({"owing": "true"}) == {sent_id, accepted_id, old_accepted_id}
    assert await ids({"overdue": "true"}) == {old_accepted_id}
    assert await ids({"status": "nonsense"}) == set()


@pytest.mark.asyncio
async def test_delete_quote(test_client, auth_headers, quote_record):
    response = await test_client.delete(f"/api/v1/quotes/{quote_record['id']}", headers=auth_headers)
    assert response.status_code == 204

    response = await test_client.get(f"/api/v1/quotes/{quote_record['id']}", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Quote not found"


@pytest.mark.asyncio
async def test_quote_of_other_user_is_not_found(test_client, other_headers, quote_record):
    response = await test_client.get(f"/api/v1/quotes/{quote_record['id']}", headers=other_headers)

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_scan_barcode_appends_line_item(test_client, auth_headers, quote_record):
    await test_client.post(
        "/api/v1/products",
        json={"barcode": "9300000000001", "name": "15mm copper elbow", "unit": "each", "rate": "4.50"},
        headers=auth_headers,
    )

    response = await test_client.post(
        f"/api/v1/quotes/{quote_record['id']}/scan",
        json={"barcode": "9300000000001"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert len(body["line_items"]) == 3
    scanned = body["line_items"][-1]
    assert scanned["description"] == "15mm copper elbow"
    assert Decimal(scanned["quantity"]) == Decimal("1")
    assert Decimal(scanned["unit_price"]) == Decimal("4.50")
    assert Decimal(body["subtotal"]) == Decimal("29.50")
    assert Decimal(body["total"]) == Decimal("32.45")


@pytest.mark.asyncio
async def test_scan_unknown_barcode(test_client, auth_headers, quote_record):
    response = await test_client.post(
        f"/api/v1/quotes/{quote_record['id']}/scan",
        json={"barcode": "000"},
        headers=auth_headers,
    )

    assert response.status_code == 404
    assert response.json()["error"]["message"] == (
        "No product found for barcode 000. Add it under Products, then scan again."
    )


@pytest.mark.asyncio
async def test_create_invoice_from_quote(test_client, auth_headers, quote_record):
    response = await test_client.post(
        f"/api/v1/quotes/{quote_record['id']}/invoice", headers=auth_headers
    )

    assert response.status_code == 201
    invoice = response.json()
    assert invoice["status"] == "sent"
    assert invoice["quote_id"] == quote_record["id"]
    assert invoice["client_id"] == quote_record["client_id"]
    assert invoice["title"] == quote_record["title"]
    assert invoice["issue_date"] == today().isoformat()
    assert invoice["due_date"] == days_from_today(7).isoformat()
    assert Decimal(invoice["total"]) == Decimal("27.50")
    assert Decimal(invoice["balance_due"]) == Decimal("27.50")
    assert [item["description"] for item in invoice["line_items"]] == ["Labour", "Fittings"]
