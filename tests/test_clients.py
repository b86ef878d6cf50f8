"""
Client endpoint tests.
"""

import pytest


@pytest.mark.asyncio
async def test_create_and_get_client(test_client, auth_headers, client_record):
    assert client_record["name"] == "Jane Homeowner"

    response = await test_client.get(f"/api/v1/clients/{client_record['id']}", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["email"] == "jane@example.com"


@pytest.mark.asyncio
async def test_create_client_requires_name(test_client, auth_headers):
    response = await test_client.post("/api/v1/clients", json={"name": "   "}, headers=auth_headers)

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_clients_is_scoped_to_owner(test_client, auth_headers, other_headers, client_record):
    mine = await test_client.get("/api/v1/clients", headers=auth_headers)
    theirs = await test_client.get("/api/v1/clients", headers=other_headers)

    assert mine.json()["total"] == 1
    assert theirs.json() == {"items": [], "total": 0}

    response = await test_client.get(f"/api/v1/clients/{client_record['id']}", headers=other_headers)
    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Client not found"


@pytest.mark.asyncio
async def test_update_client(test_client, auth_headers, client_record):
    response = await test_client.put(
        f"/api/v1/clients/{client_record['id']}",
        json={"phone": "02 9999 9999", "address": "1 Main St"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["phone"] == "02 9999 9999"
    assert body["address"] == "1 Main St"
    assert body["name"] == "Jane Homeowner"


@pytest.mark.asyncio
async def test_delete_unused_client(test_client, auth_headers, client_record):
    response = await test_client.delete(f"/api/v1/clients/{client_record['id']}", headers=auth_headers)
    assert response.status_code == 204

    response = await test_client.get(f"/api/v1/clients/{client_record['id']}", headers=auth_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_client_with_quote_is_refused(test_client, auth_headers, client_record, quote_record):
    response = await test_client.delete(f"/api/v1/clients/{client_record['id']}", headers=auth_headers)

    assert response.status_code == 400
    assert "1 quotes" in response.json()["error"]["message"]


@pytest.mark.asyncio
async def test_client_overview(test_client, auth_headers, client_record, quote_record):
    await test_client.patch(
        f"/api/v1/quotes/{quote_record['id']}/status",
        json={"status": "accepted"},
        headers=auth_headers,
    )

    response = await test_client.get(
        f"/api/v1/clients/{client_record['id']}/overview", headers=auth_headers
    )

    assert response.status_code == 200
    body = response.json()
    assert body["client"]["id"] == client_record["id"]
    assert [q["id"] for q in body["quotes"]] == [quote_record["id"]]
    assert len(body["jobs"]) == 1
    assert body["jobs"][0]["title"] == "Replace hot water system"
