"""
Job endpoint tests: CRUD, board, notes and attachments.
"""

import pytest


@pytest.fixture
async def job_record(test_client, auth_headers, client_record):
    response = await test_client.post(
        "/api/v1/jobs",
        json={
            "title": "  Fix leaking tap  ",
            "client_id": client_record["id"],
            "address": "12 Gum Tree Rd",
            "due_date": "2030-01-31",
        },
        headers=auth_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_create_job_defaults_to_pending(job_record, client_record):
    assert job_record["title"] == "Fix leaking tap"
    assert job_record["status"] == "pending"
    assert job_record["client"]["id"] == client_record["id"]
    assert job_record["quote"] is None
    assert job_record["due_date"] == "2030-01-31"


@pytest.mark.asyncio
async def test_create_job_without_client(test_client, auth_headers):
    response = await test_client.post("/api/v1/jobs", json={"title": "Shop maintenance"}, headers=auth_headers)

    assert response.status_code == 201
    assert response.json()["client_id"] is None


@pytest.mark.asyncio
async def test_create_job_requires_title(test_client, auth_headers):
    response = await test_client.post("/api/v1/jobs", json={"title": "  "}, headers=auth_headers)

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_create_job_for_foreign_client_is_refused(test_client, other_headers, client_record):
    response = await test_client.post(
        "/api/v1/jobs",
        json={"title": "Not mine", "client_id": client_record["id"]},
        headers=other_headers,
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_and_status(test_client, auth_headers, job_record):
    response = await test_client.put(
        f"/api/v1/jobs/{job_record['id']}",
        json={"address": "14 Gum Tree Rd"},
        headers=auth_headers,
    )
    assert response.status_code == 200
    assert response.json()["address"] == "14 Gum Tree Rd"

    response = await test_client.patch(
        f"/api/v1/jobs/{job_record['id']}/status",
        json={"status": "ACTIVE"},
        headers=auth_headers,
    )
    assert response.status_code == 200
    assert response.json()["status"] == "active"


@pytest.mark.asyncio
async def test_update_trims_title_and_blanks_address(test_client, auth_headers, job_record):
    url = f"/api/v1/jobs/{job_record['id']}"

    response = await test_client.put(url, json={"title": "  Padded  ", "address": "   "}, headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["title"] == "Padded"
    assert response.json()["address"] is None

    response = await test_client.put(url, json={"title": "   "}, headers=auth_headers)
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_jobs_by_status(test_client, auth_headers, job_record):
    await test_client.post(
        "/api/v1/jobs", json={"title": "Done already", "status": "completed"}, headers=auth_headers
    )

    pending = await test_client.get("/api/v1/jobs", params={"status": "pending"}, headers=auth_headers)
    everything = await test_client.get("/api/v1/jobs", headers=auth_headers)

    assert [job["id"] for job in pending.json()["items"]] == [job_record["id"]]
    assert pending.json()["total"] == 1
    assert everything.json()["total"] == 2

    paged = await test_client.get(
        "/api/v1/jobs", params={"status": "pending,completed", "limit": 1}, headers=auth_headers
    )
    assert len(paged.json()["items"]) == 1
    assert paged.json()["total"] == 2


@pytest.mark.asyncio
async def test_board_groups_by_status(test_client, auth_headers, job_record):
    for title, status in (("Wiring", "active"), ("Fence", "completed"), ("Shed", "cancelled")):
        await test_client.post("/api/v1/jobs", json={"title": title, "status": status}, headers=auth_headers)

    response = await test_client.get("/api/v1/jobs/board", headers=auth_headers)

    assert response.status_code == 200
    board = response.json()
    assert [job["title"] for job in board["pending"]] == ["Fix leaking tap"]
    assert [job["title"] for job in board["active"]] == ["Wiring"]
    assert [job["title"] for job in board["completed"]] == ["Fence"]
    assert [job["title"] for job in board["cancelled"]] == ["Shed"]


@pytest.mark.asyncio
async def test_notes_lifecycle(test_client, auth_headers, job_record):
    base = f"/api/v1/jobs/{job_record['id']}/notes"

    created = await test_client.post(base, json={"content": "  Arrived on site  "}, headers=auth_headers)
    assert created.status_code == 201
    note = created.json()
    assert note["content"] == "Arrived on site"
    assert note["type"] == "note"

    progress = await test_client.post(
        base, json={"content": "Half done", "type": "Progress"}, headers=auth_headers
    )
    assert progress.json()["type"] == "progress"

    edited = await test_client.put(
        f"{base}/{note['id']}", json={"content": "Arrived at 8am"}, headers=auth_headers
    )
    assert edited.json()["content"] == "Arrived at 8am"

    listed = await test_client.get(base, headers=auth_headers)
    assert {n["content"] for n in listed.json()} == {"Arrived at 8am", "Half done"}

    deleted = await test_client.delete(f"{base}/{note['id']}", headers=auth_headers)
    assert deleted.status_code == 204
    listed = await test_client.get(base, headers=auth_headers)
    assert [n["content"] for n in listed.json()] == ["Half done"]


@pytest.mark.asyncio
async def test_blank_note_is_rejected(test_client, auth_headers, job_record):
    response = await test_client.post(
        f"/api/v1/jobs/{job_record['id']}/notes", json={"content": "   "}, headers=auth_headers
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_attachments_grouped(test_client, auth_headers, job_record):
    base = f"/api/v1/jobs/{job_record['id']}/attachments"
    photo = await test_client.post(
        base,
        json={
            "type": "photo",
            "file_name": "before.jpg",
            "file_url": "https://files.example.com/before.jpg",
            "mime_type": "image/jpeg",
            "size_bytes": 123456,
        },
        headers=auth_headers,
    )
    assert photo.status_code == 201
    await test_client.post(
        base,
        json={"type": "document", "file_name": "coc.pdf", "file_url": "https://files.example.com/coc.pdf"},
        headers=auth_headers,
    )

    listed = await test_client.get(base, headers=auth_headers)
    body = listed.json()
    assert [a["file_name"] for a in body["photos"]] == ["before.jpg"]
    assert [a["file_name"] for a in body["documents"]] == ["coc.pdf"]

    deleted = await test_client.delete(f"{base}/{photo.json()['id']}", headers=auth_headers)
    assert deleted.status_code == 204
    listed = await test_client.get(base, headers=auth_headers)
    assert listed.json()["photos"] == []


@pytest.mark.asyncio
async def test_delete_job_removes_notes(test_client, auth_headers, job_record):
    await test_client.post(
        f"/api/v1/jobs/{job_record['id']}/notes", json={"content": "Gone soon"}, headers=auth_headers
    )

    response = await test_client.delete(f"/api/v1/jobs/{job_record['id']}", headers=auth_headers)
    assert response.status_code == 204

    response = await test_client.get(f"/api/v1/jobs/{job_record['id']}/notes", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Job not found"


@pytest.mark.asyncio
async def test_job_of_other_user_is_not_found(test_client, other_headers, job_record):
    response = await test_client.get(f"/api/v1/jobs/{job_record['id']}", headers=other_headers)

    assert response.status_code == 404
