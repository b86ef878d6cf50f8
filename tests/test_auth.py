"""
Authentication endpoint tests.
"""

import pytest

from app.core.security import create_access_token, decode_access_token, hash_password, verify_password


def test_password_hashing():
    hashed = hash_password("correct-horse")

    assert hashed != "correct-horse"
    assert verify_password("correct-horse", hashed)
    assert not verify_password("wrong-horse", hashed)


def test_token_round_trip_and_garbage():
    token = create_access_token({"sub": "abc"})

    assert decode_access_token(token)["sub"] == "abc"
    assert decode_access_token("not-a-token") is None


@pytest.mark.asyncio
async def test_signup_returns_token_and_user(test_client, signup):
    body = await signup("New.Tradie@Example.com")

    assert body["token"]["token_type"] == "bearer"
    assert body["token"]["access_token"]
    assert body["user"]["email"] == "new.tradie@example.com"


@pytest.mark.asyncio
async def test_signup_rejects_duplicate_email(test_client, signup):
    await signup("dup@example.com")
    response = await test_client.post(
        "/api/v1/auth/signup",
        json={"email": "DUP@example.com", "password": "another-password"},
    )

    assert response.status_code == 400
    assert "already exists" in response.json()["error"]["message"]


@pytest.mark.asyncio
async def test_signup_rejects_short_password(test_client):
    response = await test_client.post(
        "/api/v1/auth/signup",
        json={"email": "short@example.com", "password": "short"},
    )

    assert response.status_code == 422
    assert response.json()["error"]["message"] == "Validation error"


@pytest.mark.asyncio
async def test_login_and_me(test_client, signup):
    await signup("login@example.com")

    response = await test_client.post(
        "/api/v1/auth/login",
        json={"email": "login@example.com", "password": "correct-horse"},
    )
    assert response.status_code == 200
    token = response.json()["token"]["access_token"]

    me = await test_client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["email"] == "login@example.com"


@pytest.mark.asyncio
async def test_login_rejects_bad_password(test_client, signup):
    await signup("login@example.com")

    response = await test_client.post(
        "/api/v1/auth/login",
        json={"email": "login@example.com", "password": "not-the-password"},
    )

    assert response.status_code == 401
    assert response.json()["error"]["message"] == "Invalid email or password"


@pytest.mark.asyncio
async def test_login_is_rate_limited(test_client):
    statuses = []
    for _ in range(11):
        response = await test_client.post(
            "/api/v1/auth/login",
            json={"email": "nobody@example.com", "password": "whatever-it-is"},
        )
        statuses.append(response.status_code)

    assert statuses[:10] == [401] * 10
    assert statuses[10] == 429


@pytest.mark.asyncio
async def test_refresh_issues_new_token(test_client, auth_headers):
    response = await test_client.post("/api/v1/auth/refresh", headers=auth_headers)

    assert response.status_code == 200
    assert decode_access_token(response.json()["access_token"]) is not None


@pytest.mark.asyncio
async def test_protected_routes_require_token(test_client):
    response = await test_client.get("/api/v1/clients")
    assert response.status_code in (401, 403)

    response = await test_client.get(
        "/api/v1/clients", headers={"Authorization": "Bearer garbage"}
    )
    assert response.status_code == 401
