import uuid
from datetime import timedelta

from conftest import SEED_EMAIL, SEED_PASSWORD
from chirpy.config import settings
from chirpy.utils.security import make_jwt


def test_create_user(client):
    response = client.post("/api/users", json={"email": "test@example.com", "password": "04234"})
    assert response.status_code == 201, response.text
    data = response.json()
    assert data["email"] == "test@example.com"
    assert data["is_chirpy_red"] is False
    assert uuid.UUID(data["id"])
    assert "created_at" in data and "updated_at" in data
    assert "password" not in data and "hashed_password" not in data


def test_create_user_duplicate_email(client):
    response = client.post("/api/users", json={"email": SEED_EMAIL, "password": "x"})
    assert response.status_code == 409
    assert response.json() == {"error": "Email already registered"}


def test_create_user_validation(client):
    response = client.post("/api/users", json={"email": "not-an-email", "password": "x"})
    assert response.status_code == 400
    assert "error" in response.json()

    response = client.post("/api/users", json={"email": "new@example.com", "password": ""})
    assert response.status_code == 400

    # special-use domains such as .test are refused by the email validator
    response = client.post("/api/users", json={"email": "user@host.test", "password": "x"})
    assert response.status_code == 400

    response = client.post("/api/users", content="{not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400


def test_login(client):
    response = client.post("/api/login", json={"email": SEED_EMAIL, "password": SEED_PASSWORD})
    assert response.status_code == 200, response.text
    data = response.json()
    assert data["email"] == SEED_EMAIL
    assert data["token"]
    assert len(data["refresh_token"]) == 64
    assert "hashed_password" not in data


def test_login_wrong_password(client):
    response = client.post("/api/login", json={"email": SEED_EMAIL, "password": "nope"})
    assert response.status_code == 401
    assert response.json() == {"error": "Incorrect email or password"}


def test_login_unknown_email(client):
    response = client.post("/api/login", json={"email": "ghost@example.com", "password": "nope"})
    assert response.status_code == 404


def test_update_user(client, auth_headers):
    response = client.put(
        "/api/users",
        json={"email": "updated@example.com", "password": "new-password"},
        headers=auth_headers,
    )
    assert response.status_code == 200, response.text
    assert response.json()["email"] == "updated@example.com"

    old = client.post("/api/login", json={"email": SEED_EMAIL, "password": SEED_PASSWORD})
    assert old.status_code == 404
    new = client.post("/api/login", json={"email": "updated@example.com", "password": "new-password"})
    assert new.status_code == 200


def test_update_user_requires_token(client):
    body = {"email": "updated@example.com", "password": "new-password"}
    assert client.put("/api/users", json=body).status_code == 401
    response = client.put("/api/users", json=body, headers={"Authorization": "Bearer garbage"})
    assert response.status_code == 401
    assert "error" in response.json()


def test_update_user_with_expired_token(client, seed_user):
    token = make_jwt(seed_user.id, settings.SECRET_KEY, timedelta(seconds=-5))
    response = client.put(
        "/api/users",
        json={"email": "updated@example.com", "password": "new-password"},
        headers={"Authorization": f"Bearer {token}"},
    )
    assert response.status_code == 401
    assert response.json() == {"error": "Access token has expired"}


def test_update_user_email_taken(client, auth_headers):
    client.post("/api/users", json={"email": "other@example.com", "password": "x"})
    response = client.put(
        "/api/users",
        json={"email": "other@example.com", "password": "x"},
        headers=auth_headers,
    )
    assert response.status_code == 409


# ─── Refresh / revoke ─────────────────────────────────────────────────────────
def test_refresh(client, logged_in_user):
    response = client.post(
        "/api/refresh",
        headers={"Authorization": f"Bearer {logged_in_user['refresh_token']}"},
    )
    assert response.status_code == 200, response.text
    new_token = response.json()["token"]

    # the new access token works and the refresh token was not rotated
    response = client.put(
        "/api/users",
        json={"email": SEED_EMAIL, "password": SEED_PASSWORD},
        headers={"Authorization": f"Bearer {new_token}"},
    )
    assert response.status_code == 200
    again = client.post(
        "/api/refresh",
        headers={"Authorization": f"Bearer {logged_in_user['refresh_token']}"},
    )
    assert again.status_code == 200


def test_refresh_with_access_token_fails(client, logged_in_user):
    response = client.post(
        "/api/refresh",
        headers={"Authorization": f"Bearer {logged_in_user['token']}"},
    )
    assert response.status_code == 401
    assert response.json() == {"error": "Refresh token does not exist"}


def test_refresh_without_header(client):
    response = client.post("/api/refresh")
    assert response.status_code == 401
    assert response.json() == {"error": "Authorization header not found"}


def test_revoke(client, logged_in_user):
    headers = {"Authorization": f"Bearer {logged_in_user['refresh_token']}"}
    response = client.post("/api/revoke", headers=headers)
    assert response.status_code == 204
    assert response.content == b""

    response = client.post("/api/refresh", headers=headers)
    assert response.status_code == 401
    assert response.json() == {"error": "Refresh token revoked"}

    # revoking again is fine
    assert client.post("/api/revoke", headers=headers).status_code == 204


def test_revoke_unknown_token(client):
    response = client.post("/api/revoke", headers={"Authorization": "Bearer deadbeef"})
    assert response.status_code == 401
