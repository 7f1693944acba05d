from datetime import timedelta

from jose import jwt

from moodjournal.utils.jwt_utils import ALGORITHM, SECRET_KEY, create_user_token


def test_signup_returns_token_and_user(client):
    response = client.post(
        "/api/auth/signup",
        json={"username": "erin_k", "email": "Erin@Example.com", "password": "password123"},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["token"]
    assert body["user"]["username"] == "erin_k"
    assert body["user"]["email"] == "erin@example.com"
    assert "hashed_password" not in body["user"]


def test_register_alias(client):
    response = client.post(
        "/api/auth/register",
        json={"username": "frank", "email": "frank@example.com", "password": "password123"},
    )
    assert response.status_code == 201


def test_duplicate_signup_rejected(client, auth_headers):
    response = client.post(
        "/api/auth/signup",
        json={"username": "alice2", "email": "alice@example.com", "password": "password123"},
    )
    assert response.status_code == 400


def test_signup_validation(client):
    bad_email = client.post(
        "/api/auth/signup",
        json={"username": "gina", "email": "not-an-email", "password": "password123"},
    )
    assert bad_email.status_code == 400

    malformed_email = client.post(
        "/api/auth/signup",
        json={"username": "gina", "email": "a@.", "password": "password123"},
    )
    assert malformed_email.status_code == 400
    assert malformed_email.json()["errors"][0]["field"] == "email"

    short_password = client.post(
        "/api/auth/signup",
        json={"username": "gina", "email": "gina@example.com", "password": "123"},
    )
    assert short_password.status_code == 400


def test_login_and_me(client, auth_headers):
    response = client.post("/api/auth/login", json={"email": "alice@example.com", "password": "secret123"})
    assert response.status_code == 200
    token = response.json()["token"]

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["user"]["username"] == "alice"


def test_login_with_wrong_password(client, auth_headers):
    response = client.post("/api/auth/login", json={"email": "alice@example.com", "password": "wrong-pass"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid credentials"


def test_token_for_missing_user_is_rejected(client):
    token = create_user_token(9999)
    assert client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"}).status_code == 401


def test_health_and_root(client):
    health = client.get("/api/health").json()
    assert health["status"] == "ok"
    assert health["db_ok"] is True
    assert "MoodJournal" in client.get("/").json()["message"]


def test_login_email_is_case_insensitive(client, auth_headers):
    response = client.post("/api/auth/login", json={"email": "ALICE@example.com", "password": "secret123"})
    assert response.status_code == 200


def test_expired_token_is_rejected(client, auth_headers):
    login = client.post("/api/auth/login", json={"email": "alice@example.com", "password": "secret123"})
    user_id = login.json()["user"]["id"]

    token = create_user_token(user_id, expires_delta=timedelta(seconds=-10))
    assert client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"}).status_code == 401


def test_token_with_non_numeric_subject_is_rejected(client):
    token = jwt.encode({"sub": "alice"}, SECRET_KEY, algorithm=ALGORITHM)
    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid or expired token"
