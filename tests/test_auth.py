from jose import jwt

from conftest import register
from medassist.config import ALGO, AUTH_SECRET, ISSUER
from medassist.db import SessionLocal
from medassist.models import User, UserProfile
from medassist.passwords import hash_password
from medassist.routers import auth as auth_router


def test_register_creates_user_and_empty_profile(client, db):
    body = register(client, email="New@Example.com")
    assert body["user"]["email"] == "new@example.com"
    assert body["user"]["fullName"] == "Pat Doe"
    assert body["user"]["role"] == "patient"
    assert body["token"] and body["refresh_token"]

    user = db.query(User).filter(User.email == "new@example.com").one()
    assert user.password_hash != "s3cretpass"
    profile = db.query(UserProfile).filter(UserProfile.user_id == user.id).one()
    assert profile.medical_conditions == [] and profile.allergies == []


def test_register_sets_http_only_cookie(client):
    resp = client.post("/api/auth/register", json={"email": "c@example.com", "password": "s3cretpass", "fullName": "Cy"})
    cookie = resp.headers["set-cookie"]
    assert cookie.startswith("auth-token=")
    assert "HttpOnly" in cookie
    assert "samesite=strict" in cookie.lower()


def test_register_duplicate_is_409(client):
    register(client)
    resp = client.post("/api/auth/register", json={"email": "pat@example.com", "password": "otherpass", "fullName": "Pat"})
    assert resp.status_code == 409
    assert resp.json()["detail"] == "User already exists"


def test_register_race_on_unique_email_is_409(client, monkeypatch):
    def hash_after_concurrent_insert(plain):
        # another request registers the same email between the lookup and our insert
        other = SessionLocal()
        try:
            other.add(User(email="pat@example.com", password_hash="x", full_name="Other", role="patient"))
            other.commit()
        finally:
            other.close()
        return hash_password(plain)

    monkeypatch.setattr(auth_router, "hash_password", hash_after_concurrent_insert)
    resp = client.post("/api/auth/register", json={"email": "pat@example.com", "password": "s3cretpass", "fullName": "Pat"})
    assert resp.status_code == 409
    assert resp.json()["detail"] == "User already exists"


def test_register_validation(client):
    resp = client.post("/api/auth/register", json={"email": "not-an-email", "password": "short", "fullName": "P"})
    assert resp.status_code == 422


def test_login(client):
    register(client)
    resp = client.post("/api/auth/login", json={"email": "pat@example.com", "password": "s3cretpass"})
    assert resp.status_code == 200
    assert resp.json()["user"]["email"] == "pat@example.com"


def test_login_wrong_password(client):
    register(client)
    resp = client.post("/api/auth/login", json={"email": "pat@example.com", "password": "wrongpass"})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Invalid credentials"


def test_login_unknown_email(client):
    resp = client.post("/api/auth/login", json={"email": "ghost@example.com", "password": "whatever"})
    assert resp.status_code == 401


def test_access_token_claims(client):
    token = register(client)["token"]
    claims = jwt.decode(token, AUTH_SECRET, algorithms=[ALGO], issuer=ISSUER)
    assert claims["scope"] == "access"
    assert claims["email"] == "pat@example.com"
    assert claims["role"] == "patient"


def test_me_with_bearer(client, auth):
    resp = client.get("/api/auth/me", headers=auth)
    assert resp.status_code == 200
    assert resp.json()["fullName"] == "Pat Doe"


def test_me_with_cookie(client):
    token = register(client)["token"]
    client.cookies.clear()
    client.cookies.set("auth-token", token)
    assert client.get("/api/auth/me").status_code == 200


def test_me_requires_identity(client):
    resp = client.get("/api/auth/me")
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Unauthorized"


def test_garbage_and_refresh_tokens_rejected_for_access(client):
    body = register(client)
    client.cookies.clear()
    assert client.get("/api/auth/me", headers={"Authorization": "Bearer nope"}).status_code == 401
    refresh = {"Authorization": f"Bearer {body['refresh_token']}"}
    assert client.get("/api/auth/me", headers=refresh).status_code == 401


def test_refresh_issues_new_pair(client):
    body = register(client)
    client.cookies.clear()
    resp = client.post("/api/auth/token/refresh", headers={"Authorization": f"Bearer {body['refresh_token']}"})
    assert resp.status_code == 200
    pair = resp.json()
    assert client.get("/api/auth/me", headers={"Authorization": f"Bearer {pair['access_token']}"}).status_code == 200


def test_refresh_rejects_access_token(client):
    body = register(client)
    resp = client.post("/api/auth/token/refresh", headers={"Authorization": f"Bearer {body['token']}"})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Refresh token required"


def test_token_for_deleted_user_is_rejected(client, db, auth):
    db.query(UserProfile).delete()
    db.query(User).delete()
    db.commit()
    assert client.get("/api/auth/me", headers=auth).status_code == 401


def test_logout_clears_cookie(client):
    register(client)
    resp = client.post("/api/auth/logout")
    assert resp.status_code == 200
    assert 'auth-token=""' in resp.headers["set-cookie"] or "Max-Age=0" in resp.headers["set-cookie"]
