from __future__ import annotations

import datetime as dt

import jwt
from fastapi.testclient import TestClient

from app.core.config import settings
from app.core.db.models import User
from app.core.security.auth import decode_access_token, issue_access_token
from app.modules.auth import service as auth_service
from app.shared.enums import Env, Role
from app.shared.utils import utcnow
from tests.conftest import TEST_PASSWORD, bearer


def test_login_returns_token_and_user(client: TestClient, admin: User):
    r = client.post("/api/auth/login", json={"email": "Admin@Portfolio-Admin.com", "password": TEST_PASSWORD})
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["user"]["email"] == "admin@portfolio-admin.com"
    assert body["user"]["role"] == "ADMIN"
    assert body["user"]["founderId"] is None
    assert "passwordHash" not in body["user"]

    claims = decode_access_token(body["token"])
    assert claims["id"] == str(admin.id)
    assert claims["role"] == "ADMIN"
    assert claims["exp"] - claims["iat"] == settings.access_token_ttl_hours * 3600


def test_login_rejects_wrong_password_and_unknown_email(client: TestClient, admin: User):
    wrong = client.post("/api/auth/login", json={"email": admin.email, "password": "not-the-password"})
    assert wrong.status_code == 401
    assert wrong.json()["message"] == "Invalid credentials"

    unknown = client.post("/api/auth/login", json={"email": "nobody@portfolio-admin.com", "password": TEST_PASSWORD})
    assert unknown.status_code == 401
    assert unknown.json()["message"] == "Invalid credentials"


def test_login_validates_payload(client: TestClient):
    r = client.post("/api/auth/login", json={"email": "not-an-email"})
    assert r.status_code == 400
    body = r.json()
    assert body["message"] == "Invalid input"
    assert {e["field"] for e in body["errors"]} >= {"email", "password"}


def test_register_requires_admin(client: TestClient, acme_headers: dict):
    payload = {"email": "new@acme-example.com", "password": "long-enough-pw"}

    anonymous = client.post("/api/auth/register", json=payload)
    assert anonymous.status_code == 401
    assert anonymous.json()["message"] == "Access token required"

    portfolio = client.post("/api/auth/register", json=payload, headers=acme_headers)
    assert portfolio.status_code == 403
    assert portfolio.json()["message"] == "Insufficient permissions"


def test_register_links_founder_and_rejects_duplicates(client: TestClient, admin_headers: dict, acme: dict):
    payload = {
        "email": "cto@acme-example.com",
        "password": "long-enough-pw",
        "role": "PORTFOLIO_COMPANY",
        "founderId": str(acme["founder_id"]),
    }
    r = client.post("/api/auth/register", json=payload, headers=admin_headers)
    assert r.status_code == 201, r.text
    user = r.json()["user"]
    assert user["role"] == "PORTFOLIO_COMPANY"
    assert user["founderId"] == str(acme["founder_id"])

    login = client.post("/api/auth/login", json={"email": "cto@acme-example.com", "password": "long-enough-pw"})
    assert login.status_code == 200

    dup = client.post("/api/auth/register", json=payload, headers=admin_headers)
    assert dup.status_code == 400
    assert dup.json()["message"] == "User already exists"


def test_register_rejects_unknown_founder(client: TestClient, admin_headers: dict):
    payload = {
        "email": "ghost@acme-example.com",
        "password": "long-enough-pw",
        "founderId": "00000000-0000-0000-0000-000000000001",
    }
    r = client.post("/api/auth/register", json=payload, headers=admin_headers)
    assert r.status_code == 404
    assert r.json()["message"] == "Founder not found"


def test_me_reflects_current_user(client: TestClient, acme_user: User, acme_headers: dict):
    r = client.get("/api/auth/me", headers=acme_headers)
    assert r.status_code == 200
    assert r.json()["id"] == str(acme_user.id)
    assert r.json()["founderId"] == str(acme_user.founder_id)


def test_expired_and_garbled_tokens_are_rejected(client: TestClient, admin: User):
    expired = issue_access_token(admin, now=utcnow() - dt.timedelta(hours=settings.access_token_ttl_hours + 1))
    r = client.get("/api/auth/me", headers={"Authorization": f"Bearer {expired}"})
    assert r.status_code == 401
    assert r.json()["message"] == "Invalid token"

    r = client.get("/api/auth/me", headers={"Authorization": "Bearer not.a.jwt"})
    assert r.status_code == 401
    assert r.json()["message"] == "Invalid token"

    forged = jwt.encode({"id": str(admin.id), "exp": utcnow() + dt.timedelta(hours=1)}, "other-secret", algorithm="HS256")
    r = client.get("/api/auth/me", headers={"Authorization": f"Bearer {forged}"})
    assert r.status_code == 401


def test_missing_token_is_rejected(client: TestClient):
    r = client.get("/api/auth/me")
    assert r.status_code == 401
    assert r.json()["message"] == "Access token required"
    assert r.headers["WWW-Authenticate"] == "Bearer"


def test_token_for_deleted_user_is_rejected(client: TestClient, db_session, make_user):
    user = make_user("temp@acme-example.com", Role.ADMIN)
    headers = bearer(user)
    db_session.delete(user)
    db_session.commit()

    r = client.get("/api/auth/me", headers=headers)
    assert r.status_code == 401


def test_dev_seed_creates_admin_once(client: TestClient):
    first = client.post("/admin/dev/seed", json={"email": "seed@portfolio-admin.com", "password": "seed-password"})
    assert first.status_code == 200, first.text
    assert first.json()["created"] is True
    assert first.json()["role"] == "ADMIN"

    second = client.post("/admin/dev/seed", json={"email": "seed@portfolio-admin.com", "password": "seed-password"})
    assert second.status_code == 200
    assert second.json()["created"] is False
    assert second.json()["user_id"] == first.json()["user_id"]

    login = client.post("/api/auth/login", json={"email": "seed@portfolio-admin.com", "password": "seed-password"})
    assert login.status_code == 200


def test_dev_seed_is_hidden_outside_dev(client: TestClient, monkeypatch):
    monkeypatch.setattr(settings, "env", Env.prod)
    r = client.post("/admin/dev/seed", json={})
    assert r.status_code == 404


def test_register_rejects_password_over_bcrypt_byte_limit(client: TestClient, admin_headers: dict):
    # 20 characters, 80 bytes once UTF-8 encoded.
    payload = {"email": "emoji@acme-example.com", "password": "\U0001F600" * 20}
    r = client.post("/api/auth/register", json=payload, headers=admin_headers)
    assert r.status_code == 400
    body = r.json()
    assert body["message"] == "Invalid input"
    assert [e["field"] for e in body["errors"]] == ["password"]

    # 18 four-byte characters fit exactly.
    ok = client.post(
        "/api/auth/register",
        json={"email": "emoji@acme-example.com", "password": "\U0001F600" * 18},
        headers=admin_headers,
    )
    assert ok.status_code == 201, ok.text


def test_dev_seed_rejects_password_over_bcrypt_byte_limit(client: TestClient):
    r = client.post("/admin/dev/seed", json={"email": "seed@portfolio-admin.com", "password": "é" * 40})
    assert r.status_code == 400
    assert [e["field"] for e in r.json()["errors"]] == ["password"]


def test_login_for_unknown_email_still_verifies_a_hash(client: TestClient, admin: User, monkeypatch):
    burned: list[str] = []
    monkeypatch.setattr(auth_service, "burn_verification", burned.append)

    r = client.post("/api/auth/login", json={"email": "nobody@portfolio-admin.com", "password": "guess-one"})
    assert r.status_code == 401
    assert burned == ["guess-one"]

    r = client.post("/api/auth/login", json={"email": admin.email, "password": "guess-two"})
    assert r.status_code == 401
    assert burned == ["guess-one"]
