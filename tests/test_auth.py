"""
Tests for registration, login and the bearer-token guard.
"""

import time

from app.application.auth.token_service import TokenService
from app.application.auth.usecase import NOT_LOGGED_IN_MESSAGE, USER_GONE_MESSAGE
from app.common.normalizer import EXPIRED_TOKEN_MESSAGE, INVALID_TOKEN_MESSAGE, normalize
from app.common.result import Err, Ok
from app.domain import models
from app.infra.config import settings
from app.infra.db import SessionLocal
from app.infra.user_repository import UserRepository


class TestRegister:
    def test_success(self, client, register_user) -> None:
        body = register_user(client)
        assert body["success"] is True
        assert body["message"] == "User registered successfully"
        assert body["token"]
        assert body["data"]["user_name"] == "alice"
        assert body["data"]["email"] == "alice@example.com"
        assert "password" not in body["data"]

    def test_missing_fields(self, client) -> None:
        resp = client.post("/api/auth/register", json={})
        assert resp.status_code == 400
        assert resp.json()["message"] == (
            "Invalid input data: user_name is required. email is required. password is required"
        )

    def test_short_password(self, client) -> None:
        resp = client.post(
            "/api/auth/register",
            json={"user_name": "bob", "email": "bob@example.com", "password": "short"},
        )
        assert resp.status_code == 400
        assert "password must be at least 8 characters" in resp.json()["message"]

    def test_duplicate_email(self, client, register_user) -> None:
        register_user(client)
        resp = client.post(
            "/api/auth/register",
            json={"user_name": "other", "email": "alice@example.com", "password": "s3cret-pass"},
        )
        assert resp.status_code == 409
        assert resp.json()["message"] == "User with this email already exist"

    def test_duplicate_user_name(self, client, register_user) -> None:
        register_user(client)
        resp = client.post(
            "/api/auth/register",
            json={"user_name": "alice", "email": "another@example.com", "password": "s3cret-pass"},
        )
        assert resp.status_code == 409
        assert resp.json()["message"] == "User with this username already exist."


class TestUniqueConstraint:
    def test_repository_reports_duplicate_key(self) -> None:
        """A constraint violation surfaces as a DuplicateKeyFault with the conflicting value."""
        repo = UserRepository()
        with SessionLocal() as db:
            first = repo.create(db, user_name="a", email="a@b.com", password_hash="x")
            assert isinstance(first, Ok)
            second = repo.create(db, user_name="b", email="a@b.com", password_hash="x")
        assert isinstance(second, Err)
        assert second.error.key_value == {"email": "a@b.com"}
        assert normalize(second.error).message == "Duplicate field value: 'a@b.com'. Please use another value!"


class TestLogin:
    def test_success(self, client, register_user) -> None:
        register_user(client)
        resp = client.post("/api/auth/login", json={"email": "alice@example.com", "password": "s3cret-pass"})
        assert resp.status_code == 200
        assert resp.json()["message"] == "Logged in successfully"
        assert resp.json()["token"]

    def test_missing_credentials(self, client) -> None:
        resp = client.post("/api/auth/login", json={"email": "alice@example.com"})
        assert resp.status_code == 400
        assert resp.json()["message"] == "Please provide an email and password"

    def test_wrong_password(self, client, register_user) -> None:
        register_user(client)
        resp = client.post("/api/auth/login", json={"email": "alice@example.com", "password": "wrong-pass"})
        assert resp.status_code == 401
        assert resp.json() == {"success": False, "status": "fail", "message": "Invalid credentials"}

    def test_unknown_email(self, client) -> None:
        resp = client.post("/api/auth/login", json={"email": "nobody@example.com", "password": "whatever1"})
        assert resp.status_code == 401
        assert resp.json()["message"] == "Invalid credentials"


class TestGuard:
    def test_missing_token(self, client) -> None:
        resp = client.get("/api/auth/me")
        assert resp.status_code == 401
        assert resp.json() == {"success": False, "status": "fail", "message": NOT_LOGGED_IN_MESSAGE}

    def test_non_bearer_scheme(self, client) -> None:
        resp = client.get("/api/auth/me", headers={"Authorization": "Basic dXNlcjpwYXNz"})
        assert resp.status_code == 401
        assert resp.json()["message"] == NOT_LOGGED_IN_MESSAGE

    def test_invalid_token(self, client) -> None:
        resp = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
        assert resp.status_code == 401
        assert resp.json()["message"] == INVALID_TOKEN_MESSAGE

    def test_wrong_secret(self, client, register_user) -> None:
        user_id = register_user(client)["data"]["id"]
        token = TokenService(secret="another-secret").make_access_token(user_id=user_id, user_name="alice")
        resp = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 401
        assert resp.json()["message"] == INVALID_TOKEN_MESSAGE

    def test_expired_token(self, client, register_user) -> None:
        user_id = register_user(client)["data"]["id"]
        tokens = TokenService(secret=settings.JWT_SECRET_KEY, expires_minutes=1)
        token = tokens.make_access_token(user_id=user_id, user_name="alice", now=int(time.time()) - 3600)
        resp = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 401
        assert resp.json()["message"] == EXPIRED_TOKEN_MESSAGE

    def test_user_no_longer_exists(self, client, auth_headers) -> None:
        headers = auth_headers(client)
        with SessionLocal() as db:
            db.query(models.User).delete()
            db.commit()
        resp = client.get("/api/auth/me", headers=headers)
        assert resp.status_code == 401
        assert resp.json()["message"] == USER_GONE_MESSAGE

    def test_authenticated(self, client, auth_headers) -> None:
        resp = client.get("/api/auth/me", headers=auth_headers(client))
        assert resp.status_code == 200
        assert resp.json()["data"]["user_name"] == "alice"

    def test_user_id_in_production_log(self, client, auth_headers, caplog) -> None:
        """Errors on authenticated requests carry the user id in the log record."""
        headers = auth_headers(client)
        resp = client.put("/api/books/abc", json={"title": "x"}, headers=headers)
        assert resp.status_code == 400
        records = [r for r in caplog.records if r.name == "app.common.exception_handlers"]
        assert records[-1].error_context["user"] == 1


class TestRateLimit:
    def test_login_is_limited(self, client) -> None:
        limit = int(settings.RATE_LIMIT_AUTH.split("/")[0])
        for _ in range(limit):
            assert client.post("/api/auth/login", json={}).status_code == 400
        resp = client.post("/api/auth/login", json={})
        assert resp.status_code == 429
        assert resp.json() == {
            "success": False,
            "status": "fail",
            "message": "Too many requests from this IP, please try again later.",
        }
