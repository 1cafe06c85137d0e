import threading
from datetime import datetime, timedelta, timezone

import jwt
import pytest

from stocktrack.core.config import JWT_ALGORITHM, JWT_SECRET, SESSION_COOKIE_NAME
from stocktrack.core.security import create_session_token, decode_token, dummy_verify, hash_password, verify_password
from stocktrack.services import auth_service, user_service
from stocktrack.services.auth_service import authorize
from stocktrack.services.user_service import create_user, get_user_by_email
from stocktrack.core.errors import UniqueConstraintViolation


def test_password_hash_roundtrip():
    hashed = hash_password("hunter22")
    assert hashed != "hunter22"
    assert verify_password("hunter22", hashed)
    assert not verify_password("hunter23", hashed)


def test_session_token_carries_identity():
    token, exp = create_session_token(7, "Ada", "ada@example.com", "admin")
    claims = decode_token(token)

    assert claims["sub"] == "7"
    assert claims["name"] == "Ada"
    assert claims["email"] == "ada@example.com"
    assert claims["role"] == "admin"
    assert claims["type"] == "access"
    assert exp > datetime.now(timezone.utc)


class TestAuthorize:
    @pytest.mark.asyncio
    async def test_valid_credentials(self, db):
        user = await create_user("ada@example.com", "correct-horse", "Ada")

        identity = await authorize("ada@example.com", "correct-horse")

        assert identity.id == user.id
        assert identity.name == "Ada"
        assert identity.email == "ada@example.com"
        assert identity.role == "user"

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_look_the_same(self, db):
        await create_user("ada@example.com", "correct-horse", "Ada")

        assert await authorize("ada@example.com", "wrong-horse") is None
        assert await authorize("nobody@example.com", "correct-horse") is None
        assert await authorize("", "") is None

    @pytest.mark.asyncio
    async def test_duplicate_email(self, db):
        await create_user("ada@example.com", "correct-horse", "Ada")
        with pytest.raises(UniqueConstraintViolation):
            await create_user("ada@example.com", "other-pass", "Ada Two")

        stored = await get_user_by_email("ada@example.com")
        assert stored.password_hash != "correct-horse"

    @pytest.mark.asyncio
    async def test_bcrypt_runs_in_worker_threads(self, db, monkeypatch):
        loop_thread = threading.get_ident()
        calls = []

        def on_thread(fn):
            def wrapper(*args):
                calls.append((fn.__name__, threading.get_ident()))
                return fn(*args)
            return wrapper

        monkeypatch.setattr(user_service, "hash_password", on_thread(hash_password))
        monkeypatch.setattr(auth_service, "verify_password", on_thread(verify_password))
        monkeypatch.setattr(auth_service, "dummy_verify", on_thread(dummy_verify))

        await create_user("ada@example.com", "correct-horse", "Ada")
        assert await authorize("ada@example.com", "correct-horse") is not None
        assert await authorize("nobody@example.com", "correct-horse") is None

        assert [name for name, _ in calls] == ["hash_password", "verify_password", "dummy_verify"]
        assert all(thread != loop_thread for _, thread in calls)


class TestAuthRoutes:
    def test_register(self, client):
        response = client.post("/api/auth/register",
                               json={"name": " Grace ", "email": "grace@example.com", "password": "secret1"})
        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Grace"
        assert body["role"] == "user"
        assert "password_hash" not in body

        duplicate = client.post("/api/auth/register",
                                json={"name": "Grace", "email": "grace@example.com", "password": "secret1"})
        assert duplicate.status_code == 409

    @pytest.mark.parametrize(
        "payload",
        [
            {"name": "G", "email": "g@example.com", "password": "secret1"},
            {"name": "Grace", "email": "not-an-email", "password": "secret1"},
            {"name": "Grace", "email": "g@example.com", "password": "short"},
            {"email": "g@example.com", "password": "secret1"},
        ],
    )
    def test_register_validation(self, client, payload):
        response = client.post("/api/auth/register", json=payload)
        assert response.status_code == 400
        assert "error" in response.json()

    def test_register_cannot_choose_role(self, client):
        body = client.post("/api/auth/register", json={
            "name": "Mallory", "email": "mallory@example.com", "password": "secret1", "role": "admin",
        }).json()
        assert body["role"] == "user"

    def test_login_sets_cookie_and_session(self, client):
        client.post("/api/auth/register", json={"name": "Grace", "email": "grace@example.com", "password": "secret1"})

        response = client.post("/api/auth/login", json={"email": "grace@example.com", "password": "secret1"})
        assert response.status_code == 200
        body = response.json()
        assert body["token_type"] == "bearer"
        assert body["user"]["email"] == "grace@example.com"
        assert SESSION_COOKIE_NAME in response.cookies

        # Cookie alone is enough
        session = client.get("/api/auth/session")
        assert session.status_code == 200
        assert session.json()["email"] == "grace@example.com"

        client.post("/api/auth/logout")
        client.cookies.clear()
        assert client.get("/api/auth/session").status_code == 401

    def test_bad_login_is_401_without_detail(self, client):
        client.post("/api/auth/register", json={"name": "Grace", "email": "grace@example.com", "password": "secret1"})

        wrong = client.post("/api/auth/login", json={"email": "grace@example.com", "password": "nope123"})
        unknown = client.post("/api/auth/login", json={"email": "who@example.com", "password": "secret1"})

        assert wrong.status_code == unknown.status_code == 401
        assert wrong.json() == unknown.json() == {"error": "Invalid credentials"}

    def test_expired_token_is_401(self, client):
        past = datetime.now(timezone.utc) - timedelta(minutes=5)
        token = jwt.encode(
            {"sub": "1", "name": "Old", "email": "old@example.com", "role": "user", "type": "access", "exp": past},
            JWT_SECRET,
            algorithm=JWT_ALGORITHM,
        )
        response = client.get("/api/categories", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_token_of_wrong_type_is_401(self, client):
        token = jwt.encode({"sub": "1", "type": "refresh"}, JWT_SECRET, algorithm=JWT_ALGORITHM)
        response = client.get("/api/categories", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
