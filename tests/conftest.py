# tests/conftest.py
from __future__ import annotations

import base64
import json
import os
from collections.abc import Callable, Generator, Iterator
from datetime import datetime, timezone
from itertools import count

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool
from svix.webhooks import Webhook

os.environ.setdefault("PYTEST_RUNNING", "true")
os.environ.setdefault("IDENTITY_JWT_KEY", "test-identity-secret")
os.environ.setdefault(
    "WEBHOOK_SIGNING_SECRET",
    "whsec_" + base64.b64encode(b"flagpost-test-webhook-secret").decode(),
)
os.environ.setdefault("ADMIN_IDS", '["user_admin"]')

from flagpost.api.v1.dependencies import get_storage_client_dep
from flagpost.core.settings import settings
from flagpost.db.session import Base
from flagpost.db.session import get_db as app_get_session
from flagpost.main import app as fastapi_app
from flagpost.models import Post, User
from flagpost.models.user import VerificationStatus
from flagpost.services.authz import AdminPolicy, get_admin_policy
from flagpost.services.storage import StorageClient, StorageConfig

TEST_DB_URL = "sqlite://"
ADMIN_ID = "user_admin"
STORAGE_BASE_URL = "http://storage.test"
BROKEN_STORAGE_ID = "storage-broken"

_USER_COUNTER = count(1)


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()

        # Ensure each test sees a clean database even if commits occurred.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture()
def stored_files() -> dict[str, str]:
    """Storage ids known to the fake storage service, mapped to retrieval URLs."""
    return {
        "storage-selfie": f"{STORAGE_BASE_URL}/blob/selfie",
        "storage-id": f"{STORAGE_BASE_URL}/blob/id",
        "storage-media": f"{STORAGE_BASE_URL}/blob/media",
    }


@pytest.fixture()
def storage_requests() -> list[httpx.Request]:
    return []


@pytest.fixture()
def storage_client(
    stored_files: dict[str, str],
    storage_requests: list[httpx.Request],
) -> StorageClient:
    """StorageClient wired to an in-process fake of the storage service."""

    def handler(request: httpx.Request) -> httpx.Response:
        storage_requests.append(request)
        path = request.url.path
        if request.method == "POST" and path == "/upload-url":
            return httpx.Response(200, json={"upload_url": f"{STORAGE_BASE_URL}/upload/one-time"})
        if request.method == "GET" and path.startswith("/files/"):
            storage_id = path.removeprefix("/files/")
            if storage_id == BROKEN_STORAGE_ID:
                return httpx.Response(500, json={"error": "boom"})
            if storage_id in stored_files:
                return httpx.Response(200, json={"url": stored_files[storage_id]})
            return httpx.Response(404, json={"error": "not found"})
        return httpx.Response(405)

    config = StorageConfig(base_url=STORAGE_BASE_URL, api_key="test-key", timeout_seconds=1.0)
    return StorageClient(config, transport=httpx.MockTransport(handler))


@pytest.fixture()
def admin_policy() -> AdminPolicy:
    return AdminPolicy({ADMIN_ID})


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_dependencies(
    app: FastAPI,
    db_session: Session,
    storage_client: StorageClient,
    admin_policy: AdminPolicy,
) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    app.dependency_overrides[get_storage_client_dep] = lambda: storage_client
    app.dependency_overrides[get_admin_policy] = lambda: admin_policy
    try:
        yield
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


def make_token(external_id: str) -> str:
    """Issue a session token the way the identity provider would."""
    return jwt.encode(
        {"sub": external_id},
        settings.identity_jwt_key,
        algorithm=settings.identity_jwt_algorithm,
    )


def auth_headers(external_id: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(external_id)}"}


@pytest.fixture()
def make_user(db_session: Session) -> Callable[..., User]:
    """Factory persisting a user in the requested verification state."""

    def _make_user(
        external_id: str | None = None,
        *,
        status: VerificationStatus = VerificationStatus.NONE,
        name: str = "Test User",
        pseudonym: str = "QuietOtter123",
    ) -> User:
        user = User(
            external_id=external_id or f"user_{next(_USER_COUNTER)}",
            name=name,
            email="test@example.com",
            pseudonym=pseudonym,
            verification_status=status,
            is_approved=status == VerificationStatus.APPROVED,
            has_completed_onboarding=status != VerificationStatus.NONE,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture()
def approved_user(make_user: Callable[..., User]) -> User:
    return make_user("user_approved", status=VerificationStatus.APPROVED)


@pytest.fixture()
def test_post(db_session: Session, approved_user: User) -> Post:
    """Create a baseline post with an empty tally."""
    post = Post(author_id=approved_user.id, content="He texted back within a minute.")
    db_session.add(post)
    db_session.commit()
    db_session.refresh(post)
    return post


def signed_headers(payload: str, secret: str | None = None) -> dict[str, str]:
    """Sign ``payload`` the way the identity provider does."""
    msg_id = "msg_test"
    now = datetime.now(tz=timezone.utc)
    signature = Webhook(secret or settings.webhook_signing_secret).sign(msg_id, now, payload)
    return {
        "svix-id": msg_id,
        "svix-timestamp": str(int(now.timestamp())),
        "svix-signature": signature,
    }


def created_payload(external_id: str = "user_hook") -> str:
    return json.dumps(
        {
            "type": "user.created",
            "data": {
                "id": external_id,
                "first_name": "Grace",
                "last_name": "Hopper",
                "email_addresses": [{"email_address": "grace@example.com"}],
            },
        }
    )
