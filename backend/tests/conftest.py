import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import asyncio
from typing import List, Optional

import httpx
import pytest
from httpx import ASGITransport
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from juridisk.core.database import Base, get_db, enable_sqlite_foreign_keys
from juridisk.main import app
from juridisk.api.dependencies import get_provider_factory
from juridisk.clients import CompletionProvider, ProviderError


class CompatibleTestClient:
    """Synchronous test client built on httpx's ASGITransport"""

    def __init__(self, app):
        self.app = app
        self.transport = ASGITransport(app=app)
        self.base_url = "http://testserver"

    def request(self, method, url, **kwargs):
        async def _request():
            async with httpx.AsyncClient(transport=self.transport, base_url=self.base_url) as client:
                return await client.request(method, url, **kwargs)
        return asyncio.run(_request())

    def post(self, url, **kwargs):
        return self.request("POST", url, **kwargs)

    def get(self, url, **kwargs):
        return self.request("GET", url, **kwargs)

    def delete(self, url, **kwargs):
        return self.request("DELETE", url, **kwargs)


TestClient = CompatibleTestClient

# Create test database
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
enable_sqlite_foreign_keys(engine)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class FakeProvider(CompletionProvider):
    """Completion provider that records prompts and returns a canned answer"""

    def __init__(self, answer: str = "**Svar**\nDette er et svar.", error: Optional[ProviderError] = None):
        self.answer = answer
        self.error = error
        self.prompts: List[str] = []

    async def generate(self, prompt: str, model: Optional[str] = None) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.answer

    def get_default_model(self) -> str:
        return "fake-model"


@pytest.fixture
def db():
    """Create a test database session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    """Create a test client"""
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def provider(client):
    """Replace the configured completion provider with a FakeProvider"""
    fake = FakeProvider()
    app.dependency_overrides[get_provider_factory] = lambda: (lambda: fake)
    return fake


def register_and_login(client, email: str, password: str = "testpassword123", name: str = "Test Bruger") -> dict:
    """Register a user and return Authorization headers for it"""
    client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "password": password}
    )
    response = client.post(
        "/api/auth/login",
        json={"email": email, "password": password}
    )
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def auth_headers(client):
    """Headers for the primary test user"""
    return register_and_login(client, "test@example.com")


@pytest.fixture
def other_headers(client):
    """Headers for a second user who owns nothing of the primary user's"""
    return register_and_login(client, "other@example.com")
