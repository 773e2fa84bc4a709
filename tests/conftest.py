"""
Shared fixtures: a fresh SQLite database per test, the app built around it,
and a store-level session for helper tests.
"""

from __future__ import annotations

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from config.settings import Settings
from database.session import build_engine, build_session_factory, init_models
from main import create_app

TEST_SECRET = "test-secret-0123456789-abcdefghijklmnopqrstuvwxyz"


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        jwt_secret=TEST_SECRET,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'wishlist.db'}",
        bcrypt_rounds=4,
        api_prefix="/api",
    )


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def session(settings):
    engine = build_engine(settings)
    await init_models(engine)
    factory = build_session_factory(engine)
    async with factory() as db:
        yield db
    await engine.dispose()


@pytest.fixture
def signup_and_login(client: TestClient):
    """Return a callable that registers ``email`` and returns a token for it."""

    def _signup_and_login(email: str, password: str = "p1") -> str:
        resp = client.post("/api/signup", json={"email": email, "password": password})
        assert resp.status_code == 201, resp.text
        resp = client.post("/api/login", json={"email": email, "password": password})
        assert resp.status_code == 200, resp.text
        return resp.json()["token"]

    return _signup_and_login
