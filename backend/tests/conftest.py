"""
Test configuration for the API tests.

Required settings are put in the environment before the application is
imported, and backend/ is put on sys.path so ``main`` and ``devnet`` resolve
whether pytest runs from the project root or from backend/.

Each test gets a fresh SQLite database and enters the application lifespan
explicitly, since ASGITransport does not run it.
"""
import os
import sys
from pathlib import Path

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

_backend_dir = Path(__file__).parent.parent        # .../backend/
if str(_backend_dir) not in sys.path:
    sys.path.insert(0, str(_backend_dir))

from typing import Dict

import pytest_asyncio
from httpx import ASGITransport, AsyncClient


@pytest_asyncio.fixture
async def app(tmp_path, monkeypatch):
    """The application running its lifespan against a per-test SQLite file."""
    from main import app as fastapi_app
    from devnet.core.config import settings

    monkeypatch.setattr(settings, "DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")

    async with fastapi_app.router.lifespan_context(fastapi_app):
        yield fastapi_app

    fastapi_app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app):
    """Async httpx client over ASGI transport, no live server needed."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def register(client):
    """Factory: create an account and return its token."""
    async def _register(name: str = "Alice", email: str = "alice@example.com", password: str = "secret1") -> str:
        response = await client.post("/api/users", json={"name": name, "email": email, "password": password})
        assert response.status_code == 200, response.text
        return response.json()["token"]

    return _register


@pytest_asyncio.fixture
async def alice(register) -> Dict[str, str]:
    """Auth headers for a registered account."""
    token = await register("Alice", "alice@example.com", "secret1")
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def bob(register) -> Dict[str, str]:
    token = await register("Bob", "bob@example.com", "secret2")
    return {"Authorization": f"Bearer {token}"}
