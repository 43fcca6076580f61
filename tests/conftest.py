"""Root conftest: test infrastructure for all backend tests.

Provides:
- A fully mocked AsyncSession (no database is needed for the suite)
- A fixed GitHub identity and a stub identity resolver
- API client with dependency overrides
- Autouse reset of the process-wide identity cache
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from app.services.github.types import GitHubIdentity

TEST_TOKEN = "gho_test_token_12345"
TEST_LOGIN = "octocat"


# ─────────────────────────────────────────────────────────────────────────────
# Identity & Database
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def github_identity() -> GitHubIdentity:
    return GitHubIdentity(login=TEST_LOGIN, id=583231, avatar_url=None)


@pytest.fixture
def identity_resolver_stub(github_identity):
    """Resolver that accepts any token as TEST_LOGIN without calling GitHub."""
    resolver = MagicMock()
    resolver.resolve = AsyncMock(return_value=github_identity)
    return resolver


@pytest.fixture
def mock_db():
    """AsyncSession stand-in; ``add`` is synchronous on the real session."""
    db = AsyncMock()
    db.add = MagicMock()
    return db


# ─────────────────────────────────────────────────────────────────────────────
# API Client
# ─────────────────────────────────────────────────────────────────────────────


def _install_overrides(mock_db, identity_resolver_stub):
    from app.api.deps import get_identity_resolver
    from app.core.database import get_db
    from app.main import app

    async def override_db():
        yield mock_db

    app.dependency_overrides[get_db] = override_db
    app.dependency_overrides[get_identity_resolver] = lambda: identity_resolver_stub
    return app


@pytest.fixture
async def api_client(mock_db, identity_resolver_stub):
    """HTTP client authenticated as TEST_LOGIN with the DB mocked out.

    Overrides: get_db, get_identity_resolver
    """
    app = _install_overrides(mock_db, identity_resolver_stub)

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        headers={"Authorization": f"token {TEST_TOKEN}"},
    ) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
async def anon_client(mock_db, identity_resolver_stub):
    """HTTP client that sends no Authorization header."""
    app = _install_overrides(mock_db, identity_resolver_stub)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


# ─────────────────────────────────────────────────────────────────────────────
# Process-wide state
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def reset_identity_cache():
    """Keep the shared identity cache from leaking between tests."""
    from app.services.github import identity_resolver

    identity_resolver.cache.clear()
    yield
    identity_resolver.cache.clear()
