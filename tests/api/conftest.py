"""API test fixtures: owned dashboards and activity aggregation stubs.

Builds on root conftest fixtures (mock_db, identity_resolver_stub,
api_client, anon_client).
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from app.domain import dashboard_ops
from app.services.activity import ActivityData, RepoActivity

from tests.helpers.mock_factories import commit_json, issue_json, make_mock_dashboard, pull_json


@pytest.fixture
def owned_dashboard():
    """A dashboard owned by the caller; ownership lookups return it."""
    dashboard = make_mock_dashboard(name="Platform", repo_full_names=["octo-org/api", "octo-org/web"])
    with patch.object(dashboard_ops, "get_for_owner", new=AsyncMock(return_value=dashboard)):
        yield dashboard


@pytest.fixture
def sample_activity() -> ActivityData:
    return ActivityData(
        since="2026-03-01T00:00:00Z",
        until="2026-03-08T00:00:00Z",
        repos=[
            RepoActivity(
                repo_full_name="octo-org/api",
                commits=[commit_json(login="alice"), commit_json(login="bob")],
                pulls=[pull_json("2026-03-03T00:00:00Z", login="bob")],
                issues=[],
            ),
            RepoActivity(
                repo_full_name="octo-org/web",
                commits=[],
                pulls=[],
                issues=[issue_json("2026-03-04T00:00:00Z", login="carol")],
            ),
        ],
    )


@pytest.fixture
def aggregator_stub(sample_activity):
    """Replace the activity aggregator dependency with a stub."""
    from app.api.v1.dashboards import get_activity_aggregator
    from app.main import app

    aggregator = MagicMock()
    aggregator.aggregate = AsyncMock(return_value=sample_activity)
    app.dependency_overrides[get_activity_aggregator] = lambda: aggregator
    yield aggregator
    app.dependency_overrides.pop(get_activity_aggregator, None)


@pytest.fixture
def summarizer_stub():
    """Replace the summarizer dependency with a configured stub."""
    from app.main import app
    from app.services.activity import get_activity_summarizer

    summarizer = MagicMock()
    summarizer.is_configured = True
    summarizer.summarize = AsyncMock(return_value="## Summary\nAll good.")
    app.dependency_overrides[get_activity_summarizer] = lambda: summarizer
    yield summarizer
    app.dependency_overrides.pop(get_activity_summarizer, None)
