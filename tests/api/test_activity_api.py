"""API tests for the dashboard activity endpoint."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from app.domain import dashboard_ops

from tests.helpers.mock_factories import make_mock_dashboard


class TestDashboardActivity:
    @pytest.mark.asyncio
    async def test_returns_activity_and_contributors(
        self, api_client, owned_dashboard, aggregator_stub
    ):
        response = await api_client.get(
            f"/api/v1/dashboards/{owned_dashboard.id}/activity",
            params={"since": "2026-03-01T00:00:00Z", "until": "2026-03-08T00:00:00Z"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["since"] == "2026-03-01T00:00:00Z"
        assert body["until"] == "2026-03-08T00:00:00Z"
        assert body["contributors"] == ["alice", "bob", "carol"]
        assert [r["repo_full_name"] for r in body["repos"]] == ["octo-org/api", "octo-org/web"]
        assert set(body["repos"][0]) == {"repo_full_name", "commits", "pulls", "issues"}

        repo_names, window = aggregator_stub.aggregate.await_args.args
        assert repo_names == ["octo-org/api", "octo-org/web"]
        assert window.since == datetime(2026, 3, 1, tzinfo=UTC)
        assert window.until == datetime(2026, 3, 8, tzinfo=UTC)

    @pytest.mark.asyncio
    async def test_default_window_is_last_week(self, api_client, owned_dashboard, aggregator_stub):
        await api_client.get(f"/api/v1/dashboards/{owned_dashboard.id}/activity")

        _, window = aggregator_stub.aggregate.await_args.args
        assert window.until - window.since == timedelta(days=7)
        assert abs(datetime.now(UTC) - window.until) < timedelta(minutes=1)

    @pytest.mark.asyncio
    async def test_contributor_narrows_repos_but_not_contributors(
        self, api_client, owned_dashboard, aggregator_stub
    ):
        response = await api_client.get(
            f"/api/v1/dashboards/{owned_dashboard.id}/activity",
            params={"contributor": "carol"},
        )

        body = response.json()
        assert [r["repo_full_name"] for r in body["repos"]] == ["octo-org/web"]
        assert body["contributors"] == ["alice", "bob", "carol"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("params", [{"since": "yesterday"}, {"until": "2026-99-01"}])
    async def test_invalid_timestamps(self, api_client, owned_dashboard, aggregator_stub, params):
        response = await api_client.get(
            f"/api/v1/dashboards/{owned_dashboard.id}/activity", params=params
        )

        assert response.status_code == 400
        aggregator_stub.aggregate.assert_not_called()

    @pytest.mark.asyncio
    async def test_foreign_dashboard(self, api_client, aggregator_stub):
        with patch.object(dashboard_ops, "get_for_owner", new=AsyncMock(return_value=None)):
            response = await api_client.get(
                "/api/v1/dashboards/00000000-0000-0000-0000-000000000001/activity"
            )

        assert response.status_code == 404
        aggregator_stub.aggregate.assert_not_called()


class TestActivityAgainstGitHub:
    """End to end through the real aggregator with GitHub's client mocked."""

    @pytest.mark.asyncio
    async def test_failed_repo_degrades_to_empty_lists(self, api_client, owned_dashboard):
        async def fake_get(url, **kwargs):
            if "/octo-org/api/" in url:
                return httpx.Response(500, json={"message": "Server Error"})
            if url.endswith("/commits"):
                return httpx.Response(200, json=[{"sha": "1", "author": {"login": "dana"}}])
            return httpx.Response(200, json=[])

        client = AsyncMock()
        client.get = AsyncMock(side_effect=fake_get)
        with patch("app.services.github.read_operations.get_github_client", return_value=client):
            response = await api_client.get(f"/api/v1/dashboards/{owned_dashboard.id}/activity")

        assert response.status_code == 200
        api, web = response.json()["repos"]
        assert api == {"repo_full_name": "octo-org/api", "commits": [], "pulls": [], "issues": []}
        assert web["commits"] == [{"sha": "1", "author": {"login": "dana"}}]
        assert response.json()["contributors"] == ["dana"]

    @pytest.mark.asyncio
    async def test_dashboard_without_repositories(self, api_client):
        dashboard = make_mock_dashboard(repo_full_names=[])
        client = AsyncMock()
        with (
            patch.object(dashboard_ops, "get_for_owner", new=AsyncMock(return_value=dashboard)),
            patch("app.services.github.read_operations.get_github_client", return_value=client),
        ):
            response = await api_client.get(
                f"/api/v1/dashboards/{dashboard.id}/activity",
                params={"since": "2026-03-01T00:00:00Z", "until": "2026-03-08T00:00:00Z"},
            )

        assert response.status_code == 200
        assert response.json() == {
            "repos": [],
            "since": "2026-03-01T00:00:00Z",
            "until": "2026-03-08T00:00:00Z",
            "contributors": [],
        }
        client.get.assert_not_called()
