"""API tests for GitHub browsing endpoints: GitHubReadOperations is mocked."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from app.services.github.exceptions import GitHubAPIError
from app.services.github.types import CollaboratorInfo, GitHubRepo, GitHubReposResponse

from tests.conftest import TEST_TOKEN


def _repo(full_name: str) -> GitHubRepo:
    return GitHubRepo(
        github_id=1,
        name=full_name.split("/")[1],
        full_name=full_name,
        description=None,
        url=f"https://github.com/{full_name}",
        default_branch="main",
        is_private=False,
        language="Python",
        stars_count=0,
        forks_count=0,
        updated_at="2026-03-01T00:00:00Z",
    )


@pytest.fixture
def github_mock():
    github = MagicMock()
    with patch("app.api.v1.github.GitHubReadOperations", return_value=github) as cls:
        github.cls = cls
        yield github


class TestListRepos:
    @pytest.mark.asyncio
    async def test_lists_repos_with_callers_token(self, api_client, github_mock):
        github_mock.get_user_repos = AsyncMock(
            return_value=GitHubReposResponse(
                repos=[_repo("octocat/hello")],
                total_count=1,
                has_more=False,
                rate_limit_remaining=4999,
            )
        )

        response = await api_client.get("/api/v1/github/repos")

        assert response.status_code == 200
        body = response.json()
        assert [r["full_name"] for r in body["repos"]] == ["octocat/hello"]
        assert body["per_page"] == 100
        github_mock.cls.assert_called_once_with(TEST_TOKEN)

    @pytest.mark.asyncio
    async def test_github_error_is_bad_gateway(self, api_client, github_mock):
        github_mock.get_user_repos = AsyncMock(side_effect=GitHubAPIError("GitHub API error: 500", 500))

        response = await api_client.get("/api/v1/github/repos")

        assert response.status_code == 502

    @pytest.mark.asyncio
    async def test_rejected_token_is_unauthorized(self, api_client, github_mock):
        github_mock.get_user_repos = AsyncMock(
            side_effect=GitHubAPIError("Invalid or expired GitHub token", 401)
        )

        response = await api_client.get("/api/v1/github/repos")

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid token"

    @pytest.mark.asyncio
    async def test_unreachable_is_bad_gateway(self, api_client, github_mock):
        github_mock.get_user_repos = AsyncMock(side_effect=httpx.ConnectError("down"))

        response = await api_client.get("/api/v1/github/repos")

        assert response.status_code == 502
        assert response.json()["detail"] == "Failed to reach GitHub"


class TestCollaborators:
    @pytest.mark.asyncio
    async def test_lists_collaborators(self, api_client, github_mock):
        github_mock.get_repo_collaborators = AsyncMock(
            return_value=[CollaboratorInfo(login="alice", id=7, avatar_url=None, html_url=None)]
        )

        response = await api_client.get("/api/v1/github/repos/octo-org/api/collaborators")

        assert response.status_code == 200
        assert response.json() == [
            {"login": "alice", "id": 7, "avatar_url": None, "html_url": None}
        ]
        github_mock.get_repo_collaborators.assert_awaited_once_with("octo-org", "api")

    @pytest.mark.asyncio
    async def test_forbidden_is_bad_gateway(self, api_client, github_mock):
        github_mock.get_repo_collaborators = AsyncMock(
            side_effect=GitHubAPIError("GitHub API forbidden", 403)
        )

        response = await api_client.get("/api/v1/github/repos/octo-org/api/collaborators")

        assert response.status_code == 502
        assert response.json()["detail"] == "GitHub API forbidden"
