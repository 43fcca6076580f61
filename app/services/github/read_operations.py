"""
GitHub API read operations.

Provides the read-only calls the dashboards need:
- The authenticated user's identity and repositories
- Repository collaborators
- First pages of commits, pull requests and issues for activity views
"""

import logging
from datetime import datetime
from typing import Any

from app.services.github.exceptions import GitHubAPIError
from app.services.github.helpers import (
    RateLimitInfo,
    format_github_timestamp,
    handle_error_response,
)
from app.services.github.http_client import get_github_client
from app.services.github.types import (
    CollaboratorInfo,
    GitHubIdentity,
    GitHubRepo,
    GitHubReposResponse,
)

logger = logging.getLogger(__name__)

# GitHub's maximum page size for list endpoints
MAX_PER_PAGE = 100


class GitHubReadOperations:
    """
    Read-only operations for GitHub API.

    Uses a shared HTTP client singleton for connection pooling; the token is
    sent per request.
    """

    BASE_URL = "https://api.github.com"
    API_VERSION = "2022-11-28"

    def __init__(self, token: str):
        self.token = token
        self._headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": self.API_VERSION,
        }

    def _normalize_repo(self, data: dict[str, Any]) -> GitHubRepo:
        """Convert GitHub API response to GitHubRepo dataclass."""
        return GitHubRepo(
            github_id=data["id"],
            name=data["name"],
            full_name=data["full_name"],
            description=data.get("description"),
            url=data["html_url"],
            default_branch=data.get("default_branch", "main"),
            is_private=data.get("private", False),
            language=data.get("language"),
            stars_count=data.get("stargazers_count", 0),
            forks_count=data.get("forks_count", 0),
            updated_at=data.get("updated_at", ""),
        )

    async def _get_list(
        self,
        path: str,
        resource: str,
        params: dict[str, str | int],
    ) -> Any:
        """GET a list endpoint and return the decoded JSON body as-is.

        The body is returned untyped: callers decide what to do when GitHub
        answers with something other than a list.
        """
        client = get_github_client()
        response = await client.get(
            f"{self.BASE_URL}{path}",
            headers=self._headers,
            params=params,
        )
        handle_error_response(response, resource)
        return response.json()

    async def get_authenticated_user(self) -> GitHubIdentity:
        """
        Fetch the user the token belongs to.

        Returns:
            GitHubIdentity with login, id and avatar
        """
        client = get_github_client()
        response = await client.get(
            f"{self.BASE_URL}/user",
            headers=self._headers,
            timeout=10.0,
        )

        if response.status_code == 401:
            raise GitHubAPIError("Invalid or expired GitHub token", 401)
        elif response.status_code != 200:
            raise GitHubAPIError(
                f"GitHub API error: {response.status_code}", response.status_code
            )

        data: dict[str, Any] = response.json()
        return GitHubIdentity(
            login=data["login"],
            id=data["id"],
            avatar_url=data.get("avatar_url"),
        )

    async def get_user_repos(
        self,
        page: int = 1,
        per_page: int = MAX_PER_PAGE,
        sort: str = "updated",
        direction: str = "desc",
    ) -> GitHubReposResponse:
        """
        Fetch repositories for the authenticated user.

        Args:
            page: Page number (1-indexed)
            per_page: Items per page (max 100)
            sort: Sort by ('created', 'updated', 'pushed', 'full_name')
            direction: Sort direction ('asc', 'desc')

        Returns:
            GitHubReposResponse with repos and pagination info
        """
        params: dict[str, str | int] = {
            "page": page,
            "per_page": min(per_page, MAX_PER_PAGE),
            "sort": sort,
            "direction": direction,
        }

        client = get_github_client()
        response = await client.get(
            f"{self.BASE_URL}/user/repos",
            headers=self._headers,
            params=params,
        )

        handle_error_response(response, "user/repos")
        rate_info = RateLimitInfo(response)

        data = response.json()
        repos = [self._normalize_repo(r) for r in data]

        link_header = response.headers.get("Link", "")
        has_more = 'rel="next"' in link_header

        return GitHubReposResponse(
            repos=repos,
            total_count=len(repos),
            has_more=has_more,
            rate_limit_remaining=int(rate_info.remaining) if rate_info.remaining else None,
        )

    async def get_repo_collaborators(self, owner: str, repo: str) -> list[CollaboratorInfo]:
        """
        Fetch collaborators for a repository.

        GitHub only lists collaborators to users with push access; for other
        repositories the call fails with 403 and the error propagates.
        """
        data = await self._get_list(
            f"/repos/{owner}/{repo}/collaborators",
            f"{owner}/{repo}",
            {"per_page": MAX_PER_PAGE},
        )
        if not isinstance(data, list):
            return []

        return [
            CollaboratorInfo(
                login=c["login"],
                id=c["id"],
                avatar_url=c.get("avatar_url"),
                html_url=c.get("html_url"),
            )
            for c in data
        ]

    async def list_commits(
        self,
        owner: str,
        repo: str,
        since: datetime,
        until: datetime,
        per_page: int = MAX_PER_PAGE,
    ) -> Any:
        """
        Fetch the first page of commits in [since, until].

        GitHub applies both bounds server-side.
        """
        return await self._get_list(
            f"/repos/{owner}/{repo}/commits",
            f"{owner}/{repo}",
            {
                "since": format_github_timestamp(since),
                "until": format_github_timestamp(until),
                "per_page": min(per_page, MAX_PER_PAGE),
            },
        )

    async def list_pulls(
        self,
        owner: str,
        repo: str,
        per_page: int = MAX_PER_PAGE,
    ) -> Any:
        """
        Fetch the first page of pull requests, most recently updated first.

        The pulls endpoint has no date filter, so callers window the result.
        """
        return await self._get_list(
            f"/repos/{owner}/{repo}/pulls",
            f"{owner}/{repo}",
            {
                "state": "all",
                "sort": "updated",
                "direction": "desc",
                "per_page": min(per_page, MAX_PER_PAGE),
            },
        )

    async def list_issues(
        self,
        owner: str,
        repo: str,
        since: datetime,
        per_page: int = MAX_PER_PAGE,
    ) -> Any:
        """
        Fetch the first page of issues updated at or after ``since``.

        The issues endpoint also returns pull requests; callers drop them.
        """
        return await self._get_list(
            f"/repos/{owner}/{repo}/issues",
            f"{owner}/{repo}",
            {
                "state": "all",
                "sort": "updated",
                "direction": "desc",
                "since": format_github_timestamp(since),
                "per_page": min(per_page, MAX_PER_PAGE),
            },
        )
