"""
Dashboard activity aggregation.

For each repository of a dashboard, fetches the first page of commits, pull
requests and issues concurrently and normalizes them to the activity window.

Partial results win over all-or-nothing: a failed fetch for one repository
and kind degrades that slice to an empty list and the rest of the dashboard
is still returned. Nothing is retried.
"""

import asyncio
import logging
from collections.abc import Awaitable, Sequence
from typing import Any

import httpx

from app.services.github.exceptions import GitHubAPIError
from app.services.github.helpers import parse_github_timestamp
from app.services.github.read_operations import GitHubReadOperations

from .types import ActivityData, ActivityWindow, FetchSlice, RepoActivity

logger = logging.getLogger(__name__)


def filter_pulls(pulls: list[Any], window: ActivityWindow) -> list[Any]:
    """Keep pull requests whose ``updated_at`` lies within the window (inclusive).

    The pulls endpoint cannot filter by date, so this is the only windowing
    pull requests get.
    """
    return [
        pr
        for pr in pulls
        if isinstance(pr, dict) and window.contains(parse_github_timestamp(pr.get("updated_at")))
    ]


def filter_issues(issues: list[Any], window: ActivityWindow) -> list[Any]:
    """Drop pull requests posing as issues and anything updated after ``until``.

    The lower bound is applied by GitHub through the ``since`` parameter.
    """
    kept = []
    for issue in issues:
        if not isinstance(issue, dict) or issue.get("pull_request"):
            continue
        updated_at = parse_github_timestamp(issue.get("updated_at"))
        if updated_at is not None and updated_at <= window.until:
            kept.append(issue)
    return kept


class ActivityAggregator:
    """Builds ActivityData for a list of repositories."""

    def __init__(self, github: GitHubReadOperations):
        self.github = github

    async def aggregate(
        self,
        repo_full_names: Sequence[str],
        window: ActivityWindow,
    ) -> ActivityData:
        """Fetch and normalize activity for every repository, in the given order."""
        repos = await asyncio.gather(
            *[self._aggregate_repo(name, window) for name in repo_full_names]
        )
        return ActivityData(
            since=window.since_str,
            until=window.until_str,
            repos=list(repos),
        )

    async def _aggregate_repo(self, full_name: str, window: ActivityWindow) -> RepoActivity:
        owner, _, name = full_name.partition("/")
        if not owner or not name:
            logger.warning(f"Skipping malformed repository name: {full_name!r}")
            return RepoActivity(repo_full_name=full_name)

        commits, pulls, issues = await asyncio.gather(
            self._fetch_slice(
                full_name,
                "commits",
                self.github.list_commits(owner, name, window.since, window.until),
            ),
            self._fetch_slice(full_name, "pulls", self.github.list_pulls(owner, name)),
            self._fetch_slice(
                full_name, "issues", self.github.list_issues(owner, name, window.since)
            ),
        )

        return RepoActivity(
            repo_full_name=full_name,
            commits=commits.items_or_empty(),
            pulls=filter_pulls(pulls.items_or_empty(), window),
            issues=filter_issues(issues.items_or_empty(), window),
        )

    async def _fetch_slice(
        self,
        full_name: str,
        kind: str,
        fetch: Awaitable[Any],
    ) -> FetchSlice:
        try:
            data = await fetch
        except (GitHubAPIError, httpx.HTTPError, ValueError) as e:
            logger.warning(f"Failed to fetch {kind} for {full_name}: {e}")
            return FetchSlice.failed(str(e))

        if not isinstance(data, list):
            logger.warning(f"Unexpected {kind} payload for {full_name}: {type(data).__name__}")
            return FetchSlice.failed(f"Expected a list of {kind}")

        return FetchSlice.loaded(data)
