"""
GitHub API helper utilities.

Rate limit handling, error response processing, and the timestamp format
GitHub uses in query parameters and payloads.
"""

import logging
from datetime import UTC, datetime

import httpx

from app.services.github.exceptions import GitHubAPIError

logger = logging.getLogger(__name__)

GITHUB_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class RateLimitInfo:
    """Rate limit information from GitHub API response."""

    def __init__(self, response: httpx.Response) -> None:
        self.remaining = response.headers.get("X-RateLimit-Remaining")
        self.reset = response.headers.get("X-RateLimit-Reset")

    @property
    def reset_timestamp(self) -> int | None:
        """Get reset timestamp as integer, or None if not available."""
        return int(self.reset) if self.reset else None

    @property
    def is_exhausted(self) -> bool:
        """Check if rate limit is exhausted."""
        return self.remaining is not None and int(self.remaining) == 0


def handle_error_response(response: httpx.Response, resource: str) -> None:
    """
    Raise for non-200 responses from GitHub API.

    Args:
        response: The HTTP response from GitHub API
        resource: What was requested, for error context (e.g. "owner/repo")

    Raises:
        GitHubAPIError: For authentication, authorization, or other API errors
    """
    if response.status_code == 200:
        return

    if response.status_code == 401:
        raise GitHubAPIError("Invalid or expired GitHub token", 401)
    elif response.status_code == 404:
        raise GitHubAPIError(f"Repository or resource not found: {resource}", 404)
    elif response.status_code == 403:
        rate_info = RateLimitInfo(response)
        if rate_info.is_exhausted:
            raise GitHubAPIError(
                "GitHub API rate limit exceeded",
                403,
                rate_limit_reset=rate_info.reset_timestamp,
            )
        raise GitHubAPIError("GitHub API forbidden", 403)

    logger.debug(f"GitHub returned {response.status_code} for {resource}")
    raise GitHubAPIError(f"GitHub API error: {response.status_code}", response.status_code)


def format_github_timestamp(value: datetime) -> str:
    """Format a datetime the way GitHub expects in ``since``/``until`` params.

    Naive datetimes are taken to be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).strftime(GITHUB_TIMESTAMP_FORMAT)


def parse_github_timestamp(value: object) -> datetime | None:
    """Parse an ISO-8601 timestamp from a GitHub payload.

    Returns None for missing or malformed values. Naive results are taken
    to be UTC so they compare with aware datetimes.
    """
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed
