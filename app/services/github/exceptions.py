"""Exceptions for GitHub service."""


class GitHubAPIError(Exception):
    """Error from GitHub API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        rate_limit_reset: int | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.rate_limit_reset = rate_limit_reset  # Unix timestamp when rate limit resets
        super().__init__(message)


class GitHubOAuthError(GitHubAPIError):
    """The OAuth code-for-token exchange failed.

    ``status_code`` is the HTTP status this failure should be surfaced with
    (400 when GitHub rejected the code, 500 when the server is not configured,
    502 when GitHub could not be reached or answered with garbage).
    """
