"""
GitHub OAuth code exchange.

Trades the one-time ``code`` GitHub hands the browser after authorization for
an access token. Every failure is raised as GitHubOAuthError carrying the HTTP
status the API should answer with.
"""

import logging
from typing import Any

import httpx

from app.config import settings
from app.services.github.exceptions import GitHubOAuthError

logger = logging.getLogger(__name__)

GITHUB_TOKEN_URL = "https://github.com/login/oauth/access_token"
TOKEN_EXCHANGE_TIMEOUT_SECONDS = 10.0


async def exchange_code_for_token(code: str) -> str:
    """
    Exchange an OAuth authorization code for an access token.

    Args:
        code: The authorization code from GitHub's redirect

    Returns:
        The access token

    Raises:
        GitHubOAuthError: 400 missing code or upstream rejection, 500 when the
            OAuth app is not configured, 502 when GitHub is unreachable or
            returns an unusable response.
    """
    if not code:
        raise GitHubOAuthError("Missing code parameter", 400)

    if not settings.github_oauth_enabled:
        raise GitHubOAuthError("GitHub OAuth is not configured on the server", 500)

    try:
        async with httpx.AsyncClient(timeout=TOKEN_EXCHANGE_TIMEOUT_SECONDS) as client:
            response = await client.post(
                GITHUB_TOKEN_URL,
                headers={"Accept": "application/json"},
                json={
                    "client_id": settings.github_client_id,
                    "client_secret": settings.github_client_secret,
                    "code": code,
                },
            )
    except httpx.HTTPError as e:
        logger.warning(f"GitHub token exchange failed to reach GitHub: {e}")
        raise GitHubOAuthError("Failed to reach GitHub", 502) from e

    try:
        data: Any = response.json()
    except ValueError as e:
        logger.warning(f"GitHub token exchange returned non-JSON ({response.status_code})")
        raise GitHubOAuthError("Invalid response from GitHub", 502) from e

    if not isinstance(data, dict):
        raise GitHubOAuthError("Invalid response from GitHub", 502)

    if data.get("error"):
        message = data.get("error_description") or data["error"]
        logger.info(f"GitHub rejected OAuth code: {data['error']}")
        raise GitHubOAuthError(message, 400)

    token = data.get("access_token")
    if not isinstance(token, str) or not token:
        raise GitHubOAuthError("Invalid response from GitHub", 502)

    return token
