"""
GitHub service package.

Usage: `from app.services.github import GitHubReadOperations, GitHubAPIError`

Module structure:
- read_operations.py: All read-only API operations
- identity.py: Token -> identity resolution with a TTL cache
- oauth.py: OAuth code -> access token exchange
- helpers.py: Rate limit handling, error and timestamp utilities
- types.py: Data types and response models
- exceptions.py: Custom exceptions
"""

from app.services.github.exceptions import GitHubAPIError, GitHubOAuthError
from app.services.github.helpers import (
    RateLimitInfo,
    format_github_timestamp,
    handle_error_response,
    parse_github_timestamp,
)
from app.services.github.http_client import close_github_client
from app.services.github.identity import (
    CachedIdentity,
    IdentityCache,
    IdentityResolver,
    identity_resolver,
)
from app.services.github.oauth import exchange_code_for_token
from app.services.github.read_operations import GitHubReadOperations
from app.services.github.types import (
    CollaboratorInfo,
    GitHubIdentity,
    GitHubRepo,
    GitHubReposResponse,
)

__all__ = [
    # Operations
    "GitHubReadOperations",
    "exchange_code_for_token",
    # Identity
    "CachedIdentity",
    "IdentityCache",
    "IdentityResolver",
    "identity_resolver",
    # HTTP client lifecycle
    "close_github_client",
    # Utilities
    "RateLimitInfo",
    "format_github_timestamp",
    "handle_error_response",
    "parse_github_timestamp",
    # Exceptions
    "GitHubAPIError",
    "GitHubOAuthError",
    # Types
    "CollaboratorInfo",
    "GitHubIdentity",
    "GitHubRepo",
    "GitHubReposResponse",
]
