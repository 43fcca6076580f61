"""GitHub token authentication dependencies.

This module provides:
- Extraction of the ``Authorization: token <value>`` header
- Token to GitHub identity resolution through the cached resolver
- Type aliases for the database session and the authenticated caller
"""

import logging
from dataclasses import dataclass
from typing import Annotated

import httpx
from fastapi import Depends
from fastapi.security import APIKeyHeader
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.exceptions import UnauthorizedError
from app.services.github import GitHubAPIError, GitHubIdentity, IdentityResolver, identity_resolver

logger = logging.getLogger(__name__)

TOKEN_PREFIX = "token "

token_header = APIKeyHeader(name="Authorization", auto_error=False)


@dataclass
class AuthContext:
    """The caller's raw GitHub token and the identity it resolved to."""

    token: str
    identity: GitHubIdentity

    @property
    def login(self) -> str:
        return self.identity.login


def extract_token(authorization: str | None) -> str | None:
    """Return the token from a ``token <value>`` header, or None if malformed."""
    if not authorization or not authorization.startswith(TOKEN_PREFIX):
        return None
    token = authorization[len(TOKEN_PREFIX) :].strip()
    return token or None


def get_identity_resolver() -> IdentityResolver:
    return identity_resolver


async def get_current_identity(
    authorization: str | None = Depends(token_header),
    resolver: IdentityResolver = Depends(get_identity_resolver),
) -> AuthContext:
    """
    Resolve the caller's GitHub identity from the Authorization header.

    Raises 401 "Unauthorized" when the header is absent or malformed and
    401 "Invalid token" when GitHub does not accept the token.
    """
    token = extract_token(authorization)
    if token is None:
        raise UnauthorizedError()

    try:
        identity = await resolver.resolve(token)
    except (GitHubAPIError, httpx.HTTPError, KeyError, ValueError) as e:
        logger.info(f"Token resolution failed: {e}")
        raise UnauthorizedError("Invalid token") from None

    return AuthContext(token=token, identity=identity)


# Type aliases for cleaner dependency injection
DbSession = Annotated[AsyncSession, Depends(get_db)]
CurrentIdentity = Annotated[AuthContext, Depends(get_current_identity)]
