"""
Token to GitHub identity resolution.

Every dashboard request carries a GitHub token that has to be mapped to a
login before ownership can be checked. Looking that up on each request would
double the GitHub traffic, so resolved identities are kept for a short TTL.

Entries are keyed by the SHA-256 of the token so raw tokens never sit in
memory longer than the request that carried them. No locking: cache calls
never await, so they cannot interleave on the event loop.
"""

import hashlib
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from cachetools import TTLCache  # type: ignore[import-untyped]

from app.config import settings
from app.services.github.read_operations import GitHubReadOperations
from app.services.github.types import GitHubIdentity

logger = logging.getLogger(__name__)


def hash_token(token: str) -> str:
    """Return the hex SHA-256 digest used as the cache key for a token."""
    return hashlib.sha256(token.encode()).hexdigest()


@dataclass(frozen=True)
class CachedIdentity:
    """A cached identity and the (timer-relative) moment it expires."""

    identity: GitHubIdentity
    expires_at: float


class IdentityCache:
    """TTL cache of resolved identities keyed by token hash.

    Expired entries are never returned by :meth:`get` and are swept from the
    underlying cache on every :meth:`put`.
    """

    def __init__(
        self,
        ttl_seconds: float = 300.0,
        max_size: int = 1024,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._timer = timer
        self._cache: TTLCache[str, CachedIdentity] = TTLCache(
            maxsize=max_size, ttl=ttl_seconds, timer=timer
        )

    def get(self, token_hash: str) -> CachedIdentity | None:
        entry = self._cache.get(token_hash)
        if entry is None or entry.expires_at <= self._timer():
            return None
        return entry

    def put(self, token_hash: str, identity: GitHubIdentity) -> CachedIdentity:
        self._cache.expire()
        entry = CachedIdentity(identity=identity, expires_at=self._timer() + self.ttl_seconds)
        self._cache[token_hash] = entry
        return entry

    def clear(self) -> None:
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)


class IdentityResolver:
    """Resolves a GitHub token to the identity it belongs to, with caching."""

    def __init__(
        self,
        cache: IdentityCache,
        github_factory: Callable[[str], GitHubReadOperations] = GitHubReadOperations,
    ) -> None:
        self.cache = cache
        self._github_factory = github_factory

    async def resolve(self, token: str) -> GitHubIdentity:
        """Return the identity for ``token``.

        Raises:
            GitHubAPIError: GitHub rejected the token or could not answer.
            httpx.HTTPError: GitHub could not be reached.
        """
        key = hash_token(token)
        cached = self.cache.get(key)
        if cached is not None:
            return cached.identity

        identity = await self._github_factory(token).get_authenticated_user()
        self.cache.put(key, identity)
        logger.debug(f"Resolved GitHub identity {identity.login}")
        return identity


# Process-wide resolver used by the auth dependency; tests override the dependency
identity_resolver = IdentityResolver(
    IdentityCache(
        ttl_seconds=settings.identity_cache_ttl_seconds,
        max_size=settings.identity_cache_max_size,
    )
)
