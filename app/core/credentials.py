"""Persistence of the GitHub access token in a client key-value store.

Mirrors what a browser client keeps in local storage: one encrypted token
string and a tag recording how the token was obtained. The storage is any
mutable string mapping, which keeps the store usable from tests and scripts.
"""

from collections.abc import MutableMapping

from app.core.encryption import TokenCipher, token_cipher

ACCESS_TOKEN_KEY = "githubRepositoriesViewer-accessToken"
AUTH_METHOD_KEY = "githubRepositoriesViewer-authMethod"

AUTH_METHOD_OAUTH = "oauth"
AUTH_METHOD_MANUAL = "manual"


class CredentialStore:
    """Reads and writes the encrypted access token under fixed keys."""

    def __init__(
        self,
        storage: MutableMapping[str, str],
        cipher: TokenCipher | None = None,
    ) -> None:
        self._storage = storage
        self._cipher = cipher or token_cipher

    def save_token(self, token: str, auth_method: str = AUTH_METHOD_OAUTH) -> None:
        """Encrypt and store a token along with how it was obtained."""
        self._storage[ACCESS_TOKEN_KEY] = self._cipher.encrypt(token)
        self._storage[AUTH_METHOD_KEY] = auth_method

    def load_token(self) -> str:
        """Return the decrypted token, or "" when absent or unreadable."""
        return self._cipher.decrypt(self._storage.get(ACCESS_TOKEN_KEY, ""))

    @property
    def auth_method(self) -> str | None:
        return self._storage.get(AUTH_METHOD_KEY)

    def clear(self) -> None:
        """Forget the stored token and auth method."""
        self._storage.pop(ACCESS_TOKEN_KEY, None)
        self._storage.pop(AUTH_METHOD_KEY, None)
