"""Symmetric encryption for the GitHub access token kept by clients.

Uses Fernet symmetric encryption (AES-128-CBC with HMAC-SHA256). The Fernet
key is derived from ``settings.token_encryption_key`` with SHA-256, so any
build-time secret string can be configured.

The cipher protects the token from casual inspection in client-side storage.
It is not a security boundary: whoever holds the secret can decrypt.
"""

import base64
import hashlib
import logging

from cryptography.fernet import Fernet, InvalidToken

from app.config import settings

logger = logging.getLogger(__name__)


def derive_fernet_key(secret: str) -> bytes:
    """Turn an arbitrary secret string into a 32-byte URL-safe base64 Fernet key."""
    digest = hashlib.sha256(secret.encode()).digest()
    return base64.urlsafe_b64encode(digest)


class TokenCipher:
    """Encrypts and decrypts token strings.

    Empty input encrypts to an empty string. Decryption never raises: empty,
    malformed, or foreign ciphertext all decrypt to an empty string so callers
    can treat "no usable token" uniformly.
    """

    def __init__(self, secret: str | None = None) -> None:
        if secret is None:
            secret = settings.token_encryption_key
            if not secret and not settings.debug:
                logger.warning(
                    "token_encryption_key is not configured. "
                    "Stored tokens are encrypted with an empty secret."
                )
        self._cipher = Fernet(derive_fernet_key(secret))

    def encrypt(self, plaintext: str) -> str:
        """Encrypt a plaintext string.

        Returns:
            The Fernet token (URL-safe base64), or "" for empty input.
        """
        if not plaintext:
            return ""
        return self._cipher.encrypt(plaintext.encode()).decode()

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt a Fernet token produced by :meth:`encrypt`.

        Returns:
            The plaintext, or "" when the input is empty or cannot be decrypted.
        """
        if not ciphertext:
            return ""

        try:
            return self._cipher.decrypt(ciphertext.encode()).decode()
        except (InvalidToken, ValueError, UnicodeError):
            logger.debug("Failed to decrypt token, treating as absent")
            return ""


# Singleton instance for application-wide use
token_cipher = TokenCipher()
