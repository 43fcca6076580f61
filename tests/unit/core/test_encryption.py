"""Unit tests for token encryption and the credential store."""

from __future__ import annotations

from app.core.credentials import (
    ACCESS_TOKEN_KEY,
    AUTH_METHOD_KEY,
    AUTH_METHOD_MANUAL,
    CredentialStore,
)
from app.core.encryption import TokenCipher, derive_fernet_key


class TestTokenCipher:
    def setup_method(self):
        self.cipher = TokenCipher("test-secret")

    def test_round_trip(self):
        ciphertext = self.cipher.encrypt("gho_abc123")

        assert ciphertext != "gho_abc123"
        assert self.cipher.decrypt(ciphertext) == "gho_abc123"

    def test_empty_encrypts_to_empty(self):
        assert self.cipher.encrypt("") == ""

    def test_empty_decrypts_to_empty(self):
        assert self.cipher.decrypt("") == ""

    def test_malformed_decrypts_to_empty(self):
        assert self.cipher.decrypt("definitely-not-fernet") == ""
        assert self.cipher.decrypt("ünïcödé") == ""

    def test_foreign_key_decrypts_to_empty(self):
        ciphertext = TokenCipher("other-secret").encrypt("gho_abc123")

        assert self.cipher.decrypt(ciphertext) == ""

    def test_derived_key_is_stable(self):
        assert derive_fernet_key("s") == derive_fernet_key("s")
        assert len(derive_fernet_key("s")) == 44


class TestCredentialStore:
    def setup_method(self):
        self.storage: dict[str, str] = {}
        self.store = CredentialStore(self.storage, cipher=TokenCipher("test-secret"))

    def test_saves_encrypted_token_under_fixed_keys(self):
        self.store.save_token("gho_abc123")

        assert set(self.storage) == {ACCESS_TOKEN_KEY, AUTH_METHOD_KEY}
        assert self.storage[ACCESS_TOKEN_KEY] != "gho_abc123"
        assert self.storage[AUTH_METHOD_KEY] == "oauth"
        assert self.store.load_token() == "gho_abc123"

    def test_records_manual_auth_method(self):
        self.store.save_token("ghp_manual", auth_method=AUTH_METHOD_MANUAL)

        assert self.store.auth_method == "manual"

    def test_missing_token_loads_empty(self):
        assert self.store.load_token() == ""
        assert self.store.auth_method is None

    def test_tampered_token_loads_empty(self):
        self.store.save_token("gho_abc123")
        self.storage[ACCESS_TOKEN_KEY] = "tampered"

        assert self.store.load_token() == ""

    def test_clear_removes_both_keys(self):
        self.store.save_token("gho_abc123")
        self.storage["unrelated"] = "keep"

        self.store.clear()

        assert self.storage == {"unrelated": "keep"}
