"""Application settings loaded from environment variables."""

import json
import os
from dataclasses import dataclass, field
from functools import cached_property

from ...domain.entities import KeychainAccount
from ...domain.value_objects import KeychainBackend


def _env_bool(key: str, default: bool = False) -> bool:
    """Get boolean from environment variable."""
    return os.environ.get(key, str(default)).lower() in ("true", "1", "yes")


def _env_str(key: str, default: str = "") -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


@dataclass
class Settings:
    """Application settings container."""

    # Accounts, as a JSON array of {"realm", "address", "username"} objects
    keychain_accounts: str = field(default_factory=lambda: _env_str("KEYCHAIN_ACCOUNTS", "[]"))
    keychain_backend: str = field(default_factory=lambda: _env_str("KEYCHAIN_BACKEND", "git"))

    # Git
    git_executable: str = field(default_factory=lambda: _env_str("GIT_EXECUTABLE", "git"))

    # Output
    log_level: str = field(default_factory=lambda: _env_str("LOG_LEVEL", "INFO"))
    show_usernames: bool = field(default_factory=lambda: _env_bool("SHOW_USERNAMES", default=True))

    def validate(self) -> None:
        """Validate settings, parsing accounts and backend eagerly."""
        if not self.git_executable:
            msg = "GIT_EXECUTABLE must not be empty"
            raise ValueError(msg)

        # Touch the parsed values so errors surface at startup.
        _ = self.backend
        _ = self.accounts

    @cached_property
    def backend(self) -> KeychainBackend:
        """Get the configured keychain backend."""
        try:
            return KeychainBackend(self.keychain_backend.lower())
        except ValueError:
            choices = ", ".join(b.value for b in KeychainBackend)
            msg = f"Invalid KEYCHAIN_BACKEND: {self.keychain_backend} (use one of: {choices})"
            raise ValueError(msg) from None

    @cached_property
    def accounts(self) -> list[KeychainAccount]:
        """Get the declared keychain accounts."""
        try:
            raw = json.loads(self.keychain_accounts or "[]")
        except json.JSONDecodeError as e:
            msg = f"KEYCHAIN_ACCOUNTS is not valid JSON: {e}"
            raise ValueError(msg) from e

        if not isinstance(raw, list) or not all(isinstance(item, dict) for item in raw):
            msg = "KEYCHAIN_ACCOUNTS must be a JSON array of objects"
            raise ValueError(msg)

        return [KeychainAccount.from_dict(item) for item in raw]


def load_settings() -> Settings:
    """Load and validate settings from environment."""
    settings = Settings()
    settings.validate()
    return settings
