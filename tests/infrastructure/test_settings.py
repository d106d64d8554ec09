"""Tests for environment-based settings."""

from __future__ import annotations

import pytest

from git_keychain.domain.entities import KeychainAccount
from git_keychain.domain.value_objects import KeychainBackend
from git_keychain.infrastructure.config import Settings, load_settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Defaults should use git with no accounts."""
        for key in ("KEYCHAIN_ACCOUNTS", "KEYCHAIN_BACKEND", "GIT_EXECUTABLE", "LOG_LEVEL", "SHOW_USERNAMES"):
            monkeypatch.delenv(key, raising=False)

        settings = load_settings()

        assert settings.accounts == []
        assert settings.backend is KeychainBackend.GIT
        assert settings.git_executable == "git"
        assert settings.log_level == "INFO"
        assert settings.show_usernames is True

    def test_accounts_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Accounts should be parsed from a JSON array."""
        monkeypatch.setenv(
            "KEYCHAIN_ACCOUNTS",
            '[{"realm": "Nexus", "address": "https://repo.example.org", "username": "bob"},'
            ' {"realm": "Artifactory", "address": "https://art.example.org"}]',
        )

        settings = load_settings()

        assert settings.accounts == [
            KeychainAccount(realm="Nexus", address="https://repo.example.org", username="bob"),
            KeychainAccount(realm="Artifactory", address="https://art.example.org"),
        ]

    def test_backend_is_case_insensitive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Backend names should be case-insensitive."""
        monkeypatch.setenv("KEYCHAIN_BACKEND", "MacOS")
        assert load_settings().backend is KeychainBackend.MACOS

    def test_invalid_backend(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Unknown backends should be rejected at startup."""
        monkeypatch.setenv("KEYCHAIN_BACKEND", "wincred")
        with pytest.raises(ValueError, match="Invalid KEYCHAIN_BACKEND"):
            load_settings()

    def test_invalid_json(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Malformed account JSON should be rejected."""
        monkeypatch.setenv("KEYCHAIN_ACCOUNTS", "[{")
        with pytest.raises(ValueError, match="not valid JSON"):
            load_settings()

    def test_accounts_must_be_objects(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Accounts must be a JSON array of objects."""
        monkeypatch.setenv("KEYCHAIN_ACCOUNTS", '["https://example.org"]')
        with pytest.raises(ValueError, match="array of objects"):
            load_settings()

    def test_empty_git_executable(self) -> None:
        """An empty git executable is invalid."""
        settings = Settings(git_executable="")
        with pytest.raises(ValueError, match="GIT_EXECUTABLE"):
            settings.validate()
