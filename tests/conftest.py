"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from git_keychain.domain.entities import KeychainAccount
from git_keychain.domain.exceptions import CommandExitError
from git_keychain.domain.value_objects import ServiceAddress

GIT_CONFIG_HELPER = ("git", "config", "credential.helper")


class FakeCommandRunner:
    """CommandRunner returning scripted outputs keyed by argv."""

    def __init__(self, responses: dict[tuple[str, ...], str | Exception] | None = None) -> None:
        self.responses = dict(responses or {})
        self.calls: list[tuple[tuple[str, ...], bytes | None]] = []

    async def run(self, argv: Sequence[str], stdin: bytes | None = None) -> str:
        key = tuple(argv)
        self.calls.append((key, stdin))
        response = self.responses.get(key, CommandExitError(argv, 127))
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def fake_runner() -> FakeCommandRunner:
    """Runner with `osxkeychain` configured as the credential helper."""
    return FakeCommandRunner(
        {
            GIT_CONFIG_HELPER: "osxkeychain\n",
            ("git-credential-osxkeychain", "get"): "username=bob\npassword=secret\n",
        }
    )


@pytest.fixture
def https_address() -> ServiceAddress:
    """Address of an HTTPS repository."""
    return ServiceAddress(scheme="https", host="example.org")


@pytest.fixture
def account() -> KeychainAccount:
    """A keychain account with a known username."""
    return KeychainAccount(
        realm="Sonatype Nexus Repository Manager",
        address="https://example.org/content/repositories/releases",
        username="bob",
    )


@pytest.fixture
def anonymous_account() -> KeychainAccount:
    """A keychain account without a username."""
    return KeychainAccount(
        realm="Artifactory Realm",
        address="https://repo.example.com/artifactory",
    )
