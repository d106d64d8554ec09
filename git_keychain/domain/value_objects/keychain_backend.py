"""Keychain backend value object."""

from enum import StrEnum, auto


class KeychainBackend(StrEnum):
    """Source used to look up account credentials."""

    GIT = auto()
    MACOS = auto()

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        """Human-readable display name."""
        match self:
            case KeychainBackend.GIT:
                return "git credential helper"
            case KeychainBackend.MACOS:
                return "Mac OS X keychain"
