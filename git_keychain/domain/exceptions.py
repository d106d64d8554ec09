"""Domain exceptions."""

from collections.abc import Sequence


class DomainError(Exception):
    """Base exception for domain errors."""


class ParseError(DomainError):
    """Raised when git configuration or credential helper output is malformed."""


class KeychainError(DomainError):
    """Base exception for keychain lookups that did not yield a credential."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class CommandFailedError(KeychainError):
    """Raised when a command could not be run, or its output could not be used."""


class CommandLaunchError(CommandFailedError):
    """Raised when a command could not be started."""


class CommandOutputError(CommandFailedError):
    """Raised when a command's standard output could not be read or decoded."""


class CommandExitError(CommandFailedError):
    """Raised when a command exits with a non-zero status."""

    def __init__(self, argv: Sequence[str], exit_code: int) -> None:
        super().__init__(f"Process {' '.join(argv)} returned a non-zero exit code: {exit_code}")
        self.argv = tuple(argv)
        self.exit_code = exit_code


class FatalKeychainError(KeychainError):
    """Raised when an account is unusable; aborts the whole credential fetch."""


class AccountNotFoundError(KeychainError):
    """Raised when the keychain did not supply a required account field."""


class UnsupportedKeychainError(KeychainError):
    """Raised when the requested keychain backend is not supported."""
