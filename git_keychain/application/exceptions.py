"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base exception for application errors."""


class CredentialFetchError(ApplicationError):
    """Raised when a fatal keychain error aborts the credential fetch."""
