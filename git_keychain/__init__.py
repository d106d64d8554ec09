"""Git Keychain Credentials - resolve publish credentials through git credential helpers."""

__version__ = "1.0.0"
