"""Native Mac OS X keychain adapter."""

from .keychain import MacOSKeychain

__all__ = ["MacOSKeychain"]
