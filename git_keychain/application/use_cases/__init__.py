"""Application use cases."""

from .fetch_keychain_credentials import FetchKeychainCredentials
from .resolve_account_credentials import ResolveAccountCredentials

__all__ = [
    "FetchKeychainCredentials",
    "ResolveAccountCredentials",
]
