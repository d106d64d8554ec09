"""Infrastructure adapters - Implementations of application ports."""

from .git import GitCredentialHelper
from .macos import MacOSKeychain
from .process import AsyncioCommandRunner

__all__ = [
    "AsyncioCommandRunner",
    "GitCredentialHelper",
    "MacOSKeychain",
]
