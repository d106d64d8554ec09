"""Domain entities - Objects with identity and lifecycle."""

from .account import KeychainAccount
from .credential import Credential

__all__ = [
    "Credential",
    "KeychainAccount",
]
