"""Domain value objects - Immutable objects defined by their attributes."""

from .config_option import GitConfigOption
from .credential_request import CredentialRequest
from .keychain_backend import KeychainBackend
from .service_address import ServiceAddress

__all__ = [
    "CredentialRequest",
    "GitConfigOption",
    "KeychainBackend",
    "ServiceAddress",
]
