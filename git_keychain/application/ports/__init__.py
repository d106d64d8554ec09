"""Application ports - Interfaces for external adapters."""

from .command_runner import CommandRunner
from .credential_source import CredentialSource

__all__ = [
    "CommandRunner",
    "CredentialSource",
]
