"""Git credential helper adapter."""

from .credential_helper import GitCredentialHelper
from .credential_parser import parse_credential_output
from .option_parser import parse_config_option

__all__ = [
    "GitCredentialHelper",
    "parse_config_option",
    "parse_credential_output",
]
