"""Service address value object."""

import re
from dataclasses import dataclass
from typing import Self

import httpx

from ..exceptions import FatalKeychainError

# Host as written in the authority, brackets kept around IPv6 literals.
_WRITTEN_HOST = re.compile(r"[a-zA-Z][a-zA-Z0-9+.-]*://(?:[^/?#]*@)?(?P<host>\[[^\]/?#]*\]|[^:/?#]*)")


@dataclass(frozen=True, slots=True)
class ServiceAddress:
    """Scheme and host of a repository address."""

    scheme: str
    host: str

    @classmethod
    def parse(cls, address: str) -> Self:
        """
        Parse a repository URL.

        The URL is validated with httpx, but the host is kept exactly as the
        address spells it: credential helpers key their entries on that form,
        so case, punycode and IPv6 brackets are not normalized.

        Raises:
            FatalKeychainError: If the address is not an absolute URL with a host.
        """
        try:
            url = httpx.URL(address)
        except (httpx.InvalidURL, TypeError) as e:
            msg = f"Could not parse URL {address!r}: {e}"
            raise FatalKeychainError(msg) from e

        if not url.scheme or not url.host:
            msg = f"Could not parse URL {address!r}: expected an absolute URL with scheme and host"
            raise FatalKeychainError(msg)

        match = _WRITTEN_HOST.match(address)
        host = match["host"] if match and match["host"] else url.raw_host.decode("ascii")
        return cls(scheme=url.scheme, host=host)
