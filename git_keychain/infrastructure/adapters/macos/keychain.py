"""Mac OS X keychain credential source."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ....domain.exceptions import UnsupportedKeychainError

if TYPE_CHECKING:
    from ....domain.entities import Credential
    from ....domain.value_objects import ServiceAddress


class MacOSKeychain:
    """Credential source for the native Mac OS X keychain (not supported)."""

    async def lookup(
        self,
        address: ServiceAddress,
        realm: str,
        username: str | None = None,
    ) -> Credential:
        """Always raises; the native keychain is not supported."""
        # TODO: query `security find-internet-password -s <host> -r <protocol> [-a <username>]`
        msg = "The Mac OS X keychain is currently not supported"
        raise UnsupportedKeychainError(msg)
