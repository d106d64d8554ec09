"""Port for credential sources - driven/secondary port."""

from typing import Protocol

from ...domain.entities import Credential
from ...domain.value_objects import ServiceAddress


class CredentialSource(Protocol):
    """
    Port for looking up account credentials in a keychain.

    This is a driven (secondary) port that defines how the application
    retrieves a username and password for a service.
    """

    async def lookup(
        self,
        address: ServiceAddress,
        realm: str,
        username: str | None = None,
    ) -> Credential:
        """
        Look up the credentials for a service.

        Args:
            address: Scheme and host of the service.
            realm: Authentication realm.
            username: Username, if known.

        Returns:
            The resolved credential.

        Raises:
            KeychainError: If no credential could be resolved.
        """
        ...
