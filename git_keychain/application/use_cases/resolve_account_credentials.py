"""Use case for resolving the credentials of a single keychain account."""

import logging

from ...domain.entities import Credential, KeychainAccount
from ...domain.value_objects import ServiceAddress
from ..ports import CredentialSource

logger = logging.getLogger(__name__)


class ResolveAccountCredentials:
    """Resolve one account's credentials through a credential source."""

    def __init__(self, source: CredentialSource) -> None:
        """
        Initialize the use case.

        Args:
            source: Keychain adapter used to look up credentials.
        """
        self._source = source

    async def execute(self, account: KeychainAccount) -> Credential:
        """
        Resolve the credentials for an account.

        Returns:
            The resolved credential.

        Raises:
            FatalKeychainError: If the account address is not a valid URL.
            KeychainError: If the credential source could not supply a credential.
        """
        address = ServiceAddress.parse(account.address)
        logger.debug("Looking up credentials for %s", account)
        return await self._source.lookup(address, account.realm, account.username)
