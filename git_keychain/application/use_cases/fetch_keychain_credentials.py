"""Use case for fetching credentials for all declared keychain accounts."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from ...domain.exceptions import AccountNotFoundError, FatalKeychainError, KeychainError
from ..exceptions import CredentialFetchError

if TYPE_CHECKING:
    from ...domain.entities import Credential, KeychainAccount
    from .resolve_account_credentials import ResolveAccountCredentials

LOG_PREFIX = "[keychain]"


class FetchKeychainCredentials:
    """
    Use case for fetching the credentials of every declared account.

    Each account is resolved independently. Accounts that cannot be resolved
    are logged and skipped, except for fatal errors, which abort the fetch.
    """

    def __init__(
        self,
        resolver: ResolveAccountCredentials,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        """
        Initialize the use case.

        Args:
            resolver: Use case resolving a single account.
            logger: Host logger for skipped accounts; defaults to the module logger.
        """
        self._resolver = resolver
        self._logger = logger or logging.getLogger(__name__)

    async def execute(self, accounts: Sequence[KeychainAccount]) -> list[Credential]:
        """
        Resolve all accounts.

        Returns:
            Resolved credentials, in account order.

        Raises:
            CredentialFetchError: If any account failed with a fatal error.
        """
        results: list[tuple[KeychainAccount, Credential | KeychainError]] = []
        for account in accounts:
            try:
                results.append((account, await self._resolver.execute(account)))
            except KeychainError as e:
                results.append((account, e))

        for account, result in results:
            match result:
                case FatalKeychainError(message=message):
                    msg = f"{LOG_PREFIX} Credential fetch for {account} failed: {message}"
                    raise CredentialFetchError(msg) from result
                case AccountNotFoundError(message=message):
                    self._logger.info("%s No keychain account found for %s: %s", LOG_PREFIX, account, message)
                case KeychainError(message=message):
                    self._logger.info(
                        "%s Could not fetch keychain credentials for %s: %s",
                        LOG_PREFIX,
                        account,
                        message,
                    )

        return [result for _, result in results if not isinstance(result, KeychainError)]
