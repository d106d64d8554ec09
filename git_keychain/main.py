#!/usr/bin/env python3
"""
Git Keychain Credentials

Composition root and application entry point.
Wires together all layers following hexagonal architecture principles.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import TYPE_CHECKING

from . import __version__
from .application.exceptions import CredentialFetchError
from .application.use_cases import FetchKeychainCredentials, ResolveAccountCredentials
from .domain.value_objects import KeychainBackend
from .infrastructure.adapters import AsyncioCommandRunner, GitCredentialHelper, MacOSKeychain
from .infrastructure.config import Settings, load_settings

if TYPE_CHECKING:
    from .application.ports import CredentialSource
    from .domain.entities import Credential

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


class ApplicationContainer:
    """
    Dependency injection container.

    Responsible for creating and wiring all application components.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize container with settings."""
        self._settings = settings

    def create_credential_source(self) -> CredentialSource:
        """Create the credential source adapter for the configured backend."""
        match self._settings.backend:
            case KeychainBackend.GIT:
                return GitCredentialHelper(
                    AsyncioCommandRunner(),
                    git_executable=self._settings.git_executable,
                )
            case KeychainBackend.MACOS:
                return MacOSKeychain()

    def create_fetch_use_case(self) -> FetchKeychainCredentials:
        """Create the main use case with all dependencies."""
        resolver = ResolveAccountCredentials(self.create_credential_source())
        return FetchKeychainCredentials(resolver, logger=logger)


class Application:
    """
    Main application orchestrator.

    Resolves the configured accounts and reports what was found.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize application with settings."""
        self._settings = settings
        self._container = ApplicationContainer(settings)

    async def fetch_credentials(self) -> list[Credential]:
        """Resolve credentials for all configured accounts."""
        use_case = self._container.create_fetch_use_case()
        return await use_case.execute(self._settings.accounts)

    async def run(self) -> int:
        """
        Run the credential fetch.

        Returns:
            Exit code (0 for success, 1 for failure).
        """
        accounts = self._settings.accounts
        if not accounts:
            logger.warning("No keychain accounts configured (set KEYCHAIN_ACCOUNTS)")
            return 0

        logger.info(
            "Fetching credentials for %d account(s) from the %s",
            len(accounts),
            self._settings.backend.display_name,
        )

        try:
            credentials = await self.fetch_credentials()
        except CredentialFetchError as e:
            logger.error("%s", e)
            return 1

        for credential in credentials:
            logger.info(
                "Resolved credentials for %s",
                credential.describe(include_username=self._settings.show_usernames),
            )
        logger.info("Resolved %d of %d account(s)", len(credentials), len(accounts))
        return 0


async def async_main() -> int:
    """Async entry point."""
    try:
        logger.info("Git Keychain Credentials %s starting...", __version__)

        settings = load_settings()
        logging.getLogger().setLevel(settings.log_level.upper())

        app = Application(settings)
        return await app.run()

    except ValueError as e:
        logger.error("Configuration error: %s", e)
        return 1
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        return 0
    except Exception:
        logger.exception("Unexpected error")
        return 1


def main() -> None:
    """Main entry point."""
    exit_code = asyncio.run(async_main())
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
