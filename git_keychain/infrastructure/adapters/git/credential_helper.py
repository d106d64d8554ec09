"""Credential source backed by the configured git credential helper."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ....domain.entities import Credential
from ....domain.exceptions import AccountNotFoundError, CommandFailedError, ParseError
from ....domain.value_objects import CredentialRequest, GitConfigOption
from .credential_parser import parse_credential_output
from .option_parser import parse_config_option

if TYPE_CHECKING:
    from ....application.ports import CommandRunner
    from ....domain.value_objects import ServiceAddress

logger = logging.getLogger(__name__)


class GitCredentialHelper:
    """
    Credential source using git's credential helper protocol.

    Implements the CredentialSource port by running the helper named in
    ``git config credential.helper`` with the ``get`` action.
    """

    def __init__(self, runner: CommandRunner, *, git_executable: str = "git") -> None:
        """
        Initialize the credential helper source.

        Args:
            runner: Adapter used to run git and the credential helper.
            git_executable: Name or path of the git binary.
        """
        self._runner = runner
        self._git = git_executable

    async def lookup(
        self,
        address: ServiceAddress,
        realm: str,
        username: str | None = None,
    ) -> Credential:
        """
        Fetch credentials from the configured git credential helper.

        Raises:
            CommandFailedError: If git or the helper failed, or returned unparsable output.
            AccountNotFoundError: If the helper did not return a username and password.
        """
        helper = await self.configured_helper()
        request = CredentialRequest(
            protocol=address.scheme,
            host=address.host,
            realm=realm,
            username=username,
        )

        logger.debug("Requesting credentials for %s from %s", address.host, helper.helper_command)
        output = await self._runner.run([helper.helper_command, "get"], request.encode())

        try:
            fields = parse_credential_output(output)
        except ParseError as e:
            msg = f"Failed to parse git credential helper output: {e}"
            raise CommandFailedError(msg) from e

        found_username = fields.get("username")
        if found_username is None:
            msg = "No username returned in git credential output"
            raise AccountNotFoundError(msg)

        password = fields.get("password")
        if password is None:
            msg = "No password returned in git credential output"
            raise AccountNotFoundError(msg)

        return Credential(realm=realm, host=address.host, username=found_username, password=password)

    async def configured_helper(self) -> GitConfigOption:
        """
        Read and parse the ``credential.helper`` git setting.

        Raises:
            CommandFailedError: If git failed or the value could not be parsed.
        """
        output = await self._runner.run([self._git, "config", "credential.helper"])

        try:
            return parse_config_option(output.strip())
        except ParseError as e:
            raise CommandFailedError(str(e)) from e
