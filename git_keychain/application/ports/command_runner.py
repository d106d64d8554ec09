"""Port for running external commands - driven/secondary port."""

from collections.abc import Sequence
from typing import Protocol


class CommandRunner(Protocol):
    """
    Port for executing external programs.

    This is a driven (secondary) port that defines how the application
    runs git and credential helper processes.
    """

    async def run(self, argv: Sequence[str], stdin: bytes | None = None) -> str:
        """
        Run a command and capture its standard output.

        Args:
            argv: Program and arguments.
            stdin: Bytes to feed to the program's standard input, if any.

        Returns:
            The command's standard output decoded as UTF-8.

        Raises:
            CommandLaunchError: If the command could not be started.
            CommandOutputError: If standard output could not be read.
            CommandExitError: If the command exited with a non-zero status.
        """
        ...
