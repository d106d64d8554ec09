"""Command runner implementation using asyncio subprocesses."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from ....domain.exceptions import CommandExitError, CommandLaunchError, CommandOutputError

logger = logging.getLogger(__name__)


class AsyncioCommandRunner:
    """
    Run external commands with asyncio subprocesses.

    Implements the CommandRunner port. Standard error is inherited from the
    parent process so helper diagnostics stay visible to the operator.
    """

    async def run(self, argv: Sequence[str], stdin: bytes | None = None) -> str:
        """
        Run a command, optionally feeding its standard input, and capture stdout.

        Standard input is written by a separate task so that a helper producing
        more output than the pipe buffer holds cannot deadlock the read.

        Raises:
            CommandLaunchError: If the command could not be started.
            CommandOutputError: If stdout could not be read or decoded as UTF-8.
            CommandExitError: If the command exited with a non-zero status.
        """
        command = " ".join(argv)

        try:
            proc = await asyncio.create_subprocess_exec(
                *argv,
                stdin=asyncio.subprocess.PIPE if stdin is not None else asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=None,
            )
        except (OSError, ValueError) as e:
            logger.debug("Command execution failed: %s", e)
            msg = f"Failed to start {command}: {e}"
            raise CommandLaunchError(msg) from e

        writer: asyncio.Task[None] | None = None
        if stdin is not None:
            writer = asyncio.create_task(self._feed_stdin(proc, stdin))

        output: str | None = None
        read_error: Exception | None = None
        try:
            try:
                data = await proc.stdout.read()  # type: ignore[union-attr]
                output = data.decode("utf-8")
            except (OSError, UnicodeDecodeError) as e:
                read_error = e

            if writer is not None:
                await writer

            exit_code = await proc.wait()
        finally:
            # Only reached with a live child when the caller cancelled us.
            if writer is not None and not writer.done():
                writer.cancel()
                await asyncio.gather(writer, return_exceptions=True)
            if proc.returncode is None:
                try:
                    proc.kill()
                except ProcessLookupError:
                    pass
                await proc.wait()

        if exit_code != 0:
            raise CommandExitError(argv, exit_code)

        if read_error is not None:
            msg = f"Failed to read process' {command} stdout stream: {read_error}"
            raise CommandOutputError(msg) from read_error

        return output or ""

    @staticmethod
    async def _feed_stdin(proc: asyncio.subprocess.Process, data: bytes) -> None:
        """Write data to the process' stdin and close it, logging any failure."""
        stream = proc.stdin
        if stream is None:
            return

        try:
            stream.write(data)
            await stream.drain()
        except OSError as e:
            # Helpers may exit or close stdin before reading the whole request.
            logger.warning("Failed to write bytes to process' input stream: %s", e)
        finally:
            stream.close()
