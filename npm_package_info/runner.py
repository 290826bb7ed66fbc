"""Runs registry tool commands as subprocesses."""

from __future__ import annotations

import asyncio
import time

from .core.exceptions import CommandExecutionError
from .core.logging import get_logger
from .protocol import CommandOutcome

logger = get_logger(__name__)

COMMAND_NOT_FOUND_EXIT_CODE = 127

class CommandRunner:
    """Execute a shell command to completion and capture its output.

    No timeout is applied; a hung command stalls only the call awaiting it.
    """

    async def run(self, command: str) -> CommandOutcome:
        """
        Run ``command`` through the shell.

        Args:
            command: Full command line, arguments already quoted by the caller

        Returns:
            CommandOutcome with decoded stdout/stderr and the exit code

        Raises:
            CommandExecutionError: If the process could not be started or the
                shell could not find the executable
        """
        start_time = time.time()
        logger.debug("Executing command", command=command)

        try:
            process = await asyncio.create_subprocess_shell(
                command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            logger.error("Failed to start command", command=command, error=str(exc))
            raise CommandExecutionError(
                f"Failed to start command: {exc}",
                details={"command": command},
            ) from exc

        stdout_bytes, stderr_bytes = await process.communicate()

        outcome = CommandOutcome(
            command=command,
            stdout=stdout_bytes.decode("utf-8", errors="replace") if stdout_bytes else "",
            stderr=stderr_bytes.decode("utf-8", errors="replace") if stderr_bytes else "",
            exit_code=process.returncode,
        )

        logger.info(
            "Command completed",
            command=command,
            exit_code=outcome.exit_code,
            duration_ms=int((time.time() - start_time) * 1000),
            stdout_chars=len(outcome.stdout),
            stderr_chars=len(outcome.stderr),
        )

        # The shell's "command not found" status; its stderr would otherwise
        # read like a registry 404.
        if outcome.exit_code == COMMAND_NOT_FOUND_EXIT_CODE:
            raise CommandExecutionError(
                f"Command not found: {outcome.stderr.strip() or command}",
                details={"command": command, "exit_code": outcome.exit_code},
            )
        return outcome
