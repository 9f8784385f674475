"""Shell execution utilities.

Provides safe subprocess execution with proper error handling.
"""

import logging
import shutil
import subprocess
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of a shell command execution.

    Attributes:
        stdout: Standard output from the command.
        stderr: Standard error from the command.
        returncode: Exit code of the command.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if command executed successfully."""
        return self.returncode == 0


def run_command(
    args: list[str],
    *,
    timeout: float | None = 60.0,
) -> CommandResult:
    """Execute a shell command and return the result.

    Args:
        args: Command and arguments to execute.
        timeout: Maximum time in seconds to wait for command.

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        subprocess.TimeoutExpired: If command exceeds timeout.
        FileNotFoundError: If command executable is not found.
    """
    result = subprocess.run(
        args,
        capture_output=True,
        text=True,
        check=False,
        timeout=timeout,
    )
    return CommandResult(
        stdout=result.stdout,
        stderr=result.stderr,
        returncode=result.returncode,
    )


def command_exists(name: str) -> bool:
    """Check if a command exists in the system PATH.

    Args:
        name: Command name to check.

    Returns:
        True if command exists, False otherwise.
    """
    return shutil.which(name) is not None


def sync_filesystems() -> bool:
    """Flush filesystem buffers with the external sync command.

    Diagnostic aid only: failures are logged and never raised.

    Returns:
        True if sync ran and exited cleanly, False otherwise.
    """
    if not command_exists("sync"):
        logger.warning("sync command not found, skipping filesystem sync")
        return False

    logger.info("Global filesystem sync")
    try:
        result = run_command(["sync"], timeout=None)
    except OSError as e:
        logger.warning("Filesystem sync failed: %s", e)
        return False

    if result.stdout:
        logger.info("sync stdout: %s", result.stdout.strip())
    if result.stderr:
        logger.warning("sync stderr: %s", result.stderr.strip())
    return result.success
