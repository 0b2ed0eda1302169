"""External command execution for provisioning steps.

Commands run in the project directory with their output streamed straight
to the terminal. Only the exit status is used for control flow.
"""

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


# =============================================================================
# Exceptions
# =============================================================================

class ExternalCommandError(Exception):
    """Base exception for external command failures."""

    def __init__(self, message: str, program: str):
        super().__init__(message)
        self.program = program


class CommandNotFoundError(ExternalCommandError):
    """Program is not installed or not in PATH."""
    pass


class CommandTimeoutError(ExternalCommandError):
    """Command did not finish within the configured timeout."""

    def __init__(self, message: str, program: str, timeout: int):
        super().__init__(message, program)
        self.timeout = timeout


class CommandFailedError(ExternalCommandError):
    """Command exited with a non-zero status."""

    def __init__(self, message: str, program: str, returncode: int):
        super().__init__(message, program)
        self.returncode = returncode


# =============================================================================
# Runner
# =============================================================================

class CommandRunner:
    """Runs external programs, blocking until they exit.

    Args:
        timeout: Optional limit in seconds per command (None waits forever)
    """

    def __init__(self, timeout: Optional[int] = None):
        self.timeout = timeout

    def run(self, working_dir: Path, program: str, *args: str) -> None:
        """Run ``program args...`` inside ``working_dir``.

        Raises:
            CommandNotFoundError: If the program cannot be found
            CommandTimeoutError: If the timeout elapses
            CommandFailedError: If the program exits non-zero
        """
        cmd = [program] + list(args)
        cmd_str = " ".join(cmd)
        logger.debug("Running %s in %s", cmd_str, working_dir)

        try:
            result = subprocess.run(cmd, cwd=working_dir, timeout=self.timeout)
        except FileNotFoundError:
            raise CommandNotFoundError(
                f"{program} is not installed or not in PATH", program
            )
        except subprocess.TimeoutExpired:
            raise CommandTimeoutError(
                f"Command timed out after {self.timeout}s: {cmd_str}",
                program,
                timeout=self.timeout,
            )

        if result.returncode != 0:
            raise CommandFailedError(
                f"Command failed with exit status {result.returncode}: {cmd_str}",
                program,
                returncode=result.returncode,
            )

    @staticmethod
    def is_available(program: str) -> bool:
        """Check whether ``program`` is on PATH."""
        return shutil.which(program) is not None
