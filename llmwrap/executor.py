import logging
import subprocess
import platform
from dataclasses import dataclass

from .errors import ExecutionError

# Configure logging
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExecutionOutcome:
    """Exit status of a finished command."""

    exit_code: int
    signaled: bool = False


class CommandExecutor:
    """Runs a confirmed command through the host shell."""

    def __init__(self, shell: str = "/bin/sh"):
        self.shell = shell

    def execute_command(self, command: str) -> ExecutionOutcome:
        """
        Execute a shell command with the caller's stdin, stdout and stderr.

        Args:
            command: The shell command to execute

        Returns:
            The child's ExecutionOutcome. A killed child reports 128 + signal.
        """
        logger.info(f"Executing command: {command}")

        try:
            if platform.system() == "Windows":
                # On Windows, let subprocess pick the command interpreter
                process = subprocess.Popen(command, shell=True)
            else:
                process = subprocess.Popen([self.shell, "-c", command])
        except OSError as e:
            logger.info(f"Failed to spawn shell '{self.shell}': {e}")
            raise ExecutionError(f"Failed to spawn shell: {e}") from e

        returncode = process.wait()

        if returncode < 0:
            logger.info(f"Command terminated by signal {-returncode}: {command}")
            return ExecutionOutcome(exit_code=128 - returncode, signaled=True)

        if returncode == 0:
            logger.info(f"Command executed successfully: {command}")
        else:
            logger.info(f"Command failed with return code {returncode}: {command}")
        return ExecutionOutcome(exit_code=returncode)
