"""
Runs the ecs-cli binary under test as a subprocess.
"""
import dataclasses
import logging
import subprocess
import time
from typing import List, Optional

from ecs_cli_integ import config
from ecs_cli_integ.constants import WINDOWS_BINARY_SUFFIX
from ecs_cli_integ.exceptions import CommandFailedError
from ecs_cli_integ.utils.platform import is_windows
from ecs_cli_integ.utils.run import run
from ecs_cli_integ.utils.strings import to_str

LOG = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class CommandResult:
    cmd: List[str]
    exit_code: Optional[int]
    output: str
    duration: float

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


def get_command_path() -> str:
    """Returns the path of the binary to run, with the platform specific suffix."""
    cmd_path = config.ecs_cli_bin_path()
    if is_windows() and not cmd_path.endswith(WINDOWS_BINARY_SUFFIX):
        cmd_path = cmd_path + WINDOWS_BINARY_SUFFIX
    return cmd_path


def get_command(args: List[str]) -> List[str]:
    """Returns the command line running the binary under test with the given arguments."""
    return [get_command_path(), *args]


class EcsCli:
    """Invokes the ecs-cli binary. Every call is a single attempt, failures are never retried."""

    def __init__(self, bin_path: str = None, env_vars: dict = None, timeout: float = None):
        """
        :param bin_path: the binary to run, defaults to ``get_command_path()``
        :param env_vars: additional environment variables for the process
        :param timeout: seconds after which a running command is killed
        """
        self.bin_path = bin_path
        self.env_vars = env_vars
        self.timeout = timeout

    def command(self, args: List[str]) -> List[str]:
        if self.bin_path:
            return [self.bin_path, *args]
        return get_command(args)

    def invoke(self, args: List[str], check: bool = True) -> CommandResult:
        """
        Runs the binary with the given arguments and captures the combined stdout and stderr.

        :param args: the arguments following the binary
        :param check: raise a ``CommandFailedError`` if the command did not exit with 0
        :return: the result of the invocation
        """
        cmd = self.command(args)
        start = time.monotonic()
        try:
            output = run(cmd, print_error=False, env_vars=self.env_vars, timeout=self.timeout)
            exit_code = 0
        except subprocess.CalledProcessError as e:
            output = to_str(e.output or b"", errors="replace")
            exit_code = e.returncode
        except subprocess.TimeoutExpired as e:
            output = to_str(e.output or b"", errors="replace")
            output += f"\ncommand timed out after {self.timeout} seconds"
            exit_code = None
        except OSError as e:
            # the binary is missing or not executable
            output = f"could not execute {cmd[0]}: {e}"
            exit_code = None

        result = CommandResult(
            cmd=cmd, exit_code=exit_code, output=output, duration=time.monotonic() - start
        )
        LOG.debug("%s exited with %s after %.1fs", cmd, exit_code, result.duration)

        if check and not result.ok:
            LOG.info("Command %s failed with exit code %s:\n%s", cmd, exit_code, output)
            raise CommandFailedError(cmd, exit_code, output)
        return result

    def up(
        self,
        cluster_name: str,
        capability_iam: bool = True,
        force: bool = True,
        check: bool = True,
    ) -> CommandResult:
        """Runs ``ecs-cli up -c <cluster_name> [--capability-iam] [--force]``."""
        args = ["up", "-c", cluster_name]
        if capability_iam:
            args.append("--capability-iam")
        if force:
            args.append("--force")
        return self.invoke(args, check=check)
