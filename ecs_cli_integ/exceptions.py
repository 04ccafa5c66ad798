"""Errors raised by the ecs-cli integration harness."""

from typing import List, Optional


class EcsCliIntegError(Exception):
    """Base class of all harness errors which are not test assertion failures."""


class SessionSetupError(EcsCliIntegError):
    """Raised when no boto session (credentials or region) can be established, nothing can be evaluated then."""


class CommandFailedError(AssertionError):
    """
    Raised when an invocation of the CLI under test did not exit successfully. It's an ``AssertionError`` so
    pytest reports it as a failing test, with the captured output of the command attached.
    """

    def __init__(self, cmd: List[str], exit_code: Optional[int], output: str):
        self.cmd = cmd
        self.exit_code = exit_code
        self.output = output
        super().__init__(f"Error running {cmd} (exit code {exit_code})\nOutput: {output}")
