import logging
import os
import subprocess
from typing import AnyStr, Dict, List, Optional, Union

from ecs_cli_integ.constants import DEFAULT_ENCODING

from .strings import to_str

LOG = logging.getLogger(__name__)


def run(
    cmd: Union[str, List[str]],
    print_error=True,
    stderr=subprocess.STDOUT,
    env_vars: Optional[Dict[AnyStr, AnyStr]] = None,
    inherit_env=True,
    cwd: str = None,
    timeout: Optional[float] = None,
) -> str:
    """
    Runs the given command synchronously and returns its decoded output. Per default stderr is redirected into
    the returned output.

    :raises subprocess.CalledProcessError: if the command exits with a non-zero code, the error carries the output
    """
    LOG.debug("Executing command: %s", cmd)
    env_dict = os.environ.copy() if inherit_env else {}
    if env_vars:
        env_dict.update(env_vars)
    env_dict = {to_str(k): to_str(str(v)) for k, v in env_dict.items()}

    # a list is passed to the executable as-is, a string is run through the shell
    shell = not isinstance(cmd, list)

    try:
        output = subprocess.check_output(
            cmd, shell=shell, stderr=stderr, env=env_dict, cwd=cwd, timeout=timeout
        )
        return output.decode(DEFAULT_ENCODING)
    except subprocess.CalledProcessError as e:
        if print_error:
            LOG.error(
                "'%s': exit code %s; output: %s",
                cmd,
                e.returncode,
                to_str(e.output or b"", errors="replace"),
            )
        raise e
