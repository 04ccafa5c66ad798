import logging
import os
from typing import List, Optional, Union

from ecs_cli_integ import constants
from ecs_cli_integ.constants import (
    DEFAULT_ECS_CLI_BIN_PATH,
    DEFAULT_MAX_RETRIES,
    DEFAULT_RETRY_INTERVAL,
    ENV_BUILD_ID,
    ENV_ECS_CLI_BIN_PATH,
    ENV_REGION,
    ENV_TEST_TARGET,
    FALSE_STRINGS,
    LOG_LEVELS,
    ROOT_FOLDER,
    TEST_TARGET_AWS_CLOUD,
    TRUE_STRINGS,
)

LOG = logging.getLogger(__name__)


def eval_log_type(env_var_name: str) -> Union[str, bool]:
    """Get the log type from environment variable"""
    log_type = os.environ.get(env_var_name, "").lower().strip()
    return log_type if log_type in LOG_LEVELS else False


def parse_boolean_env(env_var_name: str) -> Optional[bool]:
    """Parse the value of the given env variable and return True/False, or None if it is not a boolean value."""
    value = os.environ.get(env_var_name, "").lower().strip()
    if value in TRUE_STRINGS:
        return True
    if value in FALSE_STRINGS:
        return False
    return None


def is_env_true(env_var_name: str) -> bool:
    """Whether the given environment variable has a truthy value."""
    return os.environ.get(env_var_name, "").lower().strip() in TRUE_STRINGS


def is_env_not_false(env_var_name: str) -> bool:
    """Whether the given environment variable is empty or has a truthy value."""
    return os.environ.get(env_var_name, "").lower().strip() not in FALSE_STRINGS


def parse_int_env(env_var_name: str, default: int) -> int:
    """Parse the value of the given env variable as a positive int, falling back to the default."""
    value = os.environ.get(env_var_name, "").strip()
    if not value:
        return default
    try:
        parsed = int(value)
    except ValueError:
        LOG.warning("Ignoring non-integer value %r of %s", value, env_var_name)
        return default
    if parsed <= 0:
        LOG.warning("Ignoring non-positive value %r of %s", value, env_var_name)
        return default
    return parsed


def load_environment(profiles: str = None, env=os.environ) -> List[str]:
    """Loads the environment variables from {CONFIG_DIR}/{profile}.env, for each profile listed in the profiles.
    :param env: environment to load profile to. Defaults to `os.environ`
    :param profiles: a comma separated list of profiles to load (defaults to "default")
    :returns str: the list of the actually loaded profiles (might be the fallback)
    """
    if not profiles:
        profiles = "default"

    profiles = profiles.split(",")
    environment = {}
    import dotenv

    for profile in profiles:
        profile = profile.strip()
        path = os.path.join(CONFIG_DIR, f"{profile}.env")
        if not os.path.exists(path):
            continue
        environment.update(dotenv.dotenv_values(path))

    for k, v in environment.items():
        # we do not want to override the environment
        if k not in env and v is not None:
            env[k] = v

    return profiles


# directory holding the optional <profile>.env files
CONFIG_DIR = os.environ.get(
    "ECS_CLI_INTEG_CONFIG_DIR", os.path.expanduser(os.path.join("~", ".ecs-cli-integ"))
)

# profiles have to be loaded before any other variable is read
LOADED_PROFILES = load_environment(os.environ.get("ECS_CLI_INTEG_PROFILE"))

# whether debug output should be enabled
DEBUG = is_env_true("DEBUG")

# log level, one of LOG_LEVELS, overrides DEBUG
ECS_CLI_INTEG_LOG = eval_log_type("ECS_CLI_INTEG_LOG")

# disable retries and long timeouts of the boto clients
TEST_DISABLE_RETRIES_AND_TIMEOUTS = is_env_true("TEST_DISABLE_RETRIES_AND_TIMEOUTS")

# how often, and how many seconds apart, remote state is polled before a test fails
MAX_RETRIES = parse_int_env("ECS_CLI_INTEG_MAX_RETRIES", DEFAULT_MAX_RETRIES)
RETRY_INTERVAL = parse_int_env("ECS_CLI_INTEG_RETRY_INTERVAL", DEFAULT_RETRY_INTERVAL)


# the following are read on every access, they are commonly changed by CI jobs and tests


def is_aws_cloud() -> bool:
    return os.environ.get(ENV_TEST_TARGET, "") == TEST_TARGET_AWS_CLOUD


def region_name() -> Optional[str]:
    return os.environ.get(ENV_REGION) or None


def build_id() -> str:
    return os.environ.get(ENV_BUILD_ID, "")


def ecs_cli_bin_path() -> str:
    """
    Returns the path of the ecs-cli binary under test. ``ECS_CLI_BIN_PATH`` takes precedence, otherwise the
    binary is expected in ``bin/local`` of the root folder. Relative paths are resolved against the root folder.
    """
    path = os.environ.get(ENV_ECS_CLI_BIN_PATH) or DEFAULT_ECS_CLI_BIN_PATH
    path = os.path.expanduser(path)
    if not os.path.isabs(path):
        path = os.path.join(ROOT_FOLDER, path)
    return path


def collect_config_items() -> List[tuple]:
    """Returns a list of key-value tuples of the effective configuration, used for diagnostic output."""
    return [
        ("DEBUG", DEBUG),
        ("ECS_CLI_INTEG_LOG", ECS_CLI_INTEG_LOG),
        ("MAX_RETRIES", MAX_RETRIES),
        ("RETRY_INTERVAL", RETRY_INTERVAL),
        ("TEST_DISABLE_RETRIES_AND_TIMEOUTS", TEST_DISABLE_RETRIES_AND_TIMEOUTS),
        ("LOADED_PROFILES", LOADED_PROFILES),
        (ENV_REGION, region_name()),
        (ENV_BUILD_ID, build_id()),
        (ENV_TEST_TARGET, os.environ.get(ENV_TEST_TARGET, "")),
        (ENV_ECS_CLI_BIN_PATH, ecs_cli_bin_path()),
        ("VERSION", constants.VERSION),
    ]
