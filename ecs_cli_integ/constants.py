import os

import ecs_cli_integ

# ecs-cli-integ version
VERSION = ecs_cli_integ.__version__

# root code folder
MODULE_MAIN_PATH = os.path.dirname(os.path.realpath(__file__))
ROOT_FOLDER = os.path.realpath(os.path.join(MODULE_MAIN_PATH, ".."))

# default location of the ecs-cli binary under test, relative to the root folder
DEFAULT_ECS_CLI_BIN_PATH = os.path.join("bin", "local", "ecs-cli")
WINDOWS_BINARY_SUFFIX = ".exe"

# prefix ecs-cli puts in front of the cluster name for the stack it creates on "up"
ECS_CLI_STACK_NAME_PREFIX = "amazon-ecs-cli-setup-"

# max_retries * retry_interval is how long we are willing to wait for a cluster to settle
DEFAULT_MAX_RETRIES = 10
DEFAULT_RETRY_INTERVAL = 30

# container instance status reported by ECS once the agent is connected
CONTAINER_INSTANCE_STATUS_ACTIVE = "ACTIVE"

# CloudFormation waiters
WAITER_STACK_DELETE_COMPLETE = "stack_delete_complete"

# environment variables
ENV_BUILD_ID = "CODEBUILD_BUILD_ID"
ENV_REGION = "AWS_DEFAULT_REGION"
ENV_ECS_CLI_BIN_PATH = "ECS_CLI_BIN_PATH"
ENV_TEST_TARGET = "TEST_TARGET"
TEST_TARGET_AWS_CLOUD = "AWS_CLOUD"

DEFAULT_ENCODING = "utf-8"

TRUE_STRINGS = ("1", "true", "True")
FALSE_STRINGS = ("0", "false", "False")

LOG_LEVELS = ("trace", "debug", "info", "warn", "error", "warning")
LOG_TRACE = "trace"
