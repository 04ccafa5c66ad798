import logging

import boto3
import botocore.config
from botocore.exceptions import BotoCoreError

from ecs_cli_integ import config
from ecs_cli_integ.aws.connect import ClientFactory, ServiceLevelClientFactory
from ecs_cli_integ.constants import ENV_REGION
from ecs_cli_integ.exceptions import SessionSetupError

LOG = logging.getLogger(__name__)


# Used for the aws_session, aws_client_factory and aws_client pytest fixtures


def base_aws_session() -> boto3.Session:
    """
    Creates the boto session all test clients are built from. The region is taken from ``AWS_DEFAULT_REGION``,
    credentials are resolved by boto from the environment or the shared config files.

    :raises SessionSetupError: if the session cannot be created or no credentials or region are available
    """
    region_name = config.region_name()
    try:
        session = boto3.Session(region_name=region_name)
        credentials = session.get_credentials()
    except BotoCoreError as e:
        raise SessionSetupError(f"failed to create new session: {e}") from e

    if not session.region_name:
        raise SessionSetupError(f"failed to create new session: no region configured, set {ENV_REGION}")
    if credentials is None:
        raise SessionSetupError("failed to create new session: no AWS credentials found")

    LOG.debug("Created boto session for region %s", session.region_name)
    return session


def base_aws_client_factory(session: boto3.Session) -> ClientFactory:
    client_config = None
    if config.TEST_DISABLE_RETRIES_AND_TIMEOUTS:
        client_config = botocore.config.Config(
            connect_timeout=1_000,
            read_timeout=1_000,
            retries={"total_max_attempts": 1},
        )

    return ClientFactory(session=session, config=client_config)


def base_testing_aws_client(client_factory: ClientFactory) -> ServiceLevelClientFactory:
    # credentials are already set in the boto3 session, so they're not set here again
    return client_factory()
