import logging
from typing import Callable, List, Union

import pytest
from _pytest.config import Config

from ecs_cli_integ import config as integ_config
from ecs_cli_integ.cli import CommandResult, EcsCli
from ecs_cli_integ.exceptions import SessionSetupError
from ecs_cli_integ.logging.setup import setup_logging_from_config
from ecs_cli_integ.testing.aws import cloudformation
from ecs_cli_integ.testing.naming import new_cluster_name

LOG = logging.getLogger(__name__)


def pytest_configure(config: Config):
    setup_logging_from_config()
    LOG.debug("Effective configuration: %s", integ_config.collect_config_items())


@pytest.fixture(scope="session")
def aws_session():
    """
    This fixture returns the Boto Session instance for testing. A test using it fails immediately if no session
    can be established, since none of its assertions could be evaluated.
    """
    from ecs_cli_integ.testing.aws.util import base_aws_session

    try:
        return base_aws_session()
    except SessionSetupError as e:
        pytest.fail(str(e), pytrace=False)


@pytest.fixture(scope="session")
def aws_client_factory(aws_session):
    """
    This fixture returns a client factory for testing.

    Use this fixture if you need to use custom endpoint or Boto config.
    """
    from ecs_cli_integ.testing.aws.util import base_aws_client_factory

    return base_aws_client_factory(aws_session)


@pytest.fixture(scope="session")
def aws_client(aws_client_factory):
    """
    This fixture can be used to obtain Boto clients for testing, e.g. ``aws_client.cloudformation``.
    """
    from ecs_cli_integ.testing.aws.util import base_testing_aws_client

    return base_testing_aws_client(aws_client_factory)


@pytest.fixture
def cluster_name() -> str:
    """A cluster name unique to this test, namespaced by the CI build id."""
    return new_cluster_name()


@pytest.fixture
def ecs_cli() -> EcsCli:
    return EcsCli()


# Cleanup fixtures
@pytest.fixture
def cleanup_stacks(aws_client):
    def _cleanup_stacks(stacks: Union[str, List[str]], wait: bool = True) -> None:
        stacks = [stacks] if isinstance(stacks, str) else stacks
        cloudformation.cleanup_stacks(aws_client.cloudformation, stacks, wait=wait)

    return _cleanup_stacks


@pytest.fixture
def ecs_cli_up(ecs_cli, aws_client) -> Callable[..., CommandResult]:
    """
    Factory running ``ecs-cli up`` for a cluster. The stacks of all clusters brought up are deleted on teardown,
    best-effort and in reverse order.
    """
    clusters = []

    def _up(cluster: str, **kwargs) -> CommandResult:
        clusters.append(cluster)
        return ecs_cli.up(cluster, **kwargs)

    yield _up

    for cluster in clusters[::-1]:
        LOG.debug("Deleting stack of cluster %s", cluster)
        cloudformation.delete_stack(aws_client.cloudformation, cluster)
