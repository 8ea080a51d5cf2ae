import pytest

from remote_client.client import ClientContextBuilder
from remote_client.client.selectors import (
    ClusterNodeSelector,
    DeploymentNodeSelector,
    SelectorRegistry,
    create_cluster_node_selector_registry,
    create_deployment_node_selector_registry,
)
from remote_client.legacy import LegacyPropertiesConfiguration
from remote_client.logging import Logger


class CountingDeploymentNodeSelector:
    instances = 0

    def __init__(self) -> None:
        type(self).instances += 1

    def select_node(self, eligible_nodes, application_name, module_name, distinct_name):
        return eligible_nodes[-1]


class CountingClusterNodeSelector:
    instances = 0

    def __init__(self) -> None:
        type(self).instances += 1

    def select_node(self, cluster_name, connected_nodes, available_nodes):
        return available_nodes[-1]


class SecondClusterNodeSelector(CountingClusterNodeSelector):
    instances = 0


class ExplodingSelector:
    def __init__(self) -> None:
        raise RuntimeError("selector constructor failed")


class RequiresArgumentSelector:
    def __init__(self, weight: float) -> None:
        self.weight = weight


class NotASelector:
    pass


@pytest.fixture(autouse=True)
def reset_selector_counters():
    CountingDeploymentNodeSelector.instances = 0
    CountingClusterNodeSelector.instances = 0
    SecondClusterNodeSelector.instances = 0


@pytest.fixture
def deployment_node_selectors() -> SelectorRegistry[DeploymentNodeSelector]:
    registry = create_deployment_node_selector_registry()
    registry.register("counting", CountingDeploymentNodeSelector)
    registry.register("exploding", ExplodingSelector)
    registry.register("requires_argument", RequiresArgumentSelector)
    registry.register("not_a_selector", NotASelector)
    return registry


@pytest.fixture
def cluster_node_selectors() -> SelectorRegistry[ClusterNodeSelector]:
    registry = create_cluster_node_selector_registry()
    registry.register("counting", CountingClusterNodeSelector)
    registry.register("second", SecondClusterNodeSelector)
    registry.register("exploding", ExplodingSelector)
    return registry


@pytest.fixture
def builder() -> ClientContextBuilder:
    return ClientContextBuilder()


@pytest.fixture
def logger():
    logger = Logger()
    yield logger
    logger.close()


@pytest.fixture
def configuration(logger) -> LegacyPropertiesConfiguration:
    return LegacyPropertiesConfiguration(logger=logger)
