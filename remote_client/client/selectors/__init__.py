"""Pluggable node selection strategies and their deferred construction."""

from remote_client.client.selectors.cluster_node_selector import (
    ClusterNodeSelector as ClusterNodeSelector,
    FirstAvailableClusterNodeSelector as FirstAvailableClusterNodeSelector,
    RandomClusterNodeSelector as RandomClusterNodeSelector,
)
from remote_client.client.selectors.deployment_node_selector import (
    DeploymentNodeSelector as DeploymentNodeSelector,
    FirstAvailableDeploymentNodeSelector as FirstAvailableDeploymentNodeSelector,
    RandomDeploymentNodeSelector as RandomDeploymentNodeSelector,
)
from remote_client.client.selectors.selector_factory import (
    SelectorFactory as SelectorFactory,
)
from remote_client.client.selectors.selector_registry import (
    SelectorRegistry as SelectorRegistry,
    create_cluster_node_selector_registry as create_cluster_node_selector_registry,
    create_deployment_node_selector_registry as create_deployment_node_selector_registry,
)
