from dataclasses import dataclass

from remote_client.client.selectors import (
    ClusterNodeSelector,
    SelectorFactory,
)


@dataclass(frozen=True, slots=True)
class ClusterConfiguration:
    """Named cluster override read from legacy configuration."""

    cluster_name: str
    cluster_node_selector_class_name: str | None = None
    cluster_node_selector_factory: SelectorFactory[ClusterNodeSelector] | None = None
