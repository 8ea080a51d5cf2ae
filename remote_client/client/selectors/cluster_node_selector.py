import random
from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class ClusterNodeSelector(Protocol):
    """
    Chooses which cluster member handles a cluster-routed invocation.

    ``connected_nodes`` is the subset of ``available_nodes`` that already
    has an open connection. Implementations must return a name from
    ``available_nodes``.
    """

    def select_node(
        self,
        cluster_name: str,
        connected_nodes: Sequence[str],
        available_nodes: Sequence[str],
    ) -> str:
        ...


class FirstAvailableClusterNodeSelector:
    """Prefers the first connected node, falling back to the first available one."""

    def select_node(
        self,
        cluster_name: str,
        connected_nodes: Sequence[str],
        available_nodes: Sequence[str],
    ) -> str:
        if connected_nodes:
            return connected_nodes[0]

        return available_nodes[0]


class RandomClusterNodeSelector:
    """Picks a connected node at random, or any available node when none are connected."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)

    def select_node(
        self,
        cluster_name: str,
        connected_nodes: Sequence[str],
        available_nodes: Sequence[str],
    ) -> str:
        if connected_nodes:
            return self._random.choice(connected_nodes)

        return self._random.choice(available_nodes)
