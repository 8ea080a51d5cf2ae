import random
from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class DeploymentNodeSelector(Protocol):
    """
    Chooses which node handles an invocation against a deployment.

    ``eligible_nodes`` holds the names of every connected node on which
    the deployment is available. Implementations must return one of them.
    """

    def select_node(
        self,
        eligible_nodes: Sequence[str],
        application_name: str,
        module_name: str,
        distinct_name: str,
    ) -> str:
        ...


class FirstAvailableDeploymentNodeSelector:
    """Always picks the first eligible node."""

    def select_node(
        self,
        eligible_nodes: Sequence[str],
        application_name: str,
        module_name: str,
        distinct_name: str,
    ) -> str:
        return eligible_nodes[0]


class RandomDeploymentNodeSelector:
    """Picks an eligible node uniformly at random."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)

    def select_node(
        self,
        eligible_nodes: Sequence[str],
        application_name: str,
        module_name: str,
        distinct_name: str,
    ) -> str:
        return self._random.choice(eligible_nodes)
