from __future__ import annotations

from dataclasses import dataclass

from remote_client.env import Env, load_env

from .client_connection import ClientConnection
from .selectors import (
    ClusterNodeSelector,
    DeploymentNodeSelector,
    FirstAvailableClusterNodeSelector,
    FirstAvailableDeploymentNodeSelector,
)


@dataclass(frozen=True, slots=True)
class ClientContext:
    """
    Immutable client configuration produced by ClientContextBuilder.

    ``invocation_timeout`` is in milliseconds; 0 means invocations
    never time out.
    """

    connections: tuple[ClientConnection, ...]
    deployment_node_selector: DeploymentNodeSelector
    cluster_node_selector: ClusterNodeSelector
    invocation_timeout: int = 0


class ClientContextBuilder:
    """
    Accumulates client configuration before a ClientContext is built.

    Connections are append-only. Selectors and the invocation timeout
    follow last-write-wins. Unset selectors fall back to the
    first-available strategies at build time.
    """

    def __init__(self, invocation_timeout: int = 0) -> None:
        self._connections: list[ClientConnection] = []
        self._deployment_node_selector: DeploymentNodeSelector | None = None
        self._cluster_node_selector: ClusterNodeSelector | None = None
        self._invocation_timeout = invocation_timeout

    @classmethod
    def from_env(
        cls,
        env: Env | None = None,
        env_file: str | None = None,
    ) -> ClientContextBuilder:
        if env is None:
            env = load_env(env_file=env_file)

        return cls(invocation_timeout=env.CLIENT_INVOCATION_TIMEOUT)

    @property
    def connections(self) -> tuple[ClientConnection, ...]:
        return tuple(self._connections)

    @property
    def deployment_node_selector(self) -> DeploymentNodeSelector | None:
        return self._deployment_node_selector

    @property
    def cluster_node_selector(self) -> ClusterNodeSelector | None:
        return self._cluster_node_selector

    @property
    def invocation_timeout(self) -> int:
        return self._invocation_timeout

    def add_client_connection(self, connection: ClientConnection):
        self._connections.append(connection)
        return self

    def set_deployment_node_selector(self, selector: DeploymentNodeSelector):
        self._deployment_node_selector = selector
        return self

    def set_cluster_node_selector(self, selector: ClusterNodeSelector):
        self._cluster_node_selector = selector
        return self

    def set_invocation_timeout(self, invocation_timeout: int):
        if invocation_timeout < 0:
            raise ValueError(
                f"Invocation timeout must be non-negative, got {invocation_timeout}"
            )

        self._invocation_timeout = invocation_timeout
        return self

    def build(self) -> ClientContext:
        deployment_node_selector = self._deployment_node_selector
        if deployment_node_selector is None:
            deployment_node_selector = FirstAvailableDeploymentNodeSelector()

        cluster_node_selector = self._cluster_node_selector
        if cluster_node_selector is None:
            cluster_node_selector = FirstAvailableClusterNodeSelector()

        return ClientContext(
            connections=tuple(self._connections),
            deployment_node_selector=deployment_node_selector,
            cluster_node_selector=cluster_node_selector,
            invocation_timeout=self._invocation_timeout,
        )
