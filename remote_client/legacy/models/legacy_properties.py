from __future__ import annotations

import contextvars
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

from remote_client.client.selectors import (
    DeploymentNodeSelector,
    SelectorFactory,
    SelectorRegistry,
    create_cluster_node_selector_registry,
    create_deployment_node_selector_registry,
)

from .cluster_configuration import ClusterConfiguration
from .connection_configuration import ConnectionConfiguration


UNSET_INVOCATION_TIMEOUT = -1

_current_legacy_properties: contextvars.ContextVar[LegacyProperties | None] = (
    contextvars.ContextVar("_current_legacy_properties", default=None)
)


@dataclass(frozen=True, slots=True)
class LegacyProperties:
    """
    Parsed legacy client configuration.

    Connections keep their configured order and clusters keep insertion
    order. ``invocation_timeout`` is in milliseconds and None when unset.
    Selector factories are not invoked until the snapshot is applied to
    a builder.
    """

    connections: tuple[ConnectionConfiguration, ...] = ()
    cluster_configurations: Mapping[str, ClusterConfiguration] = field(
        default_factory=dict,
    )
    deployment_node_selector_class_name: str | None = None
    deployment_node_selector_factory: SelectorFactory[DeploymentNodeSelector] | None = None
    invocation_timeout: int | None = None
    endpoint_name: str = "config-based-client-endpoint"

    def __post_init__(self):
        if self.invocation_timeout is not None and self.invocation_timeout < 0:
            raise ValueError(
                f"Invocation timeout must be non-negative, got {self.invocation_timeout}"
            )

        object.__setattr__(self, "connections", tuple(self.connections))
        object.__setattr__(
            self,
            "cluster_configurations",
            MappingProxyType(dict(self.cluster_configurations)),
        )

    @classmethod
    def create(
        cls,
        connections: Iterable[ConnectionConfiguration] = (),
        cluster_node_selectors: Mapping[str, str | None] | None = None,
        deployment_node_selector: str | None = None,
        invocation_timeout: int | None = None,
        endpoint_name: str = "config-based-client-endpoint",
        deployment_node_selector_registry: SelectorRegistry | None = None,
        cluster_node_selector_registry: SelectorRegistry | None = None,
    ) -> LegacyProperties:
        """
        Build a snapshot from selector identifiers instead of factories.

        ``cluster_node_selectors`` maps each cluster name to its selector
        identifier, or None for clusters without one. Identifiers are
        resolved lazily through the given registries, which default to
        the built-in ones.

        An ``invocation_timeout`` of -1 is the legacy "unset" marker and is
        treated as None.
        """
        if invocation_timeout == UNSET_INVOCATION_TIMEOUT:
            invocation_timeout = None

        if deployment_node_selector_registry is None:
            deployment_node_selector_registry = create_deployment_node_selector_registry()

        if cluster_node_selector_registry is None:
            cluster_node_selector_registry = create_cluster_node_selector_registry()

        deployment_node_selector_factory: SelectorFactory[DeploymentNodeSelector] | None = None
        if deployment_node_selector:
            deployment_node_selector_factory = deployment_node_selector_registry.factory(
                deployment_node_selector,
            )

        clusters: dict[str, ClusterConfiguration] = {}
        for cluster_name, class_name in (cluster_node_selectors or {}).items():
            clusters[cluster_name] = ClusterConfiguration(
                cluster_name=cluster_name,
                cluster_node_selector_class_name=class_name,
                cluster_node_selector_factory=(
                    cluster_node_selector_registry.factory(class_name)
                    if class_name
                    else None
                ),
            )

        return cls(
            connections=tuple(connections),
            cluster_configurations=clusters,
            deployment_node_selector_class_name=deployment_node_selector,
            deployment_node_selector_factory=deployment_node_selector_factory,
            invocation_timeout=invocation_timeout,
            endpoint_name=endpoint_name,
        )

    @staticmethod
    def get_current() -> LegacyProperties | None:
        return _current_legacy_properties.get()

    @staticmethod
    def set_current(
        properties: LegacyProperties | None,
    ) -> contextvars.Token[LegacyProperties | None]:
        return _current_legacy_properties.set(properties)

    @staticmethod
    def reset_current(token: contextvars.Token[LegacyProperties | None]) -> None:
        _current_legacy_properties.reset(token)
