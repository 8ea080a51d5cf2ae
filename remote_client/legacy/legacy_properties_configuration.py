from remote_client.client import (
    ClientConnectionBuilder,
    ClientContextBuilder,
)
from remote_client.errors import (
    LegacyConfigurationError,
    SelectorInstantiationError,
)
from remote_client.logging import Logger

from .logging_models import (
    LegacyConfigurationInfo,
    SelectorInstantiationFatal,
)
from .models import LegacyProperties
from .uri import get_uri


class LegacyPropertiesConfiguration:
    """
    Applies a parsed legacy configuration snapshot to a ClientContextBuilder.

    Incomplete connections (no host, no port, or no buildable URI) are
    dropped without notice. A configured selector that cannot be
    constructed is fatal and raises LegacyConfigurationError, leaving
    the builder with whatever was applied before the failure.

    Usage:
        builder = ClientContextBuilder()
        with LegacyPropertiesConfiguration() as configuration:
            configuration.configure(builder, properties)

        context = builder.build()

    A Logger passed in stays open and belongs to the caller. One created
    here is closed by ``close()``.
    """

    def __init__(self, logger: Logger | None = None) -> None:
        self._owns_logger = logger is None

        if logger is None:
            logger = Logger()

        self._logger = logger
        self._stream = logger["legacy_configuration"]

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        if self._owns_logger:
            self._logger.close()

    def configure_current(self, builder: ClientContextBuilder) -> None:
        self.configure(builder, LegacyProperties.get_current())

    def configure(
        self,
        builder: ClientContextBuilder,
        properties: LegacyProperties | None,
    ) -> None:
        if properties is None:
            return

        self._stream.log(
            LegacyConfigurationInfo(
                message="Legacy client properties configuration is in use",
                endpoint_name=properties.endpoint_name,
                connections=len(properties.connections),
                clusters=len(properties.cluster_configurations),
            )
        )

        for connection in properties.connections:
            if connection.host is None:
                continue

            if connection.port is None:
                continue

            uri = get_uri(connection)
            if uri is None:
                continue

            builder.add_client_connection(
                ClientConnectionBuilder().set_destination(uri).build()
            )

        deployment_node_selector_factory = properties.deployment_node_selector_factory
        if deployment_node_selector_factory is not None:
            try:
                deployment_node_selector = deployment_node_selector_factory.create()

            except SelectorInstantiationError as err:
                class_name = (
                    properties.deployment_node_selector_class_name
                    or deployment_node_selector_factory.class_name
                )

                raise self._selector_error(
                    "deployment",
                    class_name,
                    err,
                ) from err

            builder.set_deployment_node_selector(deployment_node_selector)

        for cluster in properties.cluster_configurations.values():
            cluster_node_selector_factory = cluster.cluster_node_selector_factory
            if cluster_node_selector_factory is None:
                continue

            try:
                builder.set_cluster_node_selector(
                    cluster_node_selector_factory.create()
                )

            except SelectorInstantiationError as err:
                class_name = (
                    cluster.cluster_node_selector_class_name
                    or cluster_node_selector_factory.class_name
                )

                raise self._selector_error(
                    "cluster",
                    class_name,
                    err,
                    cluster_name=cluster.cluster_name,
                ) from err

            # Only one cluster node selector is applied
            break

        if properties.invocation_timeout is not None:
            builder.set_invocation_timeout(properties.invocation_timeout)

    def _selector_error(
        self,
        selector_kind: str,
        class_name: str,
        err: SelectorInstantiationError,
        cluster_name: str | None = None,
    ) -> LegacyConfigurationError:
        cause = err.cause

        self._stream.log(
            SelectorInstantiationFatal(
                message=f"Cannot instantiate {selector_kind} node selector",
                selector_kind=selector_kind,
                class_name=class_name,
                cause=f"{type(cause).__name__}: {cause}",
                cluster_name=cluster_name or "",
            )
        )

        context = {}
        if cluster_name:
            context["cluster_name"] = cluster_name

        return LegacyConfigurationError(
            f"Cannot instantiate {selector_kind} node selector",
            class_name=class_name,
            cause=cause,
            context=context,
        )
