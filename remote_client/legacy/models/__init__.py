"""Models for the parsed legacy configuration snapshot."""

from remote_client.legacy.models.cluster_configuration import (
    ClusterConfiguration as ClusterConfiguration,
)
from remote_client.legacy.models.connection_configuration import (
    ConnectionConfiguration as ConnectionConfiguration,
)
from remote_client.legacy.models.legacy_properties import (
    LegacyProperties as LegacyProperties,
)
