"""
Legacy client configuration support.

Translates a parsed legacy configuration snapshot (connections, cluster
overrides, selectors and the invocation timeout) into a
ClientContextBuilder, and detects legacy option keys in flat
property sets.

Usage:
    from remote_client.legacy import (
        LegacyProperties,
        LegacyPropertiesConfiguration,
        contains_legacy,
    )

    if contains_legacy(raw_properties):
        ...

    LegacyPropertiesConfiguration().configure(builder, properties)
"""

from remote_client.legacy.legacy_keys import (
    LEGACY_KEYS as LEGACY_KEYS,
    contains_legacy as contains_legacy,
)
from remote_client.legacy.legacy_properties_configuration import (
    LegacyPropertiesConfiguration as LegacyPropertiesConfiguration,
)
from remote_client.legacy.logging_models import (
    LegacyConfigurationInfo as LegacyConfigurationInfo,
    SelectorInstantiationFatal as SelectorInstantiationFatal,
)
from remote_client.legacy.models import (
    ClusterConfiguration as ClusterConfiguration,
    ConnectionConfiguration as ConnectionConfiguration,
    LegacyProperties as LegacyProperties,
)
from remote_client.legacy.uri import get_uri as get_uri
