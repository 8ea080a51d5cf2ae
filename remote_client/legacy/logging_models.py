"""
Structured logging models for legacy configuration translation.

Follows the Entry-based pattern from remote_client/logging/models.
"""

from remote_client.logging.models import Entry, LogLevel


class LegacyConfigurationInfo(Entry, kw_only=True):
    """Emitted once per applied legacy configuration snapshot."""
    endpoint_name: str
    connections: int
    clusters: int
    level: LogLevel = LogLevel.INFO


class SelectorInstantiationFatal(Entry, kw_only=True):
    """Emitted when a configured selector cannot be constructed."""
    selector_kind: str
    class_name: str
    cause: str
    cluster_name: str = ""
    level: LogLevel = LogLevel.FATAL
