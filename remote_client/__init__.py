"""
remote_client: client context configuration for remote invocations.

Subpackages:
    - client  → connections, node selectors and the ClientContextBuilder
    - legacy  → translation of legacy configuration snapshots
    - env     → environment-driven settings
    - logging → structured, msgspec-backed log entries and streams
    - errors  → configuration and selector exceptions
"""
