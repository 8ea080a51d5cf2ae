"""
Client context configuration.

ClientContextBuilder accumulates connections, node selectors and the
invocation timeout, and produces an immutable ClientContext.
"""

from remote_client.client.client_connection import (
    ClientConnection as ClientConnection,
    ClientConnectionBuilder as ClientConnectionBuilder,
)
from remote_client.client.client_context import (
    ClientContext as ClientContext,
    ClientContextBuilder as ClientContextBuilder,
)
