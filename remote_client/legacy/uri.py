import ipaddress
import re
from typing import Any, Mapping

from .models import ConnectionConfiguration


DEFAULT_SCHEME = "remote+http"
SECURE_SCHEME = "remote+https"

# RFC 3986 section 3.1
_SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_HOSTNAME_LABEL_PATTERN = re.compile(r"^(?!-)[A-Za-z0-9_\-]{1,63}(?<!-)$")


def is_valid_port(port: int | None) -> bool:
    return (
        isinstance(port, int)
        and not isinstance(port, bool)
        and 0 < port <= 65535
    )


def get_uri(connection: ConnectionConfiguration) -> str | None:
    """
    Build the destination URI for a legacy connection.

    Returns None when the connection has no host, has no usable port,
    or when the scheme or host cannot form a valid URI.
    """
    if connection.host is None or not is_valid_port(connection.port):
        return None

    scheme = connection.protocol
    if scheme is None:
        scheme = (
            SECURE_SCHEME
            if _option_enabled(connection.connection_options, "SSL_ENABLED")
            else DEFAULT_SCHEME
        )

    if _SCHEME_PATTERN.match(scheme) is None:
        return None

    host = _to_uri_host(connection.host)
    if host is None:
        return None

    return f"{scheme.lower()}://{host}:{connection.port}"


def _to_uri_host(host: str) -> str | None:
    host = host.strip()

    if host.startswith("[") and host.endswith("]"):
        try:
            return f"[{ipaddress.IPv6Address(host[1:-1]).compressed}]"

        except ValueError:
            return None

    try:
        address = ipaddress.ip_address(host)

    except ValueError:
        address = None

    if isinstance(address, ipaddress.IPv6Address):
        return f"[{address.compressed}]"

    elif address is not None:
        return str(address)

    hostname = host.removesuffix(".")
    if not hostname or len(hostname) > 253:
        return None

    for label in hostname.split("."):
        if _HOSTNAME_LABEL_PATTERN.match(label) is None:
            return None

    return host


def _option_enabled(options: Mapping[str, Any], option_name: str) -> bool:
    # Options may be keyed by bare name or by a dotted, fully qualified name
    for key, value in options.items():
        if not isinstance(key, str):
            continue

        if key != option_name and not key.endswith(f".{option_name}"):
            continue

        if isinstance(value, str):
            return value.strip().lower() == "true"

        return bool(value)

    return False
