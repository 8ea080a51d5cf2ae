from typing import Any, Iterable, Mapping


LEGACY_KEYS: frozenset[str] = frozenset({
    "remote.connection",
    "remote.cluster",
    "endpoint.name",
    "deployment.node.selector",
    "invocation.timeout",
    "reconnect.tasks.timeout",
})


def contains_legacy(
    properties: Iterable[str] | Mapping[str, Any],
    legacy_keys: frozenset[str] = LEGACY_KEYS,
) -> bool:
    """
    Check whether any property key uses a legacy configuration option.

    Keys match by substring, so ``foo.remote.connection.bar`` counts.
    Mappings are checked by key.
    """
    return any(
        legacy_key in key
        for key in properties
        if isinstance(key, str)
        for legacy_key in legacy_keys
    )
