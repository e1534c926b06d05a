"""Application pagination – allow-listed filtering of nested query documents.

The document is flattened to dot-paths, filtered against the allow-list and
rebuilt::

    {"user": {"name": "ann", "role": "x"}, "age": {"$gte": 18}}
    → {"user.name": "ann", "user.role": "x", "age": {"$gte": 18}}
    → (allowed {"user.name", "age"}) {"user.name": "ann", "age": {"$gte": 18}}
    → {"user": {"name": "ann"}, "age": {"$gte": 18}}
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from pagination_options.application.pagination.query_values import ObjectValue, classify

PATH_SEPARATOR = "."


def flatten(document: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    """Flatten nested plain objects into dot-path keys.

    Arrays, scalars and operator expressions are leaves.  An empty plain
    object contributes no paths.
    """
    flat: dict[str, Any] = {}
    for key, value in document.items():
        path = f"{prefix}{PATH_SEPARATOR}{key}" if prefix else key
        match classify(value):
            case ObjectValue(value=children):
                flat.update(flatten(children, path))
            case leaf:
                flat[path] = leaf.value
    return flat


def is_allowed(path: str, allowed_fields: Iterable[str]) -> bool:
    """Exact-segment prefix match: ``user`` admits ``user.name``, not ``username``."""
    return any(
        path == allowed or path.startswith(allowed + PATH_SEPARATOR)
        for allowed in allowed_fields
    )


def filter_allowed(flat: Mapping[str, Any], allowed_fields: Iterable[str]) -> dict[str, Any]:
    allowed = tuple(allowed_fields)
    return {path: value for path, value in flat.items() if is_allowed(path, allowed)}


def unflatten(flat: Mapping[str, Any]) -> dict[str, Any]:
    """Rebuild a nested document from dot-path keys.

    A path whose parent segment already holds a non-object value is dropped.
    """
    result: dict[str, Any] = {}
    for path, value in flat.items():
        *parents, leaf = path.split(PATH_SEPARATOR)
        node = result
        for segment in parents:
            child = node.setdefault(segment, {})
            if not isinstance(child, dict):
                break
            node = child
        else:
            node[leaf] = value
    return result


def filter_query(document: Mapping[str, Any], allowed_fields: Iterable[str]) -> dict[str, Any]:
    return unflatten(filter_allowed(flatten(document), allowed_fields))


__all__ = [
    "PATH_SEPARATOR",
    "filter_allowed",
    "filter_query",
    "flatten",
    "is_allowed",
    "unflatten",
]
