"""Safe nested lookup over provider documents.

Provider responses are loosely-typed JSON trees. Numeric fields usually
arrive wrapped as ``{"raw": 425.22, "fmt": "425.22"}`` but sometimes as
plain values, and any level of the tree may be missing. All defaulting
for the ratio engine goes through these helpers.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Any

KeyPath = str | Sequence[str | int]


def _split(path: KeyPath) -> list[str | int]:
    """Turn ``"a.b.0.c"`` into ``["a", "b", 0, "c"]``."""
    if not isinstance(path, str):
        return list(path)
    keys: list[str | int] = []
    for part in path.split("."):
        keys.append(int(part) if part.isdigit() else part)
    return keys


def lookup(document: Any, path: KeyPath, default: Any = None) -> Any:
    """Resolve a nested path, returning ``default`` on any miss.

    Integer keys index into sequences; string keys index into mappings.
    A missing key, an out-of-range index, or a step into a scalar all
    resolve to ``default``.

    Args:
        document: Tree of mappings, sequences and scalars.
        path: Dotted string (``"balance.items.0.equity"``) or key sequence.
        default: Value returned when the path does not resolve.

    Returns:
        The value at ``path``, or ``default``.
    """
    node = document
    for key in _split(path):
        if isinstance(key, int):
            if isinstance(node, (str, bytes)) or not isinstance(node, Sequence):
                return default
            if not -len(node) <= key < len(node):
                return default
            node = node[key]
        else:
            if not isinstance(node, Mapping) or key not in node:
                return default
            node = node[key]
        if node is None:
            return default
    return node


def _unwrap(value: Any) -> Any:
    if isinstance(value, Mapping):
        return value.get("raw")
    return value


def lookup_number(document: Any, path: KeyPath, default: float = 0.0) -> float:
    """Resolve a numeric field, unwrapping ``{"raw": x}``.

    Booleans, strings and NaN do not count as numbers.
    """
    value = _unwrap(lookup(document, path))
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    value = float(value)
    if math.isnan(value):
        return default
    return value


def lookup_text(document: Any, path: KeyPath, default: str = "") -> str:
    """Resolve a string field, unwrapping ``{"raw": x}``."""
    value = _unwrap(lookup(document, path))
    if isinstance(value, str) and value:
        return value
    return default
