from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Return a new dict with ``override`` merged into ``base``.

    Nested mappings are merged key by key; any other value in ``override``
    replaces the one in ``base``. Neither argument is modified.
    """
    merged = copy.deepcopy(dict(base))
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def contains_keys(data: Mapping[str, Any], required: Mapping[str, Any]) -> bool:
    """True if every key path in ``required`` also exists in ``data``."""
    for key, value in required.items():
        if key not in data:
            return False
        if isinstance(value, Mapping) and value:
            inner = data[key]
            if not isinstance(inner, Mapping) or not contains_keys(inner, value):
                return False
    return True
