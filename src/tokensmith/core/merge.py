"""
Project override merging.

A consuming project ships a partial token tree (``alias-overrides.json``)
that replaces individual leaves of the shared UI theme trees without
copying them.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .ir import VALUE_KEY, is_metadata_key


def deep_merge(target: Mapping[str, Any], source: Mapping[str, Any]) -> dict[str, Any]:
    """
    Deep-merge ``source`` over ``target``.

    - Subtrees (mappings without ``$value``) merge recursively.
    - Tokens and scalars in ``source`` replace the target entry whole.
    - Keys only in ``target`` are kept; keys only in ``source`` are added.
    - ``$``-prefixed keys of ``source`` are ignored.

    Neither argument is mutated.

    Example:
        >>> deep_merge({"x": {"y": 1, "z": 2}}, {"x": {"y": 99}})
        {'x': {'y': 99, 'z': 2}}
    """
    result = dict(target)
    for key, value in source.items():
        if is_metadata_key(key):
            continue
        if isinstance(value, Mapping) and VALUE_KEY not in value:
            existing = result.get(key)
            result[key] = deep_merge(existing if isinstance(existing, Mapping) else {}, value)
        else:
            result[key] = value
    return result
