"""
Token tree flattening.

Walks a token tree depth-first in document order and yields one
``FlatToken`` per leaf, named by joining the path segments:

    {"ui": {"bg": {"default": <token>}}}  ->  ("ui-bg-default", <token>)
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from .ir import FlatToken, TokenGroup, TokenLeaf, parse_tree


def _join(prefix: str, key: str, separator: str) -> str:
    return f"{prefix}{separator}{key}" if prefix else key


def iter_tokens(
    tree: TokenGroup | Mapping[str, Any],
    prefix: str = "",
    separator: str = "-",
) -> Iterator[FlatToken]:
    """Lazily yield flattened tokens; see ``flatten_tokens``."""
    group = tree if isinstance(tree, TokenGroup) else parse_tree(tree)

    for key, node in group.children.items():
        path = _join(prefix, key, separator)
        match node:
            case TokenLeaf():
                yield FlatToken(path, node)
            case TokenGroup():
                yield from iter_tokens(node, path, separator)


def flatten_tokens(
    tree: TokenGroup | Mapping[str, Any] | None,
    prefix: str = "",
    separator: str = "-",
) -> list[FlatToken]:
    """
    Flatten a token tree into an ordered list of ``(name, token)`` pairs.

    Args:
        tree: Parsed group or raw token document; None flattens to []
        prefix: Name prefix for every emitted token
        separator: Path segment separator

    Returns:
        Flattened tokens in document order (depth-first, pre-order).
    """
    if tree is None:
        return []
    return list(iter_tokens(tree, prefix, separator))
