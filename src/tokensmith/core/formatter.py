"""
Token value formatting.

Each ``TokenType`` member has exactly one formatting function; the table
below is checked for completeness at import so a new member cannot fall
through to a default silently.
"""

from __future__ import annotations

import json
import math
from collections.abc import Callable, Mapping
from typing import Any

from .ir import TokenLeaf, TokenType
from .references import ReferenceLookup, resolve


def format_value(value: Any) -> str:
    """
    Render a raw scalar as it appears in CSS.

    Integral floats lose their ``.0`` so ``16.0`` and ``16`` print the same;
    booleans render as JSON literals and structures as compact JSON.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, int):
        return str(value)
    return json.dumps(value, separators=(",", ":"), sort_keys=False)


def _channel(component: Any) -> int:
    """Convert a 0..1 component to a 0..255 byte, rounding halves up."""
    return int(math.floor(float(component) * 255 + 0.5))


def color_from_components(components: list[Any], alpha: Any = 1) -> str:
    """
    Format normalized RGB components.

    Returns ``#RRGGBB`` for opaque colors and ``rgba(R, G, B, A)`` when
    ``alpha < 1``; alpha is printed as authored.
    """
    r, g, b = (_channel(c) for c in components[:3])
    if alpha is None:
        alpha = 1
    if alpha < 1:
        return f"rgba({r}, {g}, {b}, {format_value(alpha)})"
    return f"#{r:02X}{g:02X}{b:02X}"


def _format_color(value: Any) -> str:
    if isinstance(value, Mapping):
        if value.get("hex"):
            return str(value["hex"])
        if value.get("components"):
            return color_from_components(list(value["components"]), value.get("alpha", 1))
    return format_value(value)


def _format_number(value: Any) -> str:
    return f"{format_value(value)}px"


def _format_string(value: Any) -> str:
    return format_value(value)


def _format_untyped(value: Any) -> str:
    return format_value(value)


_FORMATTERS: dict[TokenType, Callable[[Any], str]] = {
    TokenType.COLOR: _format_color,
    TokenType.NUMBER: _format_number,
    TokenType.STRING: _format_string,
    TokenType.UNTYPED: _format_untyped,
}

_missing = set(TokenType) - set(_FORMATTERS)
if _missing:  # pragma: no cover
    raise RuntimeError(f"No formatter registered for token types: {sorted(_missing)}")


def format_token(token: TokenLeaf, lookup: ReferenceLookup | None = None) -> str:
    """
    Produce the final CSS value of a token.

    Args:
        token: Token leaf to format
        lookup: Optional reference lookup; when given, ``{group.key}`` values
            are replaced by their base value before formatting

    Returns:
        Hex or rgba() string for colors, ``<n>px`` for numbers, the value
        unchanged for strings and untyped tokens.
    """
    value = resolve(token.value, lookup) if lookup else token.value
    return _FORMATTERS[token.type](value)
