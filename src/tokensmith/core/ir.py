"""
Token tree IR types.

Raw token JSON uses a sigil convention: keys beginning with ``$`` are
metadata (``$type``, ``$value``, ``$description``), every other key is a
child. ``parse_tree`` turns that convention into explicit node types once,
at load time, so the resolver, flattener and emitters work on
``TokenGroup`` / ``TokenLeaf`` values instead of re-checking key prefixes.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict, Field

METADATA_PREFIX = "$"
TYPE_KEY = "$type"
VALUE_KEY = "$value"
DESCRIPTION_KEY = "$description"


# =============================================================================
# Enums
# =============================================================================


class TokenType(StrEnum):
    """Token value types that have their own output formatting."""

    COLOR = "color"
    NUMBER = "number"
    STRING = "string"
    UNTYPED = "untyped"

    @classmethod
    def from_tag(cls, tag: Any) -> TokenType:
        """Map a raw ``$type`` tag to a member; unknown or missing tags are UNTYPED."""
        if isinstance(tag, str) and tag != cls.UNTYPED:
            try:
                return cls(tag)
            except ValueError:
                return cls.UNTYPED
        return cls.UNTYPED


def is_metadata_key(key: str) -> bool:
    return key.startswith(METADATA_PREFIX)


def is_leaf_mapping(node: Any) -> bool:
    """A raw JSON object is a token leaf when it carries a ``$type`` tag."""
    return isinstance(node, Mapping) and TYPE_KEY in node


# =============================================================================
# Nodes
# =============================================================================


class TokenLeaf(BaseModel):
    """
    A single design token.

    Example:
        TokenLeaf(type=TokenType.COLOR, value={"hex": "#0066CC"})
    """

    model_config = ConfigDict(frozen=True)

    type: TokenType = Field(default=TokenType.UNTYPED, description="Formatting type")
    value: Any = Field(default=None, description="Raw $value (literal, structure or reference)")
    description: str | None = Field(default=None, description="$description text")

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> TokenLeaf:
        declared = raw.get(TYPE_KEY)
        description = raw.get(DESCRIPTION_KEY)
        return cls(
            type=TokenType.from_tag(declared),
            value=raw.get(VALUE_KEY),
            description=description if isinstance(description, str) else None,
        )


class TokenGroup(BaseModel):
    """
    A nested group of tokens.

    ``children`` keeps document order. ``metadata`` holds the group's
    ``$``-prefixed keys; they are never children.
    """

    model_config = ConfigDict(frozen=True)

    children: dict[str, TokenGroup | TokenLeaf] = Field(default_factory=dict)
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def description(self) -> str | None:
        value = self.metadata.get(DESCRIPTION_KEY)
        return value if isinstance(value, str) else None

    @property
    def untyped_value(self) -> bool:
        """True for an object that has ``$value`` but no ``$type`` tag."""
        return VALUE_KEY in self.metadata

    def entries(self) -> list[tuple[str, TokenLeaf]]:
        """
        Direct children that carry a value.

        Unlike ``leaves``, an untagged ``{"$value": ...}`` child counts and is
        read as an untyped token. Flattening never emits such objects; this
        is for category tables that read each entry's value directly.
        """
        entries = []
        for key, node in self.children.items():
            if isinstance(node, TokenLeaf):
                entries.append((key, node))
            elif node.untyped_value:
                entries.append((key, TokenLeaf.from_raw(node.metadata)))
        return entries

    def group(self, *names: str) -> TokenGroup | None:
        """Return the first child group among ``names`` (authors vary in casing)."""
        for name in names:
            node = self.children.get(name)
            if isinstance(node, TokenGroup):
                return node
        return None

    def groups(self) -> list[tuple[str, TokenGroup]]:
        return [(key, node) for key, node in self.children.items() if isinstance(node, TokenGroup)]

    def leaves(self) -> list[tuple[str, TokenLeaf]]:
        return [(key, node) for key, node in self.children.items() if isinstance(node, TokenLeaf)]


TokenGroup.model_rebuild()


class FlatToken(NamedTuple):
    """A flattened ``(name, token)`` pair."""

    name: str
    token: TokenLeaf


# =============================================================================
# Parsing
# =============================================================================


def parse_tree(raw: Mapping[str, Any]) -> TokenGroup:
    """
    Parse a raw token document into a TokenGroup.

    Objects with a ``$type`` tag become leaves, other objects become
    groups, and scalars or arrays in a child position are dropped.
    """
    children: dict[str, TokenGroup | TokenLeaf] = {}
    metadata: dict[str, Any] = {}

    for key, value in raw.items():
        if is_metadata_key(key):
            metadata[key] = value
        elif is_leaf_mapping(value):
            children[key] = TokenLeaf.from_raw(value)
        elif isinstance(value, Mapping):
            children[key] = parse_tree(value)

    return TokenGroup(children=children, metadata=metadata)


def parse_document(raw: Mapping[str, Any] | None) -> TokenGroup | None:
    """Parse a loaded document, keeping the absent sentinel as None."""
    if raw is None:
        return None
    return parse_tree(raw)
