"""
Reference resolution against the foundational token documents.

Alias tokens point at base tokens with values like ``"{blue.500}"``. The
lookup table maps ``"<group>.<key>"`` to the raw base value for every leaf
directly under a top-level group of the color palette and the scale
document. It is built once per run and passed explicitly to every call.

Resolution is one level deep: a base value that is itself a reference
string is returned as-is.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from .ir import TokenGroup

ReferenceLookup = dict[str, Any]

REFERENCE_PATTERN = re.compile(r"^\{(.+)\}$", re.DOTALL)


@dataclass(frozen=True)
class Resolution:
    """
    Result of resolving one raw value.

    Attributes:
        value: The looked-up value, or the input unchanged
        reference: Inner key when the input had reference shape, else None
        resolved: True when ``reference`` was found in the lookup
    """

    value: Any
    reference: str | None = None
    resolved: bool = False

    @property
    def unresolved(self) -> bool:
        return self.reference is not None and not self.resolved


def build_lookup(*documents: TokenGroup | None) -> ReferenceLookup:
    """
    Build the reference lookup table.

    Called as ``build_lookup(colors, scale)``. Documents are read in argument
    order, so when both define the same ``group.key`` the later one wins.
    Absent documents (None) are skipped.
    """
    lookup: ReferenceLookup = {}
    for document in documents:
        if document is None:
            continue
        for group_name, group in document.groups():
            for key, leaf in group.entries():
                lookup[f"{group_name}.{key}"] = leaf.value
    return lookup


def reference_key(value: Any) -> str | None:
    """Return the inner key of a ``{group.key}`` string, or None."""
    if isinstance(value, str):
        match = REFERENCE_PATTERN.match(value)
        if match:
            return match.group(1)
    return None


def resolve_reference(value: Any, lookup: ReferenceLookup) -> Resolution:
    key = reference_key(value)
    if key is None:
        return Resolution(value=value)
    if key in lookup:
        return Resolution(value=lookup[key], reference=key, resolved=True)
    return Resolution(value=value, reference=key, resolved=False)


def resolve(value: Any, lookup: ReferenceLookup) -> Any:
    """
    Resolve a raw value against the lookup.

    Non-reference values and references with no target come back unchanged.
    """
    return resolve_reference(value, lookup).value

