"""
Token resolution pipeline.

Loads every token category, builds the reference lookup from the base
colors and scale, merges project overrides into the UI theme pair, then
flattens and formats everything into a ``TokenSet``. Emitters and the page
builder only ever see a ``TokenSet``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .errors import UnresolvedReferenceError
from .flatten import flatten_tokens
from .formatter import format_token, format_value
from .ir import TokenGroup, TokenLeaf, parse_document
from .loader import load_token_file, read_first_document
from .merge import deep_merge
from .references import ReferenceLookup, build_lookup, resolve_reference

if TYPE_CHECKING:
    from tokensmith.config import BuildConfig

logger = logging.getLogger(__name__)


class ReferencePolicy(StrEnum):
    """What to do with ``{group.key}`` references that have no target."""

    WARN = "warn"
    STRICT = "strict"


# =============================================================================
# Inputs
# =============================================================================


@dataclass
class TokenSources:
    """
    Token documents for one run.

    Base and alias category documents are parsed; the UI theme pair stays
    raw so project overrides can be merged before parsing. Any document may
    be absent (None).
    """

    colors: TokenGroup | None = None
    scale: TokenGroup | None = None
    base_typography: TokenGroup | None = None
    base_radius: TokenGroup | None = None
    alias_typography: TokenGroup | None = None
    alias_spacing: TokenGroup | None = None
    alias_radius: TokenGroup | None = None
    light: dict[str, Any] | None = None
    dark: dict[str, Any] | None = None


def load_sources(config: BuildConfig) -> TokenSources:
    """
    Load all token documents described by a BuildConfig.

    Missing directories and files are tolerated; malformed JSON raises
    TokenParseError.
    """
    base_dir: Path = config.base_dir
    alias_dir: Path = config.alias_dir
    files = config.files

    if not config.tokens_dir.is_dir():
        logger.warning("Tokens directory not found: %s", config.tokens_dir)

    return TokenSources(
        colors=load_token_file(base_dir, files.colors),
        scale=load_token_file(base_dir, files.scale),
        base_typography=load_token_file(base_dir, files.typography),
        base_radius=load_token_file(base_dir, files.radius),
        alias_typography=load_token_file(alias_dir, files.typography),
        alias_spacing=load_token_file(alias_dir, files.spacing),
        alias_radius=load_token_file(alias_dir, files.radius),
        light=read_first_document(alias_dir, *files.light),
        dark=read_first_document(alias_dir, *files.dark),
    )


# =============================================================================
# Outputs
# =============================================================================


@dataclass(frozen=True)
class ResolvedToken:
    """
    A flattened token with its final CSS value.

    Attributes:
        name: Flattened name (``ui-bg-default``)
        value: Formatted value (``#FFFFFF``, ``16px``)
        reference: Inner reference key when the raw value was a reference
        token: Source token
    """

    name: str
    value: str
    reference: str = ""
    token: TokenLeaf | None = None


@dataclass
class TokenSet:
    """All resolved token sections of one run."""

    lookup: ReferenceLookup = field(default_factory=dict)
    base_colors: list[ResolvedToken] = field(default_factory=list)
    scale: list[ResolvedToken] = field(default_factory=list)
    font_families: list[ResolvedToken] = field(default_factory=list)
    font_weights: list[ResolvedToken] = field(default_factory=list)
    base_radius: list[ResolvedToken] = field(default_factory=list)
    alias_font_families: list[ResolvedToken] = field(default_factory=list)
    alias_font_sizes: list[ResolvedToken] = field(default_factory=list)
    alias_gaps: list[ResolvedToken] = field(default_factory=list)
    alias_paddings: list[ResolvedToken] = field(default_factory=list)
    alias_spacing: list[ResolvedToken] = field(default_factory=list)
    alias_radius: list[ResolvedToken] = field(default_factory=list)
    light: list[ResolvedToken] = field(default_factory=list)
    dark: list[ResolvedToken] = field(default_factory=list)
    colors_tree: TokenGroup | None = None
    light_tree: TokenGroup = field(default_factory=TokenGroup)
    dark_tree: TokenGroup = field(default_factory=TokenGroup)
    unresolved: dict[str, str] = field(default_factory=dict)

    def theme_pairs(self) -> list[tuple[str, ResolvedToken, ResolvedToken | None]]:
        """Light tokens paired with the dark token of the same name (or None)."""
        dark_by_name = {token.name: token for token in self.dark}
        return [(token.name, token, dark_by_name.get(token.name)) for token in self.light]


# =============================================================================
# Resolution
# =============================================================================


class _Resolver:
    """Formats tokens against one lookup and records unresolved references."""

    def __init__(self, lookup: ReferenceLookup):
        self.lookup = lookup
        self.unresolved: dict[str, str] = {}

    def token(
        self, section: str, name: str, leaf: TokenLeaf, *, typed: bool = True
    ) -> ResolvedToken:
        resolution = resolve_reference(leaf.value, self.lookup)
        if resolution.unresolved:
            self.unresolved[f"{section}:{name}"] = resolution.reference or ""
        value = format_token(leaf, self.lookup) if typed else format_value(resolution.value)
        return ResolvedToken(
            name=name,
            value=value,
            reference=resolution.reference or "",
            token=leaf,
        )

    def tree(self, section: str, tree: TokenGroup | None) -> list[ResolvedToken]:
        return [self.token(section, name, leaf) for name, leaf in flatten_tokens(tree)]

    def leaves(
        self, section: str, group: TokenGroup | None, *, typed: bool = True
    ) -> list[ResolvedToken]:
        if group is None:
            return []
        return [self.token(section, name, leaf, typed=typed) for name, leaf in group.entries()]


def _radius_group(document: TokenGroup | None) -> TokenGroup | None:
    """Alias radius tokens live under ``container`` or at the document root."""
    if document is None:
        return None
    return document.group("container") or document


def resolve_token_set(
    sources: TokenSources,
    overrides: dict[str, Any] | None = None,
    policy: ReferencePolicy = ReferencePolicy.WARN,
) -> TokenSet:
    """
    Resolve every token category into a TokenSet.

    Args:
        sources: Loaded token documents
        overrides: Optional project override tree, merged into both the
            light and the dark theme before flattening
        policy: WARN passes unresolved references through as literal text
            and logs them; STRICT raises

    Returns:
        Fully formatted token sections.

    Raises:
        UnresolvedReferenceError: Under STRICT when any reference is missing.
    """
    lookup = build_lookup(sources.colors, sources.scale)
    resolver = _Resolver(lookup)

    light_raw = sources.light or {}
    dark_raw = sources.dark or {}
    if overrides:
        light_raw = deep_merge(light_raw, overrides)
        dark_raw = deep_merge(dark_raw, overrides)
    light_tree = parse_document(light_raw) or TokenGroup()
    dark_tree = parse_document(dark_raw) or TokenGroup()

    base_typography = sources.base_typography
    alias_typography = sources.alias_typography
    alias_spacing = sources.alias_spacing

    token_set = TokenSet(
        lookup=lookup,
        base_colors=resolver.tree("colors", sources.colors),
        scale=resolver.tree("scale", sources.scale),
        font_families=resolver.leaves(
            "font-family", base_typography.group("Family", "family") if base_typography else None
        ),
        font_weights=resolver.leaves(
            "font-weight",
            base_typography.group("Weights", "font-weight", "weights") if base_typography else None,
            typed=False,
        ),
        base_radius=resolver.tree("radius", sources.base_radius),
        alias_font_families=resolver.leaves(
            "alias-font-family",
            alias_typography.group("font-family", "family", "Family") if alias_typography else None,
        ),
        alias_font_sizes=resolver.leaves(
            "alias-font-size", alias_typography.group("font-size") if alias_typography else None
        ),
        alias_gaps=resolver.leaves("gap", alias_spacing.group("gap") if alias_spacing else None),
        alias_paddings=resolver.leaves(
            "padding", alias_spacing.group("padding") if alias_spacing else None
        ),
        alias_spacing=resolver.leaves(
            "space", alias_spacing.group("space") if alias_spacing else None
        ),
        alias_radius=resolver.leaves("alias-radius", _radius_group(sources.alias_radius)),
        light=resolver.tree("light", light_tree),
        dark=resolver.tree("dark", dark_tree),
        colors_tree=sources.colors,
        light_tree=light_tree,
        dark_tree=dark_tree,
    )
    token_set.unresolved = dict(resolver.unresolved)

    if token_set.unresolved:
        if policy is ReferencePolicy.STRICT:
            raise UnresolvedReferenceError(token_set.unresolved)
        for name, key in token_set.unresolved.items():
            logger.warning("Unresolved reference {%s} in %s, emitting it verbatim", key, name)

    return token_set
