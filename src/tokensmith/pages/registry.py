"""
Documentation page registry and section builders.

Each page id maps to a builder that turns a TokenSet into ordered
``SectionContext`` data. Builders drop sections with no rows so an absent
token category renders as an empty page rather than an error.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from tokensmith.core.flatten import flatten_tokens
from tokensmith.core.formatter import format_token
from tokensmith.core.ir import TokenGroup
from tokensmith.core.pipeline import ResolvedToken, TokenSet

from .context import SectionContext, TokenRowContext


@dataclass(frozen=True)
class Page:
    """A generated documentation page."""

    file: str
    id: str
    label: str
    group: str
    description: str = ""


PAGES: list[Page] = [
    Page(
        "index.html",
        "colors",
        "Colors",
        "Foundations",
        "Alias color tokens for light and dark themes, referencing base color primitives.",
    ),
    Page(
        "typography.html",
        "typography",
        "Typography",
        "Foundations",
        "Font families, weights and sizes composed from base primitives.",
    ),
    Page(
        "spacing.html",
        "spacing",
        "Spacing",
        "Foundations",
        "Semantic spacing aliases built from the base scale.",
    ),
    Page(
        "radius.html",
        "radius",
        "Radius",
        "Foundations",
        "Radius tokens from subtle rounding to fully round.",
    ),
    Page(
        "scale.html",
        "scale",
        "Scale",
        "Foundations",
        "A shared base scale used by spacing, typography, and layout tokens.",
    ),
]

# Theme color groups shown first, in this order; the rest keep document order
UI_GROUP_ORDER = ["bg", "text", "border"]

UI_GROUP_LABELS = {
    "bg": "Background",
    "surface": "Surface",
    "border": "Border",
    "text": "Text",
    "action": "Action",
    "feedback": "Feedback",
}


# =============================================================================
# Row helpers
# =============================================================================


def _css_rows(
    tokens: list[ResolvedToken], prefix: str, sample: str = "", *, lower: bool = False
) -> list[TokenRowContext]:
    rows = []
    for token in tokens:
        name = f"{prefix}{token.name.lower() if lower else token.name}"
        rows.append(
            TokenRowContext(
                name=name,
                variable=f"--{name}",
                value=token.value,
                reference=token.reference,
                sample_style=sample.format(var=f"var(--{name})", value=token.value),
            )
        )
    return rows


def _sass_rows(
    tokens: list[ResolvedToken], prefix: str, sample: str = ""
) -> list[TokenRowContext]:
    return [
        TokenRowContext(
            name=f"{prefix}{token.name}",
            variable=f"${prefix}{token.name}",
            value=token.value,
            reference=token.reference,
            sample_style=sample.format(value=token.value),
        )
        for token in tokens
    ]


def _sections(*sections: SectionContext) -> list[SectionContext]:
    return [section for section in sections if section.rows]


def _ui_root(tree: TokenGroup) -> tuple[TokenGroup, str]:
    """UI theme groups live under ``ui`` in most token repositories."""
    ui = tree.group("ui")
    if ui is not None:
        return ui, "ui-"
    return tree, ""


def ui_color_sections(token_set: TokenSet) -> list[SectionContext]:
    """
    Theme color tables, one per UI group, light and dark values side by side.

    A token missing from the dark theme shows empty dark cells.
    """
    pairs = {name: (light, dark) for name, light, dark in token_set.theme_pairs()}
    ui, prefix = _ui_root(token_set.light_tree)

    group_keys = [key for key, _ in ui.groups()]
    ordered = sorted(
        group_keys,
        key=lambda k: UI_GROUP_ORDER.index(k) if k in UI_GROUP_ORDER else len(UI_GROUP_ORDER),
    )

    sections = []
    for group_key in ordered:
        group = ui.children[group_key]
        rows = []
        for name, _ in flatten_tokens(group, f"{prefix}{group_key}"):
            light, dark = pairs.get(name, (None, None))
            if light is None:
                continue
            rows.append(
                TokenRowContext(
                    name=name,
                    variable=f"--{name}",
                    value=light.value,
                    reference=light.reference,
                    dark_value=dark.value if dark else "",
                    dark_reference=dark.reference if dark else "",
                    sample_style=f"background: {light.value}",
                )
            )
        sections.append(
            SectionContext(
                title=UI_GROUP_LABELS.get(group_key, group_key),
                kind="theme-colors",
                rows=rows,
            )
        )
    return _sections(*sections)


def color_family_sections(token_set: TokenSet) -> list[SectionContext]:
    """Base palette tables, one per color family."""
    colors = token_set.colors_tree
    if colors is None:
        return []

    sections = []
    for family, shades in colors.groups():
        rows = []
        for stop, leaf in shades.leaves():
            value = format_token(leaf, token_set.lookup)
            name = f"color-{family}-{stop}"
            rows.append(
                TokenRowContext(
                    name=name,
                    variable=f"--{name}",
                    value=value,
                    sample_style=f"background: {value}",
                )
            )
        sections.append(SectionContext(title=family, kind="colors", rows=rows))
    return _sections(*sections)


# =============================================================================
# Page builders
# =============================================================================

_FONT_SAMPLE = "font-family: {var}; font-size: 20px"


def colors_sections(token_set: TokenSet) -> list[SectionContext]:
    return ui_color_sections(token_set) + color_family_sections(token_set)


def typography_sections(token_set: TokenSet) -> list[SectionContext]:
    families = _css_rows(token_set.font_families, "font-", _FONT_SAMPLE, lower=True)
    for row in families:
        row.value = f'"{row.value}"'

    type_scale = [t for t in token_set.scale if t.name.startswith("type-")]

    return _sections(
        SectionContext(title="Font Family", rows=families),
        SectionContext(
            title="Font Weights",
            rows=_css_rows(
                token_set.font_weights, "font-weight-", "font-weight: {value}", lower=True
            ),
        ),
        SectionContext(
            title="Font Sizes",
            rows=_sass_rows(token_set.alias_font_sizes, "font-size-", "font-size: {value}"),
        ),
        SectionContext(
            title="Type Scale",
            rows=_css_rows(type_scale, "space-", "font-size: {value}"),
        ),
    )


def spacing_sections(token_set: TokenSet) -> list[SectionContext]:
    bar = "width: {value}"
    return _sections(
        SectionContext(
            title="Spacing Aliases", rows=_sass_rows(token_set.alias_spacing, "space-", bar)
        ),
        SectionContext(title="Gap", rows=_sass_rows(token_set.alias_gaps, "gap-", bar)),
        SectionContext(
            title="Padding", rows=_sass_rows(token_set.alias_paddings, "padding-", bar)
        ),
    )


def radius_sections(token_set: TokenSet) -> list[SectionContext]:
    corner = "border-radius: {value}"
    return _sections(
        SectionContext(
            title="Radius Scale", rows=_css_rows(token_set.base_radius, "radius-", corner)
        ),
        SectionContext(
            title="Radius Aliases", rows=_sass_rows(token_set.alias_radius, "radius-", corner)
        ),
    )


def scale_sections(token_set: TokenSet) -> list[SectionContext]:
    return _sections(
        SectionContext(title="Base", rows=_css_rows(token_set.scale, "space-", "width: {value}")),
    )


SECTION_BUILDERS: dict[str, Callable[[TokenSet], list[SectionContext]]] = {
    "colors": colors_sections,
    "typography": typography_sections,
    "spacing": spacing_sections,
    "radius": radius_sections,
    "scale": scale_sections,
}
