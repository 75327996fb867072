"""
Sass (indented syntax) generator.

Produces ``_tokens.sass``: base and alias tokens as Sass variables, the UI
theme pair as ``$alias-light-*`` / ``$alias-dark-*`` variables, and the same
custom-property blocks as the CSS output for stylesheets that only import
the Sass partial.
"""

from __future__ import annotations

from collections.abc import Iterable

from tokensmith.core.pipeline import ResolvedToken, TokenSet

from .css import dark_properties, quote_font, root_properties


def _variables(
    lines: list[str],
    title: str | None,
    prefix: str,
    tokens: Iterable[ResolvedToken],
    *,
    quote: bool = False,
    lower: bool = False,
) -> None:
    tokens = list(tokens)
    if not tokens:
        return
    if title:
        lines.append("")
        lines.append(f"// {title}")
    for token in tokens:
        name = token.name.lower() if lower else token.name
        value = quote_font(token.value) if quote else token.value
        lines.append(f"${prefix}{name}: {value}")


def generate_sass(token_set: TokenSet) -> str:
    """
    Generate the Sass partial.

    Sections with no tokens (absent documents) are left out entirely.
    """
    lines: list[str] = [
        "// Auto-generated from token files - DO NOT EDIT",
        "// Run `tokensmith tokens` to regenerate",
        "",
        "// ===== BASE TOKENS =====",
    ]

    _variables(lines, None, "color-", token_set.base_colors)
    _variables(lines, "Scale", "spacing-", token_set.scale)
    if token_set.font_families or token_set.font_weights:
        lines.append("")
        lines.append("// Typography")
        _variables(lines, None, "font-family-", token_set.font_families, quote=True)
        _variables(lines, None, "font-weight-", token_set.font_weights, lower=True)
    _variables(lines, "Radius", "radius-", token_set.base_radius)

    lines.append("")
    lines.append("// ===== ALIAS TOKENS =====")

    if token_set.alias_font_families or token_set.alias_font_sizes:
        lines.append("")
        lines.append("// Typography Alias")
        _variables(lines, None, "alias-font-", token_set.alias_font_families, quote=True)
        _variables(lines, None, "font-size-", token_set.alias_font_sizes)
    if token_set.alias_gaps or token_set.alias_paddings:
        lines.append("")
        lines.append("// Spacing Alias")
        _variables(lines, None, "gap-", token_set.alias_gaps)
        _variables(lines, None, "padding-", token_set.alias_paddings)
    _variables(lines, "Radius Alias", "radius-", token_set.alias_radius)

    lines.append("")
    lines.append("// ===== UI COLORS =====")
    lines.append("")
    lines.append("// Light Mode")
    _variables(lines, None, "alias-light-", token_set.light)
    lines.append("")
    lines.append("// Dark Mode")
    _variables(lines, None, "alias-dark-", token_set.dark)

    lines.append("")
    lines.append("// ===== CSS CUSTOM PROPERTIES =====")
    lines.append("")
    lines.append("\\:root")
    lines.extend(f"  --{name}: {value}" for name, value in root_properties(token_set))
    lines.append("")
    lines.append('[data-theme="dark"]')
    lines.extend(f"  --{name}: {value}" for name, value in dark_properties(token_set))

    return "\n".join(lines) + "\n"
