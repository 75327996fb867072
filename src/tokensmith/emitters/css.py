"""
CSS generator for resolved tokens.

Emits one ``:root`` block with the base tokens and the light UI theme, and a
``[data-theme="dark"]`` block that re-declares the UI names with dark values.
"""

from __future__ import annotations

from tokensmith.core.pipeline import TokenSet

HEADER = "/* Auto-generated from token files - DO NOT EDIT */"


def quote_font(value: str) -> str:
    """Wrap a font-family name in double quotes for CSS."""
    return f'"{value}"'


def root_properties(token_set: TokenSet) -> list[tuple[str, str]]:
    """
    Custom properties of the ``:root`` block, in output order.

    Returns:
        ``(property-name, value)`` pairs without the leading ``--``.
    """
    props: list[tuple[str, str]] = []
    props.extend((f"color-{t.name}", t.value) for t in token_set.base_colors)
    props.extend((f"space-{t.name}", t.value) for t in token_set.scale)
    props.extend((f"font-{t.name.lower()}", quote_font(t.value)) for t in token_set.font_families)
    props.extend((f"font-weight-{t.name.lower()}", t.value) for t in token_set.font_weights)
    props.extend((f"radius-{t.name}", t.value) for t in token_set.base_radius)
    props.extend((t.name, t.value) for t in token_set.light)
    return props


def dark_properties(token_set: TokenSet) -> list[tuple[str, str]]:
    return [(t.name, t.value) for t in token_set.dark]


def _block(selector: str, props: list[tuple[str, str]], indent: int = 2) -> list[str]:
    prefix = " " * indent
    lines = [f"{selector} {{"]
    lines.extend(f"{prefix}--{name}: {value};" for name, value in props)
    lines.append("}")
    return lines


def generate_css(token_set: TokenSet) -> str:
    """
    Generate the token stylesheet.

    Args:
        token_set: Resolved tokens

    Returns:
        CSS text ending in a newline
    """
    lines: list[str] = [HEADER, ""]
    lines.extend(_block(":root", root_properties(token_set)))
    lines.append("")
    lines.extend(_block('[data-theme="dark"]', dark_properties(token_set)))
    return "\n".join(lines) + "\n"

