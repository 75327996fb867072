"""Tests for the CSS and Sass generators."""

import pytest

from tokensmith.core.pipeline import ResolvedToken, TokenSet
from tokensmith.emitters import generate_css, generate_sass
from tokensmith.emitters.css import HEADER, dark_properties, root_properties


@pytest.fixture
def small_set():
    return TokenSet(
        base_colors=[ResolvedToken("blue-500", "#0066CC")],
        scale=[ResolvedToken("scale-4", "4px")],
        font_families=[ResolvedToken("Sans", "Inter")],
        font_weights=[ResolvedToken("Bold", "700")],
        base_radius=[ResolvedToken("sm", "4px")],
        alias_font_families=[ResolvedToken("body", "Inter")],
        alias_font_sizes=[ResolvedToken("body", "16px", "scale.16")],
        alias_gaps=[ResolvedToken("sm", "8px")],
        alias_paddings=[ResolvedToken("md", "16px")],
        alias_radius=[ResolvedToken("card", "8px")],
        light=[ResolvedToken("ui-bg-default", "#FFFFFF")],
        dark=[ResolvedToken("ui-bg-default", "#111111")],
    )


class TestGenerateCss:
    def test_full_output(self, small_set):
        expected = """/* Auto-generated from token files - DO NOT EDIT */

:root {
  --color-blue-500: #0066CC;
  --space-scale-4: 4px;
  --font-sans: "Inter";
  --font-weight-bold: 700;
  --radius-sm: 4px;
  --ui-bg-default: #FFFFFF;
}

[data-theme="dark"] {
  --ui-bg-default: #111111;
}
"""
        assert generate_css(small_set) == expected

    def test_empty_set_still_has_both_blocks(self):
        css = generate_css(TokenSet())

        assert css.startswith(HEADER)
        assert ":root {\n}" in css
        assert '[data-theme="dark"] {\n}' in css

    def test_dark_block_redeclares_light_names(self, token_set):
        root_names = {name for name, _ in root_properties(token_set)}

        for name, _ in dark_properties(token_set):
            assert name in root_names

    def test_resolved_fixture_values(self, token_set):
        css = generate_css(token_set)

        assert "--color-overlay-50: rgba(0, 0, 0, 0.5);" in css
        assert "--ui-bg-accent: #0066CC;" in css
        assert "{neutral" not in css

    def test_deterministic(self, token_set):
        assert generate_css(token_set) == generate_css(token_set)


class TestGenerateSass:
    def test_sections_in_order(self, small_set):
        sass = generate_sass(small_set)

        markers = [
            "// ===== BASE TOKENS =====",
            "// Scale",
            "// Typography",
            "// Radius",
            "// ===== ALIAS TOKENS =====",
            "// Typography Alias",
            "// Spacing Alias",
            "// Radius Alias",
            "// ===== UI COLORS =====",
            "// Light Mode",
            "// Dark Mode",
            "// ===== CSS CUSTOM PROPERTIES =====",
        ]
        positions = [sass.index(marker) for marker in markers]
        assert positions == sorted(positions)

    def test_variables(self, small_set):
        lines = generate_sass(small_set).splitlines()

        assert "$color-blue-500: #0066CC" in lines
        assert "$spacing-scale-4: 4px" in lines
        assert '$font-family-Sans: "Inter"' in lines
        assert "$font-weight-bold: 700" in lines
        assert "$radius-sm: 4px" in lines
        assert '$alias-font-body: "Inter"' in lines
        assert "$font-size-body: 16px" in lines
        assert "$gap-sm: 8px" in lines
        assert "$padding-md: 16px" in lines
        assert "$radius-card: 8px" in lines
        assert "$alias-light-ui-bg-default: #FFFFFF" in lines
        assert "$alias-dark-ui-bg-default: #111111" in lines

    def test_custom_property_block_is_indented_syntax(self, small_set):
        sass = generate_sass(small_set)

        assert "\\:root\n  --color-blue-500: #0066CC\n" in sass
        assert '[data-theme="dark"]\n  --ui-bg-default: #111111\n' in sass
        assert ";" not in sass

    def test_absent_sections_are_omitted(self):
        sass = generate_sass(TokenSet())

        assert "// Scale" not in sass
        assert "// Typography Alias" not in sass
        assert sass.endswith('[data-theme="dark"]\n')
