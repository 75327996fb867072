"""Shared pytest fixtures for tokensmith tests."""

import json
from pathlib import Path

import pytest

from tokensmith.config import BuildConfig
from tokensmith.core.pipeline import TokenSet, load_sources, resolve_token_set

COLORS = {
    "$description": "Base palette",
    "blue": {
        "500": {
            "$type": "color",
            "$value": {"colorSpace": "srgb", "components": [0, 0.4, 0.8], "alpha": 1},
        },
        "100": {"$type": "color", "$value": {"hex": "#E6F0FA"}},
    },
    "neutral": {
        "0": {"$type": "color", "$value": {"hex": "#FFFFFF"}},
        "900": {"$type": "color", "$value": {"hex": "#111111"}},
    },
    "overlay": {
        "50": {"$type": "color", "$value": {"components": [0, 0, 0], "alpha": 0.5}},
    },
}

SCALE = {
    "scale": {
        "4": {"$type": "number", "$value": 4},
        "8": {"$type": "number", "$value": 8},
        "16": {"$type": "number", "$value": 16},
    },
    "type": {
        "sm": {"$type": "number", "$value": 14},
        "lg": {"$type": "number", "$value": 24.0},
    },
}

BASE_TYPOGRAPHY = {
    "Family": {"Sans": {"$type": "string", "$value": "Inter"}},
    "Weights": {
        "Regular": {"$type": "number", "$value": 400},
        "Bold": {"$type": "number", "$value": 700},
    },
}

BASE_RADIUS = {
    "sm": {"$type": "number", "$value": 4},
    "full": {"$type": "number", "$value": 9999},
}

ALIAS_TYPOGRAPHY = {
    "family": {"body": {"$type": "string", "$value": "Inter"}},
    "font-size": {"body": {"$type": "number", "$value": "{scale.16}"}},
}

ALIAS_SPACING = {
    "gap": {"sm": {"$type": "number", "$value": "{scale.8}"}},
    "padding": {"md": {"$type": "number", "$value": "{scale.16}"}},
    "space": {"xs": {"$type": "number", "$value": "{scale.4}"}},
}

ALIAS_RADIUS = {
    "container": {"card": {"$type": "number", "$value": 8}},
}

LIGHT = {
    "ui": {
        "text": {"default": {"$type": "color", "$value": "{neutral.900}"}},
        "bg": {
            "default": {"$type": "color", "$value": "{neutral.0}"},
            "accent": {"$type": "color", "$value": "{blue.500}"},
        },
        "border": {"default": {"$type": "color", "$value": "{neutral.900}"}},
    }
}

DARK = {
    "ui": {
        "text": {"default": {"$type": "color", "$value": "{neutral.0}"}},
        "bg": {"default": {"$type": "color", "$value": "{neutral.900}"}},
        "border": {"default": {"$type": "color", "$value": "{neutral.0}"}},
    }
}


def write_json(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2))
    return path


@pytest.fixture
def tokens_dir(tmp_path: Path) -> Path:
    """A token repository with every base and alias document."""
    root = tmp_path / "tokens"
    write_json(root / "base" / "colors.tokens.json", COLORS)
    write_json(root / "base" / "scale.tokens.json", SCALE)
    write_json(root / "base" / "typography.tokens.json", BASE_TYPOGRAPHY)
    write_json(root / "base" / "radius.tokens.json", BASE_RADIUS)
    write_json(root / "alias" / "typography.tokens.json", ALIAS_TYPOGRAPHY)
    write_json(root / "alias" / "spacing.tokens.json", ALIAS_SPACING)
    write_json(root / "alias" / "radius.tokens.json", ALIAS_RADIUS)
    write_json(root / "alias" / "ui.light.tokens.json", LIGHT)
    write_json(root / "alias" / "ui.dark.tokens.json", DARK)
    return root


@pytest.fixture
def build_config(tmp_path: Path, tokens_dir: Path) -> BuildConfig:
    """Build configuration writing into the temporary directory."""
    return BuildConfig(
        tokens_dir=tokens_dir,
        output_dir=tmp_path / "styles",
        pages_dir=tmp_path / "dist",
    )


@pytest.fixture
def token_set(build_config: BuildConfig) -> TokenSet:
    """Resolved tokens for the fixture repository."""
    return resolve_token_set(load_sources(build_config))
