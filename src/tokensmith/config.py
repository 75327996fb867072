"""
Build configuration.

Settings come from, in order of precedence: CLI flags, environment
variables, an optional ``tokensmith.toml`` and built-in defaults.

Example ``tokensmith.toml``::

    [tokens]
    dir = "~/Projects/tokens"

    [output]
    styles = "src/styles"
    pages = "dist"

    [pages]
    brand = "Heavy Design System"

    [project]
    overrides = "tokens/project.tokens.json"
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from .core.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "tokensmith.toml"

ENV_TOKENS_DIR = "TOKENSMITH_TOKENS_DIR"
ENV_OUTPUT_DIR = "TOKENSMITH_OUTPUT_DIR"
ENV_PAGES_DIR = "TOKENSMITH_PAGES_DIR"


def _default_tokens_dir() -> Path:
    return Path.home() / "Projects" / "tokens"


@dataclass
class TokenFiles:
    """Token document filenames within the base and alias directories."""

    colors: str = "colors.tokens.json"
    scale: str = "scale.tokens.json"
    typography: str = "typography.tokens.json"
    spacing: str = "spacing.tokens.json"
    radius: str = "radius.tokens.json"
    light: tuple[str, ...] = ("ui.light.tokens.json", "light.tokens.json")
    dark: tuple[str, ...] = ("ui.dark.tokens.json", "dark.tokens.json")


@dataclass
class BuildConfig:
    """Resolved settings for one generation run."""

    tokens_dir: Path = field(default_factory=_default_tokens_dir)
    base_subdir: str = "base"
    alias_subdir: str = "alias"
    output_dir: Path = field(default_factory=lambda: Path("styles"))
    pages_dir: Path = field(default_factory=lambda: Path("dist"))
    css_filename: str = "tokens.css"
    sass_filename: str = "_tokens.sass"
    brand_name: str = "Heavy Design System"
    overrides_path: Path | None = None
    strict: bool = False
    files: TokenFiles = field(default_factory=TokenFiles)

    @property
    def base_dir(self) -> Path:
        return self.tokens_dir / self.base_subdir

    @property
    def alias_dir(self) -> Path:
        return self.tokens_dir / self.alias_subdir

    @property
    def css_path(self) -> Path:
        return self.output_dir / self.css_filename

    @property
    def sass_path(self) -> Path:
        return self.output_dir / self.sass_filename

    def with_overrides(self, **changes: Any) -> BuildConfig:
        """Return a copy with non-None ``changes`` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def _path(value: Any, key: str, base: Path) -> Path:
    if not isinstance(value, str):
        raise ConfigError(f"{key} must be a string path, got {type(value).__name__}")
    path = Path(value).expanduser()
    return path if path.is_absolute() else base / path


def load_config(path: Path | None = None, env: dict[str, str] | None = None) -> BuildConfig:
    """
    Load build configuration.

    Args:
        path: Explicit config file. Defaults to ``./tokensmith.toml`` when
            present; a missing default file is not an error.
        env: Environment mapping (defaults to ``os.environ``)

    Returns:
        BuildConfig with file and environment settings applied.

    Raises:
        ConfigError: If the file is unreadable TOML or has bad value types.
    """
    env = dict(os.environ) if env is None else env
    config = BuildConfig()

    config_path = path if path is not None else Path.cwd() / CONFIG_FILENAME
    if config_path.is_file():
        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e
        config = _apply_file(config, data, config_path.parent)
        logger.debug("Loaded configuration from %s", config_path)
    elif path is not None:
        raise ConfigError(f"Config file not found: {path}")

    if env.get(ENV_TOKENS_DIR):
        config.tokens_dir = Path(env[ENV_TOKENS_DIR]).expanduser()
    if env.get(ENV_OUTPUT_DIR):
        config.output_dir = Path(env[ENV_OUTPUT_DIR]).expanduser()
    if env.get(ENV_PAGES_DIR):
        config.pages_dir = Path(env[ENV_PAGES_DIR]).expanduser()

    return config


def _apply_file(config: BuildConfig, data: dict[str, Any], root: Path) -> BuildConfig:
    tokens = data.get("tokens", {})
    output = data.get("output", {})
    pages = data.get("pages", {})

    if "dir" in tokens:
        config.tokens_dir = _path(tokens["dir"], "tokens.dir", root)
    config.base_subdir = tokens.get("base", config.base_subdir)
    config.alias_subdir = tokens.get("alias", config.alias_subdir)

    if "styles" in output:
        config.output_dir = _path(output["styles"], "output.styles", root)
    if "pages" in output:
        config.pages_dir = _path(output["pages"], "output.pages", root)
    config.css_filename = output.get("css", config.css_filename)
    config.sass_filename = output.get("sass", config.sass_filename)

    config.brand_name = pages.get("brand", config.brand_name)

    if "overrides" in data.get("project", {}):
        config.overrides_path = _path(data["project"]["overrides"], "project.overrides", root)

    return config
