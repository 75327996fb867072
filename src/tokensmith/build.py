"""
Build orchestration.

One generation pass: load token documents, resolve them once, then write
each artifact as soon as its text is ready. Nothing is retained between
passes, so watch mode simply calls these functions again.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .config import BuildConfig
from .core.loader import load_overrides
from .core.pipeline import ReferencePolicy, TokenSet, load_sources, resolve_token_set
from .emitters import generate_css, generate_sass
from .pages import build_pages

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Outcome of a generation pass."""

    token_set: TokenSet
    written: list[Path] = field(default_factory=list)


def resolve_tokens(config: BuildConfig) -> TokenSet:
    """Load every token document and resolve it into a TokenSet."""
    sources = load_sources(config)
    overrides = load_overrides(config.overrides_path)
    policy = ReferencePolicy.STRICT if config.strict else ReferencePolicy.WARN
    token_set = resolve_token_set(sources, overrides, policy)
    logger.info(
        "UI tokens: %d (light) / %d (dark)", len(token_set.light), len(token_set.dark)
    )
    return token_set


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    logger.info("Generated %s", path)
    return path


def build_tokens(config: BuildConfig, token_set: TokenSet | None = None) -> BuildResult:
    """Write tokens.css and _tokens.sass."""
    token_set = token_set or resolve_tokens(config)
    result = BuildResult(token_set=token_set)
    result.written.append(_write(config.css_path, generate_css(token_set)))
    result.written.append(_write(config.sass_path, generate_sass(token_set)))
    return result


def build_docs(config: BuildConfig, token_set: TokenSet | None = None) -> BuildResult:
    """Write the HTML documentation pages."""
    token_set = token_set or resolve_tokens(config)
    written = build_pages(
        token_set,
        config.pages_dir,
        brand=config.brand_name,
        stylesheet=config.css_path,
    )
    return BuildResult(token_set=token_set, written=written)


def build_all(config: BuildConfig) -> BuildResult:
    """Stylesheets, then pages, from a single resolution pass."""
    token_set = resolve_tokens(config)
    result = build_tokens(config, token_set)
    result.written.extend(build_docs(config, token_set).written)
    return result
