"""
Jinja2 renderer for the documentation pages.

Sets up the Jinja2 environment with custom filters and template loading
from the package ``templates/`` directory, optionally shadowed by a
project template directory.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Any

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup, escape

from tokensmith.core.pipeline import TokenSet

from .context import NavGroupContext, NavItemContext, PageContext
from .registry import PAGES, SECTION_BUILDERS, Page

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"


def _slugify_filter(value: Any) -> str:
    """Slugify a string for use as an HTML id attribute."""
    if value is None:
        return ""
    text = str(value).lower().strip()
    text = re.sub(r"[^a-z0-9]+", "-", text)
    return text.strip("-")


def _reference_filter(value: Any) -> Markup:
    """Render a reference key as ``{group.key}`` code, or nothing."""
    if not value:
        return Markup("")
    return Markup("<code class=\"ref\">{%s}</code>") % escape(value)


def create_jinja_env(project_templates_dir: Path | None = None) -> Environment:
    """Create and configure the Jinja2 environment.

    Args:
        project_templates_dir: Optional directory whose templates take
            priority over the packaged ones (same file names).
    """
    loaders = []
    if project_templates_dir and project_templates_dir.is_dir():
        loaders.append(FileSystemLoader(str(project_templates_dir)))
    loaders.append(FileSystemLoader(str(TEMPLATES_DIR)))

    env = Environment(
        loader=ChoiceLoader(loaders),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["slugify"] = _slugify_filter
    env.filters["reference"] = _reference_filter
    return env


def build_nav(active_id: str) -> list[NavGroupContext]:
    """Navigation groups in registry order."""
    groups: dict[str, NavGroupContext] = {}
    for page in PAGES:
        group = groups.setdefault(page.group, NavGroupContext(title=page.group))
        group.items.append(
            NavItemContext(label=page.label, href=page.file, active=page.id == active_id)
        )
    return list(groups.values())


def page_context(
    page: Page, token_set: TokenSet, *, brand: str, stylesheet: str = ""
) -> PageContext:
    builder = SECTION_BUILDERS[page.id]
    return PageContext(
        id=page.id,
        title=page.label,
        brand=brand,
        description=page.description,
        stylesheet=stylesheet,
        nav=build_nav(page.id),
        sections=builder(token_set),
    )


def render_page(context: PageContext, env: Environment | None = None) -> str:
    """
    Render one page.

    Args:
        context: Page data
        env: Jinja2 environment (a default one is created when omitted)

    Returns:
        Complete HTML document.
    """
    env = env or create_jinja_env()
    template = env.get_template("page.html")
    return template.render(page=context)


def build_pages(
    token_set: TokenSet,
    output_dir: Path,
    *,
    brand: str,
    stylesheet: Path | None = None,
    project_templates_dir: Path | None = None,
) -> list[Path]:
    """
    Render every registered page into ``output_dir``.

    Args:
        token_set: Resolved tokens
        output_dir: Destination directory (created if missing)
        brand: Design system name shown in the header
        stylesheet: Generated tokens.css to link from each page
        project_templates_dir: Optional template overrides

    Returns:
        Paths of the written pages, in registry order.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    env = create_jinja_env(project_templates_dir)

    href = ""
    if stylesheet is not None:
        href = Path(os.path.relpath(stylesheet, output_dir)).as_posix()

    written: list[Path] = []
    for page in PAGES:
        context = page_context(page, token_set, brand=brand, stylesheet=href)
        html = render_page(context, env)
        out_path = output_dir / page.file
        out_path.write_text(html, encoding="utf-8")
        logger.info("Generated page %s (%d sections)", out_path, len(context.sections))
        written.append(out_path)
    return written
