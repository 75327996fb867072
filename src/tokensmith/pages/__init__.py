"""Static HTML documentation pages rendered from resolved tokens."""

from .context import PageContext, SectionContext, TokenRowContext
from .registry import PAGES, SECTION_BUILDERS, Page
from .renderer import build_pages, create_jinja_env, page_context, render_page

__all__ = [
    "PAGES",
    "SECTION_BUILDERS",
    "Page",
    "PageContext",
    "SectionContext",
    "TokenRowContext",
    "build_pages",
    "create_jinja_env",
    "page_context",
    "render_page",
]
