"""
tokensmith - design token resolver.

Reads DTCG-style token documents, resolves ``{group.key}`` references against
the foundational palette and scale, and emits ``tokens.css``,
``_tokens.sass`` and static HTML documentation pages.
"""

from ._version import get_version
from .build import BuildResult, build_all, build_docs, build_tokens, resolve_tokens
from .config import BuildConfig, load_config
from .core import (
    ReferencePolicy,
    TokenGroup,
    TokenLeaf,
    TokenParseError,
    TokenSet,
    TokensmithError,
    UnresolvedReferenceError,
    deep_merge,
    flatten_tokens,
    format_token,
    resolve_token_set,
)

__version__ = get_version()

__all__ = [
    "BuildConfig",
    "BuildResult",
    "ReferencePolicy",
    "TokenGroup",
    "TokenLeaf",
    "TokenParseError",
    "TokenSet",
    "TokensmithError",
    "UnresolvedReferenceError",
    "__version__",
    "build_all",
    "build_docs",
    "build_tokens",
    "deep_merge",
    "flatten_tokens",
    "format_token",
    "load_config",
    "resolve_token_set",
    "resolve_tokens",
]
