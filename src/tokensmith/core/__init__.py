"""Token resolution core: loading, IR, references, formatting, flattening, merging."""

from .errors import (
    ConfigError,
    ErrorContext,
    TokenParseError,
    TokensmithError,
    UnresolvedReferenceError,
)
from .flatten import flatten_tokens, iter_tokens
from .formatter import format_token, format_value
from .ir import FlatToken, TokenGroup, TokenLeaf, TokenType, parse_tree
from .loader import load_overrides, load_token_file, read_token_document
from .merge import deep_merge
from .pipeline import (
    ReferencePolicy,
    ResolvedToken,
    TokenSet,
    TokenSources,
    load_sources,
    resolve_token_set,
)
from .references import (
    ReferenceLookup,
    Resolution,
    build_lookup,
    resolve,
    resolve_reference,
)

__all__ = [
    "ConfigError",
    "ErrorContext",
    "FlatToken",
    "ReferenceLookup",
    "ReferencePolicy",
    "Resolution",
    "ResolvedToken",
    "TokenGroup",
    "TokenLeaf",
    "TokenParseError",
    "TokenSet",
    "TokenSources",
    "TokenType",
    "TokensmithError",
    "UnresolvedReferenceError",
    "build_lookup",
    "deep_merge",
    "flatten_tokens",
    "format_token",
    "format_value",
    "iter_tokens",
    "load_overrides",
    "load_sources",
    "load_token_file",
    "parse_tree",
    "read_token_document",
    "resolve",
    "resolve_reference",
    "resolve_token_set",
]
