"""
Token document loading.

Token categories are optional: a project may have no radius tokens at all.
A missing file is therefore not an error and is reported as ``None``; a
file that exists but does not parse is fatal.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .errors import make_parse_error
from .ir import TokenGroup, parse_document

logger = logging.getLogger(__name__)


def read_token_document(directory: Path | str, filename: str) -> dict[str, Any] | None:
    """
    Read a raw token document.

    Args:
        directory: Directory containing the document
        filename: Document filename (e.g. ``colors.tokens.json``)

    Returns:
        Parsed JSON object, or None when the file does not exist.

    Raises:
        TokenParseError: If the file exists but is not valid UTF-8 JSON.
    """
    path = Path(directory) / filename
    if not path.is_file():
        logger.debug("Token document not found, skipping: %s", path)
        return None

    raw = path.read_bytes()
    try:
        source = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        line = raw.count(b"\n", 0, e.start) + 1
        column = e.start - (raw.rfind(b"\n", 0, e.start) + 1) + 1
        raise make_parse_error(
            f"Token document is not valid UTF-8: {e.reason}", path, line, column
        ) from e

    try:
        data = json.loads(source)
    except json.JSONDecodeError as e:
        raise make_parse_error(
            f"Invalid JSON in token document: {e.msg}", path, e.lineno, e.colno, source
        ) from e

    if not isinstance(data, dict):
        raise make_parse_error(
            f"Token document must be a JSON object, got {type(data).__name__}", path, 1, 1
        )

    logger.debug("Loaded token document %s (%d top-level keys)", path, len(data))
    return data


def read_first_document(directory: Path | str, *filenames: str) -> dict[str, Any] | None:
    """Read the first existing document among ``filenames``."""
    for filename in filenames:
        data = read_token_document(directory, filename)
        if data is not None:
            return data
    return None


def load_token_file(directory: Path | str, filename: str) -> TokenGroup | None:
    """Read and parse a token document into a TokenGroup (None when absent)."""
    return parse_document(read_token_document(directory, filename))


def load_overrides(path: Path | str | None) -> dict[str, Any] | None:
    """
    Read a project override document.

    A path that does not exist is logged and ignored so a build with a stale
    ``--project-overrides`` flag still produces the shared tokens.
    """
    if path is None:
        return None
    override_path = Path(path)
    if not override_path.is_file():
        logger.warning("Project overrides file not found: %s", override_path)
        return None

    data = read_token_document(override_path.parent, override_path.name)
    logger.info("Loaded project overrides from %s", override_path)
    return data
