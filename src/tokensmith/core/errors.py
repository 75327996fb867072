"""
Error types for token loading, resolution and configuration.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class TokensmithError(Exception):
    """Base exception for all tokensmith errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class TokenParseError(TokensmithError):
    """
    Raised when a token document exists but is not valid JSON.

    Fatal for the whole run: a malformed document means the generated
    stylesheet would silently miss a category.
    """

    pass


class UnresolvedReferenceError(TokensmithError):
    """
    Raised in strict mode when a ``{group.key}`` reference has no target.

    Attributes:
        references: Mapping of flattened token name to the missing key.
    """

    def __init__(self, references: dict[str, str]):
        self.references = dict(references)
        listing = ", ".join(f"{name} -> {{{key}}}" for name, key in self.references.items())
        super().__init__(f"Unresolved token references: {listing}")


class ConfigError(TokensmithError):
    """
    Raised when tokensmith.toml cannot be read.

    Examples:
    - Invalid TOML syntax
    - A table where a string path is expected
    """

    pass


@dataclass
class ErrorContext:
    """
    Source location of an error.

    Attributes:
        file: Path to the document where the error occurred
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional source excerpt around the error
    """

    file: Path
    line: int
    column: int
    snippet: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "colors.tokens.json:10:5"
        """
        location = f"{self.file}:{self.line}:{self.column}"
        if self.snippet:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format the snippet with line numbers and an error marker."""
        if not self.snippet:
            return ""

        lines = self.snippet.split("\n")
        formatted = []

        # Snippet starts at most one line before the error
        start_line = max(1, self.line - 1)

        for i, line in enumerate(lines):
            line_num = start_line + i
            prefix = f"{line_num:4d} | "
            formatted.append(prefix + line)

            if line_num == self.line:
                marker_pos = len(prefix) + self.column - 1
                formatted.append(" " * marker_pos + "^^^")

        return "\n".join(formatted)


def make_parse_error(
    message: str,
    file: Path,
    line: int,
    column: int,
    source: str | None = None,
) -> TokenParseError:
    """
    Helper to create a TokenParseError with context.

    Args:
        message: Error description
        file: Token document path
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        source: Full document text, used to cut a snippet around ``line``

    Returns:
        TokenParseError with context attached
    """
    snippet = None
    if source is not None:
        lines = source.splitlines()
        start = max(0, line - 2)
        snippet = "\n".join(lines[start : line + 1]) or None
    context = ErrorContext(file=file, line=line, column=column, snippet=snippet)
    return TokenParseError(message, context)
