"""Structured error types for token import and export.

Every error carries a category, a human-readable message, an optional
recovery suggestion and a details dict, so the CLI can render failures
consistently.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .exporters.base import ExportFailure


class ErrorCategory(Enum):
    """Categories of token errors."""

    FORMAT = "format"  # Unrecognized or malformed input
    EMPTY = "empty"  # Recognized input without tokens
    EXPORT = "export"  # Export target problems
    CONFIGURATION = "configuration"


ANSI_STYLES = {
    "error": "\033[91m",
    "suggestion": "\033[96m",
    "detail": "\033[2m",
}
ANSI_RESET = "\033[0m"


def _style(text: str, role: str, use_color: bool) -> str:
    if not use_color:
        return text
    return f"{ANSI_STYLES[role]}{text}{ANSI_RESET}"


@dataclass
class TokenError(Exception):
    """Base class for structured token errors.

    Attributes:
        category: Error category for grouping.
        message: Human-readable error message.
        suggestion: Optional actionable recovery suggestion.
        details: Optional additional details dict.
        notation: Source notation the error refers to, shown in the header.
        exit_code: Exit code to use when this error terminates the CLI.
    """

    category: ErrorCategory
    message: str
    suggestion: str | None = None
    details: dict[str, Any] | None = field(default_factory=dict)
    notation: str | None = None
    exit_code: int = 1

    def __post_init__(self) -> None:
        super().__init__(self.message)

    @property
    def headline(self) -> str:
        """Error label, tagged with the notation when one is known."""
        if self.notation:
            return f"Error [{self.notation}]:"
        return "Error:"

    def format(self, use_color: bool = True) -> str:
        """Render the error, its suggestion and details for a terminal.

        Args:
            use_color: Whether to include ANSI color codes.
        """
        lines = [f"{_style(self.headline, 'error', use_color)} {self.message}"]
        if self.suggestion:
            lines.append(f"{_style('Suggestion:', 'suggestion', use_color)} {self.suggestion}")
        for key, value in (self.details or {}).items():
            lines.append(_style(f"  {key}: {value}", "detail", use_color))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.format(use_color=False)


class FormatError(TokenError):
    """Input could not be recognized or violates a notation precondition."""

    def __init__(self, reason: str, notation: str = "unknown"):
        super().__init__(
            category=ErrorCategory.FORMAT,
            message=f"Cannot import tokens: {reason}",
            suggestion=(
                "Use Style Dictionary, Token Studio, W3C DTCG, "
                "Figma variables JSON, or CSV with name and value columns"
            ),
            details=None,
            notation=notation,
        )
        self.reason = reason


class EmptyResultError(TokenError):
    """The notation was recognized but yielded no tokens.

    Export raises it without a notation when the collection is empty.
    """

    def __init__(self, notation: str | None, message: str | None = None):
        super().__init__(
            category=ErrorCategory.EMPTY,
            message=message or f"No tokens found in {notation} input",
            suggestion="Check that the file contains token leaves with values",
            details=None,
            notation=notation,
        )


class ExportTargetError(TokenError):
    """One or more requested export formats have no registered exporter."""

    def __init__(self, formats: list[str]):
        joined = ", ".join(formats)
        super().__init__(
            category=ErrorCategory.EXPORT,
            message=f"No exporter registered for: {joined}",
            suggestion=(
                "Choose from style-dictionary, w3c-dtcg, css, tailwind, typescript"
            ),
            details={"formats": joined},
        )
        self.formats = formats


class ConfigurationError(TokenError):
    """Error in configuration file or settings."""

    def __init__(self, message: str, config_file: str | None = None):
        super().__init__(
            category=ErrorCategory.CONFIGURATION,
            message=message,
            suggestion="Check your configuration file syntax and field values",
            details={"config_file": config_file} if config_file else None,
        )


class PartialExportWarning(UserWarning):
    """Some requested notations failed while others succeeded."""

    def __init__(self, failures: list[ExportFailure]):
        self.failures = list(failures)
        names = ", ".join(f"{f.format_name} ({f.reason})" for f in self.failures)
        super().__init__(f"Export partially failed: {names}")
