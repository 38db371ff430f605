"""Diagnostic codes and data structures.

Defines error codes, character spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "TextSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Configuration errors (raised while building formats and engines)
        2000-2999: Parsing diagnostics (logged, never raised)
        3000-3999: Conversion errors
    """

    # Configuration errors (1000-1999)
    SEPARATOR_OVERLAP = 1001
    SEPARATOR_INVALID = 1002
    LOCALE_UNKNOWN = 1003
    CURRENCY_PATTERN_EMPTY = 1004
    CURRENCY_PATTERN_INVALID = 1005
    WINDOW_SIZE_INVALID = 1006
    CURRENCIES_EMPTY = 1007
    CURRENCY_DUPLICATE = 1008
    MATCH_MODE_EMPTY = 1009

    # Parsing diagnostics (2000-2999)
    NUMBER_UNPARSABLE = 2001

    # Conversion errors (3000-3999)
    CONVERSION_CURRENCY_MISMATCH = 3001


@dataclass(frozen=True, slots=True)
class TextSpan:
    """Half-open character span inside scanned text.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes. A multi-byte symbol such as the euro sign counts as one.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate TextSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"TextSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"TextSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Location in scanned text (None for configuration errors)
        hint: Suggestion for fixing the error
        subject: Name of the offending object (currency ISO, format name)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: TextSpan | None = None
    hint: str | None = None
    subject: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[SEPARATOR_OVERLAP]: Separators ',' are both thousand and decimal separators
              = subject: custom
              = help: Remove the shared characters from one of the two sets

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
