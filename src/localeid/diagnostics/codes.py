"""Diagnostic codes and data structures.

Defines error categories, error codes, source spans and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "SourceSpan",
]


class ErrorCategory(StrEnum):
    """Error categorization for LocaleIdentifierError.

    Inherits from ``StrEnum`` so that log aggregation and JSON output receive
    plain strings (``"ordering"``) rather than ``"ErrorCategory.ORDERING"``.

    Categories:
        INVALID_INPUT: Missing input or a character outside the grammar
        EMPTY_CHUNK: Adjacent separators or a separator at a string boundary
        ORDERING: Gettext field out of canonical order or given twice
        SUBTAG_SHAPE: Unicode subtag matches no rule valid for its position
        STRUCTURE: Record lacks what the target form requires
    """

    INVALID_INPUT = "invalid-input"
    EMPTY_CHUNK = "empty-chunk"
    ORDERING = "ordering"
    SUBTAG_SHAPE = "subtag-shape"
    STRUCTURE = "structure"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Invalid input
        2000-2999: Empty chunks
        3000-3999: Gettext ordering violations
        4000-4999: Unicode subtag shape mismatches
        5000-5999: Structural mismatches when serializing
    """

    # Invalid input (1000-1999)
    INPUT_MISSING = 1001
    INPUT_INVALID_CHARACTER = 1002

    # Empty chunks (2000-2999)
    EMPTY_LANGUAGE = 2001
    EMPTY_SEGMENT = 2002

    # Ordering violations (3000-3999)
    TERRITORY_MISPLACED = 3001
    CODESET_MISPLACED = 3002
    MODIFIER_DUPLICATED = 3003

    # Subtag shape mismatches (4000-4999)
    LANGUAGE_INVALID = 4001
    LANGUAGE_OR_SCRIPT_REQUIRED = 4002
    REGION_INVALID = 4003
    VARIANT_INVALID = 4004

    # Structural mismatches (5000-5999)
    LANGUAGE_REQUIRED = 5001
    LANGUAGE_SCRIPT_OR_ROOT_REQUIRED = 5002

    @property
    def category(self) -> ErrorCategory:
        """Category implied by the code's numeric range."""
        return _CATEGORY_BY_THOUSAND[self.value // 1000]


_CATEGORY_BY_THOUSAND: dict[int, ErrorCategory] = {
    1: ErrorCategory.INVALID_INPUT,
    2: ErrorCategory.EMPTY_CHUNK,
    3: ErrorCategory.ORDERING,
    4: ErrorCategory.SUBTAG_SHAPE,
    5: ErrorCategory.STRUCTURE,
}


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location of the offending text inside an identifier.

    Identifiers are single-line, so a span is a half-open character range.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Offending range within the input (None for serializer errors)
        hint: Suggestion for fixing the error
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    @property
    def category(self) -> ErrorCategory:
        """Category of the underlying code."""
        return self.code.category

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[EMPTY_SEGMENT]: Empty segment in 'it__IT'
              --> offset 3
              = help: Remove the repeated separator

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
