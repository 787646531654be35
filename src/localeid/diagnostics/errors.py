"""localeid exception hierarchy with structured diagnostics.

All exceptions store a Diagnostic; the error category is derived from its
code so callers can branch on ErrorCategory without matching messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCategory

__all__ = [
    "LocaleIdentifierError",
    "LocaleSerializationError",
    "LocaleSyntaxError",
]


class LocaleIdentifierError(Exception):
    """Base exception for all locale identifier errors.

    Attributes:
        diagnostic: Structured diagnostic information
        category: Error category derived from the diagnostic code
        input_value: The identifier that was rejected (empty for serializers)
    """

    def __init__(self, diagnostic: Diagnostic, *, input_value: str = "") -> None:
        """Initialize LocaleIdentifierError.

        Args:
            diagnostic: Structured description of the failure
            input_value: The identifier that was being processed
        """
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic
        self.input_value = input_value

    @property
    def category(self) -> ErrorCategory:
        return self.diagnostic.category


class LocaleSyntaxError(LocaleIdentifierError):
    """Identifier text does not match the Gettext or Unicode grammar."""


class LocaleSerializationError(LocaleIdentifierError):
    """Record cannot be written in the requested form.

    Raised only by the strict serializers; to_gettext() and to_unicode()
    return None instead.
    """
