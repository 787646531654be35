"""Diagnostic system for locale identifier errors.

Provides structured error diagnostics with codes, spans and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory, SourceSpan
from .errors import LocaleIdentifierError, LocaleSerializationError, LocaleSyntaxError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "LocaleIdentifierError",
    "LocaleSerializationError",
    "LocaleSyntaxError",
    "OutputFormat",
    "SourceSpan",
]
