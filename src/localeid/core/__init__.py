"""Core utilities shared by the parsers, serializers and locale utilities.

Exports:
    is_alpha, is_digit, is_alnum: ASCII whole-string predicates
    BabelImportError: Raised when an optional Babel feature is used without Babel

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel
from .charclass import is_alnum, is_alpha, is_digit

__all__ = [
    "BabelImportError",
    "is_alnum",
    "is_alpha",
    "is_babel_available",
    "is_digit",
    "require_babel",
]
