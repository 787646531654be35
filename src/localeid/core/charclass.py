"""ASCII character classes for locale identifier grammars.

Both grammars are defined over ASCII only. Python's str.isalpha() and
str.isalnum() accept any Unicode letter or digit (e.g. 'é', '٣'), which would
let identifiers through that no C library, gettext catalog or CLDR lookup can
resolve. Every predicate here therefore checks isascii() first.

Thread Safety:
    All functions in this module are pure functions with no shared state.
    Safe for concurrent use across multiple threads.

Python 3.13+.
"""

from __future__ import annotations

import re

__all__ = [
    "is_alnum",
    "is_alnum_char",
    "is_alpha",
    "is_alpha_char",
    "is_digit",
    "is_digit_char",
]

# Complete-string patterns. Compiled once at module load; \Z rejects a
# trailing newline that $ would let through.
_ALPHA_PATTERN: re.Pattern[str] = re.compile(r"[A-Za-z]+\Z")
_DIGIT_PATTERN: re.Pattern[str] = re.compile(r"[0-9]+\Z")
_ALNUM_PATTERN: re.Pattern[str] = re.compile(r"[A-Za-z0-9]+\Z")


def is_alpha_char(ch: str) -> bool:
    """Check if a single character is an ASCII letter.

    Example:
        >>> is_alpha_char('a')
        True
        >>> is_alpha_char('é')
        False
    """
    return len(ch) == 1 and ch.isascii() and ch.isalpha()


def is_digit_char(ch: str) -> bool:
    """Check if a single character is an ASCII digit."""
    return len(ch) == 1 and ch.isascii() and ch.isdigit()


def is_alnum_char(ch: str) -> bool:
    """Check if a single character is an ASCII letter or digit.

    Example:
        >>> is_alnum_char('7')
        True
        >>> is_alnum_char('-')
        False
    """
    return len(ch) == 1 and ch.isascii() and ch.isalnum()


def is_alpha(text: str) -> bool:
    """Check that text is non-empty and made only of ASCII letters."""
    return _ALPHA_PATTERN.match(text) is not None


def is_digit(text: str) -> bool:
    """Check that text is non-empty and made only of ASCII digits."""
    return _DIGIT_PATTERN.match(text) is not None


def is_alnum(text: str) -> bool:
    """Check that text is non-empty and made only of ASCII letters and digits.

    This is the shape every field of a LocaleRecord must have.

    Example:
        >>> is_alnum("utf8")
        True
        >>> is_alnum("UTF-8")
        False
        >>> is_alnum("")
        False
    """
    return _ALNUM_PATTERN.match(text) is not None
