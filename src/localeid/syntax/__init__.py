"""Parsers and serializers for the two locale identifier grammars.

Gettext: language[_territory][.codeset][@modifier]
Unicode: (root | language[-script] | script)[-region](-variant)*

Python 3.13+. Zero external dependencies.
"""

from .gettext import format_gettext_strict, parse_gettext, parse_gettext_with_errors, to_gettext
from .unicode import format_unicode_strict, parse_unicode, parse_unicode_with_errors, to_unicode

__all__ = [
    "format_gettext_strict",
    "format_unicode_strict",
    "parse_gettext",
    "parse_gettext_with_errors",
    "parse_unicode",
    "parse_unicode_with_errors",
    "to_gettext",
    "to_unicode",
]
