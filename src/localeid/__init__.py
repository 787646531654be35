"""localeid - Parse and convert Gettext and Unicode locale identifiers.

Both identifier conventions are parsed into one immutable LocaleRecord,
which either serializer writes back out. Gettext modifiers that name a
writing system (`@latin`) and Unicode script subtags (`Latn`) are
translated through a fixed table.

Public API:
    LocaleRecord - Parsed identifier (language, territory, codeset, ...)
    parse_gettext / to_gettext - language[_territory][.codeset][@modifier]
    parse_unicode / to_unicode - (root | language[-script] | script)[-region](-variant)*
    modifier_to_script / script_to_modifier - Script table lookups
    gettext_to_unicode / unicode_to_gettext - One-call conversions
    normalize_locale - Either form to Unicode form

Exceptions:
    LocaleIdentifierError - Base exception class
    LocaleSyntaxError - Identifier matches neither grammar
    LocaleSerializationError - Record cannot be written in the requested form

Submodules:
    localeid.diagnostics - Error codes, categories and formatting
    localeid.locale_utils - System locale detection and Babel bridge
    localeid.scripts - The modifier/script table
"""

from .diagnostics import LocaleIdentifierError, LocaleSerializationError, LocaleSyntaxError
from .locale_utils import gettext_to_unicode, normalize_locale, unicode_to_gettext
from .record import LocaleRecord
from .scripts import modifier_to_script, script_to_modifier
from .syntax import (
    format_gettext_strict,
    format_unicode_strict,
    parse_gettext,
    parse_gettext_with_errors,
    parse_unicode,
    parse_unicode_with_errors,
    to_gettext,
    to_unicode,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("localeid")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "LocaleIdentifierError",
    "LocaleRecord",
    "LocaleSerializationError",
    "LocaleSyntaxError",
    "__version__",
    "format_gettext_strict",
    "format_unicode_strict",
    "gettext_to_unicode",
    "modifier_to_script",
    "normalize_locale",
    "parse_gettext",
    "parse_gettext_with_errors",
    "parse_unicode",
    "parse_unicode_with_errors",
    "script_to_modifier",
    "to_gettext",
    "to_unicode",
    "unicode_to_gettext",
]
