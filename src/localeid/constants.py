"""Shared constants for localeid.

Grammar characters, subtag length bounds and cache limits live here so the
parsers, serializers and utilities agree on a single value.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Gettext grammar
    "GETTEXT_TERRITORY_SEPARATOR",
    "GETTEXT_CODESET_SEPARATOR",
    "GETTEXT_MODIFIER_SEPARATOR",
    "GETTEXT_SEPARATORS",
    # Unicode grammar
    "UNICODE_SEPARATORS",
    "UNICODE_OUTPUT_SEPARATOR",
    "ROOT_LOCALE",
    "LANGUAGE_MIN_LENGTH",
    "LANGUAGE_MAX_LENGTH",
    "SCRIPT_LENGTH",
    "REGION_ALPHA_LENGTH",
    "REGION_DIGIT_LENGTH",
    "VARIANT_DIGIT_LENGTH",
    "VARIANT_MIN_LENGTH",
    "VARIANT_MAX_LENGTH",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Fallbacks
    "DEFAULT_SYSTEM_LOCALE",
    "PSEUDO_LOCALES",
]

# ============================================================================
# GETTEXT GRAMMAR: language[_territory][.codeset][@modifier]
# ============================================================================

GETTEXT_TERRITORY_SEPARATOR = "_"
GETTEXT_CODESET_SEPARATOR = "."
GETTEXT_MODIFIER_SEPARATOR = "@"

GETTEXT_SEPARATORS: frozenset[str] = frozenset(
    (GETTEXT_TERRITORY_SEPARATOR, GETTEXT_CODESET_SEPARATOR, GETTEXT_MODIFIER_SEPARATOR)
)

# ============================================================================
# UNICODE GRAMMAR: (root | language[-script] | script)[-region](-variant)*
# ============================================================================

# Both separators are accepted on input; "_" is always written on output.
UNICODE_SEPARATORS: frozenset[str] = frozenset(("-", "_"))
UNICODE_OUTPUT_SEPARATOR = "_"

# Compared case-sensitively: "Root" is a four-letter script subtag.
ROOT_LOCALE = "root"

LANGUAGE_MIN_LENGTH = 2
LANGUAGE_MAX_LENGTH = 3
SCRIPT_LENGTH = 4
REGION_ALPHA_LENGTH = 2
REGION_DIGIT_LENGTH = 3

# digit + alphanum{3}
VARIANT_DIGIT_LENGTH = 4
# alphanum{5,8}
VARIANT_MIN_LENGTH = 5
VARIANT_MAX_LENGTH = 8

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Bounds the Babel Locale cache in locale_utils.get_babel_locale().
MAX_LOCALE_CACHE_SIZE = 128

# ============================================================================
# FALLBACKS
# ============================================================================

DEFAULT_SYSTEM_LOCALE = "en_US"

# Environment values that name no real locale.
PSEUDO_LOCALES: frozenset[str] = frozenset(("C", "POSIX"))
