"""Locale utilities built on the Gettext and Unicode parsers.

One-call conversions between the two identifier forms, detection of the
process locale from the OS and environment, and a bridge to Babel's CLDR
data for callers that need a real babel.Locale.

Python 3.13+. Babel is optional dependency (only get_babel_locale needs it).
"""

from __future__ import annotations

import functools
import logging
import os
from typing import TYPE_CHECKING

from localeid.constants import (
    DEFAULT_SYSTEM_LOCALE,
    GETTEXT_CODESET_SEPARATOR,
    GETTEXT_MODIFIER_SEPARATOR,
    MAX_LOCALE_CACHE_SIZE,
    PSEUDO_LOCALES,
    ROOT_LOCALE,
)
from localeid.core.babel_compat import get_locale_class
from localeid.core.charclass import is_alnum
from localeid.diagnostics import ErrorTemplate, LocaleSerializationError
from localeid.record import LocaleRecord
from localeid.scripts import modifier_to_script
from localeid.syntax import (
    parse_gettext,
    parse_unicode,
    parse_unicode_with_errors,
    to_gettext,
    to_unicode,
)

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_system_locale",
    "gettext_to_unicode",
    "normalize_locale",
    "parse_any",
    "unicode_to_gettext",
]

logger = logging.getLogger(__name__)


def gettext_to_unicode(identifier: str | None) -> str | None:
    """Convert a Gettext identifier to Unicode form.

    Example:
        >>> gettext_to_unicode("it@latin")
        'it_Latn'
        >>> gettext_to_unicode("it_IT.utf8@euro")
        'it_IT'
    """
    record = parse_gettext(identifier)
    return None if record is None else to_unicode(record)


def unicode_to_gettext(identifier: str | None) -> str | None:
    """Convert a Unicode identifier to Gettext form.

    Example:
        >>> unicode_to_gettext("it-Latn-IT")
        'it_IT@latin'
        >>> unicode_to_gettext("Latn-IT") is None
        True
    """
    record = parse_unicode(identifier)
    return None if record is None else to_gettext(record)


def parse_any(identifier: str | None) -> LocaleRecord | None:
    """Parse an identifier in either form, trying Unicode first.

    Identifiers valid in both grammars (`it_IT`, `Latn`) get the Unicode
    reading, which also records a four-letter first subtag as a script.
    """
    record = parse_unicode(identifier)
    if record is None:
        record = parse_gettext(identifier)
    return record


def normalize_locale(identifier: str | None) -> str | None:
    """Normalize an identifier in either form to Unicode form.

    This is the canonical normalization function: normalize at the system
    boundary, then use the result for cache keys and lookups.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("sr_RS.utf8@latin")
        'sr_Latn_RS'
        >>> normalize_locale("??") is None
        True
    """
    record = parse_any(identifier)
    return None if record is None else to_unicode(record)


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(identifier: str) -> Locale:
    """Get a Babel Locale object for an identifier in either form, with caching.

    The identifier is parsed with this package's grammars and the resulting
    language, script, territory and first variant are handed to
    babel.Locale.parse, which resolves them against CLDR data.

    Thread-safe via lru_cache internal locking.

    Args:
        identifier: Unicode ('sr-Latn-RS') or Gettext ('sr_RS@latin') identifier

    Returns:
        Babel Locale object

    Raises:
        LocaleSyntaxError: If identifier matches neither grammar
        LocaleSerializationError: If the identifier names only a script
        babel.core.UnknownLocaleError: If CLDR has no data for the locale
        ValueError: If Babel rejects the variant subtag
        BabelImportError: If Babel is not installed

    Example:
        >>> locale = get_babel_locale("sr_RS@latin")
        >>> locale.script
        'Latn'
    """
    locale_class = get_locale_class()

    record = parse_any(identifier)
    if record is None:
        # Report the Unicode reading's diagnostic; it is the primary form.
        _, errors = parse_unicode_with_errors(identifier)
        raise errors[0]

    if record.is_root:
        language = ROOT_LOCALE
    elif record.language is not None:
        language = record.language
    else:
        raise LocaleSerializationError(ErrorTemplate.language_required(), input_value=identifier)

    script = record.script if record.script is not None else modifier_to_script(record.modifier)
    parts = [language]
    if script is not None:
        parts.append(script)
    if record.territory is not None:
        parts.append(record.territory)
    if record.variants:
        parts.append(record.variants[0])
    return locale_class.parse("_".join(parts))


def _record_from_posix(value: str) -> LocaleRecord | None:
    """Parse a POSIX locale value such as 'sr_RS.UTF-8@latin'.

    Returns None for the C and POSIX pseudo-locales, with or without a
    codeset. Codesets spelled with punctuation ('UTF-8', 'ISO-8859-1') are
    not valid Gettext segments; they are dropped while any modifier is kept.
    """
    head, has_modifier, modifier = value.partition(GETTEXT_MODIFIER_SEPARATOR)
    base, _, codeset = head.partition(GETTEXT_CODESET_SEPARATOR)
    if base in PSEUDO_LOCALES:
        return None
    if codeset and is_alnum(codeset):
        base += GETTEXT_CODESET_SEPARATOR + codeset
    if has_modifier:
        base += GETTEXT_MODIFIER_SEPARATOR + modifier
    return parse_gettext(base)


def get_system_locale(*, raise_on_failure: bool = False) -> LocaleRecord:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Filters out "C" and "POSIX" pseudo-locales and values that are not
    Gettext identifiers.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return the en_US record.

    Returns:
        Parsed Gettext record of the detected locale.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.

    Example:
        With no OS-level locale and LANG set to 'sr_RS.UTF-8@latin', the
        result has language 'sr', territory 'RS', modifier 'latin' and no
        codeset ('UTF-8' is not a Gettext codeset). Tests pin both sources
        with monkeypatch.setattr(locale, "getlocale", ...) and
        monkeypatch.setenv("LANG", ...).
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
    except (ValueError, AttributeError):
        system_locale = None
    candidates = [system_locale] + [os.environ.get(var) for var in ("LC_ALL", "LC_MESSAGES", "LANG")]

    for value in candidates:
        if not value:
            continue
        record = _record_from_posix(value)
        if record is not None:
            return record
        logger.debug("Ignoring pseudo or unparseable locale setting %r", value)

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    fallback = parse_gettext(DEFAULT_SYSTEM_LOCALE)
    if fallback is None:  # pragma: no cover - constant is a valid identifier
        msg = f"DEFAULT_SYSTEM_LOCALE {DEFAULT_SYSTEM_LOCALE!r} is not a Gettext identifier"
        raise RuntimeError(msg)
    return fallback
