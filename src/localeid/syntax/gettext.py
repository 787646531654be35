"""Gettext locale identifiers: language[_territory][.codeset][@modifier].

The parser is a single left-to-right scan. The text before the first
separator is the language; every later segment is bound to the field named
by the separator that precedes it:

    _  territory
    .  codeset
    @  modifier

Fields must appear in that relative order and at most once, so `it_IT.utf8`
is valid while `it.utf8_IT` and `it_IT_FR` are not.

Thread-safe. Pure functions, no shared state.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging

from localeid.constants import (
    GETTEXT_CODESET_SEPARATOR,
    GETTEXT_MODIFIER_SEPARATOR,
    GETTEXT_SEPARATORS,
    GETTEXT_TERRITORY_SEPARATOR,
)
from localeid.core.charclass import is_alnum_char
from localeid.diagnostics import (
    Diagnostic,
    ErrorTemplate,
    LocaleSerializationError,
    LocaleSyntaxError,
)
from localeid.record import LocaleRecord
from localeid.scripts import script_to_modifier

__all__ = [
    "format_gettext_strict",
    "parse_gettext",
    "parse_gettext_with_errors",
    "to_gettext",
]

logger = logging.getLogger(__name__)

_FIELD_BY_SEPARATOR: dict[str, str] = {
    GETTEXT_TERRITORY_SEPARATOR: "territory",
    GETTEXT_CODESET_SEPARATOR: "codeset",
    GETTEXT_MODIFIER_SEPARATOR: "modifier",
}

# A field may only be set while none of these is set yet.
_BLOCKED_BY: dict[str, tuple[str, ...]] = {
    "territory": ("territory", "codeset", "modifier"),
    "codeset": ("codeset", "modifier"),
    "modifier": ("modifier",),
}


def _misplaced(field: str, text: str, start: int, end: int) -> Diagnostic:
    match field:
        case "territory":
            return ErrorTemplate.territory_misplaced(text, start, end)
        case "codeset":
            return ErrorTemplate.codeset_misplaced(text, start, end)
        case _:
            return ErrorTemplate.modifier_duplicated(text, start, end)


def _scan(text: str | None) -> LocaleRecord:
    """Parse text, raising LocaleSyntaxError at the first violation."""
    if text is None:
        raise LocaleSyntaxError(ErrorTemplate.input_missing("Gettext"))

    language: str | None = None
    fields: dict[str, str] = {}
    field = ""
    segment_start = 0

    # One extra step past the end handles the final segment like a separator.
    for position in range(len(text) + 1):
        char = text[position] if position < len(text) else ""
        if char and char not in GETTEXT_SEPARATORS:
            if not is_alnum_char(char):
                raise LocaleSyntaxError(
                    ErrorTemplate.invalid_character(text, position), input_value=text
                )
            continue

        segment = text[segment_start:position]
        if language is None:
            if not segment:
                raise LocaleSyntaxError(ErrorTemplate.empty_language(text), input_value=text)
            language = segment
        else:
            if not segment:
                raise LocaleSyntaxError(
                    ErrorTemplate.empty_segment(text, segment_start), input_value=text
                )
            if any(blocker in fields for blocker in _BLOCKED_BY[field]):
                raise LocaleSyntaxError(
                    _misplaced(field, text, segment_start - 1, position), input_value=text
                )
            fields[field] = segment

        if char:
            field = _FIELD_BY_SEPARATOR[char]
        segment_start = position + 1

    return LocaleRecord(language=language, **fields)


def parse_gettext_with_errors(
    text: str | None,
) -> tuple[LocaleRecord | None, tuple[LocaleSyntaxError, ...]]:
    """Parse a Gettext identifier, reporting why it was rejected.

    Args:
        text: Identifier such as 'it_IT.utf8@euro' (None is rejected)

    Returns:
        Tuple of (record, errors):
        - record: Parsed LocaleRecord, or None if parsing failed
        - errors: Tuple with the single LocaleSyntaxError (empty on success)

    Example:
        >>> record, errors = parse_gettext_with_errors("it_IT_FR")
        >>> record is None
        True
        >>> errors[0].diagnostic.code.name
        'TERRITORY_MISPLACED'
    """
    try:
        return (_scan(text), ())
    except LocaleSyntaxError as error:
        logger.debug("Rejected Gettext identifier %r: %s", text, error)
        return (None, (error,))


def parse_gettext(text: str | None) -> LocaleRecord | None:
    """Parse a Gettext identifier (language[_territory][.codeset][@modifier]).

    Args:
        text: Identifier to parse

    Returns:
        LocaleRecord with language set and is_root, script, variants empty,
        or None if text is None or not a valid Gettext identifier.

    Example:
        >>> parse_gettext("it_IT.utf8@euro").codeset
        'utf8'
        >>> parse_gettext("it@") is None
        True
    """
    record, _ = parse_gettext_with_errors(text)
    return record


def to_gettext(record: LocaleRecord) -> str | None:
    """Serialize a record as a Gettext identifier.

    A record without a modifier but with a script listed in the script table
    gets the matching modifier (script 'Latn' becomes '@latin').

    Args:
        record: Record to serialize

    Returns:
        Identifier text, or None if the record has no language.

    Example:
        >>> to_gettext(LocaleRecord(language="it", territory="IT", script="Latn"))
        'it_IT@latin'
    """
    if record.language is None:
        return None

    parts = [record.language]
    if record.territory is not None:
        parts.append(GETTEXT_TERRITORY_SEPARATOR + record.territory)
    if record.codeset is not None:
        parts.append(GETTEXT_CODESET_SEPARATOR + record.codeset)
    modifier = record.modifier if record.modifier is not None else script_to_modifier(record.script)
    if modifier is not None:
        parts.append(GETTEXT_MODIFIER_SEPARATOR + modifier)
    return "".join(parts)


def format_gettext_strict(record: LocaleRecord) -> str:
    """Serialize a record as a Gettext identifier, raising on failure.

    Raises:
        LocaleSerializationError: If the record has no language
    """
    result = to_gettext(record)
    if result is None:
        raise LocaleSerializationError(ErrorTemplate.language_required())
    return result
