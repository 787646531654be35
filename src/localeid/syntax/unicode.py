"""Unicode language identifiers (UTS #35).

    unicode_language_id = "root"
                        | (language (sep script)? | script)
                          (sep region)? (sep variant)*

    language = alpha{2,3}
    script   = alpha{4}
    region   = alpha{2} | digit{3}
    variant  = alphanum{5,8} | digit alphanum{3}
    sep      = "-" | "_"

Parsing happens in two passes. The tokenizer splits the text into subtags
and rejects empty subtags and characters outside ASCII alphanumerics. The
classifier then walks the subtags once, left to right, deciding each one's
role from its position, length and character classes.

Thread-safe. Pure functions, no shared state.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from localeid.constants import (
    LANGUAGE_MAX_LENGTH,
    LANGUAGE_MIN_LENGTH,
    REGION_ALPHA_LENGTH,
    REGION_DIGIT_LENGTH,
    ROOT_LOCALE,
    SCRIPT_LENGTH,
    UNICODE_OUTPUT_SEPARATOR,
    UNICODE_SEPARATORS,
    VARIANT_DIGIT_LENGTH,
    VARIANT_MAX_LENGTH,
    VARIANT_MIN_LENGTH,
)
from localeid.core.charclass import is_alnum_char, is_alpha, is_digit, is_digit_char
from localeid.diagnostics import (
    ErrorTemplate,
    LocaleSerializationError,
    LocaleSyntaxError,
    SourceSpan,
)
from localeid.record import LocaleRecord
from localeid.scripts import modifier_to_script

__all__ = [
    "format_unicode_strict",
    "parse_unicode",
    "parse_unicode_with_errors",
    "to_unicode",
]

logger = logging.getLogger(__name__)


class _Subtag(NamedTuple):
    text: str
    start: int

    @property
    def span(self) -> SourceSpan:
        return SourceSpan(self.start, self.start + len(self.text))


def _tokenize(text: str) -> list[_Subtag]:
    """Split text on '-' and '_' into non-empty alphanumeric subtags."""
    subtags: list[_Subtag] = []
    start = 0
    for position in range(len(text) + 1):
        char = text[position] if position < len(text) else ""
        if char and char not in UNICODE_SEPARATORS:
            if not is_alnum_char(char):
                raise LocaleSyntaxError(
                    ErrorTemplate.invalid_character(text, position), input_value=text
                )
            continue
        if position == start:
            raise LocaleSyntaxError(ErrorTemplate.empty_segment(text, start), input_value=text)
        subtags.append(_Subtag(text[start:position], start))
        start = position + 1
    return subtags


def _is_script(subtag: str) -> bool:
    return len(subtag) == SCRIPT_LENGTH and is_alpha(subtag)


def _is_region(subtag: str) -> bool:
    if len(subtag) == REGION_ALPHA_LENGTH:
        return is_alpha(subtag)
    return len(subtag) == REGION_DIGIT_LENGTH and is_digit(subtag)


def _is_variant(subtag: str) -> bool:
    # Tokenizing already guaranteed every character is alphanumeric.
    match len(subtag):
        case length if VARIANT_MIN_LENGTH <= length <= VARIANT_MAX_LENGTH:
            return True
        case length if length == VARIANT_DIGIT_LENGTH:
            return is_digit_char(subtag[0])
        case _:
            return False


def _classify(text: str, subtags: list[_Subtag]) -> LocaleRecord:
    """Assign a grammar role to each subtag, raising on the first mismatch."""
    is_root = False
    language: str | None = None
    script: str | None = None
    territory: str | None = None
    index = 0

    first = subtags[0]
    if first.text == ROOT_LOCALE:
        is_root = True
        index = 1
    else:
        if LANGUAGE_MIN_LENGTH <= len(first.text) <= LANGUAGE_MAX_LENGTH:
            if not is_alpha(first.text):
                raise LocaleSyntaxError(
                    ErrorTemplate.language_invalid(text, first.text, first.span),
                    input_value=text,
                )
            language = first.text
            index = 1
        if index < len(subtags) and _is_script(subtags[index].text):
            script = subtags[index].text
            index += 1
        elif language is None:
            raise LocaleSyntaxError(
                ErrorTemplate.language_or_script_required(text, first.text, first.span),
                input_value=text,
            )

    if index < len(subtags):
        # Any other length is not a region; it is checked as the first variant.
        candidate = subtags[index]
        if len(candidate.text) in (REGION_ALPHA_LENGTH, REGION_DIGIT_LENGTH):
            if not _is_region(candidate.text):
                raise LocaleSyntaxError(
                    ErrorTemplate.region_invalid(text, candidate.text, candidate.span),
                    input_value=text,
                )
            territory = candidate.text
            index += 1

    variants: list[str] = []
    for subtag in subtags[index:]:
        if not _is_variant(subtag.text):
            raise LocaleSyntaxError(
                ErrorTemplate.variant_invalid(text, subtag.text, subtag.span),
                input_value=text,
            )
        variants.append(subtag.text)

    return LocaleRecord(
        is_root=is_root,
        language=language,
        territory=territory,
        script=script,
        variants=tuple(variants),
    )


def _scan(text: str | None) -> LocaleRecord:
    if not text:
        raise LocaleSyntaxError(ErrorTemplate.input_missing("Unicode"), input_value=text or "")
    return _classify(text, _tokenize(text))


def parse_unicode_with_errors(
    text: str | None,
) -> tuple[LocaleRecord | None, tuple[LocaleSyntaxError, ...]]:
    """Parse a Unicode language identifier, reporting why it was rejected.

    Args:
        text: Identifier such as 'sr-Latn-RS' or 'de_DE_1996' (None is rejected)

    Returns:
        Tuple of (record, errors):
        - record: Parsed LocaleRecord, or None if parsing failed
        - errors: Tuple with the single LocaleSyntaxError (empty on success)

    Example:
        >>> record, errors = parse_unicode_with_errors("root-Latn")
        >>> errors[0].diagnostic.code.name
        'VARIANT_INVALID'
    """
    try:
        return (_scan(text), ())
    except LocaleSyntaxError as error:
        logger.debug("Rejected Unicode identifier %r: %s", text, error)
        return (None, (error,))


def parse_unicode(text: str | None) -> LocaleRecord | None:
    """Parse a Unicode language identifier.

    Args:
        text: Identifier to parse; '-' and '_' are both accepted as separators

    Returns:
        LocaleRecord with is_root, language or script set, or None if text is
        None, empty or not a valid Unicode language identifier.

    Example:
        >>> parse_unicode("it-Latn-IT").script
        'Latn'
        >>> parse_unicode("root-IT").is_root
        True
        >>> parse_unicode("it_IT.utf8") is None
        True
    """
    record, _ = parse_unicode_with_errors(text)
    return record


def to_unicode(record: LocaleRecord) -> str | None:
    """Serialize a record as a Unicode language identifier.

    A record without a script but with a modifier listed in the script table
    gets the matching script ('@latin' becomes 'Latn'). Subtags are always
    joined with '_'.

    Args:
        record: Record to serialize

    Returns:
        Identifier text, or None if the record has no root flag, no language
        and no resolvable script.

    Example:
        >>> to_unicode(LocaleRecord(language="it", modifier="latin"))
        'it_Latn'
    """
    script = record.script if record.script is not None else modifier_to_script(record.modifier)
    if not (record.is_root or record.language is not None or script is not None):
        return None

    # Root stands alone: language and script are not written after it.
    if record.is_root:
        parts = [ROOT_LOCALE]
    else:
        parts = [] if record.language is None else [record.language]
        if script is not None:
            parts.append(script)
    if record.territory is not None:
        parts.append(record.territory)
    parts.extend(record.variants)
    return UNICODE_OUTPUT_SEPARATOR.join(parts)


def format_unicode_strict(record: LocaleRecord) -> str:
    """Serialize a record as a Unicode language identifier, raising on failure.

    Raises:
        LocaleSerializationError: If the record has no root flag, language or
            resolvable script
    """
    result = to_unicode(record)
    if result is None:
        raise LocaleSerializationError(ErrorTemplate.language_script_or_root_required())
    return result
