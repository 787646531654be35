"""Tests for parse_unicode: (root | language[-script] | script)[-region](-variant)*."""

from __future__ import annotations

import pytest

from localeid import LocaleRecord, parse_unicode, parse_unicode_with_errors
from localeid.diagnostics import DiagnosticCode, ErrorCategory


class TestLanguageAndScript:
    """First-position subtags."""

    def test_language_only(self) -> None:
        assert parse_unicode("it") == LocaleRecord(language="it")

    def test_three_letter_language(self) -> None:
        assert parse_unicode("ast") == LocaleRecord(language="ast")

    def test_language_and_script(self) -> None:
        assert parse_unicode("it-Latn") == LocaleRecord(language="it", script="Latn")

    def test_script_only(self) -> None:
        assert parse_unicode("Latn") == LocaleRecord(script="Latn")

    def test_underscore_separator(self) -> None:
        assert parse_unicode("it_Latn_IT") == parse_unicode("it-Latn-IT")

    def test_mixed_separators(self) -> None:
        record = parse_unicode("it-Latn_IT")

        assert record == LocaleRecord(language="it", script="Latn", territory="IT")

    def test_case_is_preserved(self) -> None:
        assert parse_unicode("IT-latn") == LocaleRecord(language="IT", script="latn")

    def test_codeset_and_modifier_stay_empty(self) -> None:
        record = parse_unicode("it_IT")

        assert record is not None
        assert record.codeset is None
        assert record.modifier is None


class TestRoot:
    """The root identifier."""

    def test_root(self) -> None:
        record = parse_unicode("root")

        assert record == LocaleRecord(is_root=True)
        assert record is not None
        assert record.language is None

    def test_root_with_region(self) -> None:
        assert parse_unicode("root-IT") == LocaleRecord(is_root=True, territory="IT")

    def test_root_with_variant(self) -> None:
        assert parse_unicode("root-POSIX") == LocaleRecord(is_root=True, variants=("POSIX",))

    def test_root_cannot_take_script(self) -> None:
        """After root a 4-letter subtag is neither region nor variant."""
        record, errors = parse_unicode_with_errors("root-Latn")

        assert record is None
        assert errors[0].diagnostic.code is DiagnosticCode.VARIANT_INVALID

    def test_root_is_case_sensitive(self) -> None:
        """'Root' is an ordinary four-letter script subtag."""
        assert parse_unicode("Root") == LocaleRecord(script="Root")


class TestRegion:
    """Region subtags."""

    def test_alpha_region(self) -> None:
        assert parse_unicode("it-IT") == LocaleRecord(language="it", territory="IT")

    def test_digit_region(self) -> None:
        """Three-digit UN M.49 area codes are regions."""
        assert parse_unicode("es-419") == LocaleRecord(language="es", territory="419")

    def test_digit_region_followed_by_variant(self) -> None:
        record = parse_unicode("es-Latn-419-POSIX")

        assert record == LocaleRecord(
            language="es", script="Latn", territory="419", variants=("POSIX",)
        )

    @pytest.mark.parametrize("identifier", ["it-I1", "it-1T", "it-41A", "it-ABC", "it-Latn-12A"])
    def test_malformed_region(self, identifier: str) -> None:
        record, errors = parse_unicode_with_errors(identifier)

        assert record is None
        assert errors[0].diagnostic.code is DiagnosticCode.REGION_INVALID

    def test_only_one_region(self) -> None:
        """A second region-shaped subtag is not a valid variant."""
        _, errors = parse_unicode_with_errors("it-IT-FR")

        assert errors[0].diagnostic.code is DiagnosticCode.VARIANT_INVALID


class TestVariants:
    """Variant subtags."""

    @pytest.mark.parametrize(
        ("identifier", "variants"),
        [
            ("it-Latn-IT-POSIX-NYNORSK", ("POSIX", "NYNORSK")),
            ("it-Latn-IT-POSIX", ("POSIX",)),
            ("it-Latn-POSIX", ("POSIX",)),
            ("it-IT-NYNORSK", ("NYNORSK",)),
            ("it-POSIX", ("POSIX",)),
            ("Latn-POSIX-NYNORSK", ("POSIX", "NYNORSK")),
            ("de-DE-1996", ("1996",)),
            ("sl-rozaj-biske-1994", ("rozaj", "biske", "1994")),
            ("en-abcdefgh", ("abcdefgh",)),
            ("en-1abc", ("1abc",)),
            ("en-12345", ("12345",)),
        ],
    )
    def test_variants_in_order(self, identifier: str, variants: tuple[str, ...]) -> None:
        record = parse_unicode(identifier)

        assert record is not None
        assert record.variants == variants

    def test_duplicate_variants_kept(self) -> None:
        record = parse_unicode("it-POSIX-POSIX")

        assert record is not None
        assert record.variants == ("POSIX", "POSIX")

    @pytest.mark.parametrize(
        "identifier",
        ["en-abcdefghi", "en-Latn-abcd", "en-POSIX-1", "en-POSIX-ab", "en-IT-Latn", "en-POSIX-abc"],
    )
    def test_malformed_variant(self, identifier: str) -> None:
        record, errors = parse_unicode_with_errors(identifier)

        assert record is None
        assert errors[0].diagnostic.code is DiagnosticCode.VARIANT_INVALID
        assert errors[0].category is ErrorCategory.SUBTAG_SHAPE


class TestParseUnicodeRejects:
    """Malformed input returns None with a diagnostic."""

    @pytest.mark.parametrize(
        ("identifier", "code"),
        [
            (None, DiagnosticCode.INPUT_MISSING),
            ("", DiagnosticCode.INPUT_MISSING),
            (" ", DiagnosticCode.INPUT_INVALID_CHARACTER),
            ("  ", DiagnosticCode.INPUT_INVALID_CHARACTER),
            ("foo@bar@baz", DiagnosticCode.INPUT_INVALID_CHARACTER),
            ("it_IT.utf8", DiagnosticCode.INPUT_INVALID_CHARACTER),
            ("it--IT", DiagnosticCode.EMPTY_SEGMENT),
            ("-it", DiagnosticCode.EMPTY_SEGMENT),
            ("it-", DiagnosticCode.EMPTY_SEGMENT),
            ("12", DiagnosticCode.LANGUAGE_INVALID),
            ("i1-Latn", DiagnosticCode.LANGUAGE_INVALID),
            ("i", DiagnosticCode.LANGUAGE_OR_SCRIPT_REQUIRED),
            ("POSIX", DiagnosticCode.LANGUAGE_OR_SCRIPT_REQUIRED),
            ("1234-IT", DiagnosticCode.LANGUAGE_OR_SCRIPT_REQUIRED),
        ],
    )
    def test_rejected(self, identifier: str | None, code: DiagnosticCode) -> None:
        record, errors = parse_unicode_with_errors(identifier)

        assert record is None
        assert len(errors) == 1
        assert errors[0].diagnostic.code is code
        assert parse_unicode(identifier) is None

    def test_gettext_only_identifiers(self) -> None:
        for identifier in ("it_IT.utf8@euro", "it_IT@euro", "it@euro", "it.utf8"):
            assert parse_unicode(identifier) is None

    def test_subtag_span(self) -> None:
        _, errors = parse_unicode_with_errors("it-IT-ab")

        span = errors[0].diagnostic.span
        assert span is not None
        assert (span.start, span.end) == (6, 8)
