"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All diagnostics are created here. NO f-strings in exception constructors!
    Keeping every message in one place makes them testable and documents
    every rejection the parsers and serializers can produce.
    """

    # ------------------------------------------------------------------
    # Invalid input
    # ------------------------------------------------------------------

    @staticmethod
    def input_missing(form: str) -> Diagnostic:
        """Identifier is None (or empty where the grammar forbids it).

        Args:
            form: Grammar name ("Gettext" or "Unicode")
        """
        return Diagnostic(
            code=DiagnosticCode.INPUT_MISSING,
            message=f"No {form} locale identifier given",
            hint="Pass a non-empty identifier string",
        )

    @staticmethod
    def invalid_character(identifier: str, position: int) -> Diagnostic:
        """Character outside ASCII alphanumerics and the grammar separators.

        Args:
            identifier: The rejected identifier
            position: Offset of the offending character
        """
        char = identifier[position]
        msg = f"Invalid character {char!r} at offset {position} in {identifier!r}"
        return Diagnostic(
            code=DiagnosticCode.INPUT_INVALID_CHARACTER,
            message=msg,
            span=SourceSpan(position, position + 1),
            hint="Only ASCII letters, digits and the grammar separators are allowed",
        )

    # ------------------------------------------------------------------
    # Empty chunks
    # ------------------------------------------------------------------

    @staticmethod
    def empty_language(identifier: str) -> Diagnostic:
        """Gettext identifier starts with a separator."""
        return Diagnostic(
            code=DiagnosticCode.EMPTY_LANGUAGE,
            message=f"Missing language in {identifier!r}",
            span=SourceSpan(0, 0),
            hint="A Gettext identifier must start with a language code",
        )

    @staticmethod
    def empty_segment(identifier: str, position: int) -> Diagnostic:
        """Two adjacent separators, or a separator at a string boundary.

        Args:
            identifier: The rejected identifier
            position: Offset where the empty segment begins
        """
        return Diagnostic(
            code=DiagnosticCode.EMPTY_SEGMENT,
            message=f"Empty segment at offset {position} in {identifier!r}",
            span=SourceSpan(position, position),
            hint="Remove the repeated or trailing separator",
        )

    # ------------------------------------------------------------------
    # Ordering violations (Gettext)
    # ------------------------------------------------------------------

    @staticmethod
    def territory_misplaced(identifier: str, start: int, end: int) -> Diagnostic:
        """Territory given twice, or after a codeset or modifier."""
        return Diagnostic(
            code=DiagnosticCode.TERRITORY_MISPLACED,
            message=f"Duplicated or misplaced territory in {identifier!r}",
            span=SourceSpan(start, end),
            hint="Use language[_territory][.codeset][@modifier]",
        )

    @staticmethod
    def codeset_misplaced(identifier: str, start: int, end: int) -> Diagnostic:
        """Codeset given twice, or after a modifier."""
        return Diagnostic(
            code=DiagnosticCode.CODESET_MISPLACED,
            message=f"Duplicated or misplaced codeset in {identifier!r}",
            span=SourceSpan(start, end),
            hint="Use language[_territory][.codeset][@modifier]",
        )

    @staticmethod
    def modifier_duplicated(identifier: str, start: int, end: int) -> Diagnostic:
        """Second @modifier segment."""
        return Diagnostic(
            code=DiagnosticCode.MODIFIER_DUPLICATED,
            message=f"Duplicated modifier in {identifier!r}",
            span=SourceSpan(start, end),
            hint="A Gettext identifier takes at most one @modifier",
        )

    # ------------------------------------------------------------------
    # Subtag shape mismatches (Unicode)
    # ------------------------------------------------------------------

    @staticmethod
    def language_invalid(identifier: str, subtag: str, span: SourceSpan) -> Diagnostic:
        """First subtag has a language length but non-letter characters."""
        return Diagnostic(
            code=DiagnosticCode.LANGUAGE_INVALID,
            message=f"Invalid language subtag {subtag!r} in {identifier!r}",
            span=span,
            hint="A language subtag is two or three ASCII letters",
        )

    @staticmethod
    def language_or_script_required(
        identifier: str, subtag: str, span: SourceSpan
    ) -> Diagnostic:
        """First subtag is neither root, a language nor a script."""
        return Diagnostic(
            code=DiagnosticCode.LANGUAGE_OR_SCRIPT_REQUIRED,
            message=f"Subtag {subtag!r} in {identifier!r} is not a language or script",
            span=span,
            hint="Start with 'root', a 2-3 letter language or a 4-letter script",
        )

    @staticmethod
    def region_invalid(identifier: str, subtag: str, span: SourceSpan) -> Diagnostic:
        """Subtag in region position has a region length but the wrong characters."""
        return Diagnostic(
            code=DiagnosticCode.REGION_INVALID,
            message=f"Invalid region subtag {subtag!r} in {identifier!r}",
            span=span,
            hint="A region subtag is two ASCII letters or three ASCII digits",
        )

    @staticmethod
    def variant_invalid(identifier: str, subtag: str, span: SourceSpan) -> Diagnostic:
        """Subtag in variant position matches neither variant shape."""
        return Diagnostic(
            code=DiagnosticCode.VARIANT_INVALID,
            message=f"Invalid variant subtag {subtag!r} in {identifier!r}",
            span=span,
            hint="A variant is 5-8 alphanumerics, or a digit followed by 3 alphanumerics",
        )

    # ------------------------------------------------------------------
    # Structural mismatches (serializers)
    # ------------------------------------------------------------------

    @staticmethod
    def language_required() -> Diagnostic:
        """Record has no language, so no Gettext identifier can be written."""
        return Diagnostic(
            code=DiagnosticCode.LANGUAGE_REQUIRED,
            message="A Gettext identifier requires a language",
        )

    @staticmethod
    def language_script_or_root_required() -> Diagnostic:
        """Record has no root flag, language or resolvable script."""
        return Diagnostic(
            code=DiagnosticCode.LANGUAGE_SCRIPT_OR_ROOT_REQUIRED,
            message="A Unicode identifier requires root, a language or a script",
            hint="Set a language, a script, or a modifier listed in the script table",
        )
