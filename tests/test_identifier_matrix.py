"""Acceptance matrix: which identifiers each grammar accepts.

Each row names an identifier and whether it must parse as Gettext and as
Unicode. Accepted identifiers must also survive a round trip through their
own serializer's grammar.
"""

from __future__ import annotations

import pytest

from localeid import parse_gettext, parse_unicode, to_gettext, to_unicode

# (identifier, valid Gettext, valid Unicode)
IDENTIFIERS: list[tuple[str | None, bool, bool]] = [
    ("it_IT.utf8@euro", True, False),
    ("it_IT.utf8", True, False),
    ("it_IT@euro", True, False),
    ("it@euro", True, False),
    ("it.utf8", True, False),
    ("it_IT", True, True),
    ("it", True, True),
    ("it-Latn-IT-POSIX-NYNORSK", False, True),
    ("it-Latn-IT-POSIX", False, True),
    ("it-Latn-IT-NYNORSK", False, True),
    ("it-Latn-IT", False, True),
    ("it-Latn-POSIX-NYNORSK", False, True),
    ("it-Latn-POSIX", False, True),
    ("it-Latn-NYNORSK", False, True),
    ("it-Latn", False, True),
    ("it-IT-POSIX-NYNORSK", False, True),
    ("it-IT-POSIX", False, True),
    ("it-IT-NYNORSK", False, True),
    ("it-IT", False, True),
    ("it-POSIX-NYNORSK", False, True),
    ("it-POSIX", False, True),
    ("it-NYNORSK", False, True),
    ("Latn-IT-POSIX-NYNORSK", False, True),
    ("Latn-IT-POSIX", False, True),
    ("Latn-IT-NYNORSK", False, True),
    ("Latn-IT", False, True),
    ("Latn-POSIX-NYNORSK", False, True),
    ("Latn-POSIX", False, True),
    ("Latn-NYNORSK", False, True),
    ("Latn", True, True),
    ("root", True, True),
    ("root-IT", False, True),
    ("root-Latn", False, False),
    (None, False, False),
    ("", False, False),
    (" ", False, False),
    ("  ", False, False),
    ("foo@bar@baz", False, False),
]


def _ids(row: tuple[str | None, bool, bool]) -> str:
    return repr(row[0])


@pytest.mark.parametrize(("identifier", "gettext_ok", "unicode_ok"), IDENTIFIERS, ids=[_ids(row) for row in IDENTIFIERS])
class TestIdentifierMatrix:
    """Accept/reject decisions for both grammars."""

    def test_gettext(self, identifier: str | None, gettext_ok: bool, unicode_ok: bool) -> None:
        record = parse_gettext(identifier)

        assert (record is not None) is gettext_ok
        if record is not None:
            assert record.language is not None
            assert to_gettext(record) == identifier

    def test_unicode(self, identifier: str | None, gettext_ok: bool, unicode_ok: bool) -> None:
        record = parse_unicode(identifier)

        assert (record is not None) is unicode_ok
        if record is not None:
            assert record.is_root or record.language is not None or record.script is not None
            assert identifier is not None
            assert to_unicode(record) == identifier.replace("-", "_")
