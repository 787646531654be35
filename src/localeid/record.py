"""LocaleRecord: the shared intermediate form of a locale identifier.

Both parsers produce a LocaleRecord and both serializers consume one. Fields
that only one convention knows about (codeset and modifier for Gettext,
script, variants and the root flag for Unicode) simply stay empty when the
record comes from the other parser.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from localeid.core.charclass import is_alnum

__all__ = ["LocaleRecord"]

_STRING_FIELDS: tuple[str, ...] = ("language", "territory", "codeset", "modifier", "script")


@dataclass(frozen=True, slots=True)
class LocaleRecord:
    """Parsed locale identifier.

    Immutable, thread-safe, hashable. Safe for use as dict key or set member.

    Attributes:
        is_root: True only for the Unicode root identifier
        language: Language code (e.g. 'it'), or None
        territory: Territory/region code (e.g. 'IT', '419'), or None
        codeset: Gettext codeset (e.g. 'utf8'), or None
        modifier: Gettext modifier (e.g. 'latin', 'euro'), or None
        script: Unicode script code (e.g. 'Latn'), or None
        variants: Unicode variant subtags in the order they were given
    """

    is_root: bool = False
    language: str | None = None
    territory: str | None = None
    codeset: str | None = None
    modifier: str | None = None
    script: str | None = None
    variants: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate LocaleRecord invariants.

        Raises:
            ValueError: If a present field is empty or not ASCII alphanumeric,
                or variants is not a tuple.
        """
        for name in _STRING_FIELDS:
            value = getattr(self, name)
            if value is not None and not (isinstance(value, str) and is_alnum(value)):
                msg = f"LocaleRecord.{name} must be ASCII alphanumeric, got {value!r}"
                raise ValueError(msg)
        if not isinstance(self.variants, tuple):
            msg = f"LocaleRecord.variants must be a tuple, got {type(self.variants).__name__}"
            raise ValueError(msg)
        for variant in self.variants:
            if not (isinstance(variant, str) and is_alnum(variant)):
                msg = f"LocaleRecord.variants entries must be ASCII alphanumeric, got {variant!r}"
                raise ValueError(msg)

    def replace(self, **changes: Any) -> LocaleRecord:
        """Return a copy with the given fields replaced.

        Example:
            >>> record = LocaleRecord(language="it", territory="IT")
            >>> record.replace(modifier="euro").modifier
            'euro'
        """
        return dataclasses.replace(self, **changes)

    def describe(self) -> dict[str, object]:
        """Plain-dict view of the record for display and JSON output.

        Absent fields are included as None so every view has the same keys.
        """
        return {
            "is_root": self.is_root,
            "language": self.language,
            "territory": self.territory,
            "codeset": self.codeset,
            "modifier": self.modifier,
            "script": self.script,
            "variants": list(self.variants),
        }
