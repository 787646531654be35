"""Quickstart example for localeid.

Parses identifiers in both conventions, converts between them and shows
why a rejected identifier was rejected.
"""

from localeid import (
    LocaleRecord,
    parse_gettext,
    parse_unicode,
    parse_unicode_with_errors,
    to_gettext,
    to_unicode,
)
from localeid.diagnostics import DiagnosticFormatter

# Example 1: Gettext to Unicode
print("=" * 50)
print("Example 1: Gettext to Unicode")
print("=" * 50)

for identifier in ("it_IT.utf8@euro", "sr_RS@latin", "it@latin"):
    record = parse_gettext(identifier)
    if record is not None:
        print(f"{identifier:20} -> {to_unicode(record)}")
# Output:
# it_IT.utf8@euro      -> it_IT
# sr_RS@latin          -> sr_Latn_RS
# it@latin             -> it_Latn

# Example 2: Unicode to Gettext
print("\n" + "=" * 50)
print("Example 2: Unicode to Gettext")
print("=" * 50)

for identifier in ("it-Latn-IT", "de-DE-1996", "Latn-IT"):
    record = parse_unicode(identifier)
    if record is not None:
        print(f"{identifier:20} -> {to_gettext(record)}")
# Output:
# it-Latn-IT           -> it_IT@latin
# de-DE-1996           -> de_DE
# Latn-IT              -> None

# Example 3: Building a record by hand
print("\n" + "=" * 50)
print("Example 3: Building a Record")
print("=" * 50)

record = LocaleRecord(language="uz", territory="UZ", script="Cyrl")
print(to_gettext(record))
print(to_unicode(record))
# Output:
# uz_UZ@cyrillic
# uz_Cyrl_UZ

# Example 4: Diagnostics
print("\n" + "=" * 50)
print("Example 4: Diagnostics")
print("=" * 50)

_, errors = parse_unicode_with_errors("root-Latn")
print(DiagnosticFormatter().format(errors[0].diagnostic))
# Output:
# error[VARIANT_INVALID]: Invalid variant subtag 'Latn' in 'root-Latn'
#   --> offset 5
#   = help: A variant is 5-8 alphanumerics, or a digit followed by 3 alphanumerics
