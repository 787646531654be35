"""Gettext modifier names and Unicode script codes.

Gettext has no script field; writing systems are spelled as a modifier
(`sr_RS@latin`, `uz_UZ@cyrillic`). Unicode language identifiers carry an
ISO 15924 script subtag instead (`sr-Latn-RS`). This module holds the fixed
association between the two.

Modifier names are the Unicode Script property long names, lowercased and
with separators removed so each one is a valid Gettext segment
(Old_Italic -> olditalic).

Lookups are case-insensitive in both directions and the first matching pair
wins. One modifier appears twice: `georgian` is listed for Geok (Khutsuri)
and then Geor (Mkhedruli), so `georgian` resolves to Geok while both codes
resolve back to `georgian`.

Thread Safety:
    The table and its indexes are built once at import time and never
    mutated. Safe for concurrent use across multiple threads.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import NamedTuple

__all__ = [
    "SCRIPT_MODIFIERS",
    "ScriptModifier",
    "modifier_to_script",
    "script_to_modifier",
]


class ScriptModifier(NamedTuple):
    """One (Gettext modifier, Unicode script) association."""

    modifier: str
    script: str


# Ordered by script code. Order matters only for duplicated names.
SCRIPT_MODIFIERS: tuple[ScriptModifier, ...] = tuple(
    ScriptModifier(modifier, script)
    for modifier, script in (
        ("adlam", "Adlm"),
        ("caucasianalbanian", "Aghb"),
        ("ahom", "Ahom"),
        ("arabic", "Arab"),
        ("imperialaramaic", "Armi"),
        ("armenian", "Armn"),
        ("avestan", "Avst"),
        ("balinese", "Bali"),
        ("bamum", "Bamu"),
        ("bassavah", "Bass"),
        ("batak", "Batk"),
        ("bengali", "Beng"),
        ("bhaiksuki", "Bhks"),
        ("bopomofo", "Bopo"),
        ("brahmi", "Brah"),
        ("braille", "Brai"),
        ("buginese", "Bugi"),
        ("buhid", "Buhd"),
        ("chakma", "Cakm"),
        ("canadianaboriginal", "Cans"),
        ("carian", "Cari"),
        ("cham", "Cham"),
        ("cherokee", "Cher"),
        ("chorasmian", "Chrs"),
        ("coptic", "Copt"),
        ("cyprominoan", "Cpmn"),
        ("cypriot", "Cprt"),
        ("cyrillic", "Cyrl"),
        ("devanagari", "Deva"),
        ("divesakuru", "Diak"),
        ("dogra", "Dogr"),
        ("deseret", "Dsrt"),
        ("duployan", "Dupl"),
        ("egyptianhieroglyphs", "Egyp"),
        ("elbasan", "Elba"),
        ("elymaic", "Elym"),
        ("ethiopic", "Ethi"),
        ("georgian", "Geok"),
        ("georgian", "Geor"),
        ("glagolitic", "Glag"),
        ("gunjalagondi", "Gong"),
        ("masaramgondi", "Gonm"),
        ("gothic", "Goth"),
        ("grantha", "Gran"),
        ("greek", "Grek"),
        ("gujarati", "Gujr"),
        ("gurmukhi", "Guru"),
        ("hangul", "Hang"),
        ("han", "Hani"),
        ("hanunoo", "Hano"),
        ("simplifiedhan", "Hans"),
        ("traditionalhan", "Hant"),
        ("hatran", "Hatr"),
        ("hebrew", "Hebr"),
        ("hiragana", "Hira"),
        ("anatolianhieroglyphs", "Hluw"),
        ("pahawhhmong", "Hmng"),
        ("nyiakengpuachuehmong", "Hmnp"),
        ("oldhungarian", "Hung"),
        ("olditalic", "Ital"),
        ("jamo", "Jamo"),
        ("javanese", "Java"),
        ("japanese", "Jpan"),
        ("kayahli", "Kali"),
        ("katakana", "Kana"),
        ("kawi", "Kawi"),
        ("kharoshthi", "Khar"),
        ("khmer", "Khmr"),
        ("khojki", "Khoj"),
        ("khitansmallscript", "Kits"),
        ("kannada", "Knda"),
        ("korean", "Kore"),
        ("kaithi", "Kthi"),
        ("taitham", "Lana"),
        ("lao", "Laoo"),
        ("latin", "Latn"),
        ("lepcha", "Lepc"),
        ("limbu", "Limb"),
        ("lineara", "Lina"),
        ("linearb", "Linb"),
        ("lisu", "Lisu"),
        ("lycian", "Lyci"),
        ("lydian", "Lydi"),
        ("mahajani", "Mahj"),
        ("makasar", "Maka"),
        ("mandaic", "Mand"),
        ("manichaean", "Mani"),
        ("marchen", "Marc"),
        ("medefaidrin", "Medf"),
        ("mendekikakui", "Mend"),
        ("meroiticcursive", "Merc"),
        ("meroitichieroglyphs", "Mero"),
        ("malayalam", "Mlym"),
        ("modi", "Modi"),
        ("mongolian", "Mong"),
        ("mro", "Mroo"),
        ("meeteimayek", "Mtei"),
        ("multani", "Mult"),
        ("myanmar", "Mymr"),
        ("nagmundari", "Nagm"),
        ("nandinagari", "Nand"),
        ("oldnortharabian", "Narb"),
        ("nabataean", "Nbat"),
        ("newa", "Newa"),
        ("nko", "Nkoo"),
        ("nushu", "Nshu"),
        ("ogham", "Ogam"),
        ("olchiki", "Olck"),
        ("oldturkic", "Orkh"),
        ("oriya", "Orya"),
        ("osage", "Osge"),
        ("osmanya", "Osma"),
        ("olduyghur", "Ougr"),
        ("palmyrene", "Palm"),
        ("paucinhau", "Pauc"),
        ("oldpermic", "Perm"),
        ("phagspa", "Phag"),
        ("inscriptionalpahlavi", "Phli"),
        ("psalterpahlavi", "Phlp"),
        ("phoenician", "Phnx"),
        ("miao", "Plrd"),
        ("inscriptionalparthian", "Prti"),
        ("rejang", "Rjng"),
        ("hanifirohingya", "Rohg"),
        ("runic", "Runr"),
        ("samaritan", "Samr"),
        ("oldsoutharabian", "Sarb"),
        ("saurashtra", "Saur"),
        ("signwriting", "Sgnw"),
        ("shavian", "Shaw"),
        ("sharada", "Shrd"),
        ("siddham", "Sidd"),
        ("khudawadi", "Sind"),
        ("sinhala", "Sinh"),
        ("sogdian", "Sogd"),
        ("oldsogdian", "Sogo"),
        ("sorasompeng", "Sora"),
        ("soyombo", "Soyo"),
        ("sundanese", "Sund"),
        ("sylotinagri", "Sylo"),
        ("syriac", "Syrc"),
        ("tagbanwa", "Tagb"),
        ("takri", "Takr"),
        ("taile", "Tale"),
        ("newtailue", "Talu"),
        ("tamil", "Taml"),
        ("tangut", "Tang"),
        ("taiviet", "Tavt"),
        ("telugu", "Telu"),
        ("tifinagh", "Tfng"),
        ("tagalog", "Tglg"),
        ("thaana", "Thaa"),
        ("thai", "Thai"),
        ("tibetan", "Tibt"),
        ("tirhuta", "Tirh"),
        ("tangsa", "Tnsa"),
        ("toto", "Toto"),
        ("ugaritic", "Ugar"),
        ("vai", "Vaii"),
        ("vithkuqi", "Vith"),
        ("warangciti", "Wara"),
        ("wancho", "Wcho"),
        ("oldpersian", "Xpeo"),
        ("cuneiform", "Xsux"),
        ("yezidi", "Yezi"),
        ("yi", "Yiii"),
        ("zanabazarsquare", "Zanb"),
        ("inherited", "Zinh"),
        ("common", "Zyyy"),
        ("unknown", "Zzzz"),
    )
)


def _first_match_index(pairs: tuple[ScriptModifier, ...], field: str) -> dict[str, str]:
    """Case-folded index from one column to the other, first pair winning."""
    other = "script" if field == "modifier" else "modifier"
    index: dict[str, str] = {}
    for pair in pairs:
        index.setdefault(getattr(pair, field).casefold(), getattr(pair, other))
    return index


_SCRIPT_BY_MODIFIER: dict[str, str] = _first_match_index(SCRIPT_MODIFIERS, "modifier")
_MODIFIER_BY_SCRIPT: dict[str, str] = _first_match_index(SCRIPT_MODIFIERS, "script")


def modifier_to_script(modifier: str | None) -> str | None:
    """Unicode script code for a Gettext modifier name.

    Args:
        modifier: Gettext modifier (any case), e.g. 'latin'

    Returns:
        Script code as listed in the table (e.g. 'Latn'), or None if the
        modifier is absent or names no script (e.g. 'euro').

    Example:
        >>> modifier_to_script("Latin")
        'Latn'
        >>> modifier_to_script("georgian")
        'Geok'
        >>> modifier_to_script("euro") is None
        True
    """
    if not modifier:
        return None
    return _SCRIPT_BY_MODIFIER.get(modifier.casefold())


def script_to_modifier(script: str | None) -> str | None:
    """Gettext modifier name for a Unicode script code.

    Args:
        script: ISO 15924 script code (any case), e.g. 'Cyrl'

    Returns:
        Lowercase modifier name (e.g. 'cyrillic'), or None if the code is
        absent or not in the table.

    Example:
        >>> script_to_modifier("CYRL")
        'cyrillic'
        >>> script_to_modifier("Geor")
        'georgian'
    """
    if not script:
        return None
    return _MODIFIER_BY_SCRIPT.get(script.casefold())
