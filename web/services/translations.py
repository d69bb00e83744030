"""
English -> Arabic lookup tables and a rough Latin -> Arabic transliteration.

Lookups fail open: a value with no table entry is displayed as given.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


def _frozen(mapping: dict) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping))


NATIONALITY = _frozen({
    "Uganda": "أوغندا",
    "Kenya": "كينيا",
    "Philippines": "الفلبين",
    "India": "الهند",
    "Ethiopia": "إثيوبيا",
    "Bangladesh": "بنغلاديش",
})

RELIGION = _frozen({
    "Muslim": "مسلم/ة",
    "Christian": "مسيحي/ة",
})

MARITAL_STATUS = _frozen({
    "Single": "أعزب/عزباء",
    "Married": "متزوج/ة",
    "Divorced": "مطلق/ة",
    "Widowed": "أرمل/ة",
})

GENDER = _frozen({
    "Male": "ذكر",
    "Female": "أنثى",
})

PROFESSION = _frozen({
    "Domestic Worker": "عاملة منزلية",
    "Private Driver": "سائق خاص",
})

EDUCATION = _frozen({
    "Primary": "ابتدائي",
    "Secondary": "ثانوي",
    "High School": "ثانوية عامة",
    "Diploma": "دبلوم",
    "Bachelor": "بكالوريوس",
    "None": "لا يوجد",
})

LANGUAGE = _frozen({
    "Poor": "ضعيف",
    "Fair": "مقبول",
    "Good": "جيد",
    "Excellent": "ممتاز",
    "Fluent": "بطلاقة",
})

SKILL = _frozen({
    "Poor": "ضعيف",
    "Good": "جيد",
    "Very Good": "جيد جداً",
    "Excellent": "ممتاز",
})

SKILL_LEVELS = _frozen({
    "Poor": 1,
    "Good": 2,
    "Very Good": 3,
    "Excellent": 4,
})


@dataclass(frozen=True)
class TranslationTables:
    """
    The lookup tables handed to the renderer.

    Tests and alternative deployments can build their own instance instead
    of patching module globals.
    """

    nationality: Mapping[str, str] = field(default_factory=lambda: NATIONALITY)
    religion: Mapping[str, str] = field(default_factory=lambda: RELIGION)
    marital: Mapping[str, str] = field(default_factory=lambda: MARITAL_STATUS)
    gender: Mapping[str, str] = field(default_factory=lambda: GENDER)
    profession: Mapping[str, str] = field(default_factory=lambda: PROFESSION)
    education: Mapping[str, str] = field(default_factory=lambda: EDUCATION)
    language: Mapping[str, str] = field(default_factory=lambda: LANGUAGE)
    skill: Mapping[str, str] = field(default_factory=lambda: SKILL)
    skill_levels: Mapping[str, int] = field(default_factory=lambda: SKILL_LEVELS)

    def translate(self, table: str, value: str) -> str:
        """
        Look `value` up in the named table.

        Returns the Arabic label, or `value` unchanged when the table has no
        entry for it.

        Raises:
            KeyError: If `table` is not one of the known tables
        """
        if table == "skill_levels" or table not in self.__dataclass_fields__:
            raise KeyError(f"Unknown translation table: {table}")
        mapping = getattr(self, table)
        return mapping.get(value, value)

    def skill_level(self, level: str) -> int:
        """Ordinal for a skill level: Poor=1 .. Excellent=4, anything else 0."""
        return self.skill_levels.get(level, 0)


DEFAULT_TABLES = TranslationTables()


# Rough phonetic mapping. Not linguistically validated.
DIGRAPHS = _frozen({
    "sh": "ش",
    "th": "ث",
    "kh": "خ",
    "ch": "تش",
    "gh": "غ",
    "ph": "ف",
    "ou": "و",
    "ee": "ي",
    "oo": "و",
    "aa": "ا",
})

LETTERS = _frozen({
    "a": "ا",
    "b": "ب",
    "c": "ك",
    "d": "د",
    "e": "ي",
    "f": "ف",
    "g": "ج",
    "h": "ه",
    "i": "ي",
    "j": "ج",
    "k": "ك",
    "l": "ل",
    "m": "م",
    "n": "ن",
    "o": "و",
    "p": "ب",
    "q": "ق",
    "r": "ر",
    "s": "س",
    "t": "ت",
    "u": "و",
    "v": "ف",
    "w": "و",
    "x": "كس",
    "y": "ي",
    "z": "ز",
    " ": " ",
})


def transliterate(name: str) -> str:
    """
    Convert a Latin-script name to an approximate Arabic spelling.

    Two-letter combinations are matched before single letters; characters
    with no mapping are dropped.
    """
    text = (name or "").lower()
    out = []
    i = 0
    while i < len(text):
        pair = text[i:i + 2]
        if len(pair) == 2 and pair in DIGRAPHS:
            out.append(DIGRAPHS[pair])
            i += 2
            continue
        out.append(LETTERS.get(text[i], ""))
        i += 1
    return " ".join("".join(out).split())
