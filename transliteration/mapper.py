"""
transliteration/mapper.py — transliteracja cyrylicy serbskiej na łacinkę (wielkie litery).

Cały tekst z raportów jest sprowadzany do jednego alfabetu i rejestru, żeby
gramatyka adresów nie musiała obsługiwać dwóch pism:

    "Улица Браће Јерковић 12а" → "ULICA BRAĆE JERKOVIĆ 12A"

Litery Љ, Њ, Џ dają dwuznaki LJ, NJ, DŽ; pozostałe znaki są tylko
zamieniane na wielkie litery.
"""

from __future__ import annotations

# Łacińskie odpowiedniki liter cyrylicy (wielkie; małe litery dodawane niżej).
_CYRILLIC_TO_LATIN: dict[str, str] = {
    "А": "A",  "Б": "B",  "В": "V",  "Г": "G",  "Д": "D",
    "Ђ": "Đ",  "Е": "E",  "Ж": "Ž",  "З": "Z",  "И": "I",
    "Ј": "J",  "К": "K",  "Л": "L",  "Љ": "Lj", "М": "M",
    "Н": "N",  "Њ": "Nj", "О": "O",  "П": "P",  "Р": "R",
    "С": "S",  "Т": "T",  "Ћ": "Ć",  "У": "U",  "Ф": "F",
    "Х": "H",  "Ц": "C",  "Ч": "Č",  "Џ": "Dž", "Ш": "Š",
}


class Mapper:
    """Tablica transliteracji: znak cyrylicy → napis łaciński (wielkimi literami)."""

    def __init__(self) -> None:
        table: dict[str, str] = {}
        for cyr, lat in _CYRILLIC_TO_LATIN.items():
            table[cyr] = lat.upper()
            table[cyr.lower()] = lat.upper()
        self._table = table

    def transform(self, text: str) -> str:
        """Zwraca tekst w łacince, wielkimi literami."""
        return "".join(self._table.get(c) or c.upper() for c in text)


_DEFAULT_MAPPER = Mapper()


def transliterate(text: str) -> str:
    """Skrót dla Mapper().transform() na współdzielonej instancji."""
    return _DEFAULT_MAPPER.transform(text)
