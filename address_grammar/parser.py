"""
address_grammar/parser.py — gramatyka wiersza adresów z raportu o wyłączeniach.

Wejście: jeden wiersz po transliteracji (wielkie litery, alfabet łaciński), np.

    "AUTOPUT ZA NOVI SAD: BB,284,294-296F,  BATAJNIČKI DRUM: BB,261-265,"

Gramatyka (parser zstępujący, bez rekurencji):

    row           := entry+                          (reszta wiersza ignorowana)
    entry         := street ":" number_list
    street        := dowolne znaki do pierwszego ':' (min. 1), przycięte
    number_list   := ws spec ("," spec)* ","? ws
    spec          := "BB" | range | number           (kolejność ma znaczenie!)
    range         := number "-" number               (bez spacji wokół '-')
    number        := digits extension
    extension     := letters* ("/" digits)?          (pusty → None)

Każda produkcja przyjmuje (text, pos) i zwraca (wartość, nowa_pozycja)
albo rzuca ParseError. Moduł nie ma stanu — bezpieczny dla wielu wątków.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, overload

from data_model.addresses import (
    NO_NUMBER,
    HouseNumber,
    HouseRange,
    Specification,
    StreetEntry,
)

from .types import ErrorCode, ParseError

# ---------------------------------------------------------------------------
# Tokeny
# ---------------------------------------------------------------------------

_DIGITS_RE = re.compile(r"[0-9]+")

# Litery (także Č, Ć, Ž, Š, Đ po transliteracji), opcjonalnie "/cyfry".
_EXTENSION_RE = re.compile(r"[^\W\d_]*(?:/[0-9]+)?")

# Białe znaki dozwolone tylko na granicach listy numerów.
_SPACE_RE = re.compile(r"[ \t\r\n]*")

_NO_NUMBER_RE = re.compile(r"bb", re.IGNORECASE)

_RANGE_SEP = "-"
_LIST_SEP = ","
_STREET_SEP = ":"


def _skip_space(text: str, pos: int) -> int:
    return _SPACE_RE.match(text, pos).end()  # type: ignore[union-attr]


# ---------------------------------------------------------------------------
# Numery i zakresy
# ---------------------------------------------------------------------------

def parse_house_number(text: str, pos: int = 0) -> tuple[HouseNumber, int]:
    """
    Parsuje numer domu z opcjonalnym rozszerzeniem.

    Przykłady::

        "36"    → HouseNumber(36, None)
        "36A/1" → HouseNumber(36, "A/1")
        "7/2"   → HouseNumber(7, "/2")

    Raises:
        ParseError(MALFORMED_TOKEN) gdy na pozycji nie ma cyfry.
    """
    m = _DIGITS_RE.match(text, pos)
    if not m:
        raise ParseError(ErrorCode.MALFORMED_TOKEN, text, pos, "cyfra numeru domu")

    try:
        value = int(m.group())
    except ValueError as e:
        # limit długości konwersji str → int (sys.get_int_max_str_digits)
        raise ParseError(ErrorCode.MALFORMED_TOKEN, text, pos, "numer domu w zakresie") from e

    # Wzorzec rozszerzenia dopuszcza pusty ciąg — zawsze pasuje.
    ext_end = _EXTENSION_RE.match(text, m.end()).end()  # type: ignore[union-attr]
    return HouseNumber(value, text[m.end():ext_end] or None), ext_end


def parse_house_range(text: str, pos: int = 0) -> tuple[HouseRange, int]:
    """Parsuje zakres "numer-numer". Nie sprawdza, czy start <= end."""
    start, pos = parse_house_number(text, pos)

    if not text.startswith(_RANGE_SEP, pos):
        raise ParseError(ErrorCode.MALFORMED_RANGE, text, pos, f"'{_RANGE_SEP}'")

    try:
        end, pos = parse_house_number(text, pos + 1)
    except ParseError as e:
        raise ParseError(
            ErrorCode.MALFORMED_RANGE, text, e.position, "numer domu po '-'"
        ) from e

    return HouseRange(start, end), pos


def parse_specification(text: str, pos: int = 0) -> tuple[Specification, int]:
    """
    Parsuje jeden element listy: "BB", zakres albo pojedynczy numer.

    Zakres jest próbowany przed pojedynczym numerem: numer zjadłby lewą
    stronę zakresu i zostawił "-..." przed oczekiwanym przecinkiem.
    """
    m = _NO_NUMBER_RE.match(text, pos)
    if m:
        return NO_NUMBER, m.end()

    try:
        return parse_house_range(text, pos)
    except ParseError:
        pass  # cofamy się do pozycji startowej

    try:
        return parse_house_number(text, pos)
    except ParseError as e:
        raise ParseError(
            ErrorCode.MALFORMED_TOKEN, text, pos, "'BB', numer domu lub zakres"
        ) from e


# ---------------------------------------------------------------------------
# Lista numerów
# ---------------------------------------------------------------------------

def parse_number_list(text: str, pos: int = 0) -> tuple[tuple[Specification, ...], int]:
    """
    Parsuje listę specyfikacji oddzielonych przecinkami.

    Białe znaki są dozwolone tylko na początku i na końcu listy; jeden
    przecinek końcowy jest opcjonalny ("BB,123" ≡ "BB,123,").

    Raises:
        ParseError(MALFORMED_LIST) gdy lista nie zawiera żadnego elementu.
    """
    pos = _skip_space(text, pos)

    try:
        first, pos = parse_specification(text, pos)
    except ParseError as e:
        raise ParseError(
            ErrorCode.MALFORMED_LIST, text, e.position, "co najmniej jeden numer, zakres lub 'BB'"
        ) from e

    numbers: list[Specification] = [first]
    while text.startswith(_LIST_SEP, pos):
        try:
            item, after = parse_specification(text, pos + 1)
        except ParseError:
            break  # przecinek końcowy albo koniec listy
        numbers.append(item)
        pos = after

    if text.startswith(_LIST_SEP, pos):
        pos += 1

    return tuple(numbers), _skip_space(text, pos)


# ---------------------------------------------------------------------------
# Ulica i wiersz
# ---------------------------------------------------------------------------

def parse_street_entry(text: str, pos: int = 0) -> tuple[StreetEntry, int]:
    """
    Parsuje "<ulica>:<lista numerów>".

    Nazwa ulicy to wszystko przed pierwszym ':' (co najmniej jeden znak),
    przycięte z obu stron. Reszta wejścia za listą zostaje dla kolejnych wpisów.
    """
    colon = text.find(_STREET_SEP, pos)
    if colon < 0:
        raise ParseError(ErrorCode.MALFORMED_ENTRY, text, pos, "':' po nazwie ulicy")
    if colon == pos:
        raise ParseError(ErrorCode.MALFORMED_ENTRY, text, pos, "nazwa ulicy przed ':'")

    street = text[pos:colon].strip()
    numbers, pos = parse_number_list(text, colon + 1)
    return StreetEntry(street, numbers), pos


def parse_address_row(text: str, pos: int = 0) -> tuple[tuple[StreetEntry, ...], int]:
    """
    Parsuje kolejne wpisy ulic aż do pierwszego niepowodzenia.

    Wymaga co najmniej jednego wpisu (błąd pierwszego jest propagowany).
    Błąd kolejnego wpisu kończy wiersz bez zgłaszania — zwracana pozycja
    wskazuje początek nierozpoznanego ogona.
    """
    entry, pos = parse_street_entry(text, pos)
    entries = [entry]

    while pos < len(text):
        try:
            entry, pos = parse_street_entry(text, pos)
        except ParseError:
            break
        entries.append(entry)

    return tuple(entries), pos


# ---------------------------------------------------------------------------
# Fasada
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Addresses:
    """
    Wynik parsowania jednego wiersza adresów (tylko do odczytu).

    - items: wpisy ulic w kolejności ze źródła
    - rest:  nierozpoznany ogon wiersza ("" gdy rozpoznano całość)

    Typowe użycie::

        for entry in Addresses.parse("MAIN ST: BB,12,15-19A,"):
            print(entry.street, entry.numbers)
    """
    items: tuple[StreetEntry, ...]
    rest: str = ""

    @classmethod
    def parse(cls, text: str, *, strict: bool = False) -> Addresses:
        """
        Parsuje wiersz adresów.

        Domyślnie nierozpoznany ogon po ostatnim poprawnym wpisie jest tylko
        zapamiętywany w `rest`. Przy strict=True niepusty ogon (poza białymi
        znakami) kończy się błędem TRAILING_INPUT.

        Raises:
            ParseError gdy nie rozpoznano ani jednego wpisu.
        """
        items, pos = parse_address_row(text)
        rest = text[pos:]
        if strict and rest.strip():
            raise ParseError(
                ErrorCode.TRAILING_INPUT, text, pos, "kolejny wpis '<ulica>: <numery>' lub koniec wiersza"
            )
        return cls(items, rest)

    def __iter__(self) -> Iterator[StreetEntry]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @overload
    def __getitem__(self, index: int) -> StreetEntry: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[StreetEntry, ...]: ...

    def __getitem__(self, index: int | slice) -> StreetEntry | tuple[StreetEntry, ...]:
        return self.items[index]
