"""
address_grammar/types.py — kody błędów i wyjątek parsera.

ParseError niesie pozycję błędu, opis oczekiwanego tokenu oraz
nieskonsumowaną resztę wejścia od tej pozycji.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    """Klasy błędów gramatyki adresów i okien czasowych."""

    MALFORMED_TOKEN  = "E_MALFORMED_TOKEN"    # oczekiwano cyfr
    MALFORMED_RANGE  = "E_MALFORMED_RANGE"    # brak '-' lub prawej strony zakresu
    MALFORMED_LIST   = "E_MALFORMED_LIST"     # brak specyfikacji numeru
    MALFORMED_ENTRY  = "E_MALFORMED_ENTRY"    # brak ':' lub pusta nazwa ulicy
    TRAILING_INPUT   = "E_TRAILING_INPUT"     # tylko tryb strict
    MALFORMED_TIME   = "E_MALFORMED_TIME"


class ParseError(ValueError):
    """
    Błąd parsowania.

    - code:      klasa błędu (ErrorCode)
    - position:  0-based indeks znaku w wejściu
    - expected:  opis oczekiwanego tokenu, np. "cyfra", "':'"
    - remaining: nieskonsumowane wejście od `position`
    """

    def __init__(self, code: ErrorCode, text: str, position: int, expected: str) -> None:
        self.code = code
        self.position = position
        self.expected = expected
        self.remaining = text[position:]
        found = repr(self.remaining[:20]) if self.remaining else "koniec wejścia"
        super().__init__(
            f"{code}: oczekiwano {expected} na pozycji {position}, znaleziono {found}"
        )
