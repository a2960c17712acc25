"""
data_model/addresses.py — wynik parsowania wiersza adresów z raportu o wyłączeniach.

Hierarchia:
  StreetEntry   — ulica + uporządkowana lista specyfikacji numerów
  Specification — NoNumber | HouseNumber | HouseRange (zamknięta suma typów)

Wszystkie struktury są niemutowalne; napisy są kopiami fragmentów wejścia.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeAlias


# ---------------------------------------------------------------------------
# Numer domu
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class HouseNumber:
    """
    Pojedynczy numer domu z opcjonalnym rozszerzeniem.

    - value:     wartość liczbowa numeru (np. 36)
    - extension: dosłowny sufiks po cyfrach: litery, litery + "/cyfry"
                 albo samo "/cyfry" (np. "A", "A/1", "/1"); None gdy brak
    """
    value: int
    extension: str | None = None

    def __str__(self) -> str:
        return f"{self.value}{self.extension or ''}"

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "number", "value": self.value, "extension": self.extension}


@dataclass(frozen=True, slots=True)
class HouseRange:
    """Zakres numerów start-end. Kolejność nie jest sprawdzana (start > end jest poprawne)."""
    start: HouseNumber
    end: HouseNumber

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "range",
            "from": {"value": self.start.value, "extension": self.start.extension},
            "to": {"value": self.end.value, "extension": self.end.extension},
        }


@dataclass(frozen=True, slots=True)
class NoNumber:
    """Znacznik "BB" (bez broja) — odcinek ulicy bez przypisanych numerów."""

    def __str__(self) -> str:
        return "BB"

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "bb"}


NO_NUMBER = NoNumber()

# Jeden element listy numerów ulicy.
Specification: TypeAlias = NoNumber | HouseNumber | HouseRange


# ---------------------------------------------------------------------------
# Ulica
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class StreetEntry:
    street: str                          # nazwa ulicy (przycięta), może się powtarzać
    numbers: tuple[Specification, ...]   # w kolejności ze źródła

    def __str__(self) -> str:
        return f"{self.street}: {','.join(str(n) for n in self.numbers)}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "street": self.street,
            "numbers": [n.to_dict() for n in self.numbers],
        }
