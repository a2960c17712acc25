"""
data_model/outages.py — przetworzony wiersz raportu o planowanych wyłączeniach.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Any

from .addresses import StreetEntry


@dataclass(frozen=True, slots=True)
class TimeWindow:
    """Okno czasowe wyłączenia "HH:MM-HH:MM" (czas lokalny, bez daty)."""
    start: time
    end: time

    def __str__(self) -> str:
        return f"{self.start:%H:%M}-{self.end:%H:%M}"


@dataclass(frozen=True, slots=True)
class OutageRecord:
    """
    Jeden wiersz tabeli raportu po transliteracji i parsowaniu.

    - date:      tekst kolumny daty (bez interpretacji)
    - window:    okno czasowe wyłączenia
    - addresses: rozpoznane ulice w kolejności ze źródła
    - rest:      nierozpoznany ogon kolumny adresów ("" gdy brak)
    """
    date: str
    window: TimeWindow
    addresses: tuple[StreetEntry, ...]
    rest: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "from": f"{self.window.start:%H:%M}",
            "to": f"{self.window.end:%H:%M}",
            "addresses": [e.to_dict() for e in self.addresses],
            "rest": self.rest,
        }
