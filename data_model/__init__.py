"""
data_model — struktury danych raportów o planowanych wyłączeniach.

Użycie:
  from data_model import StreetEntry, HouseNumber, HouseRange, NO_NUMBER, ...

Moduły:
  addresses — HouseNumber, HouseRange, NoNumber, Specification, StreetEntry
  outages   — TimeWindow, OutageRecord

Mapowanie na wiersz raportu:
  kolumna 1 (data)   → OutageRecord.date   (tekst, bez interpretacji)
  kolumna 2 (vreme)  → OutageRecord.window → TimeWindow
  kolumna 3 (adrese) → OutageRecord.addresses → list[StreetEntry]
"""

from .addresses import (
    NO_NUMBER,
    HouseNumber,
    HouseRange,
    NoNumber,
    Specification,
    StreetEntry,
)
from .outages import (
    OutageRecord,
    TimeWindow,
)

__all__ = [
    # addresses
    "NO_NUMBER",
    "HouseNumber",
    "HouseRange",
    "NoNumber",
    "Specification",
    "StreetEntry",
    # outages
    "OutageRecord",
    "TimeWindow",
]
