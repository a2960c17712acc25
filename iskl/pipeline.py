"""
iskl/pipeline.py — wiersz raportu → OutageRecord.

Kroki dla każdego wiersza:
  1. transliteracja wszystkich kolumn (łacinka, wielkie litery)
  2. okno czasowe  → parse_time_window
  3. adresy        → Addresses.parse

Wiersz, którego nie da się sparsować, jest logowany i pomijany —
pozostałe wiersze są przetwarzane dalej.
"""

from __future__ import annotations

import logging
from typing import Iterable

from address_grammar import Addresses, ParseError, parse_time_window
from data_model.outages import OutageRecord
from html_parser.parser import ReportRow
from transliteration import transliterate

logger = logging.getLogger(__name__)


def process_row(row: ReportRow, *, strict: bool = False) -> OutageRecord:
    """
    Przetwarza jeden wiersz raportu.

    Raises:
        ParseError gdy okno czasowe lub adresy są niepoprawne.
    """
    window = parse_time_window(transliterate(row.window))
    addresses = Addresses.parse(transliterate(row.addresses), strict=strict)
    if addresses.rest:
        logger.info("Nierozpoznany ogon adresów: %r", addresses.rest[:80])
    return OutageRecord(
        date=transliterate(row.date),
        window=window,
        addresses=addresses.items,
        rest=addresses.rest,
    )


def process_rows(rows: Iterable[ReportRow], *, strict: bool = False) -> list[OutageRecord]:
    records: list[OutageRecord] = []
    for i, row in enumerate(rows):
        try:
            records.append(process_row(row, strict=strict))
        except ParseError as e:
            logger.warning("Wiersz #%d pominięty: %s", i, e)
    return records
