"""html_parser/parser.py — pobieranie strony raportu o wyłączeniach i wyciąganie wierszy tabeli."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import requests
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://elektrodistribucija.rs"
DEFAULT_TIMEOUT = 30.0

# Prefiks nazwy strony raportu dla regionu (Beograd nie ma prefiksu).
REGION_PREFIX: dict[str, str] = {
    "beograd": "",
    "novisad": "NoviSad_",
}

# Raport obejmuje dzień bieżący i trzy kolejne.
REPORT_DAYS = range(4)

# Selektory struktury strony: druga tabela, wiersze bez nagłówka, komórki.
_TABLE_SELECTOR = "table:nth-child(2)"
_ROW_SELECTOR = "tr:not(:first-child)"
_CELL_SELECTOR = "td"

_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    )
}


class ReportError(RuntimeError):
    """Strona nie ma oczekiwanej struktury (brak tabeli z danymi)."""


@dataclass(frozen=True, slots=True)
class ReportRow:
    """Surowe teksty trzech kolumn wiersza raportu (przed transliteracją)."""
    date: str
    window: str
    addresses: str


def report_url(day: int, region: str = "beograd", base_url: str = DEFAULT_BASE_URL) -> str:
    """
    Buduje URL strony raportu dla dnia (0 = dziś) i regionu.

    Przykład::

        report_url(1) → "https://elektrodistribucija.rs/Dan_1_Iskljucenja.htm"
    """
    if day not in REPORT_DAYS:
        raise ValueError(f"Nieprawidłowy dzień raportu: {day} (dozwolone 0–{REPORT_DAYS[-1]})")
    try:
        prefix = REGION_PREFIX[region]
    except KeyError:
        raise ValueError(
            f"Nieznany region: '{region}' (dozwolone: {', '.join(REGION_PREFIX)})"
        ) from None
    return f"{base_url.rstrip('/')}/{prefix}Dan_{day}_Iskljucenja.htm"


def fetch_report(url: str, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Pobiera stronę raportu i zwraca jej HTML jako tekst."""
    logger.debug("GET %s (timeout=%ss)", url, timeout)
    resp = requests.get(url, timeout=timeout, headers=_HEADERS)
    resp.raise_for_status()
    resp.encoding = resp.apparent_encoding or "utf-8"
    return resp.text


def extract_rows(html: str) -> list[ReportRow]:
    """
    Wyciąga wiersze z tabeli danych raportu.

    Tekst komórki to jej węzły tekstowe po strip(), sklejone bez separatora.
    Wiersze z mniej niż trzema komórkami są logowane i pomijane.

    Raises:
        ReportError gdy strona nie zawiera tabeli z danymi.
    """
    soup = BeautifulSoup(html, "html.parser")

    table = soup.select_one(_TABLE_SELECTOR)
    if table is None:
        raise ReportError("Strona nie zawiera tabeli z danymi.")

    rows: list[ReportRow] = []
    for i, tr in enumerate(table.select(_ROW_SELECTOR)):
        cells = [td.get_text("", strip=True) for td in tr.select(_CELL_SELECTOR)]
        if len(cells) < 3:
            logger.warning("Wiersz #%d ma %d kolumn(y) zamiast 3 — pomijam: %r", i, len(cells), cells)
            continue
        rows.append(ReportRow(cells[0], cells[1], cells[2]))

    logger.debug("Wyciągnięto %d wierszy", len(rows))
    return rows


def parse_report_url(url: str, timeout: float = DEFAULT_TIMEOUT) -> list[ReportRow]:
    """Pobiera stronę raportu z podanego URL i zwraca jej wiersze."""
    return extract_rows(fetch_report(url, timeout))
