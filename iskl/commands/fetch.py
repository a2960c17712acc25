"""Komenda: iskl fetch — pobiera raport o wyłączeniach i parsuje jego wiersze."""

from __future__ import annotations

import argparse

import requests
from rich.console import Console
from rich.markup import escape

from data_model.outages import OutageRecord
from html_parser.parser import REGION_PREFIX, REPORT_DAYS, ReportError, parse_report_url, report_url
from iskl._config import get_settings
from iskl.commands._output import console, format_entries, new_table, numbers_text, print_json
from iskl.pipeline import process_rows

# Komunikaty statusu na stderr — stdout zostaje dla danych (TSV / JSON).
err_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Wyjście
# ---------------------------------------------------------------------------

def _print_tsv(records: list[OutageRecord]) -> None:
    for r in records:
        print(f"{r.date}\t{r.window}\t{format_entries(r.addresses)}")


def _show_table(records: list[OutageRecord]) -> None:
    if not records:
        console.print("[yellow]Brak wierszy.[/yellow]")
        return

    table = new_table("DATUM", "VREME", "ULICA", "BROJEVI")
    for r in records:
        for entry in r.addresses:
            table.add_row(r.date, str(r.window), entry.street, numbers_text(entry))

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(records)} wierszy[/dim]\n")


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    try:
        settings = get_settings()
    except ValueError as e:
        err_console.print(f"[red]Błąd konfiguracji:[/red] {escape(str(e))}")
        raise SystemExit(1)

    region: str = args.region or settings.region
    timeout: float = args.timeout if args.timeout is not None else settings.timeout

    try:
        url = report_url(args.day, region, settings.base_url)
    except ValueError as e:
        err_console.print(f"[red]Błąd:[/red] {escape(str(e))}")
        raise SystemExit(1)

    err_console.print(f"Pobieranie [bold]{url}[/bold] …")

    try:
        rows = parse_report_url(url, timeout)
    except requests.RequestException as e:
        err_console.print(f"[red]Błąd pobierania:[/red] {escape(str(e))}")
        raise SystemExit(1)
    except ReportError as e:
        err_console.print(f"[red]Błąd struktury strony:[/red] {escape(str(e))}")
        raise SystemExit(1)

    records = process_rows(rows, strict=args.strict)
    skipped = len(rows) - len(records)
    err_console.print(
        f"Sparsowano [bold]{len(records)}[/bold] z {len(rows)} wierszy"
        + (f" ([yellow]{skipped} pominięto[/yellow])" if skipped else "")
        + "."
    )

    fmt = args.format  # "tsv" | "table" | "json"
    if fmt == "json":
        print_json([r.to_dict() for r in records])
    elif fmt == "table":
        _show_table(records)
    else:
        _print_tsv(records)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "fetch",
        help="Pobiera raport dnia i parsuje wiersze (data, okno czasowe, adresy).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Pobiera stronę raportu o planowanych wyłączeniach dla danego dnia,
transliteruje kolumny do łacinki i parsuje okno czasowe oraz adresy.

Wiersze, których nie da się sparsować, są logowane i pomijane.

Przykłady:
  iskl fetch
  iskl fetch --day 2 --format table
  iskl fetch --region novisad --format json --strict
        """,
    )
    p.add_argument(
        "--day",
        type=int,
        choices=list(REPORT_DAYS),
        default=0,
        help="Dzień raportu: 0 = dziś, 1–3 kolejne dni (domyślnie: 0).",
    )
    p.add_argument(
        "--region",
        choices=list(REGION_PREFIX),
        default=None,
        help="Region raportu (domyślnie: ISKL_REGION lub beograd).",
    )
    p.add_argument(
        "--timeout",
        type=float,
        default=None,
        metavar="SEK",
        help="Limit czasu pobierania w sekundach (domyślnie: ISKL_TIMEOUT lub 30).",
    )
    p.add_argument(
        "--format",
        choices=["tsv", "table", "json"],
        default="tsv",
        help="Format wyjścia (domyślnie: tsv).",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        help="Pomijaj wiersze z nierozpoznanym ogonem adresów zamiast go ignorować.",
    )
    p.set_defaults(func=run)
