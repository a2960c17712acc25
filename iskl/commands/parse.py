"""Komenda: iskl parse — parsowanie wierszy adresów z argumentu, pliku lub stdin."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from address_grammar import Addresses, ParseError
from iskl.commands._output import console, new_table, numbers_text, print_json
from transliteration import transliterate

err_console = Console(stderr=True)


def _read_lines(args: argparse.Namespace) -> list[str]:
    if args.file:
        path = Path(args.file)
        if not path.exists():
            err_console.print(f"[red]Plik nie istnieje:[/red] {path}")
            raise SystemExit(1)
        text = path.read_text(encoding="utf-8")
    elif args.text is not None:
        text = args.text
    else:
        text = sys.stdin.read()
    return text.splitlines()


def run(args: argparse.Namespace) -> None:
    results: list[tuple[int, Addresses]] = []
    failures = 0

    for n, line in enumerate(_read_lines(args), start=1):
        if not line.strip():
            continue
        prepared = line if args.no_transliterate else transliterate(line)
        try:
            results.append((n, Addresses.parse(prepared, strict=args.strict)))
        except ParseError as e:
            failures += 1
            err_console.print(f"[red]Wiersz {n}:[/red] {escape(str(e))}")

    fmt = args.format  # "text" | "table" | "json"
    if fmt == "json":
        print_json([
            {
                "line": n,
                "addresses": [e.to_dict() for e in row],
                "rest": row.rest,
            }
            for n, row in results
        ])
    elif fmt == "table":
        table = new_table("WIERSZ", "ULICA", "BROJEVI")
        for n, row in results:
            for entry in row:
                table.add_row(str(n), entry.street, numbers_text(entry))
        console.print(table)
    else:
        for n, row in results:
            for entry in row:
                print(entry)
            if row.rest:
                err_console.print(
                    f"[yellow]Wiersz {n}: pominięto nierozpoznany ogon:[/yellow] {escape(row.rest[:80])}"
                )

    if failures:
        raise SystemExit(1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "parse",
        help="Parsuje wiersz(e) adresów: '<ulica>: <numery>, ...'.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Parsuje wiersze adresów w formacie raportu o wyłączeniach, np.

  MAIN ST: BB,12,15-19A,  SECOND ST: 1-5,

Wejście: argument TEKST, plik (--file) albo stdin (po jednym wierszu).
Tekst jest domyślnie transliterowany do łacinki wielkimi literami.
Kod wyjścia 1, jeśli którykolwiek wiersz nie został sparsowany.

Przykłady:
  iskl parse "AUTOPUT ZA NOVI SAD: BB,284,294-296F,"
  iskl parse --file adrese.txt --format json
  cat adrese.txt | iskl parse --strict
        """,
    )
    p.add_argument(
        "text",
        metavar="TEKST",
        nargs="?",
        default=None,
        help="Wiersz adresów (domyślnie: czytany ze stdin).",
    )
    p.add_argument(
        "--file",
        metavar="PLIK",
        default=None,
        help="Plik z wierszami adresów (UTF-8).",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        help="Traktuj nierozpoznany ogon wiersza jako błąd.",
    )
    p.add_argument(
        "--no-transliterate",
        action="store_true",
        help="Nie transliteruj wejścia (zakłada łacinkę wielkimi literami).",
    )
    p.add_argument(
        "--format",
        choices=["text", "table", "json"],
        default="text",
        help="Format wyjścia (domyślnie: text).",
    )
    p.set_defaults(func=run)
