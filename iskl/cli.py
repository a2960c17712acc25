"""
iskl — narzędzie CLI do raportów o planowanych wyłączeniach prądu.

Użycie:
  iskl [-v] <komenda> [opcje]

Komendy:
  fetch   Pobiera raport dnia (0–3), parsuje wiersze i wypisuje TSV / tabelę / JSON.
  parse   Parsuje wiersz(e) adresów podane w argumencie, pliku lub na stdin.

Zmienne środowiskowe:
  ISKL_BASE_URL   adres serwisu z raportami (domyślnie https://elektrodistribucija.rs)
  ISKL_REGION     region raportu: beograd | novisad (domyślnie beograd)
  ISKL_TIMEOUT    limit czasu pobierania w sekundach (domyślnie 30)
  ISKL_LOG_LEVEL  poziom logowania (domyślnie WARNING)
"""

from __future__ import annotations

import argparse
import logging
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8 dla Č, Ć, Ž, Š, Đ.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from iskl._config import get_log_level
from iskl.commands import fetch as cmd_fetch
from iskl.commands import parse as cmd_parse

__version__ = "0.1.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iskl",
        description="Isključenja — parser raportów o planowanych wyłączeniach prądu.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"iskl {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Więcej logów (-v = INFO, -vv = DEBUG).",
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_fetch.add_parser(subparsers)
    cmd_parse.add_parser(subparsers)

    return parser


def _setup_logging(verbose: int) -> None:
    if verbose >= 2:
        level = "DEBUG"
    elif verbose == 1:
        level = "INFO"
    else:
        try:
            level = get_log_level()
        except ValueError as e:
            Console(stderr=True).print(f"[red]Błąd konfiguracji:[/red] {escape(str(e))}")
            raise SystemExit(1)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)
    args.func(args)


if __name__ == "__main__":
    main()
