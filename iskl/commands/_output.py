"""Wspólne formatowanie wyników dla komend fetch i parse."""

from __future__ import annotations

import json
from typing import Any, Iterable

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from data_model.addresses import StreetEntry

console = Console()

# Separator wpisów ulic w jednej kolumnie TSV.
ENTRY_SEP = "; "


def format_entries(entries: Iterable[StreetEntry]) -> str:
    return ENTRY_SEP.join(str(e) for e in entries)


def print_json(data: Any) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def new_table(*columns: str) -> Table:
    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    for name in columns:
        table.add_column(name, no_wrap=(name != "BROJEVI"), max_width=80)
    return table


def numbers_text(entry: StreetEntry) -> Text:
    return Text(",".join(str(n) for n in entry.numbers))
