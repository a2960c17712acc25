"""
address_grammar/time_window.py — parsowanie okna czasowego "HH:MM-HH:MM".

Tekst za drugą godziną jest ignorowany (kolumna bywa uzupełniana komentarzem).
"""

from __future__ import annotations

import re
from datetime import time

from data_model.outages import TimeWindow

from .types import ErrorCode, ParseError

_TIME_RE = re.compile(r"([0-9]+):([0-9]+)")


def parse_time(text: str, pos: int = 0) -> tuple[time, int]:
    """Parsuje "HH:MM" → datetime.time. Godziny/minuty spoza zakresu → ParseError."""
    m = _TIME_RE.match(text, pos)
    if not m:
        raise ParseError(ErrorCode.MALFORMED_TIME, text, pos, "'HH:MM'")
    try:
        value = time(int(m.group(1)), int(m.group(2)))
    except ValueError as e:
        raise ParseError(ErrorCode.MALFORMED_TIME, text, pos, "poprawna godzina 'HH:MM'") from e
    return value, m.end()


def parse_time_window(text: str) -> TimeWindow:
    """
    Parsuje "HH:MM-HH:MM" (bez spacji wokół '-').

    Przykład::

        "12:00-13:15" → TimeWindow(time(12, 0), time(13, 15))
    """
    start, pos = parse_time(text)
    if not text.startswith("-", pos):
        raise ParseError(ErrorCode.MALFORMED_TIME, text, pos, "'-'")
    end, _ = parse_time(text, pos + 1)
    return TimeWindow(start, end)
