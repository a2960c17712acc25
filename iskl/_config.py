"""Konfiguracja przez zmienne środowiskowe (flagi CLI mają pierwszeństwo)."""

from __future__ import annotations

import os
from dataclasses import dataclass

from html_parser.parser import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class Settings:
    base_url: str
    timeout: float
    region: str


def get_log_level() -> str:
    """
    Poziom logowania z ISKL_LOG_LEVEL (domyślnie WARNING).

    Raises:
        ValueError gdy wartość nie jest nazwą poziomu logging.
    """
    level = os.getenv("ISKL_LOG_LEVEL", "WARNING").strip().upper()
    if level not in _LOG_LEVELS:
        raise ValueError(
            f"Nieprawidłowy ISKL_LOG_LEVEL: '{level}' (dozwolone: {', '.join(_LOG_LEVELS)})"
        )
    return level


def get_settings() -> Settings:
    """
    Ustawienia komendy fetch.

    Raises:
        ValueError gdy ISKL_TIMEOUT nie jest dodatnią liczbą.
    """
    raw_timeout = os.getenv("ISKL_TIMEOUT", str(DEFAULT_TIMEOUT))
    try:
        timeout = float(raw_timeout)
    except ValueError:
        raise ValueError(f"Nieprawidłowy ISKL_TIMEOUT: '{raw_timeout}' (oczekiwano liczby sekund)") from None
    if timeout <= 0:
        raise ValueError(f"Nieprawidłowy ISKL_TIMEOUT: '{raw_timeout}' (oczekiwano liczby > 0)")

    return Settings(
        base_url = os.getenv("ISKL_BASE_URL", DEFAULT_BASE_URL),
        timeout  = timeout,
        region   = os.getenv("ISKL_REGION",   "beograd"),
    )
