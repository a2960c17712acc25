"""
address_grammar — parser wierszy adresów z raportów o planowanych wyłączeniach.

Interfejs publiczny:
    Addresses         — fasada: Addresses.parse(line, strict=False)
    ParseError        — błąd parsowania (code, position, expected, remaining)
    ErrorCode         — klasy błędów
    parse_time_window — okno czasowe "HH:MM-HH:MM"

Typowe użycie:
    from address_grammar import Addresses, ParseError

    try:
        row = Addresses.parse("MAIN ST: BB,12,15-19A,")
    except ParseError as e:
        print(e.code, e.position, e.expected)
    else:
        for entry in row:
            print(entry.street, [str(n) for n in entry.numbers])
"""

from .types import ErrorCode, ParseError
from .parser import (
    Addresses,
    parse_address_row,
    parse_house_number,
    parse_house_range,
    parse_number_list,
    parse_specification,
    parse_street_entry,
)
from .time_window import parse_time, parse_time_window

__all__ = [
    "ErrorCode",
    "ParseError",
    "Addresses",
    "parse_address_row",
    "parse_house_number",
    "parse_house_range",
    "parse_number_list",
    "parse_specification",
    "parse_street_entry",
    "parse_time",
    "parse_time_window",
]
