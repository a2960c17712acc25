from datetime import time

import pytest

from address_grammar import ErrorCode, ParseError, parse_time, parse_time_window
from data_model.outages import TimeWindow


def test_parse_time():
    assert parse_time("12:00") == (time(12, 0), 5)


def test_parse_interval():
    assert parse_time_window("12:00-13:15") == TimeWindow(time(12, 0), time(13, 15))


def test_single_digit_hours():
    assert parse_time_window("8:30-9:05") == TimeWindow(time(8, 30), time(9, 5))


def test_trailing_text_is_ignored():
    assert parse_time_window("08:30-16:00 (IZMENA)") == TimeWindow(time(8, 30), time(16, 0))


def test_renders_as_hh_mm():
    assert str(TimeWindow(time(8, 0), time(13, 15))) == "08:00-13:15"


@pytest.mark.parametrize("text", ["", "12-13", "12:00 - 13:00", "12:00", "25:00-13:00", "12:60-13:00"])
def test_malformed_windows(text):
    with pytest.raises(ParseError) as exc:
        parse_time_window(text)
    assert exc.value.code == ErrorCode.MALFORMED_TIME
