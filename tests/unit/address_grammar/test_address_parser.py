import dataclasses

import pytest

from address_grammar import (
    Addresses,
    ErrorCode,
    ParseError,
    parse_address_row,
    parse_house_number,
    parse_house_range,
    parse_number_list,
    parse_specification,
    parse_street_entry,
)
from data_model.addresses import NO_NUMBER, HouseNumber, HouseRange, StreetEntry

FULL_ROW = (
    "AUTOPUT ZA NOVI SAD: BB,284,294-296F,  BATAJNIČKI DRUM: BB,261-265,269,283-293,299,303-303A,  "
    "BATAJNIČKI DRUM 14 DEO: 14,  NIKOLE SUKNJAREVIĆA PRIKE: 2-18,1-17, NASELJE BATAJNICA:   "
    "1 SREMSKOG ODREDA: 2-90,1-89,  AERODROMSKA: 68A-80,84-88I,98,1-1A,5-13,23A,  "
    "BRAĆE SMILJANIĆA: 4-6,14-64,68-72,3-11,15-61A,65A-71,75B-83F/3,  "
    "DALMATINSKIH BRIGADA: 4A-6A,10-12,20,24,36A/1-56,60,19-21A,25-33,39-43,47,51,57-57,61-85,  "
    "ĐORĐA BOŠKOVIĆA - BATE: 6,12-16B,26-36A,42-54,3-19B,23-39,43-63B,  "
    "IVANA DELNEGRA-ENGLEZA : 2-42,1-17,  KLISINA NOVA  8: 2,3,7-17,  MATROZOVA: BB,  "
    "NOVOSADSKA : 10-98,1-41,45-47,51-61D,65-75Ž,81D-81E,97G-99J,103A-109V,  "
    "VOJVODE VRATKA : BB,4-28,1A-37,  ŽUPANA PRIBILA : 2-36,1-31, "
    "NASELJE ZEMUN:   BATAJNIČKI DRUM 13 DEO: 301,  KLISINA NOVA 10: 8-10,  TEMERINSKA 1 DEO: 1,"
)


def n(value, extension=None):
    return HouseNumber(value, extension)


def r(start, end):
    return HouseRange(start if isinstance(start, HouseNumber) else n(start),
                      end if isinstance(end, HouseNumber) else n(end))


# ---------------------------------------------------------------------------
# Numer domu
# ---------------------------------------------------------------------------

def test_can_parse_complicated_address():
    assert parse_house_number("36A/1") == (n(36, "A/1"), 5)


@pytest.mark.parametrize("value,extension", [
    (0, None),
    (7, None),
    (12, "A"),
    (36, "AB/12"),
    (7, "/2"),
    (75, "Ž"),
    (2024, "V/10"),
])
def test_rendered_number_is_recovered(value, extension):
    text = f"{value}{extension or ''}"
    assert parse_house_number(text) == (n(value, extension), len(text))


def test_slash_without_digits_is_not_part_of_extension():
    assert parse_house_number("12A/B") == (n(12, "A"), 3)


def test_leading_zeros_are_numeric():
    number, _ = parse_house_number("007")
    assert number.value == 7
    assert number.extension is None


def test_number_requires_digit():
    with pytest.raises(ParseError) as exc:
        parse_house_number("A12")
    assert exc.value.code == ErrorCode.MALFORMED_TOKEN
    assert exc.value.position == 0
    assert exc.value.remaining == "A12"


def test_number_stops_at_whitespace():
    assert parse_house_number("1 SREMSKOG") == (n(1), 1)


# ---------------------------------------------------------------------------
# Zakres
# ---------------------------------------------------------------------------

def test_can_parse_a_range_of_addresses():
    assert parse_house_range("123-321") == (r(123, 321), 7)


def test_range_with_extensions():
    assert parse_house_range("36A/1-56") == (r(n(36, "A/1"), 56), 8)


def test_inverted_and_degenerate_ranges_are_accepted():
    assert parse_house_range("9-1")[0] == r(9, 1)
    assert parse_house_range("57-57")[0] == r(57, 57)


def test_range_rejects_spaces_around_separator():
    with pytest.raises(ParseError) as exc:
        parse_house_range("123 - 321")
    assert exc.value.code == ErrorCode.MALFORMED_RANGE
    assert exc.value.position == 3


def test_range_requires_right_hand_side():
    with pytest.raises(ParseError) as exc:
        parse_house_range("12-")
    assert exc.value.code == ErrorCode.MALFORMED_RANGE
    assert exc.value.position == 3


# ---------------------------------------------------------------------------
# Specyfikacja (BB | zakres | numer)
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("text", ["BB", "bb", "Bb", "bB"])
def test_no_number_marker_is_case_insensitive(text):
    assert parse_specification(text) == (NO_NUMBER, 2)


def test_can_parse_one_of():
    assert parse_specification("123A") == (n(123, "A"), 4)
    assert parse_specification("123A-321B") == (r(n(123, "A"), n(321, "B")), 9)


def test_single_number_when_range_is_incomplete():
    assert parse_specification("12-A") == (n(12), 2)


def test_no_number_is_a_prefix_match():
    assert parse_specification("BBA") == (NO_NUMBER, 2)


def test_specification_failure():
    with pytest.raises(ParseError) as exc:
        parse_specification("XY")
    assert exc.value.code == ErrorCode.MALFORMED_TOKEN
    assert exc.value.position == 0


# ---------------------------------------------------------------------------
# Lista numerów
# ---------------------------------------------------------------------------

def test_can_parse_numbers_sequences():
    assert parse_number_list("BB,123,123-321") == ((NO_NUMBER, n(123), r(123, 321)), 14)


def test_trailing_comma_is_optional():
    with_comma, _ = parse_number_list("BB,123,")
    without_comma, _ = parse_number_list("BB,123")
    assert with_comma == without_comma == (NO_NUMBER, n(123))


def test_can_recognize_trailing_comma():
    assert parse_number_list("BB,") == ((NO_NUMBER,), 3)


def test_ignores_surrounding_whitespace():
    text = "  \tBB,BB  \n"
    assert parse_number_list(text) == ((NO_NUMBER, NO_NUMBER), len(text))


def test_interior_whitespace_ends_the_list():
    # " 12" nie jest specyfikacją — przecinek staje się przecinkiem końcowym
    assert parse_number_list("BB, 12") == ((NO_NUMBER,), 4)


@pytest.mark.parametrize("text", [",", "   ,   ", "", "   "])
def test_rejects_list_without_items(text):
    with pytest.raises(ParseError) as exc:
        parse_number_list(text)
    assert exc.value.code == ErrorCode.MALFORMED_LIST


def test_order_sensitive_range_inside_list():
    assert parse_number_list("123A-321B,5")[0] == (r(n(123, "A"), n(321, "B")), n(5))


# ---------------------------------------------------------------------------
# Wpis ulicy
# ---------------------------------------------------------------------------

def test_parse_street_entry():
    text = "  MAIN ST  : BB,284,294-296F,"
    entry, pos = parse_street_entry(text)
    assert pos == len(text)
    assert entry == StreetEntry(
        "MAIN ST",
        (NO_NUMBER, n(284), r(294, n(296, "F"))),
    )


def test_street_name_may_contain_digits_and_punctuation():
    entry, _ = parse_street_entry("ĐORĐA BOŠKOVIĆA - BATE 2: 6,")
    assert entry.street == "ĐORĐA BOŠKOVIĆA - BATE 2"


def test_street_entry_requires_colon():
    with pytest.raises(ParseError) as exc:
        parse_street_entry("MAIN ST BB,12")
    assert exc.value.code == ErrorCode.MALFORMED_ENTRY


def test_street_entry_requires_street_name():
    with pytest.raises(ParseError) as exc:
        parse_street_entry(": BB")
    assert exc.value.code == ErrorCode.MALFORMED_ENTRY
    assert exc.value.position == 0


def test_street_entry_requires_numbers():
    with pytest.raises(ParseError) as exc:
        parse_street_entry("MAIN ST: , ")
    assert exc.value.code == ErrorCode.MALFORMED_LIST


# ---------------------------------------------------------------------------
# Wiersz
# ---------------------------------------------------------------------------

def test_parse_multiple_entries_in_source_order():
    entries, pos = parse_address_row("A ST: BB, B ST: 1-5,")
    assert [e.street for e in entries] == ["A ST", "B ST"]
    assert entries[0].numbers == (NO_NUMBER,)
    assert entries[1].numbers == (r(1, 5),)
    assert pos == 20


def test_parse_all_addresses():
    entries, _ = parse_address_row(
        "AUTOPUT ZA NOVI SAD: BB,284,294-296F,  BATAJNIČKI DRUM: BB,261-265,269,283-293,299,303-303A,"
    )
    assert entries == (
        StreetEntry("AUTOPUT ZA NOVI SAD", (NO_NUMBER, n(284), r(294, n(296, "F")))),
        StreetEntry(
            "BATAJNIČKI DRUM",
            (NO_NUMBER, r(261, 265), n(269), r(283, 293), n(299), r(303, n(303, "A"))),
        ),
    )


def test_row_requires_first_entry():
    with pytest.raises(ParseError) as exc:
        parse_address_row("no colon here")
    assert exc.value.code == ErrorCode.MALFORMED_ENTRY


def test_unparsable_tail_is_not_reported():
    entries, pos = parse_address_row("A ST: 1, B ST 2")
    assert [e.street for e in entries] == ["A ST"]
    assert pos == 9


# ---------------------------------------------------------------------------
# Fasada
# ---------------------------------------------------------------------------

def test_addresses_is_a_read_only_sequence():
    row = Addresses.parse("A ST: BB, B ST: 1-5,")
    assert len(row) == 2
    assert row[1].street == "B ST"
    assert [e.street for e in row] == ["A ST", "B ST"]
    assert row.rest == ""
    with pytest.raises(dataclasses.FrozenInstanceError):
        row.items = ()  # type: ignore[misc]


def test_full_row_is_parsed_leniently():
    row = Addresses.parse(FULL_ROW)
    streets = [e.street for e in row]

    assert streets[0] == "AUTOPUT ZA NOVI SAD"
    # "1 SREMSKOG ODREDA": "1" należy do listy poprzedniej ulicy
    assert row[streets.index("NASELJE BATAJNICA")].numbers == (n(1),)
    assert "SREMSKOG ODREDA" in streets
    assert r(65, n(75, "Ž")) in row[streets.index("NOVOSADSKA")].numbers
    assert r(n(75, "B"), n(83, "F/3")) in row[streets.index("BRAĆE SMILJANIĆA")].numbers
    assert streets[-1] == "ŽUPANA PRIBILA"
    assert row.rest.startswith("NASELJE ZEMUN:")


def test_strict_mode_rejects_unparsed_tail():
    with pytest.raises(ParseError) as exc:
        Addresses.parse(FULL_ROW, strict=True)
    assert exc.value.code == ErrorCode.TRAILING_INPUT
    assert exc.value.remaining.startswith("NASELJE ZEMUN:")


def test_strict_mode_accepts_complete_row():
    row = Addresses.parse("A ST: BB, B ST: 1-5,  ", strict=True)
    assert len(row) == 2


def test_failure_describes_expectation():
    with pytest.raises(ParseError) as exc:
        Addresses.parse("MAIN ST: ,")
    assert exc.value.code == ErrorCode.MALFORMED_LIST
    assert exc.value.position == 9
    assert exc.value.expected
    assert "E_MALFORMED_LIST" in str(exc.value)


def test_entries_render_back_to_text():
    row = Addresses.parse("  MAIN ST  : bb,284,294-296F,36A/1,")
    assert str(row[0]) == "MAIN ST: BB,284,294-296F,36A/1"


def test_overlong_digit_run_is_a_parse_error():
    # dłuższy ciąg cyfr niż limit konwersji str → int
    with pytest.raises(ParseError) as exc:
        parse_house_number("1" * 5000)
    assert exc.value.code == ErrorCode.MALFORMED_TOKEN
    assert exc.value.position == 0


def test_overlong_number_fails_the_row():
    with pytest.raises(ParseError) as exc:
        Addresses.parse("MAIN ST: " + "1" * 5000 + ",")
    assert exc.value.code == ErrorCode.MALFORMED_LIST


def test_overlong_number_ends_the_list():
    entries, pos = parse_address_row("A ST: 1," + "2" * 5000)
    assert entries == (StreetEntry("A ST", (n(1),)),)
    assert pos == 8


def test_addresses_slicing_returns_tuple():
    row = Addresses.parse("A ST: BB, B ST: 1-5, C ST: 7,")
    assert row[1:] == (
        StreetEntry("B ST", (r(1, 5),)),
        StreetEntry("C ST", (n(7),)),
    )
    assert row[-1].street == "C ST"
