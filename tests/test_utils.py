"""
Tests for the date, id and number helpers in core/utils.py.
"""

from datetime import date

import pytest

from core.utils import (
    as_number,
    format_date,
    is_object_id,
    new_object_id,
    parse_limit,
    to_date_string,
    today_string,
)


def test_format_date_uses_canonical_text():
    assert format_date(date(2023, 1, 1)) == "Sun Jan 01 2023"


@pytest.mark.parametrize(
    "value",
    [
        "2023-01-01",
        "2023-01-01T08:30:00",
        "2023-01-01T08:30:00Z",
        "Sun Jan 01 2023",
        " 2023-01-01 ",
        "01/01/2023",
        "2023/01/01",
        "January 1, 2023",
        "Jan 1 2023",
        "1 January 2023",
    ],
)
def test_to_date_string_accepts_known_shapes(value):
    assert to_date_string(value) == "Sun Jan 01 2023"


@pytest.mark.parametrize("value", ["", "yesterday", "2023-13-01", "13/01/2023", "Invalid Date"])
def test_to_date_string_rejects_unknown_shapes(value):
    with pytest.raises(ValueError):
        to_date_string(value)


def test_today_string_matches_current_date():
    assert today_string() == date.today().strftime("%a %b %d %Y")


@pytest.mark.parametrize(
    "value, expected",
    [(None, 0), ("", 0), ("abc", 0), ("0", 0), ("2", 2), ("2abc", 2), (" 7", 7), ("-3", 3), ("1.9", 1),
     ("99999999999999999999", 2 ** 63 - 1)],
)
def test_parse_limit_reads_leading_integer(value, expected):
    assert parse_limit(value) == expected


def test_object_ids():
    oid = new_object_id()
    assert len(oid) == 24
    assert is_object_id(oid)
    assert new_object_id() != oid
    assert not is_object_id("123")
    assert not is_object_id("Z" * 24)
    assert not is_object_id(None)


def test_as_number_collapses_integral_floats():
    assert as_number(30.0) == 30
    assert isinstance(as_number(30.0), int)
    assert as_number(12.5) == 12.5
    assert as_number(None) is None
