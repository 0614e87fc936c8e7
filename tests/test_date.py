# tests/test_date.py

import pytest
from datetime import date
from unittest.mock import patch

from deathday.core.date import CalendarDate, is_leap_year, max_day, SEPARATORS
from deathday.core.errors import (
    DateParseError,
    InvalidDayError,
    InvalidMonthError,
    InvalidPartsCountError,
    InvalidYearError,
    NumberConversionError,
    SeparatorNotFoundError,
)


def test_build_valid():
    d = CalendarDate.build(2023, 10, 27)
    assert (d.year, d.month, d.day) == (2023, 10, 27)

@pytest.mark.parametrize("ymd, err", [
    ((0, 1, 1), InvalidYearError),
    ((-5, 1, 1), InvalidYearError),
    ((2015, 0, 0), InvalidMonthError),
    ((2015, 13, 1), InvalidMonthError),
    ((2015, 1, 0), InvalidDayError),
    ((2015, 1, 32), InvalidDayError),
    ((2015, 2, 29), InvalidDayError),
    ((2016, 2, 30), InvalidDayError),
    ((2015, 4, 31), InvalidDayError),
])
def test_build_invalid(ymd, err):
    with pytest.raises(err):
        CalendarDate.build(*ymd)

def test_direct_construction_is_validated():
    with pytest.raises(InvalidDayError):
        CalendarDate(2015, 2, 29)

def test_parse_errors_are_value_errors():
    with pytest.raises(ValueError):
        CalendarDate.parse("nonsense")
    assert issubclass(InvalidDayError, DateParseError)

def test_leap_years():
    for y in (2000, 2016, 2400, 4):
        assert is_leap_year(y)
    for y in (1900, 2015, 2021, 2100):
        assert not is_leap_year(y)
    assert CalendarDate.build(2016, 3, 7).is_leap_year()
    assert not CalendarDate.build(2015, 3, 7).is_leap_year()

def test_max_day():
    expected = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
    for month, n in enumerate(expected, start=1):
        assert max_day(2015, month) == n
        assert CalendarDate.build(2015, month, 1).max_day() == n
    assert max_day(2016, 2) == 29
    with pytest.raises(InvalidMonthError):
        max_day(2015, 13)

@pytest.mark.parametrize("text", ["23.10.2015", "23/10/2015", "23-10-2015", "23 10 2015"])
def test_parse_separators(text):
    assert CalendarDate.parse(text) == CalendarDate.build(2015, 10, 23)

@pytest.mark.parametrize("text, err", [
    ("23\\09\\2015", SeparatorNotFoundError),
    ("23_09_2015", SeparatorNotFoundError),
    ("23092015", SeparatorNotFoundError),
    ("", SeparatorNotFoundError),
    ("23.09.20.15", InvalidPartsCountError),
    ("23.092015", InvalidPartsCountError),
    # '.' comes first in the separator list, so '/' is never used here
    ("qwerty/asdfg.zxcvb", InvalidPartsCountError),
    ("23.10/2015", InvalidPartsCountError),
    ("qwerty/asdfg/zxcvb", NumberConversionError),
    ("20/10/-2015", NumberConversionError),
    ("20/+10/2015", NumberConversionError),
    ("20//2015", NumberConversionError),
    ("1/1/0", InvalidYearError),
    ("32/10/2015", InvalidDayError),
    ("20/13/2015", InvalidMonthError),
    ("29/2/2015", InvalidDayError),
])
def test_parse_failures(text, err):
    with pytest.raises(err):
        CalendarDate.parse(text)

def test_parse_leap_day():
    assert CalendarDate.parse("29/2/2016") == CalendarDate.build(2016, 2, 29)

def test_parse_display_numbers_roundtrip():
    dates = [
        CalendarDate.build(1970, 1, 1),
        CalendarDate.build(2016, 2, 29),
        CalendarDate.build(1998, 5, 12),
        CalendarDate.build(2015, 12, 31),
    ]
    for d in dates:
        for sep in SEPARATORS:
            text = f"{d.day:02d}{sep}{d.month:02d}{sep}{d.year}"
            assert CalendarDate.parse(text) == d

def test_next_month():
    assert CalendarDate.build(2015, 3, 7).next_month() == CalendarDate.build(2015, 4, 7)
    assert CalendarDate.build(2015, 1, 31).next_month() == CalendarDate.build(2015, 2, 28)
    assert CalendarDate.build(2016, 1, 31).next_month() == CalendarDate.build(2016, 2, 29)
    assert CalendarDate.build(2015, 3, 31).next_month() == CalendarDate.build(2015, 4, 30)
    assert CalendarDate.build(2015, 12, 7).next_month() == CalendarDate.build(2016, 1, 7)

def test_next_day():
    assert CalendarDate.build(2015, 3, 7).next_day() == CalendarDate.build(2015, 3, 8)
    assert CalendarDate.build(2015, 2, 28).next_day() == CalendarDate.build(2015, 3, 1)
    assert CalendarDate.build(2016, 2, 28).next_day() == CalendarDate.build(2016, 2, 29)
    assert CalendarDate.build(2016, 2, 29).next_day() == CalendarDate.build(2016, 3, 1)
    assert CalendarDate.build(2015, 12, 31).next_day() == CalendarDate.build(2016, 1, 1)

def test_next_day_matches_datetime():
    """Walk two years day by day against the standard library."""
    d = CalendarDate.build(2015, 1, 1)
    ref = date(2015, 1, 1)
    for _ in range(731):
        d = d.next_day()
        ref = date.fromordinal(ref.toordinal() + 1)
        assert d.to_date() == ref

def test_years_from():
    a = CalendarDate.build(1998, 5, 12)
    b = CalendarDate.build(2015, 4, 2)
    c = CalendarDate.build(2015, 5, 13)
    assert a.years_from(b) == 16
    assert a.years_from(c) == 17
    assert b.years_from(a) == 16
    assert c.years_from(a) == 17
    assert a.years_from(a) == 0
    assert a.years_from(CalendarDate.build(2015, 5, 12)) == 17

def test_ordering():
    a = CalendarDate.build(2015, 1, 2)
    b = CalendarDate.build(2015, 2, 1)
    c = CalendarDate.build(2016, 1, 1)
    assert a < b < c
    assert min(c, a, b) == a
    assert max(a, c, b) == c
    assert sorted([c, a, b]) == [a, b, c]

def test_display():
    assert CalendarDate.build(2012, 12, 12).month_name() == "December"
    assert CalendarDate.build(2012, 2, 1).to_display_string() == "1 February 2012"
    assert str(CalendarDate.build(2090, 6, 18)) == "18 June 2090"

def test_today_uses_local_date():
    with patch("deathday.core.date.date") as mock_date:
        mock_date.today.return_value = date(2026, 10, 19)
        assert CalendarDate.today() == CalendarDate.build(2026, 10, 19)

def test_date_interop():
    d = CalendarDate.from_date(date(2016, 2, 29))
    assert d == CalendarDate.build(2016, 2, 29)
    assert d.to_date() == date(2016, 2, 29)
