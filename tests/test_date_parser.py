"""Tests for date parsing and calendar helpers."""

import pytest
from datetime import date, timedelta

from pocketbook.utils.date_parser import (
    add_months,
    end_of_month,
    end_of_week,
    parse_date,
    start_of_month,
    start_of_week,
)

# A Wednesday
TODAY = date(2024, 5, 8)


def test_parse_absolute_date():
    """Test parsing absolute dates."""
    assert parse_date("2024-01-15") == date(2024, 1, 15)


def test_parse_today_defaults_to_current_date():
    assert parse_date("today") == date.today()


@pytest.mark.parametrize(
    "text, expected",
    [
        ("today", TODAY),
        ("  Yesterday ", date(2024, 5, 7)),
        ("tomorrow", date(2024, 5, 9)),
        ("this week", date(2024, 5, 6)),
        ("last week", date(2024, 4, 29)),
        ("this month", date(2024, 5, 1)),
        ("last month", date(2024, 4, 1)),
        ("this year", date(2024, 1, 1)),
        ("last year", date(2023, 1, 1)),
        ("last monday", date(2024, 5, 6)),
        ("last wednesday", date(2024, 5, 1)),
        ("last sunday", date(2024, 5, 5)),
    ],
)
def test_parse_relative(text, expected):
    assert parse_date(text, today=TODAY) == expected


def test_parse_last_month_in_january():
    assert parse_date("last month", today=date(2024, 1, 20)) == date(2023, 12, 1)


def test_parse_invalid_relative():
    """Test parsing invalid relative date."""
    with pytest.raises(ValueError):
        parse_date("last invalid")


def test_parse_garbage():
    with pytest.raises(ValueError, match="Could not parse date"):
        parse_date("not a date")


def test_parse_standard_formats():
    """Test parsing various standard date formats."""
    # These should all work via dateutil parser
    assert parse_date("January 15, 2024") == date(2024, 1, 15)
    assert parse_date("15/01/2024") == date(2024, 1, 15)


def test_week_boundaries():
    assert start_of_week(TODAY) == date(2024, 5, 6)
    assert end_of_week(TODAY) == date(2024, 5, 12)
    assert start_of_week(date(2024, 5, 12)) == date(2024, 5, 6)
    assert start_of_week(TODAY).weekday() == 0
    assert end_of_week(TODAY) - start_of_week(TODAY) == timedelta(days=6)


@pytest.mark.parametrize(
    "day, first, last",
    [
        (date(2024, 2, 10), date(2024, 2, 1), date(2024, 2, 29)),
        (date(2023, 2, 28), date(2023, 2, 1), date(2023, 2, 28)),
        (date(2024, 12, 31), date(2024, 12, 1), date(2024, 12, 31)),
    ],
)
def test_month_boundaries(day, first, last):
    assert start_of_month(day) == first
    assert end_of_month(day) == last


def test_add_months_crosses_years():
    assert add_months(date(2024, 3, 1), -5) == date(2023, 10, 1)
    assert add_months(date(2024, 11, 1), 2) == date(2025, 1, 1)


def test_add_months_clamps_day():
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
