"""Date parsing and calendar helpers.

Weeks start on Monday everywhere in pocketbook.
"""

from datetime import date, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]


def start_of_week(day: date) -> date:
    """Monday of the week containing ``day``."""
    return day - timedelta(days=day.weekday())


def end_of_week(day: date) -> date:
    """Sunday of the week containing ``day``."""
    return start_of_week(day) + timedelta(days=6)


def start_of_month(day: date) -> date:
    return day.replace(day=1)


def end_of_month(day: date) -> date:
    return start_of_month(day) + relativedelta(months=1, days=-1)


def add_months(day: date, months: int) -> date:
    """Shift ``day`` by a number of months, clamping to the month's last day."""
    return day + relativedelta(months=months)


def _previous_weekday(today: date, weekday: int) -> date:
    # Strictly before today: "last friday" on a Friday is a week ago
    days_ago = (today.weekday() - weekday) % 7 or 7
    return today - timedelta(days=days_ago)


def _relative_date(text: str, today: date) -> Optional[date]:
    simple = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
        "this week": start_of_week(today),
        "this month": start_of_month(today),
        "this year": today.replace(month=1, day=1),
        "last week": start_of_week(today) - timedelta(days=7),
        "last month": start_of_month(add_months(today, -1)),
        "last year": date(today.year - 1, 1, 1),
    }
    if text in simple:
        return simple[text]

    prefix, _, name = text.partition(" ")
    if prefix == "last" and name in WEEKDAYS:
        return _previous_weekday(today, WEEKDAYS.index(name))
    return None


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "last month", "this week",
      "last friday", etc. Periods resolve to their first day.

    Args:
        date_str: Date string in various formats
        today: Reference date for relative forms (defaults to date.today())

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    text = " ".join(date_str.lower().split())
    relative = _relative_date(text, today or date.today())
    if relative is not None:
        return relative

    try:
        return date_parser.parse(text).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str.strip()}': {e}")
