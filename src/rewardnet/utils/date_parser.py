"""Date parsing utilities for dining dates and reward history ranges."""

from datetime import date, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from rewardnet.domain.errors import ValidationError

PERIODS = ("today", "this-week", "this-month", "this-year", "last-week", "last-month", "last-year")


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a dining date.

    Supports absolute dates ("2024-01-15", "January 15, 2024") and the
    relative forms "today", "yesterday", "this week/month/year" and
    "last week/month/year" (the first day of that period).

    Args:
        date_str: Date string
        today: Reference date for relative forms (defaults to date.today())

    Returns:
        Date object

    Raises:
        ValidationError: If date string cannot be parsed
    """
    text = date_str.strip().lower()
    if today is None:
        today = date.today()

    if text == "today":
        return today
    if text == "yesterday":
        return today - timedelta(days=1)

    prefix, _, unit = text.partition(" ")
    if prefix in ("this", "last") and unit in ("week", "month", "year"):
        start, _ = get_date_range(f"{prefix}-{unit}", today=today)
        return start

    try:
        return date_parser.parse(text).date()
    except (ValueError, OverflowError) as e:
        raise ValidationError(f"Could not parse date '{date_str}': {e}")


def get_date_range(period: str, today: Optional[date] = None) -> tuple[date, date]:
    """Get start and end dates (inclusive) for a named period.

    Periods starting with ``this-`` end today; ``last-`` periods cover the
    whole previous week (Monday to Sunday), month or year.

    Raises:
        ValidationError: If period string is not recognized
    """
    period = period.strip().lower()
    if today is None:
        today = date.today()

    week_start = today - timedelta(days=today.weekday())
    month_start = today.replace(day=1)
    year_start = today.replace(month=1, day=1)

    if period == "today":
        return (today, today)
    if period == "this-week":
        return (week_start, today)
    if period == "this-month":
        return (month_start, today)
    if period == "this-year":
        return (year_start, today)
    if period == "last-week":
        return (week_start - timedelta(days=7), week_start - timedelta(days=1))
    if period == "last-month":
        return (month_start - relativedelta(months=1), month_start - timedelta(days=1))
    if period == "last-year":
        return (year_start - relativedelta(years=1), year_start - timedelta(days=1))

    raise ValidationError(f"Unknown period: '{period}'. Supported periods: {', '.join(PERIODS)}")
