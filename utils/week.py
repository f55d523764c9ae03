"""
Week Helpers

Plan weeks run Monday to Sunday and are identified by their Monday.
"""

from datetime import date, datetime, timedelta


def start_of_week_monday(day=None):
    """Monday on or before the given date (today when omitted)."""
    if day is None:
        day = date.today()
    if isinstance(day, datetime):
        day = day.date()
    return day - timedelta(days=day.weekday())


def week_days(week_start):
    """The seven dates of the week starting at week_start."""
    return [week_start + timedelta(days=i) for i in range(7)]


def in_week(day, week_start):
    return week_start <= day < week_start + timedelta(days=7)


def parse_date(value):
    """Parse a YYYY-MM-DD string; returns None for blank or malformed input."""
    if not value:
        return None
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(str(value).strip(), '%Y-%m-%d').date()
    except ValueError:
        return None
