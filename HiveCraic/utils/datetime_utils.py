"""
Centralised date/time helpers.

Every timestamp is taken in the configured local timezone (Europe/Dublin by
default) and persisted naive, so the value stored does not depend on the
timezone of the database server.
"""
from datetime import datetime, date, timedelta
from zoneinfo import ZoneInfo

from config.settings import settings

LOCAL_TZ = ZoneInfo(settings.TIMEZONE)


def now_local() -> datetime:
    """Current local datetime, naive, for DATETIME columns."""
    return datetime.now(LOCAL_TZ).replace(tzinfo=None, microsecond=0)


def today_local() -> date:
    """Current local date."""
    return datetime.now(LOCAL_TZ).date()


def days_ago(days: int, today: date | None = None) -> date:
    """Date `days` days before today (local)."""
    return (today or today_local()) - timedelta(days=days)


def shift_months(d: date, months: int) -> date:
    """
    Move a date by a number of calendar months (negative goes back).

    The day is clamped to the last day of the target month,
    e.g. 31 May minus 3 months is 28/29 Feb.
    """
    month_index = d.year * 12 + (d.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    if month == 12:
        next_month_start = date(year + 1, 1, 1)
    else:
        next_month_start = date(year, month + 1, 1)
    last_day = (next_month_start - timedelta(days=1)).day
    return date(year, month, min(d.day, last_day))
