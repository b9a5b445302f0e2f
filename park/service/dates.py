"""
Dates
-----

The two date rules used by the ticket lifecycle. Cancellation counts
elapsed time, while validity compares calendar fields.
"""
from datetime import datetime, timedelta, timezone, tzinfo

ONE_DAY = timedelta(days=1)


def as_utc(moment: datetime) -> datetime:
    """Makes a datetime timezone-aware in UTC. Naive datetimes are taken to be UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def elapsed_days(since: datetime, now: datetime) -> int:
    """
    Counts the whole days elapsed between two instants.

    Partial days are truncated toward zero, so 7 days and 23 hours
    counts as 7, and a date in the future gives zero or a negative count.
    """
    elapsed = as_utc(now) - as_utc(since)
    whole_days = abs(elapsed) // ONE_DAY
    return whole_days if elapsed >= timedelta(0) else -whole_days


def same_calendar_day(first: datetime, second: datetime, zone: tzinfo = timezone.utc) -> bool:
    """Checks whether two instants fall on the same year, month and day of the year in the given zone."""
    first = as_utc(first).astimezone(zone)
    second = as_utc(second).astimezone(zone)
    return (
        first.year == second.year
        and first.month == second.month
        and first.timetuple().tm_yday == second.timetuple().tm_yday
    )
