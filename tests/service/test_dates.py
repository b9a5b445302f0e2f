from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from park.service.dates import as_utc, elapsed_days, same_calendar_day

NOON = datetime(2019, 5, 15, 12, 0, tzinfo=timezone.utc)


def test_as_utc_naive():
    """Assert that naive datetimes are taken to be in UTC."""
    assert as_utc(datetime(2019, 5, 15, 12, 0)) == NOON
    assert as_utc(datetime(2019, 5, 15, 12, 0)).tzinfo is timezone.utc


def test_as_utc_converts():
    paris = datetime(2019, 5, 15, 14, 0, tzinfo=ZoneInfo("Europe/Paris"))
    assert as_utc(paris) == NOON
    assert as_utc(paris).hour == 12


@pytest.mark.parametrize("elapsed, expected", [
    (timedelta(0), 0),
    (timedelta(hours=23), 0),
    (timedelta(days=7), 7),
    (timedelta(days=7, hours=23, minutes=59), 7),
    (timedelta(days=8), 8),
    (timedelta(hours=-23), 0),
    (timedelta(days=-2, hours=-1), -2),
])
def test_elapsed_days(elapsed, expected):
    """Assert that partial days are truncated toward zero."""
    assert elapsed_days(NOON - elapsed, NOON) == expected


def test_same_calendar_day():
    assert same_calendar_day(NOON, NOON.replace(hour=0))
    assert same_calendar_day(NOON, NOON.replace(hour=23, minute=59))
    assert not same_calendar_day(NOON, NOON + timedelta(hours=12))


def test_same_calendar_day_other_year():
    """Assert that the same day of a different year is a different day."""
    assert not same_calendar_day(NOON, NOON.replace(year=2020))


def test_same_calendar_day_in_zone():
    """Assert that calendar days are compared in the given zone rather than UTC."""
    late = datetime(2019, 5, 15, 23, 30, tzinfo=timezone.utc)
    next_morning = datetime(2019, 5, 16, 1, 0, tzinfo=timezone.utc)

    assert not same_calendar_day(late, next_morning)
    assert same_calendar_day(late, next_morning, ZoneInfo("Europe/Paris"))
