"""Canonical week-window helpers for log routing.

Week boundaries are Monday-Sunday (ISO week). The weekend is the tail of the
week, so "the weekend before this one" always ends on the Sunday just before
this week's Monday.
"""

from datetime import date, datetime, time, timedelta

SATURDAY = 5
SUNDAY = 6

END_OF_DAY = time(23, 59, 59)


def week_start(d: date) -> date:
    """Return Monday of the calendar week containing d."""
    return d - timedelta(days=d.weekday())


def week_end(d: date) -> date:
    """Return Sunday of the calendar week containing d."""
    return week_start(d) + timedelta(days=6)


def is_weekend(d: date) -> bool:
    """Return True for Saturday and Sunday."""
    return d.weekday() in (SATURDAY, SUNDAY)


def prior_sunday(d: date) -> date:
    """Return the Sunday that closed the weekend before the one containing d.

    Saturday maps to d - 6 days, Sunday to d - 7 days. For a weekday this is
    simply the most recent Sunday before d.
    """
    return week_start(d) - timedelta(days=1)


def archive_threshold(d: date) -> datetime:
    """Return the last second of prior_sunday(d).

    Weekend content last written at or before this instant belongs to a closed
    weekend and is due for archiving.
    """
    return datetime.combine(prior_sunday(d), END_OF_DAY)
