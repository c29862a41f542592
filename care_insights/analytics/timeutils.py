"""Date helpers shared by the analytics functions."""

from datetime import datetime
from typing import Iterable, Optional

DAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]


def day_of_week(moment: datetime) -> int:
    """Day index with Sunday = 0 ... Saturday = 6."""
    return (moment.weekday() + 1) % 7


def is_aware(moment: datetime) -> bool:
    return moment.tzinfo is not None and moment.utcoffset() is not None


def check_consistent_timezones(moments: Iterable[datetime]) -> None:
    """Raise ValueError when timezone-aware and naive datetimes are mixed."""
    seen = None
    for moment in moments:
        aware = is_aware(moment)
        if seen is None:
            seen = aware
        elif aware != seen:
            raise ValueError("cannot mix timezone-aware and naive datetimes")


def reference_now(samples: Iterable[datetime] = (), now: Optional[datetime] = None) -> datetime:
    """
    Evaluation time for a calculation.

    An explicit `now` wins. Otherwise the current time is taken in the
    timezone of the first sample so aware and naive values never mix.
    Mixed inputs are rejected with ValueError.
    """
    samples = list(samples)
    check_consistent_timezones(samples + ([now] if now is not None else []))
    if now is not None:
        return now
    for sample in samples:
        return datetime.now(sample.tzinfo)
    return datetime.now()


def whole_days(later: datetime, earlier: datetime) -> int:
    """floor((later - earlier) / 1 day)"""
    return (later - earlier).days
