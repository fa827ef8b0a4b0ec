"""Modification dates and their display forms."""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Any

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR
_WEEK = 7 * _DAY
_MONTH = 30 * _DAY
_YEAR = 365 * _DAY


class DateAge(enum.Enum):
    """How recent a date is, used to pick its colour."""

    HOUR_OLD = "hour_old"
    DAY_OLD = "day_old"
    OLDER = "older"


class DateFormat(enum.Enum):
    DATE = "date"
    RELATIVE = "relative"
    FORMATTED = "formatted"


# (exclusive lower bound in seconds, seconds per unit, singular text, unit name)
_ROUGH_PERIODS = [
    (547 * _DAY, _YEAR, "a year", "years"),
    (345 * _DAY, None, "a year", "years"),
    (45 * _DAY, _MONTH, "a month", "months"),
    (29 * _DAY, None, "a month", "months"),
    (10 * _DAY + 12 * _HOUR, _WEEK, "a week", "weeks"),
    (6 * _DAY + 12 * _HOUR, None, "a week", "weeks"),
    (36 * _HOUR, _DAY, "a day", "days"),
    (22 * _HOUR, None, "a day", "days"),
    (90 * _MINUTE, _HOUR, "an hour", "hours"),
    (45 * _MINUTE, None, "an hour", "hours"),
    (90, _MINUTE, "a minute", "minutes"),
    (45, None, "a minute", "minutes"),
]


def _humanize(delta: float) -> str:
    """Describe a signed offset from now in rough English."""
    seconds = abs(int(delta))
    if seconds <= 10:
        return "now"
    text = "seconds"
    for bound, per_unit, singular, plural in _ROUGH_PERIODS:
        if seconds > bound:
            text = singular if per_unit is None else f"{max(seconds // per_unit, 2)} {plural}"
            break
    return f"{text} ago" if delta < 0 else f"in {text}"


@dataclass(frozen=True, order=True)
class Date:
    """A modification time as seconds since the epoch."""

    timestamp: float

    @classmethod
    def from_stat(cls, st: Any) -> Date:
        """Take the modification time of a stat result; times before 1970 become 0."""
        return cls(max(float(st.st_mtime), 0.0))

    def age(self, now: float | None = None) -> DateAge:
        """Whether the date is within the last hour, the last day, or older."""
        if now is None:
            now = time.time()
        if self.timestamp > now - _HOUR:
            return DateAge.HOUR_OLD
        if self.timestamp > now - _DAY:
            return DateAge.DAY_OLD
        return DateAge.OLDER

    def date_string(
        self,
        date_format: DateFormat = DateFormat.DATE,
        fmt: str | None = None,
        now: float | None = None,
    ) -> str:
        """The date in local time, relative to ``now``, or through ``fmt``."""
        if date_format is DateFormat.RELATIVE:
            if now is None:
                now = time.time()
            return _humanize(self.timestamp - now)
        local = datetime.fromtimestamp(self.timestamp)
        if date_format is DateFormat.FORMATTED:
            if fmt is None:
                raise ValueError("a format string is needed for formatted dates")
            return local.strftime(fmt)
        return local.ctime()