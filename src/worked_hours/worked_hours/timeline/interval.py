from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

from ..common.datetime_utils import parse_hhmm, parse_iso_date
from ..core.constants import DEFAULT_EARLY_GRACE_MINUTES, NOCTURNAL_END, NOCTURNAL_START

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class TimePoint:
    """A wall-clock instant anchored to a calendar day.

    Equality and ordering are by the resolved instant only.
    """

    instant: datetime

    def plus_minutes(self, minutes: int) -> "TimePoint":
        return TimePoint(self.instant + timedelta(minutes=minutes))

    def next_day(self) -> "TimePoint":
        return TimePoint(self.instant + timedelta(days=1))

    def minutes_until(self, other: "TimePoint") -> int:
        """Signed whole minutes from this point to ``other``."""
        return int((other.instant - self.instant).total_seconds() // 60)

    def hhmm(self) -> str:
        return self.instant.strftime("%H:%M")


@dataclass(frozen=True)
class Interval:
    start: TimePoint
    end: TimePoint

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise ValueError(f"Interval end must be after start ({self.start.instant} >= {self.end.instant})")

    @property
    def minutes(self) -> int:
        return self.start.minutes_until(self.end)

    @classmethod
    def between(cls, start: TimePoint, end: TimePoint) -> Optional["Interval"]:
        """Interval for [start, end), or None when the span is empty or inverted."""
        if end <= start:
            return None
        return cls(start, end)


def resolve_time_point(day, hhmm) -> TimePoint:
    """Anchor an "HH:MM" value on ``day``.

    Raises InvalidDate / InvalidTimeFormat for unusable input.
    """
    work_date = parse_iso_date(day)
    return TimePoint(datetime.combine(work_date, parse_hhmm(hhmm)))


def apply_crossover(start: TimePoint, end: TimePoint) -> Interval:
    """Build [start, end), moving ``end`` to the next day when it is not after ``start``.

    Only a single day is ever added; spans over 24h are not representable.
    """
    if end <= start:
        end = end.next_day()
    return Interval(start, end)


def overlap_minutes(a: Optional[Interval], b: Optional[Interval]) -> int:
    """Minutes shared by two intervals; 0 when disjoint or merely touching."""
    if a is None or b is None:
        return 0
    start = max(a.start, b.start)
    end = min(a.end, b.end)
    return max(0, start.minutes_until(end))


def clamp_early_arrival(
    real_in: TimePoint,
    planned_start: Optional[TimePoint],
    grace_minutes: int = DEFAULT_EARLY_GRACE_MINUTES,
) -> TimePoint:
    """Counted start for metrics: never earlier than ``planned_start - grace_minutes``.

    The punch itself is untouched; only the value used for metering moves.
    """
    if planned_start is None:
        return real_in

    earliest = planned_start.plus_minutes(-int(grace_minutes))
    if real_in < earliest:
        logger.debug("early arrival %s clamped to %s", real_in.hhmm(), earliest.hhmm())
        return earliest
    return real_in


def nocturnal_window(day: date) -> Interval:
    """19:00 on ``day`` to 06:00 on the following day."""
    start = TimePoint(datetime.combine(day, NOCTURNAL_START))
    end = TimePoint(datetime.combine(day + timedelta(days=1), NOCTURNAL_END))
    return Interval(start, end)
