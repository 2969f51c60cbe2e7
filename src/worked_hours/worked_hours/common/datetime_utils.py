from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta

from ..core.constants import DAYS_PER_WEEK
from ..core.exceptions import InvalidDate, InvalidTimeFormat

_HHMM = re.compile(r"([0-9]{2}):([0-9]{2})")
_LOOSE_TIME = re.compile(r"([0-9]{1,2}):([0-9]{2})(?::[0-9]{2}(?:\.[0-9]+)?)?")


def parse_iso_date(value) -> date:
    """Parse YYYY-MM-DD string into date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDate(f"Invalid date: {value!r}")
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError:
        raise InvalidDate(f"Invalid date: {value!r}") from None


def parse_hhmm(value) -> time:
    """Parse a canonical "HH:MM" wall-clock string (00:00-23:59)."""
    if not isinstance(value, str):
        raise InvalidTimeFormat(f"Invalid time: {value!r}")

    m = _HHMM.fullmatch(value)
    if not m:
        raise InvalidTimeFormat(f"Invalid time: {value!r}")

    hour, minute = int(m.group(1)), int(m.group(2))
    if hour > 23 or minute > 59:
        raise InvalidTimeFormat(f"Time out of range 00:00-23:59: {value!r}")
    return time(hour, minute)


def to_canonical_hhmm(value) -> str:
    """Coerce upstream time shapes ("8:05", "08:05:00", time objects) to "HH:MM".

    Used only at the system boundary; the engine itself accepts "HH:MM" only.
    """
    if isinstance(value, (time, datetime)):
        return value.strftime("%H:%M")
    if not isinstance(value, str):
        raise InvalidTimeFormat(f"Invalid time: {value!r}")

    m = _LOOSE_TIME.fullmatch(value.strip())
    if not m:
        raise InvalidTimeFormat(f"Invalid time: {value!r}")
    text = f"{int(m.group(1)):02d}:{m.group(2)}"
    parse_hhmm(text)
    return text


def to_canonical_date(value) -> date:
    """Accept "YYYY-MM-DD", full ISO datetimes (date part kept) and date objects."""
    if isinstance(value, str) and len(value.strip()) > 10:
        try:
            return datetime.fromisoformat(value.strip().replace("Z", "+00:00")).date()
        except ValueError:
            raise InvalidDate(f"Invalid date: {value!r}") from None
    return parse_iso_date(value)


def format_duration(minutes: float) -> str:
    """Render a minute count as HH:MM (e.g. 495 -> "08:15")."""
    total = int(round(minutes))
    return f"{total // 60:02d}:{total % 60:02d}"


def week_dates(week_start: date) -> list[date]:
    return [week_start + timedelta(days=i) for i in range(DAYS_PER_WEEK)]
