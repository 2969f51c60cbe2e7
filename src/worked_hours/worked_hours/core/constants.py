"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

NOCTURNAL_START = time(19, 0)
NOCTURNAL_END = time(6, 0)  # next calendar day

DEFAULT_EARLY_GRACE_MINUTES = 20

OVERTIME_MULTIPLIER = 1.5
NOCTURNAL_MULTIPLIER = 1.35

SLOT_MINUTES = 30
SLOTS_PER_DAY = 48
DAYS_PER_WEEK = 7

DAILY_HOURS_LIMIT = 10
DAILY_HOURS_LIMIT_WITH_LUNCH = 11
WEEKLY_BASE_HOURS_LIMIT = 44
WEEKLY_EXTRA_HOURS_LIMIT = 12
WEEKLY_TOTAL_HOURS_LIMIT = 56

MAX_RECORDED_OVERTIME_HOURS = 24
