from __future__ import annotations

from enum import Enum


class BlockKind(str, Enum):
    """Loại khối ca trong tổng hợp tuần."""

    BASE = "base"
    EXTRA = "extra"


class LimitKind(str, Enum):
    """Giới hạn lịch làm việc bị vượt quá."""

    DAILY_TOTAL = "DAILY_TOTAL"
    WEEKLY_BASE = "WEEKLY_BASE"
    WEEKLY_EXTRA = "WEEKLY_EXTRA"
    WEEKLY_TOTAL = "WEEKLY_TOTAL"
