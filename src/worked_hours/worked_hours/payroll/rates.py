from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..attendance.model import AttendanceRecord
from ..core.constants import NOCTURNAL_MULTIPLIER, OVERTIME_MULTIPLIER


@dataclass(frozen=True)
class RateConfig:
    """Per-call hourly rate overrides; any field left as None is resolved."""

    base_rate: Optional[float] = None
    extra_rate: Optional[float] = None
    nocturnal_rate: Optional[float] = None


@dataclass(frozen=True)
class ResolvedRates:
    base_rate: float
    extra_rate: float
    nocturnal_rate: float


def resolve_rates(record: Optional[AttendanceRecord], config: Optional[RateConfig] = None) -> ResolvedRates:
    """Resolve hourly rates: explicit config, then record rate (base only), then multiplier, then 0.

    Never raises; a rate that cannot be resolved is 0 and prices its bucket at 0.
    """
    config = config or RateConfig()

    base = config.base_rate
    if base is None and record is not None:
        base = record.embedded_rate
    base = float(base or 0)

    extra = config.extra_rate
    if extra is None:
        extra = base * OVERTIME_MULTIPLIER

    nocturnal = config.nocturnal_rate
    if nocturnal is None:
        nocturnal = base * NOCTURNAL_MULTIPLIER

    return ResolvedRates(base_rate=base, extra_rate=float(extra), nocturnal_rate=float(nocturnal))
