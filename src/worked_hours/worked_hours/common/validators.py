from __future__ import annotations

import math
from typing import Any, Mapping, Optional, Sequence

from ..core.exceptions import ValidationError


def first_present(data: Mapping[str, Any], keys: Sequence[str]) -> Any:
    """Return the first value under ``keys`` that is neither None nor an empty string."""
    for key in keys:
        value = data.get(key)
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return value
    return None


def require_mapping(value: Any, field_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ValidationError(f"{field_name} phải là một object")
    return value


def optional_non_negative(value: Any, field_name: str, maximum: Optional[float] = None) -> Optional[float]:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} không hợp lệ")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} không hợp lệ") from None
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} không hợp lệ")
    if number < 0:
        raise ValidationError(f"{field_name} không được âm")
    if maximum is not None and number > maximum:
        raise ValidationError(f"{field_name} không được vượt quá {maximum:g}")
    return number
