from __future__ import annotations

from typing import Optional

from ..core.constants import DEFAULT_REPORT_PERIOD_DAYS, MAX_REPORT_PERIOD_DAYS
from ..core.exceptions import ValidationError


def require_period_days(value: int, *, max_days: int = MAX_REPORT_PERIOD_DAYS) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError("period must be a whole number of days")
    if value < 1:
        raise ValidationError("period must be at least 1 day")
    if value > max_days:
        raise ValidationError(f"period must not exceed {max_days} days")
    return value


def parse_period_days(
    raw: Optional[str],
    *,
    default: int = DEFAULT_REPORT_PERIOD_DAYS,
    max_days: int = MAX_REPORT_PERIOD_DAYS,
) -> int:
    """Parse the ``period`` query value; blank means ``default``."""
    if raw is None or not str(raw).strip():
        return default
    try:
        days = int(str(raw).strip())
    except ValueError:
        raise ValidationError("period must be a whole number of days")
    return require_period_days(days, max_days=max_days)
