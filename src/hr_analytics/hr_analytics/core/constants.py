"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from __future__ import annotations

DEFAULT_REPORT_PERIOD_DAYS = 30
MAX_REPORT_PERIOD_DAYS = 3650

# Stands for "no approved leave in the window at all". It is not a real day
# count: it must exceed every leave-deprivation threshold so missing leave data
# scores as leave-deprived instead of healthy.
NO_QUALIFYING_LEAVE_SENTINEL_DAYS = 999

UNASSIGNED_DEPARTMENT = "Unassigned"

DAYS_PER_MONTH = 30

# (minimum score, inclusive) -> level value, highest band first.
RISK_LEVEL_BANDS = (
    (70, "Critical"),
    (50, "High"),
    (30, "Medium"),
    (0, "Low"),
)
