from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .model import EmployeeSnapshot


class EmployeeWindowRepository(Protocol):
    """Read-side repository feeding the burnout report.

    Note (DIP): the report service depends on this interface, never on a concrete DB client.
    """

    def fetch_active_employees_with_window_data(self, *, window_start: datetime) -> Sequence[EmployeeSnapshot]:
        """Active employees with attendance checked in since ``window_start`` and approved
        leave ending since ``window_start`` (most recent leave first)."""

        raise NotImplementedError
