from __future__ import annotations

from datetime import date

from ...common.datetime_utils import start_of_week
from .base import DateWindow, ReportWindowStrategy


class WeekWindow(ReportWindowStrategy):
    """From the most recent Sunday through today."""

    def window(self, *, today: date) -> DateWindow:
        return DateWindow(start=start_of_week(today), end=today)
