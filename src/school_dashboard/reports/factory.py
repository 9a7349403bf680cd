from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import ReportPeriod
from .windows.base import ReportWindowStrategy
from .windows.day_window import DayWindow
from .windows.month_window import MonthWindow
from .windows.week_window import WeekWindow


@dataclass
class ReportWindowFactory:
    """Factory Pattern: choose the window strategy for a report period."""

    def for_period(self, period: Optional[ReportPeriod]) -> ReportWindowStrategy:
        if period == ReportPeriod.WEEK:
            return WeekWindow()
        if period == ReportPeriod.MONTH:
            return MonthWindow()
        return DayWindow()
