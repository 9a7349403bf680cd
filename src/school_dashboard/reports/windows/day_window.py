from __future__ import annotations

from datetime import date

from .base import DateWindow, ReportWindowStrategy


class DayWindow(ReportWindowStrategy):
    def window(self, *, today: date) -> DateWindow:
        return DateWindow(start=today, end=today)
