from __future__ import annotations

from datetime import date

from .base import DateWindow, ReportWindowStrategy


class MonthWindow(ReportWindowStrategy):
    def window(self, *, today: date) -> DateWindow:
        return DateWindow(start=today.replace(day=1), end=today)
