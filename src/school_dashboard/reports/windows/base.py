from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date

from ...common.datetime_utils import format_iso_date


@dataclass(frozen=True)
class DateWindow:
    """Inclusive range of calendar days a report aggregates over."""

    start: date
    end: date

    def label(self) -> str:
        if self.start == self.end:
            return format_iso_date(self.start)
        return f"{format_iso_date(self.start)} to {format_iso_date(self.end)}"


class ReportWindowStrategy(ABC):
    """Strategy Pattern: encapsulate how a named period maps to a date window."""

    @abstractmethod
    def window(self, *, today: date) -> DateWindow:
        raise NotImplementedError
