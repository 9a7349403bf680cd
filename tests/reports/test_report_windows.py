from datetime import date

from school_dashboard.core.enums import ReportPeriod
from school_dashboard.reports.factory import ReportWindowFactory
from school_dashboard.reports.windows.base import DateWindow
from school_dashboard.reports.windows.day_window import DayWindow
from school_dashboard.reports.windows.month_window import MonthWindow
from school_dashboard.reports.windows.week_window import WeekWindow


def test_factory_defaults_to_day():
    factory = ReportWindowFactory()
    assert isinstance(factory.for_period(None), DayWindow)
    assert isinstance(factory.for_period(ReportPeriod.DAY), DayWindow)
    assert isinstance(factory.for_period(ReportPeriod.WEEK), WeekWindow)
    assert isinstance(factory.for_period(ReportPeriod.MONTH), MonthWindow)


def test_day_window_is_today_only():
    today = date(2025, 3, 12)
    assert DayWindow().window(today=today) == DateWindow(today, today)


def test_week_window_starts_on_most_recent_sunday():
    # 2025-03-12 is a Wednesday
    w = WeekWindow().window(today=date(2025, 3, 12))
    assert w == DateWindow(date(2025, 3, 9), date(2025, 3, 12))


def test_week_window_on_sunday_is_single_day():
    w = WeekWindow().window(today=date(2025, 3, 9))
    assert w.start == w.end == date(2025, 3, 9)


def test_week_window_on_saturday_spans_seven_days():
    w = WeekWindow().window(today=date(2025, 3, 15))
    assert w.start == date(2025, 3, 9)


def test_month_window_starts_on_the_first():
    w = MonthWindow().window(today=date(2025, 3, 12))
    assert w == DateWindow(date(2025, 3, 1), date(2025, 3, 12))


def test_labels():
    assert DateWindow(date(2025, 3, 12), date(2025, 3, 12)).label() == "2025-03-12"
    assert DateWindow(date(2025, 3, 1), date(2025, 3, 12)).label() == "2025-03-01 to 2025-03-12"
