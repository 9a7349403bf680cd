"""Shared limits, default labels and formats."""

RECENT_ANNOUNCEMENTS_LIMIT = 3
DEFAULT_RECENT_ACTIVITY_LIMIT = 10
DEFAULT_CLASS_NAME = "الثالث"
DEFAULT_SECTION = "أ"
ISO_DATE_FORMAT = "%Y-%m-%d"
ACTIVITY_TIME_FORMAT = "%H:%M"
