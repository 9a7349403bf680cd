from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local, parse_iso_datetime
from ..common.validators import optional_text, require_non_empty
from ..core.constants import RECENT_ANNOUNCEMENTS_LIMIT
from ..core.enums import DeleteOutcome, Importance
from ..core.exceptions import ValidationError
from .model import Announcement
from .repository import AnnouncementRepository

logger = logging.getLogger(__name__)


class AnnouncementService:
    def __init__(
        self,
        announcements: AnnouncementRepository,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._announcements = announcements
        self._clock = clock

    def publish(
        self,
        *,
        title: str,
        content: str,
        start_date: str,
        end_date: Optional[str],
        importance: Importance,
    ) -> Announcement:
        title = require_non_empty(title, "title")
        content = require_non_empty(content, "content")
        start = parse_iso_datetime(start_date, "startDate")
        end_s = optional_text(end_date)
        end = parse_iso_datetime(end_s, "endDate") if end_s else None
        importance = Importance(importance)

        if end is not None and _ends_before_start(start, end):
            raise ValidationError("endDate must not be before startDate", field="endDate")

        announcement = self._announcements.create(
            title=title,
            content=content,
            start_date=start,
            end_date=end,
            importance=importance,
            created_at=self._clock(),
        )
        logger.info("Announcement %s published (%s)", announcement.announcement_id, importance.value)
        return announcement

    def list_announcements(self) -> Sequence[Announcement]:
        """Newest first; equal timestamps keep id order."""
        # list.sort is stable with reverse=True, so insertion order breaks ties.
        items = sorted(self._announcements.list_all(), key=lambda a: a.announcement_id)
        items.sort(key=lambda a: a.created_at, reverse=True)
        return items

    def list_recent(self) -> Sequence[Announcement]:
        return self.list_announcements()[:RECENT_ANNOUNCEMENTS_LIMIT]

    def delete(self, announcement_id: int) -> DeleteOutcome:
        if self._announcements.delete(int(announcement_id)):
            logger.info("Announcement %s deleted", announcement_id)
            return DeleteOutcome.REMOVED
        logger.info("Announcement %s already absent", announcement_id)
        return DeleteOutcome.ALREADY_ABSENT


def _ends_before_start(start: datetime, end: datetime) -> bool:
    if (start.tzinfo is None) != (end.tzinfo is None):
        # One side carries an offset, the other does not: compare wall clocks.
        start = start.replace(tzinfo=None)
        end = end.replace(tzinfo=None)
    return end < start
