from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import Importance
from .model import Announcement


class AnnouncementRepository(Protocol):
    def create(
        self,
        *,
        title: str,
        content: str,
        start_date: datetime,
        end_date: Optional[datetime],
        importance: Importance,
        created_at: datetime,
    ) -> Announcement:
        raise NotImplementedError

    def list_all(self) -> Sequence[Announcement]:
        """All announcements in insertion (id) order."""

        raise NotImplementedError

    def delete(self, announcement_id: int) -> bool:
        raise NotImplementedError
