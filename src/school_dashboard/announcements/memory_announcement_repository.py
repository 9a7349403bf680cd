from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import Importance
from ..storage.memory import MemoryTable
from .model import Announcement
from .repository import AnnouncementRepository


class MemoryAnnouncementRepository(AnnouncementRepository):
    def __init__(self, table: Optional[MemoryTable[Announcement]] = None):
        self._table = table or MemoryTable("announcements")

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
        return self._table.insert(
            lambda announcement_id: Announcement(
                announcement_id=announcement_id,
                title=title,
                content=content,
                start_date=start_date,
                end_date=end_date,
                importance=importance,
                created_at=created_at,
            )
        )

    def list_all(self) -> Sequence[Announcement]:
        return self._table.all()

    def delete(self, announcement_id: int) -> bool:
        return self._table.remove(announcement_id)
