from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Importance


@dataclass(frozen=True)
class Announcement:
    announcement_id: int
    title: str
    content: str
    start_date: datetime
    importance: Importance
    created_at: datetime
    end_date: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.announcement_id,
            "title": self.title,
            "content": self.content,
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat() if self.end_date else None,
            "importance": self.importance.value,
            "createdAt": self.created_at.isoformat(),
        }
