from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.constants import ACTIVITY_TIME_FORMAT
from ..core.enums import ActivityType


@dataclass(frozen=True)
class RecentActivity:
    """Read-model: one line of the dashboard activity feed."""

    activity_id: int
    activity_type: ActivityType
    description: str
    student_name: str
    created_at: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.activity_id,
            "type": self.activity_type.value,
            "description": self.description,
            "studentName": self.student_name,
            "time": self.created_at.strftime(ACTIVITY_TIME_FORMAT),
            "createdAt": self.created_at.isoformat(),
        }
