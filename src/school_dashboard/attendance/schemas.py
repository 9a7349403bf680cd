from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

from ..core.enums import AttendanceStatus


class AttendanceCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    student_id: StrictInt = Field(alias="studentId")
    date: StrictStr
    status: AttendanceStatus
    notes: Optional[StrictStr] = None
