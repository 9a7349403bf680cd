from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

from ..core.enums import Severity


class ViolationCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    student_id: StrictInt = Field(alias="studentId")
    violation_type: StrictStr = Field(alias="violationType")
    description: StrictStr
    date: StrictStr
    lesson_period: Optional[StrictStr] = Field(default=None, alias="lessonPeriod")
    severity: Severity
