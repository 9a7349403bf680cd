from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class StudentCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: StrictStr
    class_name: StrictStr = Field(alias="className")
    section: StrictStr
