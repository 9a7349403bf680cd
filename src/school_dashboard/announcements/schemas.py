from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from ..core.enums import Importance


class AnnouncementCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: StrictStr
    content: StrictStr
    start_date: StrictStr = Field(alias="startDate")
    # Required key, nullable value.
    end_date: Optional[StrictStr] = Field(alias="endDate")
    importance: Importance
