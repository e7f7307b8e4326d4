from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class DailyLogCreate(BaseModel):
    content: str = Field(min_length=1)
    log_date: Optional[date] = None

    @field_validator("content", mode="before")
    @classmethod
    def _strip_content(cls, v):
        return v.strip() if isinstance(v, str) else v


class DailyLogRead(BaseModel):
    id: str
    log_date: date
    content: str
    created_at: datetime

    model_config = {"from_attributes": True}
