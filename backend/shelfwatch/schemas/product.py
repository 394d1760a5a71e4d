"""Product schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class ProductResponse(BaseModel):
    id: int
    type: str
    name: str
    lead_time: int
    available: int
    expiry_date: datetime | None = None
    season_start_date: datetime | None = None
    season_end_date: datetime | None = None

    model_config = {"from_attributes": True}


class DelayNotificationRequest(BaseModel):
    lead_time: int = Field(ge=0)
