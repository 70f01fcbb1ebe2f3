# schemas/rain_event.py
from __future__ import annotations

from datetime import date, datetime
from pydantic import BaseModel

from enums.enums import RainIntensity, RainPeriod


class RainEventCreate(BaseModel):
    date: date
    intensity: RainIntensity
    period: RainPeriod


class RainEventOut(BaseModel):
    rain_event_id: int
    date: date
    intensity: RainIntensity
    period: RainPeriod
    created_at: datetime

    class Config:
        from_attributes = True
