# schemas/entrepreneur.py
from __future__ import annotations

from datetime import datetime
from pydantic import BaseModel, Field


class EntrepreneurCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    specialty: str | None = Field(None, max_length=120)
    phone: str | None = Field(None, max_length=40)


class EntrepreneurUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=120)
    specialty: str | None = Field(None, max_length=120)
    phone: str | None = Field(None, max_length=40)
    color: str | None = Field(None, pattern=r"^#[0-9a-fA-F]{6}$")


class EntrepreneurOut(BaseModel):
    entrepreneur_id: int
    name: str
    specialty: str | None
    phone: str | None
    color: str
    created_at: datetime

    class Config:
        from_attributes = True
