# schemas/work_task.py
from __future__ import annotations

from datetime import date, datetime
from pydantic import BaseModel, Field, field_validator


class WorkTaskCreate(BaseModel):
    employee_id: int = Field(..., gt=0)
    date: date
    description: str = Field(..., min_length=1, max_length=255)
    amount: int = Field(..., gt=0)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        """Validar que la descripción no esté vacía después de strip"""
        if not v.strip():
            raise ValueError("La descripción no puede estar vacía")
        return v.strip()


class WorkTaskOut(BaseModel):
    work_task_id: int
    employee_id: int
    date: date
    description: str
    amount: int
    created_at: datetime

    class Config:
        from_attributes = True
