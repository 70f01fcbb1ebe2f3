# schemas/harvest.py
from __future__ import annotations
from datetime import date, datetime
from pydantic import BaseModel, Field, condecimal

from enums.enums import Crop


class HarvestCreate(BaseModel):
    """
    Nueva pesada.

    - crop se toma del empleado (no se acepta del cliente)
    - pay_rate opcional: si no viene, se usa la tarifa propuesta vigente
    """
    employee_id: int = Field(..., gt=0)
    date: date
    weight_kg: condecimal(gt=0, max_digits=12, decimal_places=3)
    pay_rate: condecimal(gt=0, max_digits=12, decimal_places=2) | None = None


class HarvestOut(BaseModel):
    harvest_id: int
    employee_id: int
    date: date
    weight_kg: float
    pay_rate: float
    crop: Crop
    created_at: datetime

    class Config:
        from_attributes = True


class ProposedRateOut(BaseModel):
    employee_id: int
    crop: Crop
    proposed_rate: int
