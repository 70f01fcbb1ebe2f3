# schemas/employee.py
from __future__ import annotations

from datetime import datetime
from pydantic import BaseModel, Field, field_validator

from enums.enums import Crop, EmployeeStatus, PaymentMethod


class EmployeeCreate(BaseModel):
    """
    Alta de obrero.

    status (ACTIVE), color (paleta) e icon_name ("user") los asigna el servicio.
    """
    name: str = Field(..., min_length=1, max_length=120)
    crop: Crop
    phone: str | None = Field(None, max_length=40)
    notes: str | None = Field(None, max_length=500)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("El nombre no puede estar vacío")
        return v.strip()


class EmployeeUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=120)
    crop: Crop | None = None
    phone: str | None = Field(None, max_length=40)
    notes: str | None = Field(None, max_length=500)
    color: str | None = Field(None, pattern=r"^#[0-9a-fA-F]{6}$")
    icon_name: str | None = Field(None, min_length=1, max_length=40)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        if v is None:
            return v
        if not v.strip():
            raise ValueError("El nombre no puede estar vacío")
        return v.strip()


class EmployeeStatusUpdate(BaseModel):
    status: EmployeeStatus


class EmployeeOut(BaseModel):
    employee_id: int
    name: str
    status: EmployeeStatus
    crop: Crop
    color: str
    icon_name: str
    phone: str | None
    notes: str | None
    created_at: datetime

    class Config:
        from_attributes = True


class EmployeeBalanceOut(BaseModel):
    employee_id: int
    name: str
    balance: int = Field(..., description="Positivo: la plantación le debe al obrero")
    settled: bool = Field(..., description="True si balance <= 0")
    settlement_amount: int = Field(..., ge=0)


class SettlementIn(BaseModel):
    payment_method: PaymentMethod | None = None
    notes: str | None = Field(None, max_length=255)
