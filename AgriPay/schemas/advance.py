# schemas/advance.py
from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Literal, Union
from pydantic import BaseModel, Field

from enums.enums import ExpenseCategory, PaymentMethod


# ============================================================================
# Beneficiario (variante etiquetada: empleado XOR prestatario)
# ============================================================================

class EmployeeBeneficiary(BaseModel):
    kind: Literal["employee"] = "employee"
    employee_id: int = Field(..., gt=0)


class EntrepreneurBeneficiary(BaseModel):
    kind: Literal["entrepreneur"] = "entrepreneur"
    entrepreneur_id: int = Field(..., gt=0)


Beneficiary = Annotated[
    Union[EmployeeBeneficiary, EntrepreneurBeneficiary],
    Field(discriminator="kind"),
]


# ============================================================================
# DTOs
# ============================================================================

class AdvanceCreate(BaseModel):
    """
    Registrar gasto.

    Ejemplo:
        {"beneficiary": {"kind": "employee", "employee_id": 3},
         "date": "2024-05-02", "amount": 5000, "category": "ADVANCE"}
    """
    beneficiary: Beneficiary
    date: date
    amount: int = Field(..., gt=0)
    category: ExpenseCategory = ExpenseCategory.MISC
    payment_method: PaymentMethod | None = None
    notes: str | None = Field(None, max_length=255)


class AdvanceOut(BaseModel):
    advance_id: int
    beneficiary: Beneficiary
    employee_id: int | None
    entrepreneur_id: int | None
    date: date
    amount: int
    category: ExpenseCategory
    payment_method: PaymentMethod | None
    notes: str | None
    created_at: datetime

    class Config:
        from_attributes = True
