# schemas/ledger.py
from __future__ import annotations

from datetime import date
from pydantic import BaseModel, Field

from enums.enums import ActivityKind, Crop, ExpenseCategory
from enums.roles import Role
from schemas.shared import ORMModel
from schemas.employee import EmployeeBalanceOut
from schemas.market_settings import MarketSettingsOut


class DueEmployeeOut(BaseModel):
    employee_id: int
    name: str
    crop: Crop
    color: str
    due_amount: int = Field(..., gt=0)


class ActivityItemOut(ORMModel):
    kind: ActivityKind
    record_id: int | None
    date: date
    label: str
    amount: int


class CropVolumeOut(BaseModel):
    crop: Crop
    weight_kg: float


class RecentExpenseOut(BaseModel):
    advance_id: int
    entrepreneur_id: int
    entrepreneur_name: str
    date: date
    amount: int
    category: ExpenseCategory


class DashboardOut(BaseModel):
    """
    Tablero según rol. Los campos no visibles para el rol se omiten:
    - WORKER: my_balance, my_activity
    - MANAGER: nómina (sin ingreso ni utilidad)
    - ADMIN: todo
    """
    role: Role
    my_balance: EmployeeBalanceOut | None = None
    my_activity: list[ActivityItemOut] | None = None

    gross_worker_pay: int | None = None
    already_paid_to_workers: int | None = None
    net_due_to_workers: int | None = None
    due_employees: list[DueEmployeeOut] | None = None
    recent_expenses: list[RecentExpenseOut] | None = None
    crop_volumes: list[CropVolumeOut] | None = None

    external_expenses: int | None = None
    gross_revenue: int | None = None
    profit: int | None = None
    settings: MarketSettingsOut | None = None
