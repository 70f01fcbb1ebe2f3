# services/dashboard_service.py
"""
Tablero según rol.

Visibilidad por scope:
- ver_mi_saldo (sin ver_nomina): saldo y actividad de la ficha vinculada
- ver_nomina: pago bruto, pagado, adeudado, obreros con saldo, gastos
  recientes a prestatarios y volúmenes por cultivo
- ver_rentabilidad: además gastos externos, ingreso bruto, utilidad y parámetros
"""
from __future__ import annotations

from sqlalchemy.orm import Session

from config.settings import settings as app_settings
from models.user import User
from services.ledger_service import (
    compute_employee_balance,
    compute_plantation_summary,
    crop_volumes,
    employee_activity,
    filter_due_employees,
    recent_entrepreneur_expenses,
    settlement_amount,
)
from services.settings_service import settings_to_out
from services.snapshot_service import LedgerSnapshot, load_snapshot
from utils.permissions import Scopes, user_has_scope


def _worker_view(user: User, snap: LedgerSnapshot) -> dict:
    emp = next((e for e in snap.employees if e.employee_id == user.employee_id), None)
    if emp is None:
        return {"my_balance": None, "my_activity": []}

    balance = compute_employee_balance(emp.employee_id, snap.harvests, snap.work_tasks, snap.advances)
    return {
        "my_balance": {
            "employee_id": emp.employee_id,
            "name": emp.name,
            "balance": balance,
            "settled": balance <= 0,
            "settlement_amount": settlement_amount(balance),
        },
        "my_activity": employee_activity(
            emp.employee_id, snap.harvests, snap.work_tasks, snap.advances,
            limit=app_settings.RECENT_ITEMS_LIMIT,
        ),
    }


def _payroll_view(snap: LedgerSnapshot, summary) -> dict:
    names = {e.entrepreneur_id: e.name for e in snap.entrepreneurs}
    recent = recent_entrepreneur_expenses(snap.advances, limit=app_settings.RECENT_ITEMS_LIMIT)

    return {
        "gross_worker_pay": summary.gross_worker_pay,
        "already_paid_to_workers": summary.already_paid_to_workers,
        "net_due_to_workers": summary.net_due_to_workers,
        "due_employees": [
            {
                "employee_id": d.employee.employee_id,
                "name": d.employee.name,
                "crop": d.employee.crop,
                "color": d.employee.color,
                "due_amount": d.due_amount,
            }
            for d in filter_due_employees(snap.employees, snap.harvests, snap.work_tasks, snap.advances)
        ],
        "recent_expenses": [
            {
                "advance_id": a.advance_id,
                "entrepreneur_id": a.entrepreneur_id,
                "entrepreneur_name": names.get(a.entrepreneur_id, "?"),
                "date": a.date,
                "amount": a.amount,
                "category": a.category,
            }
            for a in recent
        ],
        "crop_volumes": [
            {"crop": crop, "weight_kg": float(weight)}
            for crop, weight in crop_volumes(snap.harvests).items()
        ],
    }


def build_dashboard(db: Session, user: User) -> dict:
    snap = load_snapshot(db)
    data: dict = {"role": user.role}

    if not user_has_scope(user, Scopes.VER_NOMINA):
        if user_has_scope(user, Scopes.VER_MI_SALDO):
            data.update(_worker_view(user, snap))
        return data

    summary = compute_plantation_summary(snap.harvests, snap.work_tasks, snap.advances, snap.settings)
    data.update(_payroll_view(snap, summary))

    if user_has_scope(user, Scopes.VER_RENTABILIDAD):
        data.update({
            "external_expenses": summary.external_expenses,
            "gross_revenue": summary.gross_revenue,
            "profit": summary.profit,
            "settings": settings_to_out(snap.settings),
        })
    return data
