# services/employee_service.py
"""
Fichas de obreros: alta, edición, baja y operaciones de nómina
(saldo, actividad y liquidación).
"""
from __future__ import annotations

import logging

from fastapi import HTTPException, status
from sqlalchemy import func
from sqlalchemy.orm import Session

from enums.enums import EmployeeStatus, ExpenseCategory
from models.advance import Advance
from models.employee import Employee
from models.harvest import Harvest
from models.work_task import WorkTask
from schemas.employee import EmployeeCreate, EmployeeUpdate, SettlementIn
from services.common import get_or_404, pick_color
from services.ledger_service import (
    ActivityItem,
    compute_employee_balance,
    employee_activity,
    settlement_amount,
)
from services.snapshot_service import list_employees, list_harvests, list_work_tasks, list_advances
from config.settings import settings
from utils.datetime_utils import today_local

logger = logging.getLogger(__name__)

SETTLEMENT_NOTES = "Liquidación final del saldo"


# ==================== FICHAS ====================

def list_employees_filtered(db: Session, status_filter: EmployeeStatus | None = None) -> list[Employee]:
    if status_filter is None:
        return list_employees(db)
    return (
        db.query(Employee)
        .filter(Employee.status == status_filter)
        .order_by(Employee.name.asc(), Employee.employee_id.asc())
        .all()
    )


def get_employee(db: Session, employee_id: int) -> Employee:
    return get_or_404(db, Employee, employee_id, "Empleado no encontrado")


def create_employee(db: Session, payload: EmployeeCreate) -> Employee:
    """
    Alta de obrero.

    - status: ACTIVE
    - color: siguiente de la paleta según cantidad actual
    - icon_name: "user"
    """
    count = db.query(func.count(Employee.employee_id)).scalar() or 0
    emp = Employee(
        name=payload.name,
        crop=payload.crop,
        phone=payload.phone,
        notes=payload.notes,
        status=EmployeeStatus.ACTIVE,
        color=pick_color(count),
        icon_name="user",
    )
    db.add(emp)
    db.commit()
    db.refresh(emp)
    logger.info("Empleado %s creado (%s, %s)", emp.employee_id, emp.name, emp.crop.value)
    return emp


def update_employee(db: Session, employee_id: int, payload: EmployeeUpdate) -> Employee:
    """
    Actualizar ficha. Cambiar el cultivo solo afecta cosechas futuras:
    las registradas conservan su crop y pay_rate.
    """
    emp = get_employee(db, employee_id)

    data = payload.model_dump(exclude_unset=True)
    for field, value in data.items():
        if value is None and field in ("name", "crop", "color", "icon_name"):
            continue
        setattr(emp, field, value)

    db.add(emp)
    db.commit()
    db.refresh(emp)
    return emp


def update_employee_status(db: Session, employee_id: int, new_status: EmployeeStatus) -> Employee:
    emp = get_employee(db, employee_id)
    emp.status = new_status
    db.add(emp)
    db.commit()
    db.refresh(emp)
    logger.info("Empleado %s pasa a %s", employee_id, new_status.value)
    return emp


def delete_employee(db: Session, employee_id: int) -> None:
    """
    Eliminar ficha.

    Raises:
        HTTPException 409: si tiene cosechas, tareas o anticipos registrados
            (usar status RESIGNED para conservar el historial)
    """
    emp = get_employee(db, employee_id)

    referenced = (
        db.query(Harvest.harvest_id).filter(Harvest.employee_id == employee_id).first()
        or db.query(WorkTask.work_task_id).filter(WorkTask.employee_id == employee_id).first()
        or db.query(Advance.advance_id).filter(Advance.employee_id == employee_id).first()
    )
    if referenced:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="El empleado tiene registros asociados; márquelo como RESIGNED en lugar de eliminarlo",
        )

    db.delete(emp)
    db.commit()
    logger.info("Empleado %s eliminado", employee_id)


# ==================== NÓMINA ====================

def get_employee_balance(db: Session, employee_id: int) -> dict:
    emp = get_employee(db, employee_id)
    balance = compute_employee_balance(
        emp.employee_id, list_harvests(db), list_work_tasks(db), list_advances(db)
    )
    return {
        "employee_id": emp.employee_id,
        "name": emp.name,
        "balance": balance,
        "settled": balance <= 0,
        "settlement_amount": settlement_amount(balance),
    }


def get_employee_activity(db: Session, employee_id: int) -> list[ActivityItem]:
    emp = get_employee(db, employee_id)
    return employee_activity(
        emp.employee_id,
        list_harvests(db),
        list_work_tasks(db),
        list_advances(db),
        limit=settings.RECENT_ITEMS_LIMIT,
    )


def settle_employee(
        db: Session,
        employee_id: int,
        payload: SettlementIn,
        created_by_user_id: int | None,
) -> Advance:
    """
    Liquidar el saldo completo de un obrero.

    Registra un anticipo (categoría ADVANCE, fecha de hoy) por exactamente
    el saldo actual, dejándolo en cero.

    Raises:
        HTTPException 409: si el saldo ya está en cero o negativo
    """
    balance_info = get_employee_balance(db, employee_id)
    amount = balance_info["settlement_amount"]
    if amount <= 0:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="El saldo del empleado ya está liquidado",
        )

    advance = Advance(
        employee_id=employee_id,
        entrepreneur_id=None,
        date=today_local(),
        amount=amount,
        category=ExpenseCategory.ADVANCE,
        payment_method=payload.payment_method,
        notes=payload.notes or SETTLEMENT_NOTES,
        created_by=created_by_user_id,
    )
    db.add(advance)
    db.commit()
    db.refresh(advance)
    logger.info("Saldo de empleado %s liquidado: %s (gasto %s)", employee_id, amount, advance.advance_id)
    return advance
