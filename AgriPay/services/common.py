# services/common.py
from __future__ import annotations

from typing import TypeVar

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from enums.enums import EmployeeStatus
from models.employee import Employee

T = TypeVar("T")

# Paleta cíclica para fichas nuevas (empleados y prestatarios)
PRESET_COLORS = [
    "#2563eb", "#d97706", "#dc2626", "#7c3aed", "#db2777",
    "#0891b2", "#4f46e5", "#ea580c", "#9333ea", "#475569",
]


def pick_color(existing_count: int) -> str:
    return PRESET_COLORS[existing_count % len(PRESET_COLORS)]


def get_or_404(db: Session, model: type[T], obj_id: int, detail: str) -> T:
    obj = db.get(model, obj_id)
    if not obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
    return obj


def get_active_employee(db: Session, employee_id: int) -> Employee:
    """
    Empleado seleccionable para nuevos registros (cosecha/tarea).

    Raises:
        HTTPException 404: si no existe
        HTTPException 409: si renunció
    """
    emp = get_or_404(db, Employee, employee_id, "Empleado no encontrado")
    if emp.status != EmployeeStatus.ACTIVE:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="El empleado no está activo; no se le pueden registrar operaciones nuevas",
        )
    return emp
