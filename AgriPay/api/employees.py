# api/employees.py
from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from enums.enums import EmployeeStatus
from utils.db import get_db
from utils.dependencies import get_current_user
from utils.permissions import ensure_user_has_scope, ensure_can_view_employee, Scopes
from models.user import User
from schemas.employee import (
    EmployeeCreate,
    EmployeeUpdate,
    EmployeeStatusUpdate,
    EmployeeOut,
    EmployeeBalanceOut,
    SettlementIn,
)
from schemas.advance import AdvanceOut
from schemas.ledger import ActivityItemOut
from services.employee_service import (
    list_employees_filtered,
    get_employee,
    create_employee,
    update_employee,
    update_employee_status,
    delete_employee,
    get_employee_balance,
    get_employee_activity,
    settle_employee,
)

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=list[EmployeeOut], summary="Listar obreros")
def list_employees_endpoint(
        status: EmployeeStatus | None = Query(None, description="Filtrar por status"),
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    ensure_user_has_scope(current_user, Scopes.VER_REGISTROS)
    return list_employees_filtered(db, status)


@router.post(
    "",
    response_model=EmployeeOut,
    status_code=201,
    summary="Crear obrero",
    description="Se crea con status ACTIVE, color de la paleta e ícono `user`."
)
def create_employee_endpoint(
        payload: EmployeeCreate,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    ensure_user_has_scope(current_user, Scopes.EDITAR_PERSONAL)
    return create_employee(db, payload)


@router.get("/{employee_id}", response_model=EmployeeOut, summary="Obtener obrero")
def get_employee_endpoint(
        employee_id: int,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    ensure_can_view_employee(current_user, employee_id)
    return get_employee(db, employee_id)


@router.patch("/{employee_id}", response_model=EmployeeOut, summary="Actualizar obrero")
def update_employee_endpoint(
        employee_id: int,
        payload: EmployeeUpdate,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    ensure_user_has_scope(current_user, Scopes.EDITAR_PERSONAL)
    return update_employee(db, employee_id, payload)


@router.patch(
    "/{employee_id}/status",
    response_model=EmployeeOut,
    summary="Cambiar status",
    description="RESIGNED solo impide nuevos registros; el historial sigue contando en la nómina."
)
def update_employee_status_endpoint(
        employee_id: int,
        payload: EmployeeStatusUpdate,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    ensure_user_has_scope(current_user, Scopes.EDITAR_PERSONAL)
    return update_employee_status(db, employee_id, payload.status)


@router.delete("/{employee_id}", status_code=204, summary="Eliminar obrero")
def delete_employee_endpoint(
        employee_id: int,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    """409 si tiene registros asociados."""
    ensure_user_has_scope(current_user, Scopes.ELIMINAR_REGISTROS)
    delete_employee(db, employee_id)
    return Response(status_code=204)


@router.get(
    "/{employee_id}/balance",
    response_model=EmployeeBalanceOut,
    summary="Saldo del obrero",
    description=(
        "saldo = Σ(peso × tarifa) + Σ(tareas) − Σ(anticipos)\n\n"
        "Positivo: la plantación le debe. Cero o negativo: saldado."
    )
)
def get_employee_balance_endpoint(
        employee_id: int,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    ensure_can_view_employee(current_user, employee_id)
    return get_employee_balance(db, employee_id)


@router.get(
    "/{employee_id}/activity",
    response_model=list[ActivityItemOut],
    summary="Actividad reciente del obrero"
)
def get_employee_activity_endpoint(
        employee_id: int,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    ensure_can_view_employee(current_user, employee_id)
    return get_employee_activity(db, employee_id)


@router.post(
    "/{employee_id}/settle",
    response_model=AdvanceOut,
    status_code=201,
    summary="Liquidar saldo",
    description=(
        "Registra un anticipo por exactamente el saldo adeudado (deja el saldo en 0).\n\n"
        "409 si el saldo ya está en cero o negativo."
    )
)
def settle_employee_endpoint(
        employee_id: int,
        payload: SettlementIn | None = None,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    ensure_user_has_scope(current_user, Scopes.LIQUIDAR_SALDOS)
    return settle_employee(db, employee_id, payload or SettlementIn(), current_user.user_id)
