# api/harvests.py
from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from utils.db import get_db
from utils.dependencies import get_current_user
from utils.permissions import ensure_user_has_scope, Scopes
from models.user import User
from schemas.harvest import HarvestCreate, HarvestOut, ProposedRateOut
from services.harvest_service import (
    proposed_rate_for_employee,
    create_harvest,
    list_harvests_filtered,
    delete_harvest,
)

router = APIRouter(prefix="/harvests", tags=["harvests"])


@router.get(
    "/proposed-rate",
    response_model=ProposedRateOut,
    summary="Tarifa propuesta",
    description=(
        "Sugerencia para una nueva pesada:\n\n"
        "- HEVEA: `pay_rate_hevea`\n"
        "- CACAO: `round(market_price_cacao × cacao_pay_ratio)`"
    )
)
def get_proposed_rate(
        employee_id: int = Query(..., gt=0),
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    ensure_user_has_scope(current_user, Scopes.CREAR_REGISTROS)
    return proposed_rate_for_employee(db, employee_id)


@router.get("", response_model=list[HarvestOut], summary="Listar cosechas")
def list_harvests_endpoint(
        employee_id: int | None = Query(None, description="Filtrar por obrero"),
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    ensure_user_has_scope(current_user, Scopes.VER_REGISTROS)
    return list_harvests_filtered(db, employee_id)


@router.post(
    "",
    response_model=HarvestOut,
    status_code=201,
    summary="Registrar cosecha",
    description=(
        "El cultivo se toma del obrero. Si no se envía `pay_rate` se congela la tarifa propuesta; "
        "una tarifa explícita se guarda tal cual.\n\n"
        "409 si el obrero no está ACTIVE."
    )
)
def create_harvest_endpoint(
        payload: HarvestCreate,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    ensure_user_has_scope(current_user, Scopes.CREAR_REGISTROS)
    return create_harvest(db, payload, current_user.user_id)


@router.delete("/{harvest_id}", status_code=204, summary="Eliminar cosecha")
def delete_harvest_endpoint(
        harvest_id: int,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    ensure_user_has_scope(current_user, Scopes.ELIMINAR_REGISTROS)
    delete_harvest(db, harvest_id)
    return Response(status_code=204)
