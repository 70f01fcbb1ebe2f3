# api/advances.py
from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from enums.enums import BeneficiaryKind
from utils.db import get_db
from utils.dependencies import get_current_user
from utils.permissions import ensure_user_has_scope, Scopes
from models.user import User
from schemas.advance import AdvanceCreate, AdvanceOut
from services.advance_service import create_advance, list_advances_filtered, delete_advance

router = APIRouter(prefix="/advances", tags=["advances"])


@router.get("", response_model=list[AdvanceOut], summary="Listar gastos y anticipos")
def list_advances_endpoint(
        kind: BeneficiaryKind | None = Query(None, description="employee | entrepreneur"),
        beneficiary_id: int | None = Query(None, description="Id del beneficiario (requiere kind)"),
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    ensure_user_has_scope(current_user, Scopes.VER_REGISTROS)
    return list_advances_filtered(db, kind, beneficiary_id)


@router.post(
    "",
    response_model=AdvanceOut,
    status_code=201,
    summary="Registrar gasto",
    description=(
        "Beneficiario etiquetado por `kind`:\n\n"
        "- `employee`: anticipo, descuenta del saldo del obrero\n"
        "- `entrepreneur`: gasto externo, nunca se netea con la nómina\n\n"
        "422 si el beneficiario no existe."
    )
)
def create_advance_endpoint(
        payload: AdvanceCreate,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    ensure_user_has_scope(current_user, Scopes.CREAR_REGISTROS)
    return create_advance(db, payload, current_user.user_id)


@router.delete("/{advance_id}", status_code=204, summary="Eliminar gasto")
def delete_advance_endpoint(
        advance_id: int,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    ensure_user_has_scope(current_user, Scopes.ELIMINAR_REGISTROS)
    delete_advance(db, advance_id)
    return Response(status_code=204)
