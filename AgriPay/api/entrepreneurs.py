# api/entrepreneurs.py
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from utils.db import get_db
from utils.dependencies import get_current_user
from utils.permissions import ensure_user_has_scope, Scopes
from models.user import User
from schemas.entrepreneur import EntrepreneurCreate, EntrepreneurUpdate, EntrepreneurOut
from services.snapshot_service import list_entrepreneurs
from services.entrepreneur_service import (
    get_entrepreneur,
    create_entrepreneur,
    update_entrepreneur,
    delete_entrepreneur,
)

router = APIRouter(prefix="/entrepreneurs", tags=["entrepreneurs"])


@router.get("", response_model=list[EntrepreneurOut], summary="Listar prestatarios")
def list_entrepreneurs_endpoint(
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    ensure_user_has_scope(current_user, Scopes.VER_REGISTROS)
    return list_entrepreneurs(db)


@router.post("", response_model=EntrepreneurOut, status_code=201, summary="Crear prestatario")
def create_entrepreneur_endpoint(
        payload: EntrepreneurCreate,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    ensure_user_has_scope(current_user, Scopes.EDITAR_PERSONAL)
    return create_entrepreneur(db, payload)


@router.get("/{entrepreneur_id}", response_model=EntrepreneurOut)
def get_entrepreneur_endpoint(
        entrepreneur_id: int,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    ensure_user_has_scope(current_user, Scopes.VER_REGISTROS)
    return get_entrepreneur(db, entrepreneur_id)


@router.patch("/{entrepreneur_id}", response_model=EntrepreneurOut, summary="Actualizar prestatario")
def update_entrepreneur_endpoint(
        entrepreneur_id: int,
        payload: EntrepreneurUpdate,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    ensure_user_has_scope(current_user, Scopes.EDITAR_PERSONAL)
    return update_entrepreneur(db, entrepreneur_id, payload)


@router.delete("/{entrepreneur_id}", status_code=204, summary="Eliminar prestatario")
def delete_entrepreneur_endpoint(
        entrepreneur_id: int,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    ensure_user_has_scope(current_user, Scopes.ELIMINAR_REGISTROS)
    delete_entrepreneur(db, entrepreneur_id)
    return Response(status_code=204)
