# api/rain_events.py
from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from utils.db import get_db
from utils.dependencies import get_current_user
from utils.permissions import ensure_user_has_scope, Scopes
from models.user import User
from schemas.rain_event import RainEventCreate, RainEventOut
from services.rain_service import create_rain_event, list_rain_events_filtered, delete_rain_event

router = APIRouter(prefix="/rain_events", tags=["rain_events"])


@router.get("", response_model=list[RainEventOut], summary="Listar lluvias")
def list_rain_events_endpoint(
        year: int | None = Query(None, ge=2000, le=2100),
        month: int | None = Query(None, ge=1, le=12),
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    ensure_user_has_scope(current_user, Scopes.VER_REGISTROS)
    return list_rain_events_filtered(db, year, month)


@router.post("", response_model=RainEventOut, status_code=201, summary="Registrar lluvia")
def create_rain_event_endpoint(
        payload: RainEventCreate,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    ensure_user_has_scope(current_user, Scopes.CREAR_REGISTROS)
    return create_rain_event(db, payload)


@router.delete("/{rain_event_id}", status_code=204, summary="Eliminar lluvia")
def delete_rain_event_endpoint(
        rain_event_id: int,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    ensure_user_has_scope(current_user, Scopes.ELIMINAR_REGISTROS)
    delete_rain_event(db, rain_event_id)
    return Response(status_code=204)
