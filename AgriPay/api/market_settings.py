# api/market_settings.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from utils.db import get_db
from utils.dependencies import get_current_user
from utils.permissions import ensure_user_has_scope, Scopes
from models.user import User
from schemas.market_settings import MarketSettingsIn, MarketSettingsOut
from services.settings_service import read_settings, upsert_settings

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", response_model=MarketSettingsOut, summary="Parámetros de mercado")
def get_settings_endpoint(
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    """Cualquier usuario autenticado. Si no hay fila se devuelven los valores por defecto."""
    return read_settings(db)


@router.put(
    "",
    response_model=MarketSettingsOut,
    summary="Actualizar parámetros",
    description=(
        "Solo ADMIN. Afecta la tarifa propuesta de nuevas cosechas y la valoración "
        "actual del ingreso bruto; las cosechas registradas conservan su tarifa."
    )
)
def put_settings_endpoint(
        payload: MarketSettingsIn,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    ensure_user_has_scope(current_user, Scopes.EDITAR_PARAMETROS)
    return upsert_settings(db, payload, current_user.user_id)
