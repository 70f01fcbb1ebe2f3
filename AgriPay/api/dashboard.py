# api/dashboard.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from utils.db import get_db
from utils.dependencies import get_current_user
from models.user import User
from schemas.ledger import DashboardOut
from services.dashboard_service import build_dashboard

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get(
    "",
    response_model=DashboardOut,
    response_model_exclude_none=True,
    summary="Tablero",
    description=(
        "Vista según rol:\n\n"
        "- **WORKER**: su saldo y actividad reciente\n"
        "- **MANAGER**: nómina (pago bruto, pagado, adeudado, obreros con saldo, "
        "gastos recientes, volúmenes)\n"
        "- **ADMIN**: además gastos externos, ingreso bruto, utilidad y parámetros"
    )
)
def get_dashboard(
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    return build_dashboard(db, current_user)
