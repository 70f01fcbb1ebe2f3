# api/users.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from enums.roles import Role
from utils.db import get_db
from utils.dependencies import get_current_user
from utils.permissions import ensure_user_has_scope, Scopes
from models.user import User
from schemas.user import UserCreate, UserOut
from services.user_service import list_users, create_user

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserOut])
def get_users(
        role: Role | None = Query(None, description="Filtrar por rol"),
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    """Listar cuentas. Requiere gestionar_usuarios (ADMIN)."""
    ensure_user_has_scope(current_user, Scopes.GESTIONAR_USUARIOS)
    return list_users(db, role)


@router.post(
    "",
    response_model=UserOut,
    status_code=201,
    summary="Crear usuario",
    description=(
        "Crea una cuenta con rol.\n\n"
        "- `WORKER` debe indicar `employee_id` (su ficha de obrero)\n"
        "- `ADMIN` / `MANAGER` no se vinculan a ficha"
    )
)
def create_user_endpoint(
        payload: UserCreate,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    ensure_user_has_scope(current_user, Scopes.GESTIONAR_USUARIOS)
    return create_user(db, payload)
