# api/auth.py
"""
API de autenticación.
Endpoints: login, me.
"""
from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from utils.db import get_db
from utils.dependencies import get_current_user
from schemas.user import Token, UserOut
from services.auth_service import authenticate_user, issue_access_token
from models.user import User

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post(
    "/token",
    response_model=Token,
    summary="Login (OAuth2)",
    description=(
        "Autenticación usando OAuth2 Password Flow.\n\n"
        "**Formato:** `application/x-www-form-urlencoded` (estándar OAuth2)\n\n"
        "**Response:**\n"
        "- `access_token`: Token JWT para usar en header `Authorization: Bearer <token>`\n"
        "- `token_type`: Siempre `bearer`"
    )
)
def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db)
):
    """Login con username y password"""
    user = authenticate_user(db, form_data.username, form_data.password)
    token = issue_access_token(user)
    return {"access_token": token, "token_type": "bearer"}


@router.get(
    "/me",
    response_model=UserOut,
    summary="Obtener usuario actual",
    description="Retorna el perfil del usuario autenticado: rol y empleado vinculado."
)
def me(current_user: User = Depends(get_current_user)):
    """Obtener información del usuario autenticado"""
    return current_user
