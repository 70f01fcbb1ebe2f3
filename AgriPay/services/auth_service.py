# services/auth_service.py
"""
Servicio de autenticación.
Solo maneja login y generación de tokens JWT.
"""
import logging

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from utils.security import verify_password, create_access_token
from utils.datetime_utils import now_local
from models.user import User

logger = logging.getLogger(__name__)


def authenticate_user(db: Session, username: str, password: str) -> User:
    """
    Autenticar usuario con username y password.

    Raises:
        HTTPException 401: Si credenciales inválidas o usuario inactivo
    """
    user = db.query(User).filter(User.username == username).first()

    if not user or user.status != "a" or not verify_password(password, user.password_hash):
        logger.warning("Intento de login fallido para '%s'", username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Credenciales inválidas",
        )

    user.last_login_at = now_local()
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Login de %s (%s)", user.username, user.role.value)

    return user


def issue_access_token(user: User) -> str:
    return create_access_token(subject=user.user_id, extra_claims={"role": user.role.value})
