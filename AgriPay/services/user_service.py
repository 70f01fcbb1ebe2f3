# services/user_service.py
import logging

from fastapi import HTTPException, status
from sqlalchemy import or_
from sqlalchemy.orm import Session

from enums.roles import Role
from models.employee import Employee
from models.user import User
from schemas.user import UserCreate
from utils.security import hash_password

logger = logging.getLogger(__name__)


def list_users(db: Session, role: Role | None = None) -> list[User]:
    q = db.query(User)
    if role is not None:
        q = q.filter(User.role == role)
    return q.order_by(User.username.asc()).all()


def create_user(db: Session, payload: UserCreate) -> User:
    """
    Crear cuenta de acceso.

    Reglas:
    - username y email únicos
    - WORKER debe vincularse a una ficha de empleado existente (y libre)
    - ADMIN/MANAGER no se vinculan a ficha

    Raises:
        HTTPException 409: username/email duplicado o ficha ya vinculada
        HTTPException 422: vínculo de empleado inválido para el rol
    """
    exists = (
        db.query(User)
        .filter(or_(User.username == payload.username, User.email == payload.email))
        .first()
    )
    if exists:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Username o email ya registrado",
        )

    if payload.role == Role.WORKER:
        if payload.employee_id is None:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail="Una cuenta WORKER debe vincularse a un empleado",
            )
        if not db.get(Employee, payload.employee_id):
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail="Empleado no encontrado",
            )
        taken = db.query(User).filter(User.employee_id == payload.employee_id).first()
        if taken:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="El empleado ya tiene una cuenta vinculada",
            )
    elif payload.employee_id is not None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Solo las cuentas WORKER se vinculan a un empleado",
        )

    user = User(
        username=payload.username,
        full_name=payload.full_name,
        email=payload.email,
        password_hash=hash_password(payload.password),
        role=payload.role,
        employee_id=payload.employee_id,
        status="a",
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Usuario %s creado con rol %s", user.username, user.role.value)
    return user
