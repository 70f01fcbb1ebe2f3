# models/user.py
from __future__ import annotations

from datetime import datetime
from typing import Optional
from sqlalchemy import String, BigInteger, CHAR, DateTime, ForeignKey, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from utils.db import Base, BigIntPK
from utils.datetime_utils import now_local
from enums.roles import Role


class User(Base):
    """
    Cuenta de acceso con su perfil de rol.

    - role decide qué vistas y operaciones están permitidas (ver utils/permissions.py)
    - employee_id vincula una cuenta WORKER con su ficha de empleado
    """
    __tablename__ = "app_user"

    user_id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(40), unique=True, nullable=False)
    full_name: Mapped[str] = mapped_column(String(120), nullable=False)
    email: Mapped[str] = mapped_column(String(120), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[Role] = mapped_column(
        SAEnum(Role, native_enum=False, length=10, name="user_role_enum"),
        default=Role.WORKER,
        nullable=False,
    )
    status: Mapped[str] = mapped_column(CHAR(1), default="a", nullable=False)  # a/i
    employee_id: Mapped[int | None] = mapped_column(
        BigInteger,
        ForeignKey("employee.employee_id", ondelete="SET NULL"),
        nullable=True,
        unique=True,
    )
    last_login_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=False))
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, onupdate=now_local,
                                                 nullable=False)

    employee: Mapped[Optional["Employee"]] = relationship("Employee", foreign_keys=[employee_id])
