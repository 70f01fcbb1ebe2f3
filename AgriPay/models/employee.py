# models/employee.py
from __future__ import annotations

from datetime import datetime
from sqlalchemy import String, DateTime, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column

from utils.db import Base, BigIntPK
from utils.datetime_utils import now_local
from enums.enums import Crop, EmployeeStatus


class Employee(Base):
    """
    Obrero de la plantación (sujeto de nómina).

    Un solo cultivo asignado por empleado. El status solo limita la selección
    para nuevos registros; el historial de un empleado RESIGNED sigue contando.
    """
    __tablename__ = "employee"

    employee_id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False, index=True)
    status: Mapped[EmployeeStatus] = mapped_column(
        SAEnum(EmployeeStatus, native_enum=False, length=10, name="employee_status_enum"),
        default=EmployeeStatus.ACTIVE,
        nullable=False,
    )
    crop: Mapped[Crop] = mapped_column(
        SAEnum(Crop, native_enum=False, length=10, name="crop_enum"),
        nullable=False,
    )
    color: Mapped[str] = mapped_column(String(9), nullable=False)
    icon_name: Mapped[str] = mapped_column(String(40), default="user", nullable=False)
    phone: Mapped[str | None] = mapped_column(String(40))
    notes: Mapped[str | None] = mapped_column(String(500))

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, onupdate=now_local,
                                                 nullable=False)
