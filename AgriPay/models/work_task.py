# models/work_task.py
from __future__ import annotations

import datetime as dt
from sqlalchemy import BigInteger, Date, DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from utils.db import Base, BigIntPK
from utils.datetime_utils import now_local


class WorkTask(Base):
    """Trabajo a destajo: pago plano, sin desglose de peso/tarifa."""
    __tablename__ = "work_task"

    work_task_id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    employee_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("employee.employee_id", ondelete="RESTRICT"), nullable=False, index=True
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    description: Mapped[str] = mapped_column(String(255), nullable=False)
    amount: Mapped[int] = mapped_column(BigInteger, nullable=False)  # FCFA

    created_by: Mapped[int | None] = mapped_column(BigInteger, ForeignKey("app_user.user_id", ondelete="SET NULL"))
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=False), default=now_local, nullable=False)
