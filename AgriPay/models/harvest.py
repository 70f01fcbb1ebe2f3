# models/harvest.py
from __future__ import annotations

import datetime as dt
from sqlalchemy import BigInteger, Date, DateTime, ForeignKey, Numeric, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column

from utils.db import Base, BigIntPK
from utils.datetime_utils import now_local
from enums.enums import Crop


class Harvest(Base):
    """
    Pesada diaria de un obrero.

    pay_rate se congela al momento del registro: un cambio posterior de
    parámetros de mercado nunca altera lo ya ganado.
    """
    __tablename__ = "harvest"

    harvest_id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    employee_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("employee.employee_id", ondelete="RESTRICT"), nullable=False, index=True
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    weight_kg: Mapped[float] = mapped_column(Numeric(12, 3), nullable=False)
    pay_rate: Mapped[float] = mapped_column(Numeric(12, 2), nullable=False)  # FCFA/kg
    crop: Mapped[Crop] = mapped_column(
        SAEnum(Crop, native_enum=False, length=10, name="crop_enum"),
        nullable=False,
    )

    created_by: Mapped[int | None] = mapped_column(BigInteger, ForeignKey("app_user.user_id", ondelete="SET NULL"))
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=False), default=now_local, nullable=False)
