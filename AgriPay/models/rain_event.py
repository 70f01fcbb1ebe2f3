# models/rain_event.py
from __future__ import annotations

import datetime as dt
from sqlalchemy import Date, DateTime, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column

from utils.db import Base, BigIntPK
from utils.datetime_utils import now_local
from enums.enums import RainIntensity, RainPeriod


class RainEvent(Base):
    """Registro de lluvia. Informativo, no entra en ningún cálculo."""
    __tablename__ = "rain_event"

    rain_event_id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    intensity: Mapped[RainIntensity] = mapped_column(
        SAEnum(RainIntensity, native_enum=False, length=10, name="rain_intensity_enum"), nullable=False
    )
    period: Mapped[RainPeriod] = mapped_column(
        SAEnum(RainPeriod, native_enum=False, length=10, name="rain_period_enum"), nullable=False
    )

    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=False), default=now_local, nullable=False)
