# models/market_settings.py
from __future__ import annotations

from datetime import datetime
from sqlalchemy import BigInteger, DateTime, ForeignKey, Numeric, Integer
from sqlalchemy.orm import Mapped, mapped_column

from utils.db import Base
from utils.datetime_utils import now_local

SETTINGS_ROW_ID = 1


class MarketSettings(Base):
    """
    Parámetros de mercado (fila única, id=1).

    Solo alimentan la tarifa *propuesta* de nuevas cosechas y la valoración
    actual del ingreso bruto; nunca modifican cosechas ya registradas.
    """
    __tablename__ = "market_settings"

    settings_id: Mapped[int] = mapped_column(Integer, primary_key=True, default=SETTINGS_ROW_ID)
    pay_rate_hevea: Mapped[int] = mapped_column(Integer, nullable=False)      # FCFA/kg fijo
    pay_rate_cacao: Mapped[int] = mapped_column(Integer, default=0, nullable=False)  # legado
    market_price_hevea: Mapped[int] = mapped_column(Integer, nullable=False)  # FCFA/kg
    market_price_cacao: Mapped[int] = mapped_column(Integer, nullable=False)  # FCFA/kg
    cacao_pay_ratio: Mapped[float] = mapped_column(Numeric(6, 4), nullable=False)      # (0, 1]

    updated_by: Mapped[int | None] = mapped_column(BigInteger, ForeignKey("app_user.user_id", ondelete="SET NULL"))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, onupdate=now_local,
                                                 nullable=False)
