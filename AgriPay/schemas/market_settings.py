# schemas/market_settings.py
from __future__ import annotations

from pydantic import BaseModel, Field, condecimal


class MarketSettingsIn(BaseModel):
    """
    Upsert de parámetros (solo ADMIN).

    La UI limita cacao_pay_ratio a [0.1, 0.5]; aquí solo se exige (0, 1].
    """
    pay_rate_hevea: int = Field(..., gt=0, description="FCFA/kg fijo para hevea")
    pay_rate_cacao: int = Field(0, ge=0, description="Legado, no se usa")
    market_price_hevea: int = Field(..., ge=0, description="FCFA/kg")
    market_price_cacao: int = Field(..., ge=0, description="FCFA/kg")
    cacao_pay_ratio: condecimal(gt=0, le=1, max_digits=6, decimal_places=4)


class MarketSettingsOut(BaseModel):
    pay_rate_hevea: int
    pay_rate_cacao: int
    market_price_hevea: int
    market_price_cacao: int
    cacao_pay_ratio: float
    proposed_rate_cacao: int = Field(..., description="round(market_price_cacao × cacao_pay_ratio)")
