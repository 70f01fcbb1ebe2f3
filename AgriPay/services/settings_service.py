# services/settings_service.py
import logging

from sqlalchemy.orm import Session

from models.market_settings import MarketSettings, SETTINGS_ROW_ID
from schemas.market_settings import MarketSettingsIn
from services.ledger_service import proposed_cacao_rate
from services.snapshot_service import get_market_settings

logger = logging.getLogger(__name__)


def settings_to_out(current) -> dict:
    """Parámetros + tarifa propuesta de cacao para mostrar."""
    return {
        "pay_rate_hevea": int(current.pay_rate_hevea),
        "pay_rate_cacao": int(current.pay_rate_cacao),
        "market_price_hevea": int(current.market_price_hevea),
        "market_price_cacao": int(current.market_price_cacao),
        "cacao_pay_ratio": float(current.cacao_pay_ratio),
        "proposed_rate_cacao": proposed_cacao_rate(current),
    }


def read_settings(db: Session) -> dict:
    return settings_to_out(get_market_settings(db))


def upsert_settings(db: Session, payload: MarketSettingsIn, updated_by_user_id: int | None) -> dict:
    """
    Crear o reemplazar la fila única de parámetros.

    Solo afecta nuevas cosechas (tarifa propuesta) y la valoración actual
    del ingreso; las cosechas registradas conservan su pay_rate.
    """
    row = db.get(MarketSettings, SETTINGS_ROW_ID)
    if row is None:
        row = MarketSettings(settings_id=SETTINGS_ROW_ID)
        db.add(row)

    row.pay_rate_hevea = payload.pay_rate_hevea
    row.pay_rate_cacao = payload.pay_rate_cacao
    row.market_price_hevea = payload.market_price_hevea
    row.market_price_cacao = payload.market_price_cacao
    row.cacao_pay_ratio = payload.cacao_pay_ratio
    row.updated_by = updated_by_user_id

    db.commit()
    db.refresh(row)
    logger.info(
        "Parámetros actualizados por usuario %s: hevea=%s/%s cacao=%s ratio=%s",
        updated_by_user_id, row.pay_rate_hevea, row.market_price_hevea,
        row.market_price_cacao, row.cacao_pay_ratio,
    )
    return settings_to_out(row)
