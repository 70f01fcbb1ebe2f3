# services/rain_service.py
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from models.rain_event import RainEvent
from schemas.rain_event import RainEventCreate
from services.common import get_or_404
from services.snapshot_service import list_rain_events
from utils.datetime_utils import month_bounds

logger = logging.getLogger(__name__)


def create_rain_event(db: Session, payload: RainEventCreate) -> RainEvent:
    rain = RainEvent(date=payload.date, intensity=payload.intensity, period=payload.period)
    db.add(rain)
    db.commit()
    db.refresh(rain)
    logger.info("Lluvia %s registrada el %s (%s)", rain.rain_event_id, rain.date, rain.intensity.value)
    return rain


def list_rain_events_filtered(db: Session, year: int | None = None, month: int | None = None) -> list[RainEvent]:
    if year is None or month is None:
        return list_rain_events(db)
    first, last = month_bounds(year, month)
    return (
        db.query(RainEvent)
        .filter(RainEvent.date >= first, RainEvent.date <= last)
        .order_by(RainEvent.date.desc(), RainEvent.rain_event_id.desc())
        .all()
    )


def delete_rain_event(db: Session, rain_event_id: int) -> None:
    rain = get_or_404(db, RainEvent, rain_event_id, "Registro de lluvia no encontrado")
    db.delete(rain)
    db.commit()
    logger.info("Lluvia %s eliminada", rain_event_id)
