# services/snapshot_service.py
"""
Lectura de colecciones completas para el ledger.

El ledger siempre recalcula desde un snapshot completo del estado actual:
sin totales incrementales, sin caché. Si la BD falla a mitad de la lectura
(OperationalError) la excepción se propaga y el manejador global responde
503; nunca se agrega sobre un snapshot parcial.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import SimpleNamespace

from sqlalchemy.orm import Session

from config.settings import settings as app_settings
from models.employee import Employee
from models.entrepreneur import Entrepreneur
from models.harvest import Harvest
from models.work_task import WorkTask
from models.advance import Advance
from models.rain_event import RainEvent
from models.market_settings import MarketSettings, SETTINGS_ROW_ID


@dataclass(frozen=True)
class LedgerSnapshot:
    employees: list[Employee]
    entrepreneurs: list[Entrepreneur]
    harvests: list[Harvest]
    work_tasks: list[WorkTask]
    advances: list[Advance]
    rain_events: list[RainEvent]
    settings: MarketSettings | SimpleNamespace


def default_market_settings() -> SimpleNamespace:
    """Parámetros iniciales cuando aún no existe la fila de settings."""
    return SimpleNamespace(
        pay_rate_hevea=app_settings.DEFAULT_PAY_RATE_HEVEA,
        pay_rate_cacao=app_settings.DEFAULT_PAY_RATE_CACAO,
        market_price_hevea=app_settings.DEFAULT_MARKET_PRICE_HEVEA,
        market_price_cacao=app_settings.DEFAULT_MARKET_PRICE_CACAO,
        cacao_pay_ratio=app_settings.DEFAULT_CACAO_PAY_RATIO,
    )


def get_market_settings(db: Session) -> MarketSettings | SimpleNamespace:
    return db.get(MarketSettings, SETTINGS_ROW_ID) or default_market_settings()


# ==================== list(collection) ====================

def list_employees(db: Session) -> list[Employee]:
    return db.query(Employee).order_by(Employee.name.asc(), Employee.employee_id.asc()).all()


def list_entrepreneurs(db: Session) -> list[Entrepreneur]:
    return db.query(Entrepreneur).order_by(Entrepreneur.name.asc(), Entrepreneur.entrepreneur_id.asc()).all()


def list_harvests(db: Session) -> list[Harvest]:
    return db.query(Harvest).order_by(Harvest.date.desc(), Harvest.harvest_id.desc()).all()


def list_work_tasks(db: Session) -> list[WorkTask]:
    return db.query(WorkTask).order_by(WorkTask.date.desc(), WorkTask.work_task_id.desc()).all()


def list_advances(db: Session) -> list[Advance]:
    return db.query(Advance).order_by(Advance.date.desc(), Advance.advance_id.desc()).all()


def list_rain_events(db: Session) -> list[RainEvent]:
    return db.query(RainEvent).order_by(RainEvent.date.desc(), RainEvent.rain_event_id.desc()).all()


def load_snapshot(db: Session) -> LedgerSnapshot:
    """Snapshot completo de las siete colecciones."""
    return LedgerSnapshot(
        employees=list_employees(db),
        entrepreneurs=list_entrepreneurs(db),
        harvests=list_harvests(db),
        work_tasks=list_work_tasks(db),
        advances=list_advances(db),
        rain_events=list_rain_events(db),
        settings=get_market_settings(db),
    )
