# services/harvest_service.py
from __future__ import annotations

import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from models.employee import Employee
from models.harvest import Harvest
from schemas.harvest import HarvestCreate
from services.common import get_or_404, get_active_employee
from services.ledger_service import propose_harvest_rate
from services.snapshot_service import get_market_settings, list_harvests

logger = logging.getLogger(__name__)


def proposed_rate_for_employee(db: Session, employee_id: int) -> dict:
    """Tarifa sugerida para una nueva pesada del empleado."""
    emp = get_or_404(db, Employee, employee_id, "Empleado no encontrado")
    return {
        "employee_id": emp.employee_id,
        "crop": emp.crop,
        "proposed_rate": propose_harvest_rate(emp, get_market_settings(db)),
    }


def create_harvest(db: Session, payload: HarvestCreate, created_by_user_id: int | None) -> Harvest:
    """
    Registrar pesada.

    Regla:
    - crop se copia del empleado
    - pay_rate explícito se guarda tal cual; si no viene, se congela la
      tarifa propuesta vigente. Nunca se recalcula después.
    """
    emp = get_active_employee(db, payload.employee_id)

    if payload.pay_rate is not None:
        pay_rate = payload.pay_rate
    else:
        pay_rate = Decimal(propose_harvest_rate(emp, get_market_settings(db)))

    harvest = Harvest(
        employee_id=emp.employee_id,
        date=payload.date,
        weight_kg=payload.weight_kg,
        pay_rate=pay_rate,
        crop=emp.crop,
        created_by=created_by_user_id,
    )
    db.add(harvest)
    db.commit()
    db.refresh(harvest)
    logger.info(
        "Cosecha %s registrada: empleado=%s %s kg a %s/kg",
        harvest.harvest_id, emp.employee_id, harvest.weight_kg, harvest.pay_rate,
    )
    return harvest


def list_harvests_filtered(db: Session, employee_id: int | None = None) -> list[Harvest]:
    if employee_id is None:
        return list_harvests(db)
    return (
        db.query(Harvest)
        .filter(Harvest.employee_id == employee_id)
        .order_by(Harvest.date.desc(), Harvest.harvest_id.desc())
        .all()
    )


def delete_harvest(db: Session, harvest_id: int) -> None:
    harvest = get_or_404(db, Harvest, harvest_id, "Cosecha no encontrada")
    db.delete(harvest)
    db.commit()
    logger.info("Cosecha %s eliminada", harvest_id)
