# services/journal_service.py
"""
Bitácora / calendario: registros agrupados por día.
Solo lectura; no participa en ningún cálculo de nómina.
"""
from __future__ import annotations

from collections import Counter
from datetime import date

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from services.snapshot_service import load_snapshot
from utils.datetime_utils import days_of_month, month_bounds


def day_journal(db: Session, day: date) -> dict:
    snap = load_snapshot(db)
    return {
        "date": day,
        "harvests": [h for h in snap.harvests if h.date == day],
        "work_tasks": [t for t in snap.work_tasks if t.date == day],
        "advances": [a for a in snap.advances if a.date == day],
        "rain_events": [r for r in snap.rain_events if r.date == day],
    }


def month_journal(db: Session, year: int, month: int) -> dict:
    """
    Resumen del mes: un renglón por día con conteos y bandera de lluvia.

    Raises:
        HTTPException 422: mes fuera de 1..12
    """
    try:
        first, last = month_bounds(year, month)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc))

    snap = load_snapshot(db)

    def in_month(d: date) -> bool:
        return first <= d <= last

    harvests = Counter(h.date for h in snap.harvests if in_month(h.date))
    tasks = Counter(t.date for t in snap.work_tasks if in_month(t.date))
    advances = Counter(a.date for a in snap.advances if in_month(a.date) and a.employee_id is not None)
    external = Counter(a.date for a in snap.advances if in_month(a.date) and a.employee_id is None)
    rainy = {r.date for r in snap.rain_events if in_month(r.date)}

    return {
        "year": year,
        "month": month,
        "days": [
            {
                "date": d,
                "harvest_count": harvests[d],
                "task_count": tasks[d],
                "advance_count": advances[d],
                "external_expense_count": external[d],
                "has_rain": d in rainy,
            }
            for d in days_of_month(year, month)
        ],
    }
