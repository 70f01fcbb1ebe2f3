# services/entrepreneur_service.py
from __future__ import annotations

import logging

from fastapi import HTTPException, status
from sqlalchemy import func
from sqlalchemy.orm import Session

from models.advance import Advance
from models.entrepreneur import Entrepreneur
from schemas.entrepreneur import EntrepreneurCreate, EntrepreneurUpdate
from services.common import get_or_404, pick_color

logger = logging.getLogger(__name__)


def get_entrepreneur(db: Session, entrepreneur_id: int) -> Entrepreneur:
    return get_or_404(db, Entrepreneur, entrepreneur_id, "Prestatario no encontrado")


def create_entrepreneur(db: Session, payload: EntrepreneurCreate) -> Entrepreneur:
    count = db.query(func.count(Entrepreneur.entrepreneur_id)).scalar() or 0
    ent = Entrepreneur(
        name=payload.name,
        specialty=payload.specialty,
        phone=payload.phone,
        color=pick_color(count),
    )
    db.add(ent)
    db.commit()
    db.refresh(ent)
    logger.info("Prestatario %s creado (%s)", ent.entrepreneur_id, ent.name)
    return ent


def update_entrepreneur(db: Session, entrepreneur_id: int, payload: EntrepreneurUpdate) -> Entrepreneur:
    ent = get_entrepreneur(db, entrepreneur_id)

    data = payload.model_dump(exclude_unset=True)
    for field, value in data.items():
        if value is None and field in ("name", "color"):
            continue
        setattr(ent, field, value)

    db.add(ent)
    db.commit()
    db.refresh(ent)
    return ent


def delete_entrepreneur(db: Session, entrepreneur_id: int) -> None:
    """
    Raises:
        HTTPException 409: si tiene gastos registrados
    """
    ent = get_entrepreneur(db, entrepreneur_id)
    if db.query(Advance.advance_id).filter(Advance.entrepreneur_id == entrepreneur_id).first():
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="El prestatario tiene gastos asociados",
        )
    db.delete(ent)
    db.commit()
    logger.info("Prestatario %s eliminado", entrepreneur_id)
