# services/advance_service.py
"""
Gastos y anticipos.

El beneficiario llega como variante etiquetada (empleado XOR prestatario) y
debe resolver a una ficha existente; un beneficiario inexistente se rechaza
con 422 antes de tocar la colección.
"""
from __future__ import annotations

import logging

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from enums.enums import BeneficiaryKind
from models.advance import Advance
from models.employee import Employee
from models.entrepreneur import Entrepreneur
from schemas.advance import AdvanceCreate, EmployeeBeneficiary
from services.common import get_or_404
from services.snapshot_service import list_advances

logger = logging.getLogger(__name__)


def create_advance(db: Session, payload: AdvanceCreate, created_by_user_id: int | None) -> Advance:
    beneficiary = payload.beneficiary

    if isinstance(beneficiary, EmployeeBeneficiary):
        if not db.get(Employee, beneficiary.employee_id):
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail="El beneficiario no corresponde a ningún empleado",
            )
        employee_id, entrepreneur_id = beneficiary.employee_id, None
    else:
        if not db.get(Entrepreneur, beneficiary.entrepreneur_id):
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail="El beneficiario no corresponde a ningún prestatario",
            )
        employee_id, entrepreneur_id = None, beneficiary.entrepreneur_id

    advance = Advance(
        employee_id=employee_id,
        entrepreneur_id=entrepreneur_id,
        date=payload.date,
        amount=payload.amount,
        category=payload.category,
        payment_method=payload.payment_method,
        notes=payload.notes,
        created_by=created_by_user_id,
    )
    db.add(advance)
    db.commit()
    db.refresh(advance)
    logger.info(
        "Gasto %s registrado: %s=%s monto=%s categoria=%s",
        advance.advance_id, beneficiary.kind, employee_id or entrepreneur_id,
        advance.amount, advance.category.value,
    )
    return advance


def list_advances_filtered(
        db: Session,
        kind: BeneficiaryKind | None = None,
        beneficiary_id: int | None = None,
) -> list[Advance]:
    """
    Listar gastos, opcionalmente por tipo de beneficiario (y su id).
    """
    if kind is None:
        return list_advances(db)

    q = db.query(Advance)
    if kind == BeneficiaryKind.employee:
        q = q.filter(Advance.employee_id.isnot(None))
        if beneficiary_id is not None:
            q = q.filter(Advance.employee_id == beneficiary_id)
    else:
        q = q.filter(Advance.entrepreneur_id.isnot(None))
        if beneficiary_id is not None:
            q = q.filter(Advance.entrepreneur_id == beneficiary_id)
    return q.order_by(Advance.date.desc(), Advance.advance_id.desc()).all()


def delete_advance(db: Session, advance_id: int) -> None:
    advance = get_or_404(db, Advance, advance_id, "Gasto no encontrado")
    db.delete(advance)
    db.commit()
    logger.info("Gasto %s eliminado", advance_id)
