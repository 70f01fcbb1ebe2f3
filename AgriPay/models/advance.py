# models/advance.py
from __future__ import annotations

import datetime as dt
from sqlalchemy import BigInteger, Date, DateTime, ForeignKey, String, CheckConstraint, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column

from utils.db import Base, BigIntPK
from utils.datetime_utils import now_local
from enums.enums import ExpenseCategory, PaymentMethod
from schemas.advance import Beneficiary, EmployeeBeneficiary, EntrepreneurBeneficiary


class Advance(Base):
    """
    Gasto de la plantación (anticipo a obrero o pago a prestatario).

    Beneficiario polimórfico: exactamente uno de employee_id / entrepreneur_id.
    - Contra un empleado: descuenta su saldo
    - Contra un prestatario: gasto operativo, nunca se netea con un obrero
    """
    __tablename__ = "advance"
    __table_args__ = (
        CheckConstraint(
            "(employee_id IS NOT NULL AND entrepreneur_id IS NULL) OR "
            "(employee_id IS NULL AND entrepreneur_id IS NOT NULL)",
            name="advance_chk_single_beneficiary",
        ),
        CheckConstraint("amount > 0", name="advance_chk_amount_pos"),
    )

    advance_id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    employee_id: Mapped[int | None] = mapped_column(
        BigInteger, ForeignKey("employee.employee_id", ondelete="RESTRICT"), index=True
    )
    entrepreneur_id: Mapped[int | None] = mapped_column(
        BigInteger, ForeignKey("entrepreneur.entrepreneur_id", ondelete="RESTRICT"), index=True
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    amount: Mapped[int] = mapped_column(BigInteger, nullable=False)  # FCFA
    category: Mapped[ExpenseCategory] = mapped_column(
        SAEnum(ExpenseCategory, native_enum=False, length=20, name="expense_category_enum"),
        default=ExpenseCategory.ADVANCE,
        nullable=False,
    )
    payment_method: Mapped[PaymentMethod | None] = mapped_column(
        SAEnum(PaymentMethod, native_enum=False, length=10, name="payment_method_enum")
    )
    notes: Mapped[str | None] = mapped_column(String(255))

    created_by: Mapped[int | None] = mapped_column(BigInteger, ForeignKey("app_user.user_id", ondelete="SET NULL"))
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=False), default=now_local, nullable=False)

    @property
    def beneficiary(self) -> Beneficiary:
        if self.employee_id is not None:
            return EmployeeBeneficiary(employee_id=self.employee_id)
        return EntrepreneurBeneficiary(entrepreneur_id=self.entrepreneur_id)
