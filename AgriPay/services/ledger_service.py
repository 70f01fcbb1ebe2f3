# services/ledger_service.py
"""
Ledger de la plantación: cálculos puros de nómina y rentabilidad.

Todas las funciones son puras (sin I/O, sin sesión de BD) y deterministas.
Reciben colecciones completas (filas ORM u objetos con los mismos atributos)
y recalculan desde cero en cada llamada.

Convenciones:
- Los montos se acumulan en Decimal y se redondean UNA sola vez por agregado
  (mitad hacia +infinito: floor(x + 0.5)), nunca por línea.
- Los saldos son con signo: positivo = la plantación debe al obrero;
  cero o negativo = saldado.
- pay_rate de una cosecha está congelado en el registro; el precio de mercado
  se lee SIEMPRE de los parámetros actuales (valoración presente).
- Un número faltante o no finito dentro de un registro aporta cero y se
  reporta con WARNING; el ledger nunca lanza excepción por datos numéricos.
"""
import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation, ROUND_FLOOR
from typing import Any, Iterable, Sequence

from enums.enums import ActivityKind, Crop

logger = logging.getLogger(__name__)

_ZERO = Decimal("0")
_HALF = Decimal("0.5")

# Campo de parámetros que da el precio de mercado de cada cultivo
_MARKET_PRICE_FIELD = {
    Crop.HEVEA: "market_price_hevea",
    Crop.CACAO: "market_price_cacao",
}


# ==================== RESULTADOS ====================

@dataclass(frozen=True)
class PlantationSummary:
    gross_worker_pay: int
    already_paid_to_workers: int
    external_expenses: int
    gross_revenue: int
    profit: int
    net_due_to_workers: int


@dataclass(frozen=True)
class DueEmployee:
    employee: Any
    due_amount: int


@dataclass(frozen=True)
class ActivityItem:
    kind: ActivityKind
    record_id: int | None
    date: date
    label: str
    amount: int  # con signo: negativo para anticipos


# ==================== HELPERS ====================

def _dec(value: Any, field_name: str) -> Decimal:
    """Convierte a Decimal; None o no finito -> 0 con WARNING."""
    if value is None:
        logger.warning("Campo numérico '%s' ausente; se toma como 0", field_name)
        return _ZERO
    try:
        number = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        logger.warning("Campo numérico '%s' inválido (%r); se toma como 0", field_name, value)
        return _ZERO
    if not number.is_finite():
        logger.warning("Campo numérico '%s' no finito (%r); se toma como 0", field_name, value)
        return _ZERO
    return number


def round_currency(value: Decimal) -> int:
    """
    Redondeo a la unidad monetaria: floor(x + 0.5).

    Las mitades suben hacia +infinito también en negativos (-0.5 -> 0), así
    un saldo liquidado por su monto redondeado queda exactamente en cero.
    """
    return int((value + _HALF).to_integral_value(rounding=ROUND_FLOOR))


def harvest_earnings(harvest) -> Decimal:
    """weight × pay_rate de una cosecha, sin redondear."""
    return _dec(harvest.weight_kg, "weight_kg") * _dec(harvest.pay_rate, "pay_rate")


def _sum_amounts(records: Iterable) -> Decimal:
    return sum((_dec(r.amount, "amount") for r in records), _ZERO)


# ==================== PRECIOS Y TARIFAS ====================

def market_price_for(crop: Crop | str, settings) -> Decimal:
    """
    Precio de mercado vigente para un cultivo.

    Raises:
        ValueError: si el cultivo no existe en el catálogo
    """
    field_name = _MARKET_PRICE_FIELD[Crop(crop)]
    return _dec(getattr(settings, field_name), field_name)


def proposed_cacao_rate(settings) -> int:
    """round(market_price_cacao × cacao_pay_ratio)"""
    return round_currency(
        _dec(settings.market_price_cacao, "market_price_cacao")
        * _dec(settings.cacao_pay_ratio, "cacao_pay_ratio")
    )


def propose_harvest_rate(employee, settings) -> int:
    """
    Tarifa sugerida al iniciar una nueva pesada.

    - HEVEA: tarifa fija settings.pay_rate_hevea
    - CACAO: round(market_price_cacao × cacao_pay_ratio)

    Es solo una sugerencia: el operador puede sobrescribirla y lo que se
    persiste es el valor final.
    """
    crop = Crop(employee.crop)
    if crop == Crop.HEVEA:
        return round_currency(_dec(settings.pay_rate_hevea, "pay_rate_hevea"))
    if crop == Crop.CACAO:
        return proposed_cacao_rate(settings)
    raise ValueError(f"Cultivo sin regla de tarifa: {crop}")


# ==================== SALDOS POR OBRERO ====================

def compute_employee_balance(
        employee_id: int,
        harvests: Iterable,
        work_tasks: Iterable,
        advances: Iterable,
) -> int:
    """
    Saldo adeudado a un obrero.

    Fórmula:
    saldo = Σ(weight × pay_rate) + Σ(tareas) − Σ(anticipos al obrero)

    Los gastos de prestatarios no tienen employee_id y nunca se netean.
    Sin registros -> 0.
    """
    if employee_id is None:
        return 0

    earned = sum(
        (harvest_earnings(h) for h in harvests if h.employee_id == employee_id), _ZERO
    )
    tasks = _sum_amounts(t for t in work_tasks if t.employee_id == employee_id)
    paid = _sum_amounts(a for a in advances if a.employee_id == employee_id)

    return round_currency(earned + tasks - paid)


def settlement_amount(balance: int) -> int:
    """Monto a liquidar: el saldo si es positivo, 0 si ya está saldado."""
    return balance if balance > 0 else 0


def filter_due_employees(
        employees: Iterable,
        harvests: Sequence,
        work_tasks: Sequence,
        advances: Sequence,
) -> list[DueEmployee]:
    """
    Obreros con saldo > 0, en el orden del registro recibido
    (no se reordena por monto).
    """
    due = []
    for emp in employees:
        amount = compute_employee_balance(emp.employee_id, harvests, work_tasks, advances)
        if amount > 0:
            due.append(DueEmployee(employee=emp, due_amount=amount))
    return due


# ==================== RESUMEN DE PLANTACIÓN ====================

def compute_plantation_summary(
        harvests: Sequence,
        work_tasks: Sequence,
        advances: Sequence,
        settings,
) -> PlantationSummary:
    """
    Resumen financiero global.

    - gross_worker_pay = Σ(weight × pay_rate) + Σ(tareas)
    - already_paid_to_workers = Σ anticipos con employee_id
    - external_expenses = Σ gastos sin employee_id (prestatarios)
    - gross_revenue = Σ(weight × precio de mercado ACTUAL del cultivo)
    - profit = gross_revenue − gross_worker_pay − external_expenses

    Cada agregado se redondea por separado antes de combinarse.
    """
    gross_worker_pay = round_currency(
        sum((harvest_earnings(h) for h in harvests), _ZERO) + _sum_amounts(work_tasks)
    )
    already_paid = round_currency(_sum_amounts(a for a in advances if a.employee_id is not None))
    external = round_currency(_sum_amounts(a for a in advances if a.employee_id is None))

    revenue = _ZERO
    for h in harvests:
        try:
            price = market_price_for(h.crop, settings)
        except ValueError:
            logger.warning("Cosecha con cultivo desconocido %r; no suma al ingreso", h.crop)
            continue
        revenue += _dec(h.weight_kg, "weight_kg") * price
    gross_revenue = round_currency(revenue)

    return PlantationSummary(
        gross_worker_pay=gross_worker_pay,
        already_paid_to_workers=already_paid,
        external_expenses=external,
        gross_revenue=gross_revenue,
        profit=gross_revenue - gross_worker_pay - external,
        net_due_to_workers=gross_worker_pay - already_paid,
    )


# ==================== VISTAS AUXILIARES ====================

def crop_volumes(harvests: Iterable) -> dict[Crop, Decimal]:
    """Kilos cosechados por cultivo (todos los cultivos presentes, 0 si no hay)."""
    volumes = {crop: _ZERO for crop in Crop}
    for h in harvests:
        try:
            crop = Crop(h.crop)
        except ValueError:
            logger.warning("Cosecha con cultivo desconocido %r; se ignora en volúmenes", h.crop)
            continue
        volumes[crop] += _dec(h.weight_kg, "weight_kg")
    return volumes


def employee_activity(
        employee_id: int,
        harvests: Iterable,
        work_tasks: Iterable,
        advances: Iterable,
        limit: int = 10,
) -> list[ActivityItem]:
    """
    Últimos movimientos de un obrero (más reciente primero).

    Las ganancias de cada cosecha se redondean por línea solo para mostrar;
    el saldo se calcula aparte con compute_employee_balance.
    """
    items: list[ActivityItem] = []
    for h in harvests:
        if h.employee_id == employee_id:
            items.append(ActivityItem(
                kind=ActivityKind.HARVEST,
                record_id=getattr(h, "harvest_id", None),
                date=h.date,
                label=f"Cosecha {h.weight_kg} kg",
                amount=round_currency(harvest_earnings(h)),
            ))
    for a in advances:
        if a.employee_id == employee_id:
            items.append(ActivityItem(
                kind=ActivityKind.ADVANCE,
                record_id=getattr(a, "advance_id", None),
                date=a.date,
                label=a.notes or "Anticipo",
                amount=-round_currency(_dec(a.amount, "amount")),
            ))
    for t in work_tasks:
        if t.employee_id == employee_id:
            items.append(ActivityItem(
                kind=ActivityKind.TASK,
                record_id=getattr(t, "work_task_id", None),
                date=t.date,
                label=t.description,
                amount=round_currency(_dec(t.amount, "amount")),
            ))

    items.sort(key=lambda item: item.date, reverse=True)
    return items[:limit]


def recent_entrepreneur_expenses(advances: Iterable, limit: int = 10) -> list:
    """Gastos a prestatarios, más reciente primero."""
    external = [a for a in advances if a.entrepreneur_id is not None]
    external.sort(key=lambda a: a.date, reverse=True)
    return external[:limit]
