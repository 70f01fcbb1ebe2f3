"""
Utilidades centralizadas para manejo de fechas y timestamps.
La zona horaria de referencia es la de la plantación (settings.APP_TIMEZONE).

Convención del sistema:
- Los registros operativos (cosechas, tareas, gastos, lluvias) guardan solo
  la fecha calendario (date), sin hora.
- Los timestamps de auditoría se persisten naive en hora local de la plantación.
"""
import calendar
from datetime import datetime, date
from zoneinfo import ZoneInfo

from config.settings import settings

LOCAL_TZ = ZoneInfo(settings.APP_TIMEZONE)


def now_local() -> datetime:
    """
    Retorna el datetime actual en la zona de la plantación (naive para DATETIME).
    """
    return datetime.now(LOCAL_TZ).replace(tzinfo=None, microsecond=0)


def today_local() -> date:
    """
    Retorna la fecha actual (date) en la zona de la plantación.
    """
    return datetime.now(LOCAL_TZ).date()


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """
    Primer y último día de un mes calendario.

    Raises:
        ValueError: si el mes no está en 1..12
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Mes inválido: {month}")
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def days_of_month(year: int, month: int) -> list[date]:
    """Todos los días del mes, en orden."""
    first, last = month_bounds(year, month)
    return [date(year, month, d) for d in range(first.day, last.day + 1)]
