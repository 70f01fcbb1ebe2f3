from enum import Enum

# =====================================================
# 👷 PERSONAL
# =====================================================
class EmployeeStatus(str, Enum):
    ACTIVE = "ACTIVE"      # Seleccionable para nuevas cosechas/tareas
    RESIGNED = "RESIGNED"  # Renunció; su historial se conserva


# =====================================================
# 🌳 CULTIVOS
# =====================================================
class Crop(str, Enum):
    HEVEA = "HEVEA"  # Caucho: tarifa fija por kg
    CACAO = "CACAO"  # Cacao: fracción del precio de mercado


# =====================================================
# 💸 GASTOS / ANTICIPOS
# =====================================================
class ExpenseCategory(str, Enum):
    ADVANCE = "ADVANCE"                    # Anticipo a un obrero (descuenta su saldo)
    FERTILIZER = "FERTILIZER"
    EQUIPMENT = "EQUIPMENT"
    TRANSPORT = "TRANSPORT"
    EXCEPTIONAL_WORK = "EXCEPTIONAL_WORK"
    MISC = "MISC"


class PaymentMethod(str, Enum):
    CASH = "CASH"
    TRANSFER = "TRANSFER"


class BeneficiaryKind(str, Enum):
    employee = "employee"
    entrepreneur = "entrepreneur"


# =====================================================
# 🌧️ LLUVIAS (solo informativo)
# =====================================================
class RainIntensity(str, Enum):
    LIGHT = "LIGHT"
    MODERATE = "MODERATE"
    HEAVY = "HEAVY"


class RainPeriod(str, Enum):
    MORNING = "MORNING"
    AFTERNOON = "AFTERNOON"
    NIGHT = "NIGHT"


# =====================================================
# 📒 BITÁCORA
# =====================================================
class ActivityKind(str, Enum):
    HARVEST = "HARVEST"
    TASK = "TASK"
    ADVANCE = "ADVANCE"
