from enum import Enum

class Role(str, Enum):
    ADMIN = "ADMIN"        # Dueño: rentabilidad, parámetros, eliminaciones
    MANAGER = "MANAGER"    # Gerente: registra operaciones y ve la nómina, no la utilidad
    WORKER = "WORKER"      # Obrero: solo su propio saldo y actividad
