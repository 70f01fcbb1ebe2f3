# config/settings.py
"""
Configuración centralizada de la aplicación usando Pydantic Settings.
Las variables se cargan desde el archivo .env
"""

from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Configuración de la aplicación"""

    # Base de datos
    DATABASE_URL: str

    # JWT
    SECRET_KEY: str
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 720
    ALGORITHM: str = "HS256"

    # CORS
    CORS_ALLOW_ORIGINS: List[str] = ["http://localhost:5173"]

    # Zona horaria de la plantación (fechas de registro "hoy")
    APP_TIMEZONE: str = "Africa/Abidjan"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Parámetros de mercado por defecto (si aún no existe la fila de settings)
    DEFAULT_PAY_RATE_HEVEA: int = 75          # FCFA/kg fijo
    DEFAULT_PAY_RATE_CACAO: int = 0           # Legado, no se usa
    DEFAULT_MARKET_PRICE_HEVEA: int = 360     # FCFA/kg
    DEFAULT_MARKET_PRICE_CACAO: int = 2800    # FCFA/kg
    DEFAULT_CACAO_PAY_RATIO: float = 0.3333   # Parte del obrero sobre el precio de mercado

    # Listados "recientes" (actividad de empleado, gastos de prestatarios)
    RECENT_ITEMS_LIMIT: int = 10

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
