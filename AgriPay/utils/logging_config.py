"""
Configuración de logging de la aplicación.

Un solo handler de consola en el logger raíz; cada módulo usa
logging.getLogger(__name__).
"""
import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def configure_logging(level: str = "INFO") -> None:
    """
    Configurar el logger raíz (idempotente).

    Args:
        level: Nivel mínimo ("DEBUG", "INFO", "WARNING", ...)
    """
    global _configured
    root = logging.getLogger()
    root.setLevel(level.upper())

    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
    _configured = True
