# schemas/shared.py
from __future__ import annotations

from pydantic import BaseModel

# -------------------------------------------------------------------
# Base común para todos los schemas (Pydantic v2)
# -------------------------------------------------------------------
class ORMModel(BaseModel):
    """
    Modelo base para schemas.
    - from_attributes=True: permite construir el schema desde objetos ORM
      (y desde los dataclasses del ledger).
    - populate_by_name=True: habilita usar 'alias' si decides nombrar distinto.
    - str_strip_whitespace=True: limpia espacios en strings.
    """
    model_config = {
        "from_attributes": True,
        "populate_by_name": True,
        "str_strip_whitespace": True,
    }


__all__ = [
    "ORMModel",
]
