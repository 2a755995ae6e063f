"""
Clases base para modelos Pydantic.

Proporciona ID y timestamp para resultados inmutables.
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


def generate_id() -> str:
    """Genera un ID corto único (8 caracteres)."""
    return str(uuid.uuid4())[:8]


def generate_timestamp() -> str:
    """Genera timestamp ISO actual."""
    return datetime.now().isoformat()


class IdentifiedModel(BaseModel):
    """
    Modelo base inmutable con ID y timestamp de creación.

    Los resultados se calculan una vez y no se modifican después.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=generate_id)
    timestamp: str = Field(default_factory=generate_timestamp)
