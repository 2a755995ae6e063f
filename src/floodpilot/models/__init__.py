"""
Modelos de datos para FloodPilot.

Este módulo contiene los modelos Pydantic de resultados.
"""

from floodpilot.models.base import (
    IdentifiedModel,
    generate_id,
    generate_timestamp,
)
from floodpilot.models.kinematic import KinematicWaveResult
from floodpilot.models.assessment import AssessmentResult

__all__ = [
    "IdentifiedModel",
    "generate_id",
    "generate_timestamp",
    "KinematicWaveResult",
    "AssessmentResult",
]
