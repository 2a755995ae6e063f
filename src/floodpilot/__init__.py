"""
FloodPilot - Überflutungsnachweis nach DIN 1986-100 §14.9.2.

Calcula caudales pico por método racional y onda cinemática,
determina el estado del nachweis y genera reportes.
"""

__version__ = "1.0.0"

from floodpilot.config import (
    ComplianceStatus,
    DesignStorm,
    SiteInput,
    SoilType,
)
from floodpilot.core.assessment import perform_assessment
from floodpilot.models import AssessmentResult, KinematicWaveResult

__all__ = [
    "__version__",
    "ComplianceStatus",
    "DesignStorm",
    "SiteInput",
    "SoilType",
    "perform_assessment",
    "AssessmentResult",
    "KinematicWaveResult",
]
