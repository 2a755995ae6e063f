"""
Modelo para el resultado del Überflutungsnachweis.
"""

import math

from pydantic import computed_field

from floodpilot.config import ComplianceStatus, DesignStorm
from floodpilot.models.base import IdentifiedModel
from floodpilot.models.kinematic import KinematicWaveResult


class AssessmentResult(IdentifiedModel):
    """Resultado completo de la evaluación DIN 1986-100 §14.9.2."""

    verification_required: bool
    justification: str
    total_area_m2: float
    effective_area_m2: float  # abflusswirksame Fläche
    impervious_fraction: float
    design_storm: DesignStorm
    rainfall_intensity_mmhr: float
    runoff_coefficient: float
    peak_discharge_rational_ls: float
    peak_discharge_kinematic_ls: float
    retention_volume_m3: float
    water_quality_volume_l: float
    kinematic_wave: KinematicWaveResult
    status: ComplianceStatus
    recommendations: tuple[str, ...]

    @computed_field
    @property
    def method_ratio(self) -> float:
        """Relación Q cinemático / Q racional (nan si Q racional no es positivo)."""
        if self.peak_discharge_rational_ls <= 0:
            return math.nan
        return self.peak_discharge_kinematic_ls / self.peak_discharge_rational_ls
