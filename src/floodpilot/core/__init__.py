"""Módulos de cálculo hidrológico."""

from floodpilot.core.rainfall import (
    KOSTRA_BERLIN,
    KOSTRA_DURATION_MIN,
    get_rainfall_intensity,
    select_design_storm,
)

from floodpilot.core.coefficients import (
    RUNOFF_COEFFICIENTS,
    DIN_RUNOFF_COEFFICIENTS,
    SOIL_SCS_MAP,
    SurfaceCoefficient,
    get_soil_group,
    get_surface_coefficient,
    weighted_c,
    weighted_runoff_coefficient,
)

from floodpilot.core.runoff import (
    WQ_DESIGN_DEPTH_MM,
    rational_peak_flow,
    water_quality_volume,
    retention_volume_m3,
)

from floodpilot.core.kinematic import (
    MIN_SLOPE,
    effective_slope,
    kinematic_wave_solution,
)

from floodpilot.core.assessment import (
    AREA_THRESHOLD_M2,
    DISCLAIMER,
    determine_compliance_status,
    generate_recommendations,
    is_verification_required,
    perform_assessment,
    requirement_justification,
)

__all__ = [
    # Lluvia
    "KOSTRA_BERLIN",
    "KOSTRA_DURATION_MIN",
    "get_rainfall_intensity",
    "select_design_storm",
    # Coeficientes
    "RUNOFF_COEFFICIENTS",
    "DIN_RUNOFF_COEFFICIENTS",
    "SOIL_SCS_MAP",
    "SurfaceCoefficient",
    "get_soil_group",
    "get_surface_coefficient",
    "weighted_c",
    "weighted_runoff_coefficient",
    # Escorrentía
    "WQ_DESIGN_DEPTH_MM",
    "rational_peak_flow",
    "water_quality_volume",
    "retention_volume_m3",
    # Onda cinemática
    "MIN_SLOPE",
    "effective_slope",
    "kinematic_wave_solution",
    # Evaluación
    "AREA_THRESHOLD_M2",
    "DISCLAIMER",
    "determine_compliance_status",
    "generate_recommendations",
    "is_verification_required",
    "perform_assessment",
    "requirement_justification",
]
