"""
Evaluación del Überflutungsnachweis según DIN 1986-100 §14.9.2.

Combina dos decisiones independientes:
- umbral de 800 m² de superficie abflusswirksam (nachweis requerido)
- Versiegelungsgrad >= 70 % (Bemessungsregen T=100a en vez de T=30a)

y compara el método racional con la onda cinemática para determinar
el estado del nachweis y las recomendaciones.
"""

import logging
import math

from floodpilot.config import ComplianceStatus, SiteInput
from floodpilot.core.coefficients import weighted_runoff_coefficient
from floodpilot.core.kinematic import effective_slope, kinematic_wave_solution
from floodpilot.core.rainfall import (
    HIGH_IMPERVIOUS_FRACTION,
    KOSTRA_DURATION_MIN,
    get_rainfall_intensity,
    select_design_storm,
)
from floodpilot.core.runoff import (
    WQ_DESIGN_DEPTH_MM,
    rational_peak_flow,
    retention_volume_m3,
    water_quality_volume,
)
from floodpilot.models import AssessmentResult

logger = logging.getLogger(__name__)


# Umbral de superficie abflusswirksam (m²), exclusivo
AREA_THRESHOLD_M2 = 800.0

# Rango aceptable de Q cinemático / Q racional
RATIO_MIN = 0.3
RATIO_MAX = 3.0

# Límites de Rückhaltevolumen (m³)
RETENTION_PASS_M3 = 50.0
RETENTION_FAIL_M3 = 200.0

# Umbrales de las recomendaciones
VERY_HIGH_IMPERVIOUS_FRACTION = 0.8
LARGE_SITE_AREA_M2 = 2000.0

DISCLAIMER = (
    "Hinweis: Dieser Entwurf ersetzt nicht die Prüfung und Freigabe durch "
    "einen Bauvorlageberechtigten Ingenieur."
)


def format_area(value: float) -> str:
    """Formatea un área sin decimales superfluos (1400 -> '1400', 800.5 -> '800.5')."""
    return f"{value:.2f}".rstrip("0").rstrip(".")


def is_verification_required(effective_area_m2: float) -> bool:
    """True si la superficie abflusswirksam supera 800 m²."""
    return effective_area_m2 > AREA_THRESHOLD_M2


def requirement_justification(effective_area_m2: float) -> str:
    """Texto de Begründung para el requisito del §14.9.2."""
    area = format_area(effective_area_m2)
    if is_verification_required(effective_area_m2):
        return (
            f"Abflusswirksame Fläche ({area} m²) überschreitet 800 m² "
            "Schwellenwert nach DIN 1986-100 §14.9.2"
        )
    return (
        f"Abflusswirksame Fläche ({area} m²) unter 800 m² — "
        "vereinfachtes Verfahren ausreichend"
    )


def determine_compliance_status(
    required: bool,
    q_rational_ls: float,
    q_kinematic_ls: float,
    retention_m3: float,
) -> ComplianceStatus:
    """
    Árbol de decisión del estado del nachweis.

    - Sin requisito: BESTANDEN.
    - Métodos divergentes (ratio fuera de [0.3, 3.0]): PRUEFUNG_ERFORDERLICH.
    - Rückhaltevolumen < 50 m³: BESTANDEN; < 200 m³: PRUEFUNG_ERFORDERLICH;
      resto: NICHT_BESTANDEN.

    Un Q racional no positivo o no finito no permite comparar los
    métodos y se trata como PRUEFUNG_ERFORDERLICH.
    """
    if not required:
        return ComplianceStatus.PASSED

    if not math.isfinite(q_rational_ls) or q_rational_ls <= 0:
        return ComplianceStatus.REVIEW_REQUIRED

    ratio = q_kinematic_ls / q_rational_ls
    if not math.isfinite(ratio) or ratio < RATIO_MIN or ratio > RATIO_MAX:
        return ComplianceStatus.REVIEW_REQUIRED

    if retention_m3 < RETENTION_PASS_M3:
        return ComplianceStatus.PASSED
    if retention_m3 < RETENTION_FAIL_M3:
        return ComplianceStatus.REVIEW_REQUIRED
    return ComplianceStatus.FAILED


def generate_recommendations(
    site: SiteInput,
    impervious_fraction: float,
    status: ComplianceStatus,
) -> list[str]:
    """
    Lista ordenada de recomendaciones.

    El descargo de responsabilidad va siempre al final.
    """
    recs = []

    if impervious_fraction > VERY_HIGH_IMPERVIOUS_FRACTION:
        recs.append(
            "Hoher Versiegelungsgrad (>80%). Entsiegelung oder Retentionsdach empfohlen."
        )

    if impervious_fraction >= HIGH_IMPERVIOUS_FRACTION:
        recs.append(
            "T=100a Bemessungsregen angesetzt (Versiegelungsgrad ≥70%). "
            "Intensive Dachbegrünung kann den Abflussbeiwert senken."
        )

    if site.total_area_m2 > LARGE_SITE_AREA_M2:
        recs.append(
            "Bei Grundstücken >2.000 m² ist eine detaillierte "
            "Überflutungssimulation (2D) empfohlen."
        )

    if status == ComplianceStatus.REVIEW_REQUIRED:
        recs.append(
            "Analytische und PINN-Methode zeigen Divergenz. Manuelle Prüfung "
            "durch Bauvorlageberechtigten erforderlich."
        )

    if status == ComplianceStatus.FAILED:
        recs.append(
            "Erforderliches Rückhaltevolumen überschreitet zulässige Grenzen. "
            "Entwässerungskonzept überarbeiten."
        )
        recs.append(
            "Prüfung eines Rigolen- oder Muldenversickerungssystems gemäß "
            "DWA-A 138 empfohlen."
        )

    recs.append(DISCLAIMER)

    return recs


def perform_assessment(site: SiteInput) -> AssessmentResult:
    """
    Realiza la evaluación completa del Überflutungsnachweis.

    Args:
        site: Datos validados del terreno

    Returns:
        AssessmentResult inmutable con timestamp actual
    """
    effective_area = site.impervious_area_m2
    fraction = site.impervious_fraction

    required = is_verification_required(effective_area)
    design_storm = select_design_storm(fraction)
    intensity = get_rainfall_intensity(design_storm.value)
    psi = weighted_runoff_coefficient(site.total_area_m2, site.impervious_area_m2)

    q_rational = rational_peak_flow(intensity, site.total_area_m2, psi)

    slope = effective_slope(site.slope_pct)
    if slope > site.slope_pct / 100.0:
        logger.info(
            "Pendiente %.3f %% elevada al mínimo %.3f m/m", site.slope_pct, slope
        )

    kinematic = kinematic_wave_solution(
        length_m=site.flow_length_m,
        rainfall_mmhr=intensity,
        slope=slope,
        manning_n=site.manning_n,
        width_m=math.sqrt(site.total_area_m2),
        duration_min=KOSTRA_DURATION_MIN,
    )

    wqv = water_quality_volume(WQ_DESIGN_DEPTH_MM, site.total_area_m2, psi)
    retention = retention_volume_m3(wqv)

    status = determine_compliance_status(
        required, q_rational, kinematic.peak_discharge_ls, retention
    )
    logger.debug(
        "Nachweis: erforderlich=%s, T=%sa, Q_rat=%.2f L/s, Q_kw=%.2f L/s, V=%.1f m³ -> %s",
        required, design_storm.value, q_rational,
        kinematic.peak_discharge_ls, retention, status.value,
    )

    return AssessmentResult(
        verification_required=required,
        justification=requirement_justification(effective_area),
        total_area_m2=site.total_area_m2,
        effective_area_m2=effective_area,
        impervious_fraction=fraction,
        design_storm=design_storm,
        rainfall_intensity_mmhr=intensity,
        runoff_coefficient=psi,
        peak_discharge_rational_ls=q_rational,
        peak_discharge_kinematic_ls=kinematic.peak_discharge_ls,
        retention_volume_m3=retention,
        water_quality_volume_l=wqv,
        kinematic_wave=kinematic,
        status=status,
        recommendations=generate_recommendations(site, fraction, status),
    )
