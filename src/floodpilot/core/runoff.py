"""
Método Racional y volumen de calidad de agua.

Q = Ψ × i × A, con A en m² e i en mm/hr, resulta en L/hr;
se divide por 3600 para obtener L/s.
"""

# Lámina de diseño para el volumen de tratamiento (mm)
WQ_DESIGN_DEPTH_MM = 25.0

# mm/hr × m² = L/hr  ->  L/s
_LPH_TO_LPS = 3600.0


def rational_peak_flow(
    intensity_mmhr: float,
    area_m2: float,
    c: float,
) -> float:
    """
    Calcula caudal pico usando método racional.

    Q = Ψ × i × A / 3600  [Q: L/s, i: mm/hr, A: m²]

    Args:
        intensity_mmhr: Intensidad de lluvia en mm/hr
        area_m2: Área en m²
        c: Coeficiente de escorrentía Ψ (0-1)

    Returns:
        Caudal pico en L/s
    """
    if not 0 <= c <= 1:
        raise ValueError("Coeficiente Ψ debe estar entre 0 y 1")
    if intensity_mmhr <= 0:
        raise ValueError("Intensidad debe ser > 0")
    if area_m2 <= 0:
        raise ValueError("Área debe ser > 0")

    return c * intensity_mmhr * area_m2 / _LPH_TO_LPS


def water_quality_volume(
    depth_mm: float,
    area_m2: float,
    c: float,
) -> float:
    """
    Volumen de calidad de agua (WQv) en litros.

    WQv = P × Ψ × A  [P: mm, A: m², WQv: L]
    """
    if depth_mm < 0:
        raise ValueError("Lámina de diseño debe ser >= 0")
    if area_m2 <= 0:
        raise ValueError("Área debe ser > 0")

    return depth_mm * area_m2 * c


def retention_volume_m3(water_quality_volume_l: float) -> float:
    """Rückhaltevolumen en m³ a partir del WQv en litros."""
    return water_quality_volume_l / 1000.0
