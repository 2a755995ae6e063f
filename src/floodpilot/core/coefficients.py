"""
Coeficientes de escorrentía y clasificación de suelos.

Valores de Abflussbeiwert Ψ según DWA-A 117 / DIN 1986-100 y mapeo
de Bodenarten DIN 18196 a grupos hidrológicos SCS.
"""

from dataclasses import dataclass

from floodpilot.config import HydrologicSoilGroup, SoilType


# Coeficientes usados en la ponderación sellado / no sellado
RUNOFF_COEFFICIENTS = {
    "impervious": 0.90,
    "pervious": 0.15,
}


@dataclass
class SurfaceCoefficient:
    """Entrada de tabla de Abflussbeiwerte por tipo de superficie."""
    key: str
    description: str
    psi: float


DIN_RUNOFF_COEFFICIENTS = [
    SurfaceCoefficient("dach_flach", "Flachdach", 0.9),
    SurfaceCoefficient("dach_steil", "Steildach", 0.9),
    SurfaceCoefficient("asphalt_beton", "Asphalt/Beton", 0.9),
    SurfaceCoefficient("pflaster_fugen", "Pflaster mit Fugen", 0.75),
    SurfaceCoefficient("kies_schotter", "Kies/Schotter", 0.3),
    SurfaceCoefficient("gruenflaeche", "Grünfläche", 0.15),
    SurfaceCoefficient("extensivbegruenung", "Extensive Dachbegrünung", 0.3),
    SurfaceCoefficient("intensivbegruenung", "Intensive Dachbegrünung", 0.1),
]

SOIL_SCS_MAP = {
    SoilType.GW: HydrologicSoilGroup.A,
    SoilType.GI: HydrologicSoilGroup.A,
    SoilType.SE: HydrologicSoilGroup.A,
    SoilType.SU: HydrologicSoilGroup.B,
    SoilType.TL: HydrologicSoilGroup.C,
    SoilType.TM: HydrologicSoilGroup.D,
}


def get_surface_coefficient(key: str) -> float:
    """Obtiene Ψ para un tipo de superficie de la tabla DIN."""
    for entry in DIN_RUNOFF_COEFFICIENTS:
        if entry.key == key:
            return entry.psi
    raise ValueError(f"Tipo de superficie desconocido: {key}")


def get_soil_group(soil_type: SoilType) -> HydrologicSoilGroup:
    """Grupo hidrológico SCS para una Bodenart."""
    return SOIL_SCS_MAP[SoilType(soil_type)]


def weighted_c(areas: list[float], coefficients: list[float]) -> float:
    """
    Calcula coeficiente Ψ ponderado por área.

    Args:
        areas: Lista de áreas en cualquier unidad (m2, ha, etc.)
        coefficients: Lista de coeficientes correspondientes

    Returns:
        Coeficiente ponderado
    """
    if len(areas) != len(coefficients):
        raise ValueError("Las listas de áreas y coeficientes deben tener igual longitud")

    total_area = sum(areas)
    if total_area <= 0:
        raise ValueError("El área total debe ser > 0")

    weighted_sum = sum(a * c for a, c in zip(areas, coefficients))
    return weighted_sum / total_area


def weighted_runoff_coefficient(total_area_m2: float, impervious_area_m2: float) -> float:
    """
    Abflussbeiwert ponderado entre superficie sellada y no sellada.

    Siempre queda entre RUNOFF_COEFFICIENTS['pervious'] y
    RUNOFF_COEFFICIENTS['impervious'] para 0 <= sellada <= total.
    """
    pervious_area = total_area_m2 - impervious_area_m2
    return weighted_c(
        [impervious_area_m2, pervious_area],
        [RUNOFF_COEFFICIENTS["impervious"], RUNOFF_COEFFICIENTS["pervious"]],
    )
