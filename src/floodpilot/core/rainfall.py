"""
Regenspenden KOSTRA-DWD 2020 para Berlín.

Intensidades de lluvia para duración de 15 minutos (crítica en
drenaje urbano) y selección del Bemessungsregen según el
Versiegelungsgrad.
"""

from floodpilot.config import DesignStorm


# Duración de la lluvia de diseño (min)
KOSTRA_DURATION_MIN = 15.0

# Intensidades en mm/hr para D = 15 min, por período de retorno (años)
KOSTRA_BERLIN = {
    2: 95.0,
    5: 125.0,
    10: 145.0,
    30: 175.0,    # Estándar DIN 1986-100
    50: 195.0,
    100: 220.0,   # DIN 1986-100 para alta impermeabilización
}

# Versiegelungsgrad a partir del cual se usa T=100a (inclusive)
HIGH_IMPERVIOUS_FRACTION = 0.70


def select_design_storm(impervious_fraction: float) -> DesignStorm:
    """
    Selecciona el período de retorno de diseño.

    T=100a si el Versiegelungsgrad es >= 70 %, T=30a en otro caso.
    Esta decisión es independiente del umbral de 800 m² del §14.9.2.

    Args:
        impervious_fraction: Fracción impermeable (0-1)

    Returns:
        DesignStorm seleccionado
    """
    if impervious_fraction >= HIGH_IMPERVIOUS_FRACTION:
        return DesignStorm.T100
    return DesignStorm.T30


def get_rainfall_intensity(return_period_yr: int) -> float:
    """
    Obtiene la Regenspende (mm/hr) de la tabla KOSTRA.

    Args:
        return_period_yr: Período de retorno en años (2, 5, 10, 30, 50, 100)

    Returns:
        Intensidad en mm/hr
    """
    try:
        return KOSTRA_BERLIN[int(return_period_yr)]
    except KeyError:
        raise ValueError(
            f"Período de retorno sin dato KOSTRA: {return_period_yr} "
            f"(disponibles: {sorted(KOSTRA_BERLIN)})"
        ) from None
