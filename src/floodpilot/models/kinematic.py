"""
Modelo para resultados de onda cinemática.
"""

from pydantic import BaseModel, ConfigDict, Field


class KinematicWaveResult(BaseModel):
    """Resultado del cálculo de flujo superficial por onda cinemática."""

    model_config = ConfigDict(frozen=True)

    peak_discharge_ls: float
    time_to_peak_min: float
    equilibrium_depth_mm: float
    time_to_equilibrium_min: float
    peak_depth_mm: float
    reaches_equilibrium: bool
    outlet_velocity_ms: float  # velocidad de Manning en el pico
    runoff_volume_m3: float
    slope: float  # pendiente usada (m/m), ya con mínimo aplicado
    width_m: float
    # Series temporales del hidrograma de salida
    time_min: tuple[float, ...] = Field(default_factory=tuple)
    discharge_ls: tuple[float, ...] = Field(default_factory=tuple)
