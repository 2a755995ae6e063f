"""
Onda cinemática para flujo superficial sobre un plano.

Aproxima el escurrimiento laminar (sheet flow) con la ecuación de
continuidad y la relación de Manning q = α × h^m, con α = √S / n
y m = 5/3. La solución es cerrada a lo largo de las características:

    h_e = (i × L / α)^(1/m)          profundidad de equilibrio
    t_e = h_e / i                    tiempo de equilibrio
    h_p = min(h_e, i × D)            profundidad pico en la salida
    Q_p = α × h_p^m × W              caudal pico

Si la lluvia dura menos que t_e el pico es parcial y se mantiene
una meseta hasta que la característica del punto x_D = α h_p^m / i
alcanza la salida. La recesión sigue

    t(h) = D + (L - α h^m / i) / (m α h^(m-1))
"""

import math

import numpy as np

from floodpilot.models.kinematic import KinematicWaveResult


# Exponente de Manning para flujo laminar ancho
MANNING_EXPONENT = 5.0 / 3.0

# Pendiente mínima (m/m) para evitar denominadores nulos
MIN_SLOPE = 0.001

# La recesión se corta cuando la profundidad cae a esta fracción del pico
RECESSION_DEPTH_FRACTION = 0.01


def effective_slope(slope_pct: float) -> float:
    """
    Convierte pendiente en % a m/m aplicando el mínimo MIN_SLOPE.

    Pendientes menores (incluida 0) se elevan sin error.
    """
    return max(slope_pct / 100.0, MIN_SLOPE)


def kinematic_wave_solution(
    length_m: float,
    rainfall_mmhr: float,
    slope: float,
    manning_n: float,
    width_m: float,
    duration_min: float = 15.0,
    n_points: int = 50,
) -> KinematicWaveResult:
    """
    Resuelve el flujo superficial por onda cinemática.

    Args:
        length_m: Longitud del recorrido de flujo (m)
        rainfall_mmhr: Intensidad de lluvia (mm/hr)
        slope: Pendiente (m/m), > 0
        manning_n: Coeficiente de Manning
        width_m: Ancho del plano de flujo (m)
        duration_min: Duración de la lluvia (min)
        n_points: Puntos por tramo del hidrograma

    Returns:
        KinematicWaveResult con pico, tiempos, profundidades e hidrograma
    """
    if length_m <= 0:
        raise ValueError("Longitud debe ser > 0")
    if rainfall_mmhr <= 0:
        raise ValueError("Intensidad debe ser > 0")
    if slope <= 0:
        raise ValueError("Pendiente debe ser > 0")
    if manning_n <= 0:
        raise ValueError("Coeficiente n debe ser > 0")
    if width_m <= 0:
        raise ValueError("Ancho debe ser > 0")
    if duration_min <= 0:
        raise ValueError("Duración debe ser > 0")

    m = MANNING_EXPONENT
    i = rainfall_mmhr / 1000.0 / 3600.0  # m/s
    duration_s = duration_min * 60.0
    alpha = math.sqrt(slope) / manning_n

    h_eq = (i * length_m / alpha) ** (1.0 / m)
    t_eq = h_eq / i

    h_peak = min(h_eq, i * duration_s)
    t_peak = h_peak / i
    q_peak = alpha * h_peak ** m  # m²/s por unidad de ancho
    velocity = alpha * h_peak ** (m - 1.0)

    time_s, flow_m3s = _outflow_hydrograph(
        alpha, i, length_m, width_m, duration_s, h_peak, n_points
    )
    volume_m3 = float(np.sum(np.diff(time_s) * (flow_m3s[1:] + flow_m3s[:-1]) / 2.0))

    return KinematicWaveResult(
        peak_discharge_ls=q_peak * width_m * 1000.0,
        time_to_peak_min=t_peak / 60.0,
        equilibrium_depth_mm=h_eq * 1000.0,
        time_to_equilibrium_min=t_eq / 60.0,
        peak_depth_mm=h_peak * 1000.0,
        reaches_equilibrium=t_eq <= duration_s,
        outlet_velocity_ms=velocity,
        runoff_volume_m3=volume_m3,
        slope=slope,
        width_m=width_m,
        time_min=(time_s / 60.0).tolist(),
        discharge_ls=(flow_m3s * 1000.0).tolist(),
    )


def _outflow_hydrograph(
    alpha: float,
    i: float,
    length_m: float,
    width_m: float,
    duration_s: float,
    h_peak: float,
    n_points: int,
) -> tuple[np.ndarray, np.ndarray]:
    """Hidrograma de salida: rama ascendente, meseta y recesión (t en s, Q en m³/s)."""
    m = MANNING_EXPONENT
    t_peak = h_peak / i

    # Rama ascendente: h = i × t en la salida
    t_rise = np.linspace(0.0, t_peak, n_points)
    q_rise = alpha * (i * t_rise) ** m

    # Recesión por características, desde h_peak hacia abajo
    h_rec = np.geomspace(h_peak, h_peak * RECESSION_DEPTH_FRACTION, n_points)
    t_rec = duration_s + (length_m - alpha * h_rec ** m / i) / (m * alpha * h_rec ** (m - 1.0))
    q_rec = alpha * h_rec ** m

    # El primer punto de la recesión cierra la meseta
    time_s = np.concatenate([t_rise, t_rec])
    flow = np.concatenate([q_rise, q_rec]) * width_m

    return time_s, flow
