"""
Utilidades de formateo para la CLI de FloodPilot.
"""

from floodpilot.config import ComplianceStatus


STATUS_TEXT = {
    ComplianceStatus.PASSED: "Nachweis erbracht",
    ComplianceStatus.FAILED: "Nachweis nicht erbracht",
    ComplianceStatus.REVIEW_REQUIRED: "Prüfung erforderlich",
}


def format_flow_ls(flow_ls: float) -> str:
    """
    Formatea caudal en L/s según magnitud.

    Args:
        flow_ls: Caudal en L/s

    Returns:
        String formateado (ej: "0.25", "12.4", "1520")
    """
    if flow_ls is None:
        return "-"
    if flow_ls == 0:
        return "0"
    if flow_ls >= 1000:
        return f"{flow_ls:.0f}"
    elif flow_ls >= 10:
        return f"{flow_ls:.1f}"
    return f"{flow_ls:.2f}"


def format_percent(fraction: float, decimals: int = 0) -> str:
    """Formatea una fracción (0-1) como porcentaje."""
    return f"{fraction * 100:.{decimals}f}%"


def format_volume_m3(volume_m3: float) -> str:
    """Formatea volumen en m³ con un decimal."""
    if volume_m3 is None:
        return "-"
    return f"{volume_m3:.1f}"


def status_color(status: ComplianceStatus, palette) -> str:
    """Color de la paleta para un estado."""
    return {
        ComplianceStatus.PASSED: palette.success,
        ComplianceStatus.FAILED: palette.error,
        ComplianceStatus.REVIEW_REQUIRED: palette.warning,
    }[status]
