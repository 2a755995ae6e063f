"""
Reporte de texto plano del Überflutungsnachweis.
"""

from datetime import datetime

from floodpilot import __version__
from floodpilot.config import ComplianceStatus
from floodpilot.models import AssessmentResult


STATUS_LABELS = {
    ComplianceStatus.PASSED: "✅ Nachweis erbracht",
    ComplianceStatus.FAILED: "❌ Nachweis nicht erbracht",
    ComplianceStatus.REVIEW_REQUIRED: "⚠️ Prüfung erforderlich",
}

LIABILITY_DISCLAIMER = (
    "HAFTUNGSAUSSCHLUSS: Dieses Dokument ist ein automatisch erstellter\n"
    "Entwurf. Es ersetzt nicht die Prüfung und Stempelung durch einen\n"
    "nach §65 BauO Bln bauvorlageberechtigten Ingenieur."
)

_RULE = "═" * 38


def format_date_de(timestamp: str) -> str:
    """Formatea un timestamp ISO como fecha alemana (dd.mm.yyyy)."""
    return datetime.fromisoformat(timestamp).strftime("%d.%m.%Y")


def method_comparison_note(ratio: float) -> str:
    """Nota de comparación entre métodos según la relación KW/Rational."""
    if 0.5 < ratio < 2.0:
        return "gute Übereinstimmung"
    return "Prüfung empfohlen"


def generate_compliance_text(result: AssessmentResult, project_name: str) -> str:
    """
    Genera el texto del Überflutungsnachweis.

    Args:
        result: Resultado de la evaluación
        project_name: Nombre del proyecto

    Returns:
        Reporte formateado (sin espacios finales)
    """
    kw = result.kinematic_wave
    recommendations = "\n".join(f"   • {r}" for r in result.recommendations)

    lines = [
        "ÜBERFLUTUNGSNACHWEIS NACH DIN 1986-100",
        _RULE,
        "ENTWURF — Freigabe durch Bauvorlageberechtigten erforderlich",
        "",
        f"Projekt: {project_name}",
        f"Datum: {format_date_de(result.timestamp)}",
        f"Erstellt mit: FloodPilot v{__version__}",
        "",
        "1. STANDORTDATEN",
        f"   Grundstücksfläche:        {result.total_area_m2:.0f} m²",
        f"   Abflusswirksame Fläche:   {result.effective_area_m2:.0f} m²",
        f"   Versiegelungsgrad:        {result.impervious_fraction * 100:.1f}%",
        f"   Bemessungsregen:          {result.design_storm.label}",
        f"   {result.justification}",
        "",
        "2. BERECHNUNGSERGEBNISSE",
        f"   Abflussbeiwert Ψ:         {result.runoff_coefficient:.3f}",
        f"   Regenspende (r₁₅):       {result.rainfall_intensity_mmhr:.0f} mm/hr",
        "",
        f"   Spitzenabfluss (Rational): {result.peak_discharge_rational_ls:.2f} L/s",
        f"   Spitzenabfluss (PINN/KW):  {result.peak_discharge_kinematic_ls:.2f} L/s",
        f"   Verhältnis KW/Rational:    {result.method_ratio:.2f} "
        f"({method_comparison_note(result.method_ratio)})",
        "",
        f"   Rückhaltevolumen:          {result.retention_volume_m3:.1f} m³",
        "",
        "   Kinematische Welle:",
        f"     Spitzenabfluss:          {kw.peak_discharge_ls:.2f} L/s",
        f"     Anstiegszeit:            {kw.time_to_peak_min:.1f} min",
        f"     Gleichgewichtstiefe:     {kw.equilibrium_depth_mm:.1f} mm",
        "",
        "3. ERGEBNIS",
        f"   {STATUS_LABELS[result.status]}",
        "",
        "4. EMPFEHLUNGEN",
        recommendations,
        "",
        _RULE,
        LIABILITY_DISCLAIMER,
    ]

    return "\n".join(lines).strip()
