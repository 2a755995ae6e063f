"""
Generador de reportes LaTeX para FloodPilot.

Genera el Überflutungsnachweis en formato LaTeX a partir de una
plantilla Jinja2, y exporta resultados a JSON y CSV.
"""

from datetime import datetime
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader

from floodpilot import __version__
from floodpilot.config import ComplianceStatus
from floodpilot.models import AssessmentResult
from floodpilot.reports.charts import hydrograph_tikz
from floodpilot.reports.text import format_date_de, method_comparison_note


# Directorio de templates
_TEMPLATE_DIR = Path(__file__).parent / "templates"

REPORT_TEMPLATE = "ueberflutungsnachweis.tex"

DEFAULT_PROJECT_NAME = "Unbenanntes Projekt"

STATUS_TITLES = {
    ComplianceStatus.PASSED: "NACHWEIS ERBRACHT",
    ComplianceStatus.FAILED: "NACHWEIS NICHT ERBRACHT",
    ComplianceStatus.REVIEW_REQUIRED: "PRÜFUNG ERFORDERLICH",
}

# Colores RGB del recuadro de estado
STATUS_COLORS = {
    ComplianceStatus.PASSED: (34, 197, 94),
    ComplianceStatus.FAILED: (239, 68, 68),
    ComplianceStatus.REVIEW_REQUIRED: (245, 158, 11),
}


def _escape_latex(text: str) -> str:
    """Escapa caracteres especiales de LaTeX."""
    if not isinstance(text, str):
        return str(text)

    replacements = {
        '\\': r'\textbackslash{}',
        '&': r'\&',
        '%': r'\%',
        '$': r'\$',
        '#': r'\#',
        '_': r'\_',
        '{': r'\{',
        '}': r'\}',
        '~': r'\textasciitilde{}',
        '^': r'\textasciicircum{}',
    }
    return "".join(replacements.get(char, char) for char in text)


def _create_jinja_env() -> Environment:
    """Crea entorno Jinja2 configurado para LaTeX."""
    env = Environment(
        block_start_string=r'\BLOCK{',
        block_end_string='}',
        variable_start_string=r'\VAR{',
        variable_end_string='}',
        comment_start_string=r'\#{',
        comment_end_string='}',
        line_statement_prefix='%%',
        trim_blocks=True,
        autoescape=False,
        loader=FileSystemLoader(str(_TEMPLATE_DIR)),
    )
    env.filters['escape_latex'] = _escape_latex
    return env


def default_report_filename(project_name: str, extension: str, date: datetime | None = None) -> str:
    """
    Nombre de archivo por defecto del reporte.

    Ueberflutungsnachweis_<proyecto o Entwurf>_<YYYY-MM-DD>.<ext>
    """
    date = date or datetime.now()
    name = project_name.strip() or "Entwurf"
    name = "".join(c if c.isalnum() or c in "-_" else "_" for c in name)
    return f"Ueberflutungsnachweis_{name}_{date.strftime('%Y-%m-%d')}.{extension.lstrip('.')}"


class ReportGenerator:
    """Generador de reportes LaTeX del Überflutungsnachweis."""

    def __init__(self):
        self.env = _create_jinja_env()

    def build_context(self, result: AssessmentResult, project_name: str) -> dict[str, Any]:
        """Arma el contexto de la plantilla con valores ya formateados."""
        kw = result.kinematic_wave
        ratio = result.method_ratio

        site_rows = [
            ("Grundstücksfläche (gesamt)", f"{result.total_area_m2:.0f} m²"),
            ("Versiegelungsgrad", f"{result.impervious_fraction * 100:.1f} %"),
            ("Abflusswirksame Fläche", f"{result.effective_area_m2:.0f} m²"),
            ("Bemessungsregen", f"T = {result.design_storm.value} a"),
            ("Regenspende (r15)", f"{result.rainfall_intensity_mmhr:.0f} mm/hr"),
        ]
        calc_rows = [
            ("Abflussbeiwert Ψ (gewichtet)", f"{result.runoff_coefficient:.3f}"),
            ("Spitzenabfluss Q (Rational)", f"{result.peak_discharge_rational_ls:.2f} L/s"),
            ("Spitzenabfluss Q (Kinematische Welle)", f"{result.peak_discharge_kinematic_ls:.2f} L/s"),
            ("Anstiegszeit", f"{kw.time_to_peak_min:.1f} min"),
            ("Gleichgewichtstiefe", f"{kw.equilibrium_depth_mm:.1f} mm"),
            ("Rückhaltevolumen (erf.)", f"{result.retention_volume_m3:.1f} m³"),
        ]

        return {
            "project_name": project_name or DEFAULT_PROJECT_NAME,
            "date": format_date_de(result.timestamp),
            "version": __version__,
            "justification": result.justification,
            "site_rows": site_rows,
            "calc_rows": calc_rows,
            "ratio": f"{ratio:.2f}",
            "ratio_note": method_comparison_note(ratio),
            "status_title": STATUS_TITLES[result.status],
            "status_color": ",".join(str(c) for c in STATUS_COLORS[result.status]),
            "recommendations": result.recommendations,
            "hydrograph": hydrograph_tikz(kw) if kw.time_min else "",
        }

    def generate_latex(self, result: AssessmentResult, project_name: str = "") -> str:
        """
        Genera el documento LaTeX completo.

        Args:
            result: Resultado de la evaluación
            project_name: Nombre del proyecto

        Returns:
            Documento LaTeX
        """
        template = self.env.get_template(REPORT_TEMPLATE)
        return template.render(**self.build_context(result, project_name))

    def write_latex(self, result: AssessmentResult, filepath: str | Path, project_name: str = "") -> Path:
        """Escribe el documento LaTeX a disco."""
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        filepath.write_text(self.generate_latex(result, project_name), encoding="utf-8")
        return filepath


# ============================================================================
# Funciones de conveniencia para exportación
# ============================================================================

def export_to_json(result: AssessmentResult, filepath: str | Path) -> None:
    """Exporta el resultado completo a JSON (mismo formato que `assess --json`)."""
    Path(filepath).write_text(result.model_dump_json(indent=2), encoding="utf-8")


def hydrograph_to_csv(
    time_min: list[float],
    discharge_ls: list[float],
    filepath: str | Path,
    delimiter: str = ",",
) -> None:
    """
    Exporta hidrograma a CSV.

    Args:
        time_min: Tiempos en minutos
        discharge_ls: Caudales en L/s
        filepath: Ruta del archivo
        delimiter: Delimitador (default: coma)
    """
    filepath = Path(filepath)

    with open(filepath, 'w', encoding='utf-8') as f:
        f.write(delimiter.join(["Zeit_min", "Abfluss_ls"]) + "\n")
        for t, q in zip(time_min, discharge_ls):
            f.write(f"{t:.4f}{delimiter}{q:.4f}\n")
