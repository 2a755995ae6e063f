"""
Asistente interactivo: formulario de Standortdaten y Geotechnik.
"""

from pathlib import Path

import questionary
import typer
from questionary import Style

from floodpilot.config import Settings, SoilType
from floodpilot.core import perform_assessment
from floodpilot.cli.assess import print_assessment
from floodpilot.cli.common import build_site
from floodpilot.cli.theme import print_header, print_success
from floodpilot.reports import DEFAULT_PROJECT_NAME, default_report_filename, generate_compliance_text


WIZARD_STYLE = Style([
    ('qmark', 'fg:cyan bold'),
    ('question', 'bold'),
    ('answer', 'fg:cyan'),
    ('pointer', 'fg:cyan bold'),
    ('highlighted', 'fg:cyan bold'),
    ('selected', 'fg:green'),
])


def _validate_positive(value: str) -> bool | str:
    """Valida numero positivo."""
    try:
        v = float(value)
        if v <= 0:
            return "Debe ser un numero positivo"
        return True
    except ValueError:
        return "Debe ser un numero valido"


def _validate_non_negative(value: str) -> bool | str:
    """Valida numero >= 0."""
    try:
        if float(value) < 0:
            return "Debe ser >= 0"
        return True
    except ValueError:
        return "Debe ser un numero valido"


def _ask(prompt) -> str:
    """Ejecuta una pregunta; Ctrl+C cancela el asistente."""
    answer = prompt.ask()
    if answer is None:
        raise typer.Exit()
    return answer


def _ask_number(message: str, default: float, validate=_validate_positive) -> float:
    return float(_ask(questionary.text(
        message, default=f"{default:g}", validate=validate, style=WIZARD_STYLE,
    )))


def wizard():
    """Asistente interactivo para el Überflutungsnachweis."""
    print_header("FloodPilot", "DIN 1986-100 Co-Pilot")

    project = _ask(questionary.text(
        "Projektname:", default="", style=WIZARD_STYLE,
    ))
    total_area = _ask_number("Grundstücksfläche (m²):", 2000)
    impervious_area = _ask_number(
        "Versiegelte Fläche (m²):", min(1400.0, total_area), _validate_non_negative,
    )

    soil_choices = [f"{s.value} — {s.label}" for s in SoilType]
    soil_answer = _ask(questionary.select(
        "Bodenart:", choices=soil_choices, default=soil_choices[3], style=WIZARD_STYLE,
    ))
    soil = SoilType(soil_answer.split(" ")[0])

    slope = _ask_number("Geländeneigung (%):", 2.0, _validate_non_negative)
    flow_length = _ask_number("Fließweglänge (m):", 50)
    manning_n = _ask_number("Manning-Rauheitsbeiwert:", 0.015)

    site = build_site(
        project_name=project,
        total_area_m2=total_area,
        impervious_area_m2=impervious_area,
        soil_type=soil,
        slope_pct=slope,
        manning_n=manning_n,
        flow_length_m=flow_length,
    )
    result = perform_assessment(site)
    print_assessment(result, project)

    if _ask(questionary.confirm("Bericht als Text speichern?", default=False, style=WIZARD_STYLE)):
        filename = Path(Settings().output_dir) / default_report_filename(project, "txt")
        filename.parent.mkdir(parents=True, exist_ok=True)
        filename.write_text(
            generate_compliance_text(result, project or DEFAULT_PROJECT_NAME), encoding="utf-8",
        )
        print_success(f"Reporte guardado: {filename}")
