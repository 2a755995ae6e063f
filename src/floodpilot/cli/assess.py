"""
Comandos CLI para la evaluación del Überflutungsnachweis.
"""

from typing import Annotated, Optional

import typer
from rich.panel import Panel
from rich.text import Text
from rich import box

from floodpilot.config import SoilType
from floodpilot.core import (
    is_verification_required,
    perform_assessment,
    requirement_justification,
    select_design_storm,
)
from floodpilot.cli.common import (
    FlowLengthOpt, ImperviousAreaOpt, LatitudeOpt, LongitudeOpt,
    ManningOpt, ProjectOpt, SlopeOpt, SoilOpt, TotalAreaOpt, build_site,
)
from floodpilot.cli.formatters import (
    STATUS_TEXT, format_flow_ls, format_percent, format_volume_m3, status_color,
)
from floodpilot.cli.theme import (
    create_results_table, get_console, get_palette, print_field, print_header,
)
from floodpilot.models import AssessmentResult
from floodpilot.reports import method_comparison_note


def assess(
    project: ProjectOpt = "",
    total_area: TotalAreaOpt = 2000.0,
    impervious_area: ImperviousAreaOpt = 1400.0,
    soil: SoilOpt = SoilType.SU,
    slope: SlopeOpt = 2.0,
    manning_n: ManningOpt = 0.015,
    flow_length: FlowLengthOpt = 50.0,
    lat: LatitudeOpt = 52.52,
    lon: LongitudeOpt = 13.405,
    json_output: Annotated[bool, typer.Option("--json", help="Salida JSON")] = False,
    plot: Annotated[bool, typer.Option("--plot", help="Grafica el hidrograma en terminal")] = False,
):
    """Calcula el Überflutungsnachweis nach DIN 1986-100 §14.9.2."""
    site = build_site(
        project_name=project,
        total_area_m2=total_area,
        impervious_area_m2=impervious_area,
        soil_type=soil,
        slope_pct=slope,
        manning_n=manning_n,
        flow_length_m=flow_length,
        latitude=lat,
        longitude=lon,
    )
    result = perform_assessment(site)

    if json_output:
        typer.echo(result.model_dump_json(indent=2))
        return

    print_assessment(result, project)

    if plot:
        from floodpilot.cli.preview import plot_hydrograph_terminal
        kw = result.kinematic_wave
        plot_hydrograph_terminal(kw.time_min, kw.discharge_ls)


def threshold(
    impervious_area: Annotated[float, typer.Argument(help="Versiegelte Fläche (m²)")],
    total_area: Annotated[Optional[float], typer.Option("--total-area", "-a", help="Grundstücksfläche (m²)")] = None,
):
    """Indica si el §14.9.2 exige Überflutungsnachweis y el Bemessungsregen."""
    if impervious_area < 0:
        typer.echo("Error: la superficie sellada debe ser >= 0", err=True)
        raise typer.Exit(1)

    _print_threshold(impervious_area)

    if total_area is not None:
        if total_area <= 0 or impervious_area > total_area:
            typer.echo("Error: la superficie total debe ser > 0 y >= superficie sellada", err=True)
            raise typer.Exit(1)
        fraction = impervious_area / total_area
        storm = select_design_storm(fraction)
        print_field("Versiegelungsgrad", format_percent(fraction))
        print_field("Bemessungsregen", storm.label)


def _print_threshold(effective_area_m2: float) -> None:
    """Panel del umbral §14.9.2."""
    console = get_console()
    p = get_palette()

    if is_verification_required(effective_area_m2):
        title = "Überflutungsnachweis erforderlich (§14.9.2)"
        style = p.warning
    else:
        title = "Vereinfachtes Verfahren ausreichend"
        style = p.success

    content = Text(title, style=f"bold {style}")
    content.append(f"\n{requirement_justification(effective_area_m2)}", style=p.muted)
    console.print(Panel(content, border_style=style, box=box.ROUNDED, padding=(0, 1)))


def print_assessment(result: AssessmentResult, project_name: str = "") -> None:
    """Imprime el resultado completo de la evaluación."""
    console = get_console()
    p = get_palette()
    kw = result.kinematic_wave

    print_header(
        "ÜBERFLUTUNGSNACHWEIS DIN 1986-100",
        project_name or None,
    )
    _print_threshold(result.effective_area_m2)
    print_field("Versiegelungsgrad", format_percent(result.impervious_fraction))

    table = create_results_table(
        title=f"Ergebnisse ({result.design_storm.label})",
        columns=[("Kennwert", "left"), ("Wert", "right"), ("Einheit", "left")],
    )
    table.add_row("Abflussbeiwert Ψ", f"{result.runoff_coefficient:.3f}", "-")
    table.add_row("Bemessungsregen", result.design_storm.label,
                  f"{result.rainfall_intensity_mmhr:.0f} mm/hr")
    table.add_row("Rückhaltevolumen", format_volume_m3(result.retention_volume_m3), "m³")
    table.add_row("Spitzenabfluss (Rational)",
                  format_flow_ls(result.peak_discharge_rational_ls), "L/s")
    table.add_row("Spitzenabfluss (Kinematisch)",
                  format_flow_ls(result.peak_discharge_kinematic_ls), "L/s")
    table.add_row("Anstiegszeit", f"{kw.time_to_peak_min:.1f}", "min")
    console.print()
    console.print(table)

    ratio = result.method_ratio
    console.print()
    console.print(Text("Methodenvergleich", style=f"bold {p.secondary}"))
    print_field("Verhältnis KW/Rational", f"{ratio:.2f}", method_comparison_note(ratio))
    print_field("Gleichgewichtstiefe", f"{kw.equilibrium_depth_mm:.1f}", "mm")

    console.print()
    console.print(Text(STATUS_TEXT[result.status].upper(), style=f"bold {status_color(result.status, p)}"))

    console.print()
    console.print(Text("Empfehlungen", style=f"bold {p.secondary}"))
    for rec in result.recommendations:
        console.print(f"  • {rec}", soft_wrap=True)
