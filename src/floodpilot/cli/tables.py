"""
Comandos CLI para consultar tablas de datos.
"""

import typer

from floodpilot.config import SoilType
from floodpilot.core import (
    DIN_RUNOFF_COEFFICIENTS,
    KOSTRA_BERLIN,
    KOSTRA_DURATION_MIN,
    RUNOFF_COEFFICIENTS,
    get_soil_group,
)
from floodpilot.cli.theme import create_results_table, get_console, print_info


tables_app = typer.Typer(help="Tablas de lluvia, coeficientes y suelos")


@tables_app.command("kostra")
def show_kostra():
    """Regenspenden KOSTRA-DWD 2020 (Berlín, D=15 min)."""
    table = create_results_table(
        title=f"KOSTRA-DWD 2020 Berlin (D = {KOSTRA_DURATION_MIN:.0f} min)",
        columns=[("T (a)", "right"), ("r (mm/hr)", "right"), ("Verwendung", "left")],
    )
    for tr, intensity in KOSTRA_BERLIN.items():
        use = {30: "Versiegelungsgrad < 70%", 100: "Versiegelungsgrad ≥ 70%"}.get(tr, "")
        table.add_row(str(tr), f"{intensity:.0f}", use)
    get_console().print(table)


@tables_app.command("coefficients")
def show_coefficients():
    """Abflussbeiwerte Ψ según DWA-A 117 / DIN 1986-100."""
    table = create_results_table(
        title="Abflussbeiwerte Ψ",
        columns=[("Schlüssel", "left"), ("Fläche", "left"), ("Ψ", "right")],
    )
    for entry in DIN_RUNOFF_COEFFICIENTS:
        table.add_row(entry.key, entry.description, f"{entry.psi:.2f}")
    get_console().print(table)
    print_info(
        f"Gewichtung: versiegelt Ψ={RUNOFF_COEFFICIENTS['impervious']:.2f}, "
        f"unversiegelt Ψ={RUNOFF_COEFFICIENTS['pervious']:.2f}"
    )


@tables_app.command("soils")
def show_soils():
    """Bodenarten DIN 18196 y grupo hidrológico SCS."""
    table = create_results_table(
        title="Bodenarten (DIN 18196)",
        columns=[("Code", "left"), ("Beschreibung", "left"), ("SCS", "center")],
    )
    for soil in SoilType:
        table.add_row(soil.value, soil.label, get_soil_group(soil).value)
    get_console().print(table)
