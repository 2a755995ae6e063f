"""
Comando CLI para exportar el Überflutungsnachweis.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from floodpilot.config import ReportFormat, Settings, SoilType
from floodpilot.core import perform_assessment
from floodpilot.cli.common import (
    FlowLengthOpt, ImperviousAreaOpt, LatitudeOpt, LongitudeOpt,
    ManningOpt, ProjectOpt, SlopeOpt, SoilOpt, TotalAreaOpt, build_site,
)
from floodpilot.cli.theme import print_error, print_info, print_success, print_warning
from floodpilot.reports import (
    DEFAULT_PROJECT_NAME,
    LaTeXEngine,
    ReportGenerator,
    compile_latex,
    default_report_filename,
    export_to_json,
    generate_compliance_text,
    hydrograph_to_csv,
)


_EXTENSIONS = {
    ReportFormat.TEXT: "txt",
    ReportFormat.TEX: "tex",
    ReportFormat.PDF: "tex",
    ReportFormat.JSON: "json",
    ReportFormat.CSV: "csv",
}


def report(
    project: ProjectOpt = "",
    total_area: TotalAreaOpt = 2000.0,
    impervious_area: ImperviousAreaOpt = 1400.0,
    soil: SoilOpt = SoilType.SU,
    slope: SlopeOpt = 2.0,
    manning_n: ManningOpt = 0.015,
    flow_length: FlowLengthOpt = 50.0,
    lat: LatitudeOpt = 52.52,
    lon: LongitudeOpt = 13.405,
    fmt: Annotated[ReportFormat, typer.Option("--format", "-f", help="Formato: text, tex, pdf, json, csv")] = ReportFormat.TEXT,
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Archivo de salida")] = None,
):
    """
    Genera el reporte del Überflutungsnachweis.

    Sin --output, el formato text se imprime en pantalla y el resto se
    guarda en FLOODPILOT_OUTPUT_DIR con nombre
    Ueberflutungsnachweis_<proyecto>_<fecha>.

    Ejemplos:
        floodpilot report -p "Logistikhalle" -f pdf
        floodpilot report -a 5000 -i 4200 -f json -o resultado.json
    """
    settings = Settings()
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
    project_name = project or DEFAULT_PROJECT_NAME

    if fmt == ReportFormat.TEXT and output is None:
        typer.echo(generate_compliance_text(result, project_name))
        return

    if output is None:
        output = Path(settings.output_dir) / default_report_filename(project, _EXTENSIONS[fmt])
    output.parent.mkdir(parents=True, exist_ok=True)

    if fmt == ReportFormat.TEXT:
        output.write_text(generate_compliance_text(result, project_name), encoding="utf-8")
    elif fmt == ReportFormat.JSON:
        export_to_json(result, output)
    elif fmt == ReportFormat.CSV:
        kw = result.kinematic_wave
        hydrograph_to_csv(kw.time_min, kw.discharge_ls, output)
    else:
        if output.suffix != ".tex":
            output = output.with_suffix(".tex")
        ReportGenerator().write_latex(result, output, project)

    if fmt != ReportFormat.PDF:
        print_success(f"Reporte guardado: {output}")
        return

    try:
        engine = LaTeXEngine(settings.latex_engine)
    except ValueError:
        print_warning(f"Motor LaTeX desconocido '{settings.latex_engine}', usando pdflatex")
        engine = LaTeXEngine.PDFLATEX

    print_info(f"Compilando {output.name}...")
    compilation = compile_latex(output, engine=engine)
    if not compilation.success:
        print_error(f"No se pudo compilar el PDF: {compilation.error_message}")
        print_info(f"El archivo LaTeX queda disponible en {output}")
        raise typer.Exit(1)

    print_success(f"PDF generado: {compilation.pdf_path}")
