"""Módulos de generación de reportes."""

from floodpilot.reports.text import (
    STATUS_LABELS,
    format_date_de,
    generate_compliance_text,
    method_comparison_note,
)

from floodpilot.reports.generator import (
    DEFAULT_PROJECT_NAME,
    ReportGenerator,
    default_report_filename,
    export_to_json,
    hydrograph_to_csv,
)

from floodpilot.reports.compiler import (
    LaTeXEngine,
    CompilationResult,
    compile_latex,
    find_latex_engine,
)

__all__ = [
    "STATUS_LABELS",
    "format_date_de",
    "generate_compliance_text",
    "method_comparison_note",
    "DEFAULT_PROJECT_NAME",
    "ReportGenerator",
    "default_report_filename",
    "export_to_json",
    "hydrograph_to_csv",
    "LaTeXEngine",
    "CompilationResult",
    "compile_latex",
    "find_latex_engine",
]
