"""
CLI de FloodPilot - Überflutungsnachweis nach DIN 1986-100.

Comandos:
- assess: Evaluación completa con resumen en pantalla
- threshold: Indicador rápido del umbral §14.9.2
- report: Exportación (text, tex, pdf, json, csv)
- tables: Tablas KOSTRA, coeficientes y suelos
"""

import typer

from floodpilot import __version__
from floodpilot.config import Settings
from floodpilot.log import setup_logger
from floodpilot.cli.assess import assess, threshold
from floodpilot.cli.report import report
from floodpilot.cli.tables import tables_app
from floodpilot.cli.theme import CLITheme

# Crear aplicación principal
app = typer.Typer(
    name="floodpilot",
    help="Überflutungsnachweis nach DIN 1986-100 §14.9.2 (Rational + kinematische Welle).",
    no_args_is_help=True,
)

app.command("assess")(assess)
app.command("threshold")(threshold)
app.command("report")(report)
app.add_typer(tables_app, name="tables")


@app.command()
def wizard():
    """Asistente interactivo (formulario de Standortdaten)."""
    from floodpilot.cli.wizard import wizard as wizard_main
    wizard_main()


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"FloodPilot v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True,
        help="Muestra la versión",
    ),
):
    """
    FloodPilot - Co-Pilot DIN 1986-100 para ingenieros civiles.

    Usa Regenspenden KOSTRA-DWD 2020 (Berlín) y compara el método
    racional con la onda cinemática.
    """
    settings = Settings()
    setup_logger(level=settings.log_level)
    CLITheme.set_theme(settings.theme)


__all__ = ["app"]
