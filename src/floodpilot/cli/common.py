"""
Opciones compartidas y construcción de datos del sitio.
"""

from typing import Annotated

import typer
from pydantic import ValidationError

from floodpilot.config import SiteInput, SoilType
from floodpilot.cli.theme import print_error


ProjectOpt = Annotated[str, typer.Option("--project", "-p", help="Nombre del proyecto")]
TotalAreaOpt = Annotated[float, typer.Option("--total-area", "-a", help="Grundstücksfläche (m²)")]
ImperviousAreaOpt = Annotated[float, typer.Option("--impervious-area", "-i", help="Versiegelte Fläche (m²)")]
SoilOpt = Annotated[SoilType, typer.Option("--soil", help="Bodenart DIN 18196")]
SlopeOpt = Annotated[float, typer.Option("--slope", "-s", help="Geländeneigung (%)")]
ManningOpt = Annotated[float, typer.Option("--manning-n", "-n", help="Manning-Rauheitsbeiwert")]
FlowLengthOpt = Annotated[float, typer.Option("--flow-length", "-l", help="Fließweglänge (m)")]
LatitudeOpt = Annotated[float, typer.Option("--lat", help="Latitud")]
LongitudeOpt = Annotated[float, typer.Option("--lon", help="Longitud")]


def build_site(**values) -> SiteInput:
    """
    Construye SiteInput o termina con código 1 si los datos no son válidos.
    """
    try:
        return SiteInput(**values)
    except ValidationError as e:
        for err in e.errors():
            field = ".".join(str(loc) for loc in err["loc"]) or "datos"
            print_error(f"{field}: {err['msg']}")
        raise typer.Exit(1)
