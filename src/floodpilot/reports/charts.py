"""
Gráfico PGFPlots del hidrograma de onda cinemática.
"""

from typing import Sequence

from floodpilot.models import KinematicWaveResult


def _format_coordinates(time_min: Sequence[float], values: Sequence[float], precision: int = 2) -> str:
    """Formatea coordenadas para TikZ."""
    coords = [f"({t:.2f}, {v:.{precision}f})" for t, v in zip(time_min, values)]

    # Agrupar en líneas de 5 coordenadas
    lines = []
    for i in range(0, len(coords), 5):
        lines.append("\t\t\t" + " ".join(coords[i:i + 5]))

    return "\n".join(lines)


def hydrograph_tikz(
    kinematic: KinematicWaveResult,
    caption: str = "Abflussganglinie (kinematische Welle)",
    label: str = "fig:hydrograph",
    height: str = "7cm",
) -> str:
    """
    Genera figura TikZ con el hidrograma de salida.

    Args:
        kinematic: Resultado de onda cinemática con series temporales
        caption: Título de la figura
        label: Etiqueta LaTeX
        height: Alto del gráfico

    Returns:
        Código LaTeX de la figura
    """
    if not kinematic.time_min:
        raise ValueError("El resultado no contiene hidrograma")

    xmax = max(kinematic.time_min)
    ymax = max(kinematic.discharge_ls) * 1.1
    coords = _format_coordinates(kinematic.time_min, kinematic.discharge_ls)

    return f"""\\begin{{figure}}[H]
\t\\centering
\t\\begin{{tikzpicture}}
\t\\begin{{axis}}[
\t\twidth=\\textwidth, height={height},
\t\txlabel={{Zeit (min)}}, ylabel={{Abfluss (L/s)}},
\t\txmin=0, xmax={xmax:.1f}, ymin=0, ymax={ymax:.2f},
\t\tgrid=major, grid style={{dotted, gray!50}},
\t]
\t\t\\addplot[thick, blue] coordinates {{
{coords}
\t\t}};
\t\\end{{axis}}
\t\\end{{tikzpicture}}
\t\\caption{{{caption}}}
\t\\label{{{label}}}
\\end{{figure}}
"""
