"""
Gráficos en terminal con plotext.
"""

from typing import Sequence

import plotext as plt


def plot_hydrograph_terminal(
    time_min: Sequence[float],
    discharge_ls: Sequence[float],
    title: str = "Abflussganglinie (kinematische Welle)",
    width: int = 60,
    height: int = 15,
) -> None:
    """
    Grafica el hidrograma de salida en la terminal.

    Args:
        time_min: Tiempo en minutos
        discharge_ls: Caudal en L/s
        title: Titulo del grafico
        width: Ancho en caracteres
        height: Alto en caracteres
    """
    time_min = list(time_min)
    discharge_ls = list(discharge_ls)

    plt.clear_figure()
    plt.plot_size(width, height)
    plt.plot(time_min, discharge_ls, marker="braille")

    plt.title(title)
    plt.xlabel("Zeit (min)")
    plt.ylabel("Q (L/s)")

    # Marcar pico
    peak_idx = discharge_ls.index(max(discharge_ls))
    plt.scatter([time_min[peak_idx]], [discharge_ls[peak_idx]], marker="x", color="red")

    plt.theme("clear")
    plt.show()
