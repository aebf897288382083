"""Population chart written at the end of a run."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence, Union

from matplotlib.figure import Figure

SAMPLE_INTERVAL = 10


def draw_chart(
    rabbits: Sequence[int],
    foxes: Sequence[int],
    path: Union[str, Path] = "population.png",
) -> Path:
    """Plot both population histories as lines and save the chart as PNG."""
    rabbits = list(rabbits)
    foxes = list(foxes)
    if len(rabbits) != len(foxes):
        raise ValueError(
            f"population histories differ in length: {len(rabbits)} rabbits, {len(foxes)} foxes"
        )
    ticks = [i * SAMPLE_INTERVAL for i in range(len(rabbits))]

    figure = Figure(figsize=(8, 4), dpi=100)
    axes = figure.add_subplot()
    axes.plot(ticks, rabbits, linewidth=1, color="C0", label="Rabbits")
    axes.plot(ticks, foxes, linewidth=1, color="C1", label="Foxes")
    axes.set_title("Population of Rabbits and Foxes")
    axes.set_xlabel("Ticks")
    axes.set_ylabel("Population")
    axes.legend()

    path = Path(path)
    figure.savefig(path, format="png", dpi=100)
    return path