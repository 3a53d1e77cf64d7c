"""Matplotlib rendering of a price/delta grid."""

from __future__ import annotations

import logging
from pathlib import Path

from matplotlib.figure import Figure

from .report import DEFAULT_TITLE

logger = logging.getLogger(__name__)


def plot_grid(grid, path: str | Path | None = None, *,
              title: str = DEFAULT_TITLE) -> Figure:
    """Option price on the left axis, delta on a twin right axis.

    The figure is built without pyplot so it works on headless machines.
    When ``path`` is given the figure is also saved there.
    """
    fig = Figure(figsize=(8, 5), layout="tight")
    ax = fig.add_subplot(1, 1, 1)
    times = grid.times

    ax.plot(times, grid.prices, "-", color="tab:blue", label="Option Price")
    ax.set_xlabel("Time")
    ax.set_ylabel("Option Price")
    ax.grid(True)

    ax2 = ax.twinx()
    ax2.plot(times, grid.deltas, "-", color="tab:orange", label="Delta")
    ax2.set_ylabel("Delta")

    lines = list(ax.get_lines()) + list(ax2.get_lines())
    ax.legend(lines, [ln.get_label() for ln in lines], loc="best")
    ax.set_title(title)

    if path is not None:
        fig.savefig(path, dpi=150)
        logger.info("Plot saved to %s", path)
    return fig
