"""Text table, data-file and gnuplot output for a :class:`~bsdelta.grid.Grid`.

Nothing here feeds back into pricing; the grid is only read.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

import numpy as np

from .config import DATA_FILE, SCRIPT_FILE, TABLE_WIDTH, TABLE_PRECISION
from .core import PriceSample

__all__ = [
    "format_row", "format_table", "write_data_file",
    "gnuplot_script", "write_gnuplot_script", "run_gnuplot",
]

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Black-Scholes Option Pricing and Delta"


# ---------------------------------------------------------------------------
# Table
# ---------------------------------------------------------------------------
def format_row(sample: PriceSample, *, width: int = TABLE_WIDTH,
               precision: int = TABLE_PRECISION) -> str:
    return "".join(
        f"{x:>{width}.{precision}f}"
        for x in (sample.time, sample.price, sample.delta)
    )


def format_table(grid, *, header: bool = True, width: int = TABLE_WIDTH,
                 precision: int = TABLE_PRECISION) -> str:
    """Render the grid as fixed-width columns, one sample per line."""
    lines = []
    if header:
        lines.append("".join(f"{h:>{width}}" for h in ("Time", "Price", "Delta")))
    lines.extend(format_row(s, width=width, precision=precision) for s in grid)
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Data file + gnuplot
# ---------------------------------------------------------------------------
def write_data_file(grid, path: str | Path = DATA_FILE) -> Path:
    """Write ``time price delta`` rows, space separated."""
    path = Path(path)
    np.savetxt(path, grid.to_array(), fmt="%.10g", delimiter=" ")
    logger.info("Wrote %d samples to %s", len(grid), path)
    return path


def _quote(text) -> str:
    """Single-quoted gnuplot string; an embedded quote is written twice."""
    return "'" + str(text).replace("'", "''") + "'"


def gnuplot_script(data_path: str | Path = DATA_FILE, *,
                   title: str = DEFAULT_TITLE) -> str:
    """Plot price (left axis) and delta (right axis) against time."""
    data = _quote(Path(data_path).as_posix())
    return "\n".join([
        f"set title {_quote(title)}",
        "set xlabel 'Time'",
        "set ylabel 'Option Price'",
        "set y2label 'Delta'",
        "set ytics nomirror",
        "set y2tics",
        "set grid",
        f"plot {data} using 1:2 with lines title 'Option Price' axes x1y1, "
        f"{data} using 1:3 with lines title 'Delta' axes x1y2",
        "",
    ])


def write_gnuplot_script(data_path: str | Path = DATA_FILE,
                         script_path: str | Path = SCRIPT_FILE, *,
                         title: str = DEFAULT_TITLE) -> Path:
    script_path = Path(script_path)
    script_path.write_text(gnuplot_script(data_path, title=title))
    logger.info("Wrote gnuplot script to %s", script_path)
    return script_path


def run_gnuplot(script_path: str | Path = SCRIPT_FILE) -> bool:
    """Launch ``gnuplot -persist`` on the script.

    Returns ``True`` on a zero exit status. A missing binary or a failing run
    is logged and reported as ``False``; it is never raised.
    """
    exe = shutil.which("gnuplot")
    if exe is None:
        logger.warning("gnuplot not found on PATH; skipping plot.")
        return False
    try:
        proc = subprocess.run([exe, "-persist", str(script_path)], check=False)
    except OSError as exc:
        logger.warning("Could not launch gnuplot: %s", exc)
        return False
    if proc.returncode != 0:
        logger.warning("gnuplot exited with status %d", proc.returncode)
        return False
    return True
