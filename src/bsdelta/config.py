"""Defaults shared by the grid evaluator, the report writers and the CLI."""

from __future__ import annotations
import math
from dataclasses import dataclass
from pathlib import Path

NUM_STEPS = 100          # grid intervals between t=0 and t=T
BUMP_PCT = 0.01          # spot bump for the finite-difference delta, as a fraction of S

DATA_FILE = Path("black_scholes_data.dat")
SCRIPT_FILE = Path("plot_script.gnu")

TABLE_WIDTH = 15
TABLE_PRECISION = 4


@dataclass(frozen=True)
class GridConfig:
    """Tuning knobs of a grid evaluation.

    Parameters
    ----------
    num_steps : int
        Number of intervals; the grid holds ``num_steps + 1`` samples.
    bump_pct : float
        Relative spot bump used for delta (``dS = bump_pct * S``).
    n_workers : int
        ``1`` evaluates serially; more fans steps out to a process pool.
    """
    num_steps: int = NUM_STEPS
    bump_pct: float = BUMP_PCT
    n_workers: int = 1

    def __post_init__(self):
        if isinstance(self.num_steps, bool) or not isinstance(self.num_steps, int):
            raise ValueError(f"num_steps must be an int, got {self.num_steps!r}")
        if self.num_steps <= 0:
            raise ValueError(f"num_steps must be positive, got {self.num_steps}")
        if not math.isfinite(self.bump_pct) or self.bump_pct <= 0:
            raise ValueError(f"bump_pct must be positive, got {self.bump_pct}")
        if self.n_workers < 1:
            raise ValueError(f"n_workers must be >= 1, got {self.n_workers}")

    @classmethod
    def from_args(cls, args) -> GridConfig:
        """Build from an ``argparse.Namespace`` carrying ``steps``, ``bump_pct``, ``workers``."""
        return cls(
            num_steps=getattr(args, "steps", NUM_STEPS),
            bump_pct=getattr(args, "bump_pct", BUMP_PCT),
            n_workers=getattr(args, "workers", 1),
        )
