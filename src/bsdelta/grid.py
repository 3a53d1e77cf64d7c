"""Time-to-maturity grid evaluation.

Re-prices the option at ``num_steps + 1`` evenly spaced maturities between
0 and ``T`` while spot, strike, volatility and rate stay fixed, producing the
price/delta term structure consumed by the report and plotting helpers.

The first grid point sits at ``t = 0`` where d1/d2 are undefined. It is kept
and reported at intrinsic value, with delta taken as the forward difference
of the intrinsic payoff (see :func:`bsdelta.black_scholes.price`).
"""

from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Iterator

import numpy as np

from .black_scholes import price as bs_price
from .black_scholes_vec import bs_price_vec, fd_delta_vec
from .config import NUM_STEPS, BUMP_PCT, GridConfig
from .core import (
    MarketParameters, OptionType, PriceSample, DegenerateTimeToMaturity,
)
from .delta import fd_delta, bump_size

__all__ = ["Grid", "grid_times", "evaluate", "evaluate_vec", "evaluate_config"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Grid:
    """Ordered, immutable sequence of :class:`PriceSample` (ascending time)."""
    samples: tuple[PriceSample, ...]

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self) -> Iterator[PriceSample]:
        return iter(self.samples)

    def __getitem__(self, i) -> PriceSample:
        return self.samples[i]

    @property
    def times(self) -> np.ndarray:
        return np.array([s.time for s in self.samples])

    @property
    def prices(self) -> np.ndarray:
        return np.array([s.price for s in self.samples])

    @property
    def deltas(self) -> np.ndarray:
        return np.array([s.delta for s in self.samples])

    def to_array(self) -> np.ndarray:
        """Return an ``(N+1, 3)`` array of ``time, price, delta`` rows."""
        return np.array(
            [(s.time, s.price, s.delta) for s in self.samples], dtype=float
        ).reshape(len(self.samples), 3)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _check_grid_args(params: MarketParameters, num_steps) -> None:
    if isinstance(num_steps, bool) or not isinstance(num_steps, (int, np.integer)):
        raise ValueError(f"num_steps must be an int, got {num_steps!r}")
    if num_steps <= 0:
        raise ValueError(f"num_steps must be positive, got {num_steps}")
    if params.T == 0:
        raise DegenerateTimeToMaturity(
            "Cannot build a time grid over T = 0; price the expiry point directly."
        )


def grid_times(T: float, num_steps: int = NUM_STEPS) -> np.ndarray:
    """Grid maturities ``T * i / num_steps``, exactly 0 first and exactly T last."""
    i = np.arange(num_steps + 1, dtype=float)
    times = T * i / num_steps
    times[-1] = T     # (T * n) / n can be off by one ulp
    return times


def _sample(params: MarketParameters, kind: OptionType, t: float, dS: float) -> PriceSample:
    px = bs_price(params.S, params.K, params.sigma, t, params.r, kind)
    delta = fd_delta(params.S, params.K, params.sigma, t, params.r, kind, dS)
    return PriceSample(time=t, price=float(px), delta=delta)


def _indexed_sample(i, params, kind, t, dS):
    return i, _sample(params, kind, t, dS)


# ---------------------------------------------------------------------------
# Evaluators
# ---------------------------------------------------------------------------
def evaluate(
    params: MarketParameters,
    kind,
    num_steps: int = NUM_STEPS,
    *,
    bump_pct: float = BUMP_PCT,
    n_workers: int = 1,
) -> Grid:
    """Price and delta at every grid maturity.

    Parameters
    ----------
    params : MarketParameters
        ``params.T`` is the total maturity spanned by the grid.
    kind : OptionType or str
    num_steps : int
        Number of intervals; ``num_steps + 1`` samples are returned.
    bump_pct : float
        Spot bump for the delta, ``dS = bump_pct * S``.
    n_workers : int
        ``1`` (default) runs serially; larger values use a process pool.
        Output order is ascending time either way.

    Returns
    -------
    Grid
    """
    kind = OptionType.parse(kind)
    _check_grid_args(params, num_steps)
    dS = bump_size(params.S, bump_pct)
    times = [float(t) for t in grid_times(params.T, num_steps)]

    logger.info(
        "Evaluating %s grid: S=%g K=%g sigma=%g r=%g T=%g steps=%d dS=%g",
        kind.value, params.S, params.K, params.sigma, params.r, params.T,
        num_steps, dS,
    )

    if n_workers <= 1:
        samples = [_sample(params, kind, t, dS) for t in times]
    else:
        # steps are independent; completion order is discarded below
        indexed = []
        with ProcessPoolExecutor(max_workers=n_workers) as ex:
            futs = [
                ex.submit(_indexed_sample, i, params, kind, t, dS)
                for i, t in enumerate(times)
            ]
            for f in as_completed(futs):
                indexed.append(f.result())
        indexed.sort(key=lambda item: item[0])
        samples = [s for _, s in indexed]

    return Grid(tuple(samples))


def evaluate_config(params: MarketParameters, kind, config: GridConfig) -> Grid:
    return evaluate(
        params, kind, config.num_steps,
        bump_pct=config.bump_pct, n_workers=config.n_workers,
    )


def evaluate_vec(
    params: MarketParameters,
    kind,
    num_steps: int = NUM_STEPS,
    *,
    bump_pct: float = BUMP_PCT,
) -> Grid:
    """NumPy-broadcast equivalent of :func:`evaluate` (one pass over all maturities)."""
    kind = OptionType.parse(kind)
    _check_grid_args(params, num_steps)
    dS = bump_size(params.S, bump_pct)
    times = grid_times(params.T, num_steps)

    prices = bs_price_vec(params.S, params.K, params.sigma, times, params.r, kind)
    deltas = fd_delta_vec(params.S, params.K, params.sigma, times, params.r, kind, dS)

    return Grid(tuple(
        PriceSample(time=float(t), price=float(p), delta=float(d))
        for t, p, d in zip(times, prices, deltas)
    ))
