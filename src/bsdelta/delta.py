"""Bump-and-reprice delta.

A forward finite difference on spot that works with any pricer callable
sharing the signature of :func:`bsdelta.black_scholes.price`. The truncation
error is O(dS), so the bump is left to the caller.
"""

from __future__ import annotations

import math
from typing import Callable

from .black_scholes import price as bs_price
from .config import BUMP_PCT

__all__ = ["fd_delta", "bump_size"]


def bump_size(S: float, bump_pct: float = BUMP_PCT) -> float:
    """Absolute spot bump ``bump_pct * S``."""
    if not math.isfinite(bump_pct) or bump_pct <= 0:
        raise ValueError(f"bump_pct must be positive, got {bump_pct}")
    return bump_pct * S


def fd_delta(
    S: float,
    K: float,
    sigma: float,
    T: float,
    r: float,
    kind,
    dS: float,
    *,
    pricer: Callable[..., float] = bs_price,
) -> float:
    """Forward-difference delta ``(P(S + dS) - P(S)) / dS``.

    Parameters
    ----------
    S, K, sigma, T, r : float
        Market and contract parameters.
    kind : OptionType or str
        ``"call"`` / ``"put"`` (or ``"c"`` / ``"p"``).
    dS : float
        Spot bump, must be positive. See :func:`bump_size` for the usual
        ``BUMP_PCT * S``.
    pricer : callable
        ``pricer(S, K, sigma, T, r, kind) -> float``.

    Returns
    -------
    float
    """
    if not math.isfinite(dS) or dS <= 0:
        raise ValueError(f"dS must be positive, got {dS}")

    P0 = pricer(S, K, sigma, T, r, kind)
    P_up = pricer(S + dS, K, sigma, T, r, kind)
    return float((P_up - P0) / dS)
