# black_scholes_vec.py
# Vectorised Black-Scholes price and forward-difference delta.
# All public functions accept scalars *or* NumPy arrays and broadcast.

from __future__ import annotations
import numpy as np

from .black_scholes import norm_cdf as _N
from .core import OptionType, CALL, NonPositiveInput


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------
def _as_arrays(*xs):
    return tuple(np.asarray(x, dtype=float) for x in xs)


def _validate(S, K, sigma, T, r):
    for x in (S, K, sigma):
        if not np.all(np.isfinite(x) & (x > 0)):
            raise NonPositiveInput("S, K, sigma must be positive and finite.")
    if not np.all(np.isfinite(T) & (T >= 0)):
        raise NonPositiveInput("T must be non-negative and finite.")
    if not np.all(np.isfinite(r)):
        raise NonPositiveInput("r must be finite.")


def _d1_d2(S, K, sigma, T, r):
    """Compute d1, d2 arrays.  Entries with T == 0 are computed at T = 1 and
    must be masked out by the caller."""
    T_safe = np.where(T > 0, T, 1.0)
    sig_sqrt_T = sigma * np.sqrt(T_safe)
    d1 = (np.log(S / K) + (r + 0.5 * sigma * sigma) * T_safe) / sig_sqrt_T
    d2 = d1 - sig_sqrt_T
    return d1, d2


# ---------------------------------------------------------------------------
# Vectorised price
# ---------------------------------------------------------------------------
def bs_price_vec(S, K, sigma, T, r, kind=CALL) -> np.ndarray:
    """Vectorised Black-Scholes price.

    Parameters accept scalars or arrays; NumPy broadcasting rules apply.
    ``kind`` is a single option type for the whole batch. Entries with
    ``T == 0`` take the intrinsic value.

    Returns
    -------
    np.ndarray
        Option prices (same shape as broadcasted inputs).
    """
    kind = OptionType.parse(kind)
    S, K, sigma, T, r = _as_arrays(S, K, sigma, T, r)
    _validate(S, K, sigma, T, r)
    d1, d2 = _d1_d2(S, K, sigma, T, r)
    disc_r = np.exp(-r * T)

    if kind is CALL:
        px = S * _N(d1) - K * disc_r * _N(d2)
        intrinsic = np.maximum(S - K, 0.0)
    else:
        px = K * disc_r * _N(-d2) - S * _N(-d1)
        intrinsic = np.maximum(K - S, 0.0)

    return np.where(T > 0, px, intrinsic)


# ---------------------------------------------------------------------------
# Vectorised forward-difference delta
# ---------------------------------------------------------------------------
def fd_delta_vec(S, K, sigma, T, r, kind, dS) -> np.ndarray:
    """Forward-difference delta, broadcast over all inputs including ``dS``."""
    dS = np.asarray(dS, dtype=float)
    if not np.all(np.isfinite(dS) & (dS > 0)):
        raise ValueError("dS must be positive and finite.")
    P0 = bs_price_vec(S, K, sigma, T, r, kind)
    P_up = bs_price_vec(np.asarray(S, dtype=float) + dS, K, sigma, T, r, kind)
    return (P_up - P0) / dS
