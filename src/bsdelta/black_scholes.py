import math
from math import log, sqrt, exp

import numpy as np
from scipy.special import erfc

from .core import OptionType, CALL, PUT, NonPositiveInput, DegenerateTimeToMaturity

_SQRT2 = sqrt(2.0)


def norm_cdf(x):
    """Standard normal CDF, ``0.5 * erfc(-x / sqrt(2))``.

    Same value as ``0.5 * (1 + erf(x / sqrt(2)))`` but without the
    cancellation in the lower tail. Scalars in, float out; arrays broadcast.
    """
    out = 0.5 * erfc(-np.asarray(x, dtype=float) / _SQRT2)
    if np.ndim(out) == 0:
        return float(out)
    return out


def _check_inputs(S, K, sigma, T, r):
    if not all(math.isfinite(x) and x > 0 for x in (S, K, sigma)):
        raise NonPositiveInput(f"S, K, sigma must be positive (S={S}, K={K}, sigma={sigma}).")
    if not math.isfinite(T) or T < 0:
        raise NonPositiveInput(f"T must be non-negative and finite, got {T}")
    if not math.isfinite(r):
        raise NonPositiveInput(f"r must be finite, got {r}")


def d1_d2(S, K, sigma, T, r):
    if T <= 0 or sigma <= 0:
        raise DegenerateTimeToMaturity(
            f"d1/d2 undefined for T={T}, sigma={sigma}; use intrinsic_value at expiry."
        )
    rt = sigma * sqrt(T)
    d1 = (log(S / K) + (r + 0.5 * sigma * sigma) * T) / rt
    d2 = d1 - rt
    return d1, d2


def intrinsic_value(S, K, kind=CALL) -> float:
    kind = OptionType.parse(kind)
    if kind is CALL:
        return float(max(S - K, 0.0))
    return float(max(K - S, 0.0))


def price(S, K, sigma, T, r, kind=CALL) -> float:
    """Black-Scholes price of a European call or put.

    ``T == 0`` is the expiry boundary and returns the intrinsic value
    instead of evaluating d1/d2.
    """
    kind = OptionType.parse(kind)
    _check_inputs(S, K, sigma, T, r)
    if T == 0:
        return intrinsic_value(S, K, kind)
    d1, d2 = d1_d2(S, K, sigma, T, r)
    disc_r = exp(-r * T)
    if kind is CALL:
        return S * norm_cdf(d1) - K * disc_r * norm_cdf(d2)
    return K * disc_r * norm_cdf(-d2) - S * norm_cdf(-d1)


def analytic_delta(S, K, sigma, T, r, kind=CALL) -> float:
    """Closed-form delta, N(d1) for calls and N(d1) - 1 for puts.

    At expiry this is the step of the payoff, with 0.5 / -0.5 at the strike.
    """
    kind = OptionType.parse(kind)
    _check_inputs(S, K, sigma, T, r)
    if T == 0:
        if math.isclose(S, K):
            N_d1 = 0.5
        else:
            N_d1 = 1.0 if S > K else 0.0
    else:
        d1, _ = d1_d2(S, K, sigma, T, r)
        N_d1 = norm_cdf(d1)
    return N_d1 if kind is CALL else N_d1 - 1.0


__all__ = [
    "norm_cdf", "d1_d2", "intrinsic_value", "price", "analytic_delta",
    "CALL", "PUT",
]
