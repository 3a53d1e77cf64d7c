from __future__ import annotations
import math
from dataclasses import dataclass, replace
from enum import Enum


# ---------------------------------------------------------------------------
# Error taxonomy
# ---------------------------------------------------------------------------
class InvalidOptionType(ValueError):
    """Raised when text cannot be mapped onto :class:`OptionType`."""


class NonPositiveInput(ValueError):
    """Raised when S, K or sigma is not strictly positive (or T is negative)."""


class DegenerateTimeToMaturity(ValueError):
    """Raised when d1/d2 are undefined (T == 0 or sigma == 0)."""


# ---------------------------------------------------------------------------
# Option type
# ---------------------------------------------------------------------------
class OptionType(str, Enum):
    """European option side. Only ``CALL`` and ``PUT`` exist."""

    CALL = "call"
    PUT = "put"

    @classmethod
    def parse(cls, value) -> OptionType:
        """Map ``"c"``, ``"call"``, ``"p"``, ``"put"`` (any case) to a member."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            s = value.strip().lower()
            if s in {"call", "c"}:
                return cls.CALL
            if s in {"put", "p"}:
                return cls.PUT
        raise InvalidOptionType(
            f"Invalid option type {value!r}. Use 'c' for call option or 'p' for put option."
        )


CALL = OptionType.CALL
PUT  = OptionType.PUT


# ---------------------------------------------------------------------------
# Market / contract inputs
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class MarketParameters:
    """Inputs of one Black-Scholes evaluation.

    Parameters
    ----------
    S : float
        Spot price of the underlying.
    K : float
        Strike price.
    sigma : float
        Annualised volatility.
    r : float
        Continuously-compounded risk-free rate.
    T : float
        Time to maturity in years. ``0`` is allowed and prices at intrinsic value.
    """
    S: float
    K: float
    sigma: float
    r: float
    T: float          # years

    def __post_init__(self):
        for name in ("S", "K", "sigma"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise NonPositiveInput(f"{name} must be positive and finite, got {value}")
        if not math.isfinite(self.T) or self.T < 0:
            raise NonPositiveInput(f"T must be non-negative and finite, got {self.T}")
        if not math.isfinite(self.r):
            raise NonPositiveInput(f"r must be finite, got {self.r}")

    def with_maturity(self, T: float) -> MarketParameters:
        return replace(self, T=T)


@dataclass(frozen=True)
class PriceSample:
    """One grid point: option price and delta at a given time to maturity."""
    time: float
    price: float
    delta: float
