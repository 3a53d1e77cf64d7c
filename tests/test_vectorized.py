"""Tests for the vectorised Black-Scholes price and delta."""

import numpy as np
import pytest
from bsdelta.core import CALL, PUT, NonPositiveInput
from bsdelta.black_scholes import price as bs_scalar
from bsdelta.delta import fd_delta
from bsdelta.black_scholes_vec import bs_price_vec, fd_delta_vec


# ---------------------------------------------------------------------------
# bs_price_vec matches scalar price
# ---------------------------------------------------------------------------
class TestBSPriceVec:
    def test_single_call_matches_scalar(self):
        expected = bs_scalar(100, 100, 0.2, 1.0, 0.05, CALL)
        got = bs_price_vec(100, 100, 0.2, 1.0, 0.05, CALL)
        assert abs(float(got) - expected) < 1e-10

    def test_single_put_matches_scalar(self):
        expected = bs_scalar(100, 100, 0.2, 1.0, 0.05, PUT)
        got = bs_price_vec(100, 100, 0.2, 1.0, 0.05, "put")
        assert abs(float(got) - expected) < 1e-10

    def test_array_of_maturities(self):
        T = np.array([0.0, 0.25, 0.5, 1.0])
        prices = bs_price_vec(110, 100, 0.2, T, 0.05, CALL)
        assert prices.shape == (4,)
        assert prices[0] == 10.0
        for i, t in enumerate(T):
            assert abs(prices[i] - bs_scalar(110, 100, 0.2, t, 0.05, CALL)) < 1e-10

    def test_array_of_spots(self):
        spots = np.array([90.0, 100.0, 110.0])
        prices = bs_price_vec(spots, 100, 0.2, 1.0, 0.05, PUT)
        for i, S in enumerate(spots):
            assert abs(prices[i] - bs_scalar(S, 100, 0.2, 1.0, 0.05, PUT)) < 1e-10

    def test_array_of_strikes(self):
        strikes = np.linspace(80, 120, 50)
        prices = bs_price_vec(100, strikes, 0.2, 1.0, 0.05, CALL)
        assert prices.shape == (50,)
        # Prices should be monotonically decreasing for calls
        assert np.all(np.diff(prices) < 0)

    def test_zero_maturity_no_warning(self):
        with np.errstate(all="raise"):
            px = bs_price_vec(100, 100, 0.2, np.array([0.0, 1.0]), 0.05, PUT)
        assert np.all(np.isfinite(px))

    def test_rejects_non_positive(self):
        with pytest.raises(NonPositiveInput):
            bs_price_vec(np.array([100.0, -1.0]), 100, 0.2, 1.0, 0.05, CALL)
        with pytest.raises(NonPositiveInput):
            bs_price_vec(100, 100, 0.2, np.array([-0.1, 1.0]), 0.05, CALL)

    def test_rejects_non_finite(self):
        with pytest.raises(NonPositiveInput):
            bs_price_vec(100, 100, 0.2, np.array([0.5, np.inf]), 0.05, CALL)
        with pytest.raises(NonPositiveInput):
            bs_price_vec(np.array([100.0, np.nan]), 100, 0.2, 1.0, 0.05, PUT)
        with pytest.raises(NonPositiveInput):
            bs_price_vec(100, 100, 0.2, 1.0, np.nan, CALL)


# ---------------------------------------------------------------------------
# fd_delta_vec matches scalar fd_delta
# ---------------------------------------------------------------------------
class TestFDDeltaVec:
    def test_matches_scalar(self):
        T = np.linspace(0.0, 2.0, 9)
        got = fd_delta_vec(100, 95, 0.3, T, 0.02, PUT, 1.0)
        for i, t in enumerate(T):
            assert abs(got[i] - fd_delta(100, 95, 0.3, t, 0.02, PUT, 1.0)) < 1e-10

    def test_rejects_bad_bump(self):
        with pytest.raises(ValueError):
            fd_delta_vec(100, 100, 0.2, 1.0, 0.05, CALL, 0.0)
