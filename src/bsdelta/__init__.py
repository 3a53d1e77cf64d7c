# bsdelta: Black-Scholes price / delta term structure
# Public API

# Data model & errors
from .core import (
    OptionType, CALL, PUT, MarketParameters, PriceSample,
    InvalidOptionType, NonPositiveInput, DegenerateTimeToMaturity,
)
from .config import NUM_STEPS, BUMP_PCT, GridConfig

# Pricing
from .black_scholes import (
    norm_cdf, price as bs_price, intrinsic_value, analytic_delta,
)
from .black_scholes_vec import bs_price_vec, fd_delta_vec
from .delta import fd_delta, bump_size

# Grid
from .grid import Grid, grid_times, evaluate, evaluate_vec, evaluate_config

# Output
from .report import format_table, write_data_file, write_gnuplot_script, run_gnuplot

__all__ = [
    # Data model & errors
    "OptionType", "CALL", "PUT", "MarketParameters", "PriceSample",
    "InvalidOptionType", "NonPositiveInput", "DegenerateTimeToMaturity",
    "NUM_STEPS", "BUMP_PCT", "GridConfig",
    # Pricing
    "norm_cdf", "bs_price", "intrinsic_value", "analytic_delta",
    "bs_price_vec", "fd_delta_vec",
    "fd_delta", "bump_size",
    # Grid
    "Grid", "grid_times", "evaluate", "evaluate_vec", "evaluate_config",
    # Output
    "format_table", "write_data_file", "write_gnuplot_script", "run_gnuplot",
]

__version__ = "0.1.0"
