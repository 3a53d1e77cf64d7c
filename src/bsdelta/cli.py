import argparse
import logging
import sys

from .config import NUM_STEPS, BUMP_PCT, DATA_FILE, SCRIPT_FILE, GridConfig
from .core import MarketParameters, OptionType, InvalidOptionType
from .grid import evaluate_config
from .report import format_table, write_data_file, write_gnuplot_script, run_gnuplot

logger = logging.getLogger(__name__)

RED = "\033[31m"
RESET = "\033[0m"

# (attribute, prompt) in the order they are asked for
PROMPTS = [
    ("S", "Enter current stock price: "),
    ("K", "Enter option strike price: "),
    ("sigma", "Enter volatility (in decimal form, e.g., 0.2 for 20%): "),
    ("T", "Enter time to maturity (in years): "),
    ("r", "Enter risk-free interest rate (in decimal form, e.g., 0.05 for 5%): "),
]
KIND_PROMPT = "Enter option type ('c' for call, 'p' for put): "


def _kind(s: str):
    try:
        return OptionType.parse(s)
    except InvalidOptionType as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bsdelta",
        description="Black-Scholes price and delta over a time-to-maturity grid. "
                    "Market inputs not given as options are prompted for.",
    )
    p.add_argument("--S", type=float, help="spot price")
    p.add_argument("--K", type=float, help="strike price")
    p.add_argument("--sigma", type=float, help="volatility, decimal")
    p.add_argument("--T", type=float, help="time to maturity, years")
    p.add_argument("--r", type=float, help="cont. risk-free rate, decimal")
    p.add_argument("--kind", type=_kind, help="c|call|p|put")
    p.add_argument("--steps", type=int, default=NUM_STEPS, help="grid intervals")
    p.add_argument("--bump-pct", dest="bump_pct", type=float, default=BUMP_PCT,
                   help="spot bump for delta, fraction of S")
    p.add_argument("--workers", type=int, default=1, help="process-pool size")
    p.add_argument("--data-file", dest="data_file", default=None,
                   help="write 'time price delta' rows to this file")
    p.add_argument("--gnuplot", action="store_true",
                   help=f"write {SCRIPT_FILE} and launch gnuplot")
    p.add_argument("--plot", default=None, help="save a matplotlib chart to this path")
    p.add_argument("--no-table", dest="no_table", action="store_true")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def _setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="[%(asctime)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _error(msg: str):
    if sys.stderr.isatty():
        msg = f"{RED}{msg}{RESET}"
    print(msg, file=sys.stderr)


def _fill_missing(args, input_func):
    """Prompt for every market input the command line left out."""
    for attr, prompt in PROMPTS:
        if getattr(args, attr) is None:
            raw = input_func(prompt)
            try:
                setattr(args, attr, float(raw))
            except ValueError:
                raise ValueError(f"Not a number: {raw!r}") from None
    if args.kind is None:
        args.kind = OptionType.parse(input_func(KIND_PROMPT))


def main(argv=None, *, input_func=input) -> int:
    args = build_parser().parse_args(argv)
    _setup_logging(args.verbose)

    try:
        _fill_missing(args, input_func)
        params = MarketParameters(S=args.S, K=args.K, sigma=args.sigma, r=args.r, T=args.T)
        grid = evaluate_config(params, args.kind, GridConfig.from_args(args))
    except ValueError as exc:
        _error(str(exc))
        return 2
    except EOFError:
        _error("Input ended before all values were entered.")
        return 2
    logger.info("Evaluated %d samples", len(grid))

    if not args.no_table:
        print(format_table(grid))

    data_file = args.data_file
    if args.gnuplot and data_file is None:
        data_file = DATA_FILE
    if data_file is not None:
        write_data_file(grid, data_file)

    if args.gnuplot:
        script = write_gnuplot_script(data_file, SCRIPT_FILE)
        run_gnuplot(script)

    if args.plot:
        from .plotting import plot_grid
        plot_grid(grid, args.plot)

    return 0


if __name__ == "__main__":
    sys.exit(main())
