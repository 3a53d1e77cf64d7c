#!/usr/bin/env python3
"""Batch script: price/delta term structures for a book of options.

Usage
-----
    python scripts/price_book.py --input book.csv --output-dir grids/
    python scripts/price_book.py --input book.csv --output-dir grids/ --summary summary.json

Input CSV format
----------------
    id,S,K,sigma,T,r,kind
    1,100,110,0.20,0.5,0.05,c
    2,100,95,0.25,1.0,0.05,p

An optional ``steps`` column overrides the default 100 grid intervals.

Output
------
    One ``<id>.dat`` file per row (``time price delta``), plus a summary
    (CSV, or JSON when the path ends in ``.json``) with columns
    id, price, delta, price_at_expiry, error.
"""

from __future__ import annotations
import argparse
import csv
import json
import logging
from pathlib import Path

from bsdelta import MarketParameters, NUM_STEPS, evaluate, write_data_file

logger = logging.getLogger("price_book")


def _price_row(row: dict, out_dir: Path) -> dict:
    """Evaluate one book row, write its grid and return the summary record."""
    rid = row.get("id", "").strip()
    params = MarketParameters(
        S=float(row["S"]),
        K=float(row["K"]),
        sigma=float(row["sigma"]),
        r=float(row["r"]),
        T=float(row["T"]),
    )
    steps = int(row.get("steps") or NUM_STEPS)
    grid = evaluate(params, row["kind"], steps)
    write_data_file(grid, out_dir / f"{rid}.dat")
    return {
        "id": rid,
        "price": grid[-1].price,
        "delta": grid[-1].delta,
        "price_at_expiry": grid[0].price,
        "error": "",
    }


def main():
    parser = argparse.ArgumentParser(
        description="Price/delta term structures for a book of European options."
    )
    parser.add_argument("--input", required=True, help="Path to book CSV")
    parser.add_argument("--output-dir", required=True, help="Directory for .dat grids")
    parser.add_argument("--summary", default=None, help="Summary path (.csv or .json)")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s: %(message)s")

    out_dir = Path(args.output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    with open(args.input, newline="") as f:
        rows = list(csv.DictReader(f))

    logger.info("Evaluating %d contracts", len(rows))

    results = []
    for i, row in enumerate(rows):
        try:
            results.append(_price_row(row, out_dir))
        except (KeyError, ValueError) as e:
            logger.error("Row %d (id=%s): %s", i, row.get("id", "?"), e)
            results.append({"id": row.get("id", ""), "price": None, "delta": None,
                            "price_at_expiry": None, "error": str(e)})

    if args.summary:
        summary_path = Path(args.summary)
        if summary_path.suffix == ".json":
            with open(summary_path, "w") as f:
                json.dump(results, f, indent=2)
        else:
            with open(summary_path, "w", newline="") as f:
                writer = csv.DictWriter(
                    f, fieldnames=["id", "price", "delta", "price_at_expiry", "error"]
                )
                writer.writeheader()
                writer.writerows(results)
        logger.info("Summary written to %s", summary_path)

    failed = [r for r in results if r["price"] is None]
    logger.info("Evaluated: %d  |  Failed: %d", len(results) - len(failed), len(failed))


if __name__ == "__main__":
    main()
