"""
Steel Observation Data Generator
================================
Writes the synthetic (region, year, cost, co2, volume) table to
data/observations.csv so the same draw can be inspected outside the app
or shared between sessions.

Usage:
  python -m scripts.generate_data                      (defaults, seed 42)
  python -m scripts.generate_data --seed 7 --start 2025 --end 2040
  python -m scripts.generate_data --no-seed --output /tmp/obs.csv
"""

import argparse
import logging

from scenario import config
from scenario.observations import ObservationTable

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Generate synthetic steel observations")
    p.add_argument("--start", type=int, default=config.YEAR_START, help="first year (inclusive)")
    p.add_argument("--end", type=int, default=config.YEAR_END, help="last year (inclusive)")
    p.add_argument("--seed", type=int, default=config.DEFAULT_SEED, help="random seed")
    p.add_argument("--no-seed", action="store_true", help="draw a fresh unseeded table")
    p.add_argument("--noise-scale", type=float, default=1.0,
                   help="multiplier on cost/CO2 noise (0 = pure trend)")
    p.add_argument("--output", default=None,
                   help=f"CSV path (default: data/{config.OBSERVATIONS_CSV})")
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    seed = None if args.no_seed else args.seed

    table = ObservationTable.generate(
        args.start, args.end, seed=seed, noise_scale=args.noise_scale,
    )
    path = table.to_csv(args.output)

    years = table.years()
    print(f"  observations.csv: {len(table)} rows "
          f"({len(table.regions())} regions × {len(years)} years, {years[0]}-{years[-1]})")
    print(f"  -> {path}")
    return path


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
