"""
Synthetic steel observation generator.

Produces one row per (region, year) with cost (USD/ton), CO2 intensity
(kg CO2/ton) and volume (tons). Values follow a linear trend in the year
index with small random noise on top:

  cost   = base_cost + trend · i + N(0, COST_NOISE_SD)
  co2    = base_co2  + trend · i + N(0, CO2_NOISE_SD)     (floored at 0)
  volume = VOLUME_BASE + VOLUME_GROWTH · i + U(0, VOLUME_JITTER)
                                                          (floored at MIN_VOLUME)

Domestic regions get the steeper improvement trends (cost falls, CO2 falls
faster); overseas regions drift up in cost and improve CO2 slowly.

Pass a seed to make the table reproducible; without one every call draws a
fresh table.
"""

import logging
from typing import Optional

import numpy as np
import pandas as pd

from scenario import config
from scenario.regions import Region

logger = logging.getLogger(__name__)

OBSERVATION_COLUMNS = ["region", "year", "cost", "co2", "volume"]


def year_range(start: int = config.YEAR_START, end: int = config.YEAR_END) -> list:
    """Inclusive list of years from start to end."""
    if end < start:
        raise ValueError(f"Year range end ({end}) is before start ({start})")
    return list(range(start, end + 1))


def generate_observations(
    start: int = config.YEAR_START,
    end: int = config.YEAR_END,
    seed: Optional[int] = None,
    noise_scale: float = 1.0,
) -> pd.DataFrame:
    """
    Generate the observation table.

    Args:
        start: First year (inclusive).
        end: Last year (inclusive).
        seed: Seed for np.random.default_rng; None draws fresh entropy.
        noise_scale: Multiplier on the cost/CO2 Gaussian noise. 0 gives the
            pure linear trend for cost and CO2 (volume keeps its jitter).

    Returns:
        DataFrame with columns region, year, cost, co2, volume, ordered by
        year and then by Region declaration order.
    """
    years = year_range(start, end)
    rng = np.random.default_rng(seed)

    rows = []
    for i, year in enumerate(years):
        for region in Region:
            cost_slope = config.COST_TREND[0] if region.is_domestic else config.COST_TREND[1]
            co2_slope = config.CO2_TREND[0] if region.is_domestic else config.CO2_TREND[1]

            cost = region.base_cost + cost_slope * i
            cost += rng.normal(0.0, config.COST_NOISE_SD) * noise_scale

            co2 = region.base_co2 + co2_slope * i
            co2 += rng.normal(0.0, config.CO2_NOISE_SD) * noise_scale

            volume = (
                config.VOLUME_BASE
                + config.VOLUME_GROWTH * i
                + rng.uniform(0.0, config.VOLUME_JITTER)
            )

            rows.append({
                "region": region.label,
                "year": year,
                "cost": round(float(cost), 2),
                "co2": round(max(float(co2), 0.0), 2),
                "volume": round(max(float(volume), config.MIN_VOLUME), 1),
            })

    df = pd.DataFrame(rows, columns=OBSERVATION_COLUMNS)
    logger.debug(
        "Generated %d observations for %d-%d (seed=%s)", len(df), start, end, seed,
    )
    return df
