"""
Scenario transformer: apply the policy levers to the observation table.

For every (region, year) row:

  tariff_adj           = tariff_pct / 100 · cost     (overseas only)
  shipping_adj         = shipping_cost               (overseas only)
  incentive_adj        = incentive                   (domestic only)
  delivered_cost       = cost + tariff_adj + shipping_adj − incentive_adj
  carbon_adjusted_cost = delivered_cost + (co2 / 1000) · carbon_price
  bubble_size          = max(sqrt(volume) / BUBBLE_SCALE, MIN_BUBBLE_SIZE)

The tariff is applied as a percentage of the producer's cost (ad valorem),
never as a flat per-ton amount.

The whole table is recomputed on every call. At 6 regions × 26 years there
is nothing to gain from caching or incremental updates, and recomputing
keeps the output a pure function of (state, observations).
"""

import logging

import numpy as np
import pandas as pd

from scenario import config
from scenario.regions import DOMESTIC_LABELS
from scenario.state import ScenarioState

logger = logging.getLogger(__name__)

DERIVED_COLUMNS = [
    "tariff_adj",
    "shipping_adj",
    "incentive_adj",
    "delivered_cost",
    "carbon_adjusted_cost",
    "bubble_size",
]


def bubble_size(volume):
    """Marker size for a volume in tons; works on scalars and arrays."""
    return np.maximum(np.sqrt(volume) / config.BUBBLE_SCALE, config.MIN_BUBBLE_SIZE)


def compute_scenario(state: ScenarioState, observations: pd.DataFrame) -> pd.DataFrame:
    """
    Derive delivered and carbon-adjusted costs for every observation.

    Args:
        state: Current slider values.
        observations: Table with region, year, cost, co2, volume columns
            (e.g. ObservationTable.df). Not modified.

    Returns:
        A new DataFrame: the observation columns plus DERIVED_COLUMNS, in the
        same row order as the input.
    """
    derived = observations.copy()

    domestic = derived["region"].isin(DOMESTIC_LABELS).to_numpy()
    cost = derived["cost"].to_numpy(dtype=float)
    co2 = derived["co2"].to_numpy(dtype=float)
    volume = derived["volume"].to_numpy(dtype=float)

    # Trade adjustments: overseas pay tariff + shipping, domestic get the incentive
    tariff_adj = np.where(domestic, 0.0, state.tariff_pct / 100.0 * cost)
    shipping_adj = np.where(domestic, 0.0, float(state.shipping_cost))
    incentive_adj = np.where(domestic, float(state.incentive), 0.0)

    delivered = cost + tariff_adj + shipping_adj - incentive_adj

    derived["tariff_adj"] = tariff_adj
    derived["shipping_adj"] = shipping_adj
    derived["incentive_adj"] = incentive_adj
    derived["delivered_cost"] = delivered
    derived["carbon_adjusted_cost"] = delivered + (co2 / 1000.0) * state.carbon_price
    derived["bubble_size"] = bubble_size(volume)

    logger.debug("Recomputed %d rows for %s", len(derived), state)
    return derived
