"""
Shared constants for the steel scenario explorer.

Year range, slider bounds, random-generation parameters, and bubble sizing
live here so the generator, the transformer, the Streamlit pages and the
data script all agree on the same numbers.
"""

import os

# ── Year range ───────────────────────────────────────────────────────────────
YEAR_START = 2025
YEAR_END = 2050          # inclusive

# ── Random generation ────────────────────────────────────────────────────────
DEFAULT_SEED = 42
COST_NOISE_SD = 5.0      # USD/ton
CO2_NOISE_SD = 10.0      # kg CO2/ton

# Linear trends per year index: (domestic, overseas)
COST_TREND = (-8.0, 5.0)
CO2_TREND = (-10.0, -3.0)

VOLUME_BASE = 50_000.0   # tons
VOLUME_GROWTH = 1_500.0  # tons per year index
VOLUME_JITTER = 30_000.0 # uniform noise width
MIN_VOLUME = 1_000.0

# ── Bubble sizing ────────────────────────────────────────────────────────────
BUBBLE_SCALE = 25.0      # size = sqrt(volume) / BUBBLE_SCALE
MIN_BUBBLE_SIZE = 4.0

# ── Slider bounds: (min, max, step) ──────────────────────────────────────────
SLIDER_BOUNDS = {
    "tariff_pct": (0, 50, 1),
    "shipping_cost": (0, 200, 5),
    "incentive": (0, 150, 5),
    "carbon_price": (0, 300, 5),
}

# ── Chart animation ──────────────────────────────────────────────────────────
FRAME_DURATION_MS = 700
CHART_HEIGHT = 650

# ── Files ────────────────────────────────────────────────────────────────────
DATA_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "data")
OBSERVATIONS_CSV = "observations.csv"
