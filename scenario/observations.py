"""
Observation table with lookup methods for the transformer and the UI.

Wraps the generated (region, year, cost, co2, volume) DataFrame, builds a
dictionary index for O(1) access to a single (region, year) row, and
handles reading/writing the table as CSV under data/.
"""

import logging
import os
from typing import Optional

import pandas as pd

from scenario import config
from scenario.data_generator import OBSERVATION_COLUMNS, generate_observations
from scenario.regions import REGION_BY_LABEL, Region

logger = logging.getLogger(__name__)


class ObservationTable:
    """The per-session observation table and its lookups.

    Also wraps a derived table (observation columns plus transformer output),
    so the summary can use the same (region, year) lookup.
    """

    def __init__(self, df: pd.DataFrame):
        missing = [c for c in OBSERVATION_COLUMNS if c not in df.columns]
        if missing:
            raise ValueError(f"Observation table is missing columns: {missing}")

        unknown = sorted(set(df["region"]) - set(REGION_BY_LABEL))
        if unknown:
            raise ValueError(f"Observation table has unknown regions: {unknown}")

        if df.duplicated(["region", "year"]).any():
            dupes = df.loc[df.duplicated(["region", "year"]), ["region", "year"]]
            raise ValueError(
                "Observation table has duplicate (region, year) rows: "
                f"{list(dupes.itertuples(index=False, name=None))}"
            )

        # Observation columns first; derived columns (if any) ride along
        extra = [c for c in df.columns if c not in OBSERVATION_COLUMNS]
        self.df = df[OBSERVATION_COLUMNS + extra].reset_index(drop=True)
        self._build_index()

    def _build_index(self):
        # (region label, year) → row position
        self._index = {
            (region, int(year)): pos
            for pos, (region, year) in enumerate(zip(self.df["region"], self.df["year"]))
        }

    # ── Constructors ──────────────────────────────────────────────────────
    @classmethod
    def generate(
        cls,
        start: int = config.YEAR_START,
        end: int = config.YEAR_END,
        seed: Optional[int] = None,
        noise_scale: float = 1.0,
    ) -> "ObservationTable":
        return cls(generate_observations(start, end, seed=seed, noise_scale=noise_scale))

    @classmethod
    def from_csv(cls, path: Optional[str] = None) -> "ObservationTable":
        if path is None:
            path = os.path.join(config.DATA_DIR, config.OBSERVATIONS_CSV)
        logger.info("Loading observations from %s", path)
        return cls(pd.read_csv(path))

    def to_csv(self, path: Optional[str] = None) -> str:
        """Write the table as CSV; returns the path written."""
        if path is None:
            path = os.path.join(config.DATA_DIR, config.OBSERVATIONS_CSV)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        self.df.to_csv(path, index=False)
        logger.info("Wrote %d observations to %s", len(self.df), path)
        return path

    # ── Queries ───────────────────────────────────────────────────────────
    def __len__(self):
        return len(self.df)

    def years(self) -> list:
        """Sorted list of distinct years."""
        return sorted(int(y) for y in self.df["year"].unique())

    def regions(self) -> list:
        """Regions present in the table, in Region declaration order."""
        present = set(self.df["region"])
        return [r for r in Region if r.label in present]

    def get(self, region: Region, year: int) -> Optional[dict]:
        """Return the observation for (region, year) as a dict, or None if absent."""
        pos = self._index.get((region.label, int(year)))
        if pos is None:
            return None
        return self.df.iloc[pos].to_dict()
