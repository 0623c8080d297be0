"""
Steel-producing regions and their fixed reference data.

Each Region member carries its display label, base production cost
(USD/ton), base CO2 intensity (kg CO2/ton), whether it counts as a
domestic producer, and the color used for its bubble. Only domestic
regions receive the incentive; only overseas regions pay tariff and
shipping.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class RegionProfile:
    """Constant data attached to one Region member."""
    label: str
    base_cost: float        # USD/ton
    base_co2: float         # kg CO2/ton
    domestic: bool
    color: str


class Region(Enum):
    """Enumerated producer regions, in chart/legend order."""

    US = RegionProfile("US", 950.0, 380.0, True, "#1f77b4")
    EU = RegionProfile("EU", 1000.0, 1850.0, False, "#ff7f0e")
    AUSTRALIA = RegionProfile("Australia", 900.0, 420.0, False, "#2ca02c")
    BRAZIL = RegionProfile("Brazil", 760.0, 440.0, False, "#17becf")
    CHINA = RegionProfile("China", 680.0, 2100.0, False, "#d62728")
    SOUTH_AFRICA = RegionProfile("South Africa", 830.0, 1750.0, False, "#9467bd")

    @property
    def label(self) -> str:
        return self.value.label

    @property
    def base_cost(self) -> float:
        return self.value.base_cost

    @property
    def base_co2(self) -> float:
        return self.value.base_co2

    @property
    def is_domestic(self) -> bool:
        return self.value.domestic

    @property
    def color(self) -> str:
        return self.value.color

    @classmethod
    def from_label(cls, label: str) -> "Region":
        """Look up a region by its display label (e.g. "South Africa")."""
        for region in cls:
            if region.label == label:
                return region
        raise ValueError(f"Unknown region: {label!r}")


# Label → Region, used to validate region columns.
REGION_BY_LABEL = {r.label: r for r in Region}

DOMESTIC_LABELS = frozenset(r.label for r in Region if r.is_domestic)
