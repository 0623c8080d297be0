"""
Head-to-head comparison of two regions for one year (US vs China by default).

Produces the rows behind the summary table: delivered cost, CO2 intensity
and carbon-adjusted cost for each side plus the signed delta (left − right).
A region missing from the requested year gives None instead of raising, and
the formatters render None as "N/A".
"""

from dataclasses import dataclass
from typing import Optional

import pandas as pd

from scenario.observations import ObservationTable
from scenario.regions import Region

NA = "N/A"

# (column in derived table, display label, kind)
COMPARISON_METRICS = [
    ("delivered_cost", "Delivered cost", "currency"),
    ("co2", "CO₂ intensity", "mass"),
    ("carbon_adjusted_cost", "Carbon-adjusted cost", "currency"),
]


@dataclass(frozen=True)
class ComparisonRow:
    metric: str
    label: str
    kind: str                   # "currency" or "mass"
    left: Optional[float]
    right: Optional[float]

    @property
    def delta(self) -> Optional[float]:
        if self.left is None or self.right is None:
            return None
        return self.left - self.right


def compare_regions(
    derived: pd.DataFrame,
    year: int,
    left: Region = Region.US,
    right: Region = Region.CHINA,
) -> list:
    """Comparison rows for left vs right in the given year."""
    table = ObservationTable(derived)
    left_row = table.get(left, year)
    right_row = table.get(right, year)

    rows = []
    for column, label, kind in COMPARISON_METRICS:
        rows.append(ComparisonRow(
            metric=column,
            label=label,
            kind=kind,
            left=None if left_row is None else float(left_row[column]),
            right=None if right_row is None else float(right_row[column]),
        ))
    return rows


# ── Formatting ───────────────────────────────────────────────────────────────

def format_currency(value: Optional[float]) -> str:
    if value is None:
        return NA
    return f"${value:,.0f}"


def format_mass(value: Optional[float]) -> str:
    if value is None:
        return NA
    return f"{value:,.0f} kg"


def _sign(value: float) -> str:
    rounded = round(value)
    if rounded > 0:
        return "+"
    if rounded < 0:
        return "-"
    return ""


def format_signed_currency(value: Optional[float]) -> str:
    """+$12 / -$40 / $0; None → N/A."""
    if value is None:
        return NA
    return f"{_sign(value)}${abs(value):,.0f}"


def format_signed_mass(value: Optional[float]) -> str:
    """+120 kg / -40 kg / 0 kg; None → N/A."""
    if value is None:
        return NA
    return f"{_sign(value)}{abs(value):,.0f} kg"


def summary_table(
    rows: list,
    left: Region = Region.US,
    right: Region = Region.CHINA,
) -> pd.DataFrame:
    """Display-ready DataFrame: Metric | <left> | <right> | Δ (left − right)."""
    records = []
    for row in rows:
        plain = format_currency if row.kind == "currency" else format_mass
        signed = format_signed_currency if row.kind == "currency" else format_signed_mass
        records.append({
            "Metric": row.label,
            left.label: plain(row.left),
            right.label: plain(row.right),
            f"Δ ({left.label} − {right.label})": signed(row.delta),
        })
    return pd.DataFrame(records)
