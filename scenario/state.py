"""
Scenario state: the four policy levers behind the sliders.

ScenarioState is a frozen dataclass. Every slider move or preset click
produces a new record through update_state() / apply_preset(); nothing
mutates a state in place, so the transformer always sees a complete,
consistent set of four values.
"""

from dataclasses import dataclass, fields, replace

from scenario import config


@dataclass(frozen=True)
class ScenarioState:
    """Policy levers applied on top of the observation table."""
    tariff_pct: float = 10.0      # % of cost, overseas only
    shipping_cost: float = 60.0   # USD/ton, overseas only
    incentive: float = 40.0       # USD/ton, domestic only
    carbon_price: float = 75.0    # USD/ton CO2

    def as_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


FIELD_NAMES = tuple(f.name for f in fields(ScenarioState))

FIELD_LABELS = {
    "tariff_pct": "Tariff (%)",
    "shipping_cost": "Shipping ($/ton)",
    "incentive": "Domestic incentive ($/ton)",
    "carbon_price": "Carbon price ($/ton CO₂)",
}

# Canned scenarios selectable from the preset buttons.
PRESETS = {
    "baseline": ScenarioState(tariff_pct=10.0, shipping_cost=60.0, incentive=40.0, carbon_price=75.0),
    "highTariff": ScenarioState(tariff_pct=30.0, shipping_cost=100.0, incentive=30.0, carbon_price=50.0),
    "carbon2030": ScenarioState(tariff_pct=8.0, shipping_cost=50.0, incentive=60.0, carbon_price=130.0),
    "carbon2050": ScenarioState(tariff_pct=5.0, shipping_cost=40.0, incentive=80.0, carbon_price=200.0),
}

PRESET_LABELS = {
    "baseline": "Baseline",
    "highTariff": "High tariff",
    "carbon2030": "Carbon 2030",
    "carbon2050": "Carbon 2050",
}


def _validate(name: str, value: float):
    if name not in config.SLIDER_BOUNDS:
        raise ValueError(f"Unknown scenario field: {name!r}")
    lo, hi, _ = config.SLIDER_BOUNDS[name]
    if not lo <= value <= hi:
        raise ValueError(f"{name}={value} is outside [{lo}, {hi}]")


def update_state(state: ScenarioState, **changes) -> ScenarioState:
    """Return a new state with the given fields replaced.

    Raises ValueError for unknown fields or values outside the slider bounds.
    """
    for name, value in changes.items():
        _validate(name, value)
    return replace(state, **changes)


def apply_preset(name: str) -> ScenarioState:
    """Return the preset state for name; all four fields come from the preset."""
    try:
        return PRESETS[name]
    except KeyError:
        raise ValueError(
            f"Unknown preset {name!r}; expected one of {sorted(PRESETS)}"
        ) from None


def default_state() -> ScenarioState:
    return PRESETS["baseline"]
