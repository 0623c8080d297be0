"""
Scenario Explorer page — sliders, presets, animated chart, US vs China table.

Layout:
  - Sidebar: preset buttons, four policy sliders (tariff, shipping,
    incentive, carbon price), x-axis selector, data seed controls
  - Main area:
    1. Metric cards for the comparison year (US / China delivered cost)
    2. Animated bubble chart (one frame per year, Play / Pause + year slider)
    3. Summary table: US vs China delivered cost, CO₂, carbon-adjusted cost
    4. Full derived table in an expander

Data flow: ObservationTable (cached per seed) → ScenarioState (from widgets)
→ transformer.compute_scenario() → frames.build_figure() / summary.compare_regions()

Lever values live under non-widget "lever_<field>" keys and are copied into
the slider keys at the top of every run. Streamlit drops widget state when
the user switches pages; the lever keys survive, so the chosen scenario is
still there on return. Preset buttons write all four lever keys inside one
on_click callback, so the rerun that follows always sees the complete preset.
"""

import logging

import numpy as np
import streamlit as st

from scenario import config
from scenario.data_generator import generate_observations
from scenario.frames import X_FIELDS, build_figure
from scenario.observations import ObservationTable
from scenario.regions import Region
from scenario.state import (
    FIELD_LABELS, FIELD_NAMES, PRESET_LABELS, PRESETS,
    apply_preset, default_state, update_state,
)
from scenario.summary import compare_regions, format_currency, summary_table
from scenario.transformer import compute_scenario

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@st.cache_data
def load_observations(start: int, end: int, seed: int):
    return generate_observations(start, end, seed=seed)


def _lever_key(name: str) -> str:
    return f"lever_{name}"


def _init_session():
    if "seed" not in st.session_state:
        st.session_state["seed"] = config.DEFAULT_SEED
    for name, value in default_state().as_dict().items():
        if _lever_key(name) not in st.session_state:
            st.session_state[_lever_key(name)] = value
        # Re-seed the slider from the lever value
        st.session_state[name] = st.session_state[_lever_key(name)]


def _on_slider(name: str):
    st.session_state[_lever_key(name)] = st.session_state[name]


def _on_preset(name: str):
    # Replace all four levers at once before the rerun
    preset = apply_preset(name)
    for field_name, value in preset.as_dict().items():
        st.session_state[_lever_key(field_name)] = value
        st.session_state[field_name] = value
    logger.info("Applied preset %s: %s", name, preset)


def _on_regenerate():
    st.session_state["seed"] = int(np.random.default_rng().integers(0, 2**31 - 1))
    logger.info("Regenerated observations with seed %d", st.session_state["seed"])


st.set_page_config(page_title="Scenario Explorer — Steel Scenario Explorer", layout="wide")

_init_session()

# ── Sidebar: Inputs ──────────────────────────────────────────────────────
with st.sidebar:
    st.header("Scenario")

    st.markdown("**Presets**")
    preset_cols = st.columns(2)
    for i, name in enumerate(PRESETS):
        preset_cols[i % 2].button(
            PRESET_LABELS[name],
            key=f"preset_{name}",
            on_click=_on_preset,
            args=(name,),
            use_container_width=True,
        )

    st.divider()

    for name in FIELD_NAMES:
        lo, hi, step = config.SLIDER_BOUNDS[name]
        st.slider(
            FIELD_LABELS[name],
            min_value=float(lo),
            max_value=float(hi),
            step=float(step),
            key=name,
            on_change=_on_slider,
            args=(name,),
        )

    st.divider()

    x_field = st.radio(
        "X axis",
        list(X_FIELDS),
        format_func=lambda f: X_FIELDS[f],
    )

    with st.expander("Data"):
        st.caption(f"Seed: {st.session_state['seed']}")
        st.button("Regenerate data", on_click=_on_regenerate, use_container_width=True)

# ── Compute ──────────────────────────────────────────────────────────────
state = update_state(
    default_state(), **{name: float(st.session_state[name]) for name in FIELD_NAMES}
)

table = ObservationTable(
    load_observations(config.YEAR_START, config.YEAR_END, st.session_state["seed"])
)
derived = compute_scenario(state, table.df)
years = table.years()

# ── Main area ─────────────────────────────────────────────────────────────
st.title("Steel Scenario Explorer")
st.caption(
    "Delivered and carbon-adjusted steel cost by region, "
    f"{years[0]}–{years[-1]}"
)

compare_year = st.select_slider("Comparison year", options=years, value=years[0])

rows = compare_regions(derived, compare_year, Region.US, Region.CHINA)
by_metric = {r.metric: r for r in rows}

col1, col2, col3, col4 = st.columns(4)
col1.metric("US delivered", format_currency(by_metric["delivered_cost"].left))
col2.metric("China delivered", format_currency(by_metric["delivered_cost"].right))
col3.metric("US carbon-adjusted", format_currency(by_metric["carbon_adjusted_cost"].left))
col4.metric("China carbon-adjusted", format_currency(by_metric["carbon_adjusted_cost"].right))

fig = build_figure(derived, x_field=x_field)
st.plotly_chart(fig, use_container_width=True)

st.subheader(f"US vs China, {compare_year}")
st.dataframe(summary_table(rows), use_container_width=True, hide_index=True)

with st.expander("Derived table"):
    st.dataframe(
        derived.round(2), use_container_width=True, hide_index=True,
    )
