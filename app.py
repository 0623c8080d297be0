"""
Steel Scenario Explorer — Home Page (Streamlit entry point).

This is the landing page users see first. It provides:
  1. Two navigation cards linking to the pages
  2. A key-stats row showing the data dimensions at a glance
  3. A static preview of the baseline scenario for the first year

Run: streamlit run app.py

Multipage app (sidebar order determined by numeric filename prefix):
  - pages/1_Scenario_Explorer.py → Sliders, presets, animated bubble chart
  - pages/2_About.py             → Formulas, data model, presets
"""

import logging

import plotly.graph_objects as go
import streamlit as st

from scenario import config
from scenario.data_generator import generate_observations
from scenario.regions import Region
from scenario.state import PRESETS, default_state
from scenario.transformer import compute_scenario

logging.basicConfig(level=logging.INFO)

st.set_page_config(
    page_title="Steel Scenario Explorer",
    layout="wide",
)

st.title("Steel Scenario Explorer")
st.markdown(
    "Stylized steel cost vs. carbon intensity across producer regions. "
    "Move the tariff, shipping, incentive and carbon-price levers and watch "
    "how delivered and carbon-adjusted costs shift from "
    f"{config.YEAR_START} to {config.YEAR_END}."
)

st.divider()

# ── Navigation Cards ─────────────────────────────────────────────────────────
col1, col2 = st.columns(2)

with col1:
    st.subheader("Scenario Explorer")
    st.markdown(
        "Adjust the four policy levers or pick a preset, then play the "
        "animated bubble chart year by year. Compare US and China side by side."
    )
    st.page_link("pages/1_Scenario_Explorer.py", label="Open Explorer", icon="📈")

with col2:
    st.subheader("About")
    st.markdown(
        "How delivered cost and carbon-adjusted cost are computed, "
        "and what each preset represents."
    )
    st.page_link("pages/2_About.py", label="Read About", icon="ℹ️")

st.divider()

# ── Key Stats ────────────────────────────────────────────────────────────────
c1, c2, c3, c4 = st.columns(4)
c1.metric("Regions", str(len(Region)))
c2.metric("Years", str(config.YEAR_END - config.YEAR_START + 1))
c3.metric("Policy Levers", "4")
c4.metric("Presets", str(len(PRESETS)))

# ── Baseline Preview ─────────────────────────────────────────────────────────
# Static first-year snapshot under the baseline preset; no animation here.
st.markdown(f"#### Baseline, {config.YEAR_START}")

preview = compute_scenario(
    default_state(),
    generate_observations(config.YEAR_START, config.YEAR_START, seed=config.DEFAULT_SEED),
)

fig = go.Figure()
for region in Region:
    row = preview[preview["region"] == region.label]
    fig.add_trace(go.Scatter(
        x=row["delivered_cost"],
        y=row["co2"],
        mode="markers",
        name=region.label,
        marker=dict(size=row["bubble_size"], color=region.color),
        hoverinfo="skip",
    ))

fig.update_layout(
    xaxis=dict(title="Delivered Cost ($/ton)"),
    yaxis=dict(title="CO₂ (kg/ton)"),
    height=380,
    margin=dict(l=0, r=0, t=10, b=0),
    legend=dict(
        yanchor="top", y=0.99,
        xanchor="right", x=0.99,
        bgcolor="rgba(255,255,255,0.8)",
    ),
)

st.plotly_chart(fig, use_container_width=True)
