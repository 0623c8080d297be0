"""
About page — explains what the Steel Scenario Explorer computes.

Sections:
  1. Hero: one-line description
  2. How It Works: 3-column layout (Generate → Adjust → Compare)
  3. The Formulas: delivered and carbon-adjusted cost
  4. The Data: region reference table
  5. Presets: the canned lever settings
"""

import pandas as pd
import streamlit as st

from scenario import config
from scenario.regions import Region
from scenario.state import FIELD_LABELS, PRESET_LABELS, PRESETS

st.set_page_config(page_title="About — Steel Scenario Explorer", layout="wide")

# ── Hero ──────────────────────────────────────────────────────────────────────
st.title("About Steel Scenario Explorer")
st.markdown(
    """
    A stylized model of how **trade policy** and **carbon pricing** change the
    cost of steel delivered to a domestic (US) buyer. The numbers are synthetic;
    the point is the shape of the trade-off, not a forecast.
    """
)

st.divider()

# ── How It Works ──────────────────────────────────────────────────────────────
st.header("How It Works")

col1, col2, col3 = st.columns(3)

with col1:
    st.subheader("1. Generate")
    st.markdown(
        f"""
        One observation per **region and year** ({config.YEAR_START}–{config.YEAR_END}):
        production cost, CO₂ intensity and volume. Costs and emissions follow a
        linear trend with a little random noise; the domestic producer improves
        faster than overseas producers.
        """
    )

with col2:
    st.subheader("2. Adjust")
    st.markdown(
        """
        The four sidebar levers are applied to every row. Overseas producers
        pay the **tariff** and **shipping**; the domestic producer receives
        the **incentive**. Everyone pays the **carbon price** on their CO₂.
        """
    )

with col3:
    st.subheader("3. Compare")
    st.markdown(
        """
        The bubble chart animates year by year (bubble area tracks volume).
        The summary table puts the US and China side by side with signed
        differences.
        """
    )

st.divider()

# ── Formulas ─────────────────────────────────────────────────────────────────
st.header("The Formulas")

st.latex(r"\text{delivered} = \text{cost} + \underbrace{\tfrac{t}{100}\,\text{cost} + s}_{\text{overseas}} - \underbrace{i}_{\text{domestic}}")
st.latex(r"\text{carbon-adjusted} = \text{delivered} + \frac{\text{CO}_2}{1000}\,p_{\text{carbon}}")
st.markdown(
    f"""
    - The tariff is **ad valorem**: a percentage of the producer's own cost.
    - CO₂ is in kg per ton of steel, the carbon price in $ per ton of CO₂.
    - Bubble size is `sqrt(volume) / {config.BUBBLE_SCALE:g}`, never smaller
      than {config.MIN_BUBBLE_SIZE:g}.
    """
)

st.divider()

# ── Data ─────────────────────────────────────────────────────────────────────
st.header("The Data")

st.dataframe(
    pd.DataFrame([
        {
            "Region": r.label,
            "Base cost ($/ton)": f"${r.base_cost:,.0f}",
            "Base CO₂ (kg/ton)": f"{r.base_co2:,.0f}",
            "Type": "Domestic" if r.is_domestic else "Overseas",
        }
        for r in Region
    ]),
    use_container_width=True,
    hide_index=True,
)

st.divider()

# ── Presets ──────────────────────────────────────────────────────────────────
st.header("Presets")

st.dataframe(
    pd.DataFrame([
        {"Preset": PRESET_LABELS[name], **{FIELD_LABELS[k]: v for k, v in state.as_dict().items()}}
        for name, state in PRESETS.items()
    ]),
    use_container_width=True,
    hide_index=True,
)
