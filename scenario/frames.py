"""
Animation frame assembly and the animated Plotly bubble chart.

build_frames() partitions the derived table by year into ordered Frame
records (per-region x / y / size / color / hover text). build_figure()
turns those frames into a go.Figure with one trace per region, a year
slider, and Play / Pause buttons. Plotly owns the rendering, hit-testing
and animation timing from there.
"""

from dataclasses import dataclass, field

import pandas as pd
import plotly.graph_objects as go

from scenario import config
from scenario.regions import Region

X_FIELDS = {
    "delivered_cost": "Delivered Cost ($/ton)",
    "carbon_adjusted_cost": "Carbon-Adjusted Cost ($/ton)",
}
Y_TITLE = "CO₂ (kg/ton)"


@dataclass
class Frame:
    """One year's snapshot of every region present that year."""
    year: int
    regions: list = field(default_factory=list)   # region labels, Region order
    x: list = field(default_factory=list)
    y: list = field(default_factory=list)
    size: list = field(default_factory=list)
    color: list = field(default_factory=list)
    text: list = field(default_factory=list)

    @property
    def name(self) -> str:
        return str(self.year)

    def index(self, region: Region):
        """Position of region in this frame, or None if it is absent."""
        if region.label not in self.regions:
            return None
        return self.regions.index(region.label)

    def point(self, region: Region):
        """(x, y, size) for a region in this frame, or None if it is absent."""
        i = self.index(region)
        if i is None:
            return None
        return self.x[i], self.y[i], self.size[i]


def _region_order(label: str) -> int:
    return list(Region).index(Region.from_label(label))


def build_frames(derived: pd.DataFrame, x_field: str = "delivered_cost") -> list:
    """Group the derived table into per-year frames, ordered by year."""
    if x_field not in X_FIELDS:
        raise ValueError(f"x_field must be one of {list(X_FIELDS)}, got {x_field!r}")

    frames = []
    for year in sorted(derived["year"].unique()):
        rows = derived[derived["year"] == year]
        rows = rows.iloc[rows["region"].map(_region_order).argsort(kind="stable").to_numpy()]
        frames.append(Frame(
            year=int(year),
            regions=rows["region"].tolist(),
            x=rows[x_field].tolist(),
            y=rows["co2"].tolist(),
            size=rows["bubble_size"].tolist(),
            color=[Region.from_label(r).color for r in rows["region"]],
            text=[f"{r}<br>{int(year)}" for r in rows["region"]],
        ))
    return frames


def _region_traces(frame: Frame, x_title: str) -> list:
    """One scatter trace per region so the legend lists every region.

    A region missing from this year still gets an empty trace, keeping the
    trace count identical across frames.
    """
    hover = "%{text}<br>" + x_title + ": $%{x:,.0f}<br>CO₂: %{y:,.0f} kg/t<extra></extra>"
    traces = []
    for region in Region:
        i = frame.index(region)
        if i is None:
            x, y, size, text, color = [], [], [], [], region.color
        else:
            x, y, size = [frame.x[i]], [frame.y[i]], [frame.size[i]]
            text, color = [frame.text[i]], frame.color[i]
        traces.append(go.Scatter(
            x=x,
            y=y,
            mode="markers",
            name=region.label,
            text=text,
            marker=dict(size=size, color=color, line=dict(width=1, color="white")),
            hovertemplate=hover,
        ))
    return traces


def _axis_range(values: pd.Series, pad_frac: float = 0.08) -> list:
    lo, hi = float(values.min()), float(values.max())
    pad = (hi - lo) * pad_frac or 1.0
    return [lo - pad, hi + pad]


def build_figure(
    derived: pd.DataFrame,
    x_field: str = "delivered_cost",
    title: str = "Steel cost vs CO₂ intensity",
    height: int = config.CHART_HEIGHT,
) -> go.Figure:
    """Animated bubble chart: first year as the initial view, one frame per year."""
    frames = build_frames(derived, x_field=x_field)
    if not frames:
        fig = go.Figure()
        fig.update_layout(title=title, height=height)
        return fig

    fig = go.Figure(
        data=_region_traces(frames[0], X_FIELDS[x_field]),
        frames=[go.Frame(name=f.name, data=_region_traces(f, X_FIELDS[x_field])) for f in frames],
    )

    # Fixed ranges across all years so the animation doesn't rescale per frame
    fig.update_layout(
        title=title,
        height=height,
        xaxis=dict(title=X_FIELDS[x_field], range=_axis_range(derived[x_field])),
        yaxis=dict(title=Y_TITLE, range=_axis_range(derived["co2"])),
        showlegend=True,
        legend=dict(x=1, y=1),
        margin=dict(l=40, r=20, t=60, b=40),
        sliders=[dict(
            active=0,
            currentvalue=dict(prefix="Year: "),
            pad=dict(t=50),
            steps=[
                dict(
                    label=f.name,
                    method="animate",
                    args=[[f.name], dict(mode="immediate", frame=dict(duration=0, redraw=True))],
                )
                for f in frames
            ],
        )],
        updatemenus=[dict(
            type="buttons",
            showactive=False,
            x=0.0, y=-0.12,
            xanchor="left", yanchor="top",
            direction="left",
            buttons=[
                dict(
                    label="Play",
                    method="animate",
                    args=[None, dict(frame=dict(duration=config.FRAME_DURATION_MS, redraw=True),
                                     fromcurrent=True)],
                ),
                dict(
                    label="Pause",
                    method="animate",
                    args=[[None], dict(mode="immediate", frame=dict(duration=0, redraw=False))],
                ),
            ],
        )],
    )
    return fig
