from __future__ import annotations

import matplotlib.pyplot as plt
import pandas as pd

from tax_impact_sim.report.formatting import currency_axis, percent_axis
from tax_impact_sim.sim.policy import RateInputs, rate_comparison_frame

SERIES_STYLE = {
    # column: (legend label, color, axis)
    "revenue":    ("Government Revenue (Trillion USD)", "#8884d8", "left"),
    "growth":     ("Economic Growth (%)",               "#82ca9d", "right"),
    "compliance": ("Tax Compliance (%)",                "#ffc658", "right"),
    "mobility":   ("Economic Mobility Index",           "#ff7300", "right"),
}


def plot_projection(df: pd.DataFrame, title: str = "10-Year Economic Projections"):
    """
    Line chart of a projection frame (see projection_frame).
    Revenue on the left axis in dollars; the other three share a right twin axis.
    Returns the matplotlib Figure.
    """
    fig, ax_left = plt.subplots(figsize=(10, 5))
    ax_right = ax_left.twinx()

    lines = []
    for col, (label, color, side) in SERIES_STYLE.items():
        ax = ax_left if side == "left" else ax_right
        lines += ax.plot(df["year"], df[col], marker="o", color=color, label=label)

    ax_left.set_title(title)
    ax_left.set_xlabel("Year")
    ax_left.set_ylabel("Revenue (trillion USD)")
    ax_right.set_ylabel("Percent / index")
    ax_left.grid(True, linestyle="--", alpha=0.4)
    ax_left.set_xticks(list(df["year"]))
    currency_axis(ax_left, decimals=1)
    ax_left.legend(lines, [ln.get_label() for ln in lines], loc="upper left", fontsize="small")
    fig.tight_layout()
    return fig


def plot_rate_comparison(rates: RateInputs, title: str = "Tax Rate Comparison"):
    """Bar chart of the three rates with a percent y-axis."""
    data = rate_comparison_frame(rates)
    fig, ax = plt.subplots(figsize=(8, 4))
    bars = ax.bar(data["name"], data["rate"], color="#8884d8")
    for bar, rate in zip(bars, data["rate"]):
        ax.annotate(f"{rate*100:.1f}%", (bar.get_x() + bar.get_width() / 2, bar.get_height()),
                    ha="center", va="bottom", fontsize="small")
    ax.set_title(title)
    ax.set_ylabel("Rate")
    ax.grid(True, axis="y", linestyle="--", alpha=0.4)
    percent_axis(ax, decimals=0)
    fig.tight_layout()
    return fig
