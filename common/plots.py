# common/plots.py
from __future__ import annotations
from typing import Optional

import pandas as pd
import matplotlib.pyplot as plt

DEFAULT_FIGSIZE = (6.6, 2.6)
BAR_COLOR = "#2563eb"
TOP_N_DECKS = 10

def _new_ax(ax=None):
    """Return a compact figure/axes when ax is None; otherwise reuse the axes."""
    if ax is None:
        fig, ax = plt.subplots(figsize=DEFAULT_FIGSIZE, constrained_layout=True)
    else:
        fig = ax.figure
    return fig, ax


def plot_deck_winrate(summary: pd.DataFrame,
                      ax: Optional[plt.Axes] = None,
                      top_n: int = TOP_N_DECKS):
    """Horizontal bars of game win rate for the most played decks."""
    fig, ax = _new_ax(ax)
    data = summary.dropna(subset=["WinRate"]).head(top_n)
    if data.empty:
        ax.text(0.5, 0.5, "No scored games yet", ha="center", va="center", transform=ax.transAxes)
        ax.set_axis_off()
        return fig

    # Most played deck on top
    data = data.iloc[::-1]
    bars = ax.barh(data["PlayerDeck"].astype(str), data["WinRate"], color=BAR_COLOR)
    for bar, (_, row) in zip(bars, data.iterrows()):
        ax.text(bar.get_width() + 1, bar.get_y() + bar.get_height() / 2,
                f'{row["WinRate"]:.0f}% ({int(row["GameWins"])}-{int(row["GameLosses"])})',
                va="center", fontsize=8)
    ax.axvline(50, color="grey", linestyle="--", linewidth=0.8)
    ax.set_xlim(0, 110)
    ax.set_xlabel("Game win rate (%)")
    ax.spines[["top", "right"]].set_visible(False)
    return fig
