from .chart import (
    plot_outcome_shares,
    plot_scatter,
    plot_top_bar,
)

__all__ = [
    "plot_outcome_shares",
    "plot_scatter",
    "plot_top_bar",
]
