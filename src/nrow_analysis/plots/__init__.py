from .chart import (
    plot_chain_histogram,
    plot_growth,
)

__all__ = [
    "plot_chain_histogram",
    "plot_growth",
]
