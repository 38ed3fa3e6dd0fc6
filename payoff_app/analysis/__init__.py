"""Payoff curve analysis: sampled extrema and break-even prices"""

from .curve_analyzer import break_even_prices, max_loss, max_profit, summarize

__all__ = [
    "break_even_prices",
    "max_loss",
    "max_profit",
    "summarize",
]
