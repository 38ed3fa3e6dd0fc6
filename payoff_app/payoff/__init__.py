"""Payoff engine: price grid generation, per-leg payoff and curve aggregation"""

from .aggregator import build_curve
from .evaluator import payoff_at
from .grid import generate_grid

__all__ = [
    "build_curve",
    "generate_grid",
    "payoff_at",
]
