"""
Derived data models module.

Immutable price grid, payoff curve and summary metric structures produced
fresh on every analysis.
"""
