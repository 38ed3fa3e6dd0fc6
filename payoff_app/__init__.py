"""
Payoff App - Options Strategy Payoff Engine

Models a multi-leg options strategy and computes its profit/loss profile
at expiration over a sampled grid of underlying prices, together with
max profit, max loss and break-even prices.
"""

__version__ = "0.1.0"
__author__ = "Payoff App Team"
