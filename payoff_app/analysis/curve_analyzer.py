"""Queries over a rounded payoff curve"""

from ..errors import EmptyCurveError
from ..models.curve import PayoffCurve, SummaryMetrics


def max_profit(curve: PayoffCurve) -> float:
    """
    Largest sampled P/L value.

    Raises:
        EmptyCurveError: If the curve has no points
    """
    if curve.is_empty:
        raise EmptyCurveError("Cannot compute max profit of an empty curve", metric_name="max_profit")
    return max(curve.values)


def max_loss(curve: PayoffCurve) -> float:
    """
    Smallest sampled P/L value.

    Raises:
        EmptyCurveError: If the curve has no points
    """
    if curve.is_empty:
        raise EmptyCurveError("Cannot compute max loss of an empty curve", metric_name="max_loss")
    return min(curve.values)


def break_even_prices(curve: PayoffCurve) -> tuple[float, ...]:
    """Grid prices whose P/L is zero or negative, in ascending order"""
    return tuple(sorted(point.price for point in curve if point.pnl <= 0))


def summarize(curve: PayoffCurve) -> SummaryMetrics:
    """All summary metrics at once; an empty curve gives SummaryMetrics.empty()"""
    if curve.is_empty:
        return SummaryMetrics.empty()

    return SummaryMetrics(
        max_profit=max_profit(curve),
        max_loss=max_loss(curve),
        break_even_prices=break_even_prices(curve),
        has_data=True,
    )
