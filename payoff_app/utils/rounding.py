"""Currency-style rounding for payoff values."""

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, precision: int = 2) -> float:
    """
    Round to a fixed number of decimals, ties away from zero.

    Rounds the exact binary value of the float, so results match
    fixed-point display formatting (0.125 -> 0.13, -0.125 -> -0.13).
    Negative zero is normalized to 0.0.

    Args:
        value: Finite float to round
        precision: Number of decimal places to keep

    Returns:
        Rounded float
    """
    quantum = Decimal(1).scaleb(-precision)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded) + 0.0
