"""Single-leg profit/loss at expiration"""

from ..data.models import Contract, OptionKind


def payoff_at(contract: Contract, price: float) -> float:
    """
    Profit/loss of one complete leg at an underlying price at expiration.

    Call: (price - strike - premium) * quantity above the strike,
          -premium * quantity otherwise.
    Put:  (strike - price - premium) * quantity below the strike,
          -premium * quantity otherwise.
    Unknown kinds contribute nothing.

    Args:
        contract: Complete contract
        price: Underlying price

    Returns:
        Unrounded P/L for the leg
    """
    strike = contract.strike_price
    premium = contract.premium
    quantity = contract.quantity

    if contract.kind is OptionKind.CALL:
        if price > strike:
            return (price - strike - premium) * quantity
        return -premium * quantity

    if contract.kind is OptionKind.PUT:
        if price < strike:
            return (strike - price - premium) * quantity
        return -premium * quantity

    # OptionKind.UNKNOWN: ignored leg
    return 0.0
