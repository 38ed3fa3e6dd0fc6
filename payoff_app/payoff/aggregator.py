"""Strategy-level payoff curve construction"""

from collections.abc import Iterable, Sequence
from typing import Union

from ..data.models import Contract, ContractDraft
from ..data.normalizer import parse_contracts
from ..errors import CurveCalculationError
from ..logging.config import get_logger
from ..models.curve import CurvePoint, PayoffCurve, PriceGrid
from ..utils.rounding import round_half_up
from .evaluator import payoff_at

logger = get_logger(__name__)


def aggregate_payoff(contracts: Sequence[Contract], price: float) -> float:
    """Unrounded sum of every leg's payoff at one price"""
    return sum((payoff_at(contract, price) for contract in contracts), 0.0)


def build_curve(
    contracts: Iterable[Union[Contract, ContractDraft]],
    grid: PriceGrid,
    precision: int = 2,
) -> PayoffCurve:
    """
    Build the aggregate payoff curve over a price grid.

    Drafts are parsed once; incomplete ones are excluded rather than
    evaluated with defaulted fields. Each aggregate value is rounded to
    `precision` decimals here, so downstream analysis only ever sees
    rounded values.

    Args:
        contracts: Drafts and/or complete contracts
        grid: Underlying prices to sample
        precision: Decimal places kept on each value

    Returns:
        PayoffCurve aligned with the grid (empty for an empty grid)
    """
    if grid.is_empty:
        return PayoffCurve()

    complete = parse_contracts(contracts)

    try:
        points = tuple(
            CurvePoint(price=price, pnl=round_half_up(aggregate_payoff(complete, price), precision))
            for price in grid
        )
    except (ArithmeticError, ValueError) as e:
        raise CurveCalculationError(
            f"Payoff curve calculation failed: {e}",
            grid_size=len(grid),
            contract_count=len(complete),
        ) from e

    logger.debug(
        "Payoff curve built",
        grid_size=len(grid),
        contract_count=len(complete),
    )
    return PayoffCurve(points=points)
