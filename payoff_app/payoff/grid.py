"""Underlying price grid generation around a strategy's strikes"""

import math
from collections.abc import Iterable
from dataclasses import asdict
from typing import Optional, Union

from ..config.defaults import GridParams
from ..config.validation import ConfigValidator
from ..data.models import Contract, ContractDraft
from ..data.parsers import parse_strike
from ..errors import ConfigurationError
from ..models.curve import PriceGrid

# Absorbs float accumulation when (max - min) is an exact multiple of step
GRID_TOLERANCE = 1e-9
PRICE_DECIMALS = 10


def collect_strikes(contracts: Iterable[Union[Contract, ContractDraft]]) -> list[float]:
    """Strike prices that parse as positive finite numbers, in input order"""
    strikes = []
    for contract in contracts:
        strike = parse_strike(contract.strike_price)
        if strike is not None:
            strikes.append(strike)
    return strikes


def generate_grid(
    contracts: Iterable[Union[Contract, ContractDraft]],
    params: Optional[GridParams] = None,
) -> PriceGrid:
    """
    Generate the sampled underlying price domain for a set of legs.

    The grid runs from min(strike) - margin to max(strike) + margin in fixed
    steps, starting exactly at the lower bound and never passing the upper
    bound. Incomplete drafts still contribute their strike when it parses.

    Args:
        contracts: Drafts and/or complete contracts
        params: Margin and step (defaults: 20 and 5)

    Returns:
        PriceGrid, empty when no strike parses

    Raises:
        ConfigurationError: If step is not positive or margin is negative
    """
    params = params or GridParams()
    errors = ConfigValidator.validate_grid_params(asdict(params))
    if errors:
        raise ConfigurationError(
            "Invalid grid parameters: " + "; ".join(f"{e.field}: {e.message}" for e in errors),
            errors=errors,
        )

    strikes = collect_strikes(contracts)
    if not strikes:
        return PriceGrid(prices=(), step=params.step)

    min_price = min(strikes) - params.margin
    max_price = max(strikes) + params.margin

    count = math.floor((max_price - min_price) / params.step + GRID_TOLERANCE) + 1
    prices = tuple(
        round(min_price + i * params.step, PRICE_DECIMALS)
        for i in range(count)
    )

    return PriceGrid(prices=prices, step=params.step)
