"""
Contract normalization pipeline.

Turns raw option-chain records into ContractDraft values and filters
drafts down to complete Contract values for evaluation.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Optional, Union

from ..logging.config import get_contract_logger, log_contract_skipped
from .models import Contract, ContractDraft
from .parsers import contract_fields, parse_contract, parse_number

logger = logging.getLogger(__name__)


def _side_to_quantity(long_short: Any) -> Optional[int]:
    """Map a long/short flag to a single signed unit."""
    if not isinstance(long_short, str):
        return None
    side = long_short.strip().lower()
    if side == "long":
        return 1
    if side == "short":
        return -1
    return None


def _premium_from_quote(bid: Any, ask: Any) -> float:
    """Midpoint of bid and ask; NaN when either side is not numeric."""
    bid_value = parse_number(bid)
    ask_value = parse_number(ask)
    if bid_value is None or ask_value is None:
        return float("nan")
    return (bid_value + ask_value) / 2


def normalize_record(record: Any) -> ContractDraft:
    """
    Normalize one raw option record into an editable draft.

    Expected fields: strike_price, type, bid, ask, long_short. Any
    expiration_date is ignored. No validation happens here; malformed
    values are carried along and rejected later by parse_contract.

    Args:
        record: Raw record mapping

    Returns:
        ContractDraft with premium at the bid/ask midpoint and quantity +1/-1
    """
    if not isinstance(record, Mapping):
        logger.debug("Ignoring non-mapping contract record: %r", record)
        return ContractDraft()

    return ContractDraft(
        type=record.get("type"),
        strike_price=record.get("strike_price"),
        premium=_premium_from_quote(record.get("bid"), record.get("ask")),
        quantity=_side_to_quantity(record.get("long_short")),
    )


def normalize_records(records: Iterable[Any]) -> list[ContractDraft]:
    """Normalize a sequence of raw records, preserving order."""
    return [normalize_record(record) for record in records]


def parse_contracts(items: Iterable[Union[Contract, ContractDraft]]) -> list[Contract]:
    """
    Keep only the complete contracts from a mix of drafts and contracts.

    Incomplete drafts are a normal editing state; they, and contracts with
    invalid fields, are logged at debug level and excluded.
    """
    contract_logger = get_contract_logger(__name__)
    contracts = []
    for index, item in enumerate(items):
        result = parse_contract(item)
        if result.is_complete:
            contracts.append(result.contract)
        else:
            log_contract_skipped(
                contract_logger,
                index=index,
                reason=result.skipped_reason,
                context=contract_fields(item),
            )
    return contracts
