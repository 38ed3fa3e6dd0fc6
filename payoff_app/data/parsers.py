"""
Field parsers for converting editable contract values to typed values.

Every parser here is total: bad input produces None (or a skipped result),
never an exception. The only raising function is parse_records_payload,
which rejects a payload that is not a record list at all.
"""

import json
import math
from typing import Any, Optional, Union

from ..errors import MalformedDataError
from .models import Contract, ContractDraft, ContractParseResult, OptionKind


def parse_number(value: Any) -> Optional[float]:
    """
    Parse a finite float from a number or numeric string.

    Returns:
        The float value, or None for missing, non-numeric, NaN or infinite input
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(number):
        return None
    return number


def parse_strike(value: Any) -> Optional[float]:
    """Parse a strike price; must be a positive finite number."""
    strike = parse_number(value)
    if strike is None or strike <= 0:
        return None
    return strike


def parse_premium(value: Any) -> Optional[float]:
    """Parse a premium; must be a non-negative finite number."""
    premium = parse_number(value)
    if premium is None or premium < 0:
        return None
    return premium


def parse_quantity(value: Any) -> Optional[int]:
    """
    Parse a signed leg quantity.

    Integral floats and integral numeric strings ("2", "-1", "3.0") are
    accepted. Zero is treated as missing since it has no position.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        quantity = value
    else:
        number = parse_number(value)
        if number is None or not number.is_integer():
            return None
        quantity = int(number)

    if quantity == 0:
        return None
    return quantity


def parse_kind(value: Any) -> Optional[OptionKind]:
    """
    Parse an option kind, case-insensitive and trimmed.

    Returns:
        CALL or PUT for recognized names, UNKNOWN for any other non-empty
        string, None when the value is missing or not a string
    """
    if isinstance(value, OptionKind):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip().lower()
    if not text:
        return None
    if text == "call":
        return OptionKind.CALL
    if text == "put":
        return OptionKind.PUT
    return OptionKind.UNKNOWN


def contract_fields(item: Union[Contract, ContractDraft]) -> dict[str, Any]:
    """Raw field values of a draft or contract, keyed by draft field name."""
    return {
        "type": item.kind if isinstance(item, Contract) else item.type,
        "strike_price": item.strike_price,
        "premium": item.premium,
        "quantity": item.quantity,
    }


def parse_contract(item: Union[Contract, ContractDraft]) -> ContractParseResult:
    """
    Parse a draft into a complete contract.

    Contracts built directly by callers are checked the same way, so a
    NaN premium or a non-numeric strike is skipped rather than evaluated.

    Args:
        item: Draft or contract to parse

    Returns:
        ContractParseResult holding the contract or the reason it was skipped
    """
    fields = contract_fields(item)

    kind = parse_kind(fields["type"])
    if kind is None:
        return ContractParseResult.skipped(f"missing option type: {fields['type']!r}")

    strike = parse_strike(fields["strike_price"])
    if strike is None:
        return ContractParseResult.skipped(f"invalid strike price: {fields['strike_price']!r}")

    premium = parse_premium(fields["premium"])
    if premium is None:
        return ContractParseResult.skipped(f"invalid premium: {fields['premium']!r}")

    quantity = parse_quantity(fields["quantity"])
    if quantity is None:
        return ContractParseResult.skipped(f"invalid quantity: {fields['quantity']!r}")

    return ContractParseResult.complete(Contract(
        kind=kind,
        strike_price=strike,
        premium=premium,
        quantity=quantity,
    ))


def parse_records_payload(payload: Union[str, bytes, list]) -> list[Any]:
    """
    Parse a raw record list, given either as JSON text or as a list.

    Args:
        payload: JSON array text or an already decoded list of mappings

    Returns:
        The decoded record list

    Raises:
        MalformedDataError: If the payload is not valid JSON or not a list
    """
    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MalformedDataError(
                f"Invalid JSON record payload: {e}",
                raw_data=str(payload)[:100],
                expected_format="json array",
            ) from e

    if not isinstance(payload, list):
        raise MalformedDataError(
            f"Record payload must be a list, got {type(payload).__name__}",
            raw_data=str(payload)[:100],
            expected_format="json array",
        )

    return payload
