"""
Canonical data models for option strategy legs.

A ContractDraft is what the editing surface holds: any field may be missing
or malformed. A Contract is the parsed, complete form that the payoff
engine evaluates.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional


class OptionKind(Enum):
    """Option leg kind. UNKNOWN legs contribute zero payoff."""
    CALL = "call"
    PUT = "put"
    UNKNOWN = "unknown"


# Form field names accepted by ContractDraft.with_field
FIELD_ALIASES = {
    "type": "type",
    "kind": "type",
    "strike_price": "strike_price",
    "strikePrice": "strike_price",
    "premium": "premium",
    "quantity": "quantity",
}


@dataclass(frozen=True)
class ContractDraft:
    """Unvalidated leg as produced by normalization or edited by a user."""
    type: Any = None
    strike_price: Any = None
    premium: Any = None
    quantity: Any = None

    def with_field(self, name: str, value: Any) -> "ContractDraft":
        """Return a copy of this draft with one field replaced."""
        if name not in FIELD_ALIASES:
            raise KeyError(f"Unknown contract field: {name}")
        return replace(self, **{FIELD_ALIASES[name]: value})


@dataclass(frozen=True)
class Contract:
    """Complete option leg, safe to evaluate."""
    kind: OptionKind
    strike_price: float     # > 0
    premium: float          # >= 0, per unit
    quantity: int           # > 0 long, < 0 short

    @property
    def is_long(self) -> bool:
        return self.quantity > 0

    @property
    def is_short(self) -> bool:
        return self.quantity < 0


@dataclass(frozen=True)
class ContractParseResult:
    """Result of parsing a single draft."""

    contract: Optional[Contract] = None
    skipped_reason: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return self.contract is not None

    @classmethod
    def complete(cls, contract: Contract) -> "ContractParseResult":
        """Create result for a complete contract."""
        return cls(contract=contract)

    @classmethod
    def skipped(cls, reason: str) -> "ContractParseResult":
        """Create result for an incomplete draft."""
        return cls(skipped_reason=reason)
