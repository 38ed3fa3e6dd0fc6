"""Data models for price grids, payoff curves and summary metrics"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

from ..utils.formatting import format_money, format_price


@dataclass(frozen=True)
class PriceGrid:
    """Strictly increasing underlying prices with a fixed step"""
    prices: tuple[float, ...] = ()
    step: float = 5.0

    def __len__(self) -> int:
        return len(self.prices)

    def __iter__(self) -> Iterator[float]:
        return iter(self.prices)

    @property
    def is_empty(self) -> bool:
        return not self.prices

    @property
    def min_price(self) -> Optional[float]:
        return self.prices[0] if self.prices else None

    @property
    def max_price(self) -> Optional[float]:
        return self.prices[-1] if self.prices else None


@dataclass(frozen=True)
class CurvePoint:
    """Aggregate P/L at one underlying price"""
    price: float
    pnl: float


@dataclass(frozen=True)
class PayoffCurve:
    """Ordered (price, P/L) points aligned index-for-index with a PriceGrid"""
    points: tuple[CurvePoint, ...] = ()

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[CurvePoint]:
        return iter(self.points)

    @property
    def is_empty(self) -> bool:
        return not self.points

    @property
    def prices(self) -> list[float]:
        return [p.price for p in self.points]

    @property
    def values(self) -> list[float]:
        return [p.pnl for p in self.points]

    def value_at(self, price: float) -> float:
        """P/L at a grid price; KeyError when the price is not on the grid"""
        for point in self.points:
            if point.price == price:
                return point.pnl
        raise KeyError(f"Price {price} is not on the curve")

    def to_chart_data(self, label: str = "Profit/Loss") -> dict[str, Any]:
        """Line chart payload: grid prices as labels, P/L as the single series"""
        return {
            "labels": self.prices,
            "datasets": [
                {
                    "label": label,
                    "data": self.values,
                }
            ],
        }


@dataclass(frozen=True)
class SummaryMetrics:
    """Sampled extrema and break-even prices of a payoff curve.

    has_data is False only for an empty curve; a non-empty curve with no
    break-even prices has has_data=True and an empty break_even_prices.
    """
    max_profit: Optional[float] = None
    max_loss: Optional[float] = None
    break_even_prices: tuple[float, ...] = field(default_factory=tuple)
    has_data: bool = False

    @classmethod
    def empty(cls) -> "SummaryMetrics":
        return cls()

    def format_break_even_prices(self, sep: str = ", ") -> str:
        return sep.join(format_price(p) for p in self.break_even_prices)

    def to_display(self) -> dict[str, str]:
        """Display strings for the summary panel"""
        return {
            "max_profit": format_money(self.max_profit),
            "max_loss": format_money(self.max_loss),
            "break_even_prices": self.format_break_even_prices(),
        }
