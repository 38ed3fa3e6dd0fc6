"""Display formatting for prices and money amounts."""

from typing import Optional


def format_price(value: float) -> str:
    """Shortest text for a grid price: 80.0 -> '80', 82.5 -> '82.5'."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_money(value: Optional[float], precision: int = 2, missing: str = "N/A") -> str:
    """Format a P/L amount as '$12.34' / '$-5.00'."""
    if value is None:
        return missing
    return f"${value:.{precision}f}"
