"""Default configuration parameters for the payoff engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GridParams:
    """Underlying price grid parameters."""
    margin: float = 20.0                # Distance below min strike / above max strike
    step: float = 5.0                   # Fixed spacing between grid prices


@dataclass(frozen=True)
class CurveParams:
    """Payoff curve construction parameters."""
    precision: int = 2                  # Decimal places kept on each P/L value
    series_label: str = "Profit/Loss"   # Chart dataset label


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    grid: GridParams
    curve: CurveParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        grid=GridParams(),
        curve=CurveParams(),
    )
