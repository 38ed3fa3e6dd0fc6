"""
Error classification for strategy payoff analysis.

Data quality errors describe bad or insufficient input and are recoverable;
system failures describe configuration or calculation problems that need
intervention.
"""

from .data_quality import (
    DataQualityError,
    MissingDataError,
    MalformedDataError,
    InsufficientDataError,
    EmptyCurveError,
)
from .system_failures import (
    SystemFailureError,
    ConfigurationError,
    CurveCalculationError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MissingDataError",
    "MalformedDataError",
    "InsufficientDataError",
    "EmptyCurveError",
    # System Failures
    "SystemFailureError",
    "ConfigurationError",
    "CurveCalculationError",
]
