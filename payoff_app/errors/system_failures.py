"""
System failure error classifications for unrecoverable errors.

These exceptions represent failures that cannot be fixed by editing a
single leg: invalid engine configuration or a broken curve calculation.
"""

from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class ConfigurationError(SystemFailureError):
    """Grid or curve configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []


class CurveCalculationError(SystemFailureError):
    """Critical error while building a payoff curve."""

    def __init__(self, message: str, grid_size: Optional[int] = None,
                 contract_count: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.grid_size = grid_size
        self.contract_count = contract_count
