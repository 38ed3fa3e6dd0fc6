"""
Data quality error classifications for contract and curve processing.

Per-leg problems are normally absorbed by skipping the leg; these
exceptions are raised where bad input cannot be absorbed.
"""

from typing import Optional, Dict, Any


class DataQualityError(Exception):
    """Base class for data quality issues that can be handled gracefully."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class MissingDataError(DataQualityError):
    """Required data is completely missing."""

    def __init__(self, message: str, data_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.data_type = data_type


class MalformedDataError(DataQualityError):
    """Data exists but is in incorrect format."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format


class InsufficientDataError(DataQualityError):
    """Not enough data points for a calculation."""

    def __init__(self, message: str, required_count: Optional[int] = None,
                 available_count: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.required_count = required_count
        self.available_count = available_count


class EmptyCurveError(InsufficientDataError):
    """An extremum was requested from a payoff curve with no points."""

    def __init__(self, message: str, metric_name: Optional[str] = None, **kwargs):
        kwargs.setdefault("required_count", 1)
        kwargs.setdefault("available_count", 0)
        super().__init__(message, **kwargs)
        self.metric_name = metric_name
