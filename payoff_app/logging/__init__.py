"""
Logging configuration and utilities for the payoff engine.
"""
from .config import configure_logging, get_contract_logger, get_logger, log_contract_skipped

__all__ = ["configure_logging", "get_logger", "get_contract_logger", "log_contract_skipped"]
