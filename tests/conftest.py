"""Pytest configuration and shared fixtures."""

import copy
from pathlib import Path
from typing import Any, Dict, List

import pytest

from payoff_app.data.models import Contract, ContractDraft, OptionKind
from payoff_app.data.samples import SAMPLE_RECORDS
from payoff_app.engine import StrategyAnalysisEngine


@pytest.fixture
def sample_records() -> List[Dict[str, Any]]:
    """Four-leg sample strategy as raw option records."""
    return copy.deepcopy(SAMPLE_RECORDS)


@pytest.fixture
def long_straddle() -> List[Contract]:
    """Long call and long put at the same strike, premium 5 each."""
    return [
        Contract(kind=OptionKind.CALL, strike_price=100.0, premium=5.0, quantity=1),
        Contract(kind=OptionKind.PUT, strike_price=100.0, premium=5.0, quantity=1),
    ]


@pytest.fixture
def incomplete_drafts() -> List[ContractDraft]:
    """Drafts with valid strikes but no quantity."""
    return [
        ContractDraft(type="Call", strike_price=100, premium=11.045, quantity=None),
        ContractDraft(type="Put", strike_price=105, premium=17.0, quantity=None),
    ]


@pytest.fixture
def empty_config_dir(tmp_path: Path) -> Path:
    """Config directory with no payoff.yaml, so only defaults apply."""
    return tmp_path


@pytest.fixture
def engine(empty_config_dir: Path) -> StrategyAnalysisEngine:
    """Engine running on default configuration."""
    return StrategyAnalysisEngine(config_dir=empty_config_dir)
