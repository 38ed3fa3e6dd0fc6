"""
Main strategy analysis coordinator.

Runs the payoff pipeline for a set of option legs:
Raw Records → Contract Drafts → Price Grid → Payoff Curve → Summary Metrics
"""

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

import structlog

from .analysis.curve_analyzer import summarize
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .data.models import Contract, ContractDraft
from .data.normalizer import normalize_records, parse_contracts
from .data.parsers import parse_records_payload
from .errors import ConfigurationError, MissingDataError
from .models.curve import PayoffCurve, PriceGrid, SummaryMetrics
from .payoff.aggregator import build_curve
from .payoff.grid import generate_grid

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class StrategyAnalysis:
    """Everything the presentation layer needs for one strategy."""
    grid: PriceGrid
    curve: PayoffCurve
    summary: SummaryMetrics
    contracts_used: int
    contracts_skipped: int
    series_label: str = "Profit/Loss"

    def to_chart_data(self) -> dict[str, Any]:
        return self.curve.to_chart_data(label=self.series_label)


class StrategyAnalysisEngine:
    """
    Coordinator for the payoff analysis pipeline.

    Every call to analyze() recomputes grid, curve and metrics from scratch;
    the engine keeps no per-strategy state.
    """

    def __init__(
        self,
        config_dir: Optional[Union[str, Path]] = None,
        overrides: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize the engine.

        Args:
            config_dir: Directory holding payoff.yaml (defaults to ./config
                at the project root)
            overrides: Per-engine configuration overrides, highest precedence

        Raises:
            ConfigurationError: If the merged configuration is invalid
        """
        self.logger = logger
        self.config_loader = ConfigLoader.create(Path(config_dir) if config_dir else None)

        merged = self.config_loader.load_config(overrides)
        validation_errors = ConfigValidator.validate_config(merged)
        if validation_errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value!r})" for err in validation_errors]
            self.logger.error("Configuration validation failed", errors=error_msgs)
            raise ConfigurationError(
                "Invalid payoff configuration: " + "; ".join(error_msgs),
                errors=validation_errors,
            )

        self.config = self.config_loader.to_config(merged)

        self.logger.info(
            "Strategy analysis engine initialized",
            margin=self.config.grid.margin,
            step=self.config.grid.step,
            precision=self.config.curve.precision,
        )

    def load_records(self, records: Union[str, bytes, Iterable[Any]]) -> list[ContractDraft]:
        """
        Normalize raw option records into editable drafts.

        Args:
            records: Record list, or the same list as JSON text

        Returns:
            One ContractDraft per record, in order

        Raises:
            MissingDataError: If records is None
            MalformedDataError: If JSON text cannot be decoded to a list
        """
        if records is None:
            raise MissingDataError("records are required", data_type="records")

        if isinstance(records, (str, bytes)):
            records = parse_records_payload(records)

        drafts = normalize_records(records)
        self.logger.debug("Loaded contract records", record_count=len(drafts))
        return drafts

    def analyze(self, contracts: Iterable[Union[Contract, ContractDraft]]) -> StrategyAnalysis:
        """
        Compute grid, payoff curve and summary metrics for a set of legs.

        Args:
            contracts: Drafts and/or complete contracts

        Returns:
            StrategyAnalysis; an empty grid yields an empty curve and
            SummaryMetrics.empty()
        """
        items = list(contracts)

        grid = generate_grid(items, self.config.grid)
        complete = parse_contracts(items)
        curve = build_curve(complete, grid, precision=self.config.curve.precision)
        summary = summarize(curve)

        analysis = StrategyAnalysis(
            grid=grid,
            curve=curve,
            summary=summary,
            contracts_used=len(complete),
            contracts_skipped=len(items) - len(complete),
            series_label=self.config.curve.series_label,
        )

        self.logger.info(
            "Strategy analyzed",
            contracts_used=analysis.contracts_used,
            contracts_skipped=analysis.contracts_skipped,
            grid_size=len(grid),
            max_profit=summary.max_profit,
            max_loss=summary.max_loss,
            break_even_count=len(summary.break_even_prices),
        )
        return analysis

    def analyze_records(self, records: Union[str, bytes, Iterable[Any]]) -> StrategyAnalysis:
        """Normalize raw records and analyze them in one step."""
        return self.analyze(self.load_records(records))
