#!/usr/bin/env python3
"""
Basic Usage Example - Options Strategy Payoff Engine

Analyzes the four-leg sample strategy, then edits one leg and analyzes
again, printing the payoff table and summary each time.

Run: python examples/basic_usage.py
"""

from payoff_app.data.samples import SAMPLE_RECORDS
from payoff_app.engine import StrategyAnalysis, StrategyAnalysisEngine
from payoff_app.logging import configure_logging
from payoff_app.utils.formatting import format_price


def print_analysis(title: str, analysis: StrategyAnalysis) -> None:
    """Print the payoff table and summary metrics."""
    print(f"\n📊 {title}")
    print(f"   legs used: {analysis.contracts_used}, skipped: {analysis.contracts_skipped}")
    for point in analysis.curve:
        print(f"   {format_price(point.price):>8}  {point.pnl:>10.2f}")

    display = analysis.summary.to_display()
    print(f"   Max Profit: {display['max_profit']}")
    print(f"   Max Loss: {display['max_loss']}")
    print(f"   Break-Even Points: {display['break_even_prices']}")


def main():
    configure_logging(level="WARNING")
    engine = StrategyAnalysisEngine()

    drafts = engine.load_records(SAMPLE_RECORDS)
    print_analysis("Sample strategy", engine.analyze(drafts))

    # Double the long 100 call, as a user would in the quantity field
    drafts[0] = drafts[0].with_field("quantity", "2")
    print_analysis("After doubling the 100 call", engine.analyze(drafts))

    # A half-typed leg is skipped, not an error
    drafts.append(drafts[0].with_field("premium", ""))
    print_analysis("With an incomplete leg", engine.analyze(drafts))


if __name__ == "__main__":
    main()
