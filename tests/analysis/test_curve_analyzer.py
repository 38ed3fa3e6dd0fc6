"""Tests for payoff curve analysis"""

import pytest
from payoff_app.analysis.curve_analyzer import break_even_prices, max_loss, max_profit, summarize
from payoff_app.errors import EmptyCurveError, InsufficientDataError
from payoff_app.models.curve import CurvePoint, PayoffCurve, SummaryMetrics


def make_curve(pairs):
    return PayoffCurve(points=tuple(CurvePoint(price=p, pnl=v) for p, v in pairs))


STRADDLE = make_curve([(80, 10.0), (90, 0.0), (100, -10.0), (110, 0.0), (120, 10.0)])
ALWAYS_PROFITABLE = make_curve([(80, 1.5), (85, 2.0), (90, 0.01)])


class TestExtrema:
    """Test max profit and max loss"""

    def test_max_profit(self):
        """Test max profit is the largest sampled value"""
        assert max_profit(STRADDLE) == 10.0

    def test_max_loss(self):
        """Test max loss is the smallest sampled value"""
        assert max_loss(STRADDLE) == -10.0

    def test_max_profit_not_less_than_max_loss(self):
        """Test max profit >= max loss on non-empty curves"""
        for curve in (STRADDLE, ALWAYS_PROFITABLE, make_curve([(100, -3.0)])):
            assert max_profit(curve) >= max_loss(curve)

    def test_single_point(self):
        """Test both extrema equal the only value"""
        curve = make_curve([(100, -3.25)])
        assert max_profit(curve) == max_loss(curve) == -3.25

    def test_max_profit_empty_curve(self):
        """Test max profit of an empty curve raises EmptyCurveError"""
        with pytest.raises(EmptyCurveError) as exc_info:
            max_profit(PayoffCurve())
        assert exc_info.value.metric_name == "max_profit"
        assert exc_info.value.available_count == 0

    def test_max_loss_empty_curve(self):
        """Test max loss of an empty curve raises EmptyCurveError"""
        with pytest.raises(InsufficientDataError):
            max_loss(PayoffCurve())


class TestBreakEvenPrices:
    """Test break-even price detection"""

    def test_non_positive_prices(self):
        """Test every price with P/L <= 0 is reported"""
        assert break_even_prices(STRADDLE) == (90, 100, 110)

    def test_zero_counts_as_break_even(self):
        """Test P/L of exactly zero is included"""
        assert 90 in break_even_prices(STRADDLE)

    def test_no_crossings(self):
        """Test always-profitable curve has no break-even prices"""
        assert break_even_prices(ALWAYS_PROFITABLE) == ()

    def test_empty_curve(self):
        """Test empty curve gives an empty sequence, not an error"""
        assert break_even_prices(PayoffCurve()) == ()

    def test_ascending_order(self):
        """Test results are sorted by price"""
        curve = make_curve([(80, -1.0), (85, 2.0), (90, -0.5), (95, 0.0)])
        assert break_even_prices(curve) == (80, 90, 95)

    def test_results_non_positive_on_curve(self):
        """Test each reported price has P/L <= 0 on the curve"""
        for price in break_even_prices(STRADDLE):
            assert STRADDLE.value_at(price) <= 0


class TestSummarize:
    """Test combined summary metrics"""

    def test_summary_values(self):
        """Test summary combines all three queries"""
        summary = summarize(STRADDLE)
        assert summary.has_data is True
        assert summary.max_profit == 10.0
        assert summary.max_loss == -10.0
        assert summary.break_even_prices == (90, 100, 110)

    def test_empty_curve_summary(self):
        """Test empty curve gives empty metrics instead of raising"""
        summary = summarize(PayoffCurve())
        assert summary == SummaryMetrics.empty()
        assert summary.has_data is False
        assert summary.max_profit is None
        assert summary.max_loss is None

    def test_no_crossings_distinct_from_no_data(self):
        """Test a curve without break-evens still reports has_data"""
        summary = summarize(ALWAYS_PROFITABLE)
        assert summary.has_data is True
        assert summary.break_even_prices == ()

    def test_display_strings(self):
        """Test display formatting for the summary panel"""
        display = summarize(make_curve([(82.5, -1.5), (87.5, 0.0), (92.5, 12.0)])).to_display()
        assert display == {
            "max_profit": "$12.00",
            "max_loss": "$-1.50",
            "break_even_prices": "82.5, 87.5",
        }

    def test_empty_display_strings(self):
        """Test display formatting when there is no data"""
        display = SummaryMetrics.empty().to_display()
        assert display == {"max_profit": "N/A", "max_loss": "N/A", "break_even_prices": ""}
