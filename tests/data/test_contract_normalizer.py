"""Tests for raw record normalization"""

import math
from unittest.mock import patch

import pytest

from payoff_app.data.models import Contract, ContractDraft, OptionKind
from payoff_app.data.normalizer import normalize_record, normalize_records, parse_contracts


class TestNormalizeRecord:
    """Test single record normalization"""

    def test_sample_record(self, sample_records):
        """Test premium is the bid/ask midpoint and long is +1"""
        draft = normalize_record(sample_records[0])
        assert draft.type == "Call"
        assert draft.strike_price == 100
        assert draft.premium == pytest.approx(11.045)
        assert draft.quantity == 1

    def test_short_record(self, sample_records):
        """Test short maps to -1"""
        draft = normalize_record(sample_records[2])
        assert draft.quantity == -1
        assert draft.premium == pytest.approx(14.75)

    @pytest.mark.parametrize("side,expected", [
        ("LONG", 1),
        (" Short ", -1),
        ("sideways", None),
        (None, None),
    ])
    def test_long_short_mapping(self, side, expected):
        """Test long/short is case-insensitive and unknown sides are missing"""
        record = {"strike_price": 100, "type": "Call", "bid": 1, "ask": 2, "long_short": side}
        assert normalize_record(record).quantity == expected

    def test_type_copied_verbatim(self):
        """Test type is not cleaned during normalization"""
        record = {"strike_price": 100, "type": " cAlL ", "bid": 1, "ask": 2, "long_short": "long"}
        assert normalize_record(record).type == " cAlL "

    def test_malformed_quote_gives_nan_premium(self):
        """Test non-numeric bid propagates as NaN instead of failing"""
        record = {"strike_price": 100, "type": "Call", "bid": "n/a", "ask": 2, "long_short": "long"}
        assert math.isnan(normalize_record(record).premium)

    def test_missing_fields(self):
        """Test an empty record normalizes without raising"""
        draft = normalize_record({})
        assert draft.type is None
        assert draft.strike_price is None
        assert math.isnan(draft.premium)
        assert draft.quantity is None

    def test_non_mapping_record(self):
        """Test a non-mapping record gives an empty draft"""
        assert normalize_record("garbage") == ContractDraft()

    def test_expiration_ignored(self, sample_records):
        """Test expiration_date does not appear on the draft"""
        draft = normalize_record(sample_records[0])
        assert not hasattr(draft, "expiration_date")

    def test_normalize_records_preserves_order(self, sample_records):
        """Test batch normalization keeps record order"""
        drafts = normalize_records(sample_records)
        assert [d.strike_price for d in drafts] == [100, 102.5, 103, 105]
        assert [d.quantity for d in drafts] == [1, 1, -1, 1]


class TestContractDraft:
    """Test draft editing"""

    def test_with_field_returns_copy(self):
        """Test editing returns a new draft and leaves the original alone"""
        draft = ContractDraft(type="Call", strike_price=100, premium=1.0, quantity=1)
        edited = draft.with_field("quantity", "3")
        assert edited.quantity == "3"
        assert draft.quantity == 1

    def test_with_field_form_alias(self):
        """Test camelCase form names are accepted"""
        draft = ContractDraft().with_field("strikePrice", "105")
        assert draft.strike_price == "105"

    def test_with_field_unknown(self):
        """Test unknown field names raise KeyError"""
        with pytest.raises(KeyError):
            ContractDraft().with_field("expiration_date", "2025-12-17")


class TestParseContracts:
    """Test filtering to complete contracts"""

    def test_keeps_complete_in_order(self, sample_records):
        """Test all sample legs are complete"""
        contracts = parse_contracts(normalize_records(sample_records))
        assert [c.kind for c in contracts] == [OptionKind.CALL, OptionKind.CALL, OptionKind.PUT, OptionKind.PUT]
        assert all(isinstance(c, Contract) for c in contracts)

    def test_drops_incomplete(self, incomplete_drafts, long_straddle):
        """Test incomplete drafts are excluded"""
        contracts = parse_contracts(incomplete_drafts + long_straddle)
        assert contracts == long_straddle

    def test_logs_each_skipped_draft(self, incomplete_drafts):
        """Test exclusion is logged with the leg index"""
        with patch("payoff_app.data.normalizer.log_contract_skipped") as mock_log:
            parse_contracts(incomplete_drafts)
        indexes = [call.kwargs["index"] for call in mock_log.call_args_list]
        assert indexes == [0, 1]

    def test_logs_skipped_contract_fields(self, long_straddle):
        """Test a skipped typed contract is logged with its field values"""
        bad = Contract(kind=OptionKind.CALL, strike_price=100.0, premium=float("nan"), quantity=1)
        with patch("payoff_app.data.normalizer.log_contract_skipped") as mock_log:
            contracts = parse_contracts(long_straddle + [bad])
        assert contracts == long_straddle
        mock_log.assert_called_once()
        kwargs = mock_log.call_args.kwargs
        assert kwargs["index"] == 2
        assert "premium" in kwargs["reason"]
        assert kwargs["context"]["type"] is OptionKind.CALL
        assert math.isnan(kwargs["context"]["premium"])
