import math

import pytest

from purchase_mapping.core import MoneyShape, classify_money, normalize_money


class TestMoneyNormalization:
    """Heterogeneous money shapes collapse to a finite float."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (10.5, 10.5),
            (7, 7.0),
            ("10.50", 10.5),
            ({"value": "5"}, 5.0),
            ({"amount": {"value": 7}}, 7.0),
            (None, 0.0),
            ("abc", 0.0),
        ],
    )
    def test_documented_cases(self, value, expected):
        assert normalize_money(value) == expected

    def test_leading_number_like_parse_float(self):
        assert normalize_money("12.5 GBP") == 12.5
        assert normalize_money("  3 ") == 3.0

    def test_currency_symbol_and_thousands(self):
        assert normalize_money("£1,299.50") == 1299.5
        assert normalize_money("-$5") == -5.0

    def test_legacy_finding_wrapper(self):
        assert normalize_money({"__value__": "9.99", "@currencyId": "USD"}) == 9.99

    def test_unwraps_at_most_two_levels(self):
        assert normalize_money({"value": {"value": "3"}}) == 3.0
        assert normalize_money({"value": {"value": {"value": "3"}}}) == 0.0

    def test_non_finite_becomes_zero(self):
        assert normalize_money(float("nan")) == 0.0
        assert normalize_money(float("inf")) == 0.0
        assert normalize_money("1e400") == 0.0
        assert normalize_money("nan") == 0.0

    @pytest.mark.parametrize("value", [True, False, [], [1], {"currency": "USD"}, {"amount": 3}, object()])
    def test_unknown_shapes(self, value):
        out = normalize_money(value)
        assert out == 0.0 and math.isfinite(out)


class TestMoneyClassification:
    def test_shapes(self):
        assert classify_money(1) is MoneyShape.NUMBER
        assert classify_money("1") is MoneyShape.TEXT
        assert classify_money({"value": 1}) is MoneyShape.WRAPPED
        assert classify_money({"amount": {"value": 1}}) is MoneyShape.AMOUNT
        assert classify_money(True) is MoneyShape.UNKNOWN
        assert classify_money(None) is MoneyShape.UNKNOWN
