import pytest

from purchase_mapping.core import FieldSpec, MoneySpec, PathSyntaxError, resolve_field, resolve_money
from purchase_mapping.core import catalog


class TestResolveField:
    """First non-blank string wins; primary is consulted before secondary per path."""

    def test_first_candidate_wins(self):
        assert resolve_field(["a", "b"], {"a": "x", "b": "y"}) == "x"

    def test_blank_and_non_string_are_skipped(self):
        assert resolve_field(["a", "b", "c"], {"a": "   ", "b": 42, "c": " ok "}) == "ok"

    def test_primary_before_secondary_for_each_path(self):
        primary = {"b": "from-primary"}
        secondary = {"a": "from-secondary"}
        assert resolve_field(["a", "b"], primary, secondary) == "from-secondary"
        assert resolve_field(["b", "a"], primary, secondary) == "from-primary"

    def test_default_when_nothing_qualifies(self):
        assert resolve_field(["a"], {}, None, "fallback") == "fallback"
        assert resolve_field(["a"], None, None, None) is None

    def test_id_kind_accepts_integers_not_bools(self):
        assert resolve_field(["id"], {"id": 123}, kind="id") == "123"
        assert resolve_field(["id"], {"id": True}, default=None, kind="id") is None
        assert resolve_field(["id"], {"id": 123}, default=None) is None

    def test_nested_and_indexed_paths(self):
        order = {"seller": {"username": " bob "}, "tx": [{"d": "2024"}]}
        assert resolve_field(["seller.username"], order) == "bob"
        assert resolve_field(["tx[0].d"], order) == "2024"


class TestResolveMoney:
    def test_first_positive_amount_wins(self):
        order = {"total": 0, "orderTotal": "abc", "amountPaid": {"value": "12.40"}}
        assert resolve_money(["total", "orderTotal", "amountPaid"], order) == 12.4

    def test_zero_when_no_positive_amount(self):
        assert resolve_money(["total"], {"total": "-3"}) == 0.0

    def test_several_sources(self):
        assert resolve_money(["shippingCost"], {}, {"shippingCost": 2}) == 2.0


class TestFieldSpecs:
    def test_invalid_path_in_descriptor_fails_eagerly(self):
        with pytest.raises(PathSyntaxError):
            FieldSpec("broken", ("a[",))
        with pytest.raises(PathSyntaxError):
            MoneySpec("broken", ("a..b",))

    def test_values_yields_present_values_in_order(self):
        spec = FieldSpec("q", ("a", "b", "c"))
        assert list(spec.values({"a": None, "b": 0, "c": "2"})) == [0, "2"]

    def test_catalog_defaults(self):
        assert catalog.TITLE.resolve({}) == "eBay Purchase"
        assert catalog.SELLER_USERNAME.resolve({}) == "Unknown"
        assert catalog.STATUS.resolve({}) == "Despatched"
        assert catalog.ORDER_ID.resolve({}) is None

    def test_seller_prefers_microservice_field(self):
        order = {"sellerUserID": "svc_seller", "seller": {"username": "other"}}
        assert catalog.SELLER_USERNAME.resolve(order) == "svc_seller"

    def test_seller_object_is_not_a_username(self):
        assert catalog.SELLER_USERNAME.resolve({"seller": {"feedbackScore": 10}}) == "Unknown"

    def test_csv_header_aliases(self):
        row = {"Item Title": "Sony WH-1000XM5", "Transaction ID": "T-9"}
        assert catalog.TITLE.resolve(row) == "Sony WH-1000XM5"
        assert catalog.TRANSACTION_ID.resolve(row) == "T-9"
