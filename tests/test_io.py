import json

import pandas as pd
import pytest

from purchase_mapping.core import MapperConfig, OrderMapper
from purchase_mapping.core.io import read_csv_transactions, read_jsonl_orders, stream_jsonl_to_csv

CSV_EXPORT = """Date,Item Title,Item ID,Transaction ID,Buyer Username,Quantity,Sale Price,Shipping Cost,Total,Shipping Status
2025-10-06,AirPod Pro 2nd gen MagSafe Charging Case USB-C A2968,146397193069,T-1,john,1,£50.00,£10.67,£60.67,Shipped
2025-10-07,Sony WH-1000XM4,1111,T-2,jane,2,120,,240,
"""


class TestCsvTransactions:
    def test_rows_become_flattened_records(self, tmp_path):
        path = tmp_path / "export.csv"
        path.write_text(CSV_EXPORT, encoding="utf-8")

        payload = read_csv_transactions(path)
        rows = payload["transactions"]
        assert len(rows) == 2
        assert rows[0]["Item Title"].startswith("AirPod Pro")
        assert "Shipping Cost" not in rows[1]

    def test_csv_rows_map_to_purchases(self, tmp_path, fixed_clock):
        path = tmp_path / "export.csv"
        path.write_text(CSV_EXPORT, encoding="utf-8")

        mapper = OrderMapper(MapperConfig(source="ebay-csv", clock=fixed_clock))
        first, second = mapper.map_orders(read_csv_transactions(path))

        assert first.transaction_id == "T-1"
        assert first.item_id == "146397193069"
        assert first.purchase_price == pytest.approx(50.0)
        assert first.shipping_cost == pytest.approx(10.67)
        assert first.total_paid == pytest.approx(60.67)
        assert first.purchase_date == "2025-10-06"
        assert first.status == "Shipped"
        assert first.source == "ebay-csv"
        assert first.identifier == "EBAY-AIRPOD-PRO-2ND-GEN-M-20251006-T-1"

        assert second.brand == "Sony"
        assert second.quantity == 2
        assert second.shipping_cost == 0.0


class TestJsonl:
    def test_read_skips_blank_lines(self, tmp_path, sonos_order):
        path = tmp_path / "orders.jsonl"
        path.write_text(json.dumps(sonos_order) + "\n\n" + json.dumps({"title": "x"}) + "\n", encoding="utf-8")
        assert len(read_jsonl_orders(path)["orders"]) == 2

    def test_stream_to_csv_in_batches(self, tmp_path, mapper):
        src = tmp_path / "orders.jsonl"
        dst = tmp_path / "purchases.csv"
        lines = [json.dumps({"title": f"Lamp {i}", "date": "2024-01-02", "price": i + 1}) for i in range(5)]
        lines.insert(2, json.dumps("not an order"))
        src.write_text("\n".join(lines) + "\n", encoding="utf-8")

        written = stream_jsonl_to_csv(mapper, src, dst, batch_size=2)

        df = pd.read_csv(dst)
        assert written == 5
        assert len(df) == 5
        assert df["identifier"].is_unique
        assert df["identifier"].iloc[-1] == "EBAY-LAMP-4-20240102-order_5"

    def test_stream_empty_input_writes_header(self, tmp_path, mapper):
        src = tmp_path / "empty.jsonl"
        dst = tmp_path / "out.csv"
        src.write_text("", encoding="utf-8")
        assert stream_jsonl_to_csv(mapper, src, dst) == 0
        assert dst.read_text(encoding="utf-8").startswith("identifier,platform")
