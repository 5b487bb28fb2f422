from typing import Any, Dict, Iterable, List

import pandas as pd

from ..models import CanonicalPurchase

PURCHASE_COLUMNS = [
    "identifier", "platform", "productName", "brand", "model", "category",
    "orderId", "transactionId", "itemId", "orderDate", "purchaseDate",
    "sellerUsername", "sellerId", "purchasePrice", "shippingCost", "totalPaid",
    "quantity", "deliveryStatus", "trackingRef", "carrier", "shippedTime",
    "source", "createdAt", "status",
]

LINE_ITEM_COLUMNS = ["identifier", "position", "productName", "sku", "quantity", "unitPrice", "totalPrice"]


class DataFrameBackend:
    def to_dataframe(self, purchases: Iterable[CanonicalPurchase]) -> Any:
        raise NotImplementedError

    def line_items_frame(self, purchases: Iterable[CanonicalPurchase]) -> Any:
        raise NotImplementedError


class PandasBackend(DataFrameBackend):
    def to_dataframe(self, purchases: Iterable[CanonicalPurchase]) -> pd.DataFrame:
        rows: List[Dict[str, Any]] = []
        for p in purchases:
            rec = p.model_dump(by_alias=True, exclude={"line_items"})
            rows.append({col: rec.get(col) for col in PURCHASE_COLUMNS})

        if not rows:
            return pd.DataFrame(columns=PURCHASE_COLUMNS)
        return pd.DataFrame(rows, columns=PURCHASE_COLUMNS)

    def line_items_frame(self, purchases: Iterable[CanonicalPurchase]) -> pd.DataFrame:
        rows: List[Dict[str, Any]] = []
        for p in purchases:
            for pos, item in enumerate(p.line_items):
                rows.append({"identifier": p.identifier, "position": pos, **item.model_dump(by_alias=True)})

        if not rows:
            return pd.DataFrame(columns=LINE_ITEM_COLUMNS)
        return pd.DataFrame(rows, columns=LINE_ITEM_COLUMNS)
