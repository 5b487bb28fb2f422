from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional

from .backends.pandas import DataFrameBackend, PandasBackend
from .models import CanonicalPurchase

SHIPPED_STATUSES = {"shipped", "despatched", "dispatched", "delivered"}
IN_TRANSIT_STATUSES = {"in transit", "in_transit", "intransit"}


@dataclass(frozen=True)
class PurchaseStats:
    total: int
    total_spent: float
    shipped: int
    in_transit: int


def summarize(purchases: Iterable[CanonicalPurchase], *, backend: Optional[DataFrameBackend] = None) -> PurchaseStats:
    df = (backend or PandasBackend()).to_dataframe(purchases)
    if df.empty:
        return PurchaseStats(total=0, total_spent=0.0, shipped=0, in_transit=0)

    status = df["deliveryStatus"].fillna("").astype(str).str.strip().str.lower()
    return PurchaseStats(
        total=int(len(df)),
        total_spent=float(df["totalPaid"].sum()),
        shipped=int(status.isin(SHIPPED_STATUSES).sum()),
        in_transit=int(status.isin(IN_TRANSIT_STATUSES).sum()),
    )
