from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union
import logging
import math

from . import catalog
from .brands import BrandCatalog
from .exceptions import MalformedRecordError
from .identifier import generate_identifier
from .items import LineItemExtractor
from .models import CanonicalPurchase, MappingResult, SkippedRecord
from .path import PathExpression
from .registry import ShapeRegistry
from .utils import date_only, parse_datetime, to_int, to_iso, utc_now

logger = logging.getLogger(__name__)

DEFAULT_COLLECTION_KEYS: Tuple[str, ...] = (
    "purchases",
    "orders",
    "recentPurchases",
    "items",
    "results",
    "transactions",
    "data.purchases",
    "data.orders",
)

# (purchase, None) on success, (None, SkippedRecord) on failure
RecordOutcome = Tuple[Optional[CanonicalPurchase], Optional[SkippedRecord]]


@dataclass
class MapperConfig:
    platform: str = "eBay"
    source: str = "ebay-oauth"
    id_prefix: str = "EBAY"
    collection_keys: Tuple[str, ...] = DEFAULT_COLLECTION_KEYS
    brand_catalog: Optional[BrandCatalog] = None
    clock: Callable[[], datetime] = utc_now

    logger: Optional[logging.Logger] = None
    metrics_increment: Optional[Callable[[str, int], None]] = None


class OrderMapper:
    """
    Maps already-fetched marketplace payloads into CanonicalPurchase records.

    Each raw order is mapped in isolation: a failure is logged with the
    order's index and the order is left out, the rest of the batch goes on.
    Nothing raised while mapping escapes map_orders / map_batch.
    """
    def __init__(
        self,
        config: Optional[MapperConfig] = None,
        *,
        registry: Optional[ShapeRegistry] = None,
    ) -> None:
        from ..validation import validate_paths

        self._config: MapperConfig = config or MapperConfig()
        validate_paths(self._config.collection_keys, raise_on_error=True)

        self._collection_paths = tuple((k, PathExpression.parse(k)) for k in self._config.collection_keys)
        self._extractor = LineItemExtractor(registry)
        self._brands: BrandCatalog = self._config.brand_catalog or BrandCatalog.load()
        self._log: logging.Logger = self._config.logger or logger

    @property
    def config(self) -> MapperConfig:
        return self._config

    def map_orders(self, payload: Any, *, start: int = 0) -> List[CanonicalPurchase]:
        return self.map_batch(payload, start=start).purchases

    def map_batch(self, payload: Any, *, start: int = 0) -> MappingResult:
        """start offsets the positional index used for logging and fallback ids."""
        key, orders = self._locate_orders(payload)
        if orders is None:
            return MappingResult(collection_key=key)

        purchases: List[CanonicalPurchase] = []
        skipped: List[SkippedRecord] = []
        for index, order in enumerate(orders, start=start):
            purchase, failure = self._map_isolated(order, index)
            if purchase is not None:
                purchases.append(purchase)
            else:
                skipped.append(failure)

        self._log.info("Mapped %d purchases from %d orders", len(purchases), len(orders))
        return MappingResult(
            purchases=purchases,
            input_count=len(orders),
            skipped=skipped,
            collection_key=key,
        )

    def _locate_orders(self, payload: Any) -> Tuple[Optional[str], Optional[List[Any]]]:
        if isinstance(payload, list):
            return None, payload

        if not isinstance(payload, Mapping):
            self._log.info("Payload is %s, not an object; nothing to map", type(payload).__name__)
            return None, None

        for key, expr in self._collection_paths:
            found = expr.get(payload)
            if found is None:
                continue

            if not isinstance(found, list):
                self._log.info("Order collection '%s' is %s, not a list; nothing to map", key, type(found).__name__)
                return key, None

            return key, found

        self._log.info("No order collection found among keys %s", list(self._config.collection_keys))
        return None, None

    def _map_isolated(self, order: Any, index: int) -> RecordOutcome:
        try:
            return self.map_order(order, index), None

        except Exception as exc:
            self._log.warning("Skipping order %d: %r", index, exc)
            if self._config.metrics_increment:
                self._config.metrics_increment("mapper.records_skipped", 1)

            return None, SkippedRecord(index=index, error=repr(exc))

    def map_order(self, order: Any, index: int) -> CanonicalPurchase:
        """Map one raw order; raises on malformed input."""
        if not isinstance(order, Mapping):
            raise MalformedRecordError(f"Order is {type(order).__name__}, expected an object")

        cfg = self._config
        shape, raw_items = self._extractor.locate(order)
        line_items = self._extractor.normalize(order, shape, raw_items)
        first_raw = raw_items[0] if raw_items else None

        title = catalog.TITLE.resolve(order, first_raw)
        brand = self._brands.brand_for(title)

        order_dt = self._order_datetime(order)
        created_at = to_iso(cfg.clock())
        order_date = to_iso(order_dt) if order_dt is not None else created_at

        shipping_cost = catalog.SHIPPING.resolve(order) or catalog.ITEM_SHIPPING.resolve(*raw_items)
        purchase_price = self._purchase_price(order, line_items, shipping_cost)
        total_paid = purchase_price + shipping_cost
        if not math.isfinite(total_paid):
            raise MalformedRecordError(f"Total paid overflows: {purchase_price!r} + {shipping_cost!r}")

        status = catalog.STATUS.resolve(order)
        identifier = generate_identifier(order, title, order_dt, index, prefix=cfg.id_prefix)

        purchase = CanonicalPurchase(
            identifier=identifier,
            platform=cfg.platform,
            product_name=title,
            brand=brand,
            model=self._brands.model_for(title, brand),
            category=self._brands.category_for(title),
            order_id=catalog.ORDER_ID.resolve(order),
            transaction_id=catalog.TRANSACTION_ID.resolve(order),
            item_id=catalog.ITEM_ID.resolve(order, first_raw),
            order_date=order_date,
            purchase_date=date_only(order_date),
            seller_username=catalog.SELLER_USERNAME.resolve(order),
            seller_id=catalog.SELLER_ID.resolve(order),
            line_items=line_items,
            purchase_price=purchase_price,
            total_paid=total_paid,
            shipping_cost=shipping_cost,
            delivery_status=status,
            tracking_ref=catalog.TRACKING_REF.resolve(order),
            carrier=catalog.CARRIER.resolve(order),
            shipped_time=catalog.SHIPPED_TIME.resolve(order),
            source=cfg.source,
            created_at=created_at,
            status=status,
            quantity=self._quantity(order, line_items),
        )

        self._log.debug(
            "Mapped purchase %s (shape=%s) title=%r brand=%s total=%.2f",
            identifier, shape.name if shape else "synthesized", title, brand, total_paid,
        )
        return purchase

    @staticmethod
    def _purchase_price(order: Mapping[str, Any], line_items, shipping_cost: float) -> float:
        """
        Order-level item price, else the order total net of shipping, else the
        sum of line-item totals. An order total already includes shipping, so
        totalPaid comes out equal to it.
        """
        price = catalog.PRICE.resolve(order)
        if price > 0:
            return price

        total = catalog.GRAND_TOTAL.resolve(order)
        if total > 0:
            return max(total - shipping_cost, 0.0)

        return sum(item.total_price for item in line_items)

    @staticmethod
    def _order_datetime(order: Mapping[str, Any]) -> Optional[datetime]:
        for raw in catalog.ORDER_DATE.values(order):
            dt = parse_datetime(raw)
            if dt is not None:
                return dt
        return None

    @staticmethod
    def _quantity(order: Mapping[str, Any], line_items) -> int:
        for raw in catalog.QUANTITY.values(order):
            qty = to_int(raw)
            if qty is not None and qty >= 1:
                return qty
        return sum(item.quantity for item in line_items)


_default_mapper: Optional[OrderMapper] = None


def map_orders(payload: Union[Dict[str, Any], List[Any]]) -> List[CanonicalPurchase]:
    """Map a payload with the default configuration."""
    global _default_mapper
    if _default_mapper is None:
        _default_mapper = OrderMapper()

    return _default_mapper.map_orders(payload)
