from __future__ import annotations
import math
from typing import Any, Dict, List, Mapping, Optional, Tuple

from . import catalog
from .exceptions import MalformedRecordError
from .models import LineItem
from .path import PathExpression
from .registry import ItemShape, ShapeRegistry, get_registry
from .utils import to_int


def _quantity(spec_values) -> int:
    for raw in spec_values:
        qty = to_int(raw)
        if qty is not None:
            return max(qty, 1)
    return 1


class LineItemExtractor:
    """
    Locates the line-item list of a raw order, whichever container shape holds
    it, and normalizes every entry into a LineItem. Orders without any
    item-level detail get a single item synthesized from order-level fields.
    """
    def __init__(self, registry: Optional[ShapeRegistry] = None) -> None:
        self._registry = registry or get_registry()

    def locate(self, order: Mapping[str, Any]) -> Tuple[Optional[ItemShape], List[Any]]:
        for shape in self._registry.shapes():
            items = PathExpression.parse(shape.container).get(order)
            if isinstance(items, list) and len(items) > 0:
                return shape, items

        return None, []

    def extract(self, order: Mapping[str, Any]) -> List[LineItem]:
        shape, raw_items = self.locate(order)
        return self.normalize(order, shape, raw_items)

    def normalize(self, order: Mapping[str, Any], shape: Optional[ItemShape], raw_items: List[Any]) -> List[LineItem]:
        if shape is None:
            return [self.synthesize(order)]

        out: List[LineItem] = []
        for pos, raw in enumerate(raw_items):
            if not isinstance(raw, Mapping):
                raise MalformedRecordError(
                    f"Line item {pos} under '{shape.container}' is {type(raw).__name__}, expected an object"
                )
            out.append(self.normalize_item(shape, raw))

        return out

    @staticmethod
    def normalize_item(shape: ItemShape, raw: Mapping[str, Any]) -> LineItem:
        quantity = _quantity(shape.quantity.values(raw))
        unit_price = shape.unit_price.resolve(raw)
        total_price = shape.total_price.resolve(raw) or unit_price * quantity
        if not math.isfinite(total_price):
            raise MalformedRecordError(f"Line item total overflows: {unit_price!r} x {quantity}")

        return LineItem(
            product_name=shape.title.resolve(raw),
            sku=shape.sku.resolve(raw),
            quantity=quantity,
            unit_price=unit_price,
            total_price=total_price,
        )

    @staticmethod
    def synthesize(order: Mapping[str, Any]) -> LineItem:
        amount = catalog.ORDER_TOTAL.resolve(order)
        return LineItem(
            product_name=catalog.TITLE.resolve(order),
            sku=catalog.ITEM_ID.resolve(order) or "",
            quantity=1,
            unit_price=amount,
            total_price=amount,
        )


_default_extractor: Optional[LineItemExtractor] = None


def extract_line_items(order: Dict[str, Any]) -> List[LineItem]:
    global _default_extractor
    if _default_extractor is None:
        _default_extractor = LineItemExtractor()

    return _default_extractor.extract(order)
