from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .catalog import DEFAULT_ITEM_TITLE
from .fields import FieldSpec, MoneySpec
from .path import PathExpression


@dataclass(frozen=True)
class ItemShape:
    """
    Where one API shape keeps its line items, and how to read a single entry.

    container is a path on the raw order; the remaining specs are evaluated
    against each entry of that list.
    """
    name: str
    container: str
    title: FieldSpec
    sku: FieldSpec
    quantity: FieldSpec
    unit_price: MoneySpec
    total_price: MoneySpec

    def __post_init__(self) -> None:
        PathExpression.parse(self.container)


def item_shape(
    name: str,
    container: str,
    *,
    title: Tuple[str, ...],
    sku: Tuple[str, ...],
    quantity: Tuple[str, ...],
    unit_price: Tuple[str, ...],
    total_price: Tuple[str, ...] = ("totalPrice", "TotalPrice"),
) -> ItemShape:
    return ItemShape(
        name=name,
        container=container,
        title=FieldSpec(f"{name}.title", title, default=DEFAULT_ITEM_TITLE),
        sku=FieldSpec(f"{name}.sku", sku, default="", kind="id"),
        quantity=FieldSpec(f"{name}.quantity", quantity, default=None),
        unit_price=MoneySpec(f"{name}.unit_price", unit_price),
        total_price=MoneySpec(f"{name}.total_price", total_price),
    )


class ShapeRegistry:
    """
    Ordered registry of line-item container shapes.
    The first shape whose container resolves to a non-empty list wins.
    """
    def __init__(self) -> None:
        self._shapes: Dict[str, ItemShape] = {}
        self._order: List[str] = []

    def register(self, shape: ItemShape, *, prepend: bool = False) -> None:
        if not isinstance(shape, ItemShape) or not shape.name:
            raise ValueError("register() requires an ItemShape with a non-empty name.")

        self._shapes[shape.name] = shape
        if shape.name in self._order:
            self._order.remove(shape.name)

        if prepend:
            self._order.insert(0, shape.name)

        else:
            self._order.append(shape.name)

    def get(self, name: str) -> ItemShape:
        return self._shapes[name]

    def shapes(self) -> List[ItemShape]:
        return [self._shapes[n] for n in self._order]

    @property
    def names(self) -> List[str]:
        return list(self._order)


_global_registry: Optional[ShapeRegistry] = None


def get_registry() -> ShapeRegistry:
    global _global_registry
    if _global_registry is None:
        _global_registry = ShapeRegistry()
        # Built-ins are registered on import
        from .shapes import builtin  # noqa: F401

    return _global_registry


def register_item_shape(shape: ItemShape, *, prepend: bool = False) -> None:
    get_registry().register(shape, prepend=prepend)
