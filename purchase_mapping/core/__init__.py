from .exceptions import MappingError, PathSyntaxError, MalformedRecordError
from .path import PathExpression, PathResolver, resolve
from .money import MoneyShape, classify_money, normalize_money
from .fields import FieldSpec, MoneySpec, resolve_field, resolve_money
from .registry import ItemShape, ShapeRegistry, item_shape, register_item_shape, get_registry
from .items import LineItemExtractor, extract_line_items
from .identifier import generate_identifier, slugify
from .brands import BrandCatalog
from .models import LineItem, CanonicalPurchase, MappingResult, SkippedRecord
from .mapper import OrderMapper, MapperConfig, map_orders
from .backends.pandas import DataFrameBackend, PandasBackend
from .summary import PurchaseStats, summarize

__all__ = [
    "MappingError",
    "PathSyntaxError",
    "MalformedRecordError",
    "PathExpression",
    "PathResolver",
    "resolve",
    "MoneyShape",
    "classify_money",
    "normalize_money",
    "FieldSpec",
    "MoneySpec",
    "resolve_field",
    "resolve_money",
    "ItemShape",
    "ShapeRegistry",
    "item_shape",
    "register_item_shape",
    "get_registry",
    "LineItemExtractor",
    "extract_line_items",
    "generate_identifier",
    "slugify",
    "BrandCatalog",
    "LineItem",
    "CanonicalPurchase",
    "MappingResult",
    "SkippedRecord",
    "OrderMapper",
    "MapperConfig",
    "map_orders",
    "DataFrameBackend",
    "PandasBackend",
    "PurchaseStats",
    "summarize",
]
