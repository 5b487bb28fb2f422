from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LineItem(_CamelModel):
    product_name: str
    sku: str = ""
    quantity: int = Field(default=1, ge=1)
    unit_price: float = Field(default=0.0, ge=0)
    total_price: float = Field(default=0.0, ge=0)


class CanonicalPurchase(_CamelModel):
    identifier: str
    platform: str
    product_name: str
    brand: str
    model: str
    category: str
    order_id: Optional[str] = None
    transaction_id: Optional[str] = None
    item_id: Optional[str] = None
    order_date: str
    purchase_date: str
    seller_username: str
    seller_id: Optional[str] = None
    line_items: List[LineItem] = Field(min_length=1)
    purchase_price: float
    total_paid: float
    shipping_cost: float
    delivery_status: str
    tracking_ref: Optional[str] = None
    carrier: Optional[str] = None
    shipped_time: Optional[str] = None
    source: str
    created_at: str
    status: str
    quantity: int = Field(default=1, ge=1)

    def to_record(self) -> Dict[str, Any]:
        """Storage document keyed by identifier."""
        out = self.model_dump(by_alias=True)
        out["_id"] = self.identifier
        return out


class SkippedRecord(BaseModel):
    index: int
    error: str


class MappingResult(BaseModel):
    purchases: List[CanonicalPurchase] = Field(default_factory=list)
    input_count: int = 0
    skipped: List[SkippedRecord] = Field(default_factory=list)
    collection_key: Optional[str] = None

    @property
    def mapped_count(self) -> int:
        return len(self.purchases)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)
