from __future__ import annotations
import re
from datetime import datetime
from typing import Any, Mapping, Optional

from . import catalog

SLUG_MAX = 24
TITLE_SLUG_MAX = 20
UNDATED = "UNDATED"

_non_alnum = re.compile(r"[^A-Z0-9]+")
_dash_run = re.compile(r"-{2,}")


def slugify(text: Any) -> str:
    s = _non_alnum.sub("-", str(text or "").strip().upper())
    return s.strip("-")[:SLUG_MAX]


def format_date_yyyymmdd(dt: Optional[datetime]) -> str:
    if dt is None:
        return UNDATED
    return f"{dt.year:04d}{dt.month:02d}{dt.day:02d}"


def native_order_id(order: Mapping[str, Any]) -> Optional[str]:
    return catalog.ORDER_ID.resolve(order) or catalog.TRANSACTION_ID.resolve(order)


def generate_identifier(
    order: Mapping[str, Any],
    title: str,
    order_date: Optional[datetime],
    index: int,
    *,
    prefix: str = "EBAY",
) -> str:
    """
    Deterministic purchase key: PREFIX-TITLESLUG-YYYYMMDD-ORDERID.

    Falls back to the positional order_<index> when the order carries no
    native id, and to UNDATED when it carries no parsable date.
    """
    order_id = native_order_id(order) or f"order_{index}"
    title_slug = slugify(title)[:TITLE_SLUG_MAX]
    date_slug = format_date_yyyymmdd(order_date)

    return _dash_run.sub("-", f"{prefix}-{title_slug}-{date_slug}-{order_id}")
