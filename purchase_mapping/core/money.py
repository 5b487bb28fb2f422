from __future__ import annotations

import math
import re
from enum import Enum
from typing import Any, Mapping

MAX_UNWRAP_DEPTH = 2

_leading_number = re.compile(r"^[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_currency_prefix = re.compile(r"^[-+]?\s*(?:[A-Z]{3}\s*)?[£$€¥₹]\s*")


class MoneyShape(str, Enum):
    NUMBER = "number"
    TEXT = "text"
    WRAPPED = "wrapped"     # {"value": ...} or {"__value__": ...}
    AMOUNT = "amount"       # {"amount": {"value": ...}}
    UNKNOWN = "unknown"


def classify_money(value: Any) -> MoneyShape:
    if isinstance(value, bool):
        return MoneyShape.UNKNOWN

    if isinstance(value, (int, float)):
        return MoneyShape.NUMBER

    if isinstance(value, str):
        return MoneyShape.TEXT

    if isinstance(value, Mapping):
        if value.get("value") is not None or value.get("__value__") is not None:
            return MoneyShape.WRAPPED

        amount = value.get("amount")
        if isinstance(amount, Mapping) and amount.get("value") is not None:
            return MoneyShape.AMOUNT

    return MoneyShape.UNKNOWN


def _parse_text(text: str) -> float:
    s = text.strip()
    sign = "-" if s.startswith("-") else ""
    s = _currency_prefix.sub("", s).replace(",", "")
    if sign and not s.startswith("-"):
        s = sign + s

    m = _leading_number.match(s)
    if not m:
        return 0.0

    return float(m.group(0))


def normalize_money(value: Any, _depth: int = 0) -> float:
    """
    Coerce a monetary representation into a plain finite float.

    Plain numbers pass through, numeric strings are parsed from their leading
    number, {value} and {amount: {value}} wrappers are unwrapped at most two
    levels deep. Everything else is 0.
    """
    shape = classify_money(value)

    if shape is MoneyShape.NUMBER:
        out = float(value)

    elif shape is MoneyShape.TEXT:
        out = _parse_text(value)

    elif shape is MoneyShape.WRAPPED:
        if _depth >= MAX_UNWRAP_DEPTH:
            return 0.0
        inner = value.get("value")
        if inner is None:
            inner = value.get("__value__")
        out = normalize_money(inner, _depth + 1)

    elif shape is MoneyShape.AMOUNT:
        if _depth >= MAX_UNWRAP_DEPTH:
            return 0.0
        out = normalize_money(value["amount"]["value"], _depth + 1)

    elif shape is MoneyShape.UNKNOWN:
        out = 0.0

    else:  # pragma: no cover - exhaustive over MoneyShape
        raise AssertionError(f"Unhandled money shape: {shape}")

    return out if math.isfinite(out) else 0.0
