from __future__ import annotations

import math
import re
from datetime import datetime, timezone
from typing import Any, Optional
import pandas as pd


def to_float(x: Any) -> Optional[float]:
    if x is None or isinstance(x, bool):
        return None

    try:
        val = float(x)

    except (TypeError, ValueError):
        return None

    return val if math.isfinite(val) else None


def to_int(x: Any) -> Optional[int]:
    val = to_float(x)
    if val is None:
        return None

    return int(val)


_has_year = re.compile(r"(?<!\d)\d{4}")


def parse_datetime(src: Any) -> Optional[datetime]:
    """Parse an ISO-ish timestamp into an aware UTC datetime, or None."""
    if src is None or isinstance(src, bool):
        return None

    if isinstance(src, datetime):
        dt = src
    else:
        s = str(src).strip()
        if not s:
            return None

        try:
            dt = datetime.fromisoformat(s.replace("Z", "+00:00"))
        except ValueError:
            # pandas fills a missing year in; without one the date is unusable
            if not _has_year.search(s):
                return None

            try:
                _ts = pd.to_datetime(s, utc=True, errors="coerce")
            except (ValueError, TypeError, OverflowError):
                return None

            if pd.isna(_ts):
                return None

            dt = _ts.to_pydatetime()

    try:
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)

        return dt.astimezone(timezone.utc)
    except (OverflowError, ValueError):
        return None


def to_iso(dt: datetime) -> str:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def date_only(iso: str) -> str:
    return iso.split("T")[0]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
