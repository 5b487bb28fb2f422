from __future__ import annotations
import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "brands.json"


@dataclass(frozen=True)
class BrandEntry:
    name: str
    keywords: Tuple[str, ...]
    category: str


class BrandCatalog:
    """
    Best-effort brand/category tagging from free-text titles.

    Keyword table is plain data (data/brands.json) so it can be edited or
    swapped without touching the mapper. Matching is a case-insensitive
    substring test in catalog order; the first hit wins.
    """
    def __init__(self, entries, *, default_brand: str = "Unknown", default_category: str = "Other") -> None:
        self._entries: Tuple[BrandEntry, ...] = tuple(entries)
        self.default_brand = default_brand
        self.default_category = default_category

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BrandCatalog":
        from ..validation import validate_catalog

        validate_catalog(data, raise_on_error=True)
        default_category = data.get("default_category", "Other")
        entries = [
            BrandEntry(
                name=b["name"],
                keywords=tuple(k.lower() for k in b["keywords"]),
                category=b.get("category", default_category),
            )
            for b in data["brands"]
        ]
        return cls(
            entries,
            default_brand=data.get("default_brand", "Unknown"),
            default_category=default_category,
        )

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "BrandCatalog":
        with open(path, "r", encoding="utf-8") as fin:
            return cls.from_dict(json.load(fin))

    @classmethod
    def load(cls) -> "BrandCatalog":
        global _default_catalog
        if _default_catalog is None:
            _default_catalog = cls.from_file(DEFAULT_CATALOG_PATH)
        return _default_catalog

    @property
    def entries(self) -> Tuple[BrandEntry, ...]:
        return self._entries

    def match(self, title: Optional[str]) -> Optional[BrandEntry]:
        if not title:
            return None
        lowered = title.lower()
        for entry in self._entries:
            if any(kw in lowered for kw in entry.keywords):
                return entry
        return None

    def brand_for(self, title: Optional[str]) -> str:
        entry = self.match(title)
        return entry.name if entry else self.default_brand

    def category_for(self, title: Optional[str]) -> str:
        entry = self.match(title)
        return entry.category if entry else self.default_category

    def model_for(self, title: Optional[str], brand: str = "") -> str:
        if not title:
            return "Unknown"

        model = title
        if brand and brand != self.default_brand:
            model = re.sub(re.escape(brand), "", model, flags=re.IGNORECASE).strip()

        words = model.split()
        if len(words) > 2:
            return " ".join(words[:3])

        return model or "Unknown"


_default_catalog: Optional[BrandCatalog] = None
