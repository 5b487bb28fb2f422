from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterator, Literal, Optional, Sequence, Tuple

from .path import PathExpression
from .money import normalize_money

FieldKind = Literal["text", "id"]


def _qualify(value: Any, kind: FieldKind) -> Optional[str]:
    if isinstance(value, str):
        s = value.strip()
        return s or None

    if kind == "id" and isinstance(value, int) and not isinstance(value, bool):
        return str(value)

    return None


def resolve_field(
    candidate_paths: Sequence[str],
    primary: Any,
    secondary: Any = None,
    default: Optional[str] = "",
    *,
    kind: FieldKind = "text",
) -> Optional[str]:
    """
    Return the first non-blank string found along candidate_paths.

    Each path is tried against primary, then against secondary, before moving
    on to the next path. Falls back to default.
    """
    for path in candidate_paths:
        expr = PathExpression.parse(path)
        for source in (primary, secondary):
            if source is None:
                continue
            val = _qualify(expr.get(source), kind)
            if val is not None:
                return val

    return default


def resolve_money(candidate_paths: Sequence[str], *sources: Any) -> float:
    """First strictly positive amount along candidate_paths, else 0.0."""
    for path in candidate_paths:
        expr = PathExpression.parse(path)
        for source in sources:
            if source is None:
                continue
            amount = normalize_money(expr.get(source))
            if amount > 0:
                return amount

    return 0.0


@dataclass(frozen=True)
class FieldSpec:
    """An auditable accessor: ordered candidate paths plus the sentinel default."""

    name: str
    paths: Tuple[str, ...]
    default: Optional[str] = ""
    kind: FieldKind = "text"

    def __post_init__(self) -> None:
        for p in self.paths:
            PathExpression.parse(p)

    def resolve(self, primary: Any, secondary: Any = None) -> Optional[str]:
        return resolve_field(self.paths, primary, secondary, self.default, kind=self.kind)

    def values(self, source: Any) -> Iterator[Any]:
        """Raw values present along the candidate paths, in priority order."""
        for path in self.paths:
            val = PathExpression.parse(path).get(source)
            if val is not None:
                yield val


@dataclass(frozen=True)
class MoneySpec:
    name: str
    paths: Tuple[str, ...]

    def __post_init__(self) -> None:
        for p in self.paths:
            PathExpression.parse(p)

    def resolve(self, *sources: Any) -> float:
        return resolve_money(self.paths, *sources)
