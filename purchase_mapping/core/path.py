from __future__ import annotations
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Mapping, Optional, Tuple

from .exceptions import PathSyntaxError


@dataclass(frozen=True)
class PathSegment:
    key: str
    indices: Tuple[int, ...] = ()


@dataclass(frozen=True)
class PathExpression:
    """
    A parsed dotted path into nested dict/list structures.

    Supported selectors per segment:
      - key                  e.g. seller
      - key[N]               index into a list held under key
      - key[N][M]            chained indices

    Examples:
      seller.username
      transactionArray.transaction[0].createdDate
      purchaseUnits[0].items
    """

    text: str
    segments: Tuple[PathSegment, ...]

    _segment = re.compile(r"^([^.\[\]]+)((?:\[\d+\])*)$")
    _index = re.compile(r"\[(\d+)\]")

    @classmethod
    def parse(cls, text: str) -> "PathExpression":
        return _parse_cached(text)

    def get(self, obj: Any) -> Any:
        cur = obj
        for seg in self.segments:
            if not isinstance(cur, Mapping):
                return None

            cur = cur.get(seg.key)
            for idx in seg.indices:
                if not isinstance(cur, list) or idx >= len(cur):
                    return None
                cur = cur[idx]

            if cur is None:
                return None

        return cur

    def __str__(self) -> str:
        return self.text


@lru_cache(maxsize=1024)
def _parse_cached(text: str) -> PathExpression:
    if not isinstance(text, str) or not text:
        raise PathSyntaxError(f"Path must be a non-empty string, got {text!r}")

    segments = []
    for raw in text.split("."):
        m = PathExpression._segment.match(raw)
        if not m:
            raise PathSyntaxError(f"Malformed path segment '{raw}' in '{text}'")
        key, rest = m.group(1), m.group(2)
        indices = tuple(int(i) for i in PathExpression._index.findall(rest))
        segments.append(PathSegment(key, indices))

    return PathExpression(text, tuple(segments))


class PathResolver:
    """
    Resolve dotted paths against arbitrary JSON-like data.

    Lookups never raise on data: a missing key, a non-mapping step, a non-list
    under an indexed segment or an out-of-range index all yield None.
    """

    @classmethod
    def get(cls, obj: Any, path: Optional[str]) -> Any:
        if path is None:
            return None
        return PathExpression.parse(path).get(obj)


def resolve(container: Any, path: str) -> Any:
    return PathResolver.get(container, path)
