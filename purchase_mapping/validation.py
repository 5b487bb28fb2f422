from __future__ import annotations

from typing import Any, Dict, List, Sequence, Tuple

from purchase_mapping.core.exceptions import MappingError, PathSyntaxError
from purchase_mapping.core.path import PathExpression

CATALOG_KEYS = {"brands", "default_brand", "default_category"}
BRAND_KEYS = {"name", "keywords", "category"}


def validate_catalog(data: Dict[str, Any], *, raise_on_error: bool = False) -> Tuple[bool, List[str]]:
    errors: List[str] = []

    def err(msg: str, path: str = "$") -> None:
        errors.append(f"{path}: {msg}")

    if not isinstance(data, dict):
        err("Brand catalog must be an object (dict).")
        return _finish(errors, raise_on_error)

    unknown = set(data.keys()) - CATALOG_KEYS
    if unknown:
        err(f"Unknown keys in catalog: {sorted(unknown)}")

    for key in ("default_brand", "default_category"):
        if key in data and (not isinstance(data[key], str) or not data[key].strip()):
            err(f"'{key}' must be a non-empty string.", f"$.{key}")

    brands = data.get("brands")
    if not isinstance(brands, list):
        err("'brands' must be a list.", "$.brands")
        return _finish(errors, raise_on_error)

    seen = set()
    for i, entry in enumerate(brands):
        _validate_brand(entry, path=f"$.brands[{i}]", add_err=err)
        if isinstance(entry, dict) and isinstance(entry.get("name"), str):
            if entry["name"].lower() in seen:
                err(f"Duplicate brand '{entry['name']}'.", f"$.brands[{i}].name")
            seen.add(entry["name"].lower())

    return _finish(errors, raise_on_error)


def _validate_brand(entry: Any, *, path: str, add_err) -> None:
    if not isinstance(entry, dict):
        add_err("Brand entry must be an object.", path)
        return

    name = entry.get("name")
    if not isinstance(name, str) or not name.strip():
        add_err("'name' must be a non-empty string.", f"{path}.name")

    keywords = entry.get("keywords")
    if not (isinstance(keywords, list) and len(keywords) >= 1):
        add_err("'keywords' must be a non-empty list of strings.", f"{path}.keywords")
    else:
        for j, kw in enumerate(keywords):
            if not isinstance(kw, str) or not kw.strip():
                add_err("Keyword must be a non-empty string.", f"{path}.keywords[{j}]")

    if "category" in entry and (not isinstance(entry["category"], str) or not entry["category"].strip()):
        add_err("'category' must be a non-empty string.", f"{path}.category")

    unknown = set(entry.keys()) - BRAND_KEYS
    if unknown:
        add_err(f"Unknown keys in brand entry: {sorted(unknown)}", path)


def validate_paths(paths: Sequence[str], *, raise_on_error: bool = False) -> Tuple[bool, List[str]]:
    errors: List[str] = []
    if isinstance(paths, str) or not isinstance(paths, (list, tuple)):
        errors.append("$: candidate paths must be a list of strings.")
        return _finish(errors, raise_on_error)

    for i, p in enumerate(paths):
        if not isinstance(p, str):
            errors.append(f"$[{i}]: path must be a string, got {type(p).__name__}")
            continue
        try:
            PathExpression.parse(p)
        except PathSyntaxError as e:
            errors.append(f"$[{i}]: {e}")

    return _finish(errors, raise_on_error)


def _finish(errors: List[str], raise_on_error: bool) -> Tuple[bool, List[str]]:
    if errors and raise_on_error:
        raise MappingError("Invalid configuration:\n- " + "\n- ".join(errors))
    return (len(errors) == 0, errors)
