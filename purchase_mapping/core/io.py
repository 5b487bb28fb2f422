from __future__ import annotations
from typing import Any, Dict, List, Union
from pathlib import Path
import json
import pandas as pd

from .backends.pandas import PandasBackend
from .mapper import OrderMapper

PathLike = Union[str, Path]


def read_csv_transactions(path: PathLike) -> Dict[str, Any]:
    """
    Read a marketplace transaction CSV export into a mapper payload.

    Cells are kept as strings (blank cells dropped) so the mapper sees the
    same flattened record it would get from the export itself.
    """
    df = pd.read_csv(path, dtype=str, keep_default_na=False, skipinitialspace=True)
    df.columns = [str(c).strip() for c in df.columns]

    rows: List[Dict[str, Any]] = []
    for rec in df.to_dict(orient="records"):
        rows.append({k: v.strip() for k, v in rec.items() if isinstance(v, str) and v.strip()})

    return {"transactions": rows}


def read_jsonl_orders(path: PathLike) -> Dict[str, Any]:
    orders: List[Any] = []
    with open(path, "r", encoding="utf-8") as fin:
        for line in fin:
            line = line.strip()
            if not line:
                continue

            orders.append(json.loads(line))

    return {"orders": orders}


def stream_jsonl_to_csv(mapper: OrderMapper, in_path: PathLike, out_path: PathLike, *, batch_size: int = 10_000, include_header: bool = True) -> int:
    """Map JSONL orders batch by batch and append purchase rows to a CSV. Returns rows written."""
    backend = PandasBackend()
    batch: List[Any] = []
    header_written = False
    written = 0
    offset = 0

    def flush(fout) -> None:
        nonlocal header_written, written, offset
        purchases = mapper.map_orders(batch, start=offset)
        offset += len(batch)
        df = backend.to_dataframe(purchases)
        df.to_csv(fout, header=(include_header and not header_written), index=False, mode="a")
        header_written = True
        written += len(df)
        batch.clear()

    with open(in_path, "r", encoding="utf-8") as fin, open(out_path, "w", encoding="utf-8", newline="") as fout:
        for line in fin:
            line = line.strip()
            if not line:
                continue

            batch.append(json.loads(line))
            if len(batch) >= batch_size:
                flush(fout)

        if batch or not header_written:
            flush(fout)

    return written
