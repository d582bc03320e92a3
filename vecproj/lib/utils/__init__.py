from __future__ import annotations
import os, json
from typing import Iterable, List, Optional
import numpy as np

def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Build the random source handed to the demo scenarios.

    ``None`` draws fresh OS entropy; an int gives a reproducible stream.
    """
    return np.random.default_rng(seed)

def read_jsonl(path: str) -> List[dict]:
    if not os.path.exists(path): return []
    out: List[dict] = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            s = line.strip()
            if s: out.append(json.loads(s))
    return out

def write_jsonl(path: str, rows: Iterable[dict], append: bool = False) -> None:
    d = os.path.dirname(path)
    if d: os.makedirs(d, exist_ok=True)
    with open(path, "a" if append else "w", encoding="utf-8") as f:
        for r in rows:
            f.write(json.dumps(r, ensure_ascii=False) + "\n")
