"""JSON-lines output."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable

__all__ = ["write_jsonl"]


def write_jsonl(path: Path, records: Iterable[Dict[str, Any]]) -> int:
    """Write ``records`` one JSON object per line; return the count written."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with p.open("w", encoding="utf-8") as fh:
        for rec in records:
            fh.write(json.dumps(rec, ensure_ascii=False))
            fh.write("\n")
            count += 1
    return count
