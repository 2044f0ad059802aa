"""Export helpers for JSON, CSV, and JSONL outputs."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Iterable, Sequence

import pandas as pd

EXPORT_HEADER_CHARS = 20
_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def export_filename(header: str) -> str:
    """Name an analysis export after the first characters of the record header."""
    stem = _UNSAFE_FILENAME_CHARS.sub("_", header[:EXPORT_HEADER_CHARS])
    return f"analysis_{stem}.json" if stem else "analysis.json"


def write_json(document: dict, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(document, handle, indent=2, ensure_ascii=False)
        handle.write("\n")
    return path


def write_csv(
    rows: Iterable[dict], path: Path, columns: Sequence[str] | None = None
) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    frame = pd.DataFrame(list(rows), columns=columns)
    frame.to_csv(path, index=False)
    return path


def write_jsonl(rows: Iterable[dict], path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        for row in rows:
            handle.write(json.dumps(row, ensure_ascii=False))
            handle.write("\n")
    return path
