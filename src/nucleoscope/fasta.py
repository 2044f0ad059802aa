"""FASTA-style text parsing and record selection."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

from .errors import RecordNotFound
from .models import SequenceRecord

RECORD_MARKER = ">"


def parse_fasta(text: str) -> List[SequenceRecord]:
    """Split a FASTA payload into records, in file order.

    Lines before the first marker line are discarded. Sequence lines are
    stripped, upper-cased and joined without separators; no alphabet check is
    made. Malformed input never raises, it only yields fewer or emptier
    records.
    """
    records: List[SequenceRecord] = []
    header: str | None = None
    seq_lines: List[str] = []

    for line in text.splitlines():
        stripped = line.strip()
        if stripped.startswith(RECORD_MARKER):
            if header is not None:
                records.append(SequenceRecord(header, "".join(seq_lines)))
            header = stripped[1:].strip()
            seq_lines = []
        elif header is not None and stripped:
            seq_lines.append(stripped.upper())

    if header is not None:
        records.append(SequenceRecord(header, "".join(seq_lines)))

    return records


def load_fasta(path: Path) -> List[SequenceRecord]:
    """Read a UTF-8 FASTA file and parse it."""
    if not path.exists():
        raise FileNotFoundError(f"FASTA file not found: {path}")
    return parse_fasta(path.read_text(encoding="utf-8"))


def select_record(
    records: Sequence[SequenceRecord], selector: int | str | None = None
) -> SequenceRecord:
    """Pick a record by zero-based index or exact header; the first one by default.

    A string made only of decimal digits is treated as an index unless a record
    carries that exact header.
    """
    if not records:
        raise RecordNotFound("No records to select from.")
    if selector is None:
        return records[0]
    if isinstance(selector, str):
        for record in records:
            if record.header == selector:
                return record
        if not selector.isdecimal():
            raise RecordNotFound(f"No record with header {selector!r}.")
        selector = int(selector)
    if 0 <= selector < len(records):
        return records[selector]
    raise RecordNotFound(
        f"Record index {selector} out of range (0-{len(records) - 1})."
    )
