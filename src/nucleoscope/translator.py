"""Six-frame protein translation and codon usage."""

from __future__ import annotations

from collections import Counter
from typing import List

from .codon_table import lookup_codon
from .models import CodonUsageEntry, ReadingFrame
from .utils_seq import reverse_complement

CODON_SIZE = 3
FRAME_OFFSETS = (0, 1, 2)
TOP_CODON_LIMIT = 10


def _codons(sequence: str, offset: int = 0):
    for idx in range(offset, len(sequence) - CODON_SIZE + 1, CODON_SIZE):
        yield sequence[idx : idx + CODON_SIZE]


def translate(sequence: str, frame_offset: int = 0) -> str:
    """Translate complete codons from ``frame_offset``; trailing bases are dropped.

    Codons missing from the table (unknown bases, lowercase) become ``X``.
    """
    if frame_offset not in FRAME_OFFSETS:
        raise ValueError(f"frame_offset must be one of {FRAME_OFFSETS}, got {frame_offset!r}")
    return "".join(lookup_codon(codon) for codon in _codons(sequence, frame_offset))


def six_frame_translate(sequence: str) -> List[ReadingFrame]:
    """Translate +1, +2, +3 on the given strand, then -1, -2, -3 on its reverse complement."""
    frames = [
        ReadingFrame(f"+{offset + 1}", translate(sequence, offset))
        for offset in FRAME_OFFSETS
    ]
    reverse = reverse_complement(sequence)
    frames.extend(
        ReadingFrame(f"-{offset + 1}", translate(reverse, offset))
        for offset in FRAME_OFFSETS
    )
    return frames


def codon_usage(sequence: str, limit: int = TOP_CODON_LIMIT) -> List[CodonUsageEntry]:
    """Most frequent codons of frame +1 only, ties kept in first-seen order.

    The other five frames are not tallied, so this does not reconcile with
    ``six_frame_translate``.
    """
    counts = Counter(_codons(sequence))
    # Counter preserves insertion order and sorted() is stable.
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [CodonUsageEntry(codon, count) for codon, count in ranked[: max(limit, 0)]]
