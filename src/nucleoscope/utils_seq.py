"""Strand transforms and text rendering helpers for sequences."""

from __future__ import annotations

from typing import Callable, Iterable, List

from .models import MotifMatch

COMPLEMENT = str.maketrans("ATGCN", "TACGN")

DEFAULT_LINE_WIDTH = 60


def reverse_complement(sequence: str) -> str:
    """Return the reverse complement; characters outside ATGCN are kept as-is."""
    return sequence[::-1].translate(COMPLEMENT)


def motif_mask(length: int, matches: Iterable[MotifMatch]) -> List[bool]:
    """Flag every position covered by at least one match."""
    mask = [False] * length
    for match in matches:
        for idx in range(max(match.position, 0), min(match.end, length)):
            mask[idx] = True
    return mask


def format_sequence(
    sequence: str,
    matches: Iterable[MotifMatch] = (),
    width: int = DEFAULT_LINE_WIDTH,
    highlight: Callable[[str], str] = str.lower,
) -> List[str]:
    """Render a sequence as offset-prefixed lines, highlighting motif bases."""
    if width <= 0:
        raise ValueError("Line width must be positive.")
    mask = motif_mask(len(sequence), matches)
    lines: List[str] = []
    for start in range(0, len(sequence), width):
        chunk = sequence[start : start + width]
        rendered = "".join(
            highlight(base) if mask[start + offset] else base
            for offset, base in enumerate(chunk)
        )
        lines.append(f"{start:06d} {rendered}")
    return lines
