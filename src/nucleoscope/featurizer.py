"""Nucleotide composition and descriptive statistics."""

from __future__ import annotations

from typing import List

from .models import CompositionEntry

COMPOSITION_ORDER = ("A", "T", "G", "C", "N")
UNKNOWN_BASE = "N"


def composition(sequence: str) -> List[CompositionEntry]:
    """Count bases in fixed A, T, G, C, N order; anything else is tallied as N."""
    counts = dict.fromkeys(COMPOSITION_ORDER, 0)
    for base in sequence:
        if base in counts:
            counts[base] += 1
        else:
            counts[UNKNOWN_BASE] += 1
    return [CompositionEntry(base, counts[base]) for base in COMPOSITION_ORDER]


def gc_percent(sequence: str) -> float:
    """Return G+C as a percentage of the full length, rounded to 2 decimals.

    Unknown bases stay in the denominator. An empty sequence gives ``0.0``.
    """
    length = len(sequence)
    if not length:
        return 0.0
    gc = sequence.count("G") + sequence.count("C")
    return round(gc / length * 100, 2)


calculate_gc = gc_percent


def compute_features(sequence: str) -> dict:
    """Return simple descriptive statistics for a nucleotide sequence."""
    counts = {entry.base: entry.count for entry in composition(sequence)}
    return {
        "length": len(sequence),
        "gc_percent": gc_percent(sequence),
        "count_A": counts["A"],
        "count_T": counts["T"],
        "count_G": counts["G"],
        "count_C": counts["C"],
        "count_N": counts["N"],
    }
