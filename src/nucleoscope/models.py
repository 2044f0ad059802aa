"""Structured values produced by the analysis engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True, slots=True)
class SequenceRecord:
    header: str
    sequence: str

    @property
    def length(self) -> int:
        return len(self.sequence)

    def to_dict(self) -> dict:
        return {"header": self.header, "sequence": self.sequence}


@dataclass(slots=True)
class CompositionEntry:
    base: str
    count: int

    def to_dict(self) -> dict:
        return {"base": self.base, "count": self.count}


@dataclass(slots=True)
class ReadingFrame:
    label: str
    protein: str

    def to_dict(self) -> dict:
        return {"label": self.label, "protein": self.protein}


@dataclass(slots=True)
class CodonUsageEntry:
    codon: str
    count: int

    def to_dict(self) -> dict:
        return {"codon": self.codon, "count": self.count}


@dataclass(slots=True)
class MotifMatch:
    position: int
    matched_text: str

    @property
    def end(self) -> int:
        """Exclusive end offset, used to mark highlighted display ranges."""
        return self.position + len(self.matched_text)

    def to_dict(self) -> dict:
        return {"position": self.position, "matchedText": self.matched_text}


@dataclass(slots=True)
class AnalysisResult:
    """Full analysis of one record, rebuilt from scratch on every request."""

    length: int
    gc_percent: float
    composition: List[CompositionEntry] = field(default_factory=list)
    frames: List[ReadingFrame] = field(default_factory=list)
    top_codons: List[CodonUsageEntry] = field(default_factory=list)
    molecular_weight: float = 0.0

    def to_dict(self) -> dict:
        return {
            "length": self.length,
            "gcPercent": self.gc_percent,
            "composition": [entry.to_dict() for entry in self.composition],
            "frames": [frame.to_dict() for frame in self.frames],
            "topCodons": [entry.to_dict() for entry in self.top_codons],
            "molecularWeight": self.molecular_weight,
        }
