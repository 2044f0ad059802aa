"""Orchestration helpers for sequence analysis runs."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence

from .exporter import export_filename, write_csv, write_json, write_jsonl
from .fasta import load_fasta, select_record
from .featurizer import composition, compute_features, gc_percent
from .models import AnalysisResult, MotifMatch, SequenceRecord
from .motifs import compile_pattern, find_motifs
from .translator import TOP_CODON_LIMIT, codon_usage, six_frame_translate

LOGGER = logging.getLogger(__name__)

# Average mass of one nucleotide in Daltons; an approximation, not a chemical sum.
AVERAGE_NUCLEOTIDE_WEIGHT = 325.0

EXPORT_FORMATS = ("json", "csv", "jsonl")


@dataclass(slots=True)
class RunConfig:
    input_path: Path
    out_dir: Path
    record: int | str | None = None
    all_records: bool = False
    motif: str | None = None
    top_codons: int = TOP_CODON_LIMIT
    formats: Sequence[str] = field(default_factory=lambda: EXPORT_FORMATS)


def analyze(record: SequenceRecord, top_codons: int = TOP_CODON_LIMIT) -> AnalysisResult:
    """Compute the full analysis of one record."""
    sequence = record.sequence
    length = len(sequence)
    LOGGER.debug("Analyzing %r (%s bp)", record.header, length)
    return AnalysisResult(
        length=length,
        gc_percent=gc_percent(sequence),
        composition=composition(sequence),
        frames=six_frame_translate(sequence),
        top_codons=codon_usage(sequence, limit=top_codons),
        molecular_weight=round(length * AVERAGE_NUCLEOTIDE_WEIGHT, 2),
    )


def build_export_document(
    record: SequenceRecord,
    result: AnalysisResult,
    matches: Sequence[MotifMatch] = (),
) -> dict:
    return {
        "sequence": record.to_dict(),
        "analysis": result.to_dict(),
        "motifs": [match.to_dict() for match in matches],
    }


def run_pipeline(config: RunConfig) -> dict:
    """Load, analyze and export records described by ``config``."""
    unknown = set(config.formats) - set(EXPORT_FORMATS)
    if unknown:
        raise ValueError(f"Unsupported export formats: {sorted(unknown)}")
    if config.motif:
        # Fail before anything is written.
        compile_pattern(config.motif)

    records = load_fasta(config.input_path)
    LOGGER.info("Records parsed: %s", len(records))

    if config.all_records:
        selected = list(records)
    else:
        selected = [select_record(records, config.record)] if records else []

    if not selected:
        LOGGER.warning("No records found in %s", config.input_path)
        return {
            "input": str(config.input_path),
            "record_count": 0,
            "analyzed": 0,
            "motif_count": 0,
            "paths": {},
        }

    composition_rows: List[dict] = []
    codon_rows: List[dict] = []
    summary_rows: List[dict] = []
    motif_rows: List[dict] = []
    paths: dict[str, str] = {}

    for index, record in enumerate(selected):
        result = analyze(record, top_codons=config.top_codons)
        matches = find_motifs(record.sequence, config.motif) if config.motif else []
        if config.motif:
            LOGGER.info("Motif %r: %s match(es) in %r", config.motif, len(matches), record.header)

        if "json" in config.formats:
            name = export_filename(record.header)
            if len(selected) > 1:
                name = f"{index:03d}_{name}"
            path = write_json(
                build_export_document(record, result, matches), config.out_dir / name
            )
            paths[f"analysis_{index}"] = str(path)

        composition_rows.extend(
            {"header": record.header, **entry.to_dict()} for entry in result.composition
        )
        codon_rows.extend(
            {"header": record.header, "rank": rank, **entry.to_dict()}
            for rank, entry in enumerate(result.top_codons, start=1)
        )
        summary_rows.append(
            {
                "header": record.header,
                **compute_features(record.sequence),
                "molecular_weight": result.molecular_weight,
            }
        )
        motif_rows.extend(
            {"header": record.header, **match.to_dict()} for match in matches
        )

    if "csv" in config.formats:
        paths["composition"] = str(
            write_csv(
                composition_rows,
                config.out_dir / "composition.csv",
                columns=["header", "base", "count"],
            )
        )
        paths["codon_usage"] = str(
            write_csv(
                codon_rows,
                config.out_dir / "codon_usage.csv",
                columns=["header", "rank", "codon", "count"],
            )
        )
        if config.motif:
            paths["motifs"] = str(
                write_csv(
                    motif_rows,
                    config.out_dir / "motifs.csv",
                    columns=["header", "position", "matchedText"],
                )
            )
    if "jsonl" in config.formats:
        paths["summary"] = str(write_jsonl(summary_rows, config.out_dir / "summary.jsonl"))

    LOGGER.info("Records analyzed: %s", len(selected))
    return {
        "input": str(config.input_path),
        "record_count": len(records),
        "analyzed": len(selected),
        "motif_count": len(motif_rows),
        "paths": paths,
    }
