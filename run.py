"""Convenience runner for a nucleoscope analysis."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import textwrap

from nucleoscope.cli import load_settings
from nucleoscope.pipeline import RunConfig, run_pipeline


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Analyze a FASTA file without installing the CLI.",
    )
    parser.add_argument(
        "fasta",
        type=Path,
        help="FASTA file to analyze.",
    )
    parser.add_argument(
        "--motif",
        help="Case-insensitive regular expression to search for.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration YAML file.",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    cfg = load_settings(args.config)
    logging.basicConfig(level=str(cfg["log_level"]).upper())

    run_config = RunConfig(
        input_path=args.fasta,
        out_dir=Path(cfg["out_dir"]).expanduser(),
        all_records=True,
        motif=args.motif or None,
        top_codons=int(cfg["top_codons"]),
        formats=tuple(cfg["formats"]),
    )

    summary = run_pipeline(run_config)
    _print_summary(summary)
    return 0


def _print_summary(summary: dict) -> None:
    lines = [
        f"Input: {summary.get('input')}",
        f"Records analyzed: {summary.get('analyzed', 0)}",
        f"Motif matches: {summary.get('motif_count', 0)}",
    ]
    paths = summary.get("paths") or {}
    if paths:
        lines.append("Outputs:")
        for label, path in paths.items():
            lines.append(f"  - {label}: {path}")
    else:
        lines.append("No outputs generated.")
    print(textwrap.dedent("\n".join(lines)))


if __name__ == "__main__":
    raise SystemExit(main())
