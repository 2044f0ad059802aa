"""Command line interface for nucleoscope."""

from __future__ import annotations

import argparse
import logging
import sys
import textwrap
from pathlib import Path

import yaml

from .errors import NucleoscopeError
from .fasta import load_fasta, select_record
from .motifs import find_motifs
from .pipeline import EXPORT_FORMATS, RunConfig, run_pipeline
from .translator import TOP_CODON_LIMIT
from .utils_seq import DEFAULT_LINE_WIDTH, format_sequence

LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/config.yaml")
DEFAULTS = {
    "out_dir": "data/analysis",
    "top_codons": TOP_CODON_LIMIT,
    "line_width": DEFAULT_LINE_WIDTH,
    "formats": list(EXPORT_FORMATS),
    "log_level": "INFO",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nucleoscope",
        description="Composition, six-frame translation and motif search for FASTA sequences.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help=f"Path to the YAML configuration file (default: {DEFAULT_CONFIG_PATH} if present).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log at DEBUG level.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser(
        "list",
        help="List the records found in a FASTA file.",
    )
    list_parser.add_argument("fasta", type=Path, help="FASTA file to read.")

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Analyze one record (or all) and export the results.",
    )
    analyze_parser.add_argument("fasta", type=Path, help="FASTA file to read.")
    analyze_parser.add_argument(
        "--record",
        help="Record index (zero-based) or exact header. Defaults to the first record.",
    )
    analyze_parser.add_argument(
        "--all",
        dest="all_records",
        action="store_true",
        help="Analyze every record in the file.",
    )
    analyze_parser.add_argument(
        "--motif",
        help="Case-insensitive regular expression to search for (e.g. 'TATA.*').",
    )
    analyze_parser.add_argument(
        "--out-dir",
        type=Path,
        help="Output directory (overrides `out_dir` from the configuration).",
    )

    motif_parser = subparsers.add_parser(
        "motif",
        help="Search a record for a motif and show highlighted matches.",
    )
    motif_parser.add_argument("fasta", type=Path, help="FASTA file to read.")
    motif_parser.add_argument("pattern", help="Case-insensitive regular expression.")
    motif_parser.add_argument(
        "--record",
        help="Record index (zero-based) or exact header. Defaults to the first record.",
    )
    motif_parser.add_argument(
        "--width",
        type=int,
        help="Bases per line in the sequence view.",
    )
    return parser


def load_settings(path: Path | None) -> dict:
    """Merge YAML settings over the defaults.

    An explicitly given path must exist; the default path is optional.
    """
    settings = dict(DEFAULTS)
    if path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return settings
        path = DEFAULT_CONFIG_PATH
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    settings.update({key: value for key, value in raw.items() if value is not None})
    return settings


def _resolve_path(value: str | Path | None) -> Path | None:
    if value is None:
        return None
    return Path(value).expanduser()


def _configure_logging(level: str, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else str(level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _list_command(args: argparse.Namespace, settings: dict) -> int:
    records = load_fasta(args.fasta)
    if not records:
        print("No records found.")
        return 0
    for idx, record in enumerate(records):
        print(f"{idx}\t{record.header}\t{record.length} bp")
    return 0


def _analyze_command(args: argparse.Namespace, settings: dict) -> int:
    out_dir = _resolve_path(args.out_dir) or _resolve_path(settings["out_dir"])
    run_config = RunConfig(
        input_path=args.fasta,
        out_dir=out_dir,
        record=args.record,
        all_records=args.all_records,
        motif=args.motif or None,
        top_codons=int(settings["top_codons"]),
        formats=tuple(settings["formats"]),
    )
    summary = run_pipeline(run_config)
    _print_summary(summary)
    return 0


def _motif_command(args: argparse.Namespace, settings: dict) -> int:
    record = select_record(load_fasta(args.fasta), args.record)
    matches = find_motifs(record.sequence, args.pattern)
    width = args.width or int(settings["line_width"])

    lines = [f"Record: {record.header}", f"Matches: {len(matches)}"]
    lines.extend(f"  {match.position}\t{match.matched_text}" for match in matches)
    lines.append("")
    lines.extend(format_sequence(record.sequence, matches, width=width))
    print("\n".join(lines))
    return 0


def _print_summary(summary: dict) -> None:
    lines = [
        f"Input: {summary.get('input')}",
        f"Records parsed: {summary.get('record_count', 0)}",
        f"Records analyzed: {summary.get('analyzed', 0)}",
        f"Motif matches: {summary.get('motif_count', 0)}",
    ]

    if summary.get("paths"):
        lines.append("Outputs:")
        for label, path in summary["paths"].items():
            lines.append(f"  - {label}: {path}")
    else:
        lines.append("No outputs were written.")

    message = "\n".join(lines)
    print(textwrap.dedent(message))


COMMANDS = {
    "list": _list_command,
    "analyze": _analyze_command,
    "motif": _motif_command,
}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = load_settings(args.config)
    _configure_logging(settings["log_level"], args.verbose)
    try:
        return COMMANDS[args.command](args, settings)
    except NucleoscopeError as exc:
        LOGGER.error("%s", exc)
        return 2


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
