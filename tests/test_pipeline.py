import json

import pytest

from nucleoscope.errors import InvalidPattern, RecordNotFound
from nucleoscope.models import MotifMatch, SequenceRecord
from nucleoscope.pipeline import RunConfig, analyze, build_export_document, run_pipeline


def test_analyze_example_record():
    result = analyze(SequenceRecord("seq1", "ATGCGTACGTTAG"))
    assert result.length == 13
    assert result.gc_percent == 46.15
    assert [(e.base, e.count) for e in result.composition] == [
        ("A", 3),
        ("T", 4),
        ("G", 4),
        ("C", 2),
        ("N", 0),
    ]
    assert result.frames[0].protein == "MRTL"
    assert [f.label for f in result.frames] == ["+1", "+2", "+3", "-1", "-2", "-3"]
    assert [e.codon for e in result.top_codons] == ["ATG", "CGT", "ACG", "TTA"]
    assert result.molecular_weight == pytest.approx(4225.0)


def test_analyze_empty_record():
    result = analyze(SequenceRecord("blank", ""))
    assert result.length == 0
    assert result.gc_percent == 0.0
    assert sum(e.count for e in result.composition) == 0
    assert [f.protein for f in result.frames] == [""] * 6
    assert result.top_codons == []
    assert result.molecular_weight == 0.0


def test_analysis_result_serializes_with_stable_keys():
    data = analyze(SequenceRecord("s", "GGCCAT")).to_dict()
    assert list(data) == [
        "length",
        "gcPercent",
        "composition",
        "frames",
        "topCodons",
        "molecularWeight",
    ]
    assert data["composition"][0] == {"base": "A", "count": 1}
    assert data["frames"][3]["label"] == "-1"
    json.dumps(data)


def test_build_export_document():
    record = SequenceRecord("s", "ATGATG")
    document = build_export_document(record, analyze(record), [MotifMatch(0, "ATG")])
    assert document["sequence"] == {"header": "s", "sequence": "ATGATG"}
    assert document["motifs"] == [{"position": 0, "matchedText": "ATG"}]
    assert document["analysis"]["length"] == 6


def test_run_pipeline_first_record(sample_fasta, tmp_path):
    out_dir = tmp_path / "out"
    summary = run_pipeline(RunConfig(input_path=sample_fasta, out_dir=out_dir, motif="atg"))

    assert summary["record_count"] == 3
    assert summary["analyzed"] == 1
    assert summary["motif_count"] == 1
    export = json.loads((out_dir / "analysis_seq1_demo_record.json").read_text(encoding="utf-8"))
    assert export["sequence"]["header"] == "seq1 demo record"
    assert export["analysis"]["gcPercent"] == 46.15
    assert export["motifs"] == [{"position": 0, "matchedText": "ATG"}]
    assert set(summary["paths"]) == {"analysis_0", "composition", "codon_usage", "motifs", "summary"}

    composition_lines = (out_dir / "composition.csv").read_text(encoding="utf-8").splitlines()
    assert composition_lines[0] == "header,base,count"
    assert composition_lines[1] == "seq1 demo record,A,3"


def test_run_pipeline_all_records(sample_fasta, tmp_path):
    out_dir = tmp_path / "out"
    summary = run_pipeline(
        RunConfig(input_path=sample_fasta, out_dir=out_dir, all_records=True, formats=("jsonl",))
    )
    assert summary["analyzed"] == 3
    assert list(summary["paths"]) == ["summary"]
    rows = [
        json.loads(line)
        for line in (out_dir / "summary.jsonl").read_text(encoding="utf-8").splitlines()
    ]
    assert [row["header"] for row in rows] == ["seq1 demo record", "seq2", "empty"]
    assert rows[1]["count_N"] == 2
    assert rows[2]["gc_percent"] == 0.0


def test_run_pipeline_select_by_header(sample_fasta, tmp_path):
    summary = run_pipeline(
        RunConfig(input_path=sample_fasta, out_dir=tmp_path, record="seq2", formats=("json",))
    )
    assert summary["paths"] == {"analysis_0": str(tmp_path / "analysis_seq2.json")}


def test_run_pipeline_unknown_record(sample_fasta, tmp_path):
    with pytest.raises(RecordNotFound):
        run_pipeline(RunConfig(input_path=sample_fasta, out_dir=tmp_path, record="nope"))


def test_run_pipeline_invalid_motif_writes_nothing(sample_fasta, tmp_path):
    out_dir = tmp_path / "out"
    with pytest.raises(InvalidPattern):
        run_pipeline(RunConfig(input_path=sample_fasta, out_dir=out_dir, motif="("))
    assert not out_dir.exists()


def test_run_pipeline_rejects_unknown_format(sample_fasta, tmp_path):
    with pytest.raises(ValueError):
        run_pipeline(RunConfig(input_path=sample_fasta, out_dir=tmp_path, formats=("xml",)))


def test_run_pipeline_without_records(tmp_path, caplog):
    path = tmp_path / "blank.fasta"
    path.write_text("no headers here\n", encoding="utf-8")
    with caplog.at_level("WARNING"):
        summary = run_pipeline(RunConfig(input_path=path, out_dir=tmp_path / "out"))
    assert summary["analyzed"] == 0
    assert summary["paths"] == {}
    assert "No records found" in caplog.text
