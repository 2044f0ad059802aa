from pathlib import Path

import pytest

SAMPLE_FASTA = """\
; comment lines before the first header are ignored
>seq1 demo record
ATGCGTACGT
TAG
>seq2
ggccnnatg
>empty
"""


@pytest.fixture
def sample_fasta(tmp_path: Path) -> Path:
    path = tmp_path / "sample.fasta"
    path.write_text(SAMPLE_FASTA, encoding="utf-8")
    return path
