"""Standard genetic code for DNA codons."""

from __future__ import annotations

from types import MappingProxyType

from Bio.Data.CodonTable import unambiguous_dna_by_id

UNKNOWN_AMINO_ACID = "X"
STOP_SYMBOL = "*"
STANDARD_CODE_ID = 1

_STANDARD_TABLE = unambiguous_dna_by_id[STANDARD_CODE_ID]

STOP_CODONS = frozenset(_STANDARD_TABLE.stop_codons)

CODON_TABLE = MappingProxyType(
    {
        **_STANDARD_TABLE.forward_table,
        **dict.fromkeys(STOP_CODONS, STOP_SYMBOL),
    }
)


def lookup_codon(codon: str) -> str:
    """Return the amino-acid letter for a codon, ``X`` when it is not a known triplet."""
    return CODON_TABLE.get(codon, UNKNOWN_AMINO_ACID)
