import pytest

from nucleoscope.errors import InvalidPattern, NucleoscopeError
from nucleoscope.models import MotifMatch
from nucleoscope.motifs import RegexMatcher, compile_pattern, find_motifs


def test_literal_pattern():
    assert find_motifs("ATGATG", "ATG") == [MotifMatch(0, "ATG"), MotifMatch(3, "ATG")]


def test_case_insensitive():
    assert find_motifs("ATGATG", "atg") == [MotifMatch(0, "ATG"), MotifMatch(3, "ATG")]


def test_matches_do_not_overlap():
    matches = find_motifs("AAAAA", "AA")
    assert matches == [MotifMatch(0, "AA"), MotifMatch(2, "AA")]


def test_regex_metacharacters():
    matches = find_motifs("GGTATAAAGCTATAT", "TATA[AT]")
    assert matches == [MotifMatch(2, "TATAA"), MotifMatch(10, "TATAT")]


def test_greedy_pattern_consumes_rest():
    assert find_motifs("CCTATAGGTATA", "TATA.*") == [MotifMatch(2, "TATAGGTATA")]


def test_zero_width_matches_are_skipped():
    matches = find_motifs("CAAC", "A*")
    assert matches == [MotifMatch(1, "AA")]


def test_positions_strictly_increasing():
    matches = find_motifs("ATGCATGCATGC" * 5, "[AG]")
    positions = [match.position for match in matches]
    assert positions == sorted(set(positions))
    for previous, current in zip(matches, matches[1:]):
        assert previous.end <= current.position


def test_empty_inputs():
    assert find_motifs("", "ATG") == []
    assert find_motifs("ATG", "") == []


def test_invalid_pattern_raises():
    with pytest.raises(InvalidPattern) as excinfo:
        find_motifs("ATGATG", "(")
    assert excinfo.value.pattern == "("
    assert isinstance(excinfo.value, NucleoscopeError)
    assert isinstance(excinfo.value, ValueError)


def test_invalid_pattern_raises_on_empty_sequence():
    with pytest.raises(InvalidPattern):
        find_motifs("", "[AT")


def test_compile_pattern_returns_reusable_matcher():
    matcher = compile_pattern("gc")
    assert isinstance(matcher, RegexMatcher)
    assert matcher.find_all("AGCGC") == [MotifMatch(1, "GC"), MotifMatch(3, "GC")]


def test_custom_compiler():
    class LiteralMatcher:
        def __init__(self, pattern):
            self.pattern = pattern.upper()

        def find_all(self, text):
            found, start = [], text.find(self.pattern)
            while start != -1:
                found.append(MotifMatch(start, self.pattern))
                start = text.find(self.pattern, start + len(self.pattern))
            return found

    matches = find_motifs("TA.ATA.A", "a.a", compiler=LiteralMatcher)
    assert matches == [MotifMatch(1, "A.A"), MotifMatch(5, "A.A")]


@pytest.mark.parametrize("pattern", ["A{9999999999}", "A{2,9999999999}"])
def test_oversized_repetition_raises_invalid_pattern(pattern):
    with pytest.raises(InvalidPattern):
        find_motifs("AAAA", pattern)
