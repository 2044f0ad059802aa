"""Motif search over a sequence.

Patterns are regular expressions matched case-insensitively. The regex
dialect sits behind ``compile_pattern``/``Matcher`` so another engine can be
passed to ``find_motifs`` without touching callers.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, List, Protocol

from .errors import InvalidPattern
from .models import MotifMatch

LOGGER = logging.getLogger(__name__)


class Matcher(Protocol):
    def find_all(self, text: str) -> List[MotifMatch]:
        ...


class RegexMatcher:
    """Matcher backed by the standard ``re`` module."""

    def __init__(self, pattern: str) -> None:
        try:
            self._regex = re.compile(pattern, re.IGNORECASE)
        except (re.error, OverflowError, RecursionError) as exc:
            raise InvalidPattern(pattern, str(exc)) from exc

    @property
    def pattern(self) -> str:
        return self._regex.pattern

    def find_all(self, text: str) -> List[MotifMatch]:
        # finditer resumes after each match; empty matches carry no motif.
        return [
            MotifMatch(match.start(), match.group())
            for match in self._regex.finditer(text)
            if match.end() > match.start()
        ]


def compile_pattern(pattern: str) -> Matcher:
    return RegexMatcher(pattern)


def find_motifs(
    sequence: str,
    pattern: str,
    compiler: Callable[[str], Matcher] = compile_pattern,
) -> List[MotifMatch]:
    """Return non-overlapping matches of ``pattern`` in ascending position.

    Raises ``InvalidPattern`` when a non-empty pattern does not compile, even
    against an empty sequence. An empty sequence or pattern yields no matches.
    """
    if not pattern:
        return []
    matcher = compiler(pattern)
    if not sequence:
        return []
    matches = matcher.find_all(sequence)
    LOGGER.debug("Motif %r matched %s time(s)", pattern, len(matches))
    return matches
