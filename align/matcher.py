import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from rapidfuzz import fuzz

from align.normalizer import identity

logger = logging.getLogger(__name__)


class EmptyCorpusError(ValueError):
    """Raised when a match is requested against a corpus with no lines."""


@dataclass(frozen=True)
class MatchResult:
    index: int
    score: float
    prev: Optional[int]
    next: Optional[int]


def edit_distance(a: str, b: str) -> int:
    # single rolling row over the shorter string
    if len(b) > len(a):
        a, b = b, a
    row = list(range(len(b) + 1))
    for i in range(1, len(a) + 1):
        diag = row[0]; row[0] = i
        for j in range(1, len(b) + 1):
            above = row[j]
            cost = 0 if a[i - 1] == b[j - 1] else 1
            row[j] = min(above + 1, row[j - 1] + 1, diag + cost)
            diag = above
    return row[len(b)]


def similarity(a: str, b: str) -> float:
    """Levenshtein ratio in [0, 1]; two empty strings are a perfect match."""
    if not a and not b:
        return 1.0
    return 1.0 - edit_distance(a, b) / max(len(a), len(b), 1)


def partial_similarity(a: str, b: str) -> float:
    """Best-aligned substring ratio, rescaled to [0, 1]."""
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    # partial ratio handles prefixes well
    return fuzz.partial_ratio(a, b) / 100.0


def find_best_match(lines: Sequence[str], query: str,
                    normalize: Callable[[str], str] = identity,
                    scorer: Callable[[str, str], float] = similarity) -> MatchResult:
    """
    Score every line against ``query`` and return the best one with its neighbours.

    Both sides go through ``normalize`` on every call. Ties keep the earliest
    line. Raises EmptyCorpusError when ``lines`` is empty.
    """
    if not lines:
        raise EmptyCorpusError('cannot match against an empty corpus')

    q = normalize(query)
    best_idx, best_score = 0, -1.0
    for i, line in enumerate(lines):
        s = scorer(normalize(line), q)
        if s > best_score:
            best_idx, best_score = i, s

    last = len(lines) - 1
    logger.debug('best line %d/%d score=%.3f for %r', best_idx, last, best_score, q)
    return MatchResult(
        index=best_idx,
        score=best_score,
        prev=best_idx - 1 if best_idx > 0 else None,
        next=best_idx + 1 if best_idx < last else None,
    )


class LineMatcher:
    """Matcher bound to one corpus and one normalizer."""

    def __init__(self, lines: Sequence[str], normalize: Callable[[str], str] = identity,
                 scorer: Callable[[str, str], float] = similarity):
        if not lines:
            raise EmptyCorpusError('cannot match against an empty corpus')
        self.lines = lines
        self.normalize = normalize
        self.scorer = scorer

    def match(self, recent_text: str) -> MatchResult:
        return find_best_match(self.lines, recent_text, self.normalize, self.scorer)

    def line(self, idx: Optional[int]) -> Optional[str]:
        return None if idx is None else self.lines[idx]
