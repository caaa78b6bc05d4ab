"""
Guided lyric matching for a live recognition session.

The recognizer calls ``update`` with its finalized transcript and the
current interim text on every tick, and ``on_final`` when a phrase
completes. Matching only ever looks at the freshest interim text, so a
finished phrase never drags the match back to an earlier line.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence

from align.matcher import LineMatcher, MatchResult, similarity
from config import DEFAULT_LANGUAGE, MAX_TAIL_CHARS
from lyrics.corpus import bundled_corpora
from profiles.languages import LanguageProfile, resolve_language
from stt.snippet import join_transcript, limit_tail

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GuidedMatch:
    result: MatchResult
    line: str
    latin_line: Optional[str]
    prev_line: Optional[str]
    next_line: Optional[str]

    @property
    def score(self) -> float:
        return self.result.score

    @property
    def confidence(self) -> int:
        # round half up
        return int(self.result.score * 100 + 0.5)


@dataclass(frozen=True)
class RecognizerView:
    full_text: str
    latin_text: str
    snippet: str
    match: Optional[GuidedMatch]


class GuidedMatcher:
    def __init__(self, language: str = DEFAULT_LANGUAGE,
                 corpora: Optional[Dict[str, Sequence[str]]] = None,
                 guided: bool = True,
                 scorer: Callable[[str, str], float] = similarity,
                 max_tail: int = MAX_TAIL_CHARS):
        self.corpora = corpora
        self.guided = guided
        self.scorer = scorer
        self.max_tail = max_tail
        self.snippet = ''
        self.profile: LanguageProfile = resolve_language(language)
        self._matcher = self._build_matcher()

    def _corpus(self) -> Optional[Sequence[str]]:
        name = self.profile.corpus
        if name is None:
            return None
        if self.corpora is None:
            self.corpora = bundled_corpora()
        return self.corpora.get(name)

    def _build_matcher(self) -> Optional[LineMatcher]:
        lines = self._corpus()
        if not lines:
            logger.info('no reference lines for %s; guided matching disabled', self.profile.tag)
            return None
        return LineMatcher(lines, self.profile.normalize, self.scorer)

    def set_language(self, language: str):
        self.profile = resolve_language(language)
        self._matcher = self._build_matcher()
        self.snippet = ''

    def on_final(self):
        # next line starts fresh
        self.snippet = ''

    def clear(self):
        self.snippet = ''

    def latin(self, text: str) -> str:
        fn = self.profile.transliterate
        return fn(text) if fn else text

    def best_match(self) -> Optional[GuidedMatch]:
        if not self.guided or self._matcher is None or not self.snippet:
            return None
        m = self._matcher
        res = m.match(self.snippet)
        line = m.line(res.index)
        latin_line = self.profile.transliterate(line) if self.profile.transliterate else None
        return GuidedMatch(res, line, latin_line, m.line(res.prev), m.line(res.next))

    def update(self, transcript: str, interim: str = '') -> RecognizerView:
        full_text = limit_tail(join_transcript(transcript, interim), self.max_tail)
        fresh = (interim or '').strip()
        if fresh and fresh != self.snippet:
            self.snippet = fresh
        match = self.best_match()
        if match is not None:
            logger.debug('snippet %r -> line %d (%d%%)', self.snippet, match.result.index, match.confidence)
        return RecognizerView(full_text, self.latin(full_text), self.snippet, match)
