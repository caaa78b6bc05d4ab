"""
Gurmukhi → Latin phonetic transliteration.

One left-to-right pass. The only state is the index of the last emitted
token that still ends in an unresolved inherent vowel.
"""
import logging
import re
from typing import List, Optional

from translit.tables import (
    CONSONANTS, INDEPENDENT_VOWELS, MATRAS, VIRAMA, NASAL_MARKS, NASAL_SUFFIX,
    INHERENT_VOWEL, NUKTA, NUKTA_COMPOSITIONS, GURMUKHI_FIRST, GURMUKHI_LAST,
)

logger = logging.getLogger(__name__)

_gurmukhi = re.compile('[\u0A00-\u0A7F]')
_nukta_pair = re.compile('[%s]%s' % (''.join(k[0] for k in NUKTA_COMPOSITIONS), NUKTA))
_spaces = re.compile(r'\s+')


def is_gurmukhi_char(ch: str) -> bool:
    return GURMUKHI_FIRST <= ord(ch) <= GURMUKHI_LAST


def contains_gurmukhi(text: str) -> bool:
    return bool(_gurmukhi.search(text))


def compose_nukta(text: str) -> str:
    """Fold decomposed consonant + nukta pairs into the precomposed letters."""
    return _nukta_pair.sub(lambda m: NUKTA_COMPOSITIONS[m.group(0)], text)


def _strip_inherent(token: str) -> str:
    return token[:-1] if token.endswith(INHERENT_VOWEL) else token


def _step(tokens: List[str], pending: Optional[int], ch: str) -> Optional[int]:
    """Consume one character; returns the new pending-vowel index."""
    if not is_gurmukhi_char(ch):
        tokens.append(ch)
        return None

    if ch in INDEPENDENT_VOWELS:
        tokens.append(INDEPENDENT_VOWELS[ch])
        return None

    if ch in CONSONANTS:
        tokens.append(CONSONANTS[ch] + INHERENT_VOWEL)
        return len(tokens) - 1

    if ch in MATRAS:
        if pending is None:
            tokens.append(MATRAS[ch])
        else:
            tokens[pending] = _strip_inherent(tokens[pending]) + MATRAS[ch]
        return None

    if ch == VIRAMA:
        if pending is not None:
            tokens[pending] = _strip_inherent(tokens[pending])
        return None

    if ch in NASAL_MARKS:
        if tokens:
            tokens[-1] += NASAL_SUFFIX
        else:
            tokens.append(NASAL_SUFFIX)
        return None

    # uncovered glyph (ੴ, addak, ...)
    tokens.append(ch)
    return None


def transliterate_gurmukhi(text: str) -> str:
    """
    Render Gurmukhi text in Latin letters.

    Text without any Gurmukhi code point is returned untouched. Otherwise
    whitespace runs in the result collapse to a single space and the ends
    are trimmed. Never raises.
    """
    if not contains_gurmukhi(text):
        return text

    tokens: List[str] = []
    pending: Optional[int] = None
    for ch in compose_nukta(text):
        pending = _step(tokens, pending, ch)

    out = _spaces.sub(' ', ''.join(tokens)).strip()
    logger.debug('transliterated %d chars -> %r', len(text), out)
    return out
