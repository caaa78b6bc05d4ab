"""
Recognition languages offered to the user and how each one is matched.

A profile ties a locale tag to the normalizer, the reference corpus and
(for Punjabi) the Latin transliteration used for display.
"""
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from align.normalizer import NORMALIZERS
from translit.gurmukhi import transliterate_gurmukhi


class UnsupportedLanguageError(ValueError):
    pass


@dataclass(frozen=True)
class LanguageProfile:
    tag: str
    label: str
    script: str
    corpus: Optional[str] = None
    transliterate: Optional[Callable[[str], str]] = None

    @property
    def normalize(self) -> Callable[[str], str]:
        return NORMALIZERS[self.script]

    @property
    def primary(self) -> str:
        return self.tag.split('-')[0].lower()


LANGUAGE_OPTIONS: List[LanguageProfile] = [
    LanguageProfile('pa-IN', 'Punjabi (India)', 'gurmukhi', corpus='shabad_kirtan',
                    transliterate=transliterate_gurmukhi),
    LanguageProfile('hi-IN', 'Hindi (India)', 'devanagari', corpus='hindi_song'),
    LanguageProfile('en-IN', 'English (India)', 'plain'),
    LanguageProfile('en-US', 'English (US)', 'plain'),
]

_by_tag: Dict[str, LanguageProfile] = {p.tag.lower(): p for p in LANGUAGE_OPTIONS}


def resolve_language(tag: str) -> LanguageProfile:
    """Exact tag first (case-insensitive), then the first option sharing the primary subtag."""
    key = (tag or '').strip().lower().replace('_', '-')
    if key in _by_tag:
        return _by_tag[key]
    primary = key.split('-')[0]
    for p in LANGUAGE_OPTIONS:
        if p.primary == primary:
            return p
    raise UnsupportedLanguageError('unsupported language: %r' % tag)
