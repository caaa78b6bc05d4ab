"""
Gurmukhi → Latin glyph tables.

Built once at import and exposed read-only. Keys are single code points.
"""
from types import MappingProxyType

GURMUKHI_FIRST = 0x0A00
GURMUKHI_LAST = 0x0A7F

CONSONANTS = MappingProxyType({
    'ਕ': 'k', 'ਖ': 'kh', 'ਗ': 'g', 'ਘ': 'gh', 'ਙ': 'ṅ',
    'ਚ': 'ch', 'ਛ': 'chh', 'ਜ': 'j', 'ਝ': 'jh', 'ਞ': 'ñ',
    'ਟ': 'ṭ', 'ਠ': 'ṭh', 'ਡ': 'ḍ', 'ਢ': 'ḍh', 'ਣ': 'ṇ',
    'ਤ': 't', 'ਥ': 'th', 'ਦ': 'd', 'ਧ': 'dh', 'ਨ': 'n',
    'ਪ': 'p', 'ਫ': 'ph', 'ਬ': 'b', 'ਭ': 'bh', 'ਮ': 'm',
    'ਯ': 'y', 'ਰ': 'r', 'ਲ': 'l', 'ਵ': 'v', 'ਸ': 's', 'ਹ': 'h',
    'ੜ': 'ṛ',
    # nukta letters
    'ਸ਼': 'sh',
    'ਖ਼': 'kh',
    'ਗ਼': 'gh',
    'ਜ਼': 'z',
    'ਫ਼': 'f',
    'ਲ਼': 'ḷ',
})

INDEPENDENT_VOWELS = MappingProxyType({
    'ਅ': 'a', 'ਆ': 'ā', 'ਇ': 'i', 'ਈ': 'ī', 'ਉ': 'u',
    'ਊ': 'ū', 'ਏ': 'e', 'ਐ': 'ai', 'ਓ': 'o', 'ਔ': 'au',
})

MATRAS = MappingProxyType({
    'ਾ': 'ā',
    'ਿ': 'i',
    'ੀ': 'ī',
    'ੁ': 'u',
    'ੂ': 'ū',
    'ੇ': 'e',
    'ੈ': 'ai',
    'ੋ': 'o',
    'ੌ': 'au',
})

VIRAMA = '੍'
NUKTA = '਼'

BINDI = 'ਂ'
TIPPI = 'ੰ'
CANDRABINDU = 'ਁ'
NASAL_MARKS = frozenset((BINDI, TIPPI, CANDRABINDU))
NASAL_SUFFIX = 'ṅ'

INHERENT_VOWEL = 'a'

# NFC leaves these decomposed, so recognizer output usually carries the pair
NUKTA_COMPOSITIONS = MappingProxyType({
    'ਸ' + NUKTA: 'ਸ਼',
    'ਖ' + NUKTA: 'ਖ਼',
    'ਗ' + NUKTA: 'ਗ਼',
    'ਜ' + NUKTA: 'ਜ਼',
    'ਫ' + NUKTA: 'ਫ਼',
    'ਲ' + NUKTA: 'ਲ਼',
})
