import re

# Latin digits, comma, danda and double danda are dropped for every script
_gurmukhi_drop = re.compile(r'[\u0A66-\u0A6F0-9,\u0964\u0965]')
_devanagari_drop = re.compile(r'[\u0966-\u096F0-9,\u0964\u0965]')
_punc = re.compile(r'[\.:;?!\'"`~@#$%^&*()_+=<>|{}\[\]\-\\/]')
_spaces = re.compile(r'\s+')


def _finish(s: str) -> str:
    s = _punc.sub('', s); s = _spaces.sub(' ', s).strip(); return s.lower()


def normalize_gurmukhi(s: str) -> str:
    """Drop Gurmukhi/Latin digits, dandas and punctuation; squeeze spaces; lowercase."""
    return _finish(_gurmukhi_drop.sub('', s))


def normalize_hindi(s: str) -> str:
    """Same as normalize_gurmukhi with the Devanagari digit range."""
    return _finish(_devanagari_drop.sub('', s))


def identity(s: str) -> str:
    return s


NORMALIZERS = {
    'gurmukhi': normalize_gurmukhi,
    'devanagari': normalize_hindi,
    'plain': identity,
}
