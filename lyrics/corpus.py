import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, Tuple

from config import DATA_DIR

logger = logging.getLogger(__name__)

BUNDLED = {
    'shabad_kirtan': 'shabad_kirtan.txt',
    'hindi_song': 'hindi_song.txt',
}


class UnknownCorpusError(KeyError):
    pass


def load_lyrics(path) -> Tuple[str, ...]:
    """Read one lyric line per text line; blank lines are dropped."""
    with open(path, 'r', encoding='utf-8') as f:
        lines = [ln.strip() for ln in f.readlines()]
    lines = tuple(ln for ln in lines if ln)
    logger.info('loaded %d lines from %s', len(lines), path)
    return lines


@lru_cache(maxsize=None)
def bundled_corpus(name: str) -> Tuple[str, ...]:
    if name not in BUNDLED:
        raise UnknownCorpusError(name)
    return load_lyrics(Path(DATA_DIR) / BUNDLED[name])


def bundled_corpora() -> Dict[str, Tuple[str, ...]]:
    return {name: bundled_corpus(name) for name in BUNDLED}
