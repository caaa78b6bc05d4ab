import re

from config import MAX_TAIL_CHARS, MAX_SNIPPET_CHARS

# danda, double danda, newline
_phrase_break = re.compile(r'[\u0964\u0965\n]+')


def join_transcript(transcript: str, interim: str = '') -> str:
    """Finalized text followed by the live interim text."""
    transcript = transcript or ''
    if interim:
        transcript = transcript + (' ' if transcript else '') + interim
    return transcript.strip()


def limit_tail(text: str, max_chars: int = MAX_TAIL_CHARS) -> str:
    if not text:
        return ''
    return text[-max_chars:] if len(text) > max_chars else text


def extract_recent_snippet(full_text: str, interim: str = '', max_chars: int = MAX_SNIPPET_CHARS) -> str:
    """
    Pick the freshest phrase to match on.

    The stripped interim text wins when there is one. Otherwise the last
    phrase of ``full_text`` (split on dandas and newlines) is used, keeping
    only its last ``max_chars`` characters so earlier lines do not bias the
    match.
    """
    interim = (interim or '').strip()
    if interim:
        return interim
    last = _phrase_break.split(full_text or '')[-1].strip()
    return limit_tail(last, max_chars)
