#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Console front end for guided lyric matching.

Each line read from stdin is treated as one recognized phrase (as a speech
recognizer would emit it); the closest reference line, its neighbours and
the Latin rendering are printed back.
"""
import argparse
import logging
import sys

from align.guided import GuidedMatcher
from align.matcher import EmptyCorpusError, partial_similarity, similarity
from config import DEFAULT_LANGUAGE, MAX_TAIL_CHARS, setup_logging
from lyrics.corpus import load_lyrics
from profiles.languages import LANGUAGE_OPTIONS, UnsupportedLanguageError, resolve_language
from stt.snippet import extract_recent_snippet, join_transcript, limit_tail

logger = logging.getLogger('kirtan_console')

SCORERS = {'ratio': similarity, 'partial': partial_similarity}


def print_view(view):
    print(f"Text   : {view.full_text}")
    if view.latin_text != view.full_text:
        print(f"Latin  : {view.latin_text}")
    m = view.match
    if m is None:
        return
    print(f"Line   : [{m.result.index + 1}] {m.line}  ({m.confidence}%)")
    if m.latin_line:
        print(f"         {m.latin_line}")
    if m.prev_line is not None:
        print(f"Prev   : {m.prev_line}")
    if m.next_line is not None:
        print(f"Next   : {m.next_line}")


def append_phrase(transcript, phrase, max_chars=MAX_TAIL_CHARS):
    return limit_tail(join_transcript(transcript, phrase), max_chars)


def run(args):
    profile = resolve_language(args.lang)
    corpora = None
    if args.lyrics:
        if profile.corpus is None:
            raise UnsupportedLanguageError(f'{profile.tag} has no lyric matching')
        lines = load_lyrics(args.lyrics)
        if not lines:
            raise EmptyCorpusError(f'lyrics file is empty: {args.lyrics}')
        corpora = {profile.corpus: lines}

    guided = GuidedMatcher(profile.tag, corpora=corpora, guided=not args.no_guided,
                           scorer=SCORERS[args.scorer])
    print(f"[{profile.label} - {profile.tag}] reading phrases from stdin, Ctrl-D to stop")
    print("-" * 60)

    transcript = ''
    for raw in sys.stdin:
        if not raw.strip():
            continue
        # each stdin line plays the part of the recognizer's interim text
        phrase = extract_recent_snippet(transcript, raw)
        print_view(guided.update(transcript, phrase))
        print("-" * 60)
        transcript = append_phrase(transcript, phrase)
        guided.on_final()


def main(argv=None):
    parser = argparse.ArgumentParser(description='Match recognized phrases against reference lyric lines')
    parser.add_argument('--lang', default=DEFAULT_LANGUAGE, choices=[p.tag for p in LANGUAGE_OPTIONS],
                        help='recognition language')
    parser.add_argument('--lyrics', default=None, help='lyrics file, one line per row (default: bundled corpus)')
    parser.add_argument('--no-guided', action='store_true', help='only show text and transliteration')
    parser.add_argument('--scorer', default='ratio', choices=sorted(SCORERS), help='line scoring method')
    parser.add_argument('--log-level', default=None, help='logging level (default: $KIRTAN_LOG_LEVEL or WARNING)')
    args = parser.parse_args(argv)

    setup_logging(args.log_level.upper() if args.log_level else None)
    try:
        run(args)
    except KeyboardInterrupt:
        print("\nstopped.")
    except (OSError, ValueError) as e:
        logger.error('%s', e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
