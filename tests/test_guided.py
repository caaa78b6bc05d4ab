import pytest

from align.guided import GuidedMatcher
from align.matcher import partial_similarity
from profiles.languages import UnsupportedLanguageError

LINES = ['ਸਤਿ ਨਾਮੁ', 'ਕਰਤਾ ਪੁਰਖੁ', 'ਨਿਰਭਉ ਨਿਰਵੈਰੁ']


@pytest.fixture
def punjabi():
    return GuidedMatcher('pa-IN', corpora={'shabad_kirtan': LINES})


def test_interim_text_drives_the_match(punjabi):
    view = punjabi.update('', 'ਕਰਤਾ ਪੁਰਖ')
    assert view.full_text == 'ਕਰਤਾ ਪੁਰਖ'
    assert view.latin_text == 'karatā purakha'
    assert view.snippet == 'ਕਰਤਾ ਪੁਰਖ'
    m = view.match
    assert m.result.index == 1
    assert m.line == 'ਕਰਤਾ ਪੁਰਖੁ'
    assert m.latin_line == 'karatā purakhu'
    assert m.prev_line == 'ਸਤਿ ਨਾਮੁ'
    assert m.next_line == 'ਨਿਰਭਉ ਨਿਰਵੈਰੁ'
    assert m.score == pytest.approx(0.9)
    assert m.confidence == 90


def test_first_line_has_no_previous(punjabi):
    m = punjabi.update('', 'ਸਤਿ ਨਾਮੁ ॥').match
    assert m.result.index == 0
    assert m.prev_line is None
    assert m.confidence == 100


def test_final_phrase_resets_the_snippet(punjabi):
    punjabi.update('', 'ਕਰਤਾ ਪੁਰਖ')
    punjabi.on_final()
    view = punjabi.update('ਕਰਤਾ ਪੁਰਖ', '')
    assert view.snippet == ''
    assert view.match is None
    assert view.full_text == 'ਕਰਤਾ ਪੁਰਖ'


def test_snippet_survives_until_new_interim(punjabi):
    punjabi.update('', 'ਨਿਰਭਉ')
    view = punjabi.update('', '')
    assert view.snippet == 'ਨਿਰਭਉ'
    assert view.match.result.index == 2


def test_unguided_session_never_matches():
    g = GuidedMatcher('pa-IN', corpora={'shabad_kirtan': LINES}, guided=False)
    view = g.update('', 'ਸਤਿ ਨਾਮੁ')
    assert view.match is None
    assert view.latin_text == 'sati nāmu'


def test_hindi_uses_bundled_song():
    g = GuidedMatcher('hi-IN')
    view = g.update('', 'पतित पावन सीता')
    assert view.match.result.index == 1
    assert view.match.latin_line is None
    assert view.latin_text == view.full_text


def test_english_has_nothing_to_match():
    g = GuidedMatcher('en-US')
    view = g.update('hello', 'world')
    assert view.full_text == 'hello world'
    assert view.latin_text == 'hello world'
    assert view.match is None


def test_missing_corpus_disables_matching():
    g = GuidedMatcher('pa-IN', corpora={})
    assert g.update('', 'ਸਤਿ').match is None


def test_full_text_is_tail_limited():
    g = GuidedMatcher('en-US', max_tail=5)
    assert g.update('abcdefgh', '').full_text == 'defgh'


def test_set_language_switches_profile(punjabi):
    punjabi.update('', 'ਸਤਿ')
    punjabi.set_language('hi-IN')
    assert punjabi.snippet == ''
    assert punjabi.profile.tag == 'hi-IN'
    assert punjabi.update('', 'राम').match is None
    with pytest.raises(UnsupportedLanguageError):
        punjabi.set_language('fr-FR')


def test_clear_drops_snippet(punjabi):
    punjabi.update('', 'ਸਤਿ')
    punjabi.clear()
    assert punjabi.best_match() is None


def test_partial_scorer_prefers_containing_line():
    g = GuidedMatcher('pa-IN', corpora={'shabad_kirtan': LINES}, scorer=partial_similarity)
    m = g.update('', 'ਨਿਰਵੈਰੁ').match
    assert m.result.index == 2
    assert m.confidence == 100


def test_confidence_rounds_half_up():
    g = GuidedMatcher('pa-IN', corpora={'shabad_kirtan': ['abcdefgh']})
    m = g.update('', 'abcdexyz').match
    assert m.score == 0.625
    assert m.confidence == 63


def test_default_session_loads_bundled_corpora():
    g = GuidedMatcher('pa-IN')
    assert set(g.corpora) == {'shabad_kirtan', 'hindi_song'}
    assert g.update('', 'ਜਬ ਆਵ ਕੀ ਅਉਧ ਨਿਦਾਨ ਬਨੈ').match.result.index == 3
