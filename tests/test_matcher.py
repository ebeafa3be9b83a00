import pytest

from wordfilter.errors import InvalidWordLength, InvalidCharValue
from wordfilter.word import Word, Excluded, Included
from wordfilter.matcher import WordsResult, matches


def test_return_matching_word():
    excluded = Excluded.parse('w')
    included = Included()
    result = WordsResult(Word('aargh'))

    assert result.is_word_possible('aahed', excluded, included) is False
    assert result.is_word_possible('aalii', excluded, included) is False
    assert result.is_word_possible('aargh', excluded, included) is True
    assert result.is_word_possible('zowie', excluded, included) is False

    assert result.possible_words == [Word('aargh')]
    assert str(result.possible_words[0]) == 'AARGH'


def test_no_match_leaves_result_empty():
    result = WordsResult(Word('aargh'))

    assert result.is_word_possible('zowie', Excluded.parse('w'), Included()) is False
    assert result.length == 0


def test_excluded_letter_under_wildcard():
    excluded = Excluded.parse('m')
    included = Included()
    result = WordsResult(Word('*orro'))

    assert result.is_word_possible('zorro', excluded, included) is True
    assert result.is_word_possible('morro', excluded, included) is True

    assert [str(w) for w in result.possible_words] == ['ZORRO', 'MORRO']


def test_exact_match():
    result = WordsResult(Word('zowie'))

    assert result.is_word_possible('zowie', Excluded(), Included()) is True
    assert result.is_word_possible('aaron', Excluded(), Included()) is False
    assert result.possible_words == [Word('zowie')]


def test_match_with_wildcards():
    result = WordsResult(Word('z?*ie'))

    assert result.is_word_possible('zowie', Excluded(), Included()) is True
    assert result.is_word_possible('aaron', Excluded(), Included()) is False
    assert result.possible_words == [Word('zowie')]


def test_included_letters():
    included = Included.parse('i')
    result = WordsResult(Word('*****'))

    assert result.is_word_possible('light', Excluded(), included) is True
    assert result.possible_words == [Word('light')]


def test_all_wildcards_never_reach_included_check():
    # every position is skipped so nothing is rejected either
    chosen = Word('*****')

    assert matches(chosen, Word('focus'), Excluded(), Included.parse('i')) is True


def test_included_needs_a_letter_position():
    chosen = Word('f****')

    assert matches(chosen, Word('light'), Excluded(), Included.parse('i')) is False
    assert matches(chosen, Word('focus'), Excluded(), Included.parse('i')) is True


def test_included_overrides_mismatch():
    chosen = Word('aargh')

    assert matches(chosen, Word('ixxxx'), Excluded(), Included.parse('i')) is True
    assert matches(chosen, Word('ixxxx'), Excluded(), Included()) is False


def test_included_overrides_later_exclusion():
    chosen = Word('aargh')

    assert matches(chosen, Word('aargh'), Excluded.parse('h'), Included()) is False
    assert matches(chosen, Word('aargh'), Excluded.parse('h'), Included.parse('a')) is True


def test_exclusion_before_equality():
    # excluded letter in the chosen word rejects even an exact match
    assert matches(Word('aargh'), Word('aargh'), Excluded.parse('g'), Included()) is False


def test_wildcard_candidate_is_not_a_letter():
    chosen = Word('aargh')

    assert matches(chosen, Word('a?rgh'), Excluded(), Included()) is False
    assert matches(Word('?????'), Word('a?rgh'), Excluded(), Included()) is True


def test_matches_is_case_insensitive():
    assert matches(Word('AaRgH'), Word('aargh'), Excluded(), Included()) is True


def test_repeats_are_kept():
    result = WordsResult(Word('aargh'))

    result.is_word_possible('aargh', Excluded(), Included())
    result.is_word_possible('aargh', Excluded(), Included())

    assert result.length == 2


def test_bad_candidate_raises():
    result = WordsResult(Word('aargh'))

    with pytest.raises(InvalidWordLength):
        result.is_word_possible('aarghh', Excluded(), Included())

    with pytest.raises(InvalidCharValue):
        result.is_word_possible('aa-gh', Excluded(), Included())

    assert result.length == 0


def test_chosen_word_from_text():
    result = WordsResult('aargh')

    assert result.chosen_word == Word('aargh')

    with pytest.raises(InvalidWordLength):
        WordsResult('aar')


def test_render():
    result = WordsResult(Word('*orro'))
    result.is_word_possible('zorro', Excluded(), Included())
    result.is_word_possible('morro', Excluded(), Included())

    assert result.render() == (
        'List of possible matching words:\n'
        '1. ZORRO\n'
        '2. MORRO\n'
    )
    assert str(result) == result.render()

    # rendering doesn't consume anything
    assert result.length == 2


def test_render_empty():
    assert WordsResult(Word('aargh')).render() == 'List of possible matching words:\n'
