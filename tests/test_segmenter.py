from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from wordbreak.dictionary import Dictionary
from wordbreak.errors import NonAlphabeticRun, UnmatchedRun
from wordbreak.segmenter import Segmenter
from wordbreak.trie import TrieCursor


def split(words, text, **policies):
    return Segmenter(Dictionary(words), **policies).segment(text)


def test_greedy_takes_longest_word():
    result = split(["a", "ab", "abc"], "abc")
    assert result.ok
    assert result.words == ("abc",)


def test_backtrack_commits_ab_not_a():
    assert split(["a", "ab"], "aba").words == ("ab", "a")


def test_backtrack_after_dead_end():
    # "abc" is only a prefix of "abcd"; "abce" dead-ends and falls back to "ab"
    result = split(["a", "ab", "abcd", "c", "e"], "abce")
    assert result.words == ("ab", "c", "e")
    assert result.spans == ((0, 2), (2, 3), (3, 4))


def test_prefix_running_into_end_of_input_backtracks():
    assert split(["the", "there", "re"], "thereth").ok is False
    assert split(["the", "there", "r"], "ther").words == ("the", "r")


def test_committed_words_are_not_reconsidered():
    result = split(["ab", "abc", "cd"], "abcd")
    assert not result.ok
    assert result.error.position == 3
    assert result.partial == ("abc",)


def test_sentence(segmenter):
    assert segmenter.split("thecatsatonthemat") == ["the", "cats", "at", "on", "the", "mat"]
    assert segmenter.split("applepie") == ["apple", "pie"]


def test_case_is_preserved_in_output(segmenter):
    assert segmenter.split("HelloWorld") == ["Hello", "World"]


def test_empty_dictionary_fails_at_zero():
    result = split([], "anything")
    assert not result.ok
    assert isinstance(result.error, UnmatchedRun)
    assert result.error.position == 0
    with pytest.raises(UnmatchedRun):
        result.unwrap()


def test_empty_dictionary_fails_on_non_alphabetic_too():
    result = split([], "123")
    assert isinstance(result.error, UnmatchedRun)
    assert result.error.position == 0


def test_empty_input(segmenter):
    result = segmenter.segment("")
    assert result.ok
    assert result.words == ()
    assert split([], "").words == ()


def test_empty_word_in_dictionary_does_not_stall():
    d = Dictionary(["a"])
    d.insert("")
    assert d.trie.root.is_terminal
    assert Segmenter(d).segment("aa").words == ("a", "a")


def test_failure_reports_position_and_excerpt(segmenter):
    result = segmenter.segment("thecatqzzzzzzzzzzzzzzzzz")
    assert not result.ok
    assert result.words == ()
    assert result.partial == ("the", "cat")
    assert result.error.position == 6
    assert result.error.text == "thecatqzzzzzzzzzzzzzzzzz"
    assert "position 6" in str(result.error)
    assert result.error.excerpt.endswith("...")


def test_split_raises(segmenter):
    with pytest.raises(UnmatchedRun) as excinfo:
        segmenter.split("catx")
    assert excinfo.value.position == 3


def test_segment_many_continues_after_failure(segmenter):
    results = list(segmenter.segment_many(["thecat", "qqq", "applepie"]))
    assert [r.ok for r in results] == [True, False, True]
    assert results[2].words == ("apple", "pie")


def test_spans_reproduce_input(segmenter):
    text = "thereisanappleinthecat"
    result = segmenter.segment(text)
    assert "".join(result.words) == text
    for (start, end), word in zip(result.spans, result.words):
        assert text[start:end] == word


# separator policy

def test_no_separator_keeps_every_character():
    assert split(["hello", "world"], "helloworld").words == ("hello", "world")


def test_no_separator_rejects_separator_character():
    result = split(["hello", "world"], "hello_world")
    assert not result.ok
    assert isinstance(result.error, NonAlphabeticRun)
    assert result.error.position == 5


def test_skip_separator_drops_one_character_per_boundary():
    result = split(["hello", "world"], "hello_world", separator="skip")
    assert result.words == ("hello", "world")
    assert result.spans == ((0, 5), (6, 11))


def test_skip_separator_eats_a_letter_without_separators():
    # without separators the skipped character is part of the next word
    result = split(["hello", "world", "orld"], "helloworld", separator="skip")
    assert result.words == ("hello", "orld")


def test_skip_separator_after_backtrack():
    result = split(["a", "ab", "abcd", "e"], "ab-e", separator="skip")
    assert result.words == ("ab", "e")


def test_skip_separator_at_end_of_input():
    assert split(["ab"], "ab", separator="skip").words == ("ab",)
    assert split(["ab"], "ab.", separator="skip").words == ("ab",)


# unmatched letters

def test_unmatched_single():
    result = split(["cat", "dog"], "catxdog", on_unmatched="single")
    assert result.words == ("cat", "x", "dog")


def test_unmatched_skip():
    result = split(["cat", "dog"], "catxxdog", on_unmatched="skip")
    assert result.words == ("cat", "dog")
    assert result.spans == ((0, 3), (5, 8))


def test_unmatched_fail_is_default():
    result = split(["cat", "dog"], "catxdog")
    assert type(result.error) is UnmatchedRun
    assert result.error.position == 3


# non-alphabetic runs

def test_non_alpha_fail_is_default():
    result = split(["cat"], "cat123")
    assert isinstance(result.error, NonAlphabeticRun)
    assert result.error.run == "123"
    assert result.error.position == 3


def test_non_alpha_opaque():
    result = split(["cat", "dog"], "cat123dog!!", on_non_alpha="opaque")
    assert result.words == ("cat", "123", "dog", "!!")


def test_non_alpha_skip():
    result = split(["cat", "dog"], "cat--dog", on_non_alpha="skip")
    assert result.words == ("cat", "dog")


def test_dictionary_entries_with_symbols_still_match():
    result = split(["don't", "stop"], "don'tstop", on_non_alpha="skip")
    assert result.words == ("don't", "stop")


def test_non_alpha_run_stops_where_a_word_starts():
    assert split(["cat", "42"], "cat!42", on_non_alpha="opaque").words == ("cat", "!", "42")
    assert split(["cat", "42"], "cat!42", on_non_alpha="skip").words == ("cat", "42")
    result = split(["cat", "42"], "cat!?42")
    assert result.error.run == "!?"


def test_policies_are_independent():
    result = split(["cat"], "cat1x", on_non_alpha="opaque", on_unmatched="skip")
    assert result.words == ("cat", "1")


def test_unknown_policy_rejected(english):
    with pytest.raises(ValueError, match="separator"):
        Segmenter(english, separator="two")
    with pytest.raises(ValueError, match="on_non_alpha"):
        Segmenter(english, on_non_alpha="ignore")


def test_round_advances_once_per_character(monkeypatch):
    n = 5000
    d = Dictionary(["a" * n, "a" * n + "b"])
    steps = 0
    advance = TrieCursor.advance

    def counting_advance(self, ch):
        nonlocal steps
        steps += 1
        return advance(self, ch)

    monkeypatch.setattr(TrieCursor, "advance", counting_advance)
    result = Segmenter(d, on_unmatched="single").segment("a" * n + "c")
    assert result.words == ("a" * n, "c")
    # n + 1 steps for the first round, one for the "c" round
    assert steps == n + 2


def test_long_input_stays_fast(english):
    text = "thecatsatonthemat" * 2000
    assert len(Segmenter(english).split(text)) == 6 * 2000


def test_shared_dictionary_across_threads(english):
    texts = ["thecatsatonthemat", "applepie", "helloworld", "qqq", "thereisacat"] * 40
    expected = [Segmenter(english).segment(t).words for t in texts]
    size = len(english)

    def work(text):
        return Segmenter(english).segment(text).words

    with ThreadPoolExecutor(max_workers=8) as pool:
        assert list(pool.map(work, texts)) == expected
    assert len(english) == size
