import random

import pytest
from wordler.engine import (
    CandidateSet,
    NoWordsRemainingError,
    contains,
    delete_filter,
    exactly,
    keep_only_filter,
    letter_at,
    letter_not_at,
    lowercase_word,
    matches,
    of_length,
)

BASE = ["foo", "bar", "bam", "zoo"]


@pytest.mark.parametrize("regex,want", [
    (".oo", ["bar", "bam"]),
    ("ba", ["foo", "zoo"]),
    ("....", BASE),
    ("...", []),
    ("..", []),
    ("", []),
    ("nomatch", BASE),
])
def test_delete(regex, want):
    w = CandidateSet(BASE)
    w.delete(matches(regex))
    assert len(w) == len(want)
    assert w == CandidateSet(want)


@pytest.mark.parametrize("regex,want", [
    (".oo", ["foo", "zoo"]),
    ("ba", ["bar", "bam"]),
    ("....", []),
    ("...", BASE),
    ("..", BASE),
    ("", BASE),
    ("nomatch", []),
])
def test_keep_only(regex, want):
    w = CandidateSet(BASE)
    w.keep_only(matches(regex))
    assert w == CandidateSet(want)


def test_positional_predicates():
    w = CandidateSet(BASE)
    w.keep_only(letter_at(0, "b"))
    assert w.words() == ["bam", "bar"]
    w.delete(letter_at(2, "m"))
    assert w.words() == ["bar"]

    w = CandidateSet(BASE)
    w.keep_only(letter_not_at(1, "o"))
    assert w.words() == ["bam", "bar"]

    w = CandidateSet(BASE)
    w.keep_only(contains("o"))
    w.delete(exactly("zoo"))
    assert w.words() == ["foo"]


def test_equality_ignores_order():
    assert CandidateSet(BASE) == CandidateSet(reversed(BASE))
    assert CandidateSet(BASE) != CandidateSet(["foo"])
    assert CandidateSet() == CandidateSet([])
    assert CandidateSet(["foo", "foo"]) == CandidateSet(["foo"])


def test_contains_and_length():
    w = CandidateSet(BASE)
    assert len(w) == len(BASE)
    for word in BASE:
        assert word in w
    assert "not a word" not in w
    assert "" not in w
    assert len(CandidateSet()) == 0


def test_copies_are_independent():
    source = list(BASE)
    w = CandidateSet(source)
    source[0] = source[0] + " bogus"
    assert w == CandidateSet(BASE)

    clone = w.copy()
    clone.delete(matches("."))
    assert len(clone) == 0
    assert len(w) == len(BASE)


def test_replace():
    w = CandidateSet(BASE)
    w.replace(["bar"])
    assert w == CandidateSet(["bar"])


@pytest.mark.parametrize("desc,filters,want", [
    ("K1", [keep_only_filter(of_length(2))], ["ab"]),
    ("D1", [delete_filter(of_length(1))], ["ab", "abc"]),
    ("D2", [delete_filter(contains("b"))], ["a"]),
    ("K2", [keep_only_filter(matches("c$"))], ["abc"]),
    ("KD", [keep_only_filter(matches("..")), delete_filter(matches("c$"))], ["ab"]),
    ("DD", [delete_filter(matches("^..$")), delete_filter(matches("^a$"))], ["abc"]),
])
def test_filters_apply_in_order(desc, filters, want):
    assert CandidateSet(["a", "ab", "abc"], filters=filters) == CandidateSet(want)


def test_lowercase_word():
    pred = lowercase_word(3)
    assert pred("abc")
    assert not pred("Abc")
    assert not pred("ab")
    assert not pred("a-c")
    assert not pred("abcd")


@pytest.mark.parametrize("words,want", [
    (["aaa", "bcd"], "bcd"),
    (["bcd", "aaa"], "bcd"),
    (["aaa", "bcd", "def", "hij", "cic", "ccc"], "bcd"),
    # equal diversity and weight: smallest word wins
    (["abc", "bca", "cab"], "abc"),
    (["forgo"], "forgo"),
])
def test_best_guess(words, want):
    assert CandidateSet(words).best_guess() == want


def test_best_guess_counts_each_letter_once_per_word():
    # 'a' is in two words (three times in all). Counted per word, "cdz"
    # weighs 6 and "abz" 5; counted per occurrence both would weigh 6.
    w = CandidateSet(["abz", "cdz", "aaq", "crs", "ctu"])
    assert w.best_guess() == "cdz"


def test_pick_random_is_seeded():
    w = CandidateSet(["e", "d", "c", "b", "a"])
    picks = [w.pick_random(random.Random(7)) for _ in range(3)]
    assert len(set(picks)) == 1
    assert picks[0] in w
    assert w.first() == "a"


def test_empty_set_picks_raise():
    w = CandidateSet()
    with pytest.raises(NoWordsRemainingError):
        w.best_guess()
    with pytest.raises(NoWordsRemainingError):
        w.first()
    with pytest.raises(NoWordsRemainingError):
        w.pick_random(random.Random(0))
