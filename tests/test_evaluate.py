import itertools
import random
from collections import Counter

import pytest

from wordguess.config import WORDS_PATH
from wordguess.game import classify_letters, evaluate_guess, is_win, upgrade
from wordguess.models import LetterClass, Tag
from wordguess.words import load_word_bank, read_word_source

C, P, A = Tag.CORRECT, Tag.PRESENT, Tag.ABSENT


@pytest.mark.parametrize("target,guess,expected", [
    ("CRANE", "RANCH", [P, P, P, P, A]),
    ("LEVEL", "ELBOW", [P, P, A, A, A]),
    ("CRANE", "EERIE", [A, A, P, A, C]),
    ("LEVEL", "EERIE", [P, C, A, A, A]),
    ("ABBEY", "BABES", [P, P, C, C, A]),
    ("SPEED", "EERIE", [P, P, A, A, A]),
    ("APPLE", "APPLE", [C, C, C, C, C]),
    ("CRANE", "TRACE", [A, C, C, P, C]),
])
def test_known_feedback(target, guess, expected):
    assert evaluate_guess(target, guess) == expected


def test_repeated_guess_letter_not_double_counted():
    # only one E left over after the exact match
    tags = evaluate_guess("CRANE", "EERIE")
    assert [t for ch, t in zip("EERIE", tags) if ch == "E"].count(P) == 0
    assert tags[4] is C


def _sample_words(n=40):
    bank = load_word_bank(read_word_source(WORDS_PATH))
    return random.Random(0).sample(list(bank), n)


def test_letter_tags_never_exceed_target_count():
    words = _sample_words()
    for target, guess in itertools.product(words, repeat=2):
        tags = evaluate_guess(target, guess)
        counts = Counter(target)
        hits = Counter(ch for ch, t in zip(guess, tags) if t is not A)
        for letter, n in hits.items():
            assert n <= counts[letter], (target, guess)


def test_all_correct_only_for_exact_guess():
    words = _sample_words()
    for target, guess in itertools.product(words, repeat=2):
        assert is_win(evaluate_guess(target, guess)) == (target == guess)


def test_evaluate_is_pure():
    first = evaluate_guess("LEVEL", "ELBOW")
    second = evaluate_guess("LEVEL", "ELBOW")
    assert first == second
    assert first is not second


def test_classify_letters_takes_best_tag_per_letter():
    seen = classify_letters("EERIE", evaluate_guess("CRANE", "EERIE"))
    assert seen == {
        "E": LetterClass.CORRECT,
        "R": LetterClass.PRESENT,
        "I": LetterClass.ABSENT,
    }


def test_upgrade_never_downgrades():
    order = [LetterClass.UNKNOWN, LetterClass.ABSENT, LetterClass.PRESENT, LetterClass.CORRECT]
    for i, current in enumerate(order):
        for j, observed in enumerate(order):
            assert upgrade(current, observed) == order[max(i, j)]
