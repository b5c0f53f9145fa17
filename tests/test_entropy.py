import itertools
import math
import operator

import pytest

from wordle_solver.entropy import (
    REDUCTIONS,
    adversarial_objective,
    average_objective,
    guess_objective,
)
from wordle_solver.patterns import Constraint, letter_count_matrix, word_matrix
from wordle_solver.words import encode_word


def words(*texts):
    return sorted(encode_word(t) for t in texts)


UNEVEN = words("abcde", "fghij", "klmno", "pqrst")

POOL = words(
    "abbey", "abide", "allee", "apple", "babes", "banal", "eerie", "geese",
    "hello", "lever", "llama", "paper", "speed", "steel", "sleep", "sweet",
)


def test_disjoint_pair_scores_zero():
    remaining = words("abcde", "fghij")

    assert average_objective(encode_word("abcde"), remaining) == 0.0
    assert adversarial_objective(encode_word("abcde"), remaining) == 0.0


def test_uneven_split():
    guess = encode_word("abcde")

    assert average_objective(guess, UNEVEN) == pytest.approx(3 * math.log2(3) / 4)
    assert adversarial_objective(guess, UNEVEN) == pytest.approx(math.log2(3))


def test_uninformative_guess():
    # shares nothing with any answer, so every answer leaves all four
    guess = encode_word("zzzzz")

    assert average_objective(guess, UNEVEN) == pytest.approx(2.0)
    assert adversarial_objective(guess, UNEVEN) == pytest.approx(2.0)


def test_average_never_exceeds_worst_case():
    for guess in POOL:
        assert average_objective(guess, POOL) <= adversarial_objective(guess, POOL) + 1e-12


def test_scores_are_non_negative():
    matrix = word_matrix(POOL)
    counts = letter_count_matrix(matrix)

    for guess, truth in itertools.product(POOL, repeat=2):
        info = Constraint.from_truth(guess, truth)
        assert info.count(matrix, counts) >= 1
        assert math.log2(info.count(matrix, counts)) >= 0.0


def test_cutoff_abandons_guess():
    matrix = word_matrix(UNEVEN)
    counts = letter_count_matrix(matrix)
    guess = encode_word("abcde")

    assert guess_objective(guess, UNEVEN, matrix, counts, operator.add, cutoff=1.0) is None
    assert guess_objective(guess, UNEVEN, matrix, counts, max, cutoff=1.0) is None
    # equal to the cutoff is not beaten, so it must still be reported
    total = 3 * math.log2(3)
    assert guess_objective(guess, UNEVEN, matrix, counts, operator.add, cutoff=total) == pytest.approx(total)


def test_memo_scores_each_constraint_once(monkeypatch):
    calls = []
    original = Constraint.count

    def counting(self, matrix, counts):
        calls.append(self)
        return original(self, matrix, counts)

    monkeypatch.setattr(Constraint, "count", counting)
    matrix = word_matrix(UNEVEN)
    counts = letter_count_matrix(matrix)

    total = guess_objective(encode_word("abcde"), UNEVEN, matrix, counts, operator.add)

    # fghij, klmno and pqrst all produce the same all-absent constraint
    assert len(calls) == 2
    assert total == pytest.approx(3 * math.log2(3))


def test_reduction_names():
    assert REDUCTIONS["sum"](1.0, 2.0) == 3.0
    assert REDUCTIONS["max"](1.0, 2.0) == 2.0
