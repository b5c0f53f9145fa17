"""
patterns.py

Feedback patterns and the constraints derived from them.

Instead of storing the coloured squares of one round, a Constraint keeps the
information in a form that makes testing another word cheap:

    correct     per position, whether the guess letter was a hit
    min_counts  per letter, how many times it must occur
    max_counts  per letter, how many times it may occur

A word is consistent with the round iff its hits line up with `correct` and
every letter count lies within [min, max].
"""

from collections import Counter
from dataclasses import dataclass, field

import numpy as np

from wordle_solver.words import ALPHABET_SIZE, WORD_LENGTH


HIT = "g"
PRESENT = "y"
ABSENT = "b"


@dataclass(frozen=True)
class Constraint:
    # Equality and hashing ignore the guess. Constraints are only ever compared
    # against others built from the same guess.
    guess: tuple = field(compare=False)
    correct: tuple
    min_counts: tuple
    max_counts: tuple

    @classmethod
    def from_truth(cls, guess, truth):
        """Constraint the player would learn by guessing `guess` when `truth` is the answer."""
        correct = tuple(g == t for g, t in zip(guess, truth))
        guess_counts = Counter(guess)
        truth_counts = Counter(truth)

        min_counts = [0] * ALPHABET_SIZE
        max_counts = [WORD_LENGTH] * ALPHABET_SIZE
        for letter, n_guess in guess_counts.items():
            n_truth = truth_counts[letter]
            if n_guess <= n_truth:
                min_counts[letter] = n_guess
            else:
                # The guess overused this letter, so the exact count is known.
                min_counts[letter] = n_truth
                max_counts[letter] = n_truth

        return cls(guess, correct, tuple(min_counts), tuple(max_counts))

    @classmethod
    def from_feedback(cls, guess, feedback: str):
        """
        Constraint described by a g/y/b feedback string for `guess`.

        Feedback that no real answer could produce is not rejected; it yields
        a constraint that may match nothing.
        """
        if len(feedback) != len(guess):
            raise ValueError(f"feedback {feedback!r} does not match the guess length")

        correct = []
        min_counts = [0] * ALPHABET_SIZE
        max_counts = [WORD_LENGTH] * ALPHABET_SIZE

        for letter, symbol in zip(guess, feedback):
            if symbol not in (HIT, PRESENT, ABSENT):
                raise ValueError(f"unknown feedback symbol {symbol!r} in {feedback!r}")
            correct.append(symbol == HIT)
            if symbol != ABSENT:
                min_counts[letter] += 1

        # Absent caps the letter at however many hits/presents it earned.
        for letter, symbol in zip(guess, feedback):
            if symbol == ABSENT:
                max_counts[letter] = min_counts[letter]

        return cls(guess, tuple(correct), tuple(min_counts), tuple(max_counts))

    def check(self, word) -> bool:
        """Whether `word` is consistent with this constraint."""
        counts = [0] * ALPHABET_SIZE

        for i, letter in enumerate(word):
            if (letter == self.guess[i]) != self.correct[i]:
                return False
            counts[letter] += 1
            if counts[letter] > self.max_counts[letter]:
                return False

        # Only letters of the guess can carry a non-zero minimum.
        return all(counts[letter] >= self.min_counts[letter] for letter in self.guess)

    def matches(self, matrix: np.ndarray, counts: np.ndarray) -> np.ndarray:
        """
        Vectorised `check` over many words.

        `matrix` is an (n, 5) array of words and `counts` the matching
        (n, 26) letter-count array (see `word_matrix` and `letter_count_matrix`).
        """
        hits = matrix == np.asarray(self.guess, dtype=matrix.dtype)
        mask = np.all(hits == np.asarray(self.correct), axis=1)
        mask &= np.all(counts >= np.asarray(self.min_counts, dtype=counts.dtype), axis=1)
        mask &= np.all(counts <= np.asarray(self.max_counts, dtype=counts.dtype), axis=1)
        return mask

    def count(self, matrix: np.ndarray, counts: np.ndarray) -> int:
        return int(np.count_nonzero(self.matches(matrix, counts)))


def feedback_for(guess, answer) -> str:
    """
    Wordle feedback for a (guess, answer) pair as a g/y/b string.

    Standard duplicate-letter rules:

    1. First mark hits. Each hit consumes one instance of that letter from
       the answer.

    2. Then mark presents only while unused instances of the letter remain.
    """
    result = [ABSENT] * len(guess)
    counts = Counter(answer)

    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            result[i] = HIT
            counts[g] -= 1

    for i, g in enumerate(guess):
        if result[i] == ABSENT and counts[g] > 0:
            result[i] = PRESENT
            counts[g] -= 1

    return "".join(result)


def word_matrix(words) -> np.ndarray:
    """Stack words into an (n, 5) uint8 array."""
    return np.array(words, dtype=np.uint8).reshape(-1, WORD_LENGTH)


def letter_count_matrix(matrix: np.ndarray) -> np.ndarray:
    """Per-word letter occurrence counts as an (n, 26) uint8 array."""
    one_hot = matrix[:, :, None] == np.arange(ALPHABET_SIZE, dtype=matrix.dtype)
    return one_hot.sum(axis=1, dtype=np.uint8)


def filter_words(words, constraint: Constraint) -> list:
    """Keep the words consistent with `constraint`, preserving order."""
    return [w for w in words if constraint.check(w)]
