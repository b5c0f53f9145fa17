"""
entropy.py

Objective evaluation for a single guess.

For every remaining word taken as the hypothetical answer, the guess yields a
Constraint; the words consistent with it are what would be left after that
round. The guess is scored by folding log2 of those counts over all
hypothetical answers:

    sum  -> total remaining entropy (divide by the word count for the average)
    max  -> worst-case remaining entropy

Lower is better.
"""

import math
import operator

from wordle_solver.patterns import Constraint, letter_count_matrix, word_matrix


REDUCTIONS = {
    "sum": operator.add,
    "max": max,
}


def guess_objective(guess, remaining, matrix, counts, reduction, cutoff=math.inf):
    """
    Fold log2(remaining count) over every word in `remaining` as the answer.

    `matrix` and `counts` are the word and letter-count arrays for
    `remaining`. Returns the un-normalised total, or None as soon as the
    running total exceeds `cutoff`. Both reductions only grow as terms are
    folded in, so a guess that crosses the cutoff can never win.
    """
    total = 0.0
    # Distinct answers often produce identical constraints, so score each once.
    memo = {}

    for truth in remaining:
        info = Constraint.from_truth(guess, truth)

        entropy = memo.get(info)
        if entropy is None:
            # The truth always matches its own constraint, so the count is >= 1.
            entropy = math.log2(info.count(matrix, counts))
            memo[info] = entropy

        total = reduction(total, entropy)
        if total > cutoff:
            return None

    return total


def average_objective(guess, remaining):
    """Expected remaining entropy in bits if the answer is uniform over `remaining`."""
    matrix = word_matrix(remaining)
    total = guess_objective(guess, remaining, matrix, letter_count_matrix(matrix), operator.add)
    return total / len(remaining)


def adversarial_objective(guess, remaining):
    """Remaining entropy in bits if the answer is picked to hurt us most."""
    matrix = word_matrix(remaining)
    return guess_objective(guess, remaining, matrix, letter_count_matrix(matrix), max)
