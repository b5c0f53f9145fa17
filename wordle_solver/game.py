"""
game.py

The refinement loop: turn feedback into a Constraint and narrow the word
lists with it.
"""

from collections import namedtuple

from wordle_solver.patterns import Constraint, feedback_for, filter_words
from wordle_solver.selector import best_choice_adv, best_choice_avg
from wordle_solver.words import WORD_LENGTH, decode_word


SOLVED = "g" * WORD_LENGTH
FEEDBACK_SYMBOLS = "gyb"

Round = namedtuple("Round", ["guess", "score", "feedback", "remaining"])


def parse_feedback(text: str) -> str:
    """Normalise a g/y/b response, rejecting anything malformed."""
    feedback = text.strip().lower()
    if len(feedback) != WORD_LENGTH or any(c not in FEEDBACK_SYMBOLS for c in feedback):
        raise ValueError(
            f"feedback must be {WORD_LENGTH} characters of {'/'.join(FEEDBACK_SYMBOLS)}, "
            f"got {text.strip()!r}"
        )
    return feedback


def refine(allowed, remaining, constraint: Constraint, hard_mode=False):
    """
    Apply one round of information to the word lists.

    The remaining answers are always filtered. In hard mode the allowed
    guesses must also conform to everything learned so far.
    """
    remaining = filter_words(remaining, constraint)
    if not remaining:
        raise ValueError("no consistent candidates remain")

    if hard_mode:
        allowed = filter_words(allowed, constraint)

    return allowed, remaining


def choose_guess(allowed, remaining, word_freqs=None, adversarial=False, **kwargs):
    if adversarial:
        return best_choice_adv(allowed, remaining, word_freqs, **kwargs)
    return best_choice_avg(allowed, remaining, word_freqs, **kwargs)


def play(
    solution,
    allowed,
    remaining,
    word_freqs=None,
    hard_mode=False,
    adversarial=False,
    **kwargs,
):
    """
    Self-play against a known solution.

    Feedback is generated with `feedback_for` and fed back through
    `Constraint.from_feedback`, exactly as a player's response would be.
    Returns the list of rounds played, the last one being the solve.
    """
    if solution not in remaining:
        raise ValueError(f"solution {decode_word(solution)!r} is not a remaining word")
    if solution not in allowed:
        # It could never be guessed, so the game would not end.
        raise ValueError(f"solution {decode_word(solution)!r} is not an allowed guess")

    rounds = []
    while True:
        guess, score = choose_guess(allowed, remaining, word_freqs, adversarial, **kwargs)
        feedback = feedback_for(guess, solution)
        rounds.append(Round(guess, score, feedback, len(remaining)))

        if feedback == SOLVED:
            return rounds

        info = Constraint.from_feedback(guess, feedback)
        allowed, remaining = refine(allowed, remaining, info, hard_mode)
