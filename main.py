"""
main.py

Interactive Wordle solver.

Each round prints the guess with the lowest remaining entropy, then asks for
the feedback the game gave:

    g = right letter, right spot
    y = right letter, wrong spot
    b = letter not in the word (beyond the copies already marked)

Options:
-hard: only suggest guesses consistent with everything learned so far.
-adversarial: minimise the worst-case entropy instead of the average.
-freq FILE: word frequency data used to break ties.
-solution WORD: play against a known answer instead of prompting.
"""

import argparse
import time

from wordle_solver.game import (
    SOLVED,
    choose_guess,
    parse_feedback,
    play,
    refine,
)
from wordle_solver.patterns import Constraint
from wordle_solver.selector import DEFAULT_CHUNK_SIZE
from wordle_solver.words import (
    ALLOWED_PATH,
    ANSWERS_PATH,
    decode_word,
    encode_word,
    load_freq_data,
    load_word_list,
)


REMAINING_DISPLAY_LIMIT = 10


def _print_remaining(remaining):
    if len(remaining) < REMAINING_DISPLAY_LIMIT:
        print("Remaining words: " + " ".join(decode_word(w) for w in remaining))


def _read_feedback():
    while True:
        response = input("Response (b|y|g) * 5: ")
        try:
            return parse_feedback(response)
        except ValueError as exc:
            print(exc)


def run_interactive(allowed, remaining, word_freqs, hard_mode, adversarial, search_kwargs):
    kind = "maximum" if adversarial else "average"

    while True:
        start = time.perf_counter()
        guess, entropy = choose_guess(allowed, remaining, word_freqs, adversarial, **search_kwargs)
        elapsed_ms = (time.perf_counter() - start) * 1000

        print(f'Best guess is "{decode_word(guess)}" with {kind} entropy {entropy:.4f}.')
        print(f"Computation took {elapsed_ms:.0f} ms.")

        try:
            feedback = _read_feedback()
        except EOFError:
            print("Aborted: no interactive input available.")
            return

        if feedback == SOLVED:
            return

        info = Constraint.from_feedback(guess, feedback)
        allowed, remaining = refine(allowed, remaining, info, hard_mode)
        _print_remaining(remaining)


def run_self_play(solution, allowed, remaining, word_freqs, hard_mode, adversarial, search_kwargs):
    kind = "maximum" if adversarial else "average"
    rounds = play(solution, allowed, remaining, word_freqs, hard_mode, adversarial, **search_kwargs)

    for n, rnd in enumerate(rounds, start=1):
        print(
            f"{n}. {decode_word(rnd.guess)} [{rnd.feedback}] "
            f"{kind} entropy {rnd.score:.4f} over {rnd.remaining:,} word(s)"
        )
    print(f"Solved in {len(rounds)} guess(es).")


def parse_args():
    parser = argparse.ArgumentParser(
        description="Entropy-based Wordle solver with optional hard and adversarial modes."
    )
    parser.add_argument(
        "guess_list",
        nargs="?",
        default=str(ALLOWED_PATH),
        help="Allowed guesses, one word per line (default: data/allowed.txt).",
    )
    parser.add_argument(
        "word_list",
        nargs="?",
        default=str(ANSWERS_PATH),
        help="Possible answers, one word per line (default: data/answers.txt).",
    )
    parser.add_argument(
        "-hard",
        action="store_true",
        help="Hard mode: only allow guesses that conform to previous feedback.",
    )
    parser.add_argument(
        "-adversarial",
        action="store_true",
        help="Assume the answer is chosen adversarially (minimise worst-case entropy).",
    )
    parser.add_argument(
        "-freq",
        type=str,
        default=None,
        help="Optional 'word weight' file used to break ties between equal guesses.",
    )
    parser.add_argument(
        "-solution",
        type=str,
        default=None,
        help="Play against this answer instead of reading feedback interactively.",
    )
    parser.add_argument(
        "-workers",
        type=int,
        default=None,
        help="Worker processes for the guess search (default: CPU count).",
    )
    parser.add_argument(
        "-chunk-size",
        type=int,
        default=DEFAULT_CHUNK_SIZE,
        help=f"Guesses per worker task (default: {DEFAULT_CHUNK_SIZE}).",
    )
    parser.add_argument(
        "-progress",
        action="store_true",
        help="Show a progress bar during each guess search.",
    )
    return parser.parse_args()


def main():
    args = parse_args()

    try:
        allowed = load_word_list(args.guess_list)
        print(f"Loaded guess list with {len(allowed):,} words!")
        remaining = load_word_list(args.word_list)
        print(f"Loaded word list with {len(remaining):,} words!")

        word_freqs = {}
        if args.freq is not None:
            word_freqs = load_freq_data(args.freq)
            print(f"Loaded word frequency data for {len(word_freqs):,} words!")

        if not allowed or not remaining:
            raise ValueError("word lists must not be empty")

        search_kwargs = {
            "workers": args.workers,
            "chunk_size": args.chunk_size,
            "progress": args.progress,
        }

        if args.solution is not None:
            solution = encode_word(args.solution.lower())
            run_self_play(
                solution, allowed, remaining, word_freqs, args.hard, args.adversarial, search_kwargs
            )
        else:
            run_interactive(
                allowed, remaining, word_freqs, args.hard, args.adversarial, search_kwargs
            )
    except (OSError, ValueError) as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
