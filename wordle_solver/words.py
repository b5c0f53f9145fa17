"""
words.py

Handles loading and encoding the Wordle word lists and frequency data.

Words are stored as tuples of letter indices (0 = 'a' ... 25 = 'z'). Tuples
give us immutability, hashing and lexicographic ordering for free, which is
all the solver needs from a word.
"""

from pathlib import Path


WORD_LENGTH = 5
ALPHABET_SIZE = 26

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
ANSWERS_PATH = DATA_DIR / "answers.txt"
ALLOWED_PATH = DATA_DIR / "allowed.txt"


def encode_word(text: str) -> tuple:
    """Convert a 5-letter lowercase string into a tuple of letter indices."""
    text = text.strip()
    if len(text) != WORD_LENGTH:
        raise ValueError(f"expected a {WORD_LENGTH}-letter word, got {text!r}")

    word = tuple(ord(c) - ord("a") for c in text)
    if any(idx < 0 or idx >= ALPHABET_SIZE for idx in word):
        raise ValueError(f"word has a letter outside of the a-z range: {text!r}")

    return word


def decode_word(word) -> str:
    return "".join(chr(idx + ord("a")) for idx in word)


def load_word_list(path):
    """
    Load a newline-separated word list.

    Blank lines are skipped. The result is sorted and de-duplicated, since the
    selector relies on the sort order for membership tests and tie-breaks.
    """
    words = set()
    with open(path, "r") as f:
        for lineno, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                words.add(encode_word(line))
            except ValueError as exc:
                raise ValueError(f"{path}:{lineno}: {exc}") from exc

    return sorted(words)


def load_freq_data(path):
    """
    Load whitespace-separated (word, weight) pairs into a dict.

    Words missing from the file are treated as weight 0.0 by the selector.
    """
    freqs = {}
    with open(path, "r") as f:
        for lineno, line in enumerate(f, start=1):
            fields = line.split()
            if not fields:
                continue
            if len(fields) != 2:
                raise ValueError(f"{path}:{lineno}: expected 'word weight', got {line.strip()!r}")

            try:
                word = encode_word(fields[0])
                weight = float(fields[1])
            except ValueError as exc:
                raise ValueError(f"{path}:{lineno}: {exc}") from exc

            if weight < 0.0:
                raise ValueError(f"{path}:{lineno}: negative weight for {fields[0]!r}")
            freqs[word] = weight

    return freqs


def load_words(allowed_path=ALLOWED_PATH, answers_path=ANSWERS_PATH):
    """
    Returns:
        answers: sorted list of possible solution words
        allowed: sorted list of valid guess words
    """
    answers = load_word_list(answers_path)
    allowed = load_word_list(allowed_path)
    return answers, allowed
