import sys

import pytest

import main


WORDS = ["abbey", "abide", "geese", "hello", "llama", "sweet"]


@pytest.fixture
def word_files(tmp_path):
    allowed = tmp_path / "allowed.txt"
    answers = tmp_path / "answers.txt"
    freq = tmp_path / "freq.txt"
    allowed.write_text("\n".join(WORDS + ["crane", "slate"]) + "\n")
    answers.write_text("\n".join(WORDS) + "\n")
    freq.write_text("hello 5.0\nabbey 0.5\n")
    return str(allowed), str(answers), str(freq)


def _run(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["main.py", *argv])
    main.main()


def test_self_play(monkeypatch, capsys, word_files):
    allowed, answers, freq = word_files

    _run(monkeypatch, allowed, answers, "-freq", freq, "-solution", "llama", "-workers", "1")

    out = capsys.readouterr().out
    assert "Loaded guess list with 8 words!" in out
    assert "Loaded word frequency data for 2 words!" in out
    assert "llama [ggggg]" in out
    assert "Solved in" in out


def test_interactive(monkeypatch, capsys, word_files):
    allowed, answers, _ = word_files
    responses = iter(["nope", "ggggg"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(responses))

    _run(monkeypatch, allowed, answers, "-hard", "-adversarial", "-workers", "1")

    out = capsys.readouterr().out
    assert "with maximum entropy" in out
    assert "feedback must be 5 characters" in out


def test_interactive_eof(monkeypatch, capsys, word_files):
    allowed, answers, _ = word_files

    def no_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)

    _run(monkeypatch, allowed, answers, "-workers", "1")

    assert "Aborted" in capsys.readouterr().out


def test_bad_word_list_exits(monkeypatch, tmp_path):
    bad = tmp_path / "bad.txt"
    bad.write_text("abc1e\n")

    with pytest.raises(SystemExit, match="a-z"):
        _run(monkeypatch, str(bad), str(bad))


def test_interactive_lists_remaining_words(monkeypatch, capsys, word_files):
    allowed, answers, _ = word_files
    responses = iter(["bbbbb"])

    def scripted(prompt=""):
        try:
            return next(responses)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", scripted)

    _run(monkeypatch, allowed, answers, "-hard", "-workers", "1")

    out = capsys.readouterr().out
    assert 'Best guess is "geese"' in out
    assert "Remaining words: llama" in out
    assert 'Best guess is "llama"' in out
    assert "Aborted" in out


def test_interactive_inconsistent_feedback_exits(monkeypatch, word_files):
    allowed, answers, _ = word_files
    # no two words in the pool share their first four letters
    monkeypatch.setattr("builtins.input", lambda prompt="": "ggggb")

    with pytest.raises(SystemExit, match="no consistent candidates remain"):
        _run(monkeypatch, allowed, answers, "-workers", "1")


def test_missing_word_list_exits(monkeypatch, tmp_path):
    missing = str(tmp_path / "missing.txt")

    with pytest.raises(SystemExit, match="missing.txt"):
        _run(monkeypatch, missing, missing)
