import io
import itertools
import random
import sys

from millionaire.console import Console
from millionaire.game import Game, Lifelines, Outcome, Player, main
from millionaire.questions import Question

QUESTIONS = "What is 2+2?;three;four;five;six;B\nCapital of France?;Paris;Rome;Oslo;Bern;A\n"


def clock_from(*values):
    it = itertools.chain(values, itertools.repeat(values[-1]))
    return lambda: next(it)


def make_game(tmp_path, keys, clock=(0,), questions=QUESTIONS):
    path = tmp_path / "questions.txt"
    path.write_text(questions, encoding="utf-8")
    out = io.StringIO()
    console = Console(output=out, input=io.StringIO(keys), sound_dir=tmp_path / "nosound")
    slept = []
    game = Game(console, path, clock=clock_from(*clock), sleep=slept.append, rng=random.Random(0))
    return game, out, slept


def test_all_correct(tmp_path):
    game, out, _ = make_game(tmp_path, "BxAx")
    assert game.play() == [Outcome.CORRECT, Outcome.CORRECT]
    assert "Congratulations!" in out.getvalue()
    assert [q.answer for q in game.questions] == ["B", "A"]


def test_quick_wrong_answer_ends_game(tmp_path):
    game, out, _ = make_game(tmp_path, "Ax")
    assert game.play() == [Outcome.WRONG]
    assert "Sorry. That's incorrect!" in out.getvalue()
    assert len(game.questions) == 1


def test_late_wrong_answer_continues(tmp_path):
    game, out, _ = make_game(tmp_path, "AxAx", clock=(0, 10))
    assert game.play() == [Outcome.LATE_WRONG, Outcome.CORRECT]
    assert "Sorry. That's incorrect!" not in out.getvalue()


def test_time_up_ends_game(tmp_path):
    game, out, _ = make_game(tmp_path, "zx", clock=(0, 31))
    assert game.play() == [Outcome.TIME_UP]
    assert "TIME'S UP" in out.getvalue()


def test_fifty_fifty_lifeline(tmp_path):
    game, out, _ = make_game(tmp_path, "H\nBxAx")
    assert game.play() == [Outcome.CORRECT, Outcome.CORRECT]
    assert game.lifelines.fifty_fifty_used is True
    assert "A." in out.getvalue()
    assert "C." in out.getvalue()


def test_call_friend_lifeline(tmp_path):
    game, out, slept = make_game(tmp_path, "H\x1b[B\nBob\nBxAx")
    assert game.play()[0] == Outcome.CORRECT
    assert "Bob chooses answer B" in out.getvalue()
    assert 44 in slept
    assert game.lifelines.call_used is True


def test_ask_audience_lifeline(tmp_path):
    game, out, slept = make_game(tmp_path, "H\x1b[B\x1b[B\nBxAx")
    assert game.play()[0] == Outcome.CORRECT
    assert "80% of the audience chooses answer B" in out.getvalue()
    assert 32 in slept
    assert game.lifelines.audience_used is True


def test_leaving_help_uses_nothing(tmp_path):
    game, _, _ = make_game(tmp_path, "HeBxAx")
    game.play()
    assert game.lifelines == Lifelines()


def test_spent_lifeline_is_not_reused(tmp_path):
    game, out, _ = make_game(tmp_path, "H\neA")
    game.lifelines.fifty_fifty_used = True
    question = Question("Capital of France?", "Paris", "Rome", "Oslo", "Bern", "A")
    assert game.ask_question(question) == Outcome.CORRECT
    assert "B." not in out.getvalue()


def test_fifty_fifty_removes_two_wrong(tmp_path):
    game, _, _ = make_game(tmp_path, "")
    question = Question("Capital?", "Paris", "Rome", "Oslo", "Bern", "A")
    removed = game.fifty_fifty(question)
    assert sorted(removed) == ["B", "C"]


def test_missing_file(tmp_path):
    out = io.StringIO()
    console = Console(output=out, input=io.StringIO(""), sound_dir=tmp_path)
    game = Game(console, tmp_path / "missing.txt")
    assert game.play() == []
    assert "Unable to open file missing.txt" in out.getvalue()


def test_login(tmp_path):
    game, _, _ = make_game(tmp_path, "Alice\nParis\nTeacher\n")
    player = game.login()
    assert player == Player("Alice", "Paris", "Teacher")
    assert game.player == player


def test_run_new_game(tmp_path):
    keys = "\n\x1b[B\nAlice\nParis\nTeacher\nBxAx\nE"
    game, out, _ = make_game(tmp_path, keys)
    game.run()
    assert game.player.name == "Alice"
    assert len(game.questions) == 0
    assert "Press any key to back to main menu..." in out.getvalue()


def test_run_tutorial(tmp_path):
    game, out, _ = make_game(tmp_path, "\n\n\nE")
    game.run()
    assert "START TO PLAY!" in out.getvalue()
    assert "Tutorial" in out.getvalue()
    assert game.player is None


def test_main_with_piped_input(tmp_path, monkeypatch):
    path = tmp_path / "questions.txt"
    path.write_text(QUESTIONS, encoding="utf-8")
    out = io.StringIO()
    monkeypatch.setattr(sys, "stdin", io.StringIO("\nE"))
    monkeypatch.setattr(sys, "stdout", out)
    assert main(["--questions", str(path), "--sounds", str(tmp_path)]) == 0
    assert "START TO PLAY!" in out.getvalue()