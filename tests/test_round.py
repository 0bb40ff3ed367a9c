import game
from game import RoundOutcome, play_round
from rules.hints import generate_hints


def test_correct_on_first_hint_scores_four(france, scripted_io):
    io = scripted_io(["france"])
    result = play_round(france, generate_hints(france), 1, io)

    assert result.outcome is RoundOutcome.CORRECT
    assert result.points_earned == 4
    assert result.country_name == "France"
    assert len(io.prompts) == 1
    assert "Remaining hints you didn't need:" in io.lines
    assert "• capital: Paris" in io.lines


def test_all_wrong_guesses_exhaust_the_round(france, scripted_io):
    io = scripted_io(["Germany", "Spain", "Italy", "Berlin"])
    result = play_round(france, generate_hints(france), 2, io)

    assert result.outcome is RoundOutcome.EXHAUSTED
    assert result.points_earned == 0
    assert len(io.prompts) == 4
    assert "✗ You didn't guess it! The correct answer is: France" in io.lines


def test_quit_stops_revealing_hints(france, scripted_io):
    io = scripted_io(["Germany", "QUIT", "france"])
    result = play_round(france, generate_hints(france), 1, io)

    assert result.outcome is RoundOutcome.QUIT
    assert result.points_earned == 0
    assert "Hint 2/4:" in io.lines
    assert "Hint 3/4:" not in io.lines
    assert io.answers == ["france"]


def test_empty_answer_passes_without_checking(france, scripted_io, monkeypatch):
    checked = []

    def recording_is_correct(country, guess):
        checked.append(guess)
        return guess == "france"

    monkeypatch.setattr(game, "is_correct", recording_is_correct)
    io = scripted_io(["   ", "france"])
    result = play_round(france, generate_hints(france), 1, io)

    assert checked == ["france"]
    assert result.points_earned == 3
    assert "No answer provided, moving to the next hint..." in io.lines


def test_passing_every_hint_exhausts(france, scripted_io):
    io = scripted_io(["", "", "", ""])
    result = play_round(france, generate_hints(france), 1, io)
    assert result.outcome is RoundOutcome.EXHAUSTED
    assert result.points_earned == 0


def test_guess_on_last_hint_scores_one(france, scripted_io):
    io = scripted_io(["spain", "italy", "", "  French Republic  "])
    result = play_round(france, generate_hints(france), 1, io)
    assert result.outcome is RoundOutcome.CORRECT
    assert result.points_earned == 1
    assert "Remaining hints you didn't need:" not in io.lines
