"""
Testing one round
- GuessSession on its own (state, counts, end of round)
- play_round through a scripted console (messages, no-penalty retries)
"""

import re

import pytest

from guessgame.catalog import get_level, list_levels
from guessgame.random_client import draw_secret
from guessgame.session import (
    LAST_ATTEMPT_WARNING,
    GuessSession,
    RoundOverError,
    play_round,
)

def test_secret_is_always_in_range():
    for level in list_levels():
        for _ in range(200):
            session = GuessSession.start(level)
            assert 1 <= session.secret <= level.upper_bound

def test_medium_example_sequence(fixed_draw):
    session = GuessSession.start(get_level("MEDIUM"), fixed_draw(50))

    messages = [session.submit(guess).message for guess in [20, 80, 45, 52, 50]]

    assert messages[:4] == [
        "Too low!",
        "Too high!",
        "CLOSE! But too low!",
        "CLOSE! But too high!",
    ]
    assert messages[4].startswith("Congratulations")
    assert messages[4].endswith("in 5 tries.")
    assert session.status == "won"
    assert session.result == 5

def test_win_on_first_guess_uses_singular(fixed_draw):
    session = GuessSession.start(get_level("EASY"), fixed_draw(7))
    entry = session.submit(7)
    assert entry.message.endswith("in 1 try.")
    assert session.result == 1

def test_lost_after_max_tries_and_no_more_guesses():
    level = get_level("MEDIUM")
    session = GuessSession(level=level, secret=99)

    for _ in range(level.max_tries):
        session.submit(1)

    assert session.status == "lost"
    assert session.result is None
    assert session.tries_used == level.max_tries
    with pytest.raises(RoundOverError):
        session.submit(99)
    assert len(session.history) == level.max_tries

def test_last_attempt_is_look_ahead():
    level = get_level("MEDIUM")
    session = GuessSession(level=level, secret=99)
    while session.attempts_left > 1:
        assert session.is_last_attempt is False
        session.submit(1)
    assert session.is_last_attempt is True

def test_play_round_bad_input_costs_nothing(make_console, fixed_draw):
    console = make_console("abc", "20", "", "4.5", "50")
    result = play_round(get_level("MEDIUM"), console, fixed_draw(50))

    assert result == 2
    assert console.text.count("Error: Please enter a valid integer.") == 3
    # every prompt after a bad entry asks for the same attempt again
    assert console.prompts == [
        "(Attempt 1) Enter your guess: ",
        "(Attempt 1) Enter your guess: ",
        "(Attempt 2) Enter your guess: ",
        "(Attempt 2) Enter your guess: ",
        "(Attempt 2) Enter your guess: ",
    ]

def test_play_round_medium_example_output(make_console, fixed_draw):
    console = make_console("20", "80", "45", "52", "50")
    result = play_round(get_level("MEDIUM"), console, fixed_draw(50))

    assert result == 5
    text = console.text
    assert "I'm thinking of a number between 1 and 100." in text
    assert "You have 7 attempts." in text
    assert "(Attempt 1): Too low! Try again. (6 attempts left)" in text
    assert "(Attempt 3): CLOSE! But too low!" in text
    assert "(Attempt 4): CLOSE! But too high! Try again. (3 attempts left)" in text
    assert "(Attempt 5): Congratulations! You've guessed the correct number in 5 tries." in text
    assert LAST_ATTEMPT_WARNING not in text

def test_play_round_easy_loss_reports_percentage(make_console):
    level = get_level("EASY")
    secret = draw_secret(level.upper_bound)
    wrong = [str(n) for n in range(1, 51) if n != secret][:10]
    console = make_console(*wrong)

    result = play_round(level, console, lambda upper_bound: secret)

    assert result is None
    expected = f"{secret / 50 * 100:.1f}"
    assert f"The correct number was {secret}" in console.text
    assert f"{secret} was {expected}% of the way through the range 1-50." in console.text
    assert re.search(r"\d+\.\d% of the way", console.text)
    # the warning shows once, right before the tenth prompt
    assert console.output.count(LAST_ATTEMPT_WARNING) == 1
    warning_index = console.output.index(LAST_ATTEMPT_WARNING)
    assert "(Attempt 9)" in console.output[warning_index - 1]
    assert len(console.prompts) == 10

def test_play_round_rejects_underscore_number_without_penalty(make_console, fixed_draw):
    console = make_console("1_0", "50")
    result = play_round(get_level("MEDIUM"), console, fixed_draw(50))

    assert result == 1
    assert console.text.count("Error: Please enter a valid integer.") == 1
