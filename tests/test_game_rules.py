"""
Testing the shared game rules bookkeeping.
"""

import pytest

from wordle_game.models.game import GuessResult, GuessStatus, LetterMark
from wordle_game.services.game_rules import GameRules


class CountingGame(GameRules):
    """Minimal concrete game: every valid guess just uses an attempt."""

    def check_guess(self, guess):
        if not self.is_valid_guess(guess) or not self.can_make_attempt():
            return GuessResult(GuessStatus.INVALID, '', (LetterMark.ABSENT,) * 5)
        self._record_attempt()
        if self.is_game_over():
            self.end_game()
        return GuessResult(GuessStatus.SCORED, self.standardize_input(guess), (LetterMark.ABSENT,) * 5)

    def is_game_over(self):
        return self.get_current_attempt() >= self.get_max_attempts()

    def get_game_status(self):
        return f"{self.get_remaining_attempts()} left"


def test_rules_cannot_be_instantiated_directly():
    with pytest.raises(TypeError):
        GameRules(6)


@pytest.mark.parametrize("max_attempts", [0, -3])
def test_invalid_configuration(max_attempts):
    with pytest.raises(ValueError):
        CountingGame(max_attempts)


def test_initial_state():
    game = CountingGame(3)
    assert game.get_max_attempts() == 3
    assert game.get_current_attempt() == 0
    assert game.get_remaining_attempts() == 3
    assert game.get_word_length() == 5
    assert game.is_active() is True
    assert game.can_make_attempt() is True


def test_is_correct_length():
    game = CountingGame(3)
    assert game.is_correct_length("abcde") is True
    assert game.is_correct_length("abcd") is False
    assert game.is_correct_length("") is False
    assert game.is_correct_length(None) is False


def test_is_only_letters():
    game = CountingGame(3)
    assert game.is_only_letters("aBc") is True
    assert game.is_only_letters("abc1") is False
    assert game.is_only_letters("") is False
    assert game.is_only_letters(None) is False


def test_standardize_input():
    game = CountingGame(3)
    assert game.standardize_input("happy") == "HAPPY"
    assert game.standardize_input(None) is None


def test_is_valid_guess_requires_active_game():
    game = CountingGame(3)
    assert game.is_valid_guess("happy") is True
    assert game.is_valid_guess("hap") is False
    assert game.is_valid_guess(None) is False
    game.end_game()
    assert game.is_valid_guess("happy") is False


def test_end_game_is_idempotent():
    game = CountingGame(3)
    game.end_game()
    game.end_game()
    assert game.is_active() is False
    assert game.can_make_attempt() is False


def test_attempt_budget_is_enforced():
    game = CountingGame(2)
    game.check_guess("happy")
    game.check_guess("smile")
    assert game.is_game_over() is True
    assert game.can_make_attempt() is False
    assert game.check_guess("tiger").is_invalid
    assert game.get_remaining_attempts() == 0


def test_reset_game():
    game = CountingGame(2)
    game.check_guess("happy")
    game.check_guess("smile")
    game.reset_game()
    assert game.get_current_attempt() == 0
    assert game.is_active() is True
    assert game.get_game_status() == "2 left"


def test_validators_reject_non_strings():
    game = CountingGame(3)
    assert game.is_correct_length(12345) is False
    assert game.is_only_letters(12345) is False
    assert game.is_valid_guess(12345) is False
    assert game.is_valid_guess(["H", "A", "P", "P", "Y"]) is False
