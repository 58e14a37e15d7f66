"""
Game Rules

Shared bookkeeping for fixed-length, fixed-attempt guessing games.
"""

import re
from abc import ABC, abstractmethod
from typing import Optional

from ..config.game_settings import WORD_LENGTH
from ..models.game import GuessResult

_LETTERS_PATTERN = re.compile(r'[A-Za-z]+')


class GameRules(ABC):
    """
    Turn-based guessing game contract.

    Tracks attempts used against a fixed budget and whether the game is still
    active. Concrete games implement scoring, the game-over rule and the
    status message.
    """

    def __init__(self, max_attempts: int):
        if max_attempts <= 0:
            raise ValueError("Maximum attempts must be greater than 0")
        self._max_attempts = max_attempts
        self._current_attempts = 0
        self._is_game_active = True

    @abstractmethod
    def check_guess(self, guess: Optional[str]) -> GuessResult:
        """Scores a guess against the secret word."""

    @abstractmethod
    def is_game_over(self) -> bool:
        """True once the game is won or out of attempts."""

    @abstractmethod
    def get_game_status(self) -> str:
        """Human-readable description of the current game state."""

    def get_remaining_attempts(self) -> int:
        return self._max_attempts - self._current_attempts

    def get_max_attempts(self) -> int:
        return self._max_attempts

    def get_current_attempt(self) -> int:
        return self._current_attempts

    def is_active(self) -> bool:
        return self._is_game_active

    def get_word_length(self) -> int:
        return WORD_LENGTH

    def reset_game(self) -> None:
        """Resets attempt bookkeeping. The secret word is left untouched."""
        self._current_attempts = 0
        self._is_game_active = True

    def end_game(self) -> None:
        self._is_game_active = False

    def is_correct_length(self, word: Optional[str]) -> bool:
        return isinstance(word, str) and len(word) == WORD_LENGTH

    def is_only_letters(self, word: Optional[str]) -> bool:
        return isinstance(word, str) and _LETTERS_PATTERN.fullmatch(word) is not None

    def standardize_input(self, value: Optional[str]) -> Optional[str]:
        return value.upper() if value is not None else None

    def is_valid_guess(self, guess: Optional[str]) -> bool:
        return (guess is not None
                and self.is_correct_length(guess)
                and self.is_only_letters(guess)
                and self._is_game_active)

    def can_make_attempt(self) -> bool:
        return self._current_attempts < self._max_attempts and self._is_game_active

    def _record_attempt(self) -> None:
        self._current_attempts += 1
