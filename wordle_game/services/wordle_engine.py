"""
Wordle Engine

Secret word selection, guess scoring and win/loss tracking for a single game.
"""

import logging
import random
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from ..config.game_settings import MAX_ATTEMPTS, WORD_LENGTH, WORD_LIST
from ..models.game import GuessResult, GuessStatus, LetterMark
from .game_rules import GameRules

logger = logging.getLogger('wordle_game.engine')

WordChooser = Callable[[Sequence[str]], str]


def _letter_index(letter: str) -> int:
    return ord(letter) - ord('A')


def score_guess(secret: str, guess: str) -> Tuple[LetterMark, ...]:
    """
    Implements the Wordle letter evaluation algorithm.

    Both words must be uppercase A-Z of equal length. Exact matches are
    resolved first and draw from the same per-letter pool as the positional
    matches, so no letter is credited more often than it occurs in the secret.
    """
    secret_counts = [0] * 26
    guess_counts = [0] * 26
    marks: List[Optional[LetterMark]] = []

    # First pass: exact position matches
    for secret_char, guess_char in zip(secret, guess):
        if secret_char == guess_char:
            marks.append(LetterMark.CORRECT)
            secret_counts[_letter_index(secret_char)] += 1
            guess_counts[_letter_index(guess_char)] += 1
        else:
            marks.append(None)

    # Secret letters still available to positional matches
    for i, secret_char in enumerate(secret):
        if marks[i] is not LetterMark.CORRECT:
            secret_counts[_letter_index(secret_char)] += 1

    # Second pass: right letter, wrong position
    for i, guess_char in enumerate(guess):
        if marks[i] is not None:
            continue
        index = _letter_index(guess_char)
        if secret_counts[index] > guess_counts[index]:
            marks[i] = LetterMark.PRESENT
            guess_counts[index] += 1
        else:
            marks[i] = LetterMark.ABSENT

    return tuple(marks)  # type: ignore[arg-type]


class WordleEngine(GameRules):
    """
    Classic six-attempt Wordle.

    The secret word is drawn from the word list by ``chooser`` (defaults to
    ``random.choice``) when the engine is created. Any structurally valid
    guess is scored; word-list membership is only checked by
    ``is_in_word_list`` and is left to the caller.
    """

    def __init__(self,
                 word_list: Optional[Iterable[str]] = None,
                 chooser: WordChooser = random.choice,
                 max_attempts: int = MAX_ATTEMPTS):
        super().__init__(max_attempts)
        words = tuple(word.upper() for word in (WORD_LIST if word_list is None else word_list))
        if not words:
            raise ValueError("Word list cannot be empty")
        for word in words:
            if not self.is_valid_word(word):
                raise ValueError(f"Word '{word}' is not a {WORD_LENGTH}-letter alphabetic word")

        self._word_list = words
        self._chooser = chooser
        self._has_won = False
        self._secret_word = ''
        self.choose_secret_word()

    @property
    def secret_word(self) -> str:
        return self._secret_word

    @property
    def word_list(self) -> Tuple[str, ...]:
        return self._word_list

    def has_won(self) -> bool:
        return self._has_won

    def choose_secret_word(self) -> str:
        """Draws a new secret word from the word list."""
        secret = self._chooser(self._word_list).upper()
        if secret not in self._word_list:
            raise ValueError(f"Chooser returned '{secret}', which is not in the word list")
        self._secret_word = secret
        return secret

    def reset_game(self) -> None:
        super().reset_game()
        self._has_won = False

    def new_game(self) -> str:
        """Resets the bookkeeping and draws a fresh secret word."""
        self.reset_game()
        return self.choose_secret_word()

    def is_valid_word(self, word: Optional[str]) -> bool:
        if not isinstance(word, str):
            return False
        return self.is_correct_length(word) and self.is_only_letters(word)

    def is_in_word_list(self, word: Optional[str]) -> bool:
        if not isinstance(word, str):
            return False
        return self.standardize_input(word) in self._word_list

    def check_guess(self, guess: Optional[str]) -> GuessResult:
        if not self.is_valid_word(guess):
            return self._invalid_result(guess)

        if not self.can_make_attempt():
            logger.warning("Guess %r rejected: game is already over", guess)
            return self._invalid_result(guess)

        normalized_guess = self.standardize_input(guess)
        self._record_attempt()

        marks = score_guess(self._secret_word, normalized_guess)
        self._has_won = normalized_guess == self._secret_word
        logger.debug("Attempt %d/%d: %s -> %s", self._current_attempts, self._max_attempts,
                     normalized_guess, ''.join(mark.code for mark in marks))

        if self.is_game_over():
            self.end_game()
            logger.info("Game finished after %d attempts (%s)", self._current_attempts,
                        'won' if self._has_won else 'lost')

        return GuessResult(GuessStatus.SCORED, normalized_guess, marks)

    def is_game_over(self) -> bool:
        return self._has_won or self._current_attempts >= self._max_attempts

    def get_game_status(self) -> str:
        if self._has_won:
            return f"Congratulations! You guessed the word in {self._current_attempts} attempts!"
        if self._current_attempts >= self._max_attempts:
            return f"Game Over! The word was: {self._secret_word}"
        return f"Keep guessing! Attempts left: {self.get_remaining_attempts()}"

    def _invalid_result(self, guess: Optional[str]) -> GuessResult:
        normalized_guess = self.standardize_input(guess) if isinstance(guess, str) else ''
        return GuessResult(GuessStatus.INVALID, normalized_guess,
                           (LetterMark.ABSENT,) * WORD_LENGTH)
