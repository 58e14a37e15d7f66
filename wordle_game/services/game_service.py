"""
Game Service

Manages Wordle game sessions for the HTTP layer.
"""

import random
import uuid
from typing import Dict, List, Optional, Tuple

from ..config.game_settings import (
    EMPTY_GUESS_MESSAGE, INVALID_GUESS_MESSAGE, MAX_ATTEMPTS, WORD_LIST
)
from ..models.game import GameState, GuessResult
from .wordle_engine import WordChooser, WordleEngine


class GameService:
    """
    Game session registry.

    This class handles:
    - Game session management with unique game IDs
    - Guess submission and per-session guess history
    - Game state snapshots that hide the answer until the game is over
    """

    def __init__(self,
                 word_list: Optional[List[str]] = None,
                 chooser: WordChooser = random.choice,
                 max_attempts: int = MAX_ATTEMPTS):
        if max_attempts <= 0:
            raise ValueError("Maximum attempts must be greater than 0")
        self.games: Dict[str, WordleEngine] = {}
        self.history: Dict[str, List[GuessResult]] = {}
        self.word_list = list(WORD_LIST if word_list is None else word_list)
        self.chooser = chooser
        self.max_attempts = max_attempts

    def create_new_game(self) -> str:
        """
        Creates a new game session with a randomly selected word.

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        self.games[game_id] = WordleEngine(self.word_list, self.chooser, self.max_attempts)
        self.history[game_id] = []
        return game_id

    def get_engine(self, game_id: str) -> Optional[WordleEngine]:
        return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session (without revealing the answer).

        Returns:
            GameState object or None if game not found
        """
        engine = self.games.get(game_id)
        if engine is None:
            return None

        results = self.history[game_id]
        game_over = engine.is_game_over()

        return GameState(
            game_id=game_id,
            current_attempt=engine.get_current_attempt(),
            max_attempts=engine.get_max_attempts(),
            remaining_attempts=engine.get_remaining_attempts(),
            word_length=engine.get_word_length(),
            active=engine.is_active(),
            game_over=game_over,
            won=engine.has_won(),
            status_message=engine.get_game_status(),
            guesses=[result.normalized_guess for result in results],
            guess_results=[result.letters() for result in results],
            answer=engine.secret_word if game_over else None
        )

    def is_valid_guess(self, game_id: str, guess) -> Tuple[bool, str]:
        """
        Validates a guess for a specific game session.

        Returns:
            Tuple of (is_valid, error_message)
        """
        engine = self.games.get(game_id)
        if engine is None:
            return False, "Game not found"

        if engine.is_game_over():
            return False, "Game is already over"

        if guess is None or (isinstance(guess, str) and not guess.strip()):
            return False, EMPTY_GUESS_MESSAGE

        if not engine.is_valid_word(guess.strip() if isinstance(guess, str) else guess):
            return False, INVALID_GUESS_MESSAGE

        return True, ""

    def make_guess(self, game_id: str, guess: str) -> Optional[GuessResult]:
        """
        Submits a guess to a session.

        Returns:
            The GuessResult (possibly INVALID) or None if the game is not found
        """
        engine = self.games.get(game_id)
        if engine is None:
            return None

        result = engine.check_guess(guess.strip() if isinstance(guess, str) else guess)
        if not result.is_invalid:
            self.history[game_id].append(result)
        return result

    def reset_game(self, game_id: str, new_word: bool = True) -> Optional[GameState]:
        """
        Restarts a session, optionally drawing a new secret word.

        Returns:
            Updated GameState or None if game not found
        """
        engine = self.games.get(game_id)
        if engine is None:
            return None

        if new_word:
            engine.new_game()
        else:
            engine.reset_game()
        self.history[game_id] = []
        return self.get_game_state(game_id)

    def is_in_word_list(self, game_id: str, word: str) -> Optional[bool]:
        engine = self.games.get(game_id)
        if engine is None:
            return None
        return engine.is_in_word_list(word)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            del self.history[game_id]
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(**kwargs) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(**kwargs)
    return _game_service
