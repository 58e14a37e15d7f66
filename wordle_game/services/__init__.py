"""
Services Package

Contains the game rules, the Wordle engine and the session service.
"""

from .game_rules import GameRules
from .wordle_engine import WordleEngine, score_guess
from .game_service import GameService, get_game_service, initialize_game_service

__all__ = [
    'GameRules',
    'WordleEngine', 'score_guess',
    'GameService', 'get_game_service', 'initialize_game_service'
]
