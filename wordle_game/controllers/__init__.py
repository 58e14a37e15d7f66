"""
Controllers Package

HTTP blueprints exposing the game to a front end.
"""

from .game_controller import game_bp

__all__ = ['game_bp']
