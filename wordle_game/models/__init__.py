"""
Data Models Package

Contains all data models used throughout the application.
"""

from .game import GameState, GuessResult, GuessStatus, LetterMark

__all__ = ['GameState', 'GuessResult', 'GuessStatus', 'LetterMark']
