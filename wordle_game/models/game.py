"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class LetterMark(Enum):
    """Per-position feedback for a scored guess."""
    CORRECT = "CORRECT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"

    @property
    def code(self) -> str:
        """Single character used by the textual feedback format."""
        return _MARK_CODES[self]


_MARK_CODES = {
    LetterMark.CORRECT: "G",
    LetterMark.PRESENT: "Y",
    LetterMark.ABSENT: "X",
}
_CODE_MARKS = {code: mark for mark, code in _MARK_CODES.items()}


class GuessStatus(Enum):
    """Whether a submitted guess was scored or rejected."""
    INVALID = "INVALID"
    SCORED = "SCORED"


@dataclass(frozen=True)
class GuessResult:
    """Outcome of a single guess submission."""
    status: GuessStatus
    normalized_guess: str
    marks: Tuple[LetterMark, ...]

    @property
    def is_invalid(self) -> bool:
        return self.status is GuessStatus.INVALID

    @property
    def is_solved(self) -> bool:
        return not self.is_invalid and all(mark is LetterMark.CORRECT for mark in self.marks)

    def letters(self) -> List[Tuple[str, str]]:
        """(letter, mark) pairs in guess order, marks as strings for JSON."""
        return [(letter, mark.value) for letter, mark in zip(self.normalized_guess, self.marks)]

    def encode(self) -> str:
        """
        Textual form "GUESS:FEEDBACK" with G/Y/X marks.

        Rejected guesses always encode as "INVALID:XXXXX".
        """
        feedback = ''.join(mark.code for mark in self.marks)
        if self.is_invalid:
            return f"{GuessStatus.INVALID.value}:{feedback}"
        return f"{self.normalized_guess}:{feedback}"

    @classmethod
    def decode(cls, text: str) -> "GuessResult":
        """
        Parses the textual form produced by encode().

        Raises:
            ValueError: If the text is not in "GUESS:FEEDBACK" form
        """
        guess, sep, feedback = text.partition(':')
        if not sep or not feedback:
            raise ValueError(f"Malformed feedback string: {text!r}")
        try:
            marks = tuple(_CODE_MARKS[code] for code in feedback)
        except KeyError as e:
            raise ValueError(f"Unknown feedback mark {e.args[0]!r} in {text!r}") from None

        if guess == GuessStatus.INVALID.value:
            return cls(GuessStatus.INVALID, '', marks)
        if len(guess) != len(marks):
            raise ValueError(f"Guess and feedback lengths differ in {text!r}")
        return cls(GuessStatus.SCORED, guess, marks)


@dataclass
class GameState:
    """Snapshot of a game handed to a presentation layer."""
    game_id: str
    current_attempt: int
    max_attempts: int
    remaining_attempts: int
    word_length: int
    active: bool
    game_over: bool
    won: bool
    status_message: str
    guesses: List[str] = field(default_factory=list)
    guess_results: List[List[Tuple[str, str]]] = field(default_factory=list)  # Marks as strings for JSON serialization
    answer: Optional[str] = None  # Only included when game is over
