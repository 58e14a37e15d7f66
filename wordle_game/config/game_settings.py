"""
Game Configuration Constants Module

Defines the game rules constants and the curated word list. All game
parameters are centralized here so a presentation layer never hard-codes them.
"""

import json
import os
from typing import Dict, Final, List, Optional, Sequence

MAX_ATTEMPTS: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

WORD_LENGTH: Final[int] = 5
"""Number of letters in every secret word and every accepted guess."""

# Messages shown by a presentation layer when a guess is rejected
EMPTY_GUESS_MESSAGE: Final[str] = "Please enter a word!"
INVALID_GUESS_MESSAGE: Final[str] = "Invalid word! Please enter a 5-letter word."


def _load_word_list(json_file_path: Optional[str] = None) -> List[str]:
    """
    Load word list from wordles.json file.

    Args:
        json_file_path: Alternative JSON file to read, defaults to the
            wordles.json shipped next to this module

    Returns:
        List[str]: List of uppercase 5-letter words

    Raises:
        FileNotFoundError: If the JSON file is not found
        ValueError: If the JSON is malformed, the list is empty or
            contains invalid words
    """
    if json_file_path is None:
        config_dir = os.path.dirname(os.path.abspath(__file__))
        json_file_path = os.path.join(config_dir, 'wordles.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {os.path.basename(json_file_path)}: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    # Convert all words to uppercase and validate
    uppercase_words = [str(word).upper() for word in word_list]

    for word in uppercase_words:
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word '{word}' is not {WORD_LENGTH} characters long")
        if not word.isalpha():
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")

    return uppercase_words


# Curated Word Database loaded from JSON file
WORD_LIST: Final[List[str]] = _load_word_list()


def validate_word_list_integrity(words: Sequence[str] = WORD_LIST) -> bool:
    """
    Validates the integrity and consistency of a word database.

    Checks that every word is exactly WORD_LENGTH alphabetic uppercase
    characters and that there are no duplicate entries.

    Returns:
        bool: True if the word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if list(words).count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(words: Sequence[str] = WORD_LIST) -> Dict:
    """
    Analyzes a word list and returns statistical information.

    Returns:
        dict: total_words, avg_vowel_count, letter_frequency and
            most_common_letters (top five)
    """
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    letter_frequency: Dict[str, int] = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }
