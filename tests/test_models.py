"""
Testing the guess result value and its textual form.
"""

import pytest

from wordle_game.models.game import GuessResult, GuessStatus, LetterMark


def test_encode_scored_result():
    result = GuessResult(
        GuessStatus.SCORED, "BABEL",
        (LetterMark.PRESENT, LetterMark.PRESENT, LetterMark.CORRECT, LetterMark.CORRECT, LetterMark.ABSENT)
    )
    assert result.encode() == "BABEL:YYGGX"
    assert result.is_solved is False
    assert result.letters() == [
        ("B", "PRESENT"), ("A", "PRESENT"), ("B", "CORRECT"), ("E", "CORRECT"), ("L", "ABSENT")
    ]


def test_encode_invalid_result_hides_guess():
    result = GuessResult(GuessStatus.INVALID, "AB", (LetterMark.ABSENT,) * 5)
    assert result.is_invalid
    assert result.encode() == "INVALID:XXXXX"


def test_decode():
    result = GuessResult.decode("HAPPY:GGGGG")
    assert result.status is GuessStatus.SCORED
    assert result.normalized_guess == "HAPPY"
    assert result.is_solved

    invalid = GuessResult.decode("INVALID:XXXXX")
    assert invalid.is_invalid
    assert invalid.normalized_guess == ""


@pytest.mark.parametrize("text", ["HAPPY", "HAPPY:", "HAPPY:GGGGZ", "HAPPY:GGG"])
def test_decode_rejects_malformed_text(text):
    with pytest.raises(ValueError):
        GuessResult.decode(text)
