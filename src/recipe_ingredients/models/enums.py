"""
Enumerations for recipe models.

- Difficulty: How demanding a recipe is to prepare
"""

from enum import Enum


class Difficulty(str, Enum):
    """
    Recipe preparation difficulty.

    Values:
        EASY: Few steps, common techniques
        MODERATE: Some technique or timing required
        HARD: Demanding technique or long preparation
    """

    EASY = "easy"
    MODERATE = "moderate"
    HARD = "hard"
