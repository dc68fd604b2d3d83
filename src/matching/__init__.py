"""
Matching — классификация значений по таблицам сопоставления.
"""

from src.matching.classify import (
    MID_RANGE_HIGH,
    MID_RANGE_LOW,
    NUMBER_WORDS,
    OTHER,
    classify_sequence,
    classify_sequence_value,
    letter_grade,
    number_to_word,
)

__all__ = [
    # Constants
    "MID_RANGE_HIGH",
    "MID_RANGE_LOW",
    "NUMBER_WORDS",
    "OTHER",
    # Functions
    "classify_sequence",
    "classify_sequence_value",
    "letter_grade",
    "number_to_word",
]
