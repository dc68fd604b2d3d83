"""
Тесты для Matching — таблицы сопоставления значений
"""

import pytest

from src.core.domain import GradeBand, GradingScale
from src.matching import (
    OTHER,
    classify_sequence,
    classify_sequence_value,
    letter_grade,
    number_to_word,
)
from src.ranges import inclusive_range


class TestNumberToWord:
    """Тесты number_to_word"""

    @pytest.mark.parametrize("n, word", [(1, "One"), (2, "Two"), (3, "Three")])
    def test_known_numbers(self, n, word):
        assert number_to_word(n) == word

    @pytest.mark.parametrize("n", [0, 4, -1, 100])
    def test_wildcard(self, n):
        assert number_to_word(n) == OTHER


class TestClassifySequence:
    """Тесты classify_sequence_value / classify_sequence"""

    def test_one(self):
        assert classify_sequence_value(1) == "One"

    @pytest.mark.parametrize("n", [2, 3, 4])
    def test_mid_range(self, n):
        assert classify_sequence_value(n) == "Mid Range"

    @pytest.mark.parametrize("n", [0, 5, -3])
    def test_other(self, n):
        assert classify_sequence_value(n) == "Other"

    def test_sequence_one_to_five(self):
        labels = classify_sequence(inclusive_range(1, 5))
        assert labels == ["One", "Mid Range", "Mid Range", "Mid Range", "Other"]

    def test_empty_sequence(self):
        assert classify_sequence([]) == []


class TestLetterGrade:
    """Тесты letter_grade со шкалой по умолчанию"""

    @pytest.mark.parametrize(
        "score, grade",
        [
            (100, "A"),
            (90, "A"),
            (89, "B"),
            (85, "B"),
            (80, "B"),
            (79, "C"),
            (70, "C"),
            (69, "F"),
            (0, "F"),
        ],
    )
    def test_default_scale(self, score, grade):
        assert letter_grade(score) == grade

    @pytest.mark.parametrize("score", [101, -5])
    def test_out_of_scale_is_fallback(self, score):
        assert letter_grade(score) == "F"

    def test_custom_scale(self):
        scale = GradingScale(
            bands=(GradeBand(letter="P", low=50, high=100),),
            fallback="N",
        )
        assert letter_grade(50, scale) == "P"
        assert letter_grade(49, scale) == "N"
