"""
Classify — сопоставление значений с метками

Каждая функция — таблица сопоставления с веткой по умолчанию:
- number_to_word:          1 → One, 2 → Two, 3 → Three, иначе Other
- classify_sequence_value: 1 → One, 2..=4 → Mid Range, иначе Other
- letter_grade:            балл → буква по GradingScale, иначе fallback
"""

from typing import Final, Iterable

from src.core.domain.grading import DEFAULT_GRADING_SCALE, GradingScale

# Метка для значений, не попавших ни в одну ветку
OTHER: Final[str] = "Other"

NUMBER_WORDS: Final[dict[int, str]] = {
    1: "One",
    2: "Two",
    3: "Three",
}

# Границы "среднего" диапазона (включительно)
MID_RANGE_LOW: Final[int] = 2
MID_RANGE_HIGH: Final[int] = 4


def number_to_word(n: int) -> str:
    """
    Слово для числа 1..3, иначе "Other".

    Examples:
        >>> number_to_word(3)
        'Three'
        >>> number_to_word(7)
        'Other'
    """
    return NUMBER_WORDS.get(n, OTHER)


def classify_sequence_value(n: int) -> str:
    """1 → "One", 2..=4 → "Mid Range", иначе "Other"."""
    if n == 1:
        return "One"
    if MID_RANGE_LOW <= n <= MID_RANGE_HIGH:
        return "Mid Range"
    return OTHER


def classify_sequence(values: Iterable[int]) -> list[str]:
    """
    Поэлементная классификация последовательности.

    Examples:
        >>> classify_sequence([1, 2, 3, 4, 5])
        ['One', 'Mid Range', 'Mid Range', 'Mid Range', 'Other']
    """
    return [classify_sequence_value(v) for v in values]


def letter_grade(score: int, scale: GradingScale = DEFAULT_GRADING_SCALE) -> str:
    """
    Буквенная оценка для балла.

    Баллы вне шкалы (например, 101 или -5) получают fallback шкалы.

    Args:
        score: Балл
        scale: Шкала оценок (default: DEFAULT_GRADING_SCALE)

    Returns:
        Буква оценки

    Examples:
        >>> letter_grade(85)
        'B'
        >>> letter_grade(101)
        'F'
    """
    return scale.grade(score)
