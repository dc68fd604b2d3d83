"""
Grading — шкала буквенных оценок

Immutable Pydantic модели, описывающие шкалу оценок:
- GradeBand: замкнутый интервал баллов [low, high] → буква
- GradingScale: набор непересекающихся интервалов и буква по умолчанию

Шкала по умолчанию:
    90..=100 → A
    80..=89  → B
    70..=79  → C
    иначе    → F
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator, model_validator

# Границы допустимых баллов
SCORE_MIN: Final[int] = 0
SCORE_MAX: Final[int] = 100


def _check_grade_letter(name: str, v: str) -> str:
    if not ("A" <= v <= "Z"):
        raise ValueError(f"{name} must be an upper-case A-Z letter, got {v!r}")
    return v


# =============================================================================
# MODELS
# =============================================================================


class GradeBand(BaseModel):
    """
    Интервал баллов, соответствующий одной букве.

    Immutable модель (frozen=True). Обе границы включаются.
    """

    letter: str = Field(..., min_length=1, max_length=1, description="Буква оценки")
    low: int = Field(..., ge=SCORE_MIN, le=SCORE_MAX, description="Нижняя граница (включительно)")
    high: int = Field(..., ge=SCORE_MIN, le=SCORE_MAX, description="Верхняя граница (включительно)")

    model_config = {"frozen": True}

    @field_validator("letter")
    @classmethod
    def validate_letter(cls, v: str) -> str:
        """Буква оценки — одна заглавная латинская буква."""
        return _check_grade_letter("letter", v)

    @model_validator(mode="after")
    def validate_bounds(self) -> "GradeBand":
        """low <= high."""
        if self.low > self.high:
            raise ValueError(f"low ({self.low}) must be <= high ({self.high})")
        return self

    def contains(self, score: int) -> bool:
        """Попадает ли балл в интервал."""
        return self.low <= score <= self.high


class GradingScale(BaseModel):
    """
    Шкала оценок.

    Immutable модель (frozen=True). Интервалы не пересекаются; балл,
    не попавший ни в один интервал, получает fallback.
    """

    bands: tuple[GradeBand, ...] = Field(..., min_length=1, description="Интервалы оценок")
    fallback: str = Field("F", min_length=1, max_length=1, description="Оценка вне интервалов")

    model_config = {"frozen": True}

    @field_validator("fallback")
    @classmethod
    def validate_fallback(cls, v: str) -> str:
        """fallback подчиняется тем же правилам, что и GradeBand.letter."""
        return _check_grade_letter("fallback", v)

    @model_validator(mode="after")
    def validate_no_overlap(self) -> "GradingScale":
        """Интервалы не должны пересекаться."""
        ordered = sorted(self.bands, key=lambda band: band.low)
        for lower, upper in zip(ordered, ordered[1:]):
            if upper.low <= lower.high:
                raise ValueError(
                    f"bands {lower.letter} [{lower.low}, {lower.high}] and "
                    f"{upper.letter} [{upper.low}, {upper.high}] overlap"
                )
        return self

    def grade(self, score: int) -> str:
        """Буква для балла (первый подходящий интервал или fallback)."""
        for band in self.bands:
            if band.contains(score):
                return band.letter
        return self.fallback


DEFAULT_GRADING_SCALE: Final[GradingScale] = GradingScale(
    bands=(
        GradeBand(letter="A", low=90, high=100),
        GradeBand(letter="B", low=80, high=89),
        GradeBand(letter="C", low=70, high=79),
    ),
    fallback="F",
)
