"""
Domain models and value objects.

Contains value objects used by the pattern-matching helpers: Coin, GradingScale.
"""

from src.core.domain.coin import COIN_VALUES_CENTS, Coin, value_in_cents
from src.core.domain.grading import (
    DEFAULT_GRADING_SCALE,
    SCORE_MAX,
    SCORE_MIN,
    GradeBand,
    GradingScale,
)

__all__ = [
    # Coin
    "COIN_VALUES_CENTS",
    "Coin",
    "value_in_cents",
    # Grading
    "DEFAULT_GRADING_SCALE",
    "SCORE_MAX",
    "SCORE_MIN",
    "GradeBand",
    "GradingScale",
]
