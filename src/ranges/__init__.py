"""
Ranges — полуоткрытые, замкнутые и символьные диапазоны.
"""

from src.ranges.ranges import (
    char_range,
    collect,
    exclusive_range,
    inclusive_range,
)

__all__ = [
    "char_range",
    "collect",
    "exclusive_range",
    "inclusive_range",
]
