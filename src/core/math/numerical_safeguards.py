"""
Numerical Safeguards — проверки доменов для целочисленных операций

Модуль задаёт границы целочисленных доменов и валидирует входы до
выполнения вычислений:
- Беззнаковые 64-битные целые (gcd, factorial, is_prime)
- Знаковые 32-битные целые (целочисленное деление и остаток)
- Проверка float на конечность

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Значения вне домена отклоняются до начала вычислений (ValueError)
2. bool не принимается как целое число (TypeError)
3. Float-операции не валидируются: NaN/Inf являются результатами, а не ошибками
"""

import logging
import math
from typing import Final

logger = logging.getLogger(__name__)

# =============================================================================
# ГРАНИЦЫ ЦЕЛОЧИСЛЕННЫХ ДОМЕНОВ
# =============================================================================

# Максимальное беззнаковое 64-битное значение
U64_MAX: Final[int] = 2**64 - 1

# Границы знакового 32-битного целого
I32_MIN: Final[int] = -(2**31)
I32_MAX: Final[int] = 2**31 - 1


# =============================================================================
# ПРОВЕРКИ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def is_odd_integer(value: float) -> bool:
    """
    Проверка, является ли float нечётным целым числом.

    Используется для определения знака pow() при отрицательном основании.
    int проверяется точно, без конверсии в float.

    Examples:
        >>> is_odd_integer(3.0)
        True
        >>> is_odd_integer(4.0)
        False
        >>> is_odd_integer(2.5)
        False
        >>> is_odd_integer(10**400 + 1)
        True
    """
    if isinstance(value, int):
        return value % 2 == 1

    if not is_valid_float(value) or not float(value).is_integer():
        return False
    return int(value) % 2 == 1


# =============================================================================
# ВАЛИДАЦИЯ ЦЕЛЫХ
# =============================================================================


def _require_int(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def validate_unsigned(value: int, name: str) -> None:
    """
    Валидация, что значение лежит в беззнаковом 64-битном домене.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        TypeError: Если value не int (или является bool)
        ValueError: Если value < 0 или value > U64_MAX
    """
    _require_int(value, name)

    if value < 0:
        logger.debug("rejected %s=%d: negative", name, value)
        raise ValueError(f"{name} must be non-negative, got {value}")

    if value > U64_MAX:
        logger.debug("rejected %s=%d: above U64_MAX", name, value)
        raise ValueError(f"{name} must be <= {U64_MAX}, got {value}")


def validate_int32(value: int, name: str) -> None:
    """
    Валидация, что значение лежит в знаковом 32-битном домене.

    Raises:
        TypeError: Если value не int (или является bool)
        ValueError: Если value вне [I32_MIN, I32_MAX]
    """
    _require_int(value, name)

    if not I32_MIN <= value <= I32_MAX:
        logger.debug("rejected %s=%d: outside i32", name, value)
        raise ValueError(f"{name} must be in [{I32_MIN}, {I32_MAX}], got {value}")
