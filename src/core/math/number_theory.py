"""
Number Theory — GCD, факториал, простота

Модуль реализует целочисленные функции над беззнаковым 64-битным доменом:
- НОД по алгоритму Евклида
- Факториал (рекурсивный и итеративный)
- Проверка простоты пробным делением

ПОЛИТИКА ПЕРЕПОЛНЕНИЯ:
    Факториал n! помещается в u64 только при n <= MAX_FACTORIAL_INPUT (20).
    Для n > 20 бросается FactorialOverflow до начала вычислений, поэтому
    глубина рекурсии factorial() ограничена 20 кадрами.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. gcd(a, b) == gcd(b, a), gcd(a, 0) == a
2. factorial(n) == factorial_iterative(n) для всех n в [0, 20]
3. is_prime использует точный целочисленный корень (math.isqrt)
"""

import logging
import math
from typing import Final

from src.core.math.numerical_safeguards import U64_MAX, validate_unsigned
from src.ranges import inclusive_range

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Наибольшее n, для которого n! <= U64_MAX (20! = 2432902008176640000)
MAX_FACTORIAL_INPUT: Final[int] = 20


# =============================================================================
# EXCEPTIONS
# =============================================================================


class FactorialOverflow(OverflowError):
    """
    n! не помещается в беззнаковый 64-битный диапазон.

    Бросается для n > MAX_FACTORIAL_INPUT вместо насыщения или
    циклического переполнения.
    """

    def __init__(self, n: int):
        self.n = n
        super().__init__(
            f"factorial({n}) exceeds U64_MAX={U64_MAX}; "
            f"max supported n is {MAX_FACTORIAL_INPUT}"
        )


# =============================================================================
# НОД
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель по алгоритму Евклида.

    Args:
        a: Беззнаковое целое (u64)
        b: Беззнаковое целое (u64)

    Returns:
        НОД(a, b); gcd(a, 0) == a, gcd(0, 0) == 0

    Raises:
        TypeError: Если аргумент не int
        ValueError: Если аргумент вне [0, U64_MAX]

    Examples:
        >>> gcd(48, 18)
        6
        >>> gcd(7, 0)
        7
    """
    validate_unsigned(a, "a")
    validate_unsigned(b, "b")

    while b != 0:
        a, b = b, a % b

    return a


# =============================================================================
# ФАКТОРИАЛ
# =============================================================================


def _check_factorial_input(n: int) -> None:
    validate_unsigned(n, "n")

    if n > MAX_FACTORIAL_INPUT:
        logger.debug("factorial(%d) rejected: result exceeds u64", n)
        raise FactorialOverflow(n)


def factorial(n: int) -> int:
    """
    Рекурсивный факториал: factorial(0) == factorial(1) == 1.

    Raises:
        FactorialOverflow: Если n > MAX_FACTORIAL_INPUT
        TypeError: Если n не int
        ValueError: Если n < 0

    Examples:
        >>> factorial(5)
        120
    """
    _check_factorial_input(n)
    return _factorial_recursive(n)


def _factorial_recursive(n: int) -> int:
    if n <= 1:
        return 1
    return n * _factorial_recursive(n - 1)


def factorial_iterative(n: int) -> int:
    """
    Итеративный факториал: произведение по диапазону 1..=n.

    Контракт совпадает с factorial().

    Examples:
        >>> factorial_iterative(5)
        120
        >>> factorial_iterative(0)
        1
    """
    _check_factorial_input(n)
    return math.prod(inclusive_range(1, n))


# =============================================================================
# ПРОСТОТА
# =============================================================================


def is_prime(n: int) -> bool:
    """
    Проверка простоты пробным делением.

    Алгоритм:
        n < 2         → False
        n == 2        → True
        n чётное      → False
        иначе проверяются нечётные делители 3..=isqrt(n)

    Args:
        n: Беззнаковое целое (u64)

    Returns:
        True если n простое

    Examples:
        >>> is_prime(17)
        True
        >>> is_prime(9)
        False
        >>> is_prime(1)
        False
    """
    validate_unsigned(n, "n")

    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False

    limit = math.isqrt(n)
    for divisor in inclusive_range(3, limit, step=2):
        if n % divisor == 0:
            return False

    return True
