"""
Arithmetic — базовые арифметические операции

Модуль реализует чистые арифметические функции над float и i32:
- Сложение, вычитание, умножение, деление
- Возведение в степень и квадратный корень
- Абсолютное значение
- Целочисленное деление и остаток с усечением к нулю

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Float-операции следуют IEEE-754: переполнение даёт ±inf, неопределённость даёт NaN
2. Float-операции никогда не бросают исключений
3. int_divide(x, y) * y + int_remainder(x, y) == x для всех допустимых x, y
"""

import logging
import math

from src.core.math.numerical_safeguards import (
    I32_MIN,
    is_odd_integer,
    validate_int32,
)

logger = logging.getLogger(__name__)


# =============================================================================
# FLOAT-АРИФМЕТИКА
# =============================================================================


def add(a: float, b: float) -> float:
    """Сумма a + b (переполнение даёт ±inf)."""
    return a + b


def subtract(a: float, b: float) -> float:
    """Разность a - b."""
    return a - b


def multiply(a: float, b: float) -> float:
    """Произведение a * b (переполнение даёт ±inf)."""
    return a * b


def divide(a: float, b: float) -> float:
    """
    Деление по правилам IEEE-754.

    В отличие от оператора `/`, деление на ноль не бросает
    ZeroDivisionError, а возвращает ±inf или NaN.

    Args:
        a: Числитель
        b: Знаменатель

    Returns:
        a / b, либо:
        - ±inf если b == ±0.0 и a ненулевое (знак = sign(a) * sign(b))
        - NaN если b == ±0.0 и a равно нулю или NaN

    Examples:
        >>> divide(10.0, 4.0)
        2.5
        >>> divide(1.0, 0.0)
        inf
        >>> divide(1.0, -0.0)
        -inf
    """
    if b != 0.0:
        return a / b

    if a == 0.0 or math.isnan(a):
        logger.debug("divide(%r, %r) -> nan", a, b)
        return math.nan

    # Знак результата: XOR знаков числителя и знаменателя (с учётом -0.0)
    sign = math.copysign(1.0, a) * math.copysign(1.0, b)
    logger.debug("divide(%r, %r) -> %sinf", a, b, "-" if sign < 0 else "")
    return math.copysign(math.inf, sign)


def power(base: float, exponent: float) -> float:
    """
    Возведение base в степень exponent по семантике C99 pow().

    math.pow бросает ValueError/OverflowError там, где IEEE-754
    определяет результат; здесь эти случаи возвращают NaN/inf.

    Args:
        base: Основание
        exponent: Показатель степени

    Returns:
        base ** exponent, либо:
        - NaN для отрицательного конечного base и нецелого exponent
        - ±inf при переполнении (минус только для отрицательного base
          и нечётного целого exponent)
        - ±inf для base == ±0.0 и отрицательного exponent

    Examples:
        >>> power(2.0, 8.0)
        256.0
        >>> power(4.0, 0.5)
        2.0
        >>> power(-8.0, 1.0 / 3.0)
        nan
    """
    try:
        exponent_f = float(exponent)
    except OverflowError:
        # int-показатель вне диапазона float: ведёт себя как ±inf с чётностью исходного int
        logger.debug("power(%r, <int exponent beyond float>) -> inf exponent", base)
        result = math.pow(base, math.inf if exponent > 0 else -math.inf)
        if base < 0 and is_odd_integer(exponent):
            return -result
        return result

    try:
        return math.pow(base, exponent_f)
    except OverflowError:
        negative = base < 0 and is_odd_integer(exponent)
        logger.debug("power(%r, %r) overflowed", base, exponent)
        return -math.inf if negative else math.inf
    except ValueError:
        if base == 0.0:
            # pow(±0, y<0): pole error
            if is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        logger.debug("power(%r, %r) -> nan", base, exponent)
        return math.nan


def square_root(x: float) -> float:
    """
    Квадратный корень; для отрицательных x возвращает NaN.

    Examples:
        >>> square_root(16.0)
        4.0
        >>> square_root(-1.0)
        nan
    """
    if x < 0:
        logger.debug("square_root(%r) -> nan", x)
        return math.nan
    return math.sqrt(x)


def absolute_value(x: float) -> float:
    """
    Абсолютное значение: -x если x < 0, иначе x.

    NaN проходит без изменений.

    Examples:
        >>> absolute_value(-15.5)
        15.5
        >>> absolute_value(3.0)
        3.0
    """
    if x < 0:
        return -x
    return x


# =============================================================================
# ЦЕЛОЧИСЛЕННАЯ АРИФМЕТИКА (i32)
# =============================================================================


def _check_int_operands(op: str, x: int, y: int) -> None:
    validate_int32(x, "x")
    validate_int32(y, "y")

    if y == 0:
        raise ZeroDivisionError("integer division by zero")

    # I32_MIN / -1 = 2^31 не помещается в i32
    if x == I32_MIN and y == -1:
        raise OverflowError(f"{op}({x}, {y}) overflows i32")


def int_divide(x: int, y: int) -> int:
    """
    Целочисленное деление i32 с усечением к нулю.

    Оператор `//` округляет к минус бесконечности; здесь частное
    усекается, как в целочисленном делении C.

    Args:
        x: Делимое (i32)
        y: Делитель (i32, ненулевой)

    Returns:
        Частное, усечённое к нулю

    Raises:
        ZeroDivisionError: Если y == 0
        OverflowError: Если результат не помещается в i32 (I32_MIN / -1)
        ValueError: Если операнды вне i32

    Examples:
        >>> int_divide(17, 5)
        3
        >>> int_divide(-17, 5)
        -3
    """
    _check_int_operands("int_divide", x, y)

    quotient = abs(x) // abs(y)
    if (x < 0) != (y < 0):
        quotient = -quotient

    return quotient


def int_remainder(x: int, y: int) -> int:
    """
    Остаток от усекающего деления; знак совпадает со знаком делимого.

    Как и int_divide, бросает ZeroDivisionError при y == 0 и
    OverflowError для I32_MIN % -1.

    Examples:
        >>> int_remainder(17, 5)
        2
        >>> int_remainder(-17, 5)
        -2
        >>> int_remainder(17, -5)
        2
    """
    _check_int_operands("int_remainder", x, y)

    remainder = abs(x) % abs(y)
    return -remainder if x < 0 else remainder
