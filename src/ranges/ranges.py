"""
Ranges — конструкторы диапазонов

Три вида диапазонов:
- exclusive_range(1, 5)     → 1, 2, 3, 4
- inclusive_range(1, 5)     → 1, 2, 3, 4, 5
- char_range("a", "d")      → a, b, c, d

Диапазоны ленивые: значения материализуются только через collect().
Обратные границы дают пустой диапазон, а не ошибку.
"""

from typing import Final, Iterable, Iterator, TypeVar

T = TypeVar("T")

# Суррогатный блок UTF-16: кодовые точки, не являющиеся символами
SURROGATE_FIRST: Final[int] = 0xD800
SURROGATE_LAST: Final[int] = 0xDFFF


def _validate_step(step: int) -> None:
    if isinstance(step, bool) or not isinstance(step, int):
        raise TypeError(f"step must be an int, got {type(step).__name__}")
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")


def exclusive_range(start: int, stop: int, step: int = 1) -> range:
    """
    Полуоткрытый диапазон [start, stop).

    Args:
        start: Первое значение
        stop: Граница (не входит в диапазон)
        step: Положительный шаг (default: 1)

    Raises:
        ValueError: Если step <= 0

    Examples:
        >>> list(exclusive_range(1, 5))
        [1, 2, 3, 4]
    """
    _validate_step(step)
    return range(start, stop, step)


def inclusive_range(start: int, end: int, step: int = 1) -> range:
    """
    Замкнутый диапазон [start, end].

    При step > 1 значение end входит в диапазон, только если
    попадает на шаг от start.

    Examples:
        >>> list(inclusive_range(1, 5))
        [1, 2, 3, 4, 5]
        >>> list(inclusive_range(3, 9, step=2))
        [3, 5, 7, 9]
    """
    _validate_step(step)
    return range(start, end + 1, step)


def char_range(first: str, last: str) -> Iterator[str]:
    """
    Замкнутый диапазон символов по кодовым точкам Unicode.

    Суррогатный блок U+D800..U+DFFF пропускается.

    Args:
        first: Первый символ (строка длины 1)
        last: Последний символ (строка длины 1)

    Raises:
        TypeError: Если first или last не str
        ValueError: Если first или last не одиночный символ или суррогат

    Examples:
        >>> list(char_range("a", "d"))
        ['a', 'b', 'c', 'd']
    """
    for name, value in (("first", first), ("last", last)):
        if not isinstance(value, str):
            raise TypeError(f"{name} must be a str, got {type(value).__name__}")
        if len(value) != 1:
            raise ValueError(f"{name} must be a single character, got {value!r}")
        if _is_surrogate(ord(value)):
            raise ValueError(f"{name} must not be a surrogate code point, got {value!r}")

    return (
        chr(code)
        for code in inclusive_range(ord(first), ord(last))
        if not _is_surrogate(code)
    )


def _is_surrogate(code: int) -> bool:
    return SURROGATE_FIRST <= code <= SURROGATE_LAST


def collect(values: Iterable[T]) -> list[T]:
    """Материализация диапазона в список."""
    return list(values)
