"""
Property-based тесты численных инвариантов (hypothesis)

Проверяемые инварианты:
1. Коммутативность add / multiply
2. absolute_value(x) >= 0 и absolute_value(x) == absolute_value(-x)
3. gcd(a, b) == gcd(b, a), gcd(a, 0) == a, gcd делит оба аргумента
4. factorial(n) == factorial_iterative(n) на [0, 20]
5. is_prime согласован с наивным перебором делителей
6. int_divide(x, y) * y + int_remainder(x, y) == x
"""

from hypothesis import assume, given
from hypothesis import strategies as st

from src.core.math import (
    I32_MAX,
    I32_MIN,
    MAX_FACTORIAL_INPUT,
    U64_MAX,
    absolute_value,
    add,
    factorial,
    factorial_iterative,
    gcd,
    int_divide,
    int_remainder,
    is_prime,
    multiply,
)

finite_floats = st.floats(allow_nan=False, allow_infinity=False)
u64 = st.integers(min_value=0, max_value=U64_MAX)
i32 = st.integers(min_value=I32_MIN, max_value=I32_MAX)


class TestFloatProperties:
    """Свойства float-арифметики."""

    @given(finite_floats, finite_floats)
    def test_add_commutative(self, a, b):
        assert add(a, b) == add(b, a)

    @given(finite_floats, finite_floats)
    def test_multiply_commutative(self, a, b):
        assert multiply(a, b) == multiply(b, a)

    @given(st.floats(allow_nan=False))
    def test_absolute_value_non_negative_and_even(self, x):
        assert absolute_value(x) >= 0
        assert absolute_value(x) == absolute_value(-x)


class TestIntegerProperties:
    """Свойства целочисленных функций."""

    @given(u64, u64)
    def test_gcd_symmetric(self, a, b):
        assert gcd(a, b) == gcd(b, a)

    @given(u64)
    def test_gcd_with_zero(self, a):
        assert gcd(a, 0) == a

    @given(u64, u64)
    def test_gcd_divides_both(self, a, b):
        assume(a or b)
        g = gcd(a, b)
        assert a % g == 0
        assert b % g == 0

    @given(st.integers(min_value=0, max_value=MAX_FACTORIAL_INPUT))
    def test_factorial_forms_agree(self, n):
        assert factorial(n) == factorial_iterative(n)

    @given(st.integers(min_value=0, max_value=5000))
    def test_is_prime_matches_naive(self, n):
        naive = n >= 2 and all(n % d for d in range(2, n))
        assert is_prime(n) is naive

    @given(i32, i32)
    def test_int_division_identity(self, x, y):
        assume(y != 0)
        assume(not (x == I32_MIN and y == -1))
        q = int_divide(x, y)
        r = int_remainder(x, y)
        assert q * y + r == x
        assert abs(r) < abs(y)
