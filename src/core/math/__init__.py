"""
Core math modules

Чистые численные функции: float-арифметика по IEEE-754 и
целочисленные алгоритмы над u64/i32 доменами.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    I32_MAX,
    I32_MIN,
    U64_MAX,
    is_odd_integer,
    is_valid_float,
    validate_int32,
    validate_unsigned,
)

# Arithmetic
from src.core.math.arithmetic import (
    absolute_value,
    add,
    divide,
    int_divide,
    int_remainder,
    multiply,
    power,
    square_root,
    subtract,
)

# Number Theory
from src.core.math.number_theory import (
    MAX_FACTORIAL_INPUT,
    FactorialOverflow,
    factorial,
    factorial_iterative,
    gcd,
    is_prime,
)

__all__ = [
    # Numerical Safeguards — Constants
    "I32_MAX",
    "I32_MIN",
    "U64_MAX",
    # Numerical Safeguards — Checks
    "is_odd_integer",
    "is_valid_float",
    "validate_int32",
    "validate_unsigned",
    # Arithmetic — Float
    "absolute_value",
    "add",
    "divide",
    "multiply",
    "power",
    "square_root",
    "subtract",
    # Arithmetic — Integer
    "int_divide",
    "int_remainder",
    # Number Theory — Constants
    "MAX_FACTORIAL_INPUT",
    # Number Theory — Exceptions
    "FactorialOverflow",
    # Number Theory — Functions
    "factorial",
    "factorial_iterative",
    "gcd",
    "is_prime",
]
