"""
Core math modules

Арифметика беззнаковых целых произвольной точности и производные функции.
"""

# BigValue engine
from src.core.math.big_value import (
    # Constants
    DIGIT_BASE,
    NATIVE_UINT_BITS_DEFAULT,
    # Exceptions
    BigValueError,
    DivisionByZeroError,
    InvalidArgumentError,
    InvalidFormatError,
    UnderflowError,
    # Types
    BigValue,
    PowAlgorithm,
)

# Special functions
from src.core.math.special_functions import (
    catalan,
    factorial,
    fibonacci,
)

__all__ = [
    # BigValue — Constants
    "DIGIT_BASE",
    "NATIVE_UINT_BITS_DEFAULT",
    # BigValue — Exceptions
    "BigValueError",
    "DivisionByZeroError",
    "InvalidArgumentError",
    "InvalidFormatError",
    "UnderflowError",
    # BigValue — Types
    "BigValue",
    "PowAlgorithm",
    # Special functions
    "catalan",
    "factorial",
    "fibonacci",
]
