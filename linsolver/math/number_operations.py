"""
Number operations for the matrix engine.

The row-reduction engine and the iterative solvers are generic over the element
type of a matrix. Python's exact and high-precision number types (``Fraction``,
``Decimal``, ``sympy.Rational``) and native ``float`` all overload the arithmetic
operators, so the engine uses ``+ - * /`` directly. Everything that differs
between the types is collected in a NumberOperations instance:

- construction of zero/one and conversion of foreign values (``value_of``)
- the zero test (exact, or with a tolerance for floats) and the finiteness test
- absolute value, negation and fixed-precision rendering

Each implementation is a singleton, obtained with ``instance()``.
"""

import math
import numbers
from abc import ABC, abstractmethod
from decimal import Decimal
from fractions import Fraction
from typing import Any, Union

import numpy as np
from sympy import Rational

from ..names import FRACTION, DECIMAL, SYMPY, FLOAT

# Values accepted by value_of
Numeric = Union[int, float, str, Fraction, Decimal, Rational]


def to_fraction(value: Any) -> Fraction:
    """
    Convert a numeric value to a Fraction.

    Strings, integers, Decimals and sympy Rationals are converted exactly.
    Floats are converted through their shortest decimal representation, so
    ``0.1`` becomes ``1/10`` and ``1e-7`` becomes ``1/10000000`` rather than
    their binary expansions.

    Args:
        value: An int, float, str, Fraction, Decimal or sympy.Rational

    Returns:
        Fraction representation of the value
    """
    if isinstance(value, Fraction):
        return value
    elif isinstance(value, Rational):
        return Fraction(int(value.p), int(value.q))
    elif isinstance(value, (bool, np.bool_)):
        raise TypeError(f"Cannot convert {type(value)} to Fraction")
    elif isinstance(value, numbers.Integral):
        return Fraction(int(value))
    elif isinstance(value, (float, np.floating)):
        return Fraction(repr(float(value)))
    elif isinstance(value, (Decimal, str)):
        return Fraction(value)
    else:
        raise TypeError(f"Cannot convert {type(value)} to Fraction")


class NumberOperations(ABC):
    """
    Capability interface for matrix element types.

    A number type usable by the engine must be signed, ordered and support
    ``+ - * /`` and unary ``-``. This class supplies the remaining operations.
    """

    name = None
    # True if the value range is bounded and large intermediate values overflow
    bounded = False

    @classmethod
    def instance(cls) -> 'NumberOperations':
        """Returns the singleton instance of this operations class."""
        inst = cls.__dict__.get('_instance')
        if inst is None:
            inst = cls()
            cls._instance = inst
        return inst

    @abstractmethod
    def number_class(self) -> type:
        """Return the class of the numbers handled by this instance"""
        pass

    @abstractmethod
    def value_of(self, value: Numeric):
        """Convert a value of another numeric type (or a string) to this type"""
        pass

    def zero(self):
        return self.value_of(0)

    def one(self):
        return self.value_of(1)

    def is_zero(self, number) -> bool:
        """Check if number is zero"""
        return number == 0

    def abs(self, number):
        return abs(number)

    def negate(self, number):
        return -number

    def is_finite(self, number) -> bool:
        """Check that number is neither infinite nor NaN"""
        return True

    def to_float(self, number) -> float:
        """Convert to float, saturating to +/-inf for values beyond the float range"""
        try:
            return float(number)
        except OverflowError:
            return float('inf') if number > 0 else float('-inf')

    def format(self, number, precision: int = 5) -> str:
        """
        Render a number with a fixed count of decimal places.

        Args:
            number: Value to render
            precision: Number of digits after the decimal point

        Returns:
            Fixed-point string representation
        """
        frac = to_fraction(number)
        return format(Decimal(frac.numerator) / Decimal(frac.denominator), f".{precision}f")

    def __repr__(self):
        return f"{type(self).__name__}()"


class FractionOperations(NumberOperations):
    """Exact rational arithmetic with ``fractions.Fraction`` (the default)."""

    name = FRACTION

    def number_class(self) -> type:
        return Fraction

    def value_of(self, value: Numeric) -> Fraction:
        return to_fraction(value)


class DecimalOperations(NumberOperations):
    """
    Decimal arithmetic with ``decimal.Decimal``.

    Division rounds to the precision of the active decimal context (28 digits
    unless changed by the caller).
    """

    name = DECIMAL

    def number_class(self) -> type:
        return Decimal

    def value_of(self, value: Numeric) -> Decimal:
        if isinstance(value, Decimal):
            return value
        if isinstance(value, (Fraction, Rational)):
            frac = to_fraction(value)
            return Decimal(frac.numerator) / Decimal(frac.denominator)
        if isinstance(value, numbers.Integral) and not isinstance(value, (bool, np.bool_)):
            return Decimal(int(value))
        if isinstance(value, (float, np.floating)):
            return Decimal(repr(float(value)))
        if isinstance(value, str):
            return Decimal(value.strip())
        raise TypeError(f"Cannot convert {type(value)} to Decimal")

    def is_finite(self, number) -> bool:
        return number.is_finite()

    def format(self, number, precision: int = 5) -> str:
        return format(number, f".{precision}f")


class SympyRationalOperations(NumberOperations):
    """Exact rational arithmetic with ``sympy.Rational``."""

    name = SYMPY

    def number_class(self) -> type:
        return Rational

    def value_of(self, value: Numeric) -> Rational:
        if isinstance(value, Rational):
            return value
        frac = to_fraction(value)
        return Rational(frac.numerator, frac.denominator)


class FloatOperations(NumberOperations):
    """
    Native floating point arithmetic.

    Faster, but inexact: values whose magnitude is at most ``tolerance`` are
    treated as zero by the engine. Values beyond about 1.8e308 overflow to inf.
    """

    name = FLOAT
    bounded = True

    def __init__(self, tolerance: float = 1e-10):
        self.tolerance = tolerance

    def number_class(self) -> type:
        return float

    def value_of(self, value: Numeric) -> float:
        if isinstance(value, Rational):
            return float(to_fraction(value))
        return float(value)

    def is_zero(self, number) -> bool:
        return abs(number) <= self.tolerance

    def is_finite(self, number) -> bool:
        return math.isfinite(number)

    def format(self, number, precision: int = 5) -> str:
        return format(number, f".{precision}f")

    def __repr__(self):
        return f"FloatOperations(tolerance={self.tolerance})"


_OPERATIONS = {
    FRACTION: FractionOperations,
    DECIMAL: DecimalOperations,
    SYMPY: SympyRationalOperations,
    FLOAT: FloatOperations,
}


def get_number_operations(number_type=None) -> NumberOperations:
    """
    Resolve a number type to its NumberOperations instance.

    Args:
        number_type: One of the names 'fraction', 'decimal', 'sympy', 'float',
            a NumberOperations instance, or None for the default (fraction).

    Returns:
        NumberOperations singleton for the requested type
    """
    if number_type is None:
        return FractionOperations.instance()
    if isinstance(number_type, NumberOperations):
        return number_type
    try:
        return _OPERATIONS[number_type.lower()].instance()
    except (KeyError, AttributeError):
        raise ValueError(f"Unknown number type: {number_type}. "
                         f"Supported types are {', '.join(_OPERATIONS)}.") from None
