"""Tests of the number operations and the dense matrix container."""
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest
from sympy import Rational

from linsolver.names import *
from linsolver.math import (Matrix, FractionOperations, DecimalOperations, SympyRationalOperations, FloatOperations,
                            get_number_operations, to_fraction)


def test_get_number_operations():
    assert get_number_operations() is FractionOperations.instance()
    assert get_number_operations(FRACTION) is FractionOperations.instance()
    assert get_number_operations('Decimal') is DecimalOperations.instance()
    assert get_number_operations(SYMPY) is SympyRationalOperations.instance()
    ops = FloatOperations(tolerance=1e-3)
    assert get_number_operations(ops) is ops
    with pytest.raises(ValueError, match="Unknown number type"):
        get_number_operations('complex')


def test_to_fraction():
    assert to_fraction(3) == Fraction(3)
    assert to_fraction(0.1) == Fraction(1, 10)
    assert to_fraction("0.1") == Fraction(1, 10)
    assert to_fraction("3/4") == Fraction(3, 4)
    assert to_fraction(Decimal("2.5")) == Fraction(5, 2)
    assert to_fraction(Rational(7, 3)) == Fraction(7, 3)
    assert to_fraction(np.int64(4)) == Fraction(4)
    with pytest.raises(TypeError):
        to_fraction([1])


def test_value_of_types(number_ops):
    value = number_ops.value_of("2.5")
    assert isinstance(value, number_ops.number_class())
    assert value == number_ops.value_of(Fraction(5, 2))
    assert number_ops.is_zero(number_ops.zero())
    assert not number_ops.is_zero(number_ops.one())
    assert number_ops.abs(number_ops.value_of(-3)) == number_ops.value_of(3)
    assert number_ops.negate(number_ops.value_of(3)) == number_ops.value_of(-3)
    assert number_ops.format(number_ops.value_of("1.25"), 3) == "1.250"


def test_exact_value_of(exact_ops):
    assert exact_ops.value_of("0.1") * 10 == exact_ops.one()
    assert exact_ops.value_of(0.000001) == exact_ops.value_of("1/1000000")


def test_float_zero_tolerance():
    ops = FloatOperations.instance()
    assert ops.is_zero(1e-12)
    assert not ops.is_zero(1e-6)


def test_fraction_format_rounds():
    ops = FractionOperations.instance()
    assert ops.format(Fraction(1, 3), 5) == "0.33333"
    assert ops.format(Fraction(-2, 3), 2) == "-0.67"


def test_to_float_saturates():
    ops = FractionOperations.instance()
    assert ops.to_float(Fraction(10**400)) == float('inf')
    assert ops.to_float(Fraction(-10**400)) == float('-inf')


def test_zero_matrix():
    mx = Matrix(2, 3)
    assert mx.rows == 2 and mx.cols == 3
    assert mx.get_row_count() == 2 and mx.get_column_count() == 3
    assert all(v == 0 for v in mx)
    assert mx.is_augmented()
    assert not Matrix(3, 3).is_augmented()
    with pytest.raises(ValueError):
        Matrix(-1, 3)


def test_with_data_checks_size():
    mx = Matrix.with_data([1, 2, 3, 4, 5, 6], 2, 3)
    assert mx[1, 0] == 4
    assert mx.get_row(0) == [1, 2, 3]
    with pytest.raises(ValueError, match="wrong data size"):
        Matrix.with_data([1, 2, 3, 4, 5], 2, 3)


def test_from_rows_ragged():
    with pytest.raises(ValueError):
        Matrix.from_rows([[1, 2, 3], [4, 5]])


def test_index_out_of_range():
    mx = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    for row, col in [(2, 0), (0, 3), (-1, 0), (0, -1)]:
        with pytest.raises(IndexError):
            mx.get_value_at(row, col)
        with pytest.raises(IndexError):
            mx[row, col] = 1
    with pytest.raises(IndexError):
        mx.swap_rows(0, 2)


def test_set_value_and_clone_is_independent():
    mx = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    copy = mx.clone()
    mx[0, 0] = Fraction(9)
    assert copy[0, 0] == 1
    assert mx != copy
    copy.set_value_at(0, 0, Fraction(9))
    assert mx == copy


def test_row_operations():
    mx = Matrix.from_rows([[2, 1, 5], [1, 3, 10]])
    mx.swap_rows(0, 1)
    assert mx.to_rows() == [[1, 3, 10], [2, 1, 5]]
    # row1 := row1 * 1 + row0 * (-2)
    mx.add_row_to_other_row(1, Fraction(1), 0, Fraction(-2))
    assert mx.to_rows() == [[1, 3, 10], [0, -5, -15]]
    mx.divide_row(1, Fraction(-5))
    assert mx.to_rows() == [[1, 3, 10], [0, 1, 3]]


def test_numpy_conversion(number_ops):
    array = np.array([[2, 1, 5], [1, 3, 10]])
    mx = Matrix.from_numpy(array, number_ops)
    assert mx.get_number_operations() is number_ops
    assert isinstance(mx[0, 0], number_ops.number_class())
    np.testing.assert_array_equal(mx.to_numpy(), array.astype(float))
    assert mx.to_numpy(dtype=object)[1, 2] == number_ops.value_of(10)
    with pytest.raises(ValueError):
        Matrix.from_numpy(np.zeros(3))


def test_multiline_string():
    mx = Matrix.from_rows([[1, "-2.5"]])
    assert mx.to_multiline_string() == "[       1.000,       -2.500]\n"
    assert str(mx) == mx.to_multiline_string()
    assert mx.to_multiline_string(precision=1, width=5) == "[  1.0,  -2.5]\n"


def test_small_floats_convert_exactly(exact_ops):
    assert to_fraction(1e-7) == Fraction(1, 10**7)
    assert to_fraction(2.5e-7) == Fraction(1, 4 * 10**6)
    assert exact_ops.value_of(1e-7) == exact_ops.value_of("1/10000000")
    assert exact_ops.value_of(1e-9) != 0
    mx = Matrix.from_rows([[1e-7, 1, 1], [1, 1, 2]], exact_ops)
    assert mx[0, 0] == exact_ops.value_of("0.0000001")


def test_is_finite():
    ops = FloatOperations.instance()
    assert ops.is_finite(1e308)
    assert not ops.is_finite(float('inf'))
    assert not ops.is_finite(float('nan'))
    assert not DecimalOperations.instance().is_finite(Decimal('Infinity'))
    assert DecimalOperations.instance().is_finite(Decimal('1E+999'))
    assert FractionOperations.instance().is_finite(Fraction(10**400))
