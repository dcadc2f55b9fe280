import pytest
from linsolver.names import *
from linsolver.math import get_number_operations, Matrix

# Number types the engine is tested with
number_types = [FRACTION, DECIMAL, SYMPY, FLOAT]
exact_number_types = [FRACTION, SYMPY]


@pytest.fixture(params=number_types, scope="session")
def number_ops(request: pytest.FixtureRequest):
    """Provide session-level fixture for all number types."""
    return get_number_operations(request.param)


@pytest.fixture(params=exact_number_types, scope="session")
def exact_ops(request: pytest.FixtureRequest):
    """Provide session-level fixture for exact rational number types."""
    return get_number_operations(request.param)


@pytest.fixture
def system_2x3(number_ops):
    """2x + y = 5, x + 3y = 10 with solution (1, 3)."""
    return Matrix.from_rows([[2, 1, 5], [1, 3, 10]], number_ops)


@pytest.fixture
def dominant_3x4(number_ops):
    """Diagonally dominant system with solution (1, 1, 1)."""
    return Matrix.from_rows([[4, 1, 1, 6], [1, 5, 2, 8], [1, 2, 6, 9]], number_ops)


@pytest.fixture
def singular_3x4(number_ops):
    """System whose coefficient block has an all-zero row."""
    return Matrix.from_rows([[1, 2, 3, 4], [0, 0, 0, 0], [2, 1, 1, 1]], number_ops)


@pytest.fixture
def exact_system_2x3(exact_ops):
    """system_2x3 built on the exact number type of exact_ops."""
    return Matrix.from_rows([[2, 1, 5], [1, 3, 10]], exact_ops)


@pytest.fixture
def exact_singular_3x4(exact_ops):
    """singular_3x4 built on the exact number type of exact_ops."""
    return Matrix.from_rows([[1, 2, 3, 4], [0, 0, 0, 0], [2, 1, 1, 1]], exact_ops)
