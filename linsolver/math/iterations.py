"""
Fixed-point iteration solvers for augmented linear systems.

Both solvers start from the zero vector and iterate

    x[i] = (b[i] - sum_{col != i} A[i][col] * x[col]) / A[i][i]

until the residual computed by ``calc_accuracy`` drops to the requested accuracy
or the iteration cap is reached. The simple (Jacobi) iteration reads only the
previous complete vector; the Zeidel (Gauss-Seidel) iteration updates the vector
in place, so later unknowns of a pass already use the new values of earlier ones.

Convergence is not checked in advance. It is guaranteed for diagonally dominant
coefficient matrices. A diverging run stops at the iteration cap, or earlier once
the residual exceeds ``DIVERGENCE_FACTOR`` times the residual of the zero start
vector or is no longer finite. The returned solution then carries a large
residual. A zero diagonal entry makes the division fail with the number type's
ZeroDivisionError.
"""

import logging
from typing import List, Optional, Tuple

from ..names import DEFAULT_MAX_ITER, CONVERGED, NOT_CONVERGED
from .accuracy import calc_accuracy
from .matrix import Matrix

LOG = logging.getLogger(__name__)

# a run stops once its residual exceeds this multiple of the start residual
DIVERGENCE_FACTOR = 10 ** 12


class IterativeSolution:
    """Solution vector of an iterative method with its iteration count and residual."""

    def __init__(self, method: str, solution: List, iterations: int, residual, converged: bool):
        self.method = method
        self.solution = solution
        self.iterations = iterations
        self.residual = residual
        self.status = CONVERGED if converged else NOT_CONVERGED

    def is_converged(self) -> bool:
        return self.status == CONVERGED

    def __repr__(self):
        return (f"IterativeSolution(method={self.method}, status={self.status}, "
                f"iterations={self.iterations}, residual={self.residual})")


def _check_shape(matrix: Matrix) -> None:
    if not matrix.is_augmented():
        raise ValueError(f"iterative solvers need an augmented matrix with {matrix.get_row_count() + 1} "
                         f"columns, but found {matrix.get_column_count()}")


def _update(matrix: Matrix, i: int, values: List):
    """New value of unknown i computed from the given values of the other unknowns"""
    last = matrix.get_column_count() - 1
    total = matrix.get_value_at(i, last)
    for col in range(last):
        if col != i:
            total = total - matrix.get_value_at(i, col) * values[col]
    return total / matrix.get_value_at(i, i)


def _iterate(matrix: Matrix, accuracy, max_iter: int, in_place: bool, name: str) -> Tuple[List, int]:
    _check_shape(matrix)
    ops = matrix.get_number_operations()
    accuracy = ops.value_of(accuracy)
    rows = matrix.get_row_count()
    res = [ops.zero() for _ in range(rows)]
    residual = calc_accuracy(res, matrix)
    bound = residual * DIVERGENCE_FACTOR
    iters = 0
    while residual > accuracy and iters < max_iter:
        previous = res if in_place else list(res)
        for i in range(rows):
            res[i] = _update(matrix, i, previous)
        iters += 1
        residual = calc_accuracy(res, matrix)
        if not ops.is_finite(residual) or residual > bound:
            LOG.debug(f"{name}: diverged after {iters} iterations, residual {ops.to_float(residual):.3e}")
            break
        if iters % 1000 == 0:
            LOG.debug(f"{name}: {iters} iterations, residual {ops.to_float(residual):.3e}")
    return res, iters


def solve_simple_iterations(matrix: Matrix, accuracy, max_iter: Optional[int] = None) -> Tuple[List, int]:
    """
    Solve an augmented system with simple (Jacobi) iterations.

    Args:
        matrix: Augmented matrix [A | b] with ``cols == rows + 1``
        accuracy: Residual at which to stop (any value ``value_of`` accepts)
        max_iter: Iteration cap (default 10000)

    Returns:
        Tuple of (solution, number of iterations performed)

    Raises:
        ValueError: If the matrix is not an augmented square system
    """
    max_iter = DEFAULT_MAX_ITER if max_iter is None else max_iter
    return _iterate(matrix, accuracy, max_iter, in_place=False, name="Simple iterations")


def solve_zeidel_iterations(matrix: Matrix, accuracy, max_iter: Optional[int] = None) -> Tuple[List, int]:
    """
    Solve an augmented system with Zeidel (Gauss-Seidel) iterations.

    Same contract as ``solve_simple_iterations``.
    """
    max_iter = DEFAULT_MAX_ITER if max_iter is None else max_iter
    return _iterate(matrix, accuracy, max_iter, in_place=True, name="Zeidel iterations")
