"""Residual of a candidate solution of an augmented linear system."""

from typing import Sequence

from .matrix import Matrix


def calc_accuracy(solution: Sequence, matrix: Matrix):
    """
    Compute the L1 norm of the residual ``Ax - b``.

    The same measure scores the direct and the iterative methods, always on the
    original (not reduced) augmented matrix.

    Args:
        solution: Candidate solution, one value per unknown
        matrix: Augmented matrix [A | b]

    Returns:
        ``sum_row |sum_col A[row][col] * x[col] - b[row]|`` in the element type

    Raises:
        ValueError: If the solution length does not match the number of unknowns
    """
    ops = matrix.get_number_operations()
    rows = matrix.get_row_count()
    unknowns = matrix.get_column_count() - 1
    if len(solution) != unknowns:
        raise ValueError(f"solution has {len(solution)} values, the system has {unknowns} unknowns")
    error = ops.zero()
    for row in range(rows):
        result = ops.zero()
        for col in range(unknowns):
            result = result + matrix.get_value_at(row, col) * solution[col]
        error = error + ops.abs(result - matrix.get_value_at(row, unknowns))
    return error
