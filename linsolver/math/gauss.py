"""
Gauss-Jordan row reduction for augmented linear systems.

The reduction works in place with linear-combination elimination steps: a row
below (or above) a pivot row is replaced by ``row * lead + pivot_row * (-mult)``,
which never divides and therefore keeps exact number types free of rounding
until the final canonicalisation. Its products grow quickly, so for number types
with a bounded range (floats) the pivot row is scaled to a leading one first.
Rows are not swapped during elimination; instead the rows are put into pivot
order afterwards by a bubble sort on the column of their first non-zero entry.

A reduced matrix in canonical form has a leading one in every non-zero row. For
a full-rank square system this is ``[I | x]`` and the solution can be read from
the last column.
"""

import logging
from typing import List, Optional, Tuple

from ..names import SOLVED, INCOMPATIBLE
from .matrix import Matrix
from .number_operations import NumberOperations, get_number_operations

LOG = logging.getLogger(__name__)


class DirectSolution:
    """
    Result of the direct (Gauss-Jordan) solving path.

    Attributes:
        status: SOLVED or INCOMPATIBLE
        matrix: The reduced matrix in canonical form
        solution: Solution vector, or None if the system is incompatible
    """

    def __init__(self, status: str, matrix: Matrix, solution: Optional[List] = None):
        self.status = status
        self.matrix = matrix
        self.solution = solution

    def is_solved(self) -> bool:
        return self.status == SOLVED

    def __repr__(self):
        return f"DirectSolution(status={self.status}, solution={self.solution})"


class Gauss:
    """
    Row-reduction engine.

    One instance exists per number type (see ``get_instance``). All reductions
    modify the given matrix in place and return it so calls can be chained.
    """

    _instances = {}

    def __init__(self, number_operations: Optional[NumberOperations] = None):
        self.number_operations = get_number_operations(number_operations)

    @classmethod
    def get_instance(cls, number_operations: Optional[NumberOperations] = None) -> 'Gauss':
        """Get the Gauss instance for the given number type"""
        ops = get_number_operations(number_operations)
        # operations of one type with equal tolerance share an engine
        key = (type(ops), getattr(ops, 'tolerance', None))
        if key not in cls._instances:
            cls._instances[key] = cls(ops)
        return cls._instances[key]

    def _is_zero(self, value) -> bool:
        return self.number_operations.is_zero(value)

    def lead_coefficient(self, matrix: Matrix, row: int, augmented: bool = True) -> Optional[Tuple[object, int]]:
        """
        Find the first non-zero entry of a row.

        Args:
            matrix: The matrix
            row: Row index
            augmented: If True, the last (right-hand side) column is not searched

        Returns:
            Tuple of (value, column) or None if the searched part of the row is zero
        """
        cols = matrix.get_column_count() - 1 if augmented else matrix.get_column_count()
        for col in range(cols):
            value = matrix.get_value_at(row, col)
            if not self._is_zero(value):
                return value, col
        return None

    def _first_nonzero_column(self, matrix: Matrix, row: int) -> int:
        lead = self.lead_coefficient(matrix, row, augmented=False)
        # all-zero rows sort behind every other row
        return matrix.get_column_count() if lead is None else lead[1]

    def _eliminate(self, matrix: Matrix, pivot_row: int, target_rows) -> None:
        lead = self.lead_coefficient(matrix, pivot_row)
        if lead is None:
            LOG.debug(f"Row {pivot_row} has no lead coefficient, skipped.")
            return
        lead_coef, lead_col = lead
        if self.number_operations.bounded:
            # leading one, magnitudes stay bounded
            matrix.divide_row(pivot_row, lead_coef)
            lead_coef = self.number_operations.one()
        for row in target_rows:
            mult = matrix.get_value_at(row, lead_col)
            matrix.add_row_to_other_row(row, lead_coef, pivot_row, self.number_operations.negate(mult))

    def to_row_echelon(self, matrix: Matrix) -> Matrix:
        """
        Eliminate the entries below every lead coefficient, top to bottom.

        Args:
            matrix: Augmented matrix, modified in place

        Returns:
            The same matrix in row echelon form (up to row order)
        """
        rows = matrix.get_row_count()
        for row in range(rows):
            self._eliminate(matrix, row, range(row + 1, rows))
        return matrix

    def to_reduced_row_echelon(self, matrix: Matrix) -> Matrix:
        """
        Reduce an augmented matrix to reduced row echelon form.

        Runs the downward elimination pass, the upward pass over rows
        ``rows-1 .. 1`` eliminating the entries above each lead coefficient, and
        finally sorts the rows by pivot column.

        Args:
            matrix: Augmented matrix, modified in place

        Returns:
            The same matrix
        """
        self.to_row_echelon(matrix)
        for row in reversed(range(1, matrix.get_row_count())):
            self._eliminate(matrix, row, reversed(range(row)))
        swaps = self.sort_rows(matrix)
        LOG.debug(f"Reduced row echelon form reached with {swaps} row swap(s).")
        return matrix

    def sort_rows(self, matrix: Matrix) -> int:
        """
        Bubble sort the rows by the column of their first non-zero entry.

        The whole row is searched, right-hand side included. Adjacent rows are
        swapped until a full pass makes no swap. All-zero rows move to the bottom.

        Returns:
            Number of swaps performed
        """
        swaps = 0
        swapped = True
        while swapped:
            swapped = False
            for row in range(matrix.get_row_count() - 1):
                if self._first_nonzero_column(matrix, row) > self._first_nonzero_column(matrix, row + 1):
                    matrix.swap_rows(row, row + 1)
                    swapped = True
                    swaps += 1
        return swaps

    def to_canonical_form(self, matrix: Matrix) -> Matrix:
        """Divide every non-zero row by its first non-zero entry (right-hand side included)."""
        for row in range(matrix.get_row_count()):
            lead = self.lead_coefficient(matrix, row, augmented=False)
            if lead is not None:
                matrix.divide_row(row, lead[0])
        return matrix

    def are_zeros_at_maindiag(self, matrix: Matrix) -> bool:
        """
        Check the main diagonal for zeros.

        After full reduction a zero on the diagonal means the coefficient matrix
        is singular and the system has no unique solution.
        """
        for i in range(min(matrix.get_row_count(), matrix.get_column_count())):
            if self._is_zero(matrix.get_value_at(i, i)):
                return True
        return False

    def solve(self, matrix: Matrix) -> DirectSolution:
        """
        Solve an augmented square system by Gauss-Jordan elimination.

        The given matrix is left untouched; a clone is reduced to canonical form.

        Args:
            matrix: Augmented matrix [A | b] with ``cols == rows + 1``

        Returns:
            DirectSolution with status SOLVED and the solution vector, or status
            INCOMPATIBLE and no solution if the reduced matrix has a zero on its
            main diagonal

        Raises:
            ValueError: If the matrix is not an augmented square system
            OverflowError: If the reduction leaves infinite or NaN values
        """
        if not matrix.is_augmented():
            raise ValueError(f"expected an augmented matrix with {matrix.get_row_count() + 1} columns, "
                             f"but found {matrix.get_column_count()}")
        reduced = self.to_canonical_form(self.to_reduced_row_echelon(matrix.clone()))
        if not all(self.number_operations.is_finite(value) for value in reduced):
            raise OverflowError("values of the reduced matrix are not finite, "
                                f"the system cannot be solved with {self.number_operations.name} numbers")
        if self.are_zeros_at_maindiag(reduced):
            LOG.debug("Zero on main diagonal after reduction.")
            return DirectSolution(INCOMPATIBLE, reduced)
        last = reduced.get_column_count() - 1
        solution = [reduced.get_value_at(row, last) for row in range(reduced.get_row_count())]
        return DirectSolution(SOLVED, reduced, solution)
