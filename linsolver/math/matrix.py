"""
Dense matrix container for the linear system solvers.

The matrix stores its values in a single flat list in row-major order. The
size is fixed at construction; only values change, either in place through the
row operations used by the elimination engine or in independent clones.

For solving, a matrix with ``cols == rows + 1`` is interpreted as augmented:
columns ``0 .. cols-2`` hold the coefficient matrix A, the last column holds the
right-hand side b.
"""

from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .number_operations import NumberOperations, get_number_operations


class Matrix:
    """
    Fixed-size, row-major matrix over a generic number type.

    Args:
        rows: Number of rows
        cols: Number of columns
        number_operations: NumberOperations of the element type (default: Fraction)
    """

    def __init__(self, rows: int, cols: int, number_operations: Optional[NumberOperations] = None):
        if rows < 0:
            raise ValueError(f"negative row count: {rows}")
        if cols < 0:
            raise ValueError(f"negative column count: {cols}")
        self._ops = get_number_operations(number_operations)
        self._row_count = rows
        self._column_count = cols
        zero = self._ops.zero()
        self._data = [zero] * (rows * cols)

    @classmethod
    def with_data(cls, data: Sequence, rows: int, cols: int,
                  number_operations: Optional[NumberOperations] = None) -> 'Matrix':
        """
        Create a matrix from a flat sequence of values in row-major order.

        Values are converted to the element type with ``value_of``.

        Raises:
            ValueError: If ``len(data) != rows * cols``
        """
        if rows * cols != len(data):
            raise ValueError(f"wrong data size: expected {rows * cols} values for a {rows}x{cols} "
                             f"matrix, but found {len(data)}")
        mx = cls(rows, cols, number_operations)
        mx._data = [mx._ops.value_of(value) for value in data]
        return mx

    @classmethod
    def from_rows(cls, data: Sequence[Sequence], number_operations: Optional[NumberOperations] = None) -> 'Matrix':
        """Create a matrix from a 2D sequence, ``data[row][col]``."""
        rows = len(data)
        cols = len(data[0]) if rows > 0 else 0
        for row, values in enumerate(data):
            if len(values) != cols:
                raise ValueError(f"row {row} has {len(values)} values, expected {cols}")
        return cls.with_data([value for values in data for value in values], rows, cols, number_operations)

    @classmethod
    def from_numpy(cls, array: np.ndarray, number_operations: Optional[NumberOperations] = None) -> 'Matrix':
        """Create a matrix from a 2D numpy array."""
        array = np.asarray(array)
        if array.ndim != 2:
            raise ValueError(f"expected a 2D array, got {array.ndim} dimension(s)")
        rows, cols = array.shape
        return cls.with_data(array.ravel().tolist(), rows, cols, number_operations)

    # Dimensions
    @property
    def rows(self) -> int:
        return self._row_count

    @property
    def cols(self) -> int:
        return self._column_count

    def get_row_count(self) -> int:
        """Get number of rows"""
        return self._row_count

    def get_column_count(self) -> int:
        """Get number of columns"""
        return self._column_count

    def get_number_operations(self) -> NumberOperations:
        """Get the NumberOperations instance of the element type"""
        return self._ops

    def is_augmented(self) -> bool:
        """True if the matrix has the shape of an augmented square system"""
        return self._column_count == self._row_count + 1

    # Element access
    def _index(self, row: int, col: int) -> int:
        if not (0 <= row < self._row_count and 0 <= col < self._column_count):
            raise IndexError(f"index out of range: row {row}, col {col} "
                             f"(rows {self._row_count}, cols {self._column_count})")
        return row * self._column_count + col

    def get_value_at(self, row: int, col: int):
        """Get value at specified position"""
        return self._data[self._index(row, col)]

    def set_value_at(self, row: int, col: int, value) -> None:
        """Set value at specified position"""
        self._data[self._index(row, col)] = value

    def __getitem__(self, coords: Tuple[int, int]):
        row, col = coords
        return self.get_value_at(row, col)

    def __setitem__(self, coords: Tuple[int, int], value) -> None:
        row, col = coords
        self.set_value_at(row, col, value)

    def get_row(self, row: int) -> List:
        """Get a copy of the specified row"""
        start = self._index(row, 0) if self._column_count > 0 else 0
        return self._data[start:start + self._column_count]

    def iter(self) -> Iterator:
        """Iterate over all values in row-major order"""
        return iter(self._data)

    def __iter__(self):
        return self.iter()

    # Row operations
    def swap_rows(self, row_a: int, row_b: int) -> None:
        """Swap two rows"""
        if not (0 <= row_a < self._row_count and 0 <= row_b < self._row_count):
            raise IndexError(f"cannot swap rows {row_a} and {row_b} of a matrix with {self._row_count} rows")
        if row_a == row_b:
            return
        cols = self._column_count
        a, b = row_a * cols, row_b * cols
        self._data[a:a + cols], self._data[b:b + cols] = self._data[b:b + cols], self._data[a:a + cols]

    def add_row_to_other_row(self, dst_row: int, dst_mult, src_row: int, src_mult) -> None:
        """Replace destination row by ``dst_row * dst_mult + src_row * src_mult``"""
        for col in range(self._column_count):
            dst_val = self.get_value_at(dst_row, col)
            src_val = self.get_value_at(src_row, col)
            self.set_value_at(dst_row, col, dst_val * dst_mult + src_val * src_mult)

    def divide_row(self, row: int, divisor) -> None:
        """Divide every value of a row by divisor"""
        for col in range(self._column_count):
            self.set_value_at(row, col, self.get_value_at(row, col) / divisor)

    # Copies and conversions
    def clone(self) -> 'Matrix':
        """Create an independent copy of this matrix"""
        mx = Matrix(self._row_count, self._column_count, self._ops)
        mx._data = list(self._data)
        return mx

    def to_rows(self) -> List[List]:
        """Get all rows as 2D list"""
        return [self.get_row(row) for row in range(self._row_count)]

    def to_numpy(self, dtype=float) -> np.ndarray:
        """Convert to a numpy array (float by default, ``dtype=object`` keeps the values)"""
        if dtype is object:
            array = np.empty((self._row_count, self._column_count), dtype=object)
            for row in range(self._row_count):
                for col in range(self._column_count):
                    array[row, col] = self.get_value_at(row, col)
            return array
        return np.array([self._ops.to_float(value) for value in self._data],
                        dtype=dtype).reshape(self._row_count, self._column_count)

    # Comparison and string representation
    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self._row_count == other._row_count and self._column_count == other._column_count
                and all(a == b for a, b in zip(self._data, other._data)))

    def __repr__(self) -> str:
        return f"Matrix({self._row_count}x{self._column_count}, {self._ops.name})"

    def to_multiline_string(self, precision: int = 3, width: int = 12) -> str:
        """Multi-line representation with fixed decimal precision, one bracketed row per line"""
        lines = []
        for row in range(self._row_count):
            cells = [self._ops.format(value, precision).rjust(width) for value in self.get_row(row)]
            lines.append("[" + ", ".join(cells) + "]")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.to_multiline_string()
