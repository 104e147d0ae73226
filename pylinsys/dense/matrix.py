"""
Dense row-major matrix.

Matrix owns one contiguous (nrows x ncols) numpy buffer plus a logical row
order. Row access hands out Row views: numpy views into the buffer, so
writes through a Row land in the matrix. Exchanging two rows only swaps two
entries of the row order; no element data moves.

Matrices are not duplicable: copy.copy / copy.deepcopy raise TypeError.
Copying a matrix is expensive and, given that the algorithms mutate their
input in place, usually a sign of a bug. Build a second instance explicitly
with Matrix.from_rows(existing.tolist()) when one is really needed.

Shape mismatches on +, -, @ and out-of-range indices are caller bugs and
raise immediately (DimensionError, IndexOutOfRangeError).
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator
from numpy.typing import NDArray

from pylinsys.core.compute.precision import round_row_to_zero
from pylinsys.core.validation import (
    check_grid,
    check_index,
    check_inner_dimension,
    check_positive_size,
    check_same_shape,
    check_scalar,
    check_scalar_type,
    infer_scalar_type,
)
from pylinsys.dense import _storage
from pylinsys.dense.vector import Vector


class Row:
    """
    Bounds-checked window onto one row of a Matrix.

    Holds a numpy view (buffer + offset + length) into the owning matrix's
    storage. The view stays attached to the physical row it was created
    for; after exchange_rows, fetch the row again from the matrix.
    """

    def __init__(self, data: NDArray[Any], scalar_type: type):
        self._data = data
        self._scalar_type = scalar_type

    @property
    def size(self) -> int:
        return self._data.shape[0]

    def __len__(self) -> int:
        return self._data.shape[0]

    def __getitem__(self, col: int) -> Any:
        j = check_index(col, self.size, 'column')
        return _storage.element(self._data[j], self._scalar_type)

    def __setitem__(self, col: int, value: Any) -> None:
        j = check_index(col, self.size, 'column')
        self._data[j] = _storage.coerce(value, self._scalar_type, 'value')

    def __iter__(self) -> Iterator[Any]:
        for v in self._data:
            yield _storage.element(v, self._scalar_type)

    def tolist(self) -> list[Any]:
        return list(self)

    def __repr__(self) -> str:
        return f"Row({self.tolist()!r})"


class Matrix:
    """
    Dense nrows x ncols grid of scalars.

    Construction:
        Matrix(3, 4)                               # zero-filled, float
        Matrix(3, 4, scalar_type=Fraction)         # zero-filled, exact
        Matrix.from_rows([[1, 2], [3, 4]])         # from a rectangular grid
        Matrix.identity(3)
        Matrix.zero(2, 5)

    Access:
        m[i]        -> Row (bounds-checked)
        m[i][j]     -> element (bounds-checked)
        m[i, j]     -> element (bounds-checked)

    Row operations mutate in place and return self so they can be chained.
    """

    def __init__(self, nrows: int, ncols: int, *, scalar_type: type = float):
        self._nrows = check_positive_size(nrows, 'nrows')
        self._ncols = check_positive_size(ncols, 'ncols')
        self._scalar_type = check_scalar_type(scalar_type)
        self._storage = _storage.zeros((self._nrows, self._ncols), self._scalar_type)
        self._order = list(range(self._nrows))

    # === Construction ===

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Iterable[Any]],
        *,
        scalar_type: type | None = None,
    ) -> Matrix:
        """
        Build a Matrix from a rectangular grid of values.

        Args:
            rows: Sequence of equal-length rows
            scalar_type: Storage scalar type. Inferred if None: any Fraction
                makes the matrix exact, plain reals are stored as float.

        Returns:
            New Matrix owning a copy of the values

        Raises:
            ValidationError: On zero rows, a zero-length row, rows of
                unequal length, or non-scalar entries
        """
        grid = check_grid(rows, 'rows')
        flat = [v for row in grid for v in row]
        for v in flat:
            check_scalar(v, 'rows')
        if scalar_type is None:
            stype = infer_scalar_type(flat)
        else:
            stype = check_scalar_type(scalar_type)
        return cls._from_array(_storage.from_nested(grid, stype, 'rows'), stype)

    @classmethod
    def identity(cls, size: int, *, scalar_type: type = float) -> Matrix:
        """n x n identity matrix."""
        matrix = cls(size, size, scalar_type=scalar_type)
        one = matrix._scalar_type(1)
        for i in range(matrix._nrows):
            matrix._storage[i, i] = one
        return matrix

    @classmethod
    def zero(cls, nrows: int, ncols: int, *, scalar_type: type = float) -> Matrix:
        """nrows x ncols zero matrix."""
        return cls(nrows, ncols, scalar_type=scalar_type)

    @classmethod
    def _from_array(cls, array: NDArray[Any], scalar_type: type) -> Matrix:
        """Wrap an existing 2-D buffer without validation. Takes ownership."""
        matrix = cls.__new__(cls)
        matrix._storage = _storage.cast(array, scalar_type)
        matrix._nrows, matrix._ncols = matrix._storage.shape
        matrix._scalar_type = scalar_type
        matrix._order = list(range(matrix._nrows))
        return matrix

    # === Properties ===

    @property
    def nrows(self) -> int:
        return self._nrows

    @property
    def ncols(self) -> int:
        return self._ncols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._nrows, self._ncols)

    @property
    def scalar_type(self) -> type:
        return self._scalar_type

    def __len__(self) -> int:
        return self._nrows

    # === Access ===

    def _row(self, i: int) -> NDArray[Any]:
        """Unchecked view of logical row i."""
        return self._storage[self._order[i]]

    def __getitem__(self, key: int | tuple[int, int]) -> Any:
        if isinstance(key, tuple):
            row, col = key
            i = check_index(row, self._nrows, 'row')
            j = check_index(col, self._ncols, 'column')
            return _storage.element(self._row(i)[j], self._scalar_type)
        i = check_index(key, self._nrows, 'row')
        return Row(self._row(i), self._scalar_type)

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        row, col = key
        i = check_index(row, self._nrows, 'row')
        j = check_index(col, self._ncols, 'column')
        self._row(i)[j] = _storage.coerce(value, self._scalar_type, 'value')

    def __iter__(self) -> Iterator[Row]:
        for i in range(self._nrows):
            yield Row(self._row(i), self._scalar_type)

    def column(self, col: int) -> Vector:
        """Copy of column ``col`` as a Vector."""
        j = check_index(col, self._ncols, 'column')
        return Vector._from_array(self._storage[self._order, j].copy(), self._scalar_type)

    def to_numpy(self) -> NDArray[Any]:
        """Copy of the elements in logical row order."""
        return self._storage[self._order].copy()

    def tolist(self) -> list[list[Any]]:
        return [row.tolist() for row in self]

    # === Row operations ===

    def linear_comb_rows(self, r1: int, a: Any, r2: int, b: Any) -> Matrix:
        """
        Replace row r1 with a * row(r1) + b * row(r2).

        Raises:
            IndexOutOfRangeError: If r1 or r2 is not a valid row
        """
        i = check_index(r1, self._nrows, 'row')
        k = check_index(r2, self._nrows, 'row')
        a = _storage.coerce(a, self._scalar_type, 'a')
        b = _storage.coerce(b, self._scalar_type, 'b')
        target = self._row(i)
        target[:] = a * target + b * self._row(k)
        return self

    def exchange_rows(self, r1: int, r2: int) -> Matrix:
        """
        Swap two rows by re-pointing the row order. O(1).

        Raises:
            IndexOutOfRangeError: If r1 or r2 is not a valid row
        """
        i = check_index(r1, self._nrows, 'row')
        k = check_index(r2, self._nrows, 'row')
        self._order[i], self._order[k] = self._order[k], self._order[i]
        return self

    def scale_row(self, row: int, factor: Any) -> Matrix:
        """
        Multiply every element of a row by factor.

        Raises:
            IndexOutOfRangeError: If row is not a valid row
        """
        i = check_index(row, self._nrows, 'row')
        self._row(i)[:] *= _storage.coerce(factor, self._scalar_type, 'factor')
        return self

    def scale(self, factor: Any) -> Matrix:
        """Multiply every element of the matrix by factor."""
        for i in range(self._nrows):
            self.scale_row(i, factor)
        return self

    def round_row(self, row: int, threshold: float) -> Matrix:
        """
        Replace elements of a row with abs(float(x)) < threshold by exact zeros.

        Raises:
            IndexOutOfRangeError: If row is not a valid row
        """
        i = check_index(row, self._nrows, 'row')
        round_row_to_zero(self._row(i), threshold)
        return self

    # === Arithmetic (new matrices) ===

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self.shape, other.shape, 'Matrix addition')
        stype = _storage.promote(self._scalar_type, other._scalar_type)
        return Matrix._from_array(
            _storage.cast(self.to_numpy(), stype) + _storage.cast(other.to_numpy(), stype),
            stype,
        )

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self.shape, other.shape, 'Matrix subtraction')
        stype = _storage.promote(self._scalar_type, other._scalar_type)
        return Matrix._from_array(
            _storage.cast(self.to_numpy(), stype) - _storage.cast(other.to_numpy(), stype),
            stype,
        )

    def __matmul__(self, other: Any) -> Matrix | Vector:
        if isinstance(other, Matrix):
            check_inner_dimension(self._ncols, other._nrows, 'Matrix @ Matrix')
            stype = _storage.promote(self._scalar_type, other._scalar_type)
            product = _storage.cast(self.to_numpy(), stype) @ _storage.cast(other.to_numpy(), stype)
            return Matrix._from_array(product, stype)
        if isinstance(other, Vector):
            check_inner_dimension(self._ncols, other.size, 'Matrix @ Vector')
            stype = _storage.promote(self._scalar_type, other.scalar_type)
            product = _storage.cast(self.to_numpy(), stype) @ _storage.cast(other.to_numpy(), stype)
            return Vector._from_array(product, stype)
        return NotImplemented

    def __rmatmul__(self, other: Any) -> Vector:
        # Row vector times matrix: len(v) must equal nrows
        if isinstance(other, Vector):
            check_inner_dimension(other.size, self._nrows, 'Vector @ Matrix')
            stype = _storage.promote(self._scalar_type, other.scalar_type)
            product = _storage.cast(other.to_numpy(), stype) @ _storage.cast(self.to_numpy(), stype)
            return Vector._from_array(product, stype)
        return NotImplemented

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return all(
            a == b
            for lhs, rhs in zip(self, other)
            for a, b in zip(lhs, rhs)
        )

    __hash__ = None  # type: ignore[assignment]

    # === Ownership ===

    def __copy__(self):
        raise TypeError(
            "Matrix objects cannot be copied; build a new one with Matrix.from_rows()"
        )

    def __deepcopy__(self, memo):
        raise TypeError(
            "Matrix objects cannot be copied; build a new one with Matrix.from_rows()"
        )

    def __repr__(self) -> str:
        return (
            f"Matrix(nrows={self._nrows}, ncols={self._ncols}, "
            f"scalar_type={self._scalar_type.__name__})"
        )

    def __str__(self) -> str:
        return "\n".join(
            "[" + ", ".join(str(v) for v in row) + "]" for row in self
        )
