from __future__ import annotations

from numbers import Integral, Real
from typing import Any, List, Tuple

import numpy as np

from gradfit.core.errors import DimensionMismatch


class Matrix:
    """
    Small dense float64 matrix: one contiguous, read-only numpy buffer plus its shape.

    Vectors are (n, 1) columns. Every operation returns a new Matrix; nothing is
    ever written in place, so a Matrix handed to a function cannot be changed by it.
    1-D input is read as a column vector.
    """

    __slots__ = ("_data",)
    __array_ufunc__ = None  # numpy operands defer to our operators

    def __init__(self, data: Any):
        if isinstance(data, Matrix):
            data = data._data
        arr = np.array(data, dtype=np.float64)  # always a private copy
        if arr.ndim == 0:
            arr = arr.reshape(1, 1)
        elif arr.ndim == 1:
            arr = arr.reshape(-1, 1)
        elif arr.ndim != 2:
            raise DimensionMismatch(f"Matrix needs 1-D or 2-D data, got {arr.ndim}-D")
        self._data = _freeze(arr)

    @classmethod
    def _wrap(cls, arr: np.ndarray) -> "Matrix":
        # arr is a fresh result nobody else holds; skip the copy
        m = cls.__new__(cls)
        m._data = _freeze(arr)
        return m

    @classmethod
    def zeros(cls, rows: int, cols: int = 1) -> "Matrix":
        return cls._wrap(np.zeros((rows, cols), dtype=np.float64))

    @classmethod
    def column(cls, values) -> "Matrix":
        return cls(np.asarray(values, dtype=np.float64).reshape(-1, 1))

    # ---------- shape ----------

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self._data.shape

    @property
    def is_vector(self) -> bool:
        return self.cols == 1

    # ---------- arithmetic ----------

    def __matmul__(self, other: Any) -> "Matrix":
        other = as_matrix(other)
        if self.cols != other.rows:
            raise DimensionMismatch(
                f"cannot multiply {self.rows}x{self.cols} by {other.rows}x{other.cols}"
            )
        return Matrix._wrap(self._data @ other._data)

    @property
    def T(self) -> "Matrix":
        return Matrix._wrap(self._data.T.copy())

    def __sub__(self, other: Any) -> "Matrix":
        other = as_matrix(other)
        if self.shape != other.shape:
            raise DimensionMismatch(f"cannot subtract {other.shape} from {self.shape}")
        return Matrix._wrap(self._data - other._data)

    def __mul__(self, scalar: Any) -> "Matrix":
        if isinstance(scalar, Real) and not isinstance(scalar, bool):
            return Matrix._wrap(self._data * float(scalar))
        return NotImplemented

    __rmul__ = __mul__

    def power(self, exponent: int) -> "Matrix":
        if not isinstance(exponent, Integral) or isinstance(exponent, bool):
            raise TypeError(f"exponent must be an integer, got {exponent!r}")
        return Matrix._wrap(np.power(self._data, int(exponent)))

    def sum(self) -> float:
        return float(self._data.sum())

    # ---------- access ----------

    def __getitem__(self, key):
        return self._data[key]

    def __array__(self, dtype=None, copy=None):
        return np.array(self._data, dtype=dtype)

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()

    def ravel(self) -> np.ndarray:
        return self._data.ravel().copy()

    def tolist(self) -> List[float]:
        """Flat list of entries in row-major order (JSON friendly)."""
        return [float(v) for v in self._data.ravel()]

    def __repr__(self) -> str:
        return f"Matrix({self.rows}x{self.cols}, {self._data.tolist()})"


def _freeze(arr: np.ndarray) -> np.ndarray:
    arr = np.ascontiguousarray(arr, dtype=np.float64)
    arr.flags.writeable = False
    return arr


def as_matrix(x: Any) -> Matrix:
    return x if isinstance(x, Matrix) else Matrix(x)


def elementwise_power(vector: Any, exponent: int) -> Matrix:
    """Raise every entry to an integer power; shape is preserved."""
    return as_matrix(vector).power(exponent)


def sum_all(vector: Any) -> float:
    return as_matrix(vector).sum()
