"""Dense vectors and column-major matrices of floats."""

from __future__ import annotations

import math
import numbers
from collections.abc import Callable, Iterable, Iterator


class Vector:
    """A mutable sequence of floats with vector-space arithmetic."""

    __slots__ = ("data",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, data: Iterable[float] = ()) -> None:
        self.data = [float(v) for v in data]

    @classmethod
    def zeros(cls, n: int) -> Vector:
        """Return a vector of ``n`` zeros."""
        return cls([0.0] * n)

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[float]:
        return iter(self.data)

    def __getitem__(self, key):
        if isinstance(key, slice):
            return Vector(self.data[key])
        return self.data[key]

    def __setitem__(self, key: int, value: float) -> None:
        self.data[key] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.data == other.data

    def __repr__(self) -> str:
        return f"Vector({self.data!r})"

    def copy(self) -> Vector:
        return Vector(self.data)

    def _check_size(self, other: Vector) -> None:
        if len(self) != len(other):
            raise ValueError(f"size mismatch: {len(self)} != {len(other)}")

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_size(other)
        return Vector(a + b for a, b in zip(self.data, other.data))

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_size(other)
        return Vector(a - b for a, b in zip(self.data, other.data))

    def __neg__(self) -> Vector:
        return Vector(-a for a in self.data)

    def __mul__(self, c: float) -> Vector:
        if not isinstance(c, numbers.Real):
            return NotImplemented
        return Vector(a * c for a in self.data)

    __rmul__ = __mul__

    def __truediv__(self, c: float) -> Vector:
        if not isinstance(c, numbers.Real):
            return NotImplemented
        return Vector(a / c for a in self.data)

    def norm(self) -> float:
        """Euclidean norm."""
        return math.sqrt(sum(a * a for a in self.data))

    def dot(self, other: Vector) -> float:
        """Scalar product with a vector of the same size."""
        self._check_size(other)
        return sum(a * b for a, b in zip(self.data, other.data))

    def map(self, f: Callable[[float], float]) -> Vector:
        """Apply ``f`` to every element."""
        return Vector(f(a) for a in self.data)

    def format(self, label: str = "") -> str:
        """Label followed by each element in general format, space separated."""
        return f"{label} " + "".join(f"{a:g} " for a in self.data)


class Matrix:
    """A matrix stored as a list of column vectors."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: int = 0, cols: int = 0) -> None:
        self.columns = [Vector.zeros(rows) for _ in range(cols)]

    @classmethod
    def from_columns(cls, columns: Iterable[Iterable[float]]) -> Matrix:
        """Build a matrix from column vectors of equal length."""
        m = cls()
        m.columns = [Vector(c) for c in columns]
        if len({len(c) for c in m.columns}) > 1:
            raise ValueError("columns differ in length")
        return m

    @property
    def nrows(self) -> int:
        return len(self.columns[0]) if self.columns else 0

    @property
    def ncols(self) -> int:
        return len(self.columns)

    @property
    def shape(self) -> tuple[int, int]:
        return self.nrows, self.ncols

    def __getitem__(self, key):
        if isinstance(key, tuple):
            i, j = key
            return self.columns[j][i]
        return self.columns[key]

    def __setitem__(self, key, value) -> None:
        if isinstance(key, tuple):
            i, j = key
            self.columns[j][i] = value
            return
        column = Vector(value)
        if self.columns and len(column) != self.nrows:
            raise ValueError("column has the wrong length")
        self.columns[key] = column

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.columns == other.columns

    def __repr__(self) -> str:
        return f"Matrix.from_columns({[c.data for c in self.columns]!r})"

    def set_identity(self) -> None:
        """Turn a square matrix into the identity in place."""
        if self.nrows != self.ncols:
            raise ValueError("non-square matrix")
        for j, column in enumerate(self.columns):
            for i in range(len(column)):
                column[i] = 1.0 if i == j else 0.0

    def transpose(self) -> Matrix:
        n = self.nrows
        return Matrix.from_columns(
            [column[i] for column in self.columns] for i in range(n)
        ) if self.columns else Matrix()

    def copy(self) -> Matrix:
        return Matrix.from_columns(self.columns)

    def format(self, label: str = "") -> str:
        """Label line followed by rows in fixed notation, four decimals."""
        lines = [label]
        for i in range(self.nrows):
            lines.append("".join(f"{column[i]:10.4f}" for column in self.columns))
        return "\n".join(lines)

    def _check_shape(self, other: Matrix) -> None:
        if self.shape != other.shape:
            raise ValueError("size mismatch")

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_shape(other)
        return Matrix.from_columns(a + b for a, b in zip(self.columns, other.columns))

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_shape(other)
        return Matrix.from_columns(a - b for a, b in zip(self.columns, other.columns))

    def __neg__(self) -> Matrix:
        return Matrix.from_columns(-c for c in self.columns)

    def __mul__(self, c: float) -> Matrix:
        if not isinstance(c, numbers.Real):
            return NotImplemented
        return Matrix.from_columns(col * c for col in self.columns)

    __rmul__ = __mul__

    def __truediv__(self, c: float) -> Matrix:
        if not isinstance(c, numbers.Real):
            return NotImplemented
        return Matrix.from_columns(col / c for col in self.columns)

    def __matmul__(self, other):
        if isinstance(other, Vector):
            if len(other) != self.ncols:
                raise ValueError("size mismatch")
            result = Vector.zeros(self.nrows)
            for column, vj in zip(self.columns, other):
                result = result + column * vj
            return result
        if isinstance(other, Matrix):
            if self.ncols != other.nrows:
                raise ValueError("size mismatch")
            return Matrix.from_columns(self @ column for column in other.columns)
        return NotImplemented


def approx(x, y, acc: float = 1e-6, eps: float = 1e-6) -> bool:
    """True if two numbers, or two vectors element-wise, agree within tolerance."""
    if isinstance(x, Vector) and isinstance(y, Vector):
        if len(x) != len(y):
            return False
        return all(approx(a, b, acc, eps) for a, b in zip(x, y))
    diff = abs(x - y)
    if diff < acc:
        return True
    return diff < eps * max(abs(x), abs(y))


def linspace(start: float, stop: float, num: int) -> list[float]:
    """Return ``num`` evenly spaced values from ``start`` to ``stop``."""
    if num == 1:
        return [float(start)]
    step = (stop - start) / (num - 1)
    return [start + i * step for i in range(num)]