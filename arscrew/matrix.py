"""Dense numeric matrices for transforms, and a generic two-dimensional grid."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from numbers import Real
from typing import Any

__all__ = ["Matrix", "Grid", "rotate"]


def _normalize(v: Sequence[float]) -> tuple[float, ...]:
    length = math.sqrt(sum(c * c for c in v))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return tuple(c / length for c in v)


def _cross(a: Sequence[float], b: Sequence[float]) -> tuple[float, float, float]:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


class Matrix:
    """A fixed-size matrix of floats stored row by row."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, nrows: int, ncols: int, values: Iterable[float] | None = None):
        if nrows <= 0 or ncols <= 0:
            raise ValueError("matrix dimensions must be positive")
        self.nrows = nrows
        self.ncols = ncols
        data = [float(v) for v in values] if values is not None else []
        if len(data) > nrows * ncols:
            raise ValueError(
                f"{len(data)} values given for a {nrows}x{ncols} matrix"
            )
        data.extend([0.0] * (nrows * ncols - len(data)))
        self._data = data

    # ----- construction -------------------------------------------------

    @classmethod
    def zero(cls, nrows: int, ncols: int) -> Matrix:
        return cls(nrows, ncols)

    @classmethod
    def identity(cls, n: int) -> Matrix:
        m = cls(n, n)
        for i in range(n):
            m[i, i] = 1.0
        return m

    @classmethod
    def scale(cls, n: int, vector: Sequence[float]) -> Matrix:
        """Diagonal scale matrix; diagonal entries past the vector are 1."""
        if len(vector) > n:
            raise ValueError("scale vector is longer than the matrix dimension")
        m = cls.identity(n)
        for i, v in enumerate(vector):
            m[i, i] = v
        return m

    @classmethod
    def translate(cls, n: int, vector: Sequence[float]) -> Matrix:
        """Homogeneous translation matrix; the vector goes in the last column."""
        if len(vector) >= n:
            raise ValueError("translation vector must be shorter than the matrix dimension")
        m = cls.identity(n)
        for i, v in enumerate(vector):
            m[i, n - 1] = v
        return m

    @classmethod
    def rotation(cls, n: int, axis: Sequence[float], angle: float) -> Matrix:
        """Rotation about ``axis`` by ``angle`` radians, as a 3x3 or 4x4 matrix."""
        if n not in (3, 4):
            raise ValueError("rotation matrices are 3x3 or 4x4")
        if len(axis) != 3:
            raise ValueError("rotation axis must have three components")
        x, y, z = _normalize(axis)
        c = math.cos(angle)
        s = math.sin(angle)
        t = 1.0 - c
        w = cls(3, 3, [0.0, -z, y, z, 0.0, -x, -y, x, 0.0])
        r3 = cls.identity(3) + w * s + (w * w) * t
        if n == 3:
            return r3
        m = cls.identity(4)
        for i in range(3):
            for j in range(3):
                m[i, j] = r3[i, j]
        return m

    @classmethod
    def perspective(
        cls,
        fovy: float,
        screen_width: float,
        screen_height: float,
        znear: float,
        zfar: float,
    ) -> Matrix:
        """Right-handed perspective projection matrix."""
        aspect = screen_width / screen_height
        zdist = znear - zfar
        y = 1.0 / math.tan(fovy * 0.5)
        m = cls(4, 4)
        m[0, 0] = y / aspect
        m[1, 1] = y
        m[2, 2] = (zfar + znear) / zdist
        m[2, 3] = (2.0 * znear * zfar) / zdist
        m[3, 2] = -1.0
        return m

    @classmethod
    def orthogonal(
        cls,
        view_width: float,
        screen_width: float,
        screen_height: float,
        znear: float,
        zfar: float,
    ) -> Matrix:
        """Right-handed orthographic projection; view height follows the aspect ratio."""
        aspect = screen_width / screen_height
        view_height = view_width / aspect
        left = view_width / -2.0
        right = -left
        bottom = view_height / -2.0
        top = -bottom
        m = cls(4, 4)
        m[0, 0] = 2.0 / (right - left)
        m[1, 1] = 2.0 / (top - bottom)
        m[2, 2] = -2.0 / (zfar - znear)
        m[2, 3] = (znear + zfar) / (znear - zfar)
        m[3, 3] = 1.0
        return m

    @classmethod
    def look_at(
        cls,
        eye: Sequence[float],
        at: Sequence[float],
        world_up: Sequence[float],
    ) -> Matrix:
        """Right-handed view matrix looking from ``eye`` towards ``at``."""
        direction = _normalize([a - e for a, e in zip(at, eye)])
        right = _normalize(_cross(world_up, direction))
        up = _cross(direction, right)
        m = cls(4, 4)
        for j in range(3):
            m[0, j] = -right[j]
            m[1, j] = up[j]
            m[2, j] = -direction[j]
        m[3, 3] = 1.0
        return m * cls.translate(4, [-e for e in eye])

    # ----- access -------------------------------------------------------

    @property
    def length(self) -> int:
        return self.nrows * self.ncols

    @property
    def values(self) -> tuple[float, ...]:
        """All entries, row by row."""
        return tuple(self._data)

    def _index(self, key: Any) -> int:
        if isinstance(key, tuple):
            row, col = key
            if not (0 <= row < self.nrows and 0 <= col < self.ncols):
                raise IndexError(f"index ({row}, {col}) out of range")
            return row * self.ncols + col
        return key

    def __getitem__(self, key: Any) -> float:
        return self._data[self._index(key)]

    def __setitem__(self, key: Any, value: float) -> None:
        self._data[self._index(key)] = float(value)

    def __len__(self) -> int:
        return self.length

    # ----- arithmetic ---------------------------------------------------

    def _elementwise(self, other: Any, op) -> Matrix:
        if isinstance(other, Matrix):
            if (self.nrows, self.ncols) != (other.nrows, other.ncols):
                raise ValueError("matrix shapes differ")
            data = [op(a, b) for a, b in zip(self._data, other._data)]
        elif isinstance(other, Real):
            data = [op(a, other) for a in self._data]
        else:
            return NotImplemented
        return Matrix(self.nrows, self.ncols, data)

    def __add__(self, other: Any) -> Matrix:
        return self._elementwise(other, lambda a, b: a + b)

    def __sub__(self, other: Any) -> Matrix:
        return self._elementwise(other, lambda a, b: a - b)

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Matrix):
            if self.ncols != other.nrows:
                raise ValueError(
                    f"cannot multiply {self.nrows}x{self.ncols} by {other.nrows}x{other.ncols}"
                )
            result = Matrix(self.nrows, other.ncols)
            for i in range(self.nrows):
                for k in range(self.ncols):
                    v = self[i, k]
                    for j in range(other.ncols):
                        result[i, j] += v * other[k, j]
            return result
        if isinstance(other, Real):
            return Matrix(self.nrows, self.ncols, [a * other for a in self._data])
        if isinstance(other, Sequence):
            if len(other) != self.ncols:
                raise ValueError("vector length does not match the matrix columns")
            return tuple(
                sum(self[i, j] * other[j] for j in range(self.ncols))
                for i in range(self.nrows)
            )
        return NotImplemented

    def __rmul__(self, other: Any) -> Matrix:
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def __truediv__(self, scalar: float) -> Matrix:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Matrix(self.nrows, self.ncols, [a / scalar for a in self._data])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self.nrows == other.nrows
            and self.ncols == other.ncols
            and self._data == other._data
        )

    def transposed(self) -> Matrix:
        """Return a new matrix with rows and columns swapped."""
        return Matrix(
            self.ncols,
            self.nrows,
            [self[i, j] for j in range(self.ncols) for i in range(self.nrows)],
        )

    def __repr__(self) -> str:
        rows = [
            ", ".join(repr(self[i, j]) for j in range(self.ncols))
            for i in range(self.nrows)
        ]
        return f"Matrix({self.nrows}, {self.ncols}, [{'; '.join(rows)}])"


def rotate(axis: Sequence[float], angle: float, vector: Sequence[float]) -> tuple[float, ...]:
    """Rotate a three-component vector about ``axis`` by ``angle`` radians."""
    if len(vector) != 3 or len(axis) != 3:
        raise ValueError("rotate works on three-component vectors")
    return Matrix.rotation(3, axis, angle) * vector


class Grid:
    """A two-dimensional container of arbitrary values stored row by row.

    With ``bound_check`` the row and column are each validated; without it
    only the flat position must lie inside the storage.
    """

    def __init__(self, nrows: int, ncols: int, bound_check: bool = False):
        if nrows < 0 or ncols < 0:
            raise ValueError("grid dimensions must not be negative")
        self.nrows = nrows
        self.ncols = ncols
        self.bound_check = bound_check
        self._storage: list[Any] = [None] * (nrows * ncols)

    def set_all(self, value: Any) -> None:
        self._storage = [value] * (self.nrows * self.ncols)

    def _index(self, key: tuple[int, int]) -> int:
        row, col = key
        if self.bound_check and not (0 <= row < self.nrows and 0 <= col < self.ncols):
            raise IndexError(f"index ({row}, {col}) out of range")
        index = row * self.ncols + col
        if not 0 <= index < len(self._storage):
            raise IndexError(f"index ({row}, {col}) out of range")
        return index

    def __getitem__(self, key: tuple[int, int]) -> Any:
        return self._storage[self._index(key)]

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        self._storage[self._index(key)] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._storage)

    def __len__(self) -> int:
        return len(self._storage)