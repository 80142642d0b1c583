"""Square matrices of size 2 to 4, stored in a 4x4 grid."""

from __future__ import annotations

import math
from typing import Iterable, Iterator, Sequence

from .tuples import Tuple, are_equal

_DIM = 4


def _fmt(value: float) -> str:
    return f"{value:g}"


class Matrix:
    """A matrix whose logical size is 2, 3 or 4; unused cells hold zero."""

    def __init__(self, rows: Iterable[Sequence[float]] | None = None, size: int = 4) -> None:
        if size < 2 or size > 4:
            raise ValueError("Matrix size must be 2, 3 or 4.")
        self.size = size
        self._rows = [[0.0] * _DIM for _ in range(_DIM)]
        if rows is not None:
            given = [list(row) for row in rows]
            if len(given) > _DIM or any(len(row) > _DIM for row in given):
                raise ValueError("Matrix rows hold at most four rows of four values.")
            for target, row in zip(self._rows, given):
                target[: len(row)] = [float(v) for v in row]

    def __getitem__(self, i: int) -> list[float]:
        return self._rows[i]

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        for row in self._rows:
            yield tuple(row)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return all(
            are_equal(a, b)
            for row_a, row_b in zip(self._rows, other._rows)
            for a, b in zip(row_a, row_b)
        )

    __hash__ = None  # type: ignore[assignment]

    def __mul__(self, other: object):
        if isinstance(other, Matrix):
            columns = list(zip(*other._rows))
            return Matrix(
                [sum(a * b for a, b in zip(row, col)) for col in columns]
                for row in self._rows
            )
        if isinstance(other, Tuple):
            values = tuple(other)
            return Tuple(*(sum(a * b for a, b in zip(row, values)) for row in self._rows))
        return NotImplemented

    def __str__(self) -> str:
        return "\n".join(
            "(" + ", ".join(_fmt(v) for v in row) + ")" for row in self._rows
        )

    def __repr__(self) -> str:
        return f"Matrix({[list(r) for r in self._rows]!r}, size={self.size})"

    def transpose(self) -> Matrix:
        """Swap rows and columns of the full grid."""
        return Matrix(zip(*self._rows))

    def submatrix(self, row: int, column: int) -> Matrix:
        """Remove one row and one column; the size drops by one."""
        kept = [
            r[:column] + r[column + 1 :] + [0.0]
            for i, r in enumerate(self._rows)
            if i != row
        ]
        kept.append([0.0] * _DIM)
        for r in kept:
            r[_DIM - 1] = 0.0
        return Matrix(kept, max(self.size - 1, 2) if self.size > 2 else 2) if self.size == 2 else Matrix(kept, self.size - 1)

    def determinant(self) -> float:
        if self.size == 2:
            m = self._rows
            return m[0][0] * m[1][1] - m[0][1] * m[1][0]
        return sum(self._rows[0][c] * self.cofactor(0, c) for c in range(self.size))

    def minor(self, row: int, column: int) -> float:
        return self.submatrix(row, column).determinant()

    def cofactor(self, row: int, column: int) -> float:
        minor = self.minor(row, column)
        return -minor if (row + column) % 2 else minor

    def inverse(self) -> Matrix:
        """Return the inverse; a singular matrix is returned unchanged as a copy."""
        det = self.determinant()
        if det == 0:
            return Matrix(self._rows, self.size)
        result = Matrix(size=self.size)
        for row in range(self.size):
            for column in range(self.size):
                result[column][row] = self.cofactor(row, column) / det
        return result

    def set_identity(self) -> Matrix:
        """Turn this matrix into the identity in place."""
        for i, row in enumerate(self._rows):
            row[:] = [1.0 if i == j else 0.0 for j in range(_DIM)]
        return self

    def _apply(self, transform: Matrix) -> Matrix:
        product = transform * self
        self._rows = product._rows
        self.size = product.size
        return self

    def translate(self, x: float, y: float, z: float) -> Matrix:
        return self._apply(translation(x, y, z))

    def scale(self, x: float, y: float, z: float) -> Matrix:
        return self._apply(scaling(x, y, z))

    def rotate_x(self, rad: float) -> Matrix:
        return self._apply(rotation_x(rad))

    def rotate_y(self, rad: float) -> Matrix:
        return self._apply(rotation_y(rad))

    def rotate_z(self, rad: float) -> Matrix:
        return self._apply(rotation_z(rad))

    def shear(self, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
        return self._apply(shearing(xy, xz, yx, yz, zx, zy))


def identity() -> Matrix:
    """A new 4x4 identity matrix."""
    return Matrix().set_identity()


def translation(x: float, y: float, z: float) -> Matrix:
    m = identity()
    m[0][3] = x
    m[1][3] = y
    m[2][3] = z
    return m


def scaling(x: float, y: float, z: float) -> Matrix:
    m = identity()
    m[0][0] = x
    m[1][1] = y
    m[2][2] = z
    return m


def rotation_x(rad: float) -> Matrix:
    m = identity()
    c, s = math.cos(rad), math.sin(rad)
    m[1][1] = c
    m[1][2] = -s
    m[2][1] = s
    m[2][2] = c
    return m


def rotation_y(rad: float) -> Matrix:
    m = identity()
    c, s = math.cos(rad), math.sin(rad)
    m[0][0] = c
    m[0][2] = s
    m[2][0] = -s
    m[2][2] = c
    return m


def rotation_z(rad: float) -> Matrix:
    m = identity()
    c, s = math.cos(rad), math.sin(rad)
    m[0][0] = c
    m[0][1] = -s
    m[1][0] = s
    m[1][1] = c
    return m


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    m = identity()
    m[0][1] = xy
    m[0][2] = xz
    m[1][0] = yx
    m[1][2] = yz
    m[2][0] = zx
    m[2][1] = zy
    return m