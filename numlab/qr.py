"""QR decomposition by Gram-Schmidt orthogonalisation and its uses."""

from __future__ import annotations

import math

from numlab.linalg import Matrix, Vector


def decomp(a: Matrix) -> tuple[Matrix, Matrix]:
    """Factor ``a`` into an orthonormal ``Q`` and an upper triangular ``R``."""
    m = a.ncols
    q = a.copy()
    r = Matrix(m, m)
    for i, column in enumerate(a.columns):
        v = column.copy()
        for j, qj in enumerate(q.columns[:i]):
            rji = v.dot(qj)
            r[j, i] = rji
            v = v - rji * qj
        norm = v.norm()
        r[i, i] = norm
        q[i] = v / norm
    return q, r


def back_substitution(r: Matrix, y: Vector) -> Vector:
    """Solve ``r x = y`` for upper triangular ``r``."""
    n = r.ncols
    x = Vector.zeros(n)
    for i in reversed(range(n)):
        partial = sum(r[i, j] * x[j] for j in range(i + 1, n))
        x[i] = (y[i] - partial) / r[i, i]
    return x


def solve(q: Matrix, r: Matrix, b: Vector) -> Vector:
    """Solve ``Q R x = b``."""
    y = Vector(qi.dot(b) for qi in q.columns)
    return back_substitution(r, y)


def det(r: Matrix) -> float:
    """Determinant of an upper triangular matrix."""
    return math.prod(r[i, i] for i in range(r.nrows))


def inverse(q: Matrix, r: Matrix) -> Matrix:
    """Inverse of ``Q R`` as ``R^-1 Q^T``."""
    def unit(i: int) -> Vector:
        e = Vector.zeros(r.nrows)
        e[i] = 1.0
        return e

    r_inv = Matrix.from_columns(back_substitution(r, unit(i)) for i in range(r.ncols))
    return r_inv @ q.transpose()