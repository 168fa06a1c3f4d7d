"""Quasi-Newton minimisation with finite-difference derivatives."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from numlab.linalg import Matrix, Vector
from numlab.qr import decomp, solve

Objective = Callable[[Vector], float]

_GRADIENT_STEP = 2.0 ** -26
_HESSIAN_STEP = 2.0 ** -13
_MIN_LAMBDA = 1.0 / 1024


def gradient(f: Objective, x: Sequence[float]) -> Vector:
    """Forward-difference gradient of ``f`` at ``x``."""
    x = Vector(x)
    fx = f(x)
    grad = Vector.zeros(len(x))
    for i, xi in enumerate(list(x)):
        step = (1 + abs(xi)) * _GRADIENT_STEP
        x[i] = xi + step
        grad[i] = (f(x) - fx) / step
        x[i] = xi
    return grad


def hessian(f: Objective, x: Sequence[float]) -> Matrix:
    """Hessian of ``f`` at ``x`` by differencing the numerical gradient."""
    x = Vector(x)
    gfx = gradient(f, x)
    columns = []
    for j, xj in enumerate(list(x)):
        step = (1 + abs(xj)) * _HESSIAN_STEP
        x[j] = xj + step
        columns.append((gradient(f, x) - gfx) / step)
        x[j] = xj
    return Matrix.from_columns(columns)


def newton(
    f: Objective,
    x: Sequence[float],
    acc: float = 1e-3,
    maxiter: int = 1000,
    grad: Callable[[Objective, Vector], Sequence[float]] = gradient,
    hess: Callable[[Objective, Vector], Matrix] = hessian,
) -> Vector:
    """Minimise ``f`` from ``x`` by Newton steps with backtracking line search.

    Stops when the gradient norm falls below ``acc`` or after ``maxiter`` steps.
    """
    x = Vector(x)
    for _ in range(maxiter):
        g = Vector(grad(f, x))
        if g.norm() < acc:
            break
        q, r = decomp(hess(f, x))
        step = solve(q, r, -g)
        fx = f(x)
        lam = 1.0
        while lam >= _MIN_LAMBDA:
            if f(x + lam * step) < fx:
                break
            lam /= 2
        x = x + lam * step
    return x