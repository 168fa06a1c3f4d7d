import math

import pytest

from numlab.linalg import Matrix, Vector
from numlab.optimize import gradient, hessian, newton


def quadratic(v):
    return v[0] ** 2 + 3 * v[1] ** 2


def test_gradient_matches_analytic_derivative():
    x = Vector([1.5, -2.0])
    g = gradient(quadratic, x)
    assert list(g) == pytest.approx([2 * x[0], 6 * x[1]], abs=1e-5)


def test_gradient_leaves_argument_unchanged():
    x = Vector([0.25, 4.0])
    gradient(quadratic, x)
    assert x == Vector([0.25, 4.0])


def test_hessian_of_quadratic_is_constant():
    h = hessian(quadratic, [0.3, -0.7])
    assert h.shape == (2, 2)
    assert h[0, 0] == pytest.approx(2.0, abs=1e-3)
    assert h[1, 1] == pytest.approx(6.0, abs=1e-3)
    assert h[0, 1] == pytest.approx(0.0, abs=1e-3)
    assert h[1, 0] == pytest.approx(0.0, abs=1e-3)


def test_newton_finds_minimum_of_shifted_quadratic():
    def f(v):
        return (v[0] - 1.0) ** 2 + 2 * (v[1] + 2.0) ** 2

    result = newton(f, [5.0, 5.0], acc=1e-5)
    assert list(result) == pytest.approx([1.0, -2.0], abs=1e-3)


def test_newton_on_non_quadratic_convex_function():
    def f(v):
        return math.exp(v[0] - 1.0) - v[0] + (v[1] - 0.5) ** 2

    result = newton(f, [3.0, -1.0], acc=1e-6)
    assert list(result) == pytest.approx([1.0, 0.5], abs=1e-3)
    assert gradient(f, result).norm() < 1e-3


def test_newton_with_zero_iterations_returns_start():
    start = Vector([2.0, 3.0])
    assert newton(quadratic, start, maxiter=0) == start


def test_newton_does_not_mutate_start():
    start = Vector([2.0, 3.0])
    newton(quadratic, start)
    assert start == Vector([2.0, 3.0])


def test_newton_uses_supplied_derivatives():
    calls = {"grad": 0, "hess": 0}

    def grad(f, x):
        calls["grad"] += 1
        return Vector([2 * x[0], 6 * x[1]])

    def hess(f, x):
        calls["hess"] += 1
        return Matrix.from_columns([[2.0, 0.0], [0.0, 6.0]])

    result = newton(quadratic, [4.0, -3.0], acc=1e-9, grad=grad, hess=hess)
    assert list(result) == pytest.approx([0.0, 0.0], abs=1e-9)
    assert calls["grad"] >= 2
    assert calls["hess"] >= 1