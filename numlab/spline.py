"""Linear, quadratic and cubic spline interpolation of tabulated data."""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence
from itertools import pairwise
from pathlib import Path

from numlab.linalg import linspace


def binsearch(x: Sequence[float], z: float) -> int:
    """Index ``i`` of the interval ``[x[i], x[i+1]]`` holding ``z``, by bisection."""
    if z < x[0] or z > x[-1]:
        raise ValueError(f"{z} lies outside [{x[0]}, {x[-1]}]")
    i, j = 0, len(x) - 1
    while j - i > 1:
        mid = (i + j) // 2
        if z > x[mid]:
            i = mid
        else:
            j = mid
    return i


def _table(x: Sequence[float], y: Sequence[float]) -> tuple[list[float], list[float]]:
    xs = [float(v) for v in x]
    ys = [float(v) for v in y]
    if len(xs) != len(ys):
        raise ValueError("x and y differ in length")
    if len(xs) < 2:
        raise ValueError("a spline needs at least two points")
    return xs, ys


def _slopes(x: list[float], y: list[float]) -> tuple[list[float], list[float]]:
    h = [b - a for a, b in pairwise(x)]
    p = [(y1 - y0) / hi for (y0, y1), hi in zip(pairwise(y), h)]
    return h, p


class LinearSpline:
    """Piecewise linear interpolant."""

    def __init__(self, x: Sequence[float], y: Sequence[float]) -> None:
        self.x, self.y = _table(x, y)

    def evaluate(self, z: float) -> float:
        i = binsearch(self.x, z)
        dx = self.x[i + 1] - self.x[i]
        if not dx > 0:
            raise ValueError("abscissae must be strictly increasing")
        dy = self.y[i + 1] - self.y[i]
        return self.y[i] + dy / dx * (z - self.x[i])

    def integrate(self, z: float) -> float:
        """Integral from ``x[0]`` to ``z`` by the trapezoidal rule."""
        i = binsearch(self.x, z)
        total = sum(
            (x1 - x0) * (y0 + y1) / 2.0
            for (x0, x1), (y0, y1) in zip(pairwise(self.x[: i + 1]), pairwise(self.y[: i + 1]))
        )
        return total + (z - self.x[i]) * (self.y[i] + self.evaluate(z)) / 2.0


class QuadraticSpline:
    """Quadratic spline from averaged forward and backward recursions."""

    def __init__(self, x: Sequence[float], y: Sequence[float]) -> None:
        self.x, self.y = _table(x, y)
        n = len(self.x)
        h, p = _slopes(self.x, self.y)

        forward = [0.0] * (n - 1)
        for i in range(n - 2):
            forward[i + 1] = (p[i + 1] - p[i] + forward[i] * h[i]) / h[i + 1]
        backward = [0.0] * (n - 1)
        for i in reversed(range(n - 2)):
            backward[i] = (p[i] - p[i + 1] + backward[i + 1] * h[i + 1]) / h[i]

        self.c = [(a + b) / 2.0 for a, b in zip(forward, backward)]
        self.b = [pi - ci * hi for pi, ci, hi in zip(p, self.c, h)]

    def _piece(self, i: int, dx: float) -> float:
        return self.y[i] * dx + self.b[i] * dx * dx / 2.0 + self.c[i] * dx ** 3 / 3.0

    def evaluate(self, z: float) -> float:
        i = binsearch(self.x, z)
        dx = z - self.x[i]
        return self.y[i] + self.b[i] * dx + self.c[i] * dx * dx

    def derivative(self, z: float) -> float:
        i = binsearch(self.x, z)
        dx = z - self.x[i]
        return self.b[i] + 2 * self.c[i] * dx

    def integrate(self, z: float) -> float:
        """Integral from ``x[0]`` to ``z``."""
        i = binsearch(self.x, z)
        total = sum(self._piece(k, self.x[k + 1] - self.x[k]) for k in range(i))
        return total + self._piece(i, z - self.x[i])


class CubicSpline:
    """Cubic spline with zero second derivative at the ends."""

    def __init__(self, x: Sequence[float], y: Sequence[float]) -> None:
        self.x, self.y = _table(x, y)
        n = len(self.x)
        h, p = _slopes(self.x, self.y)

        diag = [2.0] + [2 * h[i] / h[i + 1] + 2 for i in range(n - 2)] + [2.0]
        upper = [1.0] + [h[i] / h[i + 1] for i in range(n - 2)]
        rhs = (
            [3 * p[0]]
            + [3 * (p[i] + p[i + 1] * h[i] / h[i + 1]) for i in range(n - 2)]
            + [3 * p[-1]]
        )

        for i in range(1, n):
            diag[i] -= upper[i - 1] / diag[i - 1]
            rhs[i] -= rhs[i - 1] / diag[i - 1]

        b = [0.0] * n
        b[-1] = rhs[-1] / diag[-1]
        for i in reversed(range(n - 1)):
            b[i] = (rhs[i] - upper[i] * b[i + 1]) / diag[i]

        self.b = b
        self.c = [(-2 * b[i] - b[i + 1] + 3 * p[i]) / h[i] for i in range(n - 1)]
        self.d = [(b[i] + b[i + 1] - 2 * p[i]) / h[i] / h[i] for i in range(n - 1)]

    def _piece(self, i: int, dx: float) -> float:
        return dx * (self.y[i] + dx * (self.b[i] / 2.0 + dx * (self.c[i] / 3.0 + dx * self.d[i] / 4.0)))

    def evaluate(self, z: float) -> float:
        i = binsearch(self.x, z)
        dx = z - self.x[i]
        return self.y[i] + dx * (self.b[i] + dx * (self.c[i] + dx * self.d[i]))

    def derivative(self, z: float) -> float:
        i = binsearch(self.x, z)
        dx = z - self.x[i]
        return self.b[i] + dx * (2 * self.c[i] + dx * 3 * self.d[i])

    def integrate(self, z: float) -> float:
        """Integral from ``x[0]`` to ``z``."""
        i = binsearch(self.x, z)
        total = sum(self._piece(k, self.x[k + 1] - self.x[k]) for k in range(i))
        return total + self._piece(i, z - self.x[i])


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Spline interpolation of cos(x).")
    parser.add_argument("--directory", type=Path, default=Path("."))
    args = parser.parse_args(argv)
    directory: Path = args.directory

    xs = [float(k) for k in range(10)]
    ys = [math.cos(x) for x in xs]
    with open(directory / "tabulated.dat", "w") as out:
        for x, y in zip(xs, ys):
            out.write(f"{x:g} {y:g}\n")

    zs = linspace(xs[0], xs[-1], 100)

    linear = LinearSpline(xs, ys)
    with open(directory / "lspline.dat", "w") as out:
        for z in zs:
            out.write(f"{z:g} {linear.evaluate(z):g} {linear.integrate(z):g}\n")

    for name, spline, echo in (
        ("qspline.dat", QuadraticSpline(xs, ys), False),
        ("cspline.dat", CubicSpline(xs, ys), True),
    ):
        with open(directory / name, "w") as out:
            for z in zs:
                if echo:
                    print(f"{z:g}")
                out.write(
                    f"{z:g} {spline.evaluate(z):g} {spline.integrate(z):g} "
                    f"{spline.derivative(z):g}\n"
                )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())