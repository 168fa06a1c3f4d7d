"""Newton root finding for systems of equations, with shooting examples."""

from __future__ import annotations

import argparse
import math
from collections.abc import Callable, Sequence
from pathlib import Path

from numlab.linalg import Matrix, Vector, linspace
from numlab.ode import driver
from numlab.qr import decomp, solve

System = Callable[[Vector], Sequence[float]]

_JACOBIAN_STEP = 2.0 ** -26


def jacobian(
    f: System,
    x: Sequence[float],
    fx: Sequence[float] | None = None,
    dx: Sequence[float] | None = None,
) -> Matrix:
    """Forward-difference Jacobian of ``f`` at ``x``.

    ``fx`` is ``f(x)`` if already known; ``dx`` gives the step per coordinate.
    """
    x = Vector(x)
    if dx is None or len(dx) == 0:
        dx = x.map(lambda xi: max(abs(xi), 1.0) * _JACOBIAN_STEP)
    else:
        dx = Vector(dx)
    fx = Vector(f(x)) if fx is None or len(fx) == 0 else Vector(fx)
    columns = []
    for j, (xj, step) in enumerate(zip(list(x), dx)):
        x[j] = xj + step
        columns.append((Vector(f(x)) - fx) / step)
        x[j] = xj
    return Matrix.from_columns(columns)


def newton(
    f: System,
    start: Sequence[float],
    acc: float = 1e-2,
    dx: Sequence[float] | None = None,
    lambmin: float = 0.01,
) -> Vector:
    """Find ``x`` with ``|f(x)| < acc`` by Newton steps and halving line search."""
    x = Vector(start)
    fx = Vector(f(x))
    while not fx.norm() < acc:
        q, r = decomp(jacobian(f, x, fx, dx))
        step = solve(q, r, -fx)
        lam = 1.0
        while True:
            z = x + lam * step
            fz = Vector(f(z))
            if fz.norm() < (1 - lam / 2) * fx.norm() or lam < lambmin:
                break
            lam /= 2
        x, fx = z, fz
    return x


def newton_interp(
    f: System,
    start: Sequence[float],
    acc: float = 1e-2,
    dx: Sequence[float] | None = None,
    lambmin: float = 1.0 / 128,
) -> Vector:
    """Newton's method with a quadratic-interpolation line search."""
    x = Vector(start)
    fx = Vector(f(x))
    while not fx.norm() < acc:
        q, r = decomp(jacobian(f, x, fx, dx))
        step = solve(q, r, -fx)
        phi0 = 0.5 * fx.norm() ** 2
        dphi0 = -fx.norm() ** 2

        lam = 1.0
        fz = Vector(f(x + step))
        while True:
            phi = 0.5 * fz.norm() ** 2
            if phi < phi0 * (1.0 - lam / 2.0) or lam <= lambmin:
                break
            c = (phi - phi0 - dphi0 * lam) / (lam * lam)
            try:
                lam_new = -dphi0 / (2.0 * c)
            except ZeroDivisionError:
                lam_new = math.inf
            lam = max(lambmin, min(0.9 * lam, lam_new))
            fz = Vector(f(x + lam * step))
        x = x + lam * step
        fx = fz
    return x


def rosenbrock_gradient(v: Sequence[float]) -> Vector:
    """Gradient of the Rosenbrock function (1-x)^2 + 100 (y-x^2)^2."""
    x, y = v[0], v[1]
    gx = -2 * (1 - x) + 200 * (y - x * x) * (-2 * x)
    gy = 200 * (y - x * x)
    return Vector([gx, gy])


def himmelblau_gradient(v: Sequence[float]) -> Vector:
    """Gradient of Himmelblau's function (x^2+y-11)^2 + (x+y^2-7)^2."""
    x, y = v[0], v[1]
    gx = 4 * x * (x * x + y - 11) + 2 * (x + y * y - 7)
    gy = 2 * (x * x + y - 11) + 4 * y * (x + y * y - 7)
    return Vector([gx, gy])


def _radial_solution(e: float, rmin: float, rmax: float) -> tuple[list[float], list[Vector]]:
    def wave(r: float, f: Vector) -> Vector:
        return Vector([f[1], -2.0 * (e * f[0] + 1 / r * f[0])])

    return driver(wave, (rmin, rmax), Vector([rmin - rmin * rmin, 1.0 - 2.0 * rmin]))


def hydrogen_shooting(
    energy: Sequence[float], rmin: float = 0.01, rmax: float = 8.0
) -> Vector:
    """Radial s-wave of hydrogen at ``energy[0]``; returns ``[f(rmax)]``."""
    _, fs = _radial_solution(float(energy[0]), rmin, rmax)
    return Vector([fs[-1][0]])


def _write_wave(path: Path, e: float, rmin: float = 0.01, rmax: float = 8.0) -> None:
    rs, fs = _radial_solution(e, rmin, rmax)
    grid = linspace(0, rmax, len(rs))
    with open(path, "w") as out:
        for r, f, rg in zip(rs, fs, grid):
            out.write(f"{r:g} {f[0]:g} {rg * math.exp(-rg):g}\n")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Newton root finding examples.")
    parser.add_argument("--directory", type=Path, default=Path("."))
    args = parser.parse_args(argv)

    print("-----------PART A-------------")
    roots_rosen = newton(rosenbrock_gradient, Vector([-3.0, -4.0]))
    print("df(x)=0 for rosenbrock at x= " + roots_rosen.format(" "))
    print("Analytical result = (1, 1)")

    roots_himmel = newton(himmelblau_gradient, Vector([-0.5, -1.0]))
    print("f(x)=0 for himmelblau at x= " + roots_himmel.format(" "))
    print("Analytical result = (-0.270845, -0.923039)")

    print("---------PART B------------")
    start_wave = Vector([-0.9])
    roots_wave = newton(hydrogen_shooting, start_wave)
    print(roots_wave.format("E="))
    print("Exact result: E=-1/2")

    print("---------PART C------------")
    roots_wave_new = newton_interp(hydrogen_shooting, start_wave)
    print("Results with Quadratic Interpolation line-search")
    print(roots_wave_new.format("E="))
    print("Exact result: E=-1/2")

    _write_wave(args.directory / "wave.dat", roots_wave_new[0])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())