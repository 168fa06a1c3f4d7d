"""Adaptive Runge-Kutta integration of ordinary differential equations."""

from __future__ import annotations

import argparse
import math
from collections.abc import Callable, Sequence
from pathlib import Path

from numlab.linalg import Vector

Rhs = Callable[[float, Vector], Sequence[float]]

_ORBIT_CASES = ((0.0, 0.0), (0.0, -0.5), (0.01, -0.5))


def rkstep12(f: Rhs, x: float, y: Vector, h: float) -> tuple[Vector, Vector]:
    """One midpoint step with an Euler-embedded error estimate."""
    y = Vector(y)
    k0 = Vector(f(x, y))
    k1 = Vector(f(x + h / 2, y + k0 * (h / 2)))
    return y + k1 * h, (k1 - k0) * h


def driver(
    f: Rhs,
    interval: tuple[float, float],
    yinit: Sequence[float],
    h: float = 0.125,
    acc: float = 0.01,
    eps: float = 0.01,
) -> tuple[list[float], list[Vector]]:
    """Integrate ``dy/dx = f(x, y)`` over ``interval`` with adaptive steps."""
    a, b = interval
    x = a
    y = Vector(yinit)
    xs = [x]
    ys = [y]
    while x < b:
        if x + h > b:
            h = b - x
        yh, dy = rkstep12(f, x, y, h)
        tol = (acc + eps * yh.norm()) * math.sqrt(h / (b - a))
        err = dy.norm()
        if err <= tol:
            x += h
            y = yh
            xs.append(x)
            ys.append(y)
        h *= min((tol / err) ** 0.25 * 0.95, 2.0) if err > 0 else 2.0
    return xs, ys


def pendulum(x: float, y: Vector) -> Vector:
    """Damped pendulum: theta'' = -0.25 theta' - 5 sin(theta)."""
    damping, strength = 0.25, 5.0
    return Vector([y[1], -damping * y[1] - strength * math.sin(y[0])])


def orbit_equation(eps: float) -> Rhs:
    """Relativistic orbit equation u'' = 1 - u + eps u^2."""
    def rhs(phi: float, y: Vector) -> Vector:
        return Vector([y[1], 1 - y[0] + eps * y[0] * y[0]])

    return rhs


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Integrate pendulum and orbit equations.")
    parser.add_argument("--directory", type=Path, default=Path("."))
    args = parser.parse_args(argv)
    directory: Path = args.directory

    print("--------------PART A---------------")
    xs, ys = driver(pendulum, (0.0, 10.0), Vector([math.pi - 0.1, 0.0]))
    with open(directory / "ode_result.dat", "w") as out:
        for x, y in zip(xs, ys):
            out.write(f"{x:g} {y[0]:g} {y[1]:g}\n")

    print("-----------PART B-------------")
    with open(directory / "orbits.dat", "w") as out:
        for eps, uprime in _ORBIT_CASES:
            phis, us = driver(
                orbit_equation(eps), (0.0, 8 * math.pi), Vector([1.0, uprime]),
                0.01, 1e-2, 1e-2,
            )
            out.write(f"# eps={eps:g} uprime={uprime:g}\n")
            for phi, u in zip(phis, us):
                out.write(f"{phi:g} {u[0]:g} {u[1]:g}\n")
            out.write("\n\n")

    print("------------PART C--------------")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())