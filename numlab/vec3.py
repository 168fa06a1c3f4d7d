"""Three-component vectors over real, integer or complex scalars."""

from __future__ import annotations

import argparse
import cmath
import math
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from numlab.epsilon import approx as _approx


def _format_scalar(v: Any) -> str:
    if isinstance(v, complex):
        return f"({v.real:g},{v.imag:g})"
    if isinstance(v, int):
        return str(v)
    return f"{v:g}"


def _divide(a: Any, c: Any) -> Any:
    if isinstance(a, int) and isinstance(c, int):
        q = abs(a) // abs(c)
        return q if (a < 0) == (c < 0) else -q
    return a / c


@dataclass(frozen=True)
class Vec3:
    """A vector ``(x, y, z)``; integer vectors keep integer arithmetic."""

    x: Any = 0
    y: Any = 0
    z: Any = 0

    def __iter__(self) -> Iterator[Any]:
        return iter((self.x, self.y, self.z))

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, c: Any) -> Vec3:
        if isinstance(c, Vec3):
            return NotImplemented
        return Vec3(self.x * c, self.y * c, self.z * c)

    def __rmul__(self, c: Any) -> Vec3:
        if isinstance(c, Vec3):
            return NotImplemented
        return Vec3(c * self.x, c * self.y, c * self.z)

    def __truediv__(self, c: Any) -> Vec3:
        if isinstance(c, Vec3):
            return NotImplemented
        return Vec3(*(_divide(a, c) for a in self))

    def __str__(self) -> str:
        return "{ " + ", ".join(_format_scalar(a) for a in self) + " } "

    def norm(self) -> Any:
        """Square root of ``x*x + y*y + z*z`` (no conjugation for complex)."""
        s = self.dot(self)
        return cmath.sqrt(s) if isinstance(s, complex) else math.sqrt(s)

    def dot(self, other: Vec3) -> Any:
        """Bilinear product ``x*b.x + y*b.y + z*b.z``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def approx(self, other: Vec3) -> bool:
        """True if every component agrees within 1e-9 absolute or relative."""
        return all(_approx(a, b) for a, b in zip(self, other))

    def format(self, label: str = "") -> str:
        """Label followed by the three components, space separated."""
        return label + " ".join(_format_scalar(a) for a in self)


def demo(label: str, kind: Callable[[int], Any] = float) -> str:
    """Text exercising every operation for vectors of scalar type ``kind``."""
    v = Vec3(kind(1), kind(2), kind(3))
    w = Vec3(kind(5), kind(-5), kind(15))
    lines = [
        f"-----------{label}--------------",
        "----Print vector----",
        v.format("v = "),
        w.format("w = "),
        f"<< : {v}",
        f"<< : {w}",
        "----Add----",
        (v + w).format("v + w = "),
        "----Subtract----",
        (v - w).format("v - w = "),
        "----Multiply----",
        (kind(2) * v).format("2 * v = "),
        "----Norm----",
        f"norm = {_format_scalar(v.norm())}",
        "----Cross-product----",
        v.cross(w).format("v x w = "),
        "----Dot-product----",
        f"v * w = {_format_scalar(v.dot(w))}",
        "",
    ]
    return "\n".join(lines) + "\n"


def _basic_demo() -> str:
    v = Vec3(1.0, 2.0, 3.0)
    w = Vec3(0.5, -0.5, 1.5)
    lines = [
        "----Print vector----",
        v.format("v = "),
        w.format("w = "),
        f"Overloaded <<:{v}",
        f"Overloaded <<:{w}",
        "----Add----",
        (v + w).format("v + w = "),
        "----subtract----",
        (v - w).format("v - w = "),
        "----multiply----",
        (2 * v).format("2 * v = "),
        "----norm----",
        f"norm = {v.norm():g}",
        "----cross-product----",
        v.cross(w).format("v x w = "),
        "----dot-product----",
        f"v * w = {v.dot(w):g}",
    ]
    return "\n".join(lines)


def main(argv=None) -> int:
    argparse.ArgumentParser(description="Exercise three-component vectors.").parse_args(argv)
    print(_basic_demo())
    for label, kind in (
        ("Double vector", float),
        ("Int vector", int),
        ("Complex vector", complex),
    ):
        print(demo(label, kind), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())