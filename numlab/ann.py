"""A one-layer neural network of Gaussian-wavelet neurons for curve fitting."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterator, Sequence
from pathlib import Path

from numlab.linalg import linspace
from numlab.optimize import newton


def _activation(z: float) -> float:
    return z * math.exp(-z * z)


def _d_activation(z: float) -> float:
    return math.exp(-z * z) * (1 - 2 * z * z)


def _dd_activation(z: float) -> float:
    return math.exp(-z * z) * z * (4 * z * z - 6)


def _anti_activation(z: float) -> float:
    return -0.5 * math.exp(-z * z)


class Network:
    """Hidden neurons ``weight * f((x - center) / width)`` summed into one output."""

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError("a network needs at least one hidden neuron")
        self.n = n
        self.params: list[float] = []
        for i in range(n):
            center = -1.0 + 2.0 * i / (n - 1) if n > 1 else math.nan
            self.params += [center, 1.0, 1.0]

    def _neurons(
        self, params: Sequence[float] | None = None
    ) -> Iterator[tuple[float, float, float]]:
        p = list(self.params if params is None else params)
        return zip(p[0::3], p[1::3], p[2::3])

    def forward(self, x: float) -> float:
        """Network output at ``x``."""
        return sum(weight * _activation((x - c) / w) for c, w, weight in self._neurons())

    def derivative(self, x: float) -> float:
        """First derivative of the output with respect to ``x``."""
        return sum(
            weight * _d_activation((x - c) / w) * (1.0 / w)
            for c, w, weight in self._neurons()
        )

    def second_derivative(self, x: float) -> float:
        """Second derivative of the output with respect to ``x``."""
        return sum(
            weight * _dd_activation((x - c) / w) * (1.0 / (w * w))
            for c, w, weight in self._neurons()
        )

    def antiderivative(self, x: float, x0: float = 0.0) -> float:
        """Integral of the output from ``x0`` to ``x``."""
        return sum(
            weight * w * (_anti_activation((x - c) / w) - _anti_activation((x0 - c) / w))
            for c, w, weight in self._neurons()
        )

    def train(
        self,
        xs: Sequence[float],
        ys: Sequence[float],
        epochs: int = 100,
        lr: float = 0.01,
    ) -> None:
        """Fit the table ``{x, y}`` by gradient descent on the squared error."""
        if len(xs) != len(ys):
            raise ValueError("xs and ys differ in length")
        for _ in range(epochs):
            grad = [0.0] * len(self.params)
            for x, y in zip(xs, ys):
                error = self.forward(x) - y
                for j, (c, w, weight) in enumerate(self._neurons()):
                    z = (x - c) / w
                    dfz = _d_activation(z)
                    grad[3 * j] += 2 * error * weight * dfz * (-1.0 / w)
                    grad[3 * j + 1] += 2 * error * weight * dfz * (-z / w)
                    grad[3 * j + 2] += 2 * error * _activation(z)
            self.params = [p - lr * g for p, g in zip(self.params, grad)]

    def train_numerical(
        self, xs: Sequence[float], ys: Sequence[float], epochs: int = 100
    ) -> None:
        """Fit the table ``{x, y}`` by Newton minimisation with numerical derivatives."""
        if len(xs) != len(ys):
            raise ValueError("xs and ys differ in length")
        table = list(zip(xs, ys))

        def cost(params: Sequence[float]) -> float:
            total = 0.0
            for x, y in table:
                pred = sum(
                    _activation((x - c) / abs(w)) * weight
                    for c, w, weight in self._neurons(params)
                )
                total += (pred - y) ** 2
            return total

        self.params = list(newton(cost, self.params, 0.001, epochs))


def _target(x: float) -> float:
    return math.cos(5 * x - 1) * math.exp(-x * x)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Fit a function with a small network.")
    parser.add_argument("--directory", type=Path, default=Path("."))
    args = parser.parse_args(argv)

    print("----------PART A-----------")
    xs = linspace(-1, 1, 50)
    ys = [_target(x) for x in xs]
    network = Network(10)
    network.train(xs, ys, 1000)

    with open(args.directory / "network.dat", "w") as out:
        for i, x in enumerate(linspace(-1, 1, 200)):
            columns = [
                x,
                network.forward(x),
                network.derivative(x),
                network.second_derivative(x),
                network.antiderivative(x),
                _target(x),
            ]
            if i < len(xs):
                columns += [xs[i], ys[i]]
            out.write(" ".join(f"{v:g}" for v in columns) + "\n")

    print("----------PART B-----------")
    print("----------PART C-----------")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())