import math

import pytest

from numlab.ann import Network, main
from numlab.linalg import linspace


def _cost(net, xs, ys):
    return sum((net.forward(x) - y) ** 2 for x, y in zip(xs, ys))


def test_initial_parameters_spread_centres():
    net = Network(3)
    assert net.params == [-1.0, 1.0, 1.0, 0.0, 1.0, 1.0, 1.0, 1.0, 1.0]


def test_rejects_empty_network():
    with pytest.raises(ValueError):
        Network(0)


def test_default_network_is_odd():
    net = Network(3)
    assert net.forward(0.0) == pytest.approx(0.0, abs=1e-15)
    for x in (0.3, 0.7, 1.4):
        assert net.forward(-x) == pytest.approx(-net.forward(x))


def test_derivative_matches_finite_difference():
    net = Network(4)
    net.params[1] = 0.7
    h = 1e-6
    for x in (-0.8, 0.1, 0.9):
        numeric = (net.forward(x + h) - net.forward(x - h)) / (2 * h)
        assert net.derivative(x) == pytest.approx(numeric, rel=1e-6, abs=1e-8)


def test_second_derivative_matches_finite_difference():
    net = Network(4)
    net.params[4] = 1.3
    h = 1e-5
    for x in (-0.5, 0.2, 0.6):
        numeric = (net.derivative(x + h) - net.derivative(x - h)) / (2 * h)
        assert net.second_derivative(x) == pytest.approx(numeric, rel=1e-5, abs=1e-7)


def test_antiderivative_is_integral_of_output():
    net = Network(3)
    net.params[2] = 2.0
    h = 1e-6
    assert net.antiderivative(0.4, 0.4) == 0.0
    for x in (-0.6, 0.3):
        numeric = (net.antiderivative(x + h) - net.antiderivative(x - h)) / (2 * h)
        assert numeric == pytest.approx(net.forward(x), rel=1e-6, abs=1e-8)


def test_train_leaves_exact_fit_unchanged():
    net = Network(3)
    xs = linspace(-1, 1, 10)
    ys = [net.forward(x) for x in xs]
    before = list(net.params)
    net.train(xs, ys, 10)
    assert net.params == before


def test_train_reduces_cost():
    net = Network(5)
    xs = linspace(-1, 1, 20)
    ys = [math.sin(3 * x) for x in xs]
    before = _cost(net, xs, ys)
    net.train(xs, ys, epochs=100, lr=0.001)
    assert _cost(net, xs, ys) < before


def test_train_rejects_mismatched_table():
    with pytest.raises(ValueError):
        Network(2).train([0.0, 1.0], [0.0])


def test_train_numerical_stops_at_optimum():
    net = Network(2)
    xs = linspace(-1, 1, 5)
    ys = [net.forward(x) for x in xs]
    before = list(net.params)
    net.train_numerical(xs, ys, epochs=5)
    assert net.params == before


def test_train_numerical_with_no_epochs():
    net = Network(2)
    before = list(net.params)
    net.train_numerical([0.0, 0.5], [1.0, -1.0], epochs=0)
    assert net.params == before


def test_main_writes_network_table(tmp_path, capsys):
    assert main(["--directory", str(tmp_path)]) == 0
    lines = (tmp_path / "network.dat").read_text().splitlines()
    assert len(lines) == 200
    assert all(len(line.split()) == 8 for line in lines[:50])
    assert all(len(line.split()) == 6 for line in lines[50:])
    assert "PART A" in capsys.readouterr().out