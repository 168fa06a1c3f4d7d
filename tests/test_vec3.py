import math

import pytest

from numlab.vec3 import Vec3, demo, main


def test_add_sub_round_trip():
    v = Vec3(1, 2, 3)
    w = Vec3(5, -5, 15)
    assert (v + w) - w == v


def test_scalar_multiplication_commutes():
    v = Vec3(1.0, 2.0, 3.0)
    assert 2.0 * v == v * 2.0
    assert (2.0 * v) / 2.0 == v


def test_cross_of_unit_vectors():
    assert Vec3(1, 0, 0).cross(Vec3(0, 1, 0)) == Vec3(0, 0, 1)


def test_cross_is_orthogonal_and_antisymmetric():
    v = Vec3(1, 2, 3)
    w = Vec3(5, -5, 15)
    c = v.cross(w)
    assert c.dot(v) == 0
    assert c.dot(w) == 0
    assert w.cross(v) == -c


def test_norm_squared_is_dot():
    v = Vec3(0.5, -0.5, 1.5)
    assert v.norm() ** 2 == pytest.approx(v.dot(v))


def test_int_norm_is_float():
    assert Vec3(1, 2, 3).norm() == pytest.approx(math.sqrt(Vec3(1, 2, 3).dot(Vec3(1, 2, 3))))


def test_complex_dot_has_no_conjugation():
    assert Vec3(1j, 0, 0).dot(Vec3(1j, 0, 0)) == -1


def test_int_division_truncates_toward_zero():
    assert Vec3(-7, 7, 6) / 2 == Vec3(-3, 3, 3)


def test_approx():
    v = Vec3(0.1 * 3, 1.0, 2.0)
    assert v.approx(Vec3(0.3, 1.0, 2.0))
    assert not v.approx(Vec3(0.3, 1.0, 2.1))


def test_format_and_str():
    v = Vec3(1, 2, 3)
    assert v.format("v = ") == "v = 1 2 3"
    assert str(v) == "{ 1, 2, 3 } "


def test_demo_lists_each_operation():
    text = demo("Int vector", int)
    assert text.startswith("-----------Int vector--------------\n")
    assert "v = 1 2 3" in text
    assert "<< : { 1, 2, 3 } " in text
    assert "v x w = " in text


def test_main_prints_all_demos(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Double vector" in out
    assert "Complex vector" in out