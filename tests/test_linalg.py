import pytest

from numlab.linalg import Matrix, Vector, approx, linspace


def _mat_approx(a, b, tol=1e-12):
    return a.shape == b.shape and all(
        approx(ca, cb, tol, tol) for ca, cb in zip(a.columns, b.columns)
    )


A = Vector([1.5, -2.0, 3.0])
B = Vector([0.25, 4.0, -1.0])


def test_add_sub_roundtrip():
    assert approx((A + B) - B, A)


def test_scalar_multiplication():
    assert 2 * A == A + A
    assert approx(A * 3 / 3, A)
    assert -A + A == Vector.zeros(3)


def test_norm_matches_dot():
    assert approx(A.norm() ** 2, A.dot(A))


def test_map():
    assert A.map(lambda v: -v) == -A


def test_dot_size_mismatch():
    with pytest.raises(ValueError):
        A.dot(Vector([1.0]))


def test_add_size_mismatch():
    with pytest.raises(ValueError):
        A + Vector([1.0])


def test_vector_format():
    assert Vector([1.0, 2.5]).format("v") == "v 1 2.5 "


def _sample_matrix():
    return Matrix.from_columns([[1.0, 2.0], [3.0, -4.0], [0.5, 6.0]])


def test_transpose_twice_is_identity_operation():
    m = _sample_matrix()
    t = m.transpose()
    assert t.shape == (3, 2)
    assert t.transpose() == m
    assert t[2, 1] == m[1, 2]


def test_identity_product():
    m = _sample_matrix()
    eye = Matrix(3, 3)
    eye.set_identity()
    assert _mat_approx(m @ eye, m)


def test_set_identity_non_square():
    with pytest.raises(ValueError):
        Matrix(2, 3).set_identity()


def test_matmul_size_mismatch():
    with pytest.raises(ValueError):
        _sample_matrix() @ _sample_matrix()


def test_matrix_vector_picks_columns():
    m = _sample_matrix()
    for j in range(m.ncols):
        e = Vector.zeros(m.ncols)
        e[j] = 1.0
        assert m @ e == m[j]


def test_matrix_add_sub_and_scale():
    m = _sample_matrix()
    n = m.transpose().transpose() * 2
    assert _mat_approx((m + n) - n, m)
    assert _mat_approx(n / 2, m)


def test_copy_is_independent():
    m = _sample_matrix()
    c = m.copy()
    c[0, 0] = 100.0
    assert m[0, 0] != c[0, 0]
    assert c[0, 0] == 100.0


def test_from_columns_ragged():
    with pytest.raises(ValueError):
        Matrix.from_columns([[1.0, 2.0], [3.0]])


def test_matrix_format_layout():
    text = _sample_matrix().format("M")
    lines = text.split("\n")
    assert lines[0] == "M"
    assert len(lines) == 3
    assert all(len(line) == 30 for line in lines[1:])


def test_approx_scalars():
    assert approx(1.0, 1.0 + 1e-7)
    assert approx(1e9, 1e9 + 1)
    assert not approx(1.0, 1.1)


def test_approx_vector_size_mismatch():
    assert not approx(Vector([1.0]), Vector([1.0, 2.0]))


def test_linspace():
    xs = linspace(-1.0, 1.0, 50)
    assert len(xs) == 50
    assert xs[0] == -1.0
    assert approx(xs[-1], 1.0)
    steps = [b - a for a, b in zip(xs, xs[1:])]
    assert all(approx(s, steps[0]) for s in steps)


def test_linspace_single():
    assert linspace(3.0, 7.0, 1) == [3.0]