import math

import pytest

from numlab.harmonic import harmonic_sum, main, parallel_harmonic_sum


def test_first_term_is_one():
    assert harmonic_sum(1, 2) == 1.0


def test_empty_range_is_zero():
    assert harmonic_sum(5, 5) == 0.0


def test_sum_is_additive_over_ranges():
    assert harmonic_sum(1, 10) + harmonic_sum(10, 20) == pytest.approx(harmonic_sum(1, 20))


def test_single_worker_matches_serial():
    assert parallel_harmonic_sum(100, 1) == harmonic_sum(1, 101)


def test_split_matches_serial():
    assert parallel_harmonic_sum(1000, 4) == pytest.approx(harmonic_sum(1, 1001))


def test_leftover_terms_are_dropped():
    assert parallel_harmonic_sum(10, 3) == pytest.approx(harmonic_sum(1, 10))
    assert parallel_harmonic_sum(10, 4) == pytest.approx(harmonic_sum(1, 9))


def test_grows_like_logarithm():
    n = 100000
    assert parallel_harmonic_sum(n, 2) - math.log(n) == pytest.approx(0.5772156649, abs=1e-4)


def test_rejects_zero_workers():
    with pytest.raises(ValueError):
        parallel_harmonic_sum(10, 0)


def test_main_reports_total(capsys):
    assert main(["-terms", "1e3", "-threads", "2"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "terms: 1000"
    assert out[1] == "threads: 2"
    assert out[2] == f"total sum={harmonic_sum(1, 1001):g}"